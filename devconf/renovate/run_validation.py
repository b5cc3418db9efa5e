from __future__ import annotations

import argparse
from typing import List, Optional

from ..result_displayer import ResultDisplayer
from .checks import SECTION_TITLES
from .loader import ConfigNotFoundError, ConfigParseError, RuleSetError, load_rule_set
from .report import ValidationReport
from .rules import DEFAULT_SETTINGS, ValidatorSettings
from .validator import validate


NEXT_STEPS = [
    "Install Renovate app on your GitHub repository",
    "Monitor the dependency dashboard issue",
    "Review and merge dependency update PRs",
]


def add_arguments(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    parser.add_argument(
        "--rules",
        metavar="FILE",
        help=(
            "YAML rule set overriding the candidate paths, required fields "
            "and recommended extends. Built-in defaults are used if omitted."
        ),
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 when a required field is missing.",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Do not colorize the report.",
    )
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Validate the Renovate configuration of the current repository.",
    )
    add_arguments(parser)
    return parser.parse_args(argv)


def display_report(report: ValidationReport, displayer: ResultDisplayer) -> None:
    displayer.display_sections(report.results, SECTION_TITLES)

    summary = report.summary
    displayer.line("\n📊 Configuration Summary:")
    displayer.line(f"   Config file: {summary.config_file}")
    displayer.line(f"   Total extends: {summary.extends_count}")
    displayer.line(f"   Package rules: {summary.package_rules_count}")
    displayer.line(f"   Timezone: {summary.timezone}")
    dashboard = "Enabled" if summary.dependency_dashboard else "Disabled"
    displayer.line(f"   Dependency dashboard: {dashboard}")


def run(
    settings: ValidatorSettings = DEFAULT_SETTINGS,
    base_dir: Optional[str] = None,
    strict: bool = False,
    displayer: Optional[ResultDisplayer] = None,
) -> int:
    displayer = displayer or ResultDisplayer()
    displayer.line("🔍 Validating Renovate configuration...\n")

    try:
        report = validate(settings, base_dir)
    except ConfigParseError as e:
        displayer.error(f"❌ {e}")
        return 1
    except ConfigNotFoundError as e:
        displayer.error("❌ No Renovate configuration file found")
        displayer.error(f"   Expected one of: {', '.join(e.candidates)}")
        return 1

    displayer.line(f"✅ Found and parsed config: {report.candidate}")
    display_report(report, displayer)

    if strict and report.failures:
        missing = ", ".join(r.key for r in report.failures)
        displayer.error(f"\n❌ Renovate configuration is missing required fields: {missing}")
        return 1

    displayer.line("\n✅ Renovate configuration validation completed!")
    displayer.line("\n💡 Next steps:")
    for number, step in enumerate(NEXT_STEPS, start=1):
        displayer.line(f"   {number}. {step}")
    return 0


def run_from_args(args: argparse.Namespace) -> int:
    displayer = ResultDisplayer(color=not args.no_color)

    settings = DEFAULT_SETTINGS
    if args.rules:
        try:
            settings = load_rule_set(args.rules)
        except RuleSetError as e:
            displayer.error(f"ERROR: {e}")
            return 1

    return run(settings, strict=args.strict, displayer=displayer)


def main(argv: Optional[List[str]] = None) -> int:
    return run_from_args(parse_args(argv))


if __name__ == "__main__":
    raise SystemExit(main())

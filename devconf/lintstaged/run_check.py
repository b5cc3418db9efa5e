from __future__ import annotations

import argparse
import os
import subprocess
from pathlib import Path
from typing import List, Optional

from ..result_displayer import ResultDisplayer
from .checker import SECTION_SETUP, SECTION_TITLES, SetupReport, check_setup


USAGE = [
    "Stage some files: git add .",
    "Test pre-commit: npx lint-staged",
    'Commit changes: git commit -m "Test commit"',
    'Disable linting: HUSKY_LINT_STAGED_IGNORE=0 git commit -m "Skip linting"',
]

FILE_PATTERNS = [
    "JavaScript/TypeScript: *.{js,jsx,ts,tsx} (ESLint + Prettier)",
    "JSON: *.{json,jsonc} (Prettier only)",
    "Markdown: *.{md,markdown} (Prettier only)",
    "YAML: *.{yml,yaml} (Prettier only)",
    "CSS: *.{css,scss,sass,less} (Prettier only)",
    "HTML: *.{html,htm} (Prettier only)",
    "Config files: *.{rc,config} (Prettier only)",
    "Package files: package.json, pnpm-lock.yaml, etc. (Prettier only)",
]


def add_arguments(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    parser.add_argument(
        "--root",
        metavar="DIR",
        help="Project root to check (default: current directory).",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Do not colorize the report.",
    )
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Check the lint-staged / prettier / ESLint setup of a project.",
    )
    add_arguments(parser)
    return parser.parse_args(argv)


def display_guidance(displayer: ResultDisplayer) -> None:
    displayer.line("\n✨ Lint-staged setup validation complete!")
    displayer.line("\n📖 Usage:")
    for item in USAGE:
        displayer.line(f"  - {item}")
    displayer.line("\n🎯 File patterns handled:")
    for item in FILE_PATTERNS:
        displayer.line(f"  - {item}")


def display_report(report: SetupReport, displayer: ResultDisplayer) -> None:
    if report.missing_required:
        # only the file checks ran; no point in printing the empty sections
        displayer.line(SECTION_TITLES[SECTION_SETUP])
        for result in report.results:
            displayer.display_result(result)
        return
    displayer.display_sections(report.results, SECTION_TITLES)


def run(
    root: Optional[str] = None,
    runner=subprocess.run,
    displayer: Optional[ResultDisplayer] = None,
) -> int:
    displayer = displayer or ResultDisplayer()
    project_root = Path(root) if root else Path(os.getcwd())

    report = check_setup(project_root, runner=runner)
    display_report(report, displayer)

    if report.missing_required:
        return report.exit_status

    display_guidance(displayer)
    return report.exit_status


def run_from_args(args: argparse.Namespace) -> int:
    return run(args.root, displayer=ResultDisplayer(color=not args.no_color))


def main(argv: Optional[List[str]] = None) -> int:
    return run_from_args(parse_args(argv))


if __name__ == "__main__":
    raise SystemExit(main())

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Callable, Dict, List

from ..results import CheckResult, STATUS_FAIL, STATUS_INFO, STATUS_PASS, STATUS_WARN
from .document import get_array, get_bool, get_value, is_truthy
from .report import ConfigSummary
from .rules import DEFAULT_TIMEZONE_LABEL, ValidatorSettings


SECTION_REQUIRED = "required"
SECTION_EXTENDS = "extends"
SECTION_PACKAGE_RULES = "packageRules"
SECTION_SCHEDULE = "schedule"
SECTION_SECURITY = "security"

SECTION_TITLES = {
    SECTION_REQUIRED: "📋 Checking required fields...",
    SECTION_EXTENDS: "🎯 Checking recommended extends...",
    SECTION_PACKAGE_RULES: "📦 Analyzing package rules...",
    SECTION_SCHEDULE: "⏰ Checking scheduling...",
    SECTION_SECURITY: "🔒 Checking security settings...",
}


def _render_value(value: Any) -> str:
    # compact, like JSON.stringify
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def check_required_fields(document: Dict[str, Any], settings: ValidatorSettings) -> List[CheckResult]:
    results = []
    for field in settings.required_fields:
        if get_bool(document, [field]):
            results.append(CheckResult(SECTION_REQUIRED, field, STATUS_PASS, f"{field}: Present"))
        else:
            results.append(CheckResult(SECTION_REQUIRED, field, STATUS_FAIL, f"{field}: Missing"))
    return results


def check_recommended_extends(document: Dict[str, Any], settings: ValidatorSettings) -> List[CheckResult]:
    extends = get_array(document, ["extends"])
    if extends is None:
        return []

    results = []
    for token in settings.recommended_extends:
        if token in extends:
            results.append(CheckResult(SECTION_EXTENDS, token, STATUS_PASS, f"{token}: Included"))
        else:
            results.append(CheckResult(
                SECTION_EXTENDS, token, STATUS_WARN, f"{token}: Not included (recommended)"
            ))
    return results


def analyze_package_rules(document: Dict[str, Any], settings: ValidatorSettings) -> List[CheckResult]:
    rules = get_array(document, ["packageRules"])
    if rules is None:
        return []

    grouped = sum(1 for rule in rules if get_bool(rule, ["groupName"]))
    automerge = sum(1 for rule in rules if get_bool(rule, ["automerge"]))

    return [
        CheckResult(SECTION_PACKAGE_RULES, "packageRules.count", STATUS_INFO,
                    f"Package rules count: {len(rules)}", value=len(rules)),
        CheckResult(SECTION_PACKAGE_RULES, "packageRules.grouped", STATUS_INFO,
                    f"Grouped rules: {grouped}", value=grouped),
        CheckResult(SECTION_PACKAGE_RULES, "packageRules.automerge", STATUS_INFO,
                    f"Auto-merge rules: {automerge}", value=automerge),
    ]


def check_schedule(document: Dict[str, Any], settings: ValidatorSettings) -> List[CheckResult]:
    schedule = get_value(document, ["schedule"])
    if is_truthy(schedule):
        rendered = _render_value(schedule)
        return [CheckResult(SECTION_SCHEDULE, "schedule", STATUS_PASS,
                            f"Schedule configured: {rendered}", value=schedule)]
    return [CheckResult(SECTION_SCHEDULE, "schedule", STATUS_WARN,
                        "No custom schedule configured (will use default)")]


def check_security(document: Dict[str, Any], settings: ValidatorSettings) -> List[CheckResult]:
    results = []

    if get_bool(document, ["vulnerabilityAlerts", "enabled"]):
        results.append(CheckResult(SECTION_SECURITY, "vulnerabilityAlerts.enabled", STATUS_PASS,
                                   "Vulnerability alerts: Enabled"))
    else:
        results.append(CheckResult(SECTION_SECURITY, "vulnerabilityAlerts.enabled", STATUS_WARN,
                                   "Vulnerability alerts: Not explicitly enabled"))

    if get_bool(document, ["osvVulnerabilityAlerts"]):
        results.append(CheckResult(SECTION_SECURITY, "osvVulnerabilityAlerts", STATUS_PASS,
                                   "OSV vulnerability alerts: Enabled"))
    else:
        results.append(CheckResult(SECTION_SECURITY, "osvVulnerabilityAlerts", STATUS_WARN,
                                   "OSV vulnerability alerts: Not enabled"))

    return results


CheckFn = Callable[[Dict[str, Any], ValidatorSettings], List[CheckResult]]

# Run in this order; every check is independent of the others.
ALL_CHECKS: List[CheckFn] = [
    check_required_fields,
    check_recommended_extends,
    analyze_package_rules,
    check_schedule,
    check_security,
]


def build_summary(document: Dict[str, Any], config_path: Path, base_dir: str) -> ConfigSummary:
    extends = get_array(document, ["extends"])
    rules = get_array(document, ["packageRules"])
    timezone = get_value(document, ["timezone"])

    return ConfigSummary(
        config_file=os.path.relpath(config_path, base_dir),
        extends_count=len(extends) if extends is not None else 0,
        package_rules_count=len(rules) if rules is not None else 0,
        timezone=_render_value(timezone) if is_truthy(timezone) else DEFAULT_TIMEZONE_LABEL,
        dependency_dashboard=get_bool(document, ["dependencyDashboard"]),
    )

from __future__ import annotations

import os
from typing import Any, Dict, List, Optional

from ..results import CheckResult
from .checks import ALL_CHECKS, build_summary
from .loader import resolve_document
from .report import ValidationReport
from .rules import DEFAULT_SETTINGS, ValidatorSettings


def validate_document(
    document: Dict[str, Any],
    settings: ValidatorSettings = DEFAULT_SETTINGS,
) -> List[CheckResult]:
    results: List[CheckResult] = []
    for check in ALL_CHECKS:
        results.extend(check(document, settings))
    return results


def validate(
    settings: ValidatorSettings = DEFAULT_SETTINGS,
    base_dir: Optional[str] = None,
) -> ValidationReport:
    """
    High-level API: find the Renovate config, parse it and run every check.

    Free of any printing so it can be reused by tests or other frontends.
    ConfigNotFoundError / ConfigParseError from the loader propagate to the
    caller; advisory gaps end up as results in the report instead.
    """
    base = base_dir if base_dir is not None else os.getcwd()
    resolved = resolve_document(settings.candidates, base)

    return ValidationReport(
        candidate=resolved.candidate,
        results=validate_document(resolved.document, settings),
        summary=build_summary(resolved.document, resolved.path, base),
    )

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List


# ---- Status constants (use these everywhere) ---- #
STATUS_PASS = "pass"
STATUS_WARN = "warn"
STATUS_FAIL = "fail"
STATUS_INFO = "info"

ALL_STATUSES = (STATUS_PASS, STATUS_WARN, STATUS_FAIL, STATUS_INFO)


@dataclass
class CheckResult:
    """
    Outcome of one check.

    Checks only build these; printing is left to the result displayer so tests
    (and any other frontend) can look at the structured outcome directly.
    """
    # Logical group the check belongs to (e.g. "required", "security")
    section: str
    # What was checked: a field name, a recommended token, a file path, ...
    key: str
    status: str
    # Human readable line, e.g. "extends: Missing"
    message: str
    # Optional extra value (counts, parsed settings, ...)
    value: Any = None
    # Optional indented lines printed under the message
    details: List[str] = field(default_factory=list)

    def __post_init__(self):
        if self.status not in ALL_STATUSES:
            raise ValueError(f"Unknown check status '{self.status}'")


def filter_by_status(results: List[CheckResult], status: str) -> List[CheckResult]:
    return [r for r in results if r.status == status]

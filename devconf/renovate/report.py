from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ..results import CheckResult, STATUS_FAIL, STATUS_WARN, filter_by_status


@dataclass
class ConfigSummary:
    # path of the resolved file, relative to the directory the validator ran in
    config_file: str
    extends_count: int
    package_rules_count: int
    timezone: str
    dependency_dashboard: bool


@dataclass
class ValidationReport:
    """
    Result of a complete validation run.

    Holds the structured check results and the summary so the command line
    front end, tests, or anything else can decide how to present them.
    """
    candidate: str
    results: List[CheckResult]
    summary: ConfigSummary

    @property
    def failures(self) -> List[CheckResult]:
        return filter_by_status(self.results, STATUS_FAIL)

    @property
    def warnings(self) -> List[CheckResult]:
        return filter_by_status(self.results, STATUS_WARN)

    @property
    def passed(self) -> bool:
        return not self.failures

    def find(self, key: str) -> CheckResult:
        for result in self.results:
            if result.key == key:
                return result
        raise KeyError(key)

from __future__ import annotations

import sys
from typing import Dict, List

from .results import CheckResult, STATUS_FAIL, STATUS_INFO, STATUS_PASS, STATUS_WARN


MARKERS = {
    STATUS_PASS: "✅",
    STATUS_INFO: "✅",
    STATUS_WARN: "⚠️ ",
    STATUS_FAIL: "❌",
}


class ResultDisplayer:
    def __init__(self, color: bool = True, out=None, err=None):
        self.color = color
        # streams are looked up at print time so pytest's capsys sees them
        self._out = out
        self._err = err


    @property
    def out(self):
        return self._out if self._out is not None else sys.stdout


    @property
    def err(self):
        return self._err if self._err is not None else sys.stderr


    def colorize(self, status, text):
        GREEN = "\033[92m"
        RED = "\033[91m"
        YELLOW = "\033[93m"
        RESET = "\033[0m"

        if not self.color:
            return text

        if status in (STATUS_PASS, STATUS_INFO):
            return GREEN + text + RESET
        elif status == STATUS_FAIL:
            return RED + text + RESET
        else:
            return YELLOW + text + RESET


    def line(self, text=""):
        print(text, file=self.out)


    def error(self, text):
        print(self.colorize(STATUS_FAIL, text), file=self.err)


    def display_result(self, result: CheckResult):
        marker = MARKERS[result.status]
        stream = self.err if result.status == STATUS_FAIL else self.out
        print(f"{marker} {self.colorize(result.status, result.message)}", file=stream)
        for detail in result.details:
            print(f"   {detail}", file=stream)


    def display_sections(self, results: List[CheckResult], titles: Dict[str, str]):
        """Print every section header in `titles` order, followed by its results.

        Headers are printed even when a section produced nothing, so the
        report layout stays the same from run to run.
        """
        for section, title in titles.items():
            self.line(f"\n{title}")
            for result in results:
                if result.section == section:
                    self.display_result(result)

from __future__ import annotations

import json
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple

from ..strict_json import InvalidJSONError, loads
from ..results import CheckResult, STATUS_FAIL, STATUS_PASS, filter_by_status


LINTSTAGED_CONFIG = ".lintstagedrc.js"
PRETTIER_CONFIG = ".prettierrc"
ESLINT_CONFIG = "eslint.config.mjs"
PRE_COMMIT_HOOK = ".husky/pre-commit"

# Without these there is nothing to test; the run stops at the first missing one.
REQUIRED_FILES = (LINTSTAGED_CONFIG, PRETTIER_CONFIG, ESLINT_CONFIG)

DEPENDENCIES = ("lint-staged", "eslint", "prettier")
ESLINT_PROBE_FILE = "src/index.js"

# Prints the top-level keys (file patterns) of the lint-staged config as JSON.
NODE_KEYS_SCRIPT = "console.log(JSON.stringify(Object.keys(require(process.argv[1]))))"

SECTION_SETUP = "setup"
SECTION_LINTSTAGED = "lintstaged"
SECTION_PRETTIER = "prettier"
SECTION_ESLINT = "eslint"

SECTION_TITLES = {
    SECTION_SETUP: "🔍 Testing lint-staged setup...",
    SECTION_LINTSTAGED: "🔧 Testing lint-staged configuration...",
    SECTION_PRETTIER: "🎨 Testing prettier configuration...",
    SECTION_ESLINT: "📝 Testing ESLint configuration...",
}

Runner = Callable[..., subprocess.CompletedProcess]


@dataclass
class SetupReport:
    root: Path
    results: List[CheckResult]
    # set when a required file is missing and the remaining checks were skipped
    missing_required: Optional[str] = None

    @property
    def failures(self) -> List[CheckResult]:
        return filter_by_status(self.results, STATUS_FAIL)

    @property
    def exit_status(self) -> int:
        return 1 if self.missing_required else 0


def run_command(runner: Runner, cmd: Sequence[str], root: Path) -> Tuple[bool, str]:
    """
    Run an external tool and return (succeeded, output or error text).

    A missing executable is reported like any other failure.
    """
    try:
        proc = runner(list(cmd), cwd=str(root), capture_output=True, text=True)
    except OSError as e:
        return False, f"{cmd[0]}: {e}"

    if proc.returncode != 0:
        error = (proc.stderr or "").strip()
        message = f"Command failed: {' '.join(cmd)} (exit code {proc.returncode})"
        if error:
            message += f"\n{error.splitlines()[0]}"
        return False, message

    return True, proc.stdout or ""


def _render_setting(value) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value)


def check_required_file(root: Path, name: str) -> CheckResult:
    if (root / name).is_file():
        return CheckResult(SECTION_SETUP, name, STATUS_PASS, f"{name} exists")
    return CheckResult(SECTION_SETUP, name, STATUS_FAIL, f"{name} not found")


def check_pre_commit_hook(root: Path) -> List[CheckResult]:
    hook = root / PRE_COMMIT_HOOK
    if not hook.is_file():
        return [CheckResult(SECTION_SETUP, PRE_COMMIT_HOOK, STATUS_FAIL, f"{PRE_COMMIT_HOOK} not found")]

    try:
        content = hook.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        return [CheckResult(SECTION_SETUP, PRE_COMMIT_HOOK, STATUS_FAIL,
                            f"{PRE_COMMIT_HOOK} could not be read", details=[f"Error: {e}"])]

    results = [CheckResult(SECTION_SETUP, PRE_COMMIT_HOOK, STATUS_PASS, f"{PRE_COMMIT_HOOK} exists")]
    if "lint-staged" in content:
        results.append(CheckResult(SECTION_SETUP, "pre-commit:lint-staged", STATUS_PASS,
                                   "Pre-commit hook includes lint-staged"))
    else:
        results.append(CheckResult(SECTION_SETUP, "pre-commit:lint-staged", STATUS_FAIL,
                                   "Pre-commit hook does not include lint-staged"))
    return results


def check_dependencies(root: Path, runner: Runner) -> CheckResult:
    ok, _ = run_command(runner, ["npm", "ls", *DEPENDENCIES], root)
    if ok:
        return CheckResult(SECTION_SETUP, "dependencies", STATUS_PASS,
                           "All required dependencies are installed")
    return CheckResult(SECTION_SETUP, "dependencies", STATUS_FAIL,
                       "Some dependencies are missing", details=["Run: pnpm install"])


def check_lintstaged_config(root: Path, runner: Runner) -> CheckResult:
    path = root / LINTSTAGED_CONFIG
    ok, output = run_command(runner, ["node", "-e", NODE_KEYS_SCRIPT, str(path)], root)

    patterns = None
    if ok:
        try:
            patterns = json.loads(output)
        except json.JSONDecodeError as e:
            ok, output = False, f"unexpected output from node: {e}"
        else:
            if not isinstance(patterns, list):
                ok, output = False, "unexpected output from node"

    if not ok:
        return CheckResult(SECTION_LINTSTAGED, LINTSTAGED_CONFIG, STATUS_FAIL,
                           "lint-staged configuration is invalid",
                           details=[f"Error: {output}"])

    return CheckResult(SECTION_LINTSTAGED, LINTSTAGED_CONFIG, STATUS_PASS,
                       "lint-staged configuration is valid", value=patterns,
                       details=["File patterns configured:"] + [f"- {p}" for p in patterns])


def check_prettier_config(root: Path) -> CheckResult:
    path = root / PRETTIER_CONFIG
    try:
        settings = loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, InvalidJSONError) as e:
        return CheckResult(SECTION_PRETTIER, PRETTIER_CONFIG, STATUS_FAIL,
                           "Prettier configuration is invalid", details=[f"Error: {e}"])

    if not isinstance(settings, dict):
        return CheckResult(SECTION_PRETTIER, PRETTIER_CONFIG, STATUS_FAIL,
                           "Prettier configuration is invalid",
                           details=["Error: top-level value is not a JSON object"])

    details = ["Settings:"] + [f"- {k}: {_render_setting(v)}" for k, v in settings.items()]
    return CheckResult(SECTION_PRETTIER, PRETTIER_CONFIG, STATUS_PASS,
                       "Prettier configuration is valid", value=settings, details=details)


def check_eslint_config(root: Path, runner: Runner) -> CheckResult:
    ok, output = run_command(runner, ["npx", "eslint", "--print-config", ESLINT_PROBE_FILE], root)
    if ok:
        return CheckResult(SECTION_ESLINT, ESLINT_CONFIG, STATUS_PASS, "ESLint configuration is valid")
    return CheckResult(SECTION_ESLINT, ESLINT_CONFIG, STATUS_FAIL,
                       "ESLint configuration has issues", details=[f"Error: {output}"])


def check_setup(root: Path, runner: Runner = subprocess.run) -> SetupReport:
    """
    Run every lint-staged setup check against the project in `root`.

    Stops early, with `missing_required` set, when one of the required config
    files does not exist. All other problems are recorded as failed results.
    """
    root = Path(root)
    results: List[CheckResult] = []

    for name in REQUIRED_FILES:
        result = check_required_file(root, name)
        results.append(result)
        if result.status == STATUS_FAIL:
            return SetupReport(root=root, results=results, missing_required=name)

    results.extend(check_pre_commit_hook(root))
    results.append(check_dependencies(root, runner))
    results.append(check_lintstaged_config(root, runner))
    results.append(check_prettier_config(root))
    results.append(check_eslint_config(root, runner))

    return SetupReport(root=root, results=results)

"""Tests for the lint-staged setup checker."""

import json
import subprocess
from pathlib import Path

from devconf.lintstaged.checker import (
    ESLINT_CONFIG,
    LINTSTAGED_CONFIG,
    PRE_COMMIT_HOOK,
    PRETTIER_CONFIG,
    check_setup,
    run_command,
)
from devconf.lintstaged.run_check import run
from devconf.results import STATUS_FAIL, STATUS_PASS


class FakeRunner:
    """Stands in for subprocess.run; answers per executable name."""

    def __init__(self, outputs=None, failing=(), missing=()):
        self.outputs = outputs or {}
        self.failing = set(failing)
        self.missing = set(missing)
        self.calls = []

    def __call__(self, cmd, cwd=None, capture_output=False, text=False):
        self.calls.append(cmd)
        name = cmd[0]
        if name in self.missing:
            raise FileNotFoundError(f"No such file or directory: '{name}'")
        if name in self.failing:
            return subprocess.CompletedProcess(cmd, 1, stdout="", stderr="boom\nmore")
        return subprocess.CompletedProcess(cmd, 0, stdout=self.outputs.get(name, ""), stderr="")


def _node_ok():
    return FakeRunner(outputs={"node": json.dumps(["*.{js,ts}", "*.md"])})


def _make_project(root, hook="npx lint-staged\n", prettier=None):
    (root / LINTSTAGED_CONFIG).write_text("module.exports = {}\n", encoding="utf-8")
    (root / PRETTIER_CONFIG).write_text(
        json.dumps(prettier if prettier is not None else {"semi": False, "printWidth": 80}),
        encoding="utf-8",
    )
    (root / ESLINT_CONFIG).write_text("export default []\n", encoding="utf-8")
    if hook is not None:
        (root / ".husky").mkdir()
        (root / PRE_COMMIT_HOOK).write_text(hook, encoding="utf-8")
    return root


def _by_key(report):
    return {r.key: r for r in report.results}


class TestRunCommand:
    def test_success(self, tmp_path):
        ok, output = run_command(FakeRunner(outputs={"npm": "tree"}), ["npm", "ls"], tmp_path)
        assert ok
        assert output == "tree"

    def test_failure_keeps_first_stderr_line(self, tmp_path):
        ok, output = run_command(FakeRunner(failing=["npm"]), ["npm", "ls"], tmp_path)
        assert not ok
        assert "Command failed: npm ls (exit code 1)" in output
        assert "boom" in output
        assert "more" not in output

    def test_missing_executable(self, tmp_path):
        ok, output = run_command(FakeRunner(missing=["npx"]), ["npx", "eslint"], tmp_path)
        assert not ok
        assert output.startswith("npx:")


class TestCheckSetup:
    def test_everything_valid(self, tmp_path):
        report = check_setup(_make_project(tmp_path), runner=_node_ok())

        assert report.exit_status == 0
        assert report.failures == []
        results = _by_key(report)
        assert results[LINTSTAGED_CONFIG].status == STATUS_PASS
        assert results["pre-commit:lint-staged"].status == STATUS_PASS
        assert results["dependencies"].status == STATUS_PASS

    def test_reports_patterns_and_settings(self, tmp_path):
        report = check_setup(_make_project(tmp_path), runner=_node_ok())

        lint = [r for r in report.results if r.section == "lintstaged"][0]
        assert lint.value == ["*.{js,ts}", "*.md"]
        assert "- *.md" in lint.details

        prettier = [r for r in report.results if r.section == "prettier"][0]
        assert prettier.value == {"semi": False, "printWidth": 80}
        assert "- semi: false" in prettier.details
        assert "- printWidth: 80" in prettier.details

    def test_missing_required_file_stops(self, tmp_path):
        _make_project(tmp_path)
        (tmp_path / PRETTIER_CONFIG).unlink()
        runner = _node_ok()

        report = check_setup(tmp_path, runner=runner)

        assert report.missing_required == PRETTIER_CONFIG
        assert report.exit_status == 1
        assert [r.key for r in report.results] == [LINTSTAGED_CONFIG, PRETTIER_CONFIG]
        assert runner.calls == []

    def test_missing_hook_is_advisory(self, tmp_path):
        report = check_setup(_make_project(tmp_path, hook=None), runner=_node_ok())

        assert report.exit_status == 0
        assert _by_key(report)[PRE_COMMIT_HOOK].status == STATUS_FAIL

    def test_hook_without_lint_staged(self, tmp_path):
        report = check_setup(_make_project(tmp_path, hook="npm test\n"), runner=_node_ok())

        assert report.exit_status == 0
        assert _by_key(report)["pre-commit:lint-staged"].status == STATUS_FAIL

    def test_tool_failures_are_advisory(self, tmp_path):
        runner = FakeRunner(failing=["npm", "node", "npx"])

        report = check_setup(_make_project(tmp_path), runner=runner)

        assert report.exit_status == 0
        assert {r.key for r in report.failures} == {"dependencies", LINTSTAGED_CONFIG, ESLINT_CONFIG}
        assert _by_key(report)["dependencies"].details == ["Run: pnpm install"]

    def test_unexpected_node_output(self, tmp_path):
        runner = FakeRunner(outputs={"node": "not json"})

        report = check_setup(_make_project(tmp_path), runner=runner)

        assert LINTSTAGED_CONFIG in {r.key for r in report.failures}

    def test_invalid_prettier_config(self, tmp_path):
        _make_project(tmp_path)
        (tmp_path / PRETTIER_CONFIG).write_text("semi: false", encoding="utf-8")

        report = check_setup(tmp_path, runner=_node_ok())

        assert [r.key for r in report.failures] == [PRETTIER_CONFIG]
        assert report.exit_status == 0

    def test_prettier_nan_is_invalid(self, tmp_path):
        _make_project(tmp_path)
        (tmp_path / PRETTIER_CONFIG).write_text('{"printWidth": NaN}', encoding="utf-8")

        report = check_setup(tmp_path, runner=_node_ok())

        [failure] = report.failures
        assert failure.key == PRETTIER_CONFIG
        assert "NaN" in failure.details[0]

    def test_prettier_deep_nesting_is_invalid(self, tmp_path):
        _make_project(tmp_path)
        (tmp_path / PRETTIER_CONFIG).write_text(
            '{"x": ' + "[" * 100000 + "]" * 100000 + "}", encoding="utf-8"
        )

        report = check_setup(tmp_path, runner=_node_ok())

        assert [r.key for r in report.failures] == [PRETTIER_CONFIG]
        assert "nested too deeply" in report.failures[0].details[0]

    def test_unreadable_hook_is_a_failed_check(self, tmp_path, monkeypatch):
        _make_project(tmp_path)
        read_text = Path.read_text

        def _read_text(self, *args, **kwargs):
            if self.name == "pre-commit":
                raise PermissionError("Permission denied")
            return read_text(self, *args, **kwargs)

        monkeypatch.setattr(Path, "read_text", _read_text)

        report = check_setup(tmp_path, runner=_node_ok())

        hook = _by_key(report)[PRE_COMMIT_HOOK]
        assert hook.status == STATUS_FAIL
        assert "could not be read" in hook.message
        assert "pre-commit:lint-staged" not in _by_key(report)
        assert report.exit_status == 0

    def test_commands_run_in_project_root(self, tmp_path):
        runner = _node_ok()
        check_setup(_make_project(tmp_path), runner=runner)

        assert ["npm", "ls", "lint-staged", "eslint", "prettier"] in runner.calls
        assert ["npx", "eslint", "--print-config", "src/index.js"] in runner.calls


class TestRun:
    def test_prints_report_and_guidance(self, tmp_path, plain_displayer, capsys):
        _make_project(tmp_path)

        assert run(str(tmp_path), runner=_node_ok(), displayer=plain_displayer) == 0

        out = capsys.readouterr().out
        assert ".lintstagedrc.js exists" in out
        assert "Prettier configuration is valid" in out
        assert "File patterns handled:" in out
        assert "npx lint-staged" in out

    def test_missing_required_file(self, tmp_path, plain_displayer, capsys):
        assert run(str(tmp_path), runner=_node_ok(), displayer=plain_displayer) == 1

        captured = capsys.readouterr()
        assert ".lintstagedrc.js not found" in captured.err
        assert "File patterns handled:" not in captured.out

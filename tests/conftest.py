"""Shared fixtures."""

import json
from pathlib import Path

import pytest

from devconf.result_displayer import ResultDisplayer


@pytest.fixture
def write_json(tmp_path: Path):
    """Write an object as JSON under tmp_path and return the file path."""

    def _write(relative: str, data) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def in_tmp(tmp_path: Path, monkeypatch):
    """Run the test with tmp_path as the current directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def plain_displayer():
    return ResultDisplayer(color=False)

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import yaml  # type: ignore[import]

from ..strict_json import InvalidJSONError, loads
from .rules import DEFAULT_SETTINGS, ValidatorSettings


class ConfigNotFoundError(Exception):
    def __init__(self, candidates: Iterable[str]):
        self.candidates = list(candidates)
        super().__init__(
            "No Renovate configuration file found. "
            f"Expected one of: {', '.join(self.candidates)}"
        )


class ConfigParseError(ValueError):
    def __init__(self, candidate: str, reason: str):
        self.candidate = candidate
        self.reason = reason
        super().__init__(f"Error parsing {candidate}: {reason}")


class RuleSetError(ValueError):
    pass


@dataclass
class ResolvedConfig:
    # candidate entry as listed (e.g. ".github/renovate.json")
    candidate: str
    path: Path
    document: Dict[str, Any]


def resolve_document(
    candidates: Iterable[str],
    base_dir: Optional[str] = None,
) -> ResolvedConfig:
    """
    Return the first candidate that exists, parsed as a JSON object.

    Candidates are resolved relative to `base_dir` (the current directory
    when omitted). Raises ConfigParseError if that first file is not valid
    JSON or is not an object, ConfigNotFoundError if none exists.
    """
    base = Path(base_dir) if base_dir is not None else Path(os.getcwd())
    tried: List[str] = []

    for candidate in candidates:
        tried.append(candidate)
        path = base / candidate
        if not path.is_file():
            continue

        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigParseError(candidate, str(e)) from e

        try:
            document = loads(text)
        except InvalidJSONError as e:
            raise ConfigParseError(candidate, str(e)) from e

        if not isinstance(document, dict):
            raise ConfigParseError(
                candidate, "top-level value is not a JSON object"
            )

        return ResolvedConfig(candidate=candidate, path=path, document=document)

    raise ConfigNotFoundError(tried)


def _string_list(data: Dict[str, Any], key: str, path: Path):
    value = data[key]
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise RuleSetError(f"'{key}' in rule set '{path}' must be a list of strings")
    return tuple(value)


def load_rule_set(filename: str) -> ValidatorSettings:
    """
    Load validator settings from a YAML rule set.

    Schema (every key optional, missing keys keep the built-in defaults):

        candidates:
          - renovate.json
          - .github/renovate.json
        required_fields: [extends, packageRules]
        recommended_extends: ["config:recommended"]
    """
    path = Path(filename)

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise RuleSetError(f"failed to read rule set '{path}': {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise RuleSetError(f"failed to parse rule set '{path}': {e}") from e

    if data is None:
        return DEFAULT_SETTINGS
    if not isinstance(data, dict):
        raise RuleSetError(f"rule set '{path}' does not contain a mapping at top level")

    candidates = DEFAULT_SETTINGS.candidates
    required = DEFAULT_SETTINGS.required_fields
    recommended = DEFAULT_SETTINGS.recommended_extends

    if "candidates" in data:
        candidates = _string_list(data, "candidates", path)
        if not candidates:
            raise RuleSetError(f"rule set '{path}' lists no candidate paths")
    if "required_fields" in data:
        required = _string_list(data, "required_fields", path)
    if "recommended_extends" in data:
        recommended = _string_list(data, "recommended_extends", path)

    return ValidatorSettings(
        candidates=candidates,
        required_fields=required,
        recommended_extends=recommended,
    )

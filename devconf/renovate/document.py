"""
Safe accessors for a parsed JSON configuration document.

The document is whatever `json.loads` returned, so any key may be missing or
hold a value of an unexpected type. Every helper here returns a default
instead of raising when the path cannot be followed.

Truthiness follows JSON/JavaScript rules rather than Python's: empty arrays
and objects count as set, only null, false, 0 and "" count as unset.
"""
from __future__ import annotations

from typing import Any, List, Optional, Sequence, Union

PathLike = Union[str, Sequence[str]]


def _split_path(path: PathLike) -> List[str]:
    if isinstance(path, str):
        return path.split(".")
    return list(path)


def get_value(document: Any, path: PathLike, default: Any = None) -> Any:
    """
    Follow a dotted path ("vulnerabilityAlerts.enabled") or a sequence of keys
    through nested objects. Returns `default` as soon as a step is not an
    object or the key is absent.
    """
    current = document
    for key in _split_path(path):
        if not isinstance(current, dict) or key not in current:
            return default
        current = current[key]
    return current


def is_truthy(value: Any) -> bool:
    if value is None or value is False:
        return False
    if value is True:
        return True
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value != ""
    return True


def get_bool(document: Any, path: PathLike) -> bool:
    return is_truthy(get_value(document, path))


def get_array(document: Any, path: PathLike) -> Optional[List[Any]]:
    value = get_value(document, path)
    return value if isinstance(value, list) else None

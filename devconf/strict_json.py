from __future__ import annotations

import json
from typing import Any


class InvalidJSONError(ValueError):
    pass


def _reject_constant(name):
    # json accepts NaN / Infinity / -Infinity by default; JSON itself does not
    raise InvalidJSONError(f"invalid JSON constant '{name}'")


def loads(text: str) -> Any:
    """
    Parse `text` as strict JSON.

    Every way the text can fail to be a JSON document ends up as an
    InvalidJSONError carrying a readable reason.
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise InvalidJSONError(str(e)) from e
    except RecursionError as e:
        raise InvalidJSONError("document is nested too deeply") from e

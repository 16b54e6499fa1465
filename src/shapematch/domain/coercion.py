"""Scalar coercion rules shared by the primitive and exact matchers.

Loose matching accepts a value when these coercions succeed; strict
matching requires the value to already be of the target kind.
"""

from __future__ import annotations

import math
from typing import Any

from shapematch.domain.schema import MISSING, is_nullish

BOOLEAN_STRINGS: dict[str, bool] = {"true": True, "false": False}


def is_number(value: object) -> bool:
    """Strict number check.  ``bool`` is not a number here."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _parse_number(text: str) -> int | float | None:
    text = text.strip()
    if not text or "_" in text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        parsed = float(text)
    except ValueError:
        return None
    return None if math.isnan(parsed) else parsed


def to_number(value: Any) -> int | float | None:
    """Coerce *value* to a number, or return None when it is not numeric.

    Booleans become 0/1, numeric strings are parsed (integer literals to
    ``int``), NaN is never a valid result.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return None if math.isnan(value) else value
    if isinstance(value, str):
        return _parse_number(value)
    return None


def to_boolean(value: Any) -> bool | None:
    """Coerce a ``bool`` or the exact strings ``"true"``/``"false"``."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return BOOLEAN_STRINGS.get(value)
    return None


def to_string(value: Any) -> str:
    """Stringify *value*.  Booleans render as ``"true"``/``"false"``."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _kind(value: Any) -> object:
    if isinstance(value, bool):
        return bool
    if is_number(value):
        return "number"
    if value is MISSING:
        return MISSING
    return type(value)


def strict_equals(token: Any, value: Any) -> bool:
    """Same kind and same value.  ``int`` and ``float`` are one kind."""
    if token is value:
        return True
    return _kind(token) == _kind(value) and bool(token == value)


def loose_equals(token: Any, value: Any) -> bool:
    """Value-coercing equality.

    ``None`` and :data:`MISSING` only equal each other.  When either side is
    a number or boolean and the other is a number, boolean or string, both
    are compared as numbers.  Everything else falls back to ``==``.
    """
    if token is value:
        return True
    if is_nullish(token) or is_nullish(value):
        return is_nullish(token) and is_nullish(value)
    scalars = (bool, int, float, str)
    if isinstance(token, scalars) and isinstance(value, scalars):
        if not (isinstance(token, str) and isinstance(value, str)):
            left, right = to_number(token), to_number(value)
            return left is not None and right is not None and left == right
    return bool(token == value)

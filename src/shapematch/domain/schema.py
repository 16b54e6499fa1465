"""Schema node vocabulary and the absent-value sentinel.

A schema node is plain, immutable data describing an expected shape:

- ``str`` / ``bool`` / ``int`` / ``float`` — primitive tags
- a ``list`` or ``tuple`` whose element ``[0]`` describes every array element
- a ``Mapping[str, SchemaNode]`` — object shape (structural subset check)
- any other class — instance check
- a :class:`~shapematch.domain.matchers.Matcher` — embedded as-is
- ``optional(node)`` — also accepts :data:`MISSING`
- anything else — an exact literal (``"admin"``, ``5``, ``None``, ...)

INVARIANT: schema nodes are never mutated by the engine.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Final, Literal, TypeAlias

SchemaNode: TypeAlias = Any


class _Missing(Enum):
    """Type of the :data:`MISSING` singleton."""

    MISSING = "MISSING"

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing.MISSING
"""Marker for "key or argument not supplied".  Distinct from ``None``."""

Missing: TypeAlias = Literal[_Missing.MISSING]


def is_missing(value: object) -> bool:
    """True iff *value* is the absent-value sentinel."""
    return value is MISSING


def is_nullish(value: object) -> bool:
    """True for ``None`` and :data:`MISSING`."""
    return value is None or value is MISSING

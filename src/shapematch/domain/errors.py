"""Conversion error taxonomy.

Leaf failures raise :class:`TypeMismatch`.  The Object and Array matchers
catch a child failure and re-raise it wrapped in a
:class:`PropertyConversionFailed` / :class:`ElementConversionFailed`, adding
one path segment per level.  By the time the error reaches the caller the
chain spells out the full location, e.g. ``user.addresses[2].zip``.

INVARIANT: only ``convert`` raises.  ``match`` and ``match_loose`` return False.
"""

from __future__ import annotations

from typing import Any

PathSegment = str | int


def format_path(path: tuple[PathSegment, ...]) -> str:
    """Render a path tuple as ``a.b[2].c``.

    Integer segments become ``[i]``; string segments are dot-joined.
    """
    parts: list[str] = []
    for segment in path:
        if isinstance(segment, int):
            parts.append(f"[{segment}]")
        elif parts:
            parts.append(f".{segment}")
        else:
            parts.append(str(segment))
    return "".join(parts)


class ConversionError(TypeError):
    """Base class for every failure raised by ``Matcher.convert``."""

    def __init__(self, message: str, *, cause: ConversionError | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause

    @property
    def segment(self) -> PathSegment | None:
        """Path segment contributed by this level (None for leaf failures)."""
        return None

    @property
    def path(self) -> tuple[PathSegment, ...]:
        """Keys and indices from the outermost schema down to the failure."""
        segments: list[PathSegment] = []
        err: ConversionError | None = self
        while err is not None:
            if err.segment is not None:
                segments.append(err.segment)
            err = err.cause
        return tuple(segments)

    @property
    def leaf(self) -> ConversionError:
        """The innermost error in the wrapping chain."""
        err = self
        while err.cause is not None:
            err = err.cause
        return err

    @property
    def reason(self) -> str:
        """Message of the innermost failure."""
        return self.leaf.message


class TypeMismatch(ConversionError):
    """A value cannot be converted to the expected kind."""

    def __init__(self, message: str, *, value: Any, expected: str) -> None:
        super().__init__(message)
        self.value = value
        self.expected = expected


class PropertyConversionFailed(ConversionError):
    """Conversion of one declared property of an object failed."""

    def __init__(self, key: str, cause: ConversionError) -> None:
        super().__init__(f"convert failed on property {key} due to {cause}", cause=cause)
        self.key = key

    @property
    def segment(self) -> PathSegment:
        return self.key


class ElementConversionFailed(ConversionError):
    """Conversion of one element of an array failed."""

    def __init__(self, index: int, cause: ConversionError) -> None:
        super().__init__(f"convert failed on element {index} due to {cause}", cause=cause)
        self.index = index

    @property
    def segment(self) -> PathSegment:
        return self.index


class ArgumentConversionFailed(ConversionError):
    """Conversion of a bound function argument failed (see :mod:`shapematch.binding`)."""

    def __init__(self, name: str, cause: ConversionError) -> None:
        super().__init__(f"convert failed on argument {name} due to {cause}", cause=cause)
        self.name = name

    @property
    def segment(self) -> PathSegment:
        return self.name

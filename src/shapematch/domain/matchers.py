"""Matchers — the behavioral view over a schema node.

Every matcher answers three questions about a candidate value:

- ``match_loose(value)``: could ``convert`` succeed (coercion allowed)?
- ``match(value)``: is the value already exactly of the target shape?
- ``convert(value)``: produce the canonical typed value or raise
  :class:`~shapematch.domain.errors.ConversionError`.

:func:`to_matcher` resolves a schema node to a matcher.  Composite matchers
resolve their children on first use and keep them, so a matcher tree is
built at most once per matcher instance and self-referential schemas
(a mapping that embeds ``optional(itself)``) are safe to construct.

INVARIANT: matchers never mutate their schema node or the candidate value.
Recursion depth follows the candidate's nesting depth; bounding it is the
caller's job.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from functools import cached_property
from typing import Any, Generic, TypeGuard, TypeVar

from shapematch.domain.coercion import (
    is_number,
    loose_equals,
    strict_equals,
    to_boolean,
    to_number,
    to_string,
)
from shapematch.domain.errors import (
    ConversionError,
    ElementConversionFailed,
    PropertyConversionFailed,
    TypeMismatch,
)
from shapematch.domain.schema import MISSING, SchemaNode, is_missing, is_nullish

T = TypeVar("T")

_Seen = frozenset[int]


class Matcher(ABC, Generic[T]):
    """Abstract base for all matchers.

    Subclasses may be embedded directly in a schema; :func:`to_matcher`
    returns them unchanged.  Custom matchers signal conversion failure by
    raising :class:`ConversionError`; a plain ``TypeError`` or ``ValueError``
    is turned into a leaf :class:`TypeMismatch` by :func:`convert_leaf` so
    parents can still add path context.
    """

    @abstractmethod
    def match_loose(self, value: Any) -> bool:
        """Coercion-tolerant acceptance test."""
        ...

    @abstractmethod
    def match(self, value: Any) -> TypeGuard[T]:
        """Strict acceptance test.  No coercion."""
        ...

    @abstractmethod
    def convert(self, value: Any) -> T:
        """Return the canonical value or raise :class:`ConversionError`."""
        ...

    def describe(self, seen: _Seen = frozenset()) -> str:
        """Compact rendering of the schema this matcher checks."""
        return type(self).__name__

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.describe()}>"


# ---------------------------------------------------------------------------
# Primitive matchers
# ---------------------------------------------------------------------------


class StringMatcher(Matcher[str]):
    """Matches ``str``.  Anything except ``None``/``MISSING`` stringifies."""

    def match_loose(self, value: Any) -> bool:
        return not is_nullish(value)

    def match(self, value: Any) -> TypeGuard[str]:
        return isinstance(value, str)

    def convert(self, value: Any) -> str:
        if not self.match_loose(value):
            raise TypeMismatch(f"cannot convert {value!r} to string", value=value, expected="string")
        return to_string(value)

    def describe(self, seen: _Seen = frozenset()) -> str:
        return "str"


class BooleanMatcher(Matcher[bool]):
    """Matches ``bool``.  Loosely also ``"true"`` and ``"false"``."""

    def match_loose(self, value: Any) -> bool:
        return to_boolean(value) is not None

    def match(self, value: Any) -> TypeGuard[bool]:
        return isinstance(value, bool)

    def convert(self, value: Any) -> bool:
        converted = to_boolean(value)
        if converted is None:
            raise TypeMismatch(f"cannot convert {value!r} to boolean", value=value, expected="boolean")
        return converted

    def describe(self, seen: _Seen = frozenset()) -> str:
        return "bool"


class NumberMatcher(Matcher[int | float]):
    """Matches ``int``/``float`` (never ``bool``).  Loosely anything numeric."""

    def match_loose(self, value: Any) -> bool:
        return to_number(value) is not None

    def match(self, value: Any) -> TypeGuard[int | float]:
        return is_number(value) and not (isinstance(value, float) and math.isnan(value))

    def convert(self, value: Any) -> int | float:
        converted = to_number(value)
        if converted is None:
            raise TypeMismatch(f"cannot convert {value!r} to number", value=value, expected="number")
        return converted

    def describe(self, seen: _Seen = frozenset()) -> str:
        return "number"


# ---------------------------------------------------------------------------
# Composite matchers
# ---------------------------------------------------------------------------


class ObjectMatcher(Matcher[dict[str, Any]]):
    """Structural subset check over a mapping of property schemas.

    Only declared keys are inspected; undeclared input keys are ignored and
    never copied.  A declared key missing from the input is checked as
    :data:`MISSING`, which only ``optional(...)`` schemas accept.

    ``convert`` omits an absent optional key from the result dict instead of
    storing it with an absent value, so the output carries exactly the
    declared keys that were present.
    """

    def __init__(self, shape: Mapping[str, SchemaNode]) -> None:
        self.shape = shape

    @cached_property
    def fields(self) -> list[tuple[str, Matcher[Any]]]:
        return [(key, to_matcher(node)) for key, node in self.shape.items()]

    def match_loose(self, value: Any) -> bool:
        if not isinstance(value, Mapping):
            return False
        return all(matcher.match_loose(value.get(key, MISSING)) for key, matcher in self.fields)

    def match(self, value: Any) -> TypeGuard[dict[str, Any]]:
        if not isinstance(value, Mapping):
            return False
        return all(matcher.match(value.get(key, MISSING)) for key, matcher in self.fields)

    def convert(self, value: Any) -> dict[str, Any]:
        if not isinstance(value, Mapping):
            raise TypeMismatch(f"Expect {value!r} to be object", value=value, expected="object")

        result: dict[str, Any] = {}
        for key, matcher in self.fields:
            try:
                converted = convert_leaf(matcher, value.get(key, MISSING))
            except ConversionError as err:
                raise PropertyConversionFailed(key, err) from err
            # Absent optional properties are left out of the projection.
            if not is_missing(converted):
                result[key] = converted
        return result

    def describe(self, seen: _Seen = frozenset()) -> str:
        if id(self.shape) in seen:
            return "..."
        seen = seen | {id(self.shape)}
        parts: list[str] = []
        for key, matcher in self.fields:
            if isinstance(matcher, OptionalMatcher):
                parts.append(f"{key}?: {matcher.inner.describe(seen)}")
            else:
                parts.append(f"{key}: {matcher.describe(seen)}")
        return "{" + ", ".join(parts) + "}"


class ArrayMatcher(Matcher[list[Any]]):
    """Homogeneous sequence check; ``schema[0]`` describes every element.

    Empty input sequences always match.  Strings are not sequences here.
    """

    def __init__(self, schema: Sequence[SchemaNode]) -> None:
        self.schema = schema
        self.element_schema: SchemaNode = schema[0] if len(schema) else MISSING

    @cached_property
    def element(self) -> Matcher[Any]:
        return to_matcher(self.element_schema)

    def match_loose(self, value: Any) -> bool:
        if not isinstance(value, (list, tuple)):
            return False
        return all(self.element.match_loose(item) for item in value)

    def match(self, value: Any) -> TypeGuard[list[Any]]:
        if not isinstance(value, (list, tuple)):
            return False
        return all(self.element.match(item) for item in value)

    def convert(self, value: Any) -> list[Any]:
        if not isinstance(value, (list, tuple)):
            raise TypeMismatch(f"Expect {value!r} to be array", value=value, expected="array")

        result: list[Any] = []
        for index, item in enumerate(value):
            try:
                result.append(convert_leaf(self.element, item))
            except ConversionError as err:
                raise ElementConversionFailed(index, err) from err
        return result

    def describe(self, seen: _Seen = frozenset()) -> str:
        if id(self.schema) in seen:
            return "..."
        return f"[{self.element.describe(seen | {id(self.schema)})}]"


# ---------------------------------------------------------------------------
# Class, exact, and optional matchers
# ---------------------------------------------------------------------------


class ClassMatcher(Matcher[T]):
    """Instance check against a class.  ``convert`` returns the instance itself."""

    def __init__(self, cls: type[T]) -> None:
        self.cls = cls

    def match_loose(self, value: Any) -> bool:
        return isinstance(value, self.cls)

    def match(self, value: Any) -> TypeGuard[T]:
        return isinstance(value, self.cls)

    def convert(self, value: Any) -> T:
        if not self.match(value):
            raise TypeMismatch(
                f"{value!r} is not instance of {self.cls.__qualname__}",
                value=value,
                expected=self.cls.__qualname__,
            )
        return value

    def describe(self, seen: _Seen = frozenset()) -> str:
        return self.cls.__qualname__


class ExactMatcher(Matcher[T]):
    """Matches one literal token.

    ``convert`` ignores its argument and returns the token: the value of an
    exact schema is the literal itself.  Guard with ``match``/``match_loose``
    first when the candidate must be checked.
    """

    def __init__(self, token: T) -> None:
        self.token = token

    def match_loose(self, value: Any) -> bool:
        return loose_equals(self.token, value)

    def match(self, value: Any) -> TypeGuard[T]:
        return strict_equals(self.token, value)

    def convert(self, value: Any) -> T:
        return self.token

    def describe(self, seen: _Seen = frozenset()) -> str:
        return repr(self.token)


class OptionalMatcher(Matcher[T]):
    """Accepts :data:`MISSING` in all three operations, else delegates.

    ``None`` is not absent and is passed through to the inner matcher.
    """

    def __init__(self, schema: SchemaNode) -> None:
        self.schema = schema

    @cached_property
    def inner(self) -> Matcher[T]:
        return to_matcher(self.schema)

    def match_loose(self, value: Any) -> bool:
        return is_missing(value) or self.inner.match_loose(value)

    def match(self, value: Any) -> TypeGuard[T]:
        return is_missing(value) or self.inner.match(value)

    def convert(self, value: Any) -> T:
        if is_missing(value):
            return value
        return self.inner.convert(value)

    def describe(self, seen: _Seen = frozenset()) -> str:
        return f"optional({self.inner.describe(seen)})"


def optional(schema: SchemaNode) -> OptionalMatcher[Any]:
    """Wrap *schema* so that an absent value is also accepted."""
    if isinstance(schema, OptionalMatcher):
        return schema
    return OptionalMatcher(schema)


# ---------------------------------------------------------------------------
# Resolution and entry points
# ---------------------------------------------------------------------------


def to_matcher(schema: SchemaNode) -> Matcher[Any]:
    """Resolve a schema node to a matcher.

    Checked in order, first hit wins: matcher, primitive tag, list/tuple,
    mapping, class, and finally exact literal.  Total over all inputs.
    """
    if isinstance(schema, Matcher):
        return schema
    if schema is str:
        return StringMatcher()
    if schema is bool:
        return BooleanMatcher()
    if schema is int or schema is float:
        return NumberMatcher()
    if isinstance(schema, (list, tuple)):
        return ArrayMatcher(schema)
    if isinstance(schema, Mapping):
        return ObjectMatcher(schema)
    if isinstance(schema, type):
        return ClassMatcher(schema)
    return ExactMatcher(schema)


def convert_leaf(matcher: Matcher[T], value: Any) -> T:
    """Run ``matcher.convert(value)``, normalising custom-matcher failures.

    A ``TypeError`` or ``ValueError`` that is not already a
    :class:`ConversionError` becomes a leaf :class:`TypeMismatch`, so parents
    can attach their key or index to it.
    """
    try:
        return matcher.convert(value)
    except ConversionError:
        raise
    except (TypeError, ValueError) as err:
        raise TypeMismatch(str(err), value=value, expected=matcher.describe()) from err


def loose_matches(schema: SchemaNode, value: Any) -> bool:
    """Coercion-tolerant predicate: would ``convert`` accept *value*?"""
    return to_matcher(schema).match_loose(value)


def matches(schema: SchemaNode, value: Any) -> bool:
    """Strict predicate: is *value* already exactly of the schema's shape?"""
    return to_matcher(schema).match(value)


def convert(schema: SchemaNode, value: Any) -> Any:
    """Convert *value* to the schema's canonical shape.

    Raises:
        ConversionError: with a path naming the failing property/element.
    """
    return convert_leaf(to_matcher(schema), value)

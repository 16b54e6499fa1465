"""Argument binding — convert a function's arguments through schemas.

The decorated function receives converted values in place of the raw
arguments, e.g. a request body decoded from JSON::

    @converted(body={"name": str, "age": int})
    def create_user(body): ...

    create_user({"name": "ada", "age": "36"})  # body == {"name": "ada", "age": 36}

An omitted argument is checked as :data:`~shapematch.domain.schema.MISSING`,
so only ``optional(...)`` parameters may be left out; when their conversion
yields ``MISSING`` the parameter's own default applies.
"""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable
from typing import Any, ParamSpec, TypeVar

from shapematch.domain.errors import ArgumentConversionFailed, ConversionError
from shapematch.domain.matchers import convert_leaf, to_matcher
from shapematch.domain.schema import MISSING, SchemaNode, is_missing

_P = ParamSpec("_P")
_R = TypeVar("_R")


def converted(**schemas: SchemaNode) -> Callable[[Callable[_P, _R]], Callable[_P, _R]]:
    """Decorator: convert the named parameters before each call.

    Raises:
        TypeError: at decoration time, if a schema names an unknown parameter.
        ArgumentConversionFailed: at call time, if an argument does not convert.
    """

    def decorator(func: Callable[_P, _R]) -> Callable[_P, _R]:
        signature = inspect.signature(func)
        unknown = sorted(set(schemas) - set(signature.parameters))
        if unknown:
            msg = f"{func.__qualname__}() has no parameter(s) {unknown}"
            raise TypeError(msg)

        matchers = {name: to_matcher(schema) for name, schema in schemas.items()}

        @functools.wraps(func)
        def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
            bound = signature.bind_partial(*args, **kwargs)
            for name, matcher in matchers.items():
                try:
                    value: Any = convert_leaf(matcher, bound.arguments.get(name, MISSING))
                except ConversionError as err:
                    raise ArgumentConversionFailed(name, err) from err
                if is_missing(value):
                    bound.arguments.pop(name, None)
                else:
                    bound.arguments[name] = value
            return func(*bound.args, **bound.kwargs)

        return wrapper

    return decorator

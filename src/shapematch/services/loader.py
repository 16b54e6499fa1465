"""Loading schema references and JSON payloads.

A schema reference has the form ``package.module:NAME``; the attribute may be
dotted (``module:Outer.SCHEMA``).  Search paths are prepended to ``sys.path``
only for the duration of the import.
"""

from __future__ import annotations

import importlib
import json
import sys
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import structlog

from shapematch.domain.schema import SchemaNode

log = structlog.get_logger(__name__)


class SchemaReferenceError(LookupError):
    """A ``module:attribute`` reference could not be resolved."""


class PayloadError(ValueError):
    """A payload could not be decoded."""


@contextmanager
def _search_paths(paths: Sequence[Path]) -> Iterator[None]:
    added = [str(p) for p in paths if str(p) not in sys.path]
    sys.path[:0] = added
    try:
        yield
    finally:
        for entry in added:
            if entry in sys.path:
                sys.path.remove(entry)


def load_schema(reference: str, search_paths: Sequence[Path] = ()) -> SchemaNode:
    """Import the schema node named by *reference*.

    Raises:
        SchemaReferenceError: if the reference is malformed, the module
            cannot be imported, or the attribute does not exist.
    """
    module_name, sep, attr_path = reference.partition(":")
    if not sep or not module_name or not attr_path:
        msg = f"Invalid schema reference {reference!r}; expected 'module:NAME'"
        raise SchemaReferenceError(msg)

    with _search_paths(search_paths):
        try:
            target: Any = importlib.import_module(module_name)
        except ImportError as exc:
            msg = f"Cannot import module {module_name!r}: {exc}"
            raise SchemaReferenceError(msg) from exc

    for part in attr_path.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            msg = f"Module {module_name!r} has no attribute {attr_path!r}"
            raise SchemaReferenceError(msg) from exc

    log.debug("schema.loaded", reference=reference)
    return target


def load_payload(text: str) -> Any:
    """Decode a JSON payload.

    Raises:
        PayloadError: if *text* is not valid JSON.
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        msg = f"Invalid JSON payload: {exc}"
        raise PayloadError(msg) from exc

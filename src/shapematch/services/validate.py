"""ValidationService — run a schema against a decoded payload.

Three modes mirror the matcher operations:

- ``convert``: canonical value, or a ``CONVERSION_FAILED`` error with the
  failing path
- ``match``: strict predicate, no coercion
- ``loose``: coercion-tolerant predicate

A predicate that returns False is still a successful run; callers decide
what a mismatch means for them.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum
from pathlib import Path
from typing import Any

import structlog

from shapematch.domain.errors import ConversionError, format_path
from shapematch.domain.matchers import Matcher, convert_leaf, to_matcher
from shapematch.domain.schema import SchemaNode, is_missing
from shapematch.services.loader import (
    PayloadError,
    SchemaReferenceError,
    load_payload,
    load_schema,
)
from shapematch.services.result import ServiceError, ServiceResult

log = structlog.get_logger(__name__)


class MatchMode(StrEnum):
    """Which matcher operation a validation run performs."""

    CONVERT = "convert"
    MATCH = "match"
    LOOSE = "loose"


_MODE_OPS: dict[MatchMode, str] = {
    MatchMode.CONVERT: "convert",
    MatchMode.MATCH: "match",
    MatchMode.LOOSE: "loose_match",
}


def conversion_error_detail(err: ConversionError) -> dict[str, Any]:
    """Flatten a wrapped ConversionError into a JSON-friendly dict."""
    return {
        "path": format_path(err.path),
        "segments": list(err.path),
        "reason": err.reason,
    }


class ValidationService:
    """Validate and convert payloads against schema nodes.

    *search_paths* are used when schemas are given by ``module:NAME``
    reference (see :meth:`check_reference`).
    """

    def __init__(self, search_paths: Sequence[Path] = ()) -> None:
        self._search_paths = tuple(search_paths)

    def convert(self, schema: SchemaNode, payload: Any) -> ServiceResult:
        """Convert *payload*; failures carry the failing path in ``error.detail``."""
        matcher = to_matcher(schema)
        try:
            value = convert_leaf(matcher, payload)
        except ConversionError as err:
            detail = conversion_error_detail(err)
            log.debug("convert.failed", **detail)
            return ServiceResult(
                ok=False,
                op="convert",
                error=ServiceError(code="CONVERSION_FAILED", message=str(err), detail=detail),
            )

        log.debug("convert.ok")
        warnings: list[str] = []
        if is_missing(value):
            warnings.append("Payload is absent; optional schema produced no value")
            value = None
        return ServiceResult(ok=True, op="convert", data={"value": value}, warnings=warnings)

    def match(self, schema: SchemaNode, payload: Any) -> ServiceResult:
        """Strict match without coercion."""
        return self._predicate(MatchMode.MATCH, to_matcher(schema), payload)

    def loose_match(self, schema: SchemaNode, payload: Any) -> ServiceResult:
        """Coercion-tolerant match."""
        return self._predicate(MatchMode.LOOSE, to_matcher(schema), payload)

    def run(self, schema: SchemaNode, payload: Any, *, mode: MatchMode | str) -> ServiceResult:
        """Dispatch to :meth:`convert`, :meth:`match` or :meth:`loose_match`."""
        mode = MatchMode(mode)
        if mode is MatchMode.CONVERT:
            return self.convert(schema, payload)
        if mode is MatchMode.MATCH:
            return self.match(schema, payload)
        return self.loose_match(schema, payload)

    def describe(self, schema: SchemaNode) -> ServiceResult:
        """Render *schema* as compact text."""
        return ServiceResult(ok=True, op="describe", data={"schema": to_matcher(schema).describe()})

    def check_reference(
        self,
        reference: str,
        payload_text: str,
        *,
        mode: MatchMode | str = MatchMode.CONVERT,
    ) -> ServiceResult:
        """Load ``module:NAME`` and a JSON payload, then :meth:`run`."""
        op = _MODE_OPS[MatchMode(mode)]
        try:
            schema = load_schema(reference, self._search_paths)
        except SchemaReferenceError as exc:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="SCHEMA_NOT_FOUND",
                    message=str(exc),
                    detail={"reference": reference},
                ),
            )
        try:
            payload = load_payload(payload_text)
        except PayloadError as exc:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(code="PAYLOAD_INVALID", message=str(exc)),
            )

        result = self.run(schema, payload, mode=mode)
        meta = {**(result.meta or {}), "schema": reference, "mode": str(MatchMode(mode))}
        return result.model_copy(update={"meta": meta})

    def describe_reference(self, reference: str) -> ServiceResult:
        """Load ``module:NAME`` and :meth:`describe` it."""
        try:
            schema = load_schema(reference, self._search_paths)
        except SchemaReferenceError as exc:
            return ServiceResult(
                ok=False,
                op="describe",
                error=ServiceError(
                    code="SCHEMA_NOT_FOUND",
                    message=str(exc),
                    detail={"reference": reference},
                ),
            )
        return self.describe(schema)

    def _predicate(self, mode: MatchMode, matcher: Matcher[Any], payload: Any) -> ServiceResult:
        matched = matcher.match(payload) if mode is MatchMode.MATCH else matcher.match_loose(payload)
        log.debug("match.done", mode=str(mode), matched=matched)
        return ServiceResult(ok=True, op=_MODE_OPS[mode], data={"matched": matched})

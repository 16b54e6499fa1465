"""Tests for result formatting in JSON, quiet, and Rich modes."""

import json

from shapematch.output.formatters import OutputSettings, format_result
from shapematch.services.result import ServiceError, ServiceResult

CONVERTED = ServiceResult(ok=True, op="convert", data={"value": {"a": 1}}, meta={"mode": "convert"})
NO_MATCH = ServiceResult(ok=True, op="match", data={"matched": False})
FAILED = ServiceResult(
    ok=False,
    op="convert",
    error=ServiceError(
        code="CONVERSION_FAILED",
        message="convert failed on property a due to cannot convert 'x' to number",
        detail={"path": "a", "segments": ["a"], "reason": "cannot convert 'x' to number"},
    ),
)


class TestJson:
    def test_round_trips_model(self) -> None:
        out = format_result(CONVERTED, settings=OutputSettings(json_output=True))
        assert json.loads(out)["data"] == {"value": {"a": 1}}

    def test_json_wins_over_quiet(self) -> None:
        out = format_result(NO_MATCH, settings=OutputSettings(json_output=True, quiet=True))
        assert json.loads(out)["op"] == "match"


class TestQuiet:
    def test_value(self) -> None:
        assert format_result(CONVERTED, settings=OutputSettings(quiet=True)) == '{"a":1}'

    def test_matched_flag(self) -> None:
        assert format_result(NO_MATCH, settings=OutputSettings(quiet=True)) == "false"

    def test_error(self) -> None:
        out = format_result(FAILED, settings=OutputSettings(quiet=True))
        assert out.startswith("ERROR: convert")


class TestRich:
    def test_convert(self) -> None:
        out = format_result(CONVERTED)
        assert "OK" in out
        assert '{"a":1}' in out
        assert "meta" not in out

    def test_verbose_shows_meta(self) -> None:
        out = format_result(CONVERTED, settings=OutputSettings(verbose=True))
        assert "mode: convert" in out

    def test_no_match(self) -> None:
        assert "NO MATCH" in format_result(NO_MATCH)

    def test_error_shows_path_and_reason(self) -> None:
        out = format_result(FAILED)
        assert "ERROR" in out
        assert "at: a" in out
        assert "reason: cannot convert 'x' to number" in out
        assert "segments" not in out

    def test_verbose_error_shows_all_detail(self) -> None:
        out = format_result(FAILED, settings=OutputSettings(verbose=True))
        assert "segments" in out

    def test_describe(self) -> None:
        result = ServiceResult(ok=True, op="describe", data={"schema": "{a: [str]}"})
        assert format_result(result) == "{a: [str]}"

    def test_generic_fallback(self) -> None:
        result = ServiceResult(ok=True, op="other", data={"k": [1, 2], "n": 3})
        out = format_result(result)
        assert "k: [1,2]" in out
        assert "n: 3" in out

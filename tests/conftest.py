"""Shared pytest fixtures for shapematch tests."""

from __future__ import annotations

import sys
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

SCHEMA_MODULE = "sample_schemas"

SCHEMA_SOURCE = '''\
from shapematch import optional

USER = {"name": str, "age": int, "admin": optional(bool), "tags": [str]}
ORDER = {"id": int, "lines": [{"sku": str, "qty": int}]}
'''


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def schema_dir(tmp_path: Path) -> Generator[Path]:
    """Directory holding an importable ``sample_schemas`` module.

    The module is evicted from ``sys.modules`` afterwards so each test
    imports its own copy.
    """
    schemas = tmp_path / "schemas"
    schemas.mkdir()
    (schemas / f"{SCHEMA_MODULE}.py").write_text(SCHEMA_SOURCE, encoding="utf-8")
    try:
        yield schemas
    finally:
        sys.modules.pop(SCHEMA_MODULE, None)


@pytest.fixture
def _isolated_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory with no config overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_project")``.
    """
    monkeypatch.delenv("SHAPEMATCH_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)

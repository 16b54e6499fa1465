"""Tests for the root CLI group."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from shapematch import __version__
from shapematch.cli import cli


@pytest.mark.usefixtures("_isolated_project")
class TestRootCli:
    def test_help_without_subcommand(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "check" in result.output
        assert "describe" in result.output

    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_invalid_config_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "shapematch.toml").write_text("[schemas\n", encoding="utf-8")
        result = cli_runner.invoke(cli, ["describe", "json:JSONDecoder"])
        assert result.exit_code == 1
        assert "Invalid TOML" in result.stderr

    def test_describe_class_schema(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["describe", "json:JSONDecoder"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "JSONDecoder"

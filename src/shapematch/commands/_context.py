"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``.  Centralizes result emission (stdout/stderr routing
and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from shapematch.config.logging import configure_logging
from shapematch.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from shapematch.config.settings import ShapematchSettings
    from shapematch.services.result import ServiceResult
    from shapematch.services.validate import ValidationService


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: ShapematchSettings) -> None:
        self.settings = settings
        configure_logging(
            verbose=settings.verbose,
            quiet=settings.quiet,
            log_json=settings.log_json,
        )

    def validation_service(self, extra_paths: tuple[str, ...] = ()) -> ValidationService:
        """A ValidationService over configured plus *extra_paths* search paths."""
        from shapematch.services.validate import ValidationService

        return ValidationService(self.settings.resolved_search_paths(extra_paths))

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            if output:
                click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

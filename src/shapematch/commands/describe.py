"""Command: print a compact rendering of a schema."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from shapematch.commands._base import SmCommand, schema_path_option

if TYPE_CHECKING:
    from shapematch.commands._context import AppContext


@click.command(
    cls=SmCommand,
    examples="""\
  shapematch describe myapp.schemas:USER
  shapematch --json describe schemas:ORDER -I ./schemas""",
)
@click.argument("schema_ref")
@schema_path_option
@click.pass_obj
def describe(app: AppContext, schema_ref: str, schema_paths: tuple[str, ...]) -> None:
    """Show the shape SCHEMA_REF (module:NAME) describes."""
    app.emit(app.validation_service(schema_paths).describe_reference(schema_ref))

"""Command: validate and convert a JSON payload against a schema."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from shapematch.commands._base import SmCommand, schema_path_option

if TYPE_CHECKING:
    from shapematch.commands._context import AppContext


@click.command(
    cls=SmCommand,
    examples="""\
  shapematch check myapp.schemas:USER payload.json
  cat payload.json | shapematch check myapp.schemas:USER
  shapematch check myapp.schemas:USER payload.json --mode match
  shapematch --json check schemas:ORDER order.json -I ./schemas""",
)
@click.argument("schema_ref")
@click.argument(
    "payload",
    default="-",
    type=click.Path(exists=True, dir_okay=False, allow_dash=True),
)
@click.option(
    "--mode",
    type=click.Choice(["convert", "match", "loose"]),
    default="convert",
    help="convert (default), strict match, or loose match.",
)
@schema_path_option
@click.pass_obj
def check(
    app: AppContext,
    schema_ref: str,
    payload: str,
    mode: str,
    schema_paths: tuple[str, ...],
) -> None:
    """Check PAYLOAD (JSON file, or - for stdin) against SCHEMA_REF (module:NAME)."""
    if payload == "-":
        text = click.get_text_stream("stdin", encoding=app.settings.payload.encoding).read()
    else:
        text = Path(payload).read_text(encoding=app.settings.payload.encoding)

    svc = app.validation_service(schema_paths)
    result = svc.check_reference(schema_ref, text, mode=mode)
    app.emit(result)
    if result.data.get("matched") is False:
        raise SystemExit(1)

"""Subcommand modules for shapematch.

register_commands() uses deferred imports to keep ``shapematch --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all commands on the root CLI group."""
    from shapematch.commands.check import check
    from shapematch.commands.describe import describe

    cli.add_command(check)
    cli.add_command(describe)

"""CLI subcommand registration."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all subcommands on the CLI group."""
    from rtgate.cli_commands.activation import activate, deactivate
    from rtgate.cli_commands.check import check
    from rtgate.cli_commands.parse import parse_cmd
    from rtgate.cli_commands.status import status

    cli.add_command(parse_cmd)
    cli.add_command(status)
    cli.add_command(check)
    cli.add_command(deactivate)
    cli.add_command(activate)

"""``rtgate parse`` -- show the major version of version strings."""

from __future__ import annotations

import click

from rtgate.cli_commands._output import console, print_versions_table
from rtgate.version.oracle import parse_major_version


@click.command("parse")
@click.argument("versions", nargs=-1, required=True)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
def parse_cmd(versions: tuple[str, ...], as_json: bool) -> None:
    """Print the major version of each VERSIONS string.

    Unparseable strings report 0.
    """
    parsed = [(raw, parse_major_version(raw)) for raw in versions]

    if as_json:
        console.print_json(data={raw: major for raw, major in parsed})
        return

    print_versions_table(parsed)

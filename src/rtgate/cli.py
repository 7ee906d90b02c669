"""rtgate CLI entrypoint."""

from __future__ import annotations

import click

from rtgate import __version__


@click.group()
@click.version_option(version=__version__, prog_name="rtgate")
def main() -> None:
    """rtgate -- runtime-compatibility gatekeeper."""


# Register subcommands
from rtgate.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()

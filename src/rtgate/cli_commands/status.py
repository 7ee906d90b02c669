"""``rtgate status`` -- runtime compliance and resource activation state."""

from __future__ import annotations

import click

from rtgate.adapter.adapter import CapabilityAdapter
from rtgate.cli_commands._common import configure_logging, load_config
from rtgate.cli_commands._output import print_status
from rtgate.version.oracle import get_current_major_version


@click.command()
@click.argument("config_file", type=click.Path(exists=True))
@click.option("--location", default=None, help="Override the collection location.")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def status(config_file: str, location: str | None, as_json: bool, verbose: bool) -> None:
    """Show whether the runtime is compliant and the resource is active."""
    configure_logging(verbose)
    config = load_config(config_file, location=location)

    current = get_current_major_version(config.environment.build())
    adapter = CapabilityAdapter(config.collection.factory, shapes=config.collection.shapes)
    state = adapter.query_is_active(config.resource, config.collection.location)

    print_status(state, current, config.required_version, as_json=as_json)

"""``rtgate activate`` / ``rtgate deactivate`` -- toggle the governing resource."""

from __future__ import annotations

import sys

import click

from rtgate.adapter.adapter import CapabilityAdapter
from rtgate.adapter.models import OutcomeKind
from rtgate.cli_commands._common import configure_logging, load_config
from rtgate.cli_commands._output import print_outcome


def _negotiate(
    config_file: str,
    desired_active: bool,
    location: str | None,
    as_json: bool,
    verbose: bool,
) -> None:
    configure_logging(verbose)
    config = load_config(config_file, location=location)

    adapter = CapabilityAdapter(config.collection.factory, shapes=config.collection.shapes)
    outcome = adapter.negotiate_activation(
        config.resource, desired_active, config.collection.location
    )
    print_outcome(outcome, as_json=as_json)

    if outcome.kind not in (OutcomeKind.APPLIED, OutcomeKind.APPLIED_NOT_PERSISTED):
        sys.exit(1)


_location_option = click.option("--location", default=None, help="Override the collection location.")
_json_option = click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
_verbose_option = click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")


@click.command()
@click.argument("config_file", type=click.Path(exists=True))
@_location_option
@_json_option
@_verbose_option
def deactivate(config_file: str, location: str | None, as_json: bool, verbose: bool) -> None:
    """Deactivate the resource named in CONFIG_FILE."""
    _negotiate(config_file, False, location, as_json, verbose)


@click.command()
@click.argument("config_file", type=click.Path(exists=True))
@_location_option
@_json_option
@_verbose_option
def activate(config_file: str, location: str | None, as_json: bool, verbose: bool) -> None:
    """Activate the resource named in CONFIG_FILE."""
    _negotiate(config_file, True, location, as_json, verbose)

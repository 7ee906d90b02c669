"""Helpers shared by the CLI subcommands."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from rtgate.cli_commands._output import console
from rtgate.config.loader import ConfigLoader
from rtgate.config.models import GateConfig  # noqa: TC001
from rtgate.errors import ConfigValidationError


def load_config(config_file: str, *, location: str | None = None) -> GateConfig:
    """Load *config_file*, exiting with status 1 on validation errors.

    *location* overrides ``collection.location`` when given.
    """
    try:
        config = ConfigLoader(Path(config_file)).load()
    except ConfigValidationError as exc:
        console.print(f"[red]Configuration error:[/red] {exc}")
        sys.exit(1)

    if location:
        config.collection.location = location
    return config


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr; DEBUG when *verbose*."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

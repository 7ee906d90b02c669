"""``rtgate check`` -- run the startup compatibility gate."""

from __future__ import annotations

import asyncio

import click

from rtgate.cli_commands._common import configure_logging, load_config
from rtgate.cli_commands._output import console, print_report
from rtgate.gate.gate import CompatibilityGate
from rtgate.gate.notifier import ConsoleNotifier
from rtgate.gate.prompter import CLIPrompter


@click.command()
@click.argument("config_file", type=click.Path(exists=True))
@click.option("--location", default=None, help="Override the collection location.")
@click.option(
    "--interactive/--headless",
    default=True,
    help="Prompt the user, or only log when the runtime is too old.",
)
@click.option("--no-delay", is_flag=True, help="Show the prompt without the startup delay.")
@click.option("--json", "as_json", is_flag=True, help="Output the report as JSON.")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.option("--telemetry", is_flag=True, help="Enable telemetry.")
def check(
    config_file: str,
    location: str | None,
    interactive: bool,
    no_delay: bool,
    as_json: bool,
    verbose: bool,
    telemetry: bool,
) -> None:
    """Check the runtime version against CONFIG_FILE and act on the result."""
    configure_logging(verbose)
    config = load_config(config_file, location=location)

    if no_delay:
        config.prompt_delay = 0

    if telemetry or (config.telemetry is not None and config.telemetry.enabled):
        from rtgate.utils.telemetry import configure_telemetry

        endpoint = config.telemetry.otlp_endpoint if config.telemetry else None
        try:
            configure_telemetry(export_to_console=verbose, otlp_endpoint=endpoint)
        except ImportError as exc:
            console.print(f"[yellow]Telemetry disabled:[/yellow] {exc}")

    prompter = CLIPrompter(timeout=config.prompt_timeout, console=console) if interactive else None
    gate = CompatibilityGate(
        config,
        prompter=prompter,
        notifier=ConsoleNotifier(console),
    )
    report = asyncio.run(gate.run())

    print_report(report, as_json=as_json)

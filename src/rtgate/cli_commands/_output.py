"""Shared CLI output formatters."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from rtgate.adapter.models import ActivationStatus, NegotiationOutcome, OutcomeKind  # noqa: TC001
from rtgate.gate.models import GateReport  # noqa: TC001

console = Console()

_OUTCOME_STYLE = {
    OutcomeKind.APPLIED: "green",
    OutcomeKind.APPLIED_NOT_PERSISTED: "yellow",
    OutcomeKind.RESOURCE_NOT_FOUND: "red",
    OutcomeKind.FAILED: "red",
}


def print_versions_table(parsed: list[tuple[str, int]]) -> None:
    """Pretty-print raw version strings next to their major versions."""
    table = Table(title="Major Versions")
    table.add_column("Version string", style="cyan")
    table.add_column("Major", justify="right")

    for raw, major in parsed:
        table.add_row(raw or "(empty)", str(major))

    console.print(table)


def print_outcome(outcome: NegotiationOutcome, *, as_json: bool = False) -> None:
    """Pretty-print a negotiation outcome."""
    if as_json:
        console.print_json(outcome.model_dump_json())
        return

    style = _OUTCOME_STYLE[outcome.kind]
    console.print(f"[{style}]{outcome.kind.value}[/{style}]  {outcome.resource}")
    if outcome.reason:
        console.print(f"  Reason: {outcome.reason}")
    if outcome.error is not None:
        console.print(f"  Error: {outcome.error.value}")
    _print_shapes(outcome.shapes)


def print_status(
    status: ActivationStatus,
    current_version: int,
    required_version: int,
    *,
    as_json: bool = False,
) -> None:
    """Pretty-print runtime compliance and resource activation."""
    compliant = current_version >= required_version
    if as_json:
        data = status.model_dump(mode="json")
        data.update(
            current_version=current_version,
            required_version=required_version,
            compliant=compliant,
        )
        console.print_json(data=data)
        return

    verdict = "[green]compliant[/green]" if compliant else "[red]too old[/red]"
    console.print(f"\n[bold]Runtime:[/bold] {current_version} (requires {required_version}) {verdict}")
    state = "active" if status.active else "inactive"
    console.print(f"[bold]Resource:[/bold] {status.resource} is {state}")
    if not status.determined:
        reason = status.reason or (status.outcome.value if status.outcome else "unknown")
        console.print(f"  [yellow]State undetermined, assuming active[/yellow] ({reason})")
    _print_shapes(status.shapes)


def print_report(report: GateReport, *, as_json: bool = False) -> None:
    """Pretty-print a gate run."""
    if as_json:
        console.print_json(report.model_dump_json())
        return

    console.print("\n[bold]Gate Report[/bold]")
    console.print(f"  State: {report.state.value}")
    console.print(f"  Runtime: {report.current_version} (requires {report.required_version})")
    console.print(f"  Resource: {report.resource}")
    if report.outcome is not None:
        console.print(f"  Outcome: {report.outcome.kind.value}")
        console.print(f"  Reviewer launched: {'yes' if report.reviewer_launched else 'no'}")


def _print_shapes(shapes: dict[str, str]) -> None:
    if not shapes:
        return
    console.print("  Shapes: " + ", ".join(f"{k}={v}" for k, v in shapes.items()))

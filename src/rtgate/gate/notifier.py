"""Notifier protocol and the rich console implementation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from rich.console import Console
from rich.panel import Panel

if TYPE_CHECKING:
    from rtgate.gate.models import GateMessage


@runtime_checkable
class Notifier(Protocol):
    """Displays a terminal gate message."""

    def notify(self, message: GateMessage) -> None:
        """Show *message* to the user."""
        ...


class ConsoleNotifier:
    """Prints gate messages as rich panels.

    Satisfies the :class:`Notifier` protocol.
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def notify(self, message: GateMessage) -> None:
        body = message.body
        if message.steps:
            body += "\n\n" + "\n".join(
                f"  {index}. {step}" for index, step in enumerate(message.steps, start=1)
            )
        style = "red" if message.warning else "blue"
        self._console.print(Panel(body, title=message.title, border_style=style))

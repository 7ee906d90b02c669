"""Tests for ConsoleNotifier."""

import io

from rich.console import Console

from rtgate.gate.models import GateMessage, MessageKind
from rtgate.gate.notifier import ConsoleNotifier, Notifier


class TestConsoleNotifier:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(ConsoleNotifier(), Notifier)

    def test_prints_title_body_and_steps(self) -> None:
        out = io.StringIO()
        notifier = ConsoleNotifier(Console(file=out, width=120))

        notifier.notify(
            GateMessage(
                kind=MessageKind.MANUAL_STEP,
                title="Manual Step Required",
                body="Could not write.",
                steps=["Run the updater", "Apply"],
            )
        )

        text = out.getvalue()
        assert "Manual Step Required" in text
        assert "Could not write." in text
        assert "1. Run the updater" in text
        assert "2. Apply" in text

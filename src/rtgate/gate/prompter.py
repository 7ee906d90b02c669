"""Prompter protocol and implementations.

- ``Prompter`` -- runtime-checkable protocol asking the user to choose.
- ``CLIPrompter`` -- prompts via stdin/stdout.
- ``AutoPrompter`` -- always answers with a fixed choice (for testing/CI).
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from rich.console import Console
from rich.panel import Panel

from rtgate.gate.models import PromptChoice

if TYPE_CHECKING:
    from rtgate.gate.models import UpgradeNotice

logger = logging.getLogger(__name__)


@runtime_checkable
class Prompter(Protocol):
    """Shows the upgrade notice and returns the user's choice."""

    async def ask(self, notice: UpgradeNotice) -> PromptChoice:
        """Present *notice* and return the choice."""
        ...


class AutoPrompter:
    """Answers every prompt with the same choice.

    Satisfies the :class:`Prompter` protocol.
    """

    def __init__(self, choice: PromptChoice = PromptChoice.REMIND) -> None:
        self._choice = choice

    async def ask(self, notice: UpgradeNotice) -> PromptChoice:
        logger.debug("AutoPrompter: answering %s to %r", self._choice.value, notice.title)
        return self._choice


class CLIPrompter:
    """Prompts the user at the terminal.

    Satisfies the :class:`Prompter` protocol.

    Uses ``loop.run_in_executor(None, input)`` to read from stdin without
    blocking the event loop.  No answer within *timeout*, or a closed stdin,
    counts as "remind".
    """

    def __init__(self, *, timeout: float = 300.0, console: Console | None = None) -> None:
        self._timeout = timeout
        self._console = console or Console()

    async def ask(self, notice: UpgradeNotice) -> PromptChoice:
        self._print_notice(notice)

        loop = asyncio.get_running_loop()
        try:
            answer: str = await asyncio.wait_for(
                loop.run_in_executor(None, self._read_input),
                timeout=self._timeout,
            )
        except TimeoutError:
            logger.info("No answer within %ss, reminding at next start", self._timeout)
            return PromptChoice.REMIND
        except EOFError:
            logger.info("Input closed without an answer, reminding at next start")
            return PromptChoice.REMIND

        if answer.strip() == "1":
            return PromptChoice.DEACTIVATE
        return PromptChoice.REMIND

    def _print_notice(self, notice: UpgradeNotice) -> None:
        """Print the notice and the two choices."""
        self._console.print(Panel(notice.body, title=notice.title, border_style="yellow"))
        for label, url in notice.links.items():
            self._console.print(f"  {label}: [link={url}]{url}[/link]")
        self._console.print(f"\n  [bold]1[/bold]) {notice.deactivate_label}")
        self._console.print(f"  [bold]2[/bold]) {notice.remind_label} (default)")
        self._console.print("  Choice [1/2]: ", end="")

    @staticmethod
    def _read_input() -> str:
        """Blocking read from stdin (run in executor)."""
        return input()

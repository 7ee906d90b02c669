"""Reviewer hand-off -- launch the external tool that applies staged changes.

Launching is fire-and-forget: failures are logged and reported as ``False``
so the gate can fall back to an instructional message.
"""

from __future__ import annotations

import logging
import subprocess
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class Reviewer(Protocol):
    """Starts the external review tool."""

    def launch(self) -> bool:
        """Start the tool; return ``False`` if it could not be started."""
        ...


class NullReviewer:
    """No reviewer available -- always reports a failed launch."""

    def launch(self) -> bool:
        return False


class CommandReviewer:
    """Spawns the reviewer as a detached process.

    Satisfies the :class:`Reviewer` protocol.  The process is not waited on.
    """

    def __init__(self, command: list[str]) -> None:
        self._command = command

    @property
    def command(self) -> list[str]:
        return list(self._command)

    def launch(self) -> bool:
        if not self._command:
            logger.debug("No reviewer command configured")
            return False
        try:
            subprocess.Popen(
                self._command,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except (OSError, ValueError) as exc:
            logger.debug("Could not launch reviewer %s: %s", self._command, exc)
            return False
        logger.info("Launched reviewer: %s", " ".join(self._command))
        return True

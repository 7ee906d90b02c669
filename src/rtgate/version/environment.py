"""Environment accessors -- where the raw version string comes from.

The oracle never reads process-wide state itself; an accessor is threaded in
instead so callers (and tests) decide what "the running environment" is.
"""

from __future__ import annotations

import logging
import os
import re
import subprocess
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)

_QUOTED_VERSION = re.compile(r'"([^"]+)"')
_BARE_VERSION = re.compile(r"\b(\d[\w.\-+]*)")


@runtime_checkable
class EnvironmentAccessor(Protocol):
    """Supplies the running environment's raw version string."""

    def current_version_string(self) -> str | None:
        """Return the version string, or ``None`` if it cannot be read."""
        ...


class StaticEnvironment:
    """Reports a fixed version string."""

    def __init__(self, version: str | None) -> None:
        self._version = version

    def current_version_string(self) -> str | None:
        return self._version


class EnvironEnvironment:
    """Reads the version string from an environment variable."""

    def __init__(self, variable: str) -> None:
        self._variable = variable

    def current_version_string(self) -> str | None:
        return os.environ.get(self._variable)


class CommandEnvironment:
    """Runs a version command and extracts the version it prints.

    Handles the ``java -version`` layout (``openjdk version "21.0.2" ...``,
    written to stderr) by taking the first double-quoted token; otherwise the
    first token starting with a digit.  Any failure yields ``None``.
    """

    def __init__(self, command: list[str], *, timeout: float = 10.0) -> None:
        self._command = command
        self._timeout = timeout

    def current_version_string(self) -> str | None:
        try:
            proc = subprocess.run(
                self._command,
                capture_output=True,
                text=True,
                timeout=self._timeout,
                check=False,
            )
        except (OSError, subprocess.TimeoutExpired) as exc:
            logger.debug("Version command %s failed: %s", self._command, exc)
            return None

        return extract_version(proc.stderr + "\n" + proc.stdout)


def extract_version(output: str) -> str | None:
    """Pull a version token out of free-form command output."""
    match = _QUOTED_VERSION.search(output)
    if match:
        return match.group(1)
    match = _BARE_VERSION.search(output)
    return match.group(1) if match else None

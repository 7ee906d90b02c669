"""VersionOracle: classify a runtime by its major version.

Two historical version layouts are understood:

* legacy two-part scheme -- ``"1.8.0_392"`` yields ``8``;
* modern scheme -- ``"9"``, ``"11.0.21"``, ``"22-ea"`` yield ``9``, ``11``, ``22``.

Anything missing or unparseable yields ``0`` ("oldest possible"), which is
itself meaningful: an unknown runtime is treated as too old.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rtgate.version.models import VersionSpec

if TYPE_CHECKING:
    from rtgate.version.environment import EnvironmentAccessor

logger = logging.getLogger(__name__)

_LEGACY_PREFIX = "1."
_MAX_MAJOR = 2**31 - 1


def parse_major_version(raw: str | None) -> int:
    """Return the major version encoded in *raw*, or ``0``.

    Never raises.
    """
    if not raw:
        return 0

    if raw.startswith(_LEGACY_PREFIX):
        dot = raw.find(".", 2)
        minor = raw[2:dot] if dot > 2 else raw[2:]
        # int() would also accept signs, blanks and "_" separators.
        return _to_int(minor) if minor.isdecimal() else 0

    dot = raw.find(".")
    head = raw[:dot] if dot > 0 else raw
    digits: list[str] = []
    for char in head:
        if not char.isdecimal():
            break
        digits.append(char)
    return _to_int("".join(digits)) if digits else 0


def _to_int(digits: str) -> int:
    """Convert a run of decimal digits, yielding 0 when it does not fit."""
    try:
        value = int(digits)
    except ValueError:
        # Over the interpreter's digit limit for str -> int.
        return 0
    return value if value <= _MAX_MAJOR else 0


def parse_version(raw: str | None) -> VersionSpec:
    """Parse *raw* into a :class:`VersionSpec`."""
    return VersionSpec(major=parse_major_version(raw))


def get_current_major_version(accessor: EnvironmentAccessor) -> int:
    """Read the live version string through *accessor* and parse it.

    Not cached: each call re-reads the environment.
    """
    raw = accessor.current_version_string()
    major = parse_major_version(raw)
    logger.debug("Environment reports version %r (major %d)", raw, major)
    return major

"""Capability probes -- ordered alternatives for one decision point.

A :class:`Probe` pairs a cheap structural check (``available``) with the call
that uses that shape (``invoke``).  :func:`first_available` walks an ordered
list and returns the first probe whose shape is present; "shape unavailable"
is a plain ``False``, never an exception.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any, Callable

from rtgate.errors import StructuralIncompatibilityError


@dataclass(frozen=True)
class Probe:
    """One candidate API shape."""

    name: str
    available: Callable[[], bool]
    invoke: Callable[[], Any]


def first_available(decision: str, probes: list[Probe]) -> Probe:
    """Return the first probe whose shape is present.

    Raises:
        StructuralIncompatibilityError: If no probe is available.
    """
    for probe in probes:
        if probe.available():
            return probe
    raise StructuralIncompatibilityError(decision, [p.name for p in probes])


def accepts(func: Any, *args: Any, **kwargs: Any) -> bool:
    """Check whether *func* can be called with the given arguments.

    Binds against the signature without calling.  Callables whose signature
    cannot be introspected (some builtins and extension types) are assumed
    to accept the call.
    """
    if not callable(func):
        return False
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return True
    try:
        signature.bind(*args, **kwargs)
    except TypeError:
        return False
    return True


def method(obj: Any, name: str) -> Any | None:
    """Return the bound method *name* of *obj*, or ``None`` if absent."""
    candidate = getattr(obj, name, None)
    return candidate if callable(candidate) else None


def has_field(obj: Any, name: str) -> bool:
    """Whether *obj* carries a plain (non-callable) attribute *name*."""
    try:
        value = getattr(obj, name)
    except AttributeError:
        return False
    return not callable(value)

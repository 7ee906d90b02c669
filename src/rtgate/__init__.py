"""rtgate -- runtime-compatibility gatekeeper."""

from __future__ import annotations

from typing import TYPE_CHECKING

__version__ = "0.1.0"

if TYPE_CHECKING:
    from rtgate.adapter.adapter import CapabilityAdapter as CapabilityAdapter
    from rtgate.gate.gate import CompatibilityGate as CompatibilityGate
    from rtgate.version.oracle import parse_major_version as parse_major_version

_LAZY_EXPORTS = {
    "CapabilityAdapter": "rtgate.adapter.adapter",
    "CompatibilityGate": "rtgate.gate.gate",
    "parse_major_version": "rtgate.version.oracle",
}


def __getattr__(name: str) -> object:
    module_path = _LAZY_EXPORTS.get(name)
    if module_path is not None:
        import importlib

        mod = importlib.import_module(module_path)
        return getattr(mod, name)
    raise AttributeError(f"module 'rtgate' has no attribute {name!r}")

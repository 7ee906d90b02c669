"""Capability adapter -- negotiate activation with a shape-varying collection."""

from rtgate.adapter.adapter import CapabilityAdapter, load_factory
from rtgate.adapter.models import (
    ActivationStatus,
    ErrorKind,
    NegotiationOutcome,
    OutcomeKind,
    ShapeNames,
)
from rtgate.adapter.probes import Probe, accepts, first_available

__all__ = [
    "ActivationStatus",
    "CapabilityAdapter",
    "ErrorKind",
    "NegotiationOutcome",
    "OutcomeKind",
    "Probe",
    "ShapeNames",
    "accepts",
    "first_available",
    "load_factory",
]

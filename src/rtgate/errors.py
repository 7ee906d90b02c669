"""Shared error types for the runtime gate.

The negotiation steps raise these internally; the adapter translates every
one of them into a :class:`~rtgate.adapter.models.NegotiationOutcome` so
nothing escapes to the host application.
"""


class RuntimeGateError(Exception):
    """Base error for all runtime gate failures."""


class ResourceNotFoundError(RuntimeGateError):
    """The named resource does not exist in the collection."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Resource not found: {name}")


class PersistenceError(RuntimeGateError):
    """The collection could not be written back to its storage."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__("Persistence failed" + (f": {detail}" if detail else ""))


class StructuralIncompatibilityError(RuntimeGateError):
    """None of the expected API shapes is exposed by the collaborator."""

    def __init__(self, decision: str, tried: list[str]) -> None:
        self.decision = decision
        self.tried = tried
        super().__init__(
            f"No compatible shape for '{decision}' (tried: {', '.join(tried) or 'none'})"
        )


class NegotiationError(RuntimeGateError):
    """Any other failure while talking to the collection."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__("Negotiation failed" + (f": {detail}" if detail else ""))


class ConfigValidationError(RuntimeGateError):
    """Raised when a gate configuration file fails parsing or validation."""

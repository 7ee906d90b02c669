"""Data models for the capability adapter."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class OutcomeKind(str, Enum):
    """Terminal result of a negotiation attempt."""

    APPLIED = "applied"
    APPLIED_NOT_PERSISTED = "applied_not_persisted"
    RESOURCE_NOT_FOUND = "resource_not_found"
    FAILED = "failed"


class ErrorKind(str, Enum):
    """Why an outcome is ``FAILED`` or ``APPLIED_NOT_PERSISTED``."""

    LOCATION_UNDETERMINABLE = "location_undeterminable"
    STRUCTURAL_INCOMPATIBILITY = "structural_incompatibility"
    PERSISTENCE = "persistence"
    UNKNOWN = "unknown"


class ShapeNames(BaseModel):
    """Method and attribute names probed on the external collection.

    The defaults describe a collection exposing ``read()``/``write()``,
    ``get_resource(name[, include_inactive])``, collection-level
    ``activate_resource``/``deactivate_resource``, and resources with
    ``set_active()``/``is_active()`` or a plain ``active`` attribute.
    """

    read: str = Field(default="read", description="Collection method that loads contents.")
    write: str = Field(default="write", description="Collection method that persists contents.")
    lookup: str = Field(default="get_resource", description="Collection method resolving a name.")
    activate: str = Field(
        default="activate_resource",
        description="Collection method activating a resource handle.",
    )
    deactivate: str = Field(
        default="deactivate_resource",
        description="Collection method deactivating a resource handle.",
    )
    set_active: str = Field(default="set_active", description="Resource setter taking a bool.")
    is_active: str = Field(default="is_active", description="Resource accessor returning a bool.")
    attribute: str = Field(default="active", description="Resource activation attribute.")


class NegotiationOutcome(BaseModel):
    """Result of one :meth:`CapabilityAdapter.negotiate_activation` call.

    ``shapes`` maps each decision point (``constructor``, ``lookup``,
    ``apply``) to the name of the probe that won it.
    """

    model_config = ConfigDict(frozen=True)

    kind: OutcomeKind
    resource: str
    desired_active: bool | None = None
    reason: str = Field(default="")
    error: ErrorKind | None = None
    shapes: dict[str, str] = Field(default_factory=dict)

    @property
    def applied(self) -> bool:
        """Whether the in-memory flag now holds the desired state."""
        return self.kind in (OutcomeKind.APPLIED, OutcomeKind.APPLIED_NOT_PERSISTED)

    @classmethod
    def failed(
        cls,
        resource: str,
        reason: str,
        *,
        error: ErrorKind = ErrorKind.UNKNOWN,
        desired_active: bool | None = None,
        shapes: dict[str, str] | None = None,
    ) -> NegotiationOutcome:
        return cls(
            kind=OutcomeKind.FAILED,
            resource=resource,
            desired_active=desired_active,
            reason=reason,
            error=error,
            shapes=dict(shapes or {}),
        )


class ActivationStatus(BaseModel):
    """Result of :meth:`CapabilityAdapter.query_is_active`.

    When the state cannot be read, ``active`` is ``True`` (fail open) and
    ``determined`` is ``False``; ``outcome`` then says why.
    """

    model_config = ConfigDict(frozen=True)

    resource: str
    active: bool
    determined: bool = True
    outcome: OutcomeKind | None = None
    reason: str = Field(default="")
    shapes: dict[str, str] = Field(default_factory=dict)

    def __bool__(self) -> bool:
        return self.active

    @classmethod
    def fail_open(
        cls,
        resource: str,
        outcome: OutcomeKind,
        reason: str = "",
        shapes: dict[str, str] | None = None,
    ) -> ActivationStatus:
        return cls(
            resource=resource,
            active=True,
            determined=False,
            outcome=outcome,
            reason=reason,
            shapes=dict(shapes or {}),
        )

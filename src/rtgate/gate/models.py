"""Data models for the compatibility gate."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from rtgate.adapter.models import NegotiationOutcome  # noqa: TC001


class GateState(str, Enum):
    """States of the startup compatibility check."""

    UNCHECKED = "unchecked"
    COMPLIANT = "compliant"
    NON_COMPLIANT = "non_compliant"
    SILENT = "silent"
    HEADLESS = "headless"
    PROMPTING = "prompting"
    REMINDED = "reminded"
    UNSUBSCRIBED = "unsubscribed"
    APPLIED = "applied"
    APPLIED_NOT_PERSISTED = "applied_not_persisted"
    FAILED = "failed"


class PromptChoice(str, Enum):
    """The two answers offered to the user."""

    DEACTIVATE = "deactivate"
    REMIND = "remind"


class MessageKind(str, Enum):
    """Terminal messages shown after a deactivation attempt."""

    REVIEWER_FALLBACK = "reviewer_fallback"
    MANUAL_STEP = "manual_step"
    MANUAL_UNSUBSCRIBE = "manual_unsubscribe"


class UpgradeNotice(BaseModel):
    """What the user is told when the runtime is too old."""

    title: str
    body: str
    current_version: int
    required_version: int
    links: dict[str, str] = Field(default_factory=dict)
    deactivate_label: str = "Deactivate"
    remind_label: str = "Keep Reminding Me at Startup"


class GateMessage(BaseModel):
    """A terminal message for the notifier."""

    kind: MessageKind
    title: str
    body: str
    steps: list[str] = Field(default_factory=list)
    warning: bool = False


class GateReport(BaseModel):
    """Summary of one gate run."""

    state: GateState
    current_version: int
    required_version: int
    resource: str
    outcome: NegotiationOutcome | None = None
    reviewer_launched: bool = False
    message: GateMessage | None = None

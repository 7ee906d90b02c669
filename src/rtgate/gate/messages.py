"""User-facing texts for the gate, built from a :class:`GateConfig`."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rtgate.gate.models import GateMessage, MessageKind, UpgradeNotice

if TYPE_CHECKING:
    from rtgate.config.models import GateConfig


def upgrade_notice(config: GateConfig, current_version: int) -> UpgradeNotice:
    """Explain that the runtime is too old and what to do about it."""
    runtime = config.runtime_name
    required = config.required_version
    paragraphs = [
        f"This installation is running {runtime} {current_version}, but "
        f"{config.product} now requires {runtime} {required} or newer. "
        f"{config.product} commands will not work in this installation.",
    ]
    if config.links.release_notes:
        paragraphs.append(
            f"Newer {config.product} versions bring many improvements. "
            f"See the release notes for details: {config.links.release_notes}"
        )
    distribution = config.recommended_distribution or f"an installation running {runtime} {required}"
    where = f" from {config.links.download}" if config.links.download else ""
    paragraphs.append(
        f"To continue using {config.product}, download {distribution}{where}, "
        f"then subscribe to the {config.resource} resource again."
    )
    closing = "Your existing data is not affected."
    if config.links.forum:
        closing += f" Questions? Visit {config.links.forum}"
    paragraphs.append(closing)

    links = {
        label: url
        for label, url in (
            ("Release notes", config.links.release_notes),
            ("Download", config.links.download),
            ("Forum", config.links.forum),
        )
        if url
    }
    return UpgradeNotice(
        title=f"{config.product} Requires {runtime} {required}",
        body="\n\n".join(paragraphs),
        current_version=current_version,
        required_version=required,
        links=links,
        deactivate_label=f"Unsubscribe from {config.resource}",
    )


def reviewer_fallback(config: GateConfig) -> GateMessage:
    """Shown when the reviewer could not be launched after a successful change."""
    reviewer = config.reviewer
    return GateMessage(
        kind=MessageKind.REVIEWER_FALLBACK,
        title=f"Run {reviewer.name} to Complete",
        body=(
            f"The {config.resource} resource has been deactivated. "
            f"Please run {reviewer.name} ({reviewer.menu_path}) and apply the "
            "pending changes to complete the removal."
        ),
    )


def manual_step(config: GateConfig) -> GateMessage:
    """Shown when the change could not be written (read-only storage)."""
    reviewer = config.reviewer
    return GateMessage(
        kind=MessageKind.MANUAL_STEP,
        title="Manual Step Required",
        body=(
            f"The {config.resource} resource could not be deactivated automatically "
            "(the installation appears to be on a read-only filesystem). "
            "Once the installation is in a writable directory:"
        ),
        steps=[
            f"Run {reviewer.name} ({reviewer.menu_path})",
            f"Deactivate {config.resource}",
            "Apply the pending changes",
        ],
    )


def manual_unsubscribe(config: GateConfig, reason: str) -> GateMessage:
    """Shown when automatic deactivation failed."""
    reviewer = config.reviewer
    return GateMessage(
        kind=MessageKind.MANUAL_UNSUBSCRIBE,
        title="Manual Unsubscription Required",
        body=(
            f"{reason}\n\nYou can unsubscribe manually via {reviewer.menu_path}, "
            f"then deactivate {config.resource}."
        ),
        warning=True,
    )

"""CompatibilityGate -- the startup check wiring oracle, adapter and UI.

State flow::

    UNCHECKED -> COMPLIANT
              -> NON_COMPLIANT -> SILENT       (resource already deactivated)
                               -> HEADLESS     (nobody to ask)
                               -> PROMPTING -> REMINDED
                                            -> UNSUBSCRIBED -> APPLIED
                                                            -> APPLIED_NOT_PERSISTED
                                                            -> FAILED

Declining is not remembered: the prompt returns at the next start.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from rtgate.adapter.adapter import CapabilityAdapter
from rtgate.adapter.models import ErrorKind, NegotiationOutcome, OutcomeKind
from rtgate.gate import messages
from rtgate.gate.models import GateMessage, GateReport, GateState, PromptChoice
from rtgate.gate.notifier import ConsoleNotifier
from rtgate.gate.reviewer import CommandReviewer
from rtgate.utils.telemetry import (
    ATTR_CURRENT_VERSION,
    ATTR_GATE_STATE,
    ATTR_REQUIRED_VERSION,
    ATTR_RESOURCE,
    get_tracer,
)
from rtgate.version.oracle import get_current_major_version

if TYPE_CHECKING:
    from rtgate.config.models import GateConfig
    from rtgate.gate.notifier import Notifier
    from rtgate.gate.prompter import Prompter
    from rtgate.gate.reviewer import Reviewer
    from rtgate.version.environment import EnvironmentAccessor

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)


class CompatibilityGate:
    """Check the runtime version once and degrade gracefully if it is too old.

    Without a *prompter* the gate is headless: it only logs.
    """

    def __init__(
        self,
        config: GateConfig,
        *,
        adapter: CapabilityAdapter | None = None,
        environment: EnvironmentAccessor | None = None,
        prompter: Prompter | None = None,
        notifier: Notifier | None = None,
        reviewer: Reviewer | None = None,
    ) -> None:
        self._config = config
        self._adapter = adapter or CapabilityAdapter(
            config.collection.factory, shapes=config.collection.shapes
        )
        self._environment = environment or config.environment.build()
        self._prompter = prompter
        self._notifier = notifier or ConsoleNotifier()
        self._reviewer = reviewer or CommandReviewer(config.reviewer.command)
        self._state = GateState.UNCHECKED

    @property
    def config(self) -> GateConfig:
        return self._config

    @property
    def state(self) -> GateState:
        return self._state

    async def run(self) -> GateReport:
        """Walk the state machine from ``UNCHECKED`` to a terminal state."""
        cfg = self._config
        with _tracer.start_as_current_span("rtgate.gate") as span:
            span.set_attribute(ATTR_RESOURCE, cfg.resource)
            span.set_attribute(ATTR_REQUIRED_VERSION, cfg.required_version)
            report = await self._run()
            span.set_attribute(ATTR_CURRENT_VERSION, report.current_version)
            span.set_attribute(ATTR_GATE_STATE, report.state.value)
            return report

    async def _run(self) -> GateReport:
        cfg = self._config
        self._state = GateState.UNCHECKED
        current = get_current_major_version(self._environment)

        if current >= cfg.required_version:
            return self._report(GateState.COMPLIANT, current)

        self._state = GateState.NON_COMPLIANT
        logger.warning(
            "%s requires %s %d but this installation is running %s %d. "
            "%s commands will not function.",
            cfg.product,
            cfg.runtime_name,
            cfg.required_version,
            cfg.runtime_name,
            current,
            cfg.product,
        )

        status = self._adapter.query_is_active(cfg.resource, cfg.collection.location)
        if not status.active:
            # Deactivated in an earlier session; leftovers go with the next review.
            logger.info(
                "%s is deactivated. Run %s to remove leftover files.",
                cfg.resource,
                cfg.reviewer.name,
            )
            return self._report(GateState.SILENT, current)

        if self._prompter is None:
            return self._report(GateState.HEADLESS, current)

        self._state = GateState.PROMPTING
        # One-shot delay so the prompt does not race the host's startup.
        await asyncio.sleep(cfg.prompt_delay)
        choice = await self._prompter.ask(messages.upgrade_notice(cfg, current))

        if choice != PromptChoice.DEACTIVATE:
            return self._report(GateState.REMINDED, current)

        return self.unsubscribe(current)

    def unsubscribe(self, current_version: int) -> GateReport:
        """Deactivate the governing resource and hand off to the reviewer."""
        cfg = self._config
        self._state = GateState.UNSUBSCRIBED
        outcome = self._adapter.negotiate_activation(
            cfg.resource, False, cfg.collection.location
        )

        launched = False
        message: GateMessage | None = None
        if outcome.kind == OutcomeKind.APPLIED:
            logger.info("%s has been deactivated. Launching %s...", cfg.resource, cfg.reviewer.name)
            launched = self._reviewer.launch()
            if not launched:
                message = messages.reviewer_fallback(cfg)
            state = GateState.APPLIED
        elif outcome.kind == OutcomeKind.APPLIED_NOT_PERSISTED:
            message = messages.manual_step(cfg)
            state = GateState.APPLIED_NOT_PERSISTED
        else:
            message = messages.manual_unsubscribe(cfg, self._failure_reason(outcome))
            state = GateState.FAILED

        if message is not None:
            self._notifier.notify(message)
        if state == GateState.APPLIED_NOT_PERSISTED:
            launched = self._reviewer.launch()

        return self._report(
            state, current_version, outcome=outcome, reviewer_launched=launched, message=message
        )

    def _failure_reason(self, outcome: NegotiationOutcome) -> str:
        if outcome.kind == OutcomeKind.RESOURCE_NOT_FOUND:
            return outcome.reason
        if outcome.error == ErrorKind.LOCATION_UNDETERMINABLE:
            return "Could not determine the installation directory."
        return f"Automatic unsubscription failed. {outcome.reason}"

    def _report(
        self,
        state: GateState,
        current_version: int,
        *,
        outcome: NegotiationOutcome | None = None,
        reviewer_launched: bool = False,
        message: GateMessage | None = None,
    ) -> GateReport:
        self._state = state
        return GateReport(
            state=state,
            current_version=current_version,
            required_version=self._config.required_version,
            resource=self._config.resource,
            outcome=outcome,
            reviewer_launched=reviewer_launched,
            message=message,
        )

"""Tests for CompatibilityGate."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

from rtgate.adapter.adapter import CapabilityAdapter
from rtgate.adapter.models import ActivationStatus, ErrorKind, NegotiationOutcome, OutcomeKind
from rtgate.gate.gate import CompatibilityGate
from rtgate.gate.models import GateState, MessageKind, PromptChoice
from rtgate.gate.prompter import AutoPrompter
from rtgate.version.environment import StaticEnvironment
from tests.fakes import make_config, read_collection, write_collection


class RecordingNotifier:
    def __init__(self) -> None:
        self.messages = []

    def notify(self, message) -> None:
        self.messages.append(message)


class StubReviewer:
    def __init__(self, result: bool = True) -> None:
        self.result = result
        self.launches = 0

    def launch(self) -> bool:
        self.launches += 1
        return self.result


def _gate(tmp_path: Path, *, version: str = "1.8.0_392", choice=None, reviewer=None, **cfg):
    config = make_config(
        collection={"factory": "tests.fakes:JsonCollection", "location": str(tmp_path)},
        **cfg,
    )
    notifier = RecordingNotifier()
    reviewer = reviewer or StubReviewer()
    prompter = AutoPrompter(choice) if choice is not None else None
    gate = CompatibilityGate(
        config,
        environment=StaticEnvironment(version),
        prompter=prompter,
        notifier=notifier,
        reviewer=reviewer,
    )
    return gate, notifier, reviewer


class TestCompliance:
    async def test_new_runtime_is_compliant(self, tmp_path: Path) -> None:
        write_collection(tmp_path, {"Neuroanatomy": True})
        gate, notifier, reviewer = _gate(tmp_path, version="21.0.2", choice=PromptChoice.DEACTIVATE)

        report = await gate.run()

        assert report.state == GateState.COMPLIANT
        assert report.current_version == 21
        assert gate.state == GateState.COMPLIANT
        assert notifier.messages == []
        assert read_collection(tmp_path) == {"Neuroanatomy": True}

    async def test_compliant_never_touches_collection(self, tmp_path: Path) -> None:
        adapter = MagicMock(spec=CapabilityAdapter)
        gate = CompatibilityGate(
            make_config(), adapter=adapter, environment=StaticEnvironment("22-ea")
        )

        report = await gate.run()

        assert report.state == GateState.COMPLIANT
        adapter.query_is_active.assert_not_called()

    async def test_missing_version_is_non_compliant(self, tmp_path: Path) -> None:
        write_collection(tmp_path, {"Neuroanatomy": True})
        gate, _, _ = _gate(tmp_path, version="")

        report = await gate.run()

        assert report.current_version == 0
        assert report.state == GateState.HEADLESS


class TestNonCompliant:
    async def test_already_deactivated_is_silent(self, tmp_path: Path) -> None:
        write_collection(tmp_path, {"Neuroanatomy": False})
        prompter = MagicMock()
        config = make_config(
            collection={"factory": "tests.fakes:JsonCollection", "location": str(tmp_path)}
        )
        gate = CompatibilityGate(
            config,
            environment=StaticEnvironment("1.8.0"),
            prompter=prompter,
            notifier=RecordingNotifier(),
            reviewer=StubReviewer(),
        )

        report = await gate.run()

        assert report.state == GateState.SILENT
        prompter.ask.assert_not_called()

    async def test_headless_only_logs(self, tmp_path: Path, caplog) -> None:
        write_collection(tmp_path, {"Neuroanatomy": True})
        gate, notifier, _ = _gate(tmp_path)

        with caplog.at_level("WARNING", logger="rtgate.gate.gate"):
            report = await gate.run()

        assert report.state == GateState.HEADLESS
        assert notifier.messages == []
        assert "requires Java 21" in caplog.text
        assert "running Java 8" in caplog.text

    async def test_undeterminable_state_still_prompts(self, tmp_path: Path) -> None:
        # No collection file: reading fails, so the gate assumes "active".
        gate, _, _ = _gate(tmp_path, choice=PromptChoice.REMIND)

        report = await gate.run()

        assert report.state == GateState.REMINDED

    async def test_remind_changes_nothing(self, tmp_path: Path) -> None:
        write_collection(tmp_path, {"Neuroanatomy": True})
        gate, notifier, reviewer = _gate(tmp_path, choice=PromptChoice.REMIND)

        report = await gate.run()

        assert report.state == GateState.REMINDED
        assert report.outcome is None
        assert reviewer.launches == 0
        assert notifier.messages == []
        assert read_collection(tmp_path) == {"Neuroanatomy": True}

    async def test_prompt_waits_for_delay(self, tmp_path: Path) -> None:
        write_collection(tmp_path, {"Neuroanatomy": True})
        gate, _, _ = _gate(tmp_path, choice=PromptChoice.REMIND, prompt_delay=1.5)

        with patch("rtgate.gate.gate.asyncio.sleep") as sleep:
            await gate.run()

        sleep.assert_awaited_once_with(1.5)

    async def test_prompter_receives_notice(self, tmp_path: Path) -> None:
        write_collection(tmp_path, {"Neuroanatomy": True})
        prompter = MagicMock()
        prompter.ask = MagicMock(side_effect=self._answer_remind)
        config = make_config(
            collection={"factory": "tests.fakes:JsonCollection", "location": str(tmp_path)}
        )
        gate = CompatibilityGate(
            config, environment=StaticEnvironment("11.0.21"), prompter=prompter
        )

        await gate.run()

        notice = prompter.ask.call_args.args[0]
        assert notice.current_version == 11
        assert notice.required_version == 21
        assert "Neuroanatomy" in notice.deactivate_label

    @staticmethod
    async def _answer_remind(notice) -> PromptChoice:
        return PromptChoice.REMIND


class TestUnsubscribe:
    async def test_applied_launches_reviewer(self, tmp_path: Path) -> None:
        write_collection(tmp_path, {"Neuroanatomy": True})
        gate, notifier, reviewer = _gate(tmp_path, choice=PromptChoice.DEACTIVATE)

        report = await gate.run()

        assert report.state == GateState.APPLIED
        assert report.outcome is not None
        assert report.outcome.kind == OutcomeKind.APPLIED
        assert report.reviewer_launched is True
        assert reviewer.launches == 1
        assert notifier.messages == []
        assert read_collection(tmp_path) == {"Neuroanatomy": False}

    async def test_applied_without_reviewer_shows_fallback(self, tmp_path: Path) -> None:
        write_collection(tmp_path, {"Neuroanatomy": True})
        gate, notifier, _ = _gate(
            tmp_path, choice=PromptChoice.DEACTIVATE, reviewer=StubReviewer(result=False)
        )

        report = await gate.run()

        assert report.state == GateState.APPLIED
        assert report.reviewer_launched is False
        assert [m.kind for m in notifier.messages] == [MessageKind.REVIEWER_FALLBACK]

    async def test_read_only_storage_shows_manual_step(self, tmp_path: Path) -> None:
        write_collection(tmp_path, {"Neuroanatomy": True}, readonly=True)
        gate, notifier, reviewer = _gate(tmp_path, choice=PromptChoice.DEACTIVATE)

        report = await gate.run()

        assert report.state == GateState.APPLIED_NOT_PERSISTED
        assert [m.kind for m in notifier.messages] == [MessageKind.MANUAL_STEP]
        assert reviewer.launches == 1
        assert read_collection(tmp_path) == {"Neuroanatomy": True}

    async def test_missing_resource_shows_manual_instructions(self, tmp_path: Path) -> None:
        write_collection(tmp_path, {"Other": True})
        gate, notifier, reviewer = _gate(tmp_path, choice=PromptChoice.DEACTIVATE)

        report = await gate.run()

        assert report.state == GateState.FAILED
        assert report.outcome.kind == OutcomeKind.RESOURCE_NOT_FOUND
        assert reviewer.launches == 0
        message = notifier.messages[0]
        assert message.kind == MessageKind.MANUAL_UNSUBSCRIBE
        assert "was not found" in message.body

    async def test_failure_reason_is_shown(self) -> None:
        adapter = MagicMock(spec=CapabilityAdapter)
        adapter.query_is_active.return_value = ActivationStatus(resource="Neuroanatomy", active=True)
        adapter.negotiate_activation.return_value = NegotiationOutcome.failed(
            "Neuroanatomy", "OSError: disk on fire"
        )
        notifier = RecordingNotifier()
        gate = CompatibilityGate(
            make_config(),
            adapter=adapter,
            environment=StaticEnvironment("1.8.0"),
            prompter=AutoPrompter(PromptChoice.DEACTIVATE),
            notifier=notifier,
            reviewer=StubReviewer(),
        )

        report = await gate.run()

        assert report.state == GateState.FAILED
        adapter.negotiate_activation.assert_called_once_with("Neuroanatomy", False, "/opt/app")
        body = notifier.messages[0].body
        assert body.startswith("Automatic unsubscription failed. OSError: disk on fire")

    def test_undeterminable_location_message(self) -> None:
        adapter = MagicMock(spec=CapabilityAdapter)
        adapter.negotiate_activation.return_value = NegotiationOutcome.failed(
            "Neuroanatomy",
            "location undeterminable",
            error=ErrorKind.LOCATION_UNDETERMINABLE,
        )
        notifier = RecordingNotifier()
        gate = CompatibilityGate(
            make_config(), adapter=adapter, notifier=notifier, reviewer=StubReviewer()
        )

        report = gate.unsubscribe(8)

        assert report.state == GateState.FAILED
        assert "installation directory" in notifier.messages[0].body

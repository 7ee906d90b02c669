"""Tests for gate message builders."""

from rtgate.gate import messages
from rtgate.gate.models import MessageKind
from tests.fakes import make_config


class TestUpgradeNotice:
    def test_mentions_versions_and_links(self) -> None:
        notice = messages.upgrade_notice(make_config(), 8)

        assert notice.title == "SNT Requires Java 21"
        assert "running Java 8" in notice.body
        assert "requires Java 21 or newer" in notice.body
        assert notice.links == {
            "Release notes": "https://example.org/releases",
            "Download": "https://example.org/download",
            "Forum": "https://forum.example.org",
        }
        assert notice.deactivate_label == "Unsubscribe from Neuroanatomy"

    def test_links_are_optional(self) -> None:
        notice = messages.upgrade_notice(make_config(links={}), 11)

        assert notice.links == {}
        assert "release notes" not in notice.body
        assert "Questions?" not in notice.body

    def test_recommended_distribution(self) -> None:
        config = make_config(recommended_distribution="Fiji-Latest")

        assert "download Fiji-Latest from https://example.org/download" in (
            messages.upgrade_notice(config, 8).body
        )

    def test_custom_runtime_name(self) -> None:
        notice = messages.upgrade_notice(make_config(runtime_name="Python", required_version=3), 2)

        assert notice.title == "SNT Requires Python 3"


class TestTerminalMessages:
    def test_reviewer_fallback(self) -> None:
        message = messages.reviewer_fallback(make_config())

        assert message.kind == MessageKind.REVIEWER_FALLBACK
        assert "has been deactivated" in message.body
        assert "the Updater" in message.title

    def test_manual_step_lists_steps(self) -> None:
        message = messages.manual_step(make_config())

        assert message.kind == MessageKind.MANUAL_STEP
        assert "read-only" in message.body
        assert len(message.steps) == 3
        assert "Deactivate Neuroanatomy" in message.steps

    def test_manual_unsubscribe_carries_reason(self) -> None:
        message = messages.manual_unsubscribe(make_config(), "Something broke.")

        assert message.kind == MessageKind.MANUAL_UNSUBSCRIBE
        assert message.body.startswith("Something broke.")
        assert message.warning is True

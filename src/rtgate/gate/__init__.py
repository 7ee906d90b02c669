"""Compatibility gate -- startup check, user prompt and reviewer hand-off."""

from rtgate.gate.gate import CompatibilityGate
from rtgate.gate.models import (
    GateMessage,
    GateReport,
    GateState,
    MessageKind,
    PromptChoice,
    UpgradeNotice,
)
from rtgate.gate.notifier import ConsoleNotifier, Notifier
from rtgate.gate.prompter import AutoPrompter, CLIPrompter, Prompter
from rtgate.gate.reviewer import CommandReviewer, NullReviewer, Reviewer

__all__ = [
    "AutoPrompter",
    "CLIPrompter",
    "CommandReviewer",
    "CompatibilityGate",
    "ConsoleNotifier",
    "GateMessage",
    "GateReport",
    "GateState",
    "MessageKind",
    "Notifier",
    "NullReviewer",
    "PromptChoice",
    "Prompter",
    "Reviewer",
    "UpgradeNotice",
]

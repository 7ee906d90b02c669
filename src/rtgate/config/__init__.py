"""Gate configuration -- YAML schema and loader."""

from rtgate.config.loader import ConfigLoader, load_config_text
from rtgate.config.models import (
    CollectionSettings,
    EnvironmentSettings,
    GateConfig,
    LinkSettings,
    ReviewerSettings,
    TelemetrySettings,
)

__all__ = [
    "CollectionSettings",
    "ConfigLoader",
    "EnvironmentSettings",
    "GateConfig",
    "LinkSettings",
    "ReviewerSettings",
    "TelemetrySettings",
    "load_config_text",
]

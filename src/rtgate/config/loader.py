"""Gate configuration loading."""

from __future__ import annotations

import os
from pathlib import Path  # noqa: TC003
from typing import Any

import yaml
from pydantic import ValidationError

from rtgate.config.models import GateConfig
from rtgate.errors import ConfigValidationError


class ConfigLoader:
    """Load and validate a gate YAML file into a :class:`GateConfig`."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def load(self) -> GateConfig:
        """Read YAML, interpolate env vars, and validate.

        Environment variables in the form ``${VAR}`` or ``$VAR`` are expanded
        using :func:`os.path.expandvars` before YAML parsing.

        Raises:
            ConfigValidationError: On read errors, YAML parse errors or schema
                validation failures.
        """
        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigValidationError(f"Cannot read {self._path}: {exc}") from exc

        return load_config_text(raw)


def load_config_text(raw: str) -> GateConfig:
    """Parse and validate configuration from a YAML string."""
    expanded = os.path.expandvars(raw)

    try:
        data: Any = yaml.safe_load(expanded)
    except yaml.YAMLError as exc:
        raise ConfigValidationError(f"YAML parse error: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigValidationError("Gate configuration must be a mapping")

    try:
        return GateConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc

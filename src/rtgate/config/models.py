"""Pydantic models for the gate configuration YAML."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, model_validator

from rtgate.adapter.models import ShapeNames
from rtgate.version.environment import (
    CommandEnvironment,
    EnvironEnvironment,
    EnvironmentAccessor,
    StaticEnvironment,
)


class EnvironmentSettings(BaseModel):
    """Where the running environment's version string is read from."""

    source: Literal["static", "environ", "command"] = "command"
    version: str | None = Field(default=None, description="Fixed version for 'static'.")
    variable: str = Field(default="JAVA_VERSION", description="Variable for 'environ'.")
    command: list[str] = Field(
        default_factory=lambda: ["java", "-version"],
        description="Version command for 'command'.",
    )
    timeout: float = Field(default=10.0, description="Seconds to wait for the command.")

    @model_validator(mode="after")
    def _validate_source(self) -> EnvironmentSettings:
        if self.source == "command" and not self.command:
            msg = "command environment requires a non-empty 'command'"
            raise ValueError(msg)
        return self

    def build(self) -> EnvironmentAccessor:
        """Create the accessor described by these settings."""
        if self.source == "static":
            return StaticEnvironment(self.version)
        if self.source == "environ":
            return EnvironEnvironment(self.variable)
        return CommandEnvironment(self.command, timeout=self.timeout)


class CollectionSettings(BaseModel):
    """The external resource collection and the API shapes to probe."""

    factory: str = Field(..., description="Import path 'package.module:Attribute'.")
    location: str | None = Field(default=None, description="Installation directory.")
    shapes: ShapeNames = Field(default_factory=ShapeNames)

    @model_validator(mode="after")
    def _validate_factory(self) -> CollectionSettings:
        module_name, _, attr = self.factory.partition(":")
        if not module_name or not attr:
            msg = f"collection factory must look like 'package.module:Attribute', got '{self.factory}'"
            raise ValueError(msg)
        return self


class ReviewerSettings(BaseModel):
    """External tool launched so the user can review staged changes."""

    command: list[str] = Field(default_factory=list)
    name: str = Field(default="the updater", description="How the tool is named in messages.")
    menu_path: str = Field(default="Help > Update...", description="Where users find the tool.")


class LinkSettings(BaseModel):
    """Links shown in the upgrade notice."""

    release_notes: str | None = None
    download: str | None = None
    forum: str | None = None


class TelemetrySettings(BaseModel):
    """Optional telemetry configuration."""

    enabled: bool = False
    otlp_endpoint: str | None = None


class GateConfig(BaseModel):
    """Top-level gate configuration parsed from YAML."""

    version: str = "1"
    product: str
    resource: str
    required_version: int = Field(..., ge=0)
    runtime_name: str = "Java"
    recommended_distribution: str | None = None
    collection: CollectionSettings
    environment: EnvironmentSettings = Field(default_factory=EnvironmentSettings)
    reviewer: ReviewerSettings = Field(default_factory=ReviewerSettings)
    links: LinkSettings = Field(default_factory=LinkSettings)
    prompt_delay: float = Field(default=2.5, ge=0, description="Seconds before the prompt shows.")
    prompt_timeout: float = Field(default=300.0, gt=0, description="Seconds to wait for an answer.")
    telemetry: TelemetrySettings | None = None

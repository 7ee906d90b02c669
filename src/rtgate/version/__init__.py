"""Version classification -- parse runtime versions into comparable majors."""

from rtgate.version.environment import (
    CommandEnvironment,
    EnvironEnvironment,
    EnvironmentAccessor,
    StaticEnvironment,
    extract_version,
)
from rtgate.version.models import VersionSpec
from rtgate.version.oracle import (
    get_current_major_version,
    parse_major_version,
    parse_version,
)

__all__ = [
    "CommandEnvironment",
    "EnvironEnvironment",
    "EnvironmentAccessor",
    "StaticEnvironment",
    "VersionSpec",
    "extract_version",
    "get_current_major_version",
    "parse_major_version",
    "parse_version",
]

"""Value types for version classification."""

from __future__ import annotations

from functools import total_ordering

from pydantic import BaseModel, ConfigDict, Field


@total_ordering
class VersionSpec(BaseModel):
    """Comparable major version of a runtime.

    Compares by plain integer value, also against bare ``int`` operands.
    """

    model_config = ConfigDict(frozen=True)

    major: int = Field(default=0, ge=0)

    def __int__(self) -> int:
        return self.major

    def __hash__(self) -> int:
        return hash(self.major)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, VersionSpec):
            return self.major == other.major
        if isinstance(other, int):
            return self.major == other
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, VersionSpec):
            return self.major < other.major
        if isinstance(other, int):
            return self.major < other
        return NotImplemented

    def satisfies(self, required: int) -> bool:
        """Return ``True`` when this version meets the *required* major."""
        return self.major >= required

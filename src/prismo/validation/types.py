"""Result types for platform content validation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..constants.status import SocialPlatform


class ViolationCode(str, Enum):
    """Machine-readable reason a content value breaks a platform rule."""

    TEXT_TOO_LONG = "TEXT_TOO_LONG"
    TOO_MANY_MEDIA = "TOO_MANY_MEDIA"
    MEDIA_REQUIRED = "MEDIA_REQUIRED"
    UNSUPPORTED_MEDIA_TYPE = "UNSUPPORTED_MEDIA_TYPE"


@dataclass(frozen=True)
class Violation:
    """A single reason content fails a platform's constraints."""

    field: str
    message: str
    code: ViolationCode

    def to_dict(self) -> dict[str, Any]:
        return {"field": self.field, "message": self.message, "code": self.code.value}


@dataclass(frozen=True)
class ValidationOutcome:
    """All violations of one platform, in rule order.

    Only platforms with at least one violation get an outcome.
    """

    platform: SocialPlatform
    violations: tuple[Violation, ...]

    @property
    def errors(self) -> list[str]:
        """Human-readable violation messages."""
        return [v.message for v in self.violations]

    @property
    def codes(self) -> list[ViolationCode]:
        return [v.code for v in self.violations]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "platform": self.platform.value,
            "errors": self.errors,
            "violations": [v.to_dict() for v in self.violations],
        }

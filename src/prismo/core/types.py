"""Result type shared by the library API and the CLI.

Operations that can fail for reasons the caller should handle (unknown
platform, unreadable post file) return a Result instead of raising:

    result = check_content_for_platforms(content, ["twitter", "tiktok"])
    if isinstance(result, Failure):
        ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Operation completed; value holds its output."""

    value: T

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False


@dataclass(frozen=True)
class Failure:
    """Operation could not run; error is a user-facing message."""

    error: str
    details: dict[str, Any] | None = None

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready form, used for machine-readable CLI output."""
        return {"error": self.error, "details": dict(self.details or {})}


Result = Union[Success[T], Failure]

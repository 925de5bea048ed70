"""Exception hierarchy for Prismo.

Only programmer or data errors are raised. Content that breaks a platform's
rules is reported as a value (see prismo.validation), never raised.
"""

from __future__ import annotations

from typing import Any


class PrismoError(Exception):
    """Base class for all Prismo errors."""


class PlatformConfigurationError(PrismoError):
    """The platform constraint table cannot serve a request."""


class UnknownPlatformError(PlatformConfigurationError):
    """A platform identifier has no record in the constraint table."""

    def __init__(self, platform: Any, available: list[str] | None = None):
        self.platform = platform
        self.available = list(available or [])
        message = f"Unknown platform: {platform!r}"
        if self.available:
            message += f". Available: {', '.join(self.available)}"
        super().__init__(message)

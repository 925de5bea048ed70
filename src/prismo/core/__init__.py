"""Core building blocks - Result type and exception hierarchy."""

from .errors import PlatformConfigurationError, PrismoError, UnknownPlatformError
from .types import Failure, Result, Success

__all__ = [
    # Types
    "Result",
    "Success",
    "Failure",
    # Errors
    "PrismoError",
    "PlatformConfigurationError",
    "UnknownPlatformError",
]

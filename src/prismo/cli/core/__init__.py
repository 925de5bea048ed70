"""Core utilities for CLI - console and shared Result types."""

from prismo.core.types import Failure, Result, Success

from .console import console, print_error, print_failure

__all__ = [
    # Types
    "Result",
    "Success",
    "Failure",
    # Console
    "console",
    "print_error",
    "print_failure",
]

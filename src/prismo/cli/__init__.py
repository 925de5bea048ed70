"""Command-line interface - modular, feature-based, stateless architecture.

This package provides a clean separation of concerns:
- core/: Shared console output
- post/: Post validation and platform constraint commands

Usage:
    python -m prismo.cli --help
    python -m prismo.cli validate post.json --platform twitter --platform instagram
    python -m prismo.cli constraints
"""

from .app import app, main

__all__ = ["app", "main"]

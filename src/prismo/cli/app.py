"""Typer app configuration and logging setup."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from prismo.config import PrismoSettings, load_settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"

# Loggers written to the log file
APP_LOGGERS = ["content_validator", "prismo_cli"]

# Create Typer app
app = typer.Typer(
    name="prismo",
    help="Social media post validation and platform rules",
    add_completion=False,
)


def setup_logging(settings: PrismoSettings) -> None:
    """Configure logging for CLI.

    - Suppresses console output so logs never mix with Rich output
    - Writes application loggers to <log_dir>/prismo.log
    """
    log_dir = settings.log_dir
    log_dir.mkdir(parents=True, exist_ok=True)

    # Remove any default console handlers from root logger
    root_logger = logging.getLogger()
    root_logger.handlers = []
    root_logger.setLevel(logging.CRITICAL)

    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    file_handler = logging.FileHandler(log_dir / "prismo.log", encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    for name in APP_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.propagate = False
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.addHandler(file_handler)


@app.callback()
def configure(
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="YAML settings file (default: config/prismo.yaml)"
    ),
) -> None:
    """Load settings and set up logging before any command runs."""
    setup_logging(load_settings(config))


def register_commands() -> None:
    """Register all commands from feature modules."""
    from .post.commands import show_constraints, validate_post

    app.command(name="validate")(validate_post)
    app.command(name="constraints")(show_constraints)


# Register all commands
register_commands()


def main() -> None:
    """CLI entry point."""
    app()

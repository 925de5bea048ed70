"""Fixtures for CLI tests."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable

import pytest
from typer.testing import CliRunner

from prismo.cli.app import APP_LOGGERS
from prismo.cli.core import console


@pytest.fixture(autouse=True)
def isolated_logging(monkeypatch, tmp_path):
    """Send CLI logs to tmp_path and restore logger state afterwards.

    The app callback reconfigures logging on every invocation.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PRISMO_LOG_DIR", str(tmp_path / "logs"))

    names = ["", *APP_LOGGERS]
    saved = {}
    for name in names:
        logger = logging.getLogger(name)
        saved[name] = (list(logger.handlers), logger.level, logger.propagate)

    yield tmp_path / "logs"

    for name in names:
        logger = logging.getLogger(name)
        handlers, level, propagate = saved[name]
        for handler in logger.handlers:
            if handler not in handlers:
                handler.close()
        logger.handlers = handlers
        logger.setLevel(level)
        logger.propagate = propagate


@pytest.fixture(autouse=True)
def wide_console(monkeypatch):
    """Keep Rich tables and panels on one line per row."""
    monkeypatch.setattr(console, "width", 200)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def write_post(tmp_path) -> Callable[..., Path]:
    """Write a post JSON file and return its path."""
    def _write(data: Any, name: str = "post.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def media_item() -> Callable[..., dict]:
    """Build a media entry as it appears in a post file."""
    def _item(media_type: str = "image", index: int = 1) -> dict:
        return {
            "url": f"https://example.com/{index}.bin",
            "type": media_type,
            "filename": f"{media_type}-{index}",
            "size": 100,
        }

    return _item

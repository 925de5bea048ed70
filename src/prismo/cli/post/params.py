"""Immutable parameter dataclasses for post commands."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class PostValidationParams:
    """Immutable parameters for validating a post file."""

    post_file: Path
    platforms: tuple[str, ...]
    as_json: bool

    @classmethod
    def from_cli(
        cls,
        post_file: Path,
        platforms: Optional[list[str]] = None,
        as_json: bool = False,
        **kwargs,
    ) -> "PostValidationParams":
        """Create from CLI arguments.

        Platform options may be repeated or comma-separated ("twitter,instagram").
        """
        names: list[str] = []
        for value in platforms or []:
            names.extend(part.strip() for part in value.split(",") if part.strip())

        return cls(
            post_file=post_file,
            platforms=tuple(names),
            as_json=as_json,
        )

"""Stateless service for validating post files."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from prismo.content.models import PostContent
from prismo.core.types import Failure, Result, Success
from prismo.schemas.posts import CreatePostInput
from prismo.validation import ValidationOutcome, check_content_for_platforms

_logger = logging.getLogger("prismo_cli")


@dataclass(frozen=True)
class LoadedPost:
    """Post content read from a file, plus the platforms the file targets."""

    content: PostContent
    platforms: tuple[str, ...]


@dataclass(frozen=True)
class ValidationReport:
    """Result of validating one post file."""

    platforms: tuple[str, ...]
    outcomes: tuple[ValidationOutcome, ...]

    @property
    def is_valid(self) -> bool:
        return not self.outcomes


class PostValidationService:
    """Stateless service for post validation.

    All state is passed via params - no instance state.
    """

    def load(self, post_file: Path, content_only: bool = False) -> Result[LoadedPost]:
        """Load a post file.

        The file holds either a bare PostContent object or a full create-post
        request with "content" and "platforms". With content_only, only the
        request's "content" is read and its "platforms" are ignored.
        """
        try:
            with open(post_file, encoding="utf-8") as f:
                data: Any = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            return Failure(f"Cannot read post file: {e}", {"path": str(post_file)})

        if not isinstance(data, dict):
            return Failure("Post file must contain a JSON object", {"path": str(post_file)})

        try:
            if "content" in data and content_only:
                return Success(LoadedPost(
                    content=PostContent.model_validate(data["content"]),
                    platforms=(),
                ))
            if "content" in data:
                post = CreatePostInput.model_validate(data)
                return Success(LoadedPost(
                    content=post.content,
                    platforms=tuple(p.value for p in post.platforms),
                ))
            return Success(LoadedPost(
                content=PostContent.model_validate(data),
                platforms=(),
            ))
        except ValidationError as e:
            messages = [
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
                for err in e.errors()
            ]
            return Failure("Invalid post file", {"errors": "; ".join(messages)})

    def validate(
        self,
        post_file: Path,
        platforms: tuple[str, ...] = (),
    ) -> Result[ValidationReport]:
        """Validate a post file against platforms.

        Platforms given here override the ones in the file.

        Returns:
            Result containing ValidationReport or Failure
        """
        loaded = self.load(post_file, content_only=bool(platforms))
        if isinstance(loaded, Failure):
            return loaded

        targets = platforms or loaded.value.platforms
        if not targets:
            return Failure(
                "At least one platform required",
                {"hint": "Pass --platform or add \"platforms\" to the post file"},
            )

        checked = check_content_for_platforms(loaded.value.content, targets)
        if isinstance(checked, Failure):
            return checked

        _logger.info(
            f"POST_FILE_VALIDATED | file={post_file} | "
            f"platforms={list(targets)} | invalid={len(checked.value)}"
        )
        return Success(ValidationReport(
            platforms=tuple(targets),
            outcomes=tuple(checked.value),
        ))

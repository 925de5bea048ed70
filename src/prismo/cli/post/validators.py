"""Post-specific validators."""

from __future__ import annotations

from prismo.core.types import Failure, Result, Success

from .params import PostValidationParams


def validate_post_validation_params(params: PostValidationParams) -> Result[PostValidationParams]:
    """Validate post validation parameters.

    Pure function - only reads filesystem, no side effects.

    Returns Result with params if valid, or Failure with error.
    """
    if not params.post_file.exists():
        return Failure(
            f"Post file not found: {params.post_file}",
            {"path": str(params.post_file)},
        )

    if not params.post_file.is_file():
        return Failure(
            f"Not a file: {params.post_file}",
            {"path": str(params.post_file)},
        )

    return Success(params)

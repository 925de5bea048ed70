"""Post feature - content validation commands."""

from .commands import show_constraints, validate_post
from .params import PostValidationParams
from .service import PostValidationService, ValidationReport

__all__ = [
    "show_constraints",
    "validate_post",
    "PostValidationParams",
    "PostValidationService",
    "ValidationReport",
]

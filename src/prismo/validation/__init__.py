"""Platform content validation.

Provides:
- validate_content_for_platforms: outcomes per platform, raises on unknown platform
- check_content_for_platforms: same, with the configuration error as a Failure
- validate_for_platform: the rule routine for a single constraints record
"""

from .types import ValidationOutcome, Violation, ViolationCode
from .validator import (
    check_content_for_platforms,
    validate_content_for_platforms,
    validate_for_platform,
)

__all__ = [
    "ValidationOutcome",
    "Violation",
    "ViolationCode",
    "validate_content_for_platforms",
    "check_content_for_platforms",
    "validate_for_platform",
]

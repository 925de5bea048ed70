"""Platform rules.

Usage:
    from prismo.platforms import get_constraints

    limits = get_constraints("twitter")
    limits.max_text_length  # 280
"""

from .constraints import (
    PLATFORM_CONSTRAINTS,
    PlatformConstraints,
    get_constraints,
    parse_platform,
    supported_platforms,
)

__all__ = [
    "PLATFORM_CONSTRAINTS",
    "PlatformConstraints",
    "get_constraints",
    "parse_platform",
    "supported_platforms",
]

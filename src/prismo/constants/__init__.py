"""Global constants package for Prismo.

This package centralizes the enums and limits used throughout the project.
Import from here for consistency.

PACKAGE STRUCTURE:
-----------------
- status.py : Closed enumerations mirroring the stored schema
- limits.py : Input limits, numeric ranges, pagination bounds, defaults

USAGE EXAMPLES:
--------------
    from prismo.constants import SocialPlatform, MediaType
    from prismo.constants import POST_TEXT_MAX_LENGTH
"""

from .limits import (
    DEFAULT_TEAM_PLAN,
    DEFAULT_TIMEZONE,
    ENGAGEMENT_RATE_MAX,
    ENGAGEMENT_RATE_MIN,
    NAME_MAX_LENGTH,
    PAGINATION_DEFAULT_LIMIT,
    PAGINATION_DEFAULT_PAGE,
    PAGINATION_MAX_LIMIT,
    POST_TEXT_MAX_LENGTH,
    SENTIMENT_MAX,
    SENTIMENT_MIN,
)
from .status import (
    ApprovalStatus,
    EngagementStatus,
    EngagementType,
    MediaType,
    PostStatus,
    SocialPlatform,
    UserRole,
)

__all__ = [
    # Enums
    "SocialPlatform",
    "MediaType",
    "UserRole",
    "PostStatus",
    "ApprovalStatus",
    "EngagementType",
    "EngagementStatus",
    # Limits
    "POST_TEXT_MAX_LENGTH",
    "NAME_MAX_LENGTH",
    "ENGAGEMENT_RATE_MIN",
    "ENGAGEMENT_RATE_MAX",
    "SENTIMENT_MIN",
    "SENTIMENT_MAX",
    "PAGINATION_DEFAULT_PAGE",
    "PAGINATION_DEFAULT_LIMIT",
    "PAGINATION_MAX_LIMIT",
    # Defaults
    "DEFAULT_TIMEZONE",
    "DEFAULT_TEAM_PLAN",
]

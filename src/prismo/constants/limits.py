"""Limit constants for Prismo.

This module contains the limits that are not tied to a single platform:
- Input length limits for request schemas
- Numeric ranges for analytics and engagement data
- Pagination bounds
- Defaults applied when a request omits a value

Per-platform limits (text length, media count, media kinds) are NOT here.
They live in exactly one place: platforms/constraints.py.
"""

from typing import Final

# =============================================================================
# CONTENT LIMITS
# =============================================================================

POST_TEXT_MAX_LENGTH: Final[int] = 2000
"""Maximum post text length accepted by the dashboard, any platform."""

NAME_MAX_LENGTH: Final[int] = 100
"""Maximum length for user and team names."""


# =============================================================================
# ANALYTICS AND ENGAGEMENT RANGES
# =============================================================================

ENGAGEMENT_RATE_MIN: Final[float] = 0.0
ENGAGEMENT_RATE_MAX: Final[float] = 1.0
"""Engagement rate is a ratio in [0, 1]."""

SENTIMENT_MIN: Final[float] = -1.0
SENTIMENT_MAX: Final[float] = 1.0
"""Sentiment score range, negative to positive."""


# =============================================================================
# PAGINATION
# =============================================================================

PAGINATION_DEFAULT_PAGE: Final[int] = 1
"""First page number (pages are 1-based)."""

PAGINATION_DEFAULT_LIMIT: Final[int] = 10
"""Page size used when the caller does not ask for one."""

PAGINATION_MAX_LIMIT: Final[int] = 100
"""Largest page size a caller may request."""


# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_TIMEZONE: Final[str] = "UTC"
"""Timezone assigned to new users."""

DEFAULT_TEAM_PLAN: Final[str] = "free"
"""Plan assigned to new teams."""

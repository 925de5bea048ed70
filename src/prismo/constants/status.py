"""Status enums and closed enumerations for Prismo.

This module contains every enumeration that mirrors the stored schema:
- Social platforms a team can connect
- User roles inside a team
- Post lifecycle and approval states
- Engagement kinds and inbox states
- Media attachment kinds

Values match the persisted representation, so they can be written to and read
back from the database or the JSON API unchanged.

MODIFICATION GUIDE:
------------------
- Add new enum values at the END to keep stored values stable
- A new SocialPlatform also needs a record in platforms/constraints.py
"""

from __future__ import annotations

from enum import Enum


# =============================================================================
# SOCIAL PLATFORMS
# =============================================================================

class SocialPlatform(str, Enum):
    """External social networks a post can target."""

    TWITTER = "TWITTER"
    FACEBOOK = "FACEBOOK"
    INSTAGRAM = "INSTAGRAM"
    LINKEDIN = "LINKEDIN"
    TIKTOK = "TIKTOK"

    @classmethod
    def from_name(cls, value: str) -> "SocialPlatform | None":
        """Look up a platform by name, ignoring case and surrounding spaces.

        Returns None when the name is not a known platform.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        key = value.strip().upper()
        try:
            return cls(key)
        except ValueError:
            return None


# =============================================================================
# MEDIA TYPES
# =============================================================================

class MediaType(str, Enum):
    """Kind of media attached to a post."""

    IMAGE = "image"
    """Still image (jpg, png, webp)."""

    VIDEO = "video"
    """Video clip."""

    GIF = "gif"
    """Animated image."""


# =============================================================================
# USERS AND POSTS
# =============================================================================

class UserRole(str, Enum):
    """Role of a user inside a team."""

    ADMIN = "ADMIN"
    EDITOR = "EDITOR"
    VIEWER = "VIEWER"


class PostStatus(str, Enum):
    """Lifecycle of a post.

    Workflow:
        DRAFT -> SCHEDULED -> PUBLISHED
                     |
                     v
                  FAILED
    """

    DRAFT = "DRAFT"
    SCHEDULED = "SCHEDULED"
    PUBLISHED = "PUBLISHED"
    FAILED = "FAILED"


class ApprovalStatus(str, Enum):
    """Approval state of a post for teams that review before publishing."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    NOT_REQUIRED = "NOT_REQUIRED"


# =============================================================================
# ENGAGEMENT
# =============================================================================

class EngagementType(str, Enum):
    """Kind of interaction received on a published post."""

    LIKE = "LIKE"
    COMMENT = "COMMENT"
    SHARE = "SHARE"
    MENTION = "MENTION"
    DIRECT_MESSAGE = "DIRECT_MESSAGE"


class EngagementStatus(str, Enum):
    """Inbox state of an engagement."""

    UNREAD = "UNREAD"
    READ = "READ"
    RESPONDED = "RESPONDED"
    ARCHIVED = "ARCHIVED"

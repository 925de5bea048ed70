"""Request schemas for posts, analytics and engagements."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Optional

from pydantic import Field, field_validator

from ..constants.limits import (
    ENGAGEMENT_RATE_MAX,
    ENGAGEMENT_RATE_MIN,
    SENTIMENT_MAX,
    SENTIMENT_MIN,
)
from ..constants.status import (
    ApprovalStatus,
    EngagementStatus,
    EngagementType,
    SocialPlatform,
)
from ..content.models import PostContent
from ..validation.types import ValidationOutcome
from ..validation.validator import validate_content_for_platforms
from .base import RequestModel
from .fields import required


def _platforms_from_names(value: Any) -> Any:
    # Accept platform names in any case; unknown names are left for the enum to reject
    if isinstance(value, (list, tuple)):
        coerced = []
        for item in value:
            platform = SocialPlatform.from_name(item)
            coerced.append(platform if platform is not None else item)
        return coerced
    return value


# =============================================================================
# POSTS
# =============================================================================

class CreatePostInput(RequestModel):
    """A new post: shared content plus the platforms it targets."""

    content: PostContent
    platforms: list[SocialPlatform]
    scheduled_at: Optional[datetime] = None
    approval_status: ApprovalStatus = ApprovalStatus.NOT_REQUIRED
    team_id: Optional[str] = None

    @field_validator("platforms", mode="before")
    @classmethod
    def _coerce_platforms(cls, value: Any) -> Any:
        return _platforms_from_names(value)

    @field_validator("platforms")
    @classmethod
    def _require_platform(cls, value: list[SocialPlatform]) -> list[SocialPlatform]:
        if not value:
            raise ValueError("At least one platform required")
        return value

    def platform_violations(self) -> list[ValidationOutcome]:
        """Check the content against every targeted platform."""
        return validate_content_for_platforms(self.content, self.platforms)


class UpdatePostInput(RequestModel):
    content: Optional[PostContent] = None
    platforms: Optional[list[SocialPlatform]] = None
    scheduled_at: Optional[datetime] = None
    approval_status: Optional[ApprovalStatus] = None
    team_id: Optional[str] = None

    @field_validator("platforms", mode="before")
    @classmethod
    def _coerce_platforms(cls, value: Any) -> Any:
        return _platforms_from_names(value)

    @field_validator("platforms")
    @classmethod
    def _require_platform(cls, value: Optional[list[SocialPlatform]]) -> Optional[list[SocialPlatform]]:
        if value is not None and not value:
            raise ValueError("At least one platform required")
        return value


# =============================================================================
# ANALYTICS
# =============================================================================

class PostAnalyticsInput(RequestModel):
    """Metrics snapshot for a published post on one platform."""

    platform_post_id: Annotated[str, required("Platform post ID is required")]
    likes: int = Field(default=0, ge=0)
    shares: int = Field(default=0, ge=0)
    comments: int = Field(default=0, ge=0)
    reach: int = Field(default=0, ge=0)
    impressions: int = Field(default=0, ge=0)
    engagement_rate: float = Field(default=0.0, ge=ENGAGEMENT_RATE_MIN, le=ENGAGEMENT_RATE_MAX)


# =============================================================================
# ENGAGEMENT
# =============================================================================

class CreateEngagementInput(RequestModel):
    type: EngagementType
    author: Annotated[str, required("Author is required")]
    content: Annotated[str, required("Content is required")]
    sentiment: float = Field(default=0.0, ge=SENTIMENT_MIN, le=SENTIMENT_MAX)
    platform_engagement_id: Annotated[str, required("Platform engagement ID is required")]


class UpdateEngagementInput(RequestModel):
    status: EngagementStatus
    responded_at: Optional[datetime] = None

"""Request schemas for users, teams and connected social accounts."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Optional

from pydantic import Field

from ..constants.limits import DEFAULT_TEAM_PLAN, DEFAULT_TIMEZONE, NAME_MAX_LENGTH
from ..constants.status import SocialPlatform, UserRole
from .base import RequestModel
from .fields import email, max_chars, required, url

Email = Annotated[str, email()]
UserName = Annotated[
    str,
    required("Name is required"),
    max_chars(NAME_MAX_LENGTH, "Name too long"),
]
TeamName = Annotated[
    str,
    required("Team name is required"),
    max_chars(NAME_MAX_LENGTH, "Team name too long"),
]
AvatarUrl = Annotated[str, url("Invalid avatar URL")]


# =============================================================================
# USERS
# =============================================================================

class CreateUserInput(RequestModel):
    email: Email
    name: UserName
    avatar: Optional[AvatarUrl] = None
    timezone: str = DEFAULT_TIMEZONE
    role: UserRole = UserRole.VIEWER
    team_id: Optional[str] = None


class UpdateUserInput(RequestModel):
    email: Optional[Email] = None
    name: Optional[UserName] = None
    avatar: Optional[AvatarUrl] = None
    timezone: Optional[str] = None
    role: Optional[UserRole] = None
    team_id: Optional[str] = None


# =============================================================================
# TEAMS
# =============================================================================

class CreateTeamInput(RequestModel):
    name: TeamName
    plan: str = DEFAULT_TEAM_PLAN
    settings: dict[str, Any] = Field(default_factory=dict)


class UpdateTeamInput(RequestModel):
    name: Optional[TeamName] = None
    plan: Optional[str] = None
    settings: Optional[dict[str, Any]] = None


# =============================================================================
# SOCIAL ACCOUNTS
# =============================================================================

class CreateSocialAccountInput(RequestModel):
    """Credentials and profile of a connected social account."""

    platform: SocialPlatform
    platform_user_id: Annotated[str, required("Platform user ID is required")]
    username: Annotated[str, required("Username is required")]
    display_name: Annotated[str, required("Display name is required")]
    avatar: AvatarUrl
    access_token: Annotated[str, required("Access token is required")]
    refresh_token: Optional[str] = None
    token_expires_at: Optional[datetime] = None


class UpdateSocialAccountInput(RequestModel):
    platform: Optional[SocialPlatform] = None
    platform_user_id: Optional[Annotated[str, required("Platform user ID is required")]] = None
    username: Optional[Annotated[str, required("Username is required")]] = None
    display_name: Optional[Annotated[str, required("Display name is required")]] = None
    avatar: Optional[AvatarUrl] = None
    access_token: Optional[Annotated[str, required("Access token is required")]] = None
    refresh_token: Optional[str] = None
    token_expires_at: Optional[datetime] = None

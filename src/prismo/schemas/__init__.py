"""Request schemas for the dashboard's create/update operations.

Each schema validates a request body before it reaches persistence. Error
messages are user-facing and surface unchanged in API responses.
"""

from .accounts import (
    CreateSocialAccountInput,
    CreateTeamInput,
    CreateUserInput,
    UpdateSocialAccountInput,
    UpdateTeamInput,
    UpdateUserInput,
)
from .base import RequestModel
from .posts import (
    CreateEngagementInput,
    CreatePostInput,
    PostAnalyticsInput,
    UpdateEngagementInput,
    UpdatePostInput,
)

__all__ = [
    "RequestModel",
    # Accounts
    "CreateUserInput",
    "UpdateUserInput",
    "CreateTeamInput",
    "UpdateTeamInput",
    "CreateSocialAccountInput",
    "UpdateSocialAccountInput",
    # Posts
    "CreatePostInput",
    "UpdatePostInput",
    "PostAnalyticsInput",
    "CreateEngagementInput",
    "UpdateEngagementInput",
]

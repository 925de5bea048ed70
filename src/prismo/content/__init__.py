"""Post content models and hashtag/mention handling."""

from .hashtags import (
    extract_hashtags,
    extract_mentions,
    normalize_hashtag,
    normalize_hashtags,
    normalize_mention,
    normalize_mentions,
)
from .models import (
    PLATFORM_CONTENT_MODELS,
    ContentModel,
    FacebookContent,
    FacebookLink,
    InstagramContent,
    InstagramLocation,
    LinkedInArticle,
    LinkedInContent,
    MediaAsset,
    PlatformContent,
    PostContent,
    TikTokContent,
    TwitterContent,
    TwitterPoll,
    is_http_url,
)

__all__ = [
    # Models
    "ContentModel",
    "MediaAsset",
    "PostContent",
    "PlatformContent",
    "PLATFORM_CONTENT_MODELS",
    "TwitterContent",
    "TwitterPoll",
    "FacebookContent",
    "FacebookLink",
    "InstagramContent",
    "InstagramLocation",
    "LinkedInContent",
    "LinkedInArticle",
    "TikTokContent",
    "is_http_url",
    # Hashtags and mentions
    "normalize_hashtag",
    "normalize_hashtags",
    "normalize_mention",
    "normalize_mentions",
    "extract_hashtags",
    "extract_mentions",
]

"""Data models for post content."""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    PositiveInt,
    TypeAdapter,
    ValidationError,
    field_validator,
)
from pydantic.alias_generators import to_camel

from ..constants.limits import POST_TEXT_MAX_LENGTH
from ..constants.status import MediaType, SocialPlatform
from ..platforms.constraints import parse_platform
from .hashtags import extract_hashtags, normalize_hashtags, normalize_mentions

_HTTP_URL = TypeAdapter(HttpUrl)


def is_http_url(value: str) -> bool:
    """Check that a string is an absolute http(s) URL with a valid host.

    URL fields stay plain strings; this only gates them so each field can
    raise its own message.
    """
    try:
        _HTTP_URL.validate_python(value)
    except ValidationError:
        return False
    return True


class ContentModel(BaseModel):
    """Base for content models: immutable, camelCase or snake_case keys."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class MediaAsset(ContentModel):
    """A media attachment referenced by a post."""

    id: Optional[str] = None
    url: str
    type: MediaType
    filename: str
    size: int = Field(gt=0, description="File size in bytes")
    width: Optional[PositiveInt] = None
    height: Optional[PositiveInt] = None

    @field_validator("url")
    @classmethod
    def _check_url(cls, value: str) -> str:
        if not is_http_url(value):
            raise ValueError("Invalid media URL")
        return value

    @field_validator("filename")
    @classmethod
    def _check_filename(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Filename is required")
        return value


# =============================================================================
# PLATFORM-SPECIFIC CONTENT
# =============================================================================

class TwitterPoll(ContentModel):
    options: tuple[str, ...] = Field(min_length=2, max_length=4)
    duration: PositiveInt = Field(description="Poll duration in minutes")


class TwitterContent(ContentModel):
    poll: Optional[TwitterPoll] = None


class FacebookLink(ContentModel):
    url: str
    title: Optional[str] = None
    description: Optional[str] = None

    @field_validator("url")
    @classmethod
    def _check_url(cls, value: str) -> str:
        if not is_http_url(value):
            raise ValueError("Invalid link URL")
        return value


class FacebookContent(ContentModel):
    link: Optional[FacebookLink] = None


class Coordinates(ContentModel):
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)


class InstagramLocation(ContentModel):
    name: str
    coordinates: Optional[Coordinates] = None


class InstagramContent(ContentModel):
    location: Optional[InstagramLocation] = None


class LinkedInArticle(ContentModel):
    title: str
    description: str
    url: str

    @field_validator("url")
    @classmethod
    def _check_url(cls, value: str) -> str:
        if not is_http_url(value):
            raise ValueError("Invalid article URL")
        return value


class LinkedInContent(ContentModel):
    article: Optional[LinkedInArticle] = None


class TikTokContent(ContentModel):
    effects: tuple[str, ...] = ()
    sounds: tuple[str, ...] = ()


PlatformContent = Union[
    TwitterContent, FacebookContent, InstagramContent, LinkedInContent, TikTokContent
]

PLATFORM_CONTENT_MODELS: dict[SocialPlatform, type[ContentModel]] = {
    SocialPlatform.TWITTER: TwitterContent,
    SocialPlatform.FACEBOOK: FacebookContent,
    SocialPlatform.INSTAGRAM: InstagramContent,
    SocialPlatform.LINKEDIN: LinkedInContent,
    SocialPlatform.TIKTOK: TikTokContent,
}


# =============================================================================
# POST CONTENT
# =============================================================================

class PostContent(ContentModel):
    """Content of a post, shared by all of its target platforms.

    Validated here only for dashboard-wide rules (overall text length, media
    shape). Per-platform rules are checked by prismo.validation.
    """

    text: str = ""
    media: tuple[MediaAsset, ...] = ()
    hashtags: tuple[str, ...] = ()
    mentions: tuple[str, ...] = ()
    platform_specific: dict[SocialPlatform, Any] = Field(default_factory=dict)

    @field_validator("text")
    @classmethod
    def _check_text(cls, value: str) -> str:
        if len(value) > POST_TEXT_MAX_LENGTH:
            raise ValueError("Post text too long")
        return value

    @field_validator("hashtags", mode="before")
    @classmethod
    def _normalize_hashtags(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple, set, frozenset)):
            return tuple(normalize_hashtags(str(tag) for tag in value))
        return value

    @field_validator("mentions", mode="before")
    @classmethod
    def _normalize_mentions(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple, set, frozenset)):
            return tuple(normalize_mentions(str(handle) for handle in value))
        return value

    @field_validator("platform_specific", mode="before")
    @classmethod
    def _normalize_platform_keys(cls, value: Any) -> Any:
        # Accept "twitter" as well as "TWITTER" for keys
        if isinstance(value, dict):
            normalized = {}
            for key, data in value.items():
                platform = SocialPlatform.from_name(key)
                normalized[platform if platform is not None else key] = data
            return normalized
        return value

    def all_hashtags(self) -> list[str]:
        """Declared hashtags followed by those written inline in the text."""
        return normalize_hashtags([*self.hashtags, *extract_hashtags(self.text)])

    def platform_content(self, platform: Any) -> Optional[PlatformContent]:
        """Parse the platform-specific data for a platform into its typed model.

        Returns None when the post carries no data for that platform.

        Args:
            platform: SocialPlatform member or platform name (case-insensitive).

        Raises:
            UnknownPlatformError: If the platform is not known.
            pydantic.ValidationError: If the data does not fit the platform's shape.
        """
        platform = parse_platform(platform)
        data = self.platform_specific.get(platform)
        if data is None:
            return None
        model = PLATFORM_CONTENT_MODELS[platform]
        if isinstance(data, model):
            return data
        return model.model_validate(data)

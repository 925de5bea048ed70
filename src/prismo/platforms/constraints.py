"""Per-platform content constraints.

This is the single source of truth for platform limits. Validation, the CLI
and any caller that needs a limit read it from PLATFORM_CONSTRAINTS; no other
module defines a per-platform number.

Values are based on each network's publishing API documentation.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

from ..constants.status import MediaType, SocialPlatform
from ..core.errors import UnknownPlatformError


@dataclass(frozen=True)
class PlatformConstraints:
    """Static content rules for one platform."""

    platform: SocialPlatform
    display_name: str
    max_text_length: int
    max_media_count: int
    supported_media_types: frozenset[MediaType]
    requires_media: bool = False
    supports_polls: bool = False
    supports_links: bool = False
    text_noun: str = "posts"

    def supports(self, media_type: MediaType) -> bool:
        """Check whether a media kind can be attached on this platform."""
        return media_type in self.supported_media_types


_ALL_MEDIA = frozenset({MediaType.IMAGE, MediaType.VIDEO, MediaType.GIF})
_STILL_AND_VIDEO = frozenset({MediaType.IMAGE, MediaType.VIDEO})


PLATFORM_CONSTRAINTS: Mapping[SocialPlatform, PlatformConstraints] = MappingProxyType({
    SocialPlatform.TWITTER: PlatformConstraints(
        platform=SocialPlatform.TWITTER,
        display_name="Twitter",
        max_text_length=280,
        max_media_count=4,
        supported_media_types=_ALL_MEDIA,
        supports_polls=True,
        supports_links=True,
    ),
    SocialPlatform.FACEBOOK: PlatformConstraints(
        platform=SocialPlatform.FACEBOOK,
        display_name="Facebook",
        max_text_length=63206,
        max_media_count=10,
        supported_media_types=_STILL_AND_VIDEO,
        supports_links=True,
    ),
    SocialPlatform.INSTAGRAM: PlatformConstraints(
        platform=SocialPlatform.INSTAGRAM,
        display_name="Instagram",
        max_text_length=2200,
        max_media_count=10,
        supported_media_types=_STILL_AND_VIDEO,
        requires_media=True,
        text_noun="captions",
    ),
    SocialPlatform.LINKEDIN: PlatformConstraints(
        platform=SocialPlatform.LINKEDIN,
        display_name="LinkedIn",
        max_text_length=3000,
        max_media_count=9,
        supported_media_types=_STILL_AND_VIDEO,
        supports_links=True,
    ),
    SocialPlatform.TIKTOK: PlatformConstraints(
        platform=SocialPlatform.TIKTOK,
        display_name="TikTok",
        max_text_length=2200,
        max_media_count=1,
        supported_media_types=frozenset({MediaType.VIDEO}),
        requires_media=True,
        text_noun="captions",
    ),
})


def supported_platforms() -> list[SocialPlatform]:
    """Get all platforms that have a constraints record, in table order."""
    return list(PLATFORM_CONSTRAINTS.keys())


def parse_platform(value: Any) -> SocialPlatform:
    """Resolve a platform enum member or name to a SocialPlatform.

    Raises:
        UnknownPlatformError: If the value is not a known platform.
    """
    platform = SocialPlatform.from_name(value)
    if platform is None:
        raise UnknownPlatformError(value, [p.value for p in supported_platforms()])
    return platform


def get_constraints(platform: Any) -> PlatformConstraints:
    """Get the constraints record for a platform.

    Args:
        platform: SocialPlatform member or platform name (case-insensitive).

    Returns:
        The platform's constraints record.

    Raises:
        UnknownPlatformError: If the platform has no record.
    """
    resolved = parse_platform(platform)
    constraints = PLATFORM_CONSTRAINTS.get(resolved)
    if constraints is None:
        raise UnknownPlatformError(resolved, [p.value for p in supported_platforms()])
    return constraints

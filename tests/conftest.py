"""Shared test fixtures and configuration.

Provides media assets and a content factory used across the test suite.
"""

from __future__ import annotations

from typing import Any, Callable

import pytest

from prismo.constants import MediaType
from prismo.content import MediaAsset, PostContent


def make_media(media_type: MediaType = MediaType.IMAGE, index: int = 1) -> MediaAsset:
    """Build a media asset of the given kind."""
    extension = {"image": "jpg", "video": "mp4", "gif": "gif"}[media_type.value]
    return MediaAsset(
        id=str(index),
        url=f"https://example.com/media/{index}.{extension}",
        type=media_type,
        filename=f"{media_type.value}-{index}.{extension}",
        size=1000,
    )


@pytest.fixture
def image_asset() -> MediaAsset:
    return make_media(MediaType.IMAGE)


@pytest.fixture
def video_asset() -> MediaAsset:
    return make_media(MediaType.VIDEO)


@pytest.fixture
def gif_asset() -> MediaAsset:
    return make_media(MediaType.GIF)


@pytest.fixture
def make_content() -> Callable[..., PostContent]:
    """Factory for PostContent.

    Usage:
        def test_something(make_content):
            content = make_content(text="hi", images=2)
    """
    def _make(
        text: str = "Hello world",
        images: int = 0,
        videos: int = 0,
        gifs: int = 0,
        **kwargs: Any,
    ) -> PostContent:
        media = []
        index = 1
        for media_type, count in (
            (MediaType.IMAGE, images),
            (MediaType.VIDEO, videos),
            (MediaType.GIF, gifs),
        ):
            for _ in range(count):
                media.append(make_media(media_type, index))
                index += 1
        return PostContent(text=text, media=media, **kwargs)

    return _make

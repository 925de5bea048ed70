"""Tests for post, analytics and engagement request schemas."""

import pytest
from pydantic import ValidationError

from prismo.constants import (
    ApprovalStatus,
    EngagementStatus,
    EngagementType,
    SocialPlatform,
)
from prismo.schemas import (
    CreateEngagementInput,
    CreatePostInput,
    PostAnalyticsInput,
    UpdateEngagementInput,
    UpdatePostInput,
)


def _messages(exc_info) -> list[str]:
    return [error["msg"] for error in exc_info.value.errors()]


class TestCreatePostInput:
    """Test CreatePostInput."""

    def test_valid_post(self):
        post = CreatePostInput.model_validate({
            "content": {"text": "Hello"},
            "platforms": ["TWITTER", "FACEBOOK"],
            "scheduledAt": "2026-03-01T09:30:00Z",
        })

        assert post.platforms == [SocialPlatform.TWITTER, SocialPlatform.FACEBOOK]
        assert post.approval_status == ApprovalStatus.NOT_REQUIRED
        assert post.scheduled_at.hour == 9

    def test_platform_names_any_case(self):
        post = CreatePostInput(content={"text": "Hi"}, platforms=["twitter", "LinkedIn"])

        assert post.platforms == [SocialPlatform.TWITTER, SocialPlatform.LINKEDIN]

    def test_at_least_one_platform(self):
        with pytest.raises(ValidationError) as exc_info:
            CreatePostInput(content={"text": "Hi"}, platforms=[])

        assert any("At least one platform required" in m for m in _messages(exc_info))

    def test_unknown_platform_rejected(self):
        with pytest.raises(ValidationError):
            CreatePostInput(content={"text": "Hi"}, platforms=["myspace"])

    def test_text_too_long(self):
        with pytest.raises(ValidationError) as exc_info:
            CreatePostInput(content={"text": "a" * 2001}, platforms=["TWITTER"])

        assert any("Post text too long" in m for m in _messages(exc_info))

    def test_platform_violations(self):
        """Schema-valid posts can still break platform rules."""
        post = CreatePostInput(
            content={"text": "a" * 300},
            platforms=["TWITTER", "FACEBOOK", "INSTAGRAM"],
        )

        outcomes = post.platform_violations()

        assert [o.platform for o in outcomes] == [SocialPlatform.TWITTER, SocialPlatform.INSTAGRAM]

    def test_platform_violations_empty_when_valid(self, make_content):
        post = CreatePostInput(content=make_content(images=1), platforms=["INSTAGRAM"])

        assert post.platform_violations() == []


class TestUpdatePostInput:
    """Test UpdatePostInput."""

    def test_partial_update(self):
        update = UpdatePostInput.model_validate({"approvalStatus": "APPROVED"})

        assert update.changes() == {"approval_status": ApprovalStatus.APPROVED}

    def test_platforms_may_be_omitted(self):
        assert UpdatePostInput().platforms is None

    def test_empty_platforms_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            UpdatePostInput(platforms=[])

        assert any("At least one platform required" in m for m in _messages(exc_info))


class TestPostAnalyticsInput:
    """Test PostAnalyticsInput."""

    def test_defaults(self):
        analytics = PostAnalyticsInput(platform_post_id="tw-1")

        assert analytics.likes == 0
        assert analytics.engagement_rate == 0.0

    def test_platform_post_id_required(self):
        with pytest.raises(ValidationError) as exc_info:
            PostAnalyticsInput(platform_post_id="")

        assert any("Platform post ID is required" in m for m in _messages(exc_info))

    @pytest.mark.parametrize("field", ["likes", "shares", "comments", "reach", "impressions"])
    def test_counters_not_negative(self, field):
        with pytest.raises(ValidationError):
            PostAnalyticsInput(platform_post_id="tw-1", **{field: -1})

    @pytest.mark.parametrize("rate", [-0.1, 1.1])
    def test_engagement_rate_range(self, rate):
        with pytest.raises(ValidationError):
            PostAnalyticsInput(platform_post_id="tw-1", engagement_rate=rate)

    def test_engagement_rate_bounds_inclusive(self):
        assert PostAnalyticsInput(platform_post_id="x", engagement_rate=1).engagement_rate == 1


class TestEngagementInput:
    """Test CreateEngagementInput and UpdateEngagementInput."""

    def _data(self, **overrides):
        data = {
            "type": "COMMENT",
            "author": "@fan",
            "content": "Love it",
            "platformEngagementId": "c-1",
        }
        data.update(overrides)
        return data

    def test_valid_engagement(self):
        engagement = CreateEngagementInput.model_validate(self._data(sentiment=0.8))

        assert engagement.type == EngagementType.COMMENT
        assert engagement.sentiment == 0.8

    @pytest.mark.parametrize("key, message", [
        ("author", "Author is required"),
        ("content", "Content is required"),
        ("platformEngagementId", "Platform engagement ID is required"),
    ])
    def test_required_fields(self, key, message):
        with pytest.raises(ValidationError) as exc_info:
            CreateEngagementInput.model_validate(self._data(**{key: ""}))

        assert any(message in m for m in _messages(exc_info))

    @pytest.mark.parametrize("sentiment", [-1.5, 1.5])
    def test_sentiment_range(self, sentiment):
        with pytest.raises(ValidationError):
            CreateEngagementInput.model_validate(self._data(sentiment=sentiment))

    def test_update_status(self):
        update = UpdateEngagementInput.model_validate({
            "status": "RESPONDED",
            "respondedAt": "2026-02-02T10:00:00Z",
        })

        assert update.status == EngagementStatus.RESPONDED
        assert update.responded_at is not None

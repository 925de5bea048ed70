"""Platform content validation.

Checks one PostContent against the constraints record of each requested
platform and reports every broken rule. Content problems are returned as
values; only an unknown platform is raised.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from ..content.models import PostContent
from ..core.errors import UnknownPlatformError
from ..core.types import Failure, Result, Success
from ..platforms.constraints import PlatformConstraints, get_constraints
from .types import ValidationOutcome, Violation, ViolationCode

_logger = logging.getLogger("content_validator")


def validate_for_platform(
    content: PostContent,
    constraints: PlatformConstraints,
) -> list[Violation]:
    """Check content against one platform's constraints.

    Rules run in a fixed order: text length, media count, required media,
    then media kind per item.

    Args:
        content: Post content to check.
        constraints: Constraints record of the target platform.

    Returns:
        Violations in rule order, empty if the content is valid.
    """
    name = constraints.display_name
    violations: list[Violation] = []

    if len(content.text) > constraints.max_text_length:
        violations.append(Violation(
            field="text",
            message=(
                f"{name} {constraints.text_noun} cannot exceed "
                f"{constraints.max_text_length:,} characters"
            ),
            code=ViolationCode.TEXT_TOO_LONG,
        ))

    if len(content.media) > constraints.max_media_count:
        limit = constraints.max_media_count
        noun = "item" if limit == 1 else "items"
        violations.append(Violation(
            field="media",
            message=f"{name} allows maximum {limit} media {noun}",
            code=ViolationCode.TOO_MANY_MEDIA,
        ))

    if constraints.requires_media and not content.media:
        violations.append(Violation(
            field="media",
            message=f"{name} posts require at least one media item",
            code=ViolationCode.MEDIA_REQUIRED,
        ))

    for index, item in enumerate(content.media):
        if not constraints.supports(item.type):
            violations.append(Violation(
                field=f"media[{index}].type",
                message=f"{name} does not support {item.type.value} media ({item.filename})",
                code=ViolationCode.UNSUPPORTED_MEDIA_TYPE,
            ))

    return violations


def validate_content_for_platforms(
    content: PostContent,
    platforms: Iterable[Any],
) -> list[ValidationOutcome]:
    """Validate content for each requested platform.

    Every platform is resolved before any content is checked, so an unknown
    platform aborts the whole call without a partial result.

    Args:
        content: Post content to check.
        platforms: SocialPlatform members or names, in the order to report.

    Returns:
        One outcome per platform with violations, in input order. Platforms
        the content is valid for are absent.

    Raises:
        UnknownPlatformError: If any platform has no constraints record.
    """
    targets = [get_constraints(platform) for platform in platforms]

    outcomes: list[ValidationOutcome] = []
    for constraints in targets:
        violations = validate_for_platform(content, constraints)
        if violations:
            _logger.debug(
                f"PLATFORM_INVALID | platform={constraints.platform.value} | "
                f"codes={[v.code.value for v in violations]}"
            )
            outcomes.append(ValidationOutcome(
                platform=constraints.platform,
                violations=tuple(violations),
            ))

    _logger.info(
        f"CONTENT_VALIDATION | platforms={[c.platform.value for c in targets]} | "
        f"invalid={[o.platform.value for o in outcomes]}"
    )
    return outcomes


def check_content_for_platforms(
    content: PostContent,
    platforms: Iterable[Any],
) -> Result[list[ValidationOutcome]]:
    """Validate content, returning a configuration error as a Failure.

    Returns:
        Success with the outcome list (empty when valid everywhere), or
        Failure when a platform is unknown.
    """
    try:
        return Success(validate_content_for_platforms(content, platforms))
    except UnknownPlatformError as e:
        _logger.error(f"Content validation aborted: {e}")
        return Failure(
            str(e),
            {"platform": str(e.platform), "available": e.available},
        )

"""Pagination helpers for list endpoints.

Pure functions: turn a requested page/limit into offset parameters and wrap a
page of rows with its navigation metadata.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Generic, Optional, Sequence, TypeVar

from ..constants.limits import (
    PAGINATION_DEFAULT_LIMIT,
    PAGINATION_DEFAULT_PAGE,
    PAGINATION_MAX_LIMIT,
)

T = TypeVar("T")


@dataclass(frozen=True)
class PaginationParams:
    """Clamped page request with the matching offset."""

    page: int
    limit: int
    skip: int
    take: int


@dataclass(frozen=True)
class Pagination:
    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "page": self.page,
            "limit": self.limit,
            "total": self.total,
            "totalPages": self.total_pages,
            "hasNext": self.has_next,
            "hasPrev": self.has_prev,
        }


@dataclass(frozen=True)
class PaginatedResult(Generic[T]):
    data: list[T]
    pagination: Pagination


def get_pagination_params(
    page: Optional[int] = None,
    limit: Optional[int] = None,
    max_limit: int = PAGINATION_MAX_LIMIT,
) -> PaginationParams:
    """Clamp a page request and compute its offset.

    Missing or zero values fall back to the defaults. Page is at least 1,
    limit is kept within [1, max_limit].

    Args:
        page: Requested 1-based page number.
        limit: Requested page size.
        max_limit: Largest page size allowed.

    Returns:
        PaginationParams with page, limit, skip and take.
    """
    page = max(1, page or PAGINATION_DEFAULT_PAGE)
    limit = min(max_limit, max(1, limit or PAGINATION_DEFAULT_LIMIT))
    skip = (page - 1) * limit
    return PaginationParams(page=page, limit=limit, skip=skip, take=limit)


def create_paginated_result(
    data: Sequence[T],
    total: int,
    page: int,
    limit: int,
) -> PaginatedResult[T]:
    """Wrap one page of rows with navigation metadata."""
    total_pages = math.ceil(total / limit) if limit > 0 else 0
    return PaginatedResult(
        data=list(data),
        pagination=Pagination(
            page=page,
            limit=limit,
            total=total,
            total_pages=total_pages,
            has_next=page < total_pages,
            has_prev=page > 1,
        ),
    )

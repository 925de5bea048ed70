"""Utility modules for Prismo."""

from .pagination import (
    Pagination,
    PaginatedResult,
    PaginationParams,
    create_paginated_result,
    get_pagination_params,
)

__all__ = [
    "Pagination",
    "PaginatedResult",
    "PaginationParams",
    "create_paginated_result",
    "get_pagination_params",
]

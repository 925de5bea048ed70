"""Tests for pagination helpers."""

import pytest

from prismo.utils import create_paginated_result, get_pagination_params


class TestGetPaginationParams:
    """Test page/limit clamping and offsets."""

    def test_defaults(self):
        params = get_pagination_params()

        assert (params.page, params.limit, params.skip, params.take) == (1, 10, 0, 10)

    def test_offset(self):
        params = get_pagination_params(page=3, limit=20)

        assert params.skip == 40
        assert params.take == 20

    @pytest.mark.parametrize("page, expected", [(0, 1), (-5, 1), (None, 1), (7, 7)])
    def test_page_clamped(self, page, expected):
        assert get_pagination_params(page=page).page == expected

    @pytest.mark.parametrize("limit, expected", [(0, 10), (-3, 1), (500, 100), (100, 100), (1, 1)])
    def test_limit_clamped(self, limit, expected):
        assert get_pagination_params(limit=limit).limit == expected

    def test_custom_max_limit(self):
        assert get_pagination_params(limit=80, max_limit=50).limit == 50


class TestCreatePaginatedResult:
    """Test page metadata."""

    def test_middle_page(self):
        result = create_paginated_result(["c", "d"], total=5, page=2, limit=2)

        assert result.data == ["c", "d"]
        assert result.pagination.total_pages == 3
        assert result.pagination.has_next is True
        assert result.pagination.has_prev is True

    def test_last_page(self):
        result = create_paginated_result(["e"], total=5, page=3, limit=2)

        assert result.pagination.has_next is False

    def test_empty(self):
        result = create_paginated_result([], total=0, page=1, limit=10)

        assert result.pagination.total_pages == 0
        assert result.pagination.has_next is False
        assert result.pagination.has_prev is False

    def test_to_dict_uses_camel_case(self):
        result = create_paginated_result(range(10), total=25, page=1, limit=10)

        assert result.pagination.to_dict() == {
            "page": 1,
            "limit": 10,
            "total": 25,
            "totalPages": 3,
            "hasNext": True,
            "hasPrev": False,
        }
        assert result.data == list(range(10))

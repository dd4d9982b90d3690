"""Tests for page/limit normalization."""

import pytest

from starwars.services.pagination import (
    build_pagination,
    normalize_limit,
    normalize_page,
    total_pages,
)


class TestNormalizePage:
    @pytest.mark.parametrize("page", [None, 0, -3])
    def test_missing_or_invalid_page_defaults_to_first(self, page):
        assert normalize_page(page) == 1

    def test_page_passes_through(self):
        assert normalize_page(7) == 7


class TestNormalizeLimit:
    @pytest.mark.parametrize("limit", [None, 0, -1])
    def test_missing_or_invalid_limit_defaults_to_ten(self, limit):
        assert normalize_limit(limit) == 10

    def test_limit_within_bounds_is_kept(self):
        assert normalize_limit(25) == 25

    def test_limit_is_clamped_to_one_hundred(self):
        assert normalize_limit(100) == 100
        assert normalize_limit(500) == 100


class TestTotalPages:
    def test_rounds_up(self):
        assert total_pages(21, 10) == 3

    def test_exact_multiple(self):
        assert total_pages(20, 10) == 2

    def test_no_rows_means_no_pages(self):
        assert total_pages(0, 10) == 0

    def test_build_pagination(self):
        pagination = build_pagination(page=2, limit=10, total=25)

        assert pagination.page == 2
        assert pagination.limit == 10
        assert pagination.total == 25
        assert pagination.total_pages == 3

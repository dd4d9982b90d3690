"""Page/limit normalization shared by every paginated listing."""

import math

from starwars.core.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from starwars.domain import Pagination


def normalize_page(page: int | None) -> int:
    if not page or page < 1:
        return DEFAULT_PAGE
    return page


def normalize_limit(limit: int | None) -> int:
    """Default missing/non-positive limits, then clamp to MAX_PAGE_SIZE."""
    requested = limit if limit and limit > 0 else DEFAULT_PAGE_SIZE
    return min(requested, MAX_PAGE_SIZE)


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit)


def build_pagination(page: int, limit: int, total: int) -> Pagination:
    return Pagination(
        page=page,
        limit=limit,
        total=total,
        total_pages=total_pages(total, limit),
    )

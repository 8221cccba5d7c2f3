"""Pagination planning: page/limit to a bounded offset/limit window."""

import math
from dataclasses import dataclass

from persona.domain.shared.model.value import CamelModel

MIN_LIMIT = 1
MAX_LIMIT = 50
DEFAULT_LIMIT = 20

# Offsets are bound as signed 64-bit integers
MAX_OFFSET = 2**63 - 1
MAX_PAGE = MAX_OFFSET // MAX_LIMIT + 1


class Pagination(CamelModel):
    page: int
    limit: int
    total: int
    total_pages: int
    has_next_page: bool
    has_prev_page: bool


@dataclass(frozen=True)
class PagePlan:
    page: int
    limit: int
    offset: int

    def complete(self, total: int) -> Pagination:
        """Pagination metadata once the total match count is known."""
        total_pages = math.ceil(total / self.limit)
        return Pagination(
            page=self.page,
            limit=self.limit,
            total=total,
            total_pages=total_pages,
            has_next_page=self.page < total_pages,
            has_prev_page=self.page > 1,
        )


def plan_page(page: int = 1, limit: int = DEFAULT_LIMIT) -> PagePlan:
    """Clamp ``limit`` into [1, 50] and ``page`` into [1, MAX_PAGE], whatever the caller validated."""
    limit = min(max(limit, MIN_LIMIT), MAX_LIMIT)
    page = min(max(page, 1), MAX_PAGE)
    return PagePlan(page=page, limit=limit, offset=(page - 1) * limit)

"""Tests for the pagination planner."""

from persona.domain.catalog.search.pagination import MAX_LIMIT, MAX_OFFSET, MAX_PAGE, plan_page


class TestPlanPage:
    def test_offset_from_page_and_limit(self):
        plan = plan_page(3, 10)
        assert (plan.page, plan.limit, plan.offset) == (3, 10, 20)

    def test_defaults(self):
        plan = plan_page()
        assert (plan.page, plan.limit, plan.offset) == (1, 20, 0)

    def test_limit_clamped_to_maximum(self):
        assert plan_page(1, 500).limit == MAX_LIMIT

    def test_limit_clamped_to_minimum(self):
        assert plan_page(1, 0).limit == 1

    def test_page_clamped_to_one(self):
        plan = plan_page(-4, 10)
        assert plan.page == 1
        assert plan.offset == 0


    def test_page_clamped_so_offset_fits_storage(self):
        plan = plan_page(10**20, MAX_LIMIT)
        assert plan.page == MAX_PAGE
        assert plan.offset <= MAX_OFFSET


class TestComplete:
    def test_first_of_three_pages(self):
        pagination = plan_page(1, 2).complete(5)

        assert pagination.total == 5
        assert pagination.total_pages == 3
        assert pagination.has_next_page is True
        assert pagination.has_prev_page is False

    def test_last_page(self):
        pagination = plan_page(3, 2).complete(5)
        assert pagination.has_next_page is False
        assert pagination.has_prev_page is True

    def test_empty_result(self):
        pagination = plan_page(1, 20).complete(0)
        assert pagination.total_pages == 0
        assert pagination.has_next_page is False
        assert pagination.has_prev_page is False

    def test_page_beyond_end(self):
        pagination = plan_page(9, 10).complete(15)
        assert pagination.total_pages == 2
        assert pagination.has_next_page is False
        assert pagination.has_prev_page is True

    def test_serializes_camel_case(self):
        dumped = plan_page(1, 10).complete(25).model_dump(by_alias=True)
        assert dumped == {
            "page": 1,
            "limit": 10,
            "total": 25,
            "totalPages": 3,
            "hasNextPage": True,
            "hasPrevPage": False,
        }

"""Tests for SqlTraitRepository and SqlOwnerReader on SQLite."""

from datetime import UTC, datetime, timedelta

import pytest
from sqlalchemy import insert, text
from sqlalchemy.ext.asyncio import AsyncSession

from persona.domain.auth.model.value import UserId
from persona.domain.catalog.model.aggregate import Trait
from persona.domain.catalog.model.category import TraitCategory
from persona.domain.catalog.model.value import TraitId
from persona.domain.catalog.search.filters import TraitFilters
from persona.domain.catalog.search.sorting import SortKey, SortOrder, resolve_sort
from persona.domain.catalog.service.catalog import CatalogService
from persona.domain.shared.error import StorageUnavailableError
from persona.infrastructure.persistence.repository.owner import SqlOwnerReader
from persona.infrastructure.persistence.repository.trait import SqlTraitRepository
from persona.infrastructure.persistence.tables import users_table

BASE_TIME = datetime(2024, 6, 1, tzinfo=UTC)


def _trait(owner_id: UserId, n: int = 0, **overrides) -> Trait:
    values = {
        "id": TraitId.generate(),
        "owner_id": owner_id,
        "name": f"Trait number {n}",
        "description": "A perfectly ordinary personality trait.",
        "category": TraitCategory.LEADERSHIP,
        "hourly_rate": 1000 + n * 100,
        "created_at": BASE_TIME + timedelta(minutes=n),
        "updated_at": BASE_TIME + timedelta(minutes=n),
    }
    values.update(overrides)
    return Trait(**values)


async def _store(repo: SqlTraitRepository, *traits: Trait) -> None:
    for trait in traits:
        await repo.create(trait)


async def insert_user(session: AsyncSession, username: str = "ada", **overrides) -> UserId:
    user_id = UserId.generate()
    values = {
        "id": str(user_id),
        "email": f"{username}@example.com",
        "username": username,
        "first_name": "Ada",
        "last_name": "Lovelace",
        "password_hash": "x",
        "verified": False,
        "created_at": BASE_TIME,
        "updated_at": BASE_TIME,
    }
    values.update(overrides)
    await session.execute(insert(users_table).values(**values))
    return user_id


class TestCrud:
    async def test_create_and_get(self, session: AsyncSession):
        repo = SqlTraitRepository(session)
        trait = _trait(UserId.generate(), daily_rate=6000)

        await repo.create(trait)
        loaded = await repo.get(trait.id)

        assert loaded == trait
        assert loaded.created_at.tzinfo is not None

    async def test_get_missing(self, session: AsyncSession):
        assert await SqlTraitRepository(session).get(TraitId.generate()) is None

    async def test_update_writes_mutable_columns_only(self, session: AsyncSession):
        repo = SqlTraitRepository(session)
        trait = _trait(UserId.generate(), total_rentals=7, verified=True)
        await repo.create(trait)

        trait.hourly_rate = 4200
        trait.total_rentals = 0
        trait.verified = False
        await repo.update(trait)
        loaded = await repo.get(trait.id)

        assert loaded.hourly_rate == 4200
        assert loaded.total_rentals == 7
        assert loaded.verified is True

    async def test_delete(self, session: AsyncSession):
        repo = SqlTraitRepository(session)
        trait = _trait(UserId.generate())
        await repo.create(trait)

        assert await repo.delete(trait.id) is True
        assert await repo.get(trait.id) is None
        assert await repo.delete(trait.id) is False

    async def test_storage_failure_is_wrapped(self, session: AsyncSession):
        await session.execute(text("DROP TABLE traits"))

        with pytest.raises(StorageUnavailableError):
            await SqlTraitRepository(session).get(TraitId.generate())


class TestFind:
    async def test_default_filters_hide_unavailable(self, session: AsyncSession):
        repo = SqlTraitRepository(session)
        owner = UserId.generate()
        await _store(repo, _trait(owner, 1), _trait(owner, 2, available=False))

        items, total = await repo.find(TraitFilters(), resolve_sort(), limit=20, offset=0)

        assert total == 1
        assert all(t.available for t in items)

    async def test_owner_filter_includes_unavailable(self, session: AsyncSession):
        repo = SqlTraitRepository(session)
        owner = UserId.generate()
        await _store(repo, _trait(owner, 1), _trait(owner, 2, available=False), _trait(UserId.generate(), 3))

        items, total = await repo.find(
            TraitFilters(owner_id=owner, available=None), resolve_sort(), limit=20, offset=0
        )

        assert total == 2
        assert [t.name for t in items] == ["Trait number 2", "Trait number 1"]

    async def test_search_matches_name_or_description_case_insensitively(self, session: AsyncSession):
        repo = SqlTraitRepository(session)
        owner = UserId.generate()
        await _store(
            repo,
            _trait(owner, 1, name="Quiet Leadership"),
            _trait(owner, 2, description="Makes every LEADER feel heard."),
            _trait(owner, 3, name="Stand-up Comedy", description="Timing and delivery for any crowd."),
        )

        _, total = await repo.find(TraitFilters(search="leader"), resolve_sort(), limit=20, offset=0)

        assert total == 2

    async def test_search_treats_wildcards_literally(self, session: AsyncSession):
        repo = SqlTraitRepository(session)
        await _store(repo, _trait(UserId.generate(), 1))

        _, total = await repo.find(TraitFilters(search="%"), resolve_sort(), limit=20, offset=0)

        assert total == 0

    async def test_numeric_and_flag_filters(self, session: AsyncSession):
        repo = SqlTraitRepository(session)
        owner = UserId.generate()
        await _store(
            repo,
            _trait(owner, 1, hourly_rate=1500, average_rating=4.8, verified=True),
            _trait(owner, 2, hourly_rate=1500, average_rating=3.0, verified=True),
            _trait(owner, 3, hourly_rate=9000, average_rating=4.9, verified=True),
            _trait(owner, 4, hourly_rate=1500, average_rating=4.9, verified=False),
        )

        items, total = await repo.find(
            TraitFilters(min_rating=4.5, max_price=2000, verified=True), resolve_sort(), limit=20, offset=0
        )

        assert total == 1
        assert items[0].name == "Trait number 1"

    async def test_max_price_zero_matches_nothing(self, session: AsyncSession):
        repo = SqlTraitRepository(session)
        await _store(repo, _trait(UserId.generate(), 1))

        _, total = await repo.find(TraitFilters(max_price=0), resolve_sort(), limit=20, offset=0)

        assert total == 0

    async def test_rating_tie_broken_by_rentals(self, session: AsyncSession):
        repo = SqlTraitRepository(session)
        owner = UserId.generate()
        await _store(
            repo,
            _trait(owner, 1, average_rating=4.5, total_rentals=3),
            _trait(owner, 2, average_rating=4.5, total_rentals=30),
            _trait(owner, 3, average_rating=4.9, total_rentals=1),
        )

        items, _ = await repo.find(
            TraitFilters(), resolve_sort(SortKey.RATING, SortOrder.DESC), limit=20, offset=0
        )

        assert [t.name for t in items] == ["Trait number 3", "Trait number 2", "Trait number 1"]

    async def test_pages_over_equal_keys_do_not_overlap(self, session: AsyncSession):
        repo = SqlTraitRepository(session)
        owner = UserId.generate()
        await _store(repo, *(_trait(owner, n, hourly_rate=1000) for n in range(5)))
        order = resolve_sort(SortKey.PRICE, SortOrder.ASC)

        seen: list[TraitId] = []
        for offset in (0, 2, 4):
            items, _ = await repo.find(TraitFilters(), order, limit=2, offset=offset)
            seen.extend(t.id for t in items)

        assert len(set(seen)) == 5


class TestCatalogSearchOnSqlite:
    async def test_category_price_ascending_first_page(self, session: AsyncSession):
        owner = await insert_user(session)
        repo = SqlTraitRepository(session)
        await _store(repo, *(_trait(owner, n) for n in range(5)))
        await _store(repo, _trait(owner, 9, category=TraitCategory.HUMOR, hourly_rate=100))
        service = CatalogService(trait_repo=repo, owner_reader=SqlOwnerReader(session))

        page = await service.search(
            {"category": "LEADERSHIP", "sortBy": "price", "sortOrder": "asc", "limit": "2"}
        )

        assert [item.hourly_rate for item in page.items] == [1000, 1100]
        assert page.pagination.total == 5
        assert page.pagination.total_pages == 3
        assert page.pagination.has_next_page is True
        assert page.pagination.has_prev_page is False
        assert page.items[0].owner.username == "ada"

    async def test_trait_without_owner_row(self, session: AsyncSession):
        repo = SqlTraitRepository(session)
        trait = _trait(UserId.generate())
        await repo.create(trait)
        service = CatalogService(trait_repo=repo, owner_reader=SqlOwnerReader(session))

        view = await service.get(str(trait.id))

        assert view.owner is None


class TestOwnerReader:
    async def test_returns_public_profiles_only(self, session: AsyncSession):
        owner = await insert_user(session, username="grace", bio="Compilers", verified=True)

        owners = await SqlOwnerReader(session).get_many([owner, UserId.generate()])

        assert list(owners) == [owner]
        profile = owners[owner]
        assert profile.username == "grace"
        assert profile.bio == "Compilers"
        assert profile.verified is True
        assert not hasattr(profile, "email")

    async def test_empty_ids(self, session: AsyncSession):
        assert await SqlOwnerReader(session).get_many([]) == {}

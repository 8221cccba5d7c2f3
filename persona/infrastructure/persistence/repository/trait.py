from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import ColumnElement, delete, func, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from persona.domain.catalog.model.aggregate import Trait
from persona.domain.catalog.model.value import TraitId
from persona.domain.catalog.port.repository import TraitRepository
from persona.domain.catalog.search.filters import TraitFilters
from persona.domain.catalog.search.sorting import OrderTerm, SortField, SortOrder
from persona.infrastructure.persistence.errors import storage_errors
from persona.infrastructure.persistence.mappers.trait import (
    MUTABLE_COLUMNS,
    row_to_trait,
    trait_to_dict,
)
from persona.infrastructure.persistence.tables import traits_table

_SORT_COLUMNS = {
    SortField.AVERAGE_RATING: traits_table.c.average_rating,
    SortField.TOTAL_RENTALS: traits_table.c.total_rentals,
    SortField.HOURLY_RATE: traits_table.c.hourly_rate,
    SortField.CREATED_AT: traits_table.c.created_at,
}


def _conditions(filters: TraitFilters) -> list[ColumnElement[bool]]:
    t = traits_table.c
    conditions: list[ColumnElement[bool]] = []
    if filters.owner_id is not None:
        conditions.append(t.owner_id == str(filters.owner_id))
    if filters.available is not None:
        conditions.append(t.available == filters.available)
    if filters.category is not None:
        conditions.append(t.category == filters.category.value)
    if filters.min_rating is not None:
        conditions.append(t.average_rating >= filters.min_rating)
    if filters.max_price is not None:
        conditions.append(t.hourly_rate <= filters.max_price)
    if filters.verified is not None:
        conditions.append(t.verified == filters.verified)
    if filters.search:
        conditions.append(
            or_(
                t.name.icontains(filters.search, autoescape=True),
                t.description.icontains(filters.search, autoescape=True),
            )
        )
    return conditions


def _order_by(order: Sequence[OrderTerm]) -> list[ColumnElement]:
    clauses: list[ColumnElement] = []
    for term in order:
        column = _SORT_COLUMNS[term.field]
        clauses.append(column.asc() if term.direction == SortOrder.ASC else column.desc())
    # Final stabiliser so pages over equal sort keys never overlap
    clauses.append(traits_table.c.id.asc())
    return clauses


class SqlTraitRepository(TraitRepository):
    """SQLAlchemy Core implementation of TraitRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @storage_errors
    async def get(self, trait_id: TraitId) -> Trait | None:
        stmt = select(traits_table).where(traits_table.c.id == str(trait_id))
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_trait(dict(row)) if row else None

    @storage_errors
    async def create(self, trait: Trait) -> None:
        await self.session.execute(insert(traits_table).values(**trait_to_dict(trait)))
        await self.session.flush()

    @storage_errors
    async def update(self, trait: Trait) -> None:
        values = trait_to_dict(trait)
        stmt = (
            update(traits_table)
            .where(traits_table.c.id == str(trait.id))
            .values({k: values[k] for k in MUTABLE_COLUMNS})
        )
        await self.session.execute(stmt)
        await self.session.flush()

    @storage_errors
    async def delete(self, trait_id: TraitId) -> bool:
        result = await self.session.execute(
            delete(traits_table).where(traits_table.c.id == str(trait_id))
        )
        await self.session.flush()
        return result.rowcount > 0

    @storage_errors
    async def find(
        self,
        filters: TraitFilters,
        order: Sequence[OrderTerm],
        *,
        limit: int,
        offset: int,
    ) -> tuple[list[Trait], int]:
        conditions = _conditions(filters)

        count_stmt = select(func.count()).select_from(traits_table).where(*conditions)
        total = (await self.session.execute(count_stmt)).scalar_one()

        stmt = (
            select(traits_table)
            .where(*conditions)
            .order_by(*_order_by(order))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_trait(dict(r)) for r in result.mappings().all()], total

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from persona.domain.auth.model.owner import OwnerProfile
from persona.domain.auth.model.value import UserId
from persona.domain.auth.port.owner_reader import OwnerReader
from persona.infrastructure.persistence.errors import storage_errors
from persona.infrastructure.persistence.mappers.owner import row_to_owner
from persona.infrastructure.persistence.tables import users_table

# Public columns only; credentials and email are never selected.
_PUBLIC_COLUMNS = (
    users_table.c.id,
    users_table.c.username,
    users_table.c.first_name,
    users_table.c.last_name,
    users_table.c.avatar,
    users_table.c.bio,
    users_table.c.verified,
)


class SqlOwnerReader(OwnerReader):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @storage_errors
    async def get_many(self, ids: list[UserId]) -> dict[UserId, OwnerProfile]:
        if not ids:
            return {}
        stmt = select(*_PUBLIC_COLUMNS).where(users_table.c.id.in_([str(i) for i in ids]))
        result = await self.session.execute(stmt)
        owners = (row_to_owner(dict(r)) for r in result.mappings().all())
        return {o.id: o for o in owners}

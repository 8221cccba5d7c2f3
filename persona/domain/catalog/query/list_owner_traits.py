from persona.domain.catalog.model.view import TraitView
from persona.domain.catalog.search.pagination import Pagination
from persona.domain.catalog.service.catalog import CatalogService
from persona.domain.shared.authorization.gate import public
from persona.domain.shared.query import Query, QueryHandler, Result


class ListOwnerTraits(Query):
    owner_id: str
    params: dict[str, str] = {}


class OwnerTraitList(Result):
    items: list[TraitView]
    pagination: Pagination


class ListOwnerTraitsHandler(QueryHandler[ListOwnerTraits, OwnerTraitList]):
    __auth__ = public()
    catalog_service: CatalogService

    async def run(self, cmd: ListOwnerTraits) -> OwnerTraitList:
        page = await self.catalog_service.list_by_owner(cmd.owner_id, cmd.params)
        return OwnerTraitList(items=page.items, pagination=page.pagination)

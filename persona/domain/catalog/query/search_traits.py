from persona.domain.catalog.model.view import TraitView
from persona.domain.catalog.search.filters import AppliedFilters
from persona.domain.catalog.search.pagination import Pagination
from persona.domain.catalog.service.catalog import CatalogService
from persona.domain.shared.authorization.gate import public
from persona.domain.shared.query import Query, QueryHandler, Result


class SearchTraits(Query):
    """Raw, unvalidated query parameters as received."""

    params: dict[str, str] = {}


class TraitSearchResult(Result):
    items: list[TraitView]
    pagination: Pagination
    filters: AppliedFilters


class SearchTraitsHandler(QueryHandler[SearchTraits, TraitSearchResult]):
    __auth__ = public()
    catalog_service: CatalogService

    async def run(self, cmd: SearchTraits) -> TraitSearchResult:
        page = await self.catalog_service.search(cmd.params)
        return TraitSearchResult(items=page.items, pagination=page.pagination, filters=page.filters)

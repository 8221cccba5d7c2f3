from persona.domain.catalog.model.view import TraitView
from persona.domain.catalog.service.catalog import CatalogService
from persona.domain.shared.authorization.gate import public
from persona.domain.shared.query import Query, QueryHandler, Result


class GetTrait(Query):
    trait_id: str


class TraitDetail(Result):
    trait: TraitView


class GetTraitHandler(QueryHandler[GetTrait, TraitDetail]):
    __auth__ = public()
    catalog_service: CatalogService

    async def run(self, cmd: GetTrait) -> TraitDetail:
        return TraitDetail(trait=await self.catalog_service.get(cmd.trait_id))

import logfire

from persona.domain.auth.model.principal import Principal
from persona.domain.catalog.service.catalog import CatalogService
from persona.domain.shared.authorization.gate import authenticated
from persona.domain.shared.command import Command, CommandHandler, Result


class DeleteTrait(Command):
    trait_id: str


class TraitDeleted(Result):
    trait_id: str


class DeleteTraitHandler(CommandHandler[DeleteTrait, TraitDeleted]):
    __auth__ = authenticated()
    principal: Principal
    catalog_service: CatalogService

    async def run(self, cmd: DeleteTrait) -> TraitDeleted:
        with logfire.span("DeleteTrait", trait_id=cmd.trait_id):
            await self.catalog_service.delete(self.principal, cmd.trait_id)
        return TraitDeleted(trait_id=cmd.trait_id)

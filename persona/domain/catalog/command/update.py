import logfire

from persona.domain.auth.model.principal import Principal
from persona.domain.catalog.model.value import TraitPatch
from persona.domain.catalog.model.view import TraitView
from persona.domain.catalog.service.catalog import CatalogService
from persona.domain.shared.authorization.gate import authenticated
from persona.domain.shared.command import Command, CommandHandler, Result


class UpdateTrait(Command):
    trait_id: str
    patch: TraitPatch


class TraitUpdated(Result):
    trait: TraitView


class UpdateTraitHandler(CommandHandler[UpdateTrait, TraitUpdated]):
    __auth__ = authenticated()
    principal: Principal
    catalog_service: CatalogService

    async def run(self, cmd: UpdateTrait) -> TraitUpdated:
        with logfire.span("UpdateTrait", trait_id=cmd.trait_id):
            trait = await self.catalog_service.update(self.principal, cmd.trait_id, cmd.patch)
        return TraitUpdated(trait=trait)

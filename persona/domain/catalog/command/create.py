import logfire

from persona.domain.auth.model.principal import Principal
from persona.domain.catalog.model.value import TraitDraft
from persona.domain.catalog.model.view import TraitView
from persona.domain.catalog.service.catalog import CatalogService
from persona.domain.shared.authorization.gate import authenticated
from persona.domain.shared.command import Command, CommandHandler, Result


class CreateTrait(Command):
    draft: TraitDraft


class TraitCreated(Result):
    trait: TraitView


class CreateTraitHandler(CommandHandler[CreateTrait, TraitCreated]):
    __auth__ = authenticated()
    principal: Principal
    catalog_service: CatalogService

    async def run(self, cmd: CreateTrait) -> TraitCreated:
        with logfire.span("CreateTrait", category=cmd.draft.category.value):
            trait = await self.catalog_service.create(self.principal, cmd.draft)
        return TraitCreated(trait=trait)

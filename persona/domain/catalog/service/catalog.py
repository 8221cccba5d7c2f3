import logging
from dataclasses import dataclass

from persona.domain.auth.model.identity import Identity
from persona.domain.auth.model.owner import OwnerProfile
from persona.domain.auth.model.principal import Principal
from persona.domain.auth.model.value import UserId
from persona.domain.auth.port.owner_reader import OwnerReader
from persona.domain.catalog.model.aggregate import Trait
from persona.domain.catalog.model.value import TraitDraft, TraitId, TraitPatch
from persona.domain.catalog.model.view import TraitView
from persona.domain.catalog.port.repository import TraitRepository
from persona.domain.catalog.search.filters import (
    AppliedFilters,
    RawParams,
    TraitFilters,
    compile_search,
    paging_pass,
)
from persona.domain.catalog.search.pagination import Pagination, plan_page
from persona.domain.catalog.search.sorting import SortKey, SortOrder, resolve_sort
from persona.domain.shared.authorization.action import Action
from persona.domain.shared.authorization.policy_set import authorize
from persona.domain.shared.error import NotFoundError
from persona.domain.shared.service import Service

logger = logging.getLogger(__name__)

OWNER_LISTING_DEFAULT_LIMIT = 10


@dataclass(frozen=True)
class TraitPage:
    items: list[TraitView]
    pagination: Pagination


@dataclass(frozen=True)
class SearchPage(TraitPage):
    filters: AppliedFilters


def _parse_trait_id(raw: str) -> TraitId:
    try:
        return TraitId.parse(raw)
    except ValueError:
        raise NotFoundError("Trait not found", code="not_found") from None


class CatalogService(Service):
    """Catalog query engine and trait lifecycle.

    Reads are public. Mutations run the ownership guard after loading the
    trait, so a missing trait is reported before any ownership mismatch.
    """

    trait_repo: TraitRepository
    owner_reader: OwnerReader

    async def search(self, params: RawParams) -> SearchPage:
        compiled = compile_search(params)
        order = resolve_sort(compiled.structural.sort_by, compiled.structural.sort_order)
        plan = plan_page(compiled.structural.page, compiled.structural.limit)

        traits, total = await self.trait_repo.find(
            compiled.filters, order, limit=plan.limit, offset=plan.offset
        )
        logger.debug("Search matched %d traits, returning %d", total, len(traits))
        return SearchPage(
            items=await self._with_owners(traits),
            pagination=plan.complete(total),
            filters=compiled.echo(),
        )

    async def list_by_owner(self, owner_id: str, params: RawParams) -> TraitPage:
        """All of one owner's traits, newest first, in every availability state."""
        page, limit = paging_pass(params, default_limit=OWNER_LISTING_DEFAULT_LIMIT)
        plan = plan_page(page, limit)
        try:
            owner = UserId.parse(owner_id)
        except ValueError:
            return TraitPage(items=[], pagination=plan.complete(0))

        traits, total = await self.trait_repo.find(
            TraitFilters(owner_id=owner, available=None),
            resolve_sort(SortKey.NEWEST, SortOrder.DESC),
            limit=plan.limit,
            offset=plan.offset,
        )
        return TraitPage(items=await self._with_owners(traits), pagination=plan.complete(total))

    async def get(self, trait_id: str) -> TraitView:
        trait = await self.trait_repo.get(_parse_trait_id(trait_id))
        if trait is None:
            raise NotFoundError("Trait not found", code="not_found")
        return (await self._with_owners([trait]))[0]

    async def create(self, principal: Principal, draft: TraitDraft) -> TraitView:
        trait = Trait.create(owner_id=principal.user_id, draft=draft)
        await self.trait_repo.create(trait)
        logger.info("Trait created: id=%s owner=%s", trait.id, trait.owner_id)
        return (await self._with_owners([trait]))[0]

    async def update(self, identity: Identity, trait_id: str, patch: TraitPatch) -> TraitView:
        trait = authorize(identity, await self._find(trait_id), Action.TRAIT_UPDATE)
        changed = trait.apply_patch(patch)
        await self.trait_repo.update(trait)
        logger.info("Trait updated: id=%s fields=%s", trait.id, changed)
        return (await self._with_owners([trait]))[0]

    async def delete(self, identity: Identity, trait_id: str) -> None:
        trait = authorize(identity, await self._find(trait_id), Action.TRAIT_DELETE)
        await self.trait_repo.delete(trait.id)
        logger.info("Trait deleted: id=%s", trait.id)

    async def _find(self, trait_id: str) -> Trait | None:
        try:
            parsed = TraitId.parse(trait_id)
        except ValueError:
            return None
        return await self.trait_repo.get(parsed)

    async def _with_owners(self, traits: list[Trait]) -> list[TraitView]:
        """Left-join owner profiles. A trait whose owner is gone keeps ``owner=None``."""
        if not traits:
            return []
        owner_ids = list(dict.fromkeys(t.owner_id for t in traits))
        owners: dict[UserId, OwnerProfile] = await self.owner_reader.get_many(owner_ids)
        return [TraitView.of(t, owners.get(t.owner_id)) for t in traits]

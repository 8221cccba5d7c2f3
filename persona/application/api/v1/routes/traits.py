"""Trait catalog REST routes.

Bodies are taken as raw JSON and validated inside the endpoint, after the
handler (and with it the caller's identity) has been resolved. A request is
therefore checked for authentication before validation, then existence, then
ownership.
"""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, Request

from persona.domain.catalog.command.create import CreateTrait, CreateTraitHandler
from persona.domain.catalog.command.delete import DeleteTrait, DeleteTraitHandler
from persona.domain.catalog.command.update import UpdateTrait, UpdateTraitHandler
from persona.domain.catalog.model.category import CategoryInfo
from persona.domain.catalog.model.value import TraitDraft, TraitPatch
from persona.domain.catalog.model.view import TraitView
from persona.domain.catalog.query.get_trait import GetTrait, GetTraitHandler
from persona.domain.catalog.query.list_categories import ListCategories, ListCategoriesHandler
from persona.domain.catalog.query.list_owner_traits import ListOwnerTraits, ListOwnerTraitsHandler
from persona.domain.catalog.query.search_traits import SearchTraits, SearchTraitsHandler
from persona.domain.catalog.search.filters import AppliedFilters
from persona.domain.catalog.search.pagination import Pagination
from persona.domain.shared.model.value import CamelModel

router = APIRouter(prefix="/traits", tags=["Traits"], route_class=DishkaRoute)


class TraitSearchResponse(CamelModel):
    success: bool = True
    data: list[TraitView]
    pagination: Pagination
    filters: AppliedFilters


class TraitListResponse(CamelModel):
    success: bool = True
    data: list[TraitView]
    pagination: Pagination


class TraitResponse(CamelModel):
    success: bool = True
    data: TraitView


class TraitMutationResponse(CamelModel):
    success: bool = True
    message: str
    data: TraitView


class MessageResponse(CamelModel):
    success: bool = True
    message: str


class CategoryListResponse(CamelModel):
    success: bool = True
    data: list[CategoryInfo]


def _params(request: Request) -> dict[str, str]:
    return dict(request.query_params)


@router.get("", response_model=TraitSearchResponse)
async def search_traits(
    request: Request,
    handler: FromDishka[SearchTraitsHandler],
) -> TraitSearchResponse:
    result = await handler.run(SearchTraits(params=_params(request)))
    return TraitSearchResponse(data=result.items, pagination=result.pagination, filters=result.filters)


@router.get("/meta/categories", response_model=CategoryListResponse)
async def list_categories(
    handler: FromDishka[ListCategoriesHandler],
) -> CategoryListResponse:
    result = await handler.run(ListCategories())
    return CategoryListResponse(data=result.items)


@router.get("/user/{user_id}", response_model=TraitListResponse)
async def list_owner_traits(
    user_id: str,
    request: Request,
    handler: FromDishka[ListOwnerTraitsHandler],
) -> TraitListResponse:
    result = await handler.run(ListOwnerTraits(owner_id=user_id, params=_params(request)))
    return TraitListResponse(data=result.items, pagination=result.pagination)


@router.get("/{trait_id}", response_model=TraitResponse)
async def get_trait(
    trait_id: str,
    handler: FromDishka[GetTraitHandler],
) -> TraitResponse:
    result = await handler.run(GetTrait(trait_id=trait_id))
    return TraitResponse(data=result.trait)


@router.post("", response_model=TraitMutationResponse, status_code=201)
async def create_trait(
    handler: FromDishka[CreateTraitHandler],
    body: Any = Body(None),
) -> TraitMutationResponse:
    result = await handler.run(CreateTrait(draft=TraitDraft.parse(body)))
    return TraitMutationResponse(message="Trait created successfully", data=result.trait)


@router.put("/{trait_id}", response_model=TraitMutationResponse)
async def update_trait(
    trait_id: str,
    handler: FromDishka[UpdateTraitHandler],
    body: Any = Body(None),
) -> TraitMutationResponse:
    result = await handler.run(UpdateTrait(trait_id=trait_id, patch=TraitPatch.parse(body)))
    return TraitMutationResponse(message="Trait updated successfully", data=result.trait)


@router.delete("/{trait_id}", response_model=MessageResponse)
async def delete_trait(
    trait_id: str,
    handler: FromDishka[DeleteTraitHandler],
) -> MessageResponse:
    await handler.run(DeleteTrait(trait_id=trait_id))
    return MessageResponse(message="Trait deleted successfully")

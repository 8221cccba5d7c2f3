"""Liveness and API info routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from persona.config import Config

router = APIRouter(tags=["Health"], route_class=DishkaRoute)

ENDPOINTS = [
    "GET /api/v1",
    "GET /api/v1/health",
    "GET /api/v1/traits",
    "GET /api/v1/traits/meta/categories",
    "GET /api/v1/traits/user/{userId}",
    "GET /api/v1/traits/{id}",
    "POST /api/v1/traits",
    "PUT /api/v1/traits/{id}",
    "DELETE /api/v1/traits/{id}",
]


@router.get("/health")
async def health(config: FromDishka[Config]) -> dict[str, str]:
    return {"status": "healthy", "version": config.server.version}


@router.get("")
async def api_info(config: FromDishka[Config]) -> dict[str, object]:
    return {
        "success": True,
        "name": config.server.name,
        "version": config.server.version,
        "environment": config.server.environment,
        "endpoints": ENDPOINTS,
    }

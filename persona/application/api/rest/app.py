import logging
from contextlib import asynccontextmanager

import logfire
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncEngine
from starlette.exceptions import HTTPException as StarletteHTTPException

from persona.application.api.v1.errors import (
    INTERNAL_ERROR_MESSAGE,
    error_envelope,
    map_persona_error,
)
from persona.application.api.v1.routes import health, traits
from persona.application.di import create_container
from persona.config import Config, configure_logging
from persona.domain.shared.authorization.startup import validate_all_handlers
from persona.domain.shared.error import FieldError, PersonaError
from persona.infrastructure.persistence.database import ensure_schema, is_sqlite

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    container = app.state.dishka_container
    config: Config = app.state.config

    if config.database.auto_migrate and is_sqlite(config.database.url):
        engine = await container.get(AsyncEngine)
        await ensure_schema(engine)

    yield

    await container.close()


def create_app(config: Config | None = None) -> FastAPI:
    """Create the FastAPI application.

    logfire must be configured by the caller (the CLI, or conftest in tests).
    """
    # Pydantic Settings populates from env vars at runtime
    config = config or Config()

    configure_logging(config.logging)
    logger.info("Starting %s v%s (%s)", config.server.name, config.server.version, config.server.environment)

    # Every handler must declare a gate and every action a policy rule (fail fast)
    validate_all_handlers()

    if not config.auth.jwt.secret:
        logger.warning("auth.jwt.secret is empty: every bearer token will be rejected")

    app_instance = FastAPI(
        title=config.server.name,
        description=config.server.description,
        version=config.server.version,
        lifespan=lifespan,
    )
    app_instance.state.config = config

    logfire.instrument_fastapi(app_instance)

    container = create_container(config)
    setup_dishka(container, app_instance)

    app_instance.include_router(health.router, prefix="/api/v1")
    app_instance.include_router(traits.router, prefix="/api/v1")

    redact = config.server.is_production

    @app_instance.exception_handler(PersonaError)
    async def persona_error_handler(request: Request, exc: PersonaError):
        http_exc = map_persona_error(exc, redact_internal=redact)
        if http_exc.status_code >= 500:
            logger.error("%s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc.message)
        return JSONResponse(
            status_code=http_exc.status_code,
            content=http_exc.detail,
            headers=http_exc.headers,
        )

    @app_instance.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = [
            FieldError(field=".".join(str(p) for p in err["loc"][1:]) or "body", message=err["msg"])
            for err in exc.errors()
        ]
        return JSONResponse(status_code=400, content=error_envelope("Validation failed", errors))

    @app_instance.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            message = f"Route {request.url.path} not found"
        else:
            message = str(exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content=error_envelope(message),
            headers=getattr(exc, "headers", None),
        )

    # Global exception handler - logs all unhandled exceptions
    @app_instance.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        message = INTERNAL_ERROR_MESSAGE if redact else (str(exc) or INTERNAL_ERROR_MESSAGE)
        return JSONResponse(status_code=500, content=error_envelope(message))

    return app_instance

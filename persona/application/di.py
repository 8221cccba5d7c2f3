from dishka import AsyncContainer, Provider, Scope, from_context, make_async_container

from persona.config import Config
from persona.domain.auth.util.di import AuthProvider
from persona.domain.catalog.util.di import CatalogProvider
from persona.infrastructure.persistence import PersistenceProvider


class ConfigProvider(Provider):
    config = from_context(provides=Config, scope=Scope.APP)


def create_container(config: Config | None = None) -> AsyncContainer:
    # Pydantic Settings populates from env vars at runtime
    config = config or Config()

    return make_async_container(
        ConfigProvider(),
        PersistenceProvider(),
        AuthProvider(),
        CatalogProvider(),
        context={Config: config},
    )

from collections.abc import AsyncIterable

from dishka import Provider, Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from persona.config import Config
from persona.domain.auth.port.owner_reader import OwnerReader
from persona.domain.catalog.port.repository import TraitRepository
from persona.infrastructure.persistence.database import (
    create_db_engine,
    create_session_factory,
)
from persona.infrastructure.persistence.repository.owner import SqlOwnerReader
from persona.infrastructure.persistence.repository.trait import SqlTraitRepository


class PersistenceProvider(Provider):
    # APP-scoped factories
    @provide(scope=Scope.APP)
    async def get_engine(self, config: Config) -> AsyncIterable[AsyncEngine]:
        engine = create_db_engine(config.database)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    # One session per request, committed when the request scope closes cleanly
    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterable[AsyncSession]:
        async with session_factory() as session:
            yield session
            await session.commit()

    trait_repo = provide(SqlTraitRepository, scope=Scope.REQUEST, provides=TraitRepository)
    owner_reader = provide(SqlOwnerReader, scope=Scope.REQUEST, provides=OwnerReader)

from dishka import Provider, Scope, provide

from persona.domain.catalog.command.create import CreateTraitHandler
from persona.domain.catalog.command.delete import DeleteTraitHandler
from persona.domain.catalog.command.update import UpdateTraitHandler
from persona.domain.catalog.query.get_trait import GetTraitHandler
from persona.domain.catalog.query.list_categories import ListCategoriesHandler
from persona.domain.catalog.query.list_owner_traits import ListOwnerTraitsHandler
from persona.domain.catalog.query.search_traits import SearchTraitsHandler
from persona.domain.catalog.service.catalog import CatalogService


class CatalogProvider(Provider):
    catalog_service = provide(CatalogService, scope=Scope.REQUEST)

    # Command Handlers
    create_handler = provide(CreateTraitHandler, scope=Scope.REQUEST)
    update_handler = provide(UpdateTraitHandler, scope=Scope.REQUEST)
    delete_handler = provide(DeleteTraitHandler, scope=Scope.REQUEST)

    # Query Handlers
    search_handler = provide(SearchTraitsHandler, scope=Scope.REQUEST)
    get_handler = provide(GetTraitHandler, scope=Scope.REQUEST)
    list_owner_handler = provide(ListOwnerTraitsHandler, scope=Scope.REQUEST)
    list_categories_handler = provide(ListCategoriesHandler, scope=Scope.APP)

from persona.domain.catalog.model.category import CATEGORY_CATALOG, CategoryInfo
from persona.domain.shared.authorization.gate import public
from persona.domain.shared.query import Query, QueryHandler, Result


class ListCategories(Query):
    pass


class CategoryList(Result):
    items: list[CategoryInfo]


class ListCategoriesHandler(QueryHandler[ListCategories, CategoryList]):
    __auth__ = public()

    async def run(self, cmd: ListCategories) -> CategoryList:
        return CategoryList(items=list(CATEGORY_CATALOG))

"""Categories and their product assignments."""

from .client import MagentoClient
from .entity import RemoteEntity
from .errors import NotFound
from .models import Category, MagentoModel, ProductLink
from .routes import CATEGORIES, CATEGORIES_LIST, CATEGORY_PRODUCTS_RELATIVE
from .search import SearchQuery


class CategorySearchResult(MagentoModel):
    items: list[Category] = []
    total_count: int | None = None


class MagentoCategory(RemoteEntity):
    def __init__(self, client: MagentoClient, category: Category | None = None, route: str | None = None):
        super().__init__(client, route)
        self.category = category or Category()
        self.products: list[ProductLink] = []

    @classmethod
    def create(cls, category: Category, client: MagentoClient) -> "MagentoCategory":
        remote = cls(client)
        remote.logger.debug(f"Creating category '{category.name}'")
        remote.category = client.post(CATEGORIES, {"category": category}, Category, operation="create category")
        remote._bind_route(f"{CATEGORIES}/{remote.category.id}")
        return remote

    @classmethod
    def get_by_name(cls, name: str, client: MagentoClient) -> "MagentoCategory":
        """Find a category by name and load its details and product links.

        Raises:
            NotFound: If no category has this name
        """
        endpoint = SearchQuery().where("name", name, "in").apply(CATEGORIES_LIST)
        client.logger.debug(f"Getting category by name '{name}'")
        result = client.get(endpoint, CategorySearchResult, operation="get category by name from remote")
        if not result.items:
            client.logger.warning(f"Category '{name}' not found by name")
            raise NotFound(f"no category named {name!r}", "get category by name from remote")

        remote = cls(client, result.items[0], route=f"{CATEGORIES}/{result.items[0].id}")
        remote.update_from_remote()
        return remote

    def update_from_remote(self) -> None:
        """Refresh category details, then its product links."""
        route = self.require_route("get category from remote")
        self.category = self.client.get(route, Category, operation="get category from remote")
        self._mark_hydrated()
        self.update_products_from_remote()

    def update_products_from_remote(self) -> None:
        route = self.require_route("get category products from remote")
        self.products = self.client.get(
            f"{route}/{CATEGORY_PRODUCTS_RELATIVE}",
            list[ProductLink],
            operation="get category products from remote",
        )

    def assign_product(self, link: ProductLink) -> None:
        """Assign a product to this category.

        The local product list is appended to without a re-fetch.
        """
        operation = "assign product to category"
        route = self.require_route(operation)
        if not link.category_id:
            link = link.model_copy(update={"category_id": str(self.category.id)})

        self.logger.debug(f"Assigning product '{link.sku}' to category {self.category.id}")
        self.client.put(f"{route}/{CATEGORY_PRODUCTS_RELATIVE}", {"productLink": link}, bool, operation=operation)
        self.products.append(link)

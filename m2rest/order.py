"""Orders and order comments."""

from .client import MagentoClient
from .entity import RemoteEntity
from .errors import NotFound
from .models import MagentoModel, Order, StatusHistory
from .routes import ORDER_COMMENTS_RELATIVE, ORDERS
from .search import SearchQuery


class _OrderId(MagentoModel):
    entity_id: int


class _OrderSearchResult(MagentoModel):
    items: list[_OrderId] | None = None


def order_route(entity_id: int) -> str:
    return f"{ORDERS}/{entity_id}"


class MagentoOrder(RemoteEntity):
    def __init__(self, client: MagentoClient, order: Order | None = None, route: str | None = None):
        super().__init__(client, route)
        self.order = order or Order()

    @classmethod
    def from_entity_id(cls, entity_id: int, client: MagentoClient) -> "MagentoOrder":
        """Wrap a known order id without fetching it."""
        return cls(client, Order(entity_id=entity_id), route=order_route(entity_id))

    @classmethod
    def get_by_increment_id(cls, increment_id: str, client: MagentoClient) -> "MagentoOrder":
        """Find an order by its customer-facing increment id.

        Raises:
            NotFound: If no order has this increment id
        """
        operation = "get order by increment_id from remote"
        endpoint = (
            SearchQuery()
            .where("increment_id", increment_id, "eq")
            .with_param("fields", "items[entity_id]")
            .apply(ORDERS)
        )
        client.logger.debug(f"Getting order by increment id {increment_id}")
        result = client.get(endpoint, _OrderSearchResult, operation=operation)
        if not result.items:
            client.logger.warning(f"Order {increment_id} not found by increment id")
            raise NotFound(f"no order with increment id {increment_id!r}", operation)

        remote = cls.from_entity_id(result.items[0].entity_id, client)
        remote.update_from_remote()
        return remote

    def update_from_remote(self) -> None:
        operation = "get detailed order object from magento2-api"
        route = self.require_route(operation)
        self.order = self.client.get(route, Order, operation=operation)
        self._mark_hydrated()

    def update_entity(self, order: Order) -> None:
        """Save ``order`` over this order (Magento updates orders via POST /orders)."""
        operation = "update order entity on remote"
        self.require_route(operation)
        entity = order.model_copy(update={"entity_id": self.order.entity_id})
        self.logger.debug(f"Updating order {self.order.entity_id}")
        self.order = self.client.post(ORDERS, {"entity": entity}, Order, operation=operation)

    def add_comment(self, comment: StatusHistory) -> bool:
        operation = "add comment to order"
        route = self.require_route(operation)
        self.logger.debug(f"Adding comment to order {self.order.entity_id}")
        return self.client.post(
            f"{route}/{ORDER_COMMENTS_RELATIVE}", {"statusHistory": comment}, bool, operation=operation
        )

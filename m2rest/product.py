"""Products and their stock items."""

from urllib.parse import unquote

from .client import MagentoClient
from .entity import RemoteEntity
from .errors import MagentoClientError
from .models import Product, StockItem
from .normalizer import trim_surrounding_quotes
from .routes import PRODUCTS, STOCK_ITEMS, STOCK_ITEMS_RELATIVE, encode_sku, product_route


class MagentoProduct(RemoteEntity):
    """A product addressed by SKU (``/products/<sku>``)."""

    def __init__(self, client: MagentoClient, product: Product | None = None, route: str | None = None):
        super().__init__(client, route)
        self.product = product or Product()

    @classmethod
    def create_or_replace(cls, product: Product, save_options: bool, client: MagentoClient) -> "MagentoProduct":
        """Create the product, or replace the one with the same SKU.

        Raises:
            BadRequest: If Magento rejects the payload
        """
        remote = cls(client, product)
        remote._create_or_replace(save_options)
        return remote

    @classmethod
    def get_by_sku(cls, sku: str, client: MagentoClient) -> "MagentoProduct":
        """Fetch a product by SKU.

        Raises:
            NotFound: If no product has this SKU
        """
        remote = cls(client, route=product_route(sku))
        remote.update_from_remote()
        return remote

    def _create_or_replace(self, save_options: bool) -> None:
        payload = {"product": self.product, "saveOptions": save_options}
        self.logger.debug(f"Creating or replacing product '{self.product.sku}' (saveOptions={save_options})")

        self.product = self.client.post(PRODUCTS, payload, Product, operation="create new product on remote")

        sku = trim_surrounding_quotes(self.product.sku or "")
        if not sku:
            raise MagentoClientError("remote returned a product without sku", "create new product on remote")
        self._bind_route(product_route(sku))

    def update_from_remote(self) -> None:
        route = self.require_route("get detailed product from remote")
        self.product = self.client.get(route, Product, operation="get detailed product from remote")
        self._mark_hydrated()

    def update_quantity_for_stock_item(self, stock_item_id: int | str, quantity: float, is_in_stock: bool) -> int:
        """Set quantity and stock status on one stock item of this product.

        Returns:
            The stock item id Magento reports back.
        """
        operation = "update stock for product"
        route = self.require_route(operation)
        endpoint = f"{route}/{STOCK_ITEMS_RELATIVE}/{stock_item_id}"
        payload = {"stockItem": StockItem(qty=quantity, is_in_stock=is_in_stock)}

        self.logger.debug(f"Updating stock item {stock_item_id} of '{self.product.sku}': qty={quantity}, in_stock={is_in_stock}")
        item_id = self.client.put(endpoint, payload, int, operation=operation)
        self.logger.info(f"Updated Magento stock for '{self.product.sku}': qty={quantity}, in_stock={is_in_stock}")
        return item_id

    def get_stock_item(self) -> StockItem:
        """Get the legacy single-stock record for this product's SKU.

        Raises:
            NotFound: If the SKU has no stock item
        """
        sku = self._sku()
        return self.client.get(
            f"{STOCK_ITEMS}/{encode_sku(sku)}", StockItem, operation=f"get stock item for SKU '{sku}'"
        )

    def stock_item_id(self) -> int:
        """Stock item id from the product's extension attributes, else from ``/stockItems``."""
        stock_data = (self.product.extension_attributes or {}).get("stock_item") or {}
        item_id = stock_data.get("item_id")
        if item_id:
            return int(item_id)

        stock_item = self.get_stock_item()
        if not stock_item.item_id:
            raise MagentoClientError(f"no item_id found for SKU '{self._sku()}'", "resolve stock item")
        return stock_item.item_id

    def update_stock(self, qty: float, is_in_stock: bool | None = None) -> int:
        """Update stock quantity, defaulting in-stock to ``qty > 0``."""
        if is_in_stock is None:
            is_in_stock = qty > 0
        return self.update_quantity_for_stock_item(self.stock_item_id(), qty, is_in_stock)

    def _sku(self) -> str:
        if self.product.sku:
            return self.product.sku
        route = self.require_route("resolve product sku")
        return unquote(route.rsplit("/", 1)[-1])

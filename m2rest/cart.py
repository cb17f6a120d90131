"""Guest and customer carts through to order placement."""

from .client import MagentoClient
from .entity import RemoteEntity
from .errors import ItemNotFound, MagentoClientError, NotFound
from .models import AddressInformation, Cart, CartItem, Carrier, PaymentMethod, ShippingAddress
from .order import MagentoOrder
from .routes import (
    CART_ITEMS,
    CART_PAYMENT_METHODS,
    CART_PLACE_ORDER,
    CART_SHIPPING_COSTS,
    CART_SHIPPING_INFORMATION,
    CUSTOMER_CART,
    GUEST_CARTS,
)


class MagentoCart(RemoteEntity):
    """A quote (cart) and the checkout calls that hang off its route.

    Guest carts live at ``/guest-carts/<masked quote id>``; a logged-in
    customer's cart is always ``/carts/mine``.
    """

    def __init__(self, client: MagentoClient):
        super().__init__(client)
        self.quote_id: str | None = None
        self.cart = Cart()

    @classmethod
    def new_guest_cart(cls, client: MagentoClient) -> "MagentoCart":
        cart = cls(client)
        quote_id = client.post_text(GUEST_CARTS, operation="initialize cart for guest")
        if not quote_id.strip():
            raise MagentoClientError("remote returned an empty quote id", "initialize cart for guest")
        cart.quote_id = quote_id
        cart._bind_route(f"{GUEST_CARTS}/{quote_id}")
        client.logger.debug(f"Guest cart {quote_id} initialized, updating from remote")
        cart.update_from_remote()
        return cart

    @classmethod
    def new_customer_cart(cls, client: MagentoClient) -> "MagentoCart":
        """Create (or reuse) the cart of the customer owning the client's token."""
        cart = cls(client)
        cart.quote_id = client.post_text(CUSTOMER_CART, operation="initialize cart for customer")
        cart._bind_route(CUSTOMER_CART)
        client.logger.debug(f"Customer cart {cart.quote_id} initialized, updating from remote")
        cart.update_from_remote()
        return cart

    def update_from_remote(self) -> None:
        operation = "get detailed cart object from magento2-api"
        route = self.require_route(operation)
        self.cart = self.client.get(route, Cart, operation=operation)
        self._mark_hydrated()

    def add_items(self, items: list[CartItem]) -> None:
        """Add items one by one.

        The local cart is not updated; call ``update_from_remote`` afterwards.

        Raises:
            ItemNotFound: If an item's SKU does not exist
        """
        route = self.require_route("add item to cart")
        for item in items:
            item = item.model_copy(update={"quote_id": self.quote_id})
            operation = f"add item '{item.sku}' to cart"
            self.logger.debug(f"Adding item '{item.sku}' (qty {item.qty}) to cart {self.quote_id}")
            try:
                self.client.post(f"{route}{CART_ITEMS}", {"cartItem": item}, CartItem, operation=operation)
            except NotFound as e:
                raise ItemNotFound(item_id=item.item_id, sku=item.sku, operation=operation) from e

    def estimate_shipping_carrier(self, address: ShippingAddress) -> list[Carrier]:
        operation = "estimate shipping carrier for cart"
        route = self.require_route(operation)
        return self.client.post(f"{route}{CART_SHIPPING_COSTS}", {"address": address}, list[Carrier], operation=operation)

    def add_shipping_information(self, address_information: AddressInformation) -> None:
        operation = "add shipping information to cart"
        route = self.require_route(operation)
        self.client.request(
            "POST",
            f"{route}{CART_SHIPPING_INFORMATION}",
            body={"addressInformation": address_information},
            operation=operation,
        )

    def estimate_payment_methods(self) -> list[PaymentMethod]:
        operation = "estimate payment methods for cart"
        route = self.require_route(operation)
        return self.client.get(f"{route}{CART_PAYMENT_METHODS}", list[PaymentMethod], operation=operation)

    def create_order(self, payment_method: PaymentMethod) -> MagentoOrder:
        """Place the order and return an (unfetched) order wrapper."""
        operation = "create order"
        route = self.require_route(operation)
        payload = {"paymentMethod": {"method": payment_method.code}}
        self.logger.debug(f"Creating order for cart {self.quote_id} with payment method '{payment_method.code}'")

        order_id = self.client.put_text(f"{route}{CART_PLACE_ORDER}", payload, operation=operation)
        try:
            entity_id = int(order_id)
        except ValueError as e:
            raise MagentoClientError(f"unexpected order id {order_id!r}", operation) from e

        self.logger.debug(f"Order {entity_id} created")
        return MagentoOrder.from_entity_id(entity_id, self.client)

    def delete_item(self, item_id: int) -> None:
        operation = f"delete itemID '{item_id}'"
        route = self.require_route(operation)
        self.client.delete(f"{route}{CART_ITEMS}/{item_id}", operation=operation)

    def delete_all_items(self) -> None:
        """Refresh the cart, then delete every item in it."""
        self.update_from_remote()
        for item in self.cart.items:
            self.delete_item(item.item_id)

"""REST routes, relative to ``StoreConfig.base_url``."""

from urllib.parse import quote

PRODUCTS = "/products"
STOCK_ITEMS = "/stockItems"
STOCK_ITEMS_RELATIVE = "stockItems"

PRODUCT_ATTRIBUTES = "/products/attributes"
ATTRIBUTE_OPTIONS_RELATIVE = "options"

ATTRIBUTE_SETS = "/products/attribute-sets"
ATTRIBUTE_SETS_LIST = "/products/attribute-sets/sets/list"
ATTRIBUTE_SET_GROUPS = "/products/attribute-sets/groups"
ATTRIBUTE_SET_GROUPS_LIST = "/products/attribute-sets/groups/list"
ATTRIBUTE_SET_ATTRIBUTES = "/products/attribute-sets/attributes"
ATTRIBUTE_SET_ATTRIBUTES_RELATIVE = "attributes"

CATEGORIES = "/categories"
CATEGORIES_LIST = "/categories/list"
CATEGORY_PRODUCTS_RELATIVE = "products"

CONFIGURABLE_PRODUCTS = "/configurable-products"
CONFIGURABLE_OPTIONS_RELATIVE = "options"
CONFIGURABLE_OPTIONS_ALL_RELATIVE = "options/all"
CONFIGURABLE_CHILD_RELATIVE = "child"

GUEST_CARTS = "/guest-carts"
CUSTOMER_CART = "/carts/mine"
CART_ITEMS = "/items"
CART_SHIPPING_COSTS = "/estimate-shipping-methods"
CART_SHIPPING_INFORMATION = "/shipping-information"
CART_PAYMENT_METHODS = "/payment-methods"
CART_PLACE_ORDER = "/order"

ORDERS = "/orders"
ORDER_COMMENTS_RELATIVE = "comments"


def encode_sku(sku: str) -> str:
    """URL-encode SKU for API path (handles special chars like /)."""
    return quote(sku, safe="")


def product_route(sku: str) -> str:
    return f"{PRODUCTS}/{encode_sku(sku)}"

"""Magento 2 REST entities.

Field names follow the Magento JSON keys. Unknown keys are kept (``extra="allow"``)
so an entity fetched from one store version can be sent back unchanged.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class MagentoModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)


def to_payload(body: Any) -> Any:
    """Convert models (possibly nested in dicts/lists) to JSON-ready data."""
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", exclude_none=True, by_alias=True)
    if isinstance(body, dict):
        return {key: to_payload(value) for key, value in body.items()}
    if isinstance(body, (list, tuple)):
        return [to_payload(value) for value in body]
    return body


# ------------------------------------------------- catalog


class CustomAttribute(MagentoModel):
    attribute_code: str
    value: Any = None


class StockItem(MagentoModel):
    item_id: int | None = None
    product_id: int | None = None
    stock_id: int | None = None
    qty: float | None = None
    is_in_stock: bool | None = None


class Product(MagentoModel):
    id: int | None = None
    sku: str | None = None
    name: str | None = None
    attribute_set_id: int | None = None
    price: float | None = None
    status: int | None = None
    visibility: int | None = None
    type_id: str | None = None
    weight: float | None = None
    extension_attributes: dict[str, Any] | None = None
    custom_attributes: list[CustomAttribute] | None = None


class ProductLink(MagentoModel):
    """Assignment of a product to a category."""

    sku: str
    position: int | None = None
    category_id: str | None = None


class Category(MagentoModel):
    id: int | None = None
    parent_id: int | None = None
    name: str | None = None
    is_active: bool | None = None
    position: int | None = None
    level: int | None = None
    path: str | None = None
    include_in_menu: bool | None = None
    custom_attributes: list[CustomAttribute] | None = None


class StoreLabel(MagentoModel):
    store_id: int
    label: str


class Option(MagentoModel):
    """Attribute option (dropdown value)."""

    label: str | None = None
    value: str | None = None
    sort_order: int | None = None
    is_default: bool | None = None
    store_labels: list[StoreLabel] | None = None


class Attribute(MagentoModel):
    attribute_id: int | None = None
    attribute_code: str | None = None
    frontend_input: str | None = None
    entity_type_id: str | None = None
    is_required: bool | None = None
    is_user_defined: bool | None = None
    default_frontend_label: str | None = None
    frontend_labels: list[StoreLabel] | None = None
    scope: str | None = None
    options: list[Option] | None = None


class AttributeSet(MagentoModel):
    attribute_set_id: int | None = None
    attribute_set_name: str | None = None
    sort_order: int | None = None
    entity_type_id: int | None = None


class Group(MagentoModel):
    """Attribute group inside an attribute set."""

    attribute_group_id: int | None = None
    attribute_group_name: str | None = None
    attribute_set_id: int | None = None


class ConfigurableProductOptionValue(MagentoModel):
    value_index: int


class ConfigurableProductOption(MagentoModel):
    id: int | None = None
    attribute_id: str | None = None
    label: str | None = None
    position: int | None = None
    is_use_default: bool | None = None
    values: list[ConfigurableProductOptionValue] = Field(default_factory=list)
    product_id: int | None = None


# ------------------------------------------------- checkout


class CartItem(MagentoModel):
    item_id: int | None = None
    sku: str | None = None
    qty: float | None = None
    name: str | None = None
    price: float | None = None
    product_type: str | None = None
    quote_id: str | None = None


class Cart(MagentoModel):
    id: int | None = None
    is_active: bool | None = None
    is_virtual: bool | None = None
    items: list[CartItem] = Field(default_factory=list)
    items_count: int | None = None
    items_qty: float | None = None
    customer: dict[str, Any] | None = None


class Address(MagentoModel):
    """Shipping or billing address."""

    firstname: str | None = None
    lastname: str | None = None
    email: str | None = None
    telephone: str | None = None
    street: list[str] | None = None
    city: str | None = None
    postcode: str | None = None
    country_id: str | None = None
    region: str | None = None
    region_id: int | None = None
    region_code: str | None = None
    same_as_billing: int | None = None


ShippingAddress = Address


class AddressInformation(MagentoModel):
    shipping_address: Address
    billing_address: Address | None = None
    shipping_carrier_code: str | None = None
    shipping_method_code: str | None = None


class Carrier(MagentoModel):
    """Shipping method estimate."""

    carrier_code: str | None = None
    method_code: str | None = None
    carrier_title: str | None = None
    method_title: str | None = None
    amount: float | None = None
    base_amount: float | None = None
    available: bool | None = None
    error_message: str | None = None
    price_excl_tax: float | None = None
    price_incl_tax: float | None = None


class PaymentMethod(MagentoModel):
    code: str
    title: str | None = None


# ------------------------------------------------- orders


class StatusHistory(MagentoModel):
    """Order comment."""

    comment: str | None = None
    entity_id: int | None = None
    parent_id: int | None = None
    status: str | None = None
    is_customer_notified: int | None = None
    is_visible_on_front: int | None = None
    created_at: str | None = None


class Order(MagentoModel):
    entity_id: int | None = None
    increment_id: str | None = None
    state: str | None = None
    status: str | None = None
    customer_email: str | None = None
    grand_total: float | None = None
    items: list[dict[str, Any]] | None = None
    status_histories: list[StatusHistory] | None = None

"""Magento 2 REST API client."""

__version__ = "0.1.0"

import logging

from .attribute import MagentoAttribute
from .attribute_set import MagentoAttributeSet
from .cancellation import cancel_scope
from .cart import MagentoCart
from .category import MagentoCategory
from .client import MagentoClient, MagentoRetry
from .config import AuthenticationType, StoreConfig
from .configurable_product import MagentoConfigurableProduct
from .entity import EntityState
from .errors import (
    BadRequest,
    InvalidUsage,
    ItemNotFound,
    MagentoClientError,
    NotFound,
    RequestCancelled,
    RequestTimeout,
    TransportError,
)
from .order import MagentoOrder
from .product import MagentoProduct
from .search import Filter, SearchQuery, build_search_query

logging.getLogger("m2rest").addHandler(logging.NullHandler())

__all__ = [
    "AuthenticationType",
    "BadRequest",
    "EntityState",
    "Filter",
    "InvalidUsage",
    "ItemNotFound",
    "MagentoAttribute",
    "MagentoAttributeSet",
    "MagentoCart",
    "MagentoCategory",
    "MagentoClient",
    "MagentoClientError",
    "MagentoConfigurableProduct",
    "MagentoOrder",
    "MagentoProduct",
    "MagentoRetry",
    "NotFound",
    "RequestCancelled",
    "RequestTimeout",
    "SearchQuery",
    "StoreConfig",
    "TransportError",
    "build_search_query",
    "cancel_scope",
]

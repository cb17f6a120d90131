"""Bulk product creation and stock synchronization."""

import logging
import math
import time

from m2rest import MagentoClient, MagentoClientError, MagentoProduct
from m2rest.models import Product

from .pool import PoolReport, WorkerPool
from .stock_csv import StockUpdate

logger = logging.getLogger("m2rest_bulk")

DEFAULT_ATTRIBUTE_SET_ID = 4
VISIBILITY_CATALOG_SEARCH = 4
STATUS_ENABLED = 1


def build_products(count: int, timestamp: int | None = None) -> list[Product]:
    """Generate ``count`` simple products with unique, timestamped SKUs."""
    timestamp = timestamp or int(time.time())
    return [
        Product(
            sku=f"bulk-product-{timestamp}-{n}",
            name=f"Bulk Product {n}",
            attribute_set_id=DEFAULT_ATTRIBUTE_SET_ID,
            price=round(9.99 + n % 10, 2),
            type_id="simple",
            status=STATUS_ENABLED,
            visibility=VISIBILITY_CATALOG_SEARCH,
            weight=1.0,
        )
        for n in range(1, count + 1)
    ]


def create_bulk_products(
    client: MagentoClient, count: int, pool: WorkerPool, timestamp: int | None = None
) -> tuple[list[str], PoolReport]:
    """Create products concurrently.

    Returns:
        All generated SKUs (including failed ones) and the pool report.
    """
    products = build_products(count, timestamp)

    def create(product: Product):
        def task():
            remote = MagentoProduct.create_or_replace(product, True, client)
            logger.info(f"Product created: {remote.product.sku} (id {remote.product.id})")

        return task

    report = pool.run((product.sku, create(product)) for product in products)
    logger.info(f"Product creation completed: created={report.succeeded} failed={report.failed}")
    return [product.sku for product in products], report


def sync_stock(client: MagentoClient, update: StockUpdate, dry_run: bool = False) -> bool:
    """Bring one SKU's Magento quantity to ``update.qty``.

    Returns:
        True if Magento was updated, False if already in sync or dry run.

    Raises:
        NotFound: If the SKU does not exist
        MagentoClientError: If the product has no stock item
    """
    product = MagentoProduct.get_by_sku(update.sku, client)
    stock_data = (product.product.extension_attributes or {}).get("stock_item") or {}
    item_id = stock_data.get("item_id")
    if not item_id:
        raise MagentoClientError(f"no stock item id for SKU '{update.sku}'", "update stock")

    # Compare quantities (use tolerance for float comparison)
    current = stock_data.get("qty")
    if current is not None and math.isclose(update.qty, float(current), rel_tol=1e-9, abs_tol=0.001):
        logger.debug(f"SKU '{update.sku}' already in sync (qty={update.qty})")
        return False

    if dry_run:
        logger.info(f"[DRY RUN] Would sync SKU '{update.sku}': Magento {current} -> {update.qty}")
        return False

    product.update_quantity_for_stock_item(item_id, update.qty, update.qty > 0)
    logger.info(f"Synced SKU '{update.sku}': Magento {current} -> {update.qty}")
    return True


def update_bulk_stock(
    client: MagentoClient, updates: list[StockUpdate], pool: WorkerPool, dry_run: bool = False
) -> PoolReport:
    report = pool.run((update.sku, lambda update=update: sync_stock(client, update, dry_run)) for update in updates)
    logger.info(f"Stock update completed: updated={report.succeeded} failed={report.failed}")
    return report

"""Bulk product creation and stock updates on top of m2rest."""

__version__ = "0.1.0"

from .operations import create_bulk_products, sync_stock, update_bulk_stock
from .pool import PoolReport, WorkerPool
from .stock_csv import StockUpdate, load_stock_updates, save_created_skus

__all__ = [
    "PoolReport",
    "StockUpdate",
    "WorkerPool",
    "create_bulk_products",
    "load_stock_updates",
    "save_created_skus",
    "sync_stock",
    "update_bulk_stock",
]

"""CSV files of ``sku,qty`` pairs."""

import csv
import logging
import math
import random
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger("m2rest_bulk")


@dataclass(frozen=True)
class StockUpdate:
    sku: str
    qty: float


def load_stock_updates(path: Path) -> list[StockUpdate]:
    """Read stock updates, skipping the header and malformed rows."""
    updates = []
    with open(path, newline="", encoding="utf-8") as f:
        for line_number, record in enumerate(csv.reader(f), start=1):
            if line_number == 1 and record and record[0] in ("sku", "SKU"):
                continue
            if len(record) < 2:
                logger.warning(f"Skipping invalid row {line_number}: {record}")
                continue
            try:
                qty = float(record[1])
            except ValueError:
                logger.warning(f"Skipping row {line_number}: invalid quantity {record[1]!r}")
                continue
            if not math.isfinite(qty) or qty < 0:
                logger.warning(f"Skipping row {line_number}: invalid quantity {record[1]!r}")
                continue
            updates.append(StockUpdate(sku=record[0], qty=qty))
    return updates


def save_created_skus(path: Path, skus: list[str], rng: random.Random | None = None) -> None:
    """Write SKUs with a starting quantity between 10 and 99."""
    rng = rng or random.Random()
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["sku", "qty"])
        for sku in skus:
            writer.writerow([sku, rng.randint(10, 99)])

"""Command line entry point for bulk operations."""

import logging
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.logging import RichHandler

from .operations import create_bulk_products, update_bulk_stock
from .pool import WorkerPool
from .settings import BulkSettings
from .stock_csv import load_stock_updates, save_created_skus

logger = logging.getLogger("m2rest_bulk")

app = typer.Typer(add_completion=False, help="Bulk product creation and stock updates for Magento 2.")


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
        force=True,
    )


@app.command()
def run(
    csv_file: Path = typer.Option(Path("stock_updates.csv"), "--csv", help="CSV file with SKU and quantity."),
    create_only: bool = typer.Option(False, "--create-only", help="Only create products, don't update stock."),
    update_only: bool = typer.Option(False, "--update-only", help="Only update stock, don't create products."),
    concurrent: int = typer.Option(5, "--concurrent", min=1, help="Number of concurrent operations."),
    count: int = typer.Option(100, "--count", min=1, help="Number of products to create."),
    dry_run: bool = typer.Option(False, "--dry-run", help="Log stock changes without sending them."),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging."),
) -> None:
    """Create simple products and/or push stock quantities from a CSV file."""
    if create_only and update_only:
        raise typer.BadParameter("--create-only and --update-only are mutually exclusive")

    try:
        settings = BulkSettings()
    except ValidationError as e:
        typer.echo(f"Invalid configuration (set MAGENTO_HOST and MAGENTO_BEARER_TOKEN):\n{e}", err=True)
        raise typer.Exit(code=1)

    _configure_logging(debug or settings.debug)
    client = settings.build_client(pool_maxsize=concurrent)
    pool = WorkerPool(concurrent)

    if not update_only:
        logger.info(f"Creating {count} simple products")
        skus, _ = create_bulk_products(client, count, pool)
        if create_only:
            save_created_skus(csv_file, skus)
            logger.info(f"Created SKUs saved to {csv_file}")
            return

    logger.info(f"Loading stock updates from {csv_file}")
    try:
        updates = load_stock_updates(csv_file)
    except OSError as e:
        logger.error(f"Failed to load stock updates: {e}")
        raise typer.Exit(code=1)

    logger.info(f"Updating stock for {len(updates)} products")
    report = update_bulk_stock(client, updates, pool, dry_run=dry_run)
    logger.info("Bulk operations completed")
    if report.failed:
        raise typer.Exit(code=2)

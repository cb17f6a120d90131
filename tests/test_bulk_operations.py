"""Tests for bulk product creation and stock sync."""

import json

import pytest
import responses

from m2rest import MagentoClientError, NotFound
from m2rest_bulk import StockUpdate, WorkerPool, create_bulk_products, sync_stock, update_bulk_stock
from m2rest_bulk.operations import build_products

BASE = "https://shop.example.com/rest/default/V1"


def add_product(sku, qty=10, item_id=5):
    responses.add(
        responses.GET,
        f"{BASE}/products/{sku}",
        json={
            "id": 1,
            "sku": sku,
            "extension_attributes": {"stock_item": {"item_id": item_id, "qty": qty, "is_in_stock": qty > 0}},
        },
    )


def test_build_products():
    products = build_products(10, timestamp=1700000000)

    assert len(products) == 10
    assert products[0].sku == "bulk-product-1700000000-1"
    assert products[0].name == "Bulk Product 1"
    assert products[0].price == 10.99
    assert products[9].price == 9.99
    assert {p.type_id for p in products} == {"simple"}
    assert len({p.sku for p in products}) == 10


class TestCreateBulkProducts:
    @responses.activate
    def test_creates_all(self, client):
        def echo(request):
            product = json.loads(request.body)["product"]
            return 200, {}, json.dumps({"id": 1, **product})

        responses.add_callback(responses.POST, f"{BASE}/products", callback=echo)

        skus, report = create_bulk_products(client, 3, WorkerPool(2), timestamp=1700000000)

        assert skus == [f"bulk-product-1700000000-{n}" for n in (1, 2, 3)]
        assert report.succeeded == 3
        assert len(responses.calls) == 3
        assert json.loads(responses.calls[0].request.body)["saveOptions"] is True

    @responses.activate
    def test_failures_are_reported(self, client):
        def echo(request):
            product = json.loads(request.body)["product"]
            if product["sku"].endswith("-2"):
                return 400, {}, json.dumps({"message": "URL key for specified store already exists."})
            return 200, {}, json.dumps(product)

        responses.add_callback(responses.POST, f"{BASE}/products", callback=echo)

        skus, report = create_bulk_products(client, 3, WorkerPool(3), timestamp=1700000000)

        assert len(skus) == 3
        assert report.succeeded == 2
        assert list(report.errors) == ["bulk-product-1700000000-2"]


class TestSyncStock:
    @responses.activate
    def test_updates_quantity(self, client):
        add_product("SKU-1", qty=10)
        responses.add(responses.PUT, f"{BASE}/products/SKU-1/stockItems/5", json=5)

        assert sync_stock(client, StockUpdate("SKU-1", 25)) is True
        assert json.loads(responses.calls[1].request.body) == {"stockItem": {"qty": 25, "is_in_stock": True}}

    @responses.activate
    def test_zero_sets_out_of_stock(self, client):
        add_product("SKU-1", qty=10)
        responses.add(responses.PUT, f"{BASE}/products/SKU-1/stockItems/5", json=5)

        sync_stock(client, StockUpdate("SKU-1", 0))

        assert json.loads(responses.calls[1].request.body)["stockItem"]["is_in_stock"] is False

    @responses.activate
    def test_already_in_sync(self, client):
        add_product("SKU-1", qty=25)

        assert sync_stock(client, StockUpdate("SKU-1", 25.0)) is False
        assert len(responses.calls) == 1

    @responses.activate
    def test_dry_run(self, client):
        add_product("SKU-1", qty=10)

        assert sync_stock(client, StockUpdate("SKU-1", 25), dry_run=True) is False
        assert len(responses.calls) == 1

    @responses.activate
    def test_missing_stock_item(self, client):
        responses.add(responses.GET, f"{BASE}/products/SKU-1", json={"id": 1, "sku": "SKU-1"})

        with pytest.raises(MagentoClientError):
            sync_stock(client, StockUpdate("SKU-1", 5))

    @responses.activate
    def test_unknown_sku(self, client):
        responses.add(responses.GET, f"{BASE}/products/NOPE", status=404)

        with pytest.raises(NotFound):
            sync_stock(client, StockUpdate("NOPE", 5))


@responses.activate
def test_update_bulk_stock(client):
    add_product("SKU-1", qty=10, item_id=5)
    add_product("SKU-2", qty=3, item_id=6)
    responses.add(responses.GET, f"{BASE}/products/NOPE", status=404)
    responses.add(responses.PUT, f"{BASE}/products/SKU-1/stockItems/5", json=5)
    responses.add(responses.PUT, f"{BASE}/products/SKU-2/stockItems/6", json=6)

    updates = [StockUpdate("SKU-1", 1), StockUpdate("SKU-2", 2), StockUpdate("NOPE", 3)]
    report = update_bulk_stock(client, updates, WorkerPool(2))

    assert report.succeeded == 2
    assert report.failed == 1
    assert isinstance(report.errors["NOPE"], NotFound)

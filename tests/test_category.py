"""Tests for MagentoCategory."""

import json

import pytest
import responses

from m2rest import EntityState, MagentoCategory, NotFound
from m2rest.models import Category, ProductLink

BASE = "https://shop.example.com/rest/default/V1"


class TestMagentoCategory:
    @responses.activate
    def test_create(self, client):
        responses.add(responses.POST, f"{BASE}/categories", json={"id": 5, "name": "Shoes", "parent_id": 2})

        remote = MagentoCategory.create(Category(name="Shoes", parent_id=2, is_active=True), client)

        assert remote.route == "/categories/5"
        assert remote.category.id == 5
        assert json.loads(responses.calls[0].request.body) == {
            "category": {"name": "Shoes", "parent_id": 2, "is_active": True}
        }

    @responses.activate
    def test_get_by_name(self, client):
        responses.add(
            responses.GET,
            f"{BASE}/categories/list",
            json={"items": [{"id": 5, "name": "Shoes"}], "total_count": 1},
        )
        responses.add(responses.GET, f"{BASE}/categories/5", json={"id": 5, "name": "Shoes", "level": 2})
        responses.add(
            responses.GET,
            f"{BASE}/categories/5/products",
            json=[{"sku": "SHOE-1", "position": 0, "category_id": "5"}],
        )

        remote = MagentoCategory.get_by_name("Shoes", client)

        assert "searchCriteria[filter_groups][0][filters][0][value]=Shoes" in responses.calls[0].request.url
        assert "searchCriteria[filter_groups][0][filters][0][condition_type]=in" in responses.calls[0].request.url
        assert remote.category.level == 2
        assert remote.products == [ProductLink(sku="SHOE-1", position=0, category_id="5")]
        assert remote.state is EntityState.HYDRATED

    @responses.activate
    def test_get_by_name_not_found(self, client):
        responses.add(responses.GET, f"{BASE}/categories/list", json={"items": [], "total_count": 0})

        with pytest.raises(NotFound):
            MagentoCategory.get_by_name("Nope", client)
        assert len(responses.calls) == 1

    @responses.activate
    def test_assign_product(self, client):
        responses.add(responses.PUT, f"{BASE}/categories/5/products", json=True)

        remote = MagentoCategory(client, Category(id=5, name="Shoes"), route="/categories/5")
        remote.assign_product(ProductLink(sku="SHOE-2", position=1))

        assert json.loads(responses.calls[0].request.body) == {
            "productLink": {"sku": "SHOE-2", "position": 1, "category_id": "5"}
        }
        assert [link.sku for link in remote.products] == ["SHOE-2"]
        # no re-fetch
        assert len(responses.calls) == 1

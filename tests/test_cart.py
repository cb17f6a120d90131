"""Tests for MagentoCart, from guest cart to placed order."""

import json

import pytest
import responses

from m2rest import BadRequest, EntityState, InvalidUsage, ItemNotFound, MagentoCart, MagentoClient, MagentoClientError, NotFound
from m2rest.models import Address, AddressInformation, CartItem, PaymentMethod

BASE = "https://shop.example.com/rest/default/V1"
CART = f"{BASE}/guest-carts/abc123"


@pytest.fixture
def guest(store):
    return MagentoClient.without_authentication(store)


@pytest.fixture
def cart(guest):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.POST, f"{BASE}/guest-carts", body='"abc123"')
        rsps.add(responses.GET, CART, json={"id": 7, "is_active": True, "items": []})
        return MagentoCart.new_guest_cart(guest)


def address():
    return Address(
        firstname="Jane",
        lastname="Doe",
        email="jane@example.com",
        street=["1 Main St"],
        city="Springfield",
        postcode="12345",
        country_id="US",
        telephone="555-0100",
    )


class TestMagentoCart:
    def test_new_guest_cart(self, cart):
        assert cart.quote_id == "abc123"
        assert cart.route == "/guest-carts/abc123"
        assert cart.cart.id == 7
        assert cart.state is EntityState.HYDRATED

    @pytest.mark.parametrize("body", ["", '""', "  "])
    @responses.activate
    def test_new_guest_cart_rejects_empty_quote_id(self, guest, body):
        responses.add(responses.POST, f"{BASE}/guest-carts", body=body)

        with pytest.raises(MagentoClientError):
            MagentoCart.new_guest_cart(guest)
        assert len(responses.calls) == 1

    @responses.activate
    def test_new_customer_cart(self, client):
        responses.add(responses.POST, f"{BASE}/carts/mine", body="15")
        responses.add(responses.GET, f"{BASE}/carts/mine", json={"id": 15, "items": []})

        cart = MagentoCart.new_customer_cart(client)

        assert cart.route == "/carts/mine"
        assert cart.quote_id == "15"
        assert cart.cart.id == 15

    def test_unbound_cart_fails_fast(self, guest):
        with pytest.raises(InvalidUsage):
            MagentoCart(guest).estimate_payment_methods()

    @responses.activate
    def test_add_items(self, cart):
        responses.add(responses.POST, f"{CART}/items", json={"item_id": 1, "sku": "SKU-1", "qty": 2, "quote_id": "abc123"})
        responses.add(responses.POST, f"{CART}/items", json={"item_id": 2, "sku": "SKU-2", "qty": 1, "quote_id": "abc123"})

        cart.add_items([CartItem(sku="SKU-1", qty=2), CartItem(sku="SKU-2", qty=1)])

        bodies = [json.loads(call.request.body) for call in responses.calls]
        assert bodies == [
            {"cartItem": {"sku": "SKU-1", "qty": 2, "quote_id": "abc123"}},
            {"cartItem": {"sku": "SKU-2", "qty": 1, "quote_id": "abc123"}},
        ]

    @responses.activate
    def test_add_unknown_item(self, cart):
        responses.add(responses.POST, f"{CART}/items", json={"message": "The product that was requested doesn't exist."}, status=404)

        with pytest.raises(ItemNotFound) as exc_info:
            cart.add_items([CartItem(sku="GHOST", qty=1), CartItem(sku="SKU-2", qty=1)])

        assert exc_info.value.sku == "GHOST"
        assert isinstance(exc_info.value, NotFound)
        # stops at the first failure
        assert len(responses.calls) == 1

    @responses.activate
    def test_add_item_rejected(self, cart):
        responses.add(responses.POST, f"{CART}/items", json={"message": "out of stock"}, status=400)

        with pytest.raises(BadRequest):
            cart.add_items([CartItem(sku="SKU-1", qty=99)])

    @responses.activate
    def test_estimate_shipping_carrier(self, cart):
        responses.add(
            responses.POST,
            f"{CART}/estimate-shipping-methods",
            json=[{"carrier_code": "flatrate", "method_code": "flatrate", "amount": 5, "available": True}],
        )

        carriers = cart.estimate_shipping_carrier(address())

        assert carriers[0].carrier_code == "flatrate"
        assert json.loads(responses.calls[0].request.body)["address"]["country_id"] == "US"

    @responses.activate
    def test_add_shipping_information(self, cart):
        responses.add(responses.POST, f"{CART}/shipping-information", json={"payment_methods": []})

        cart.add_shipping_information(
            AddressInformation(
                shipping_address=address(),
                billing_address=address(),
                shipping_carrier_code="flatrate",
                shipping_method_code="flatrate",
            )
        )

        body = json.loads(responses.calls[0].request.body)
        assert body["addressInformation"]["shipping_carrier_code"] == "flatrate"
        assert body["addressInformation"]["billing_address"]["city"] == "Springfield"

    @responses.activate
    def test_estimate_payment_methods(self, cart):
        responses.add(responses.GET, f"{CART}/payment-methods", json=[{"code": "checkmo", "title": "Check / Money order"}])

        methods = cart.estimate_payment_methods()

        assert methods == [PaymentMethod(code="checkmo", title="Check / Money order")]

    @responses.activate
    def test_create_order(self, cart):
        responses.add(responses.PUT, f"{CART}/order", body='"42"')

        order = cart.create_order(PaymentMethod(code="checkmo"))

        assert json.loads(responses.calls[0].request.body) == {"paymentMethod": {"method": "checkmo"}}
        assert order.route == "/orders/42"
        assert order.order.entity_id == 42
        assert order.state is EntityState.ROUTE_KNOWN

    @responses.activate
    def test_create_order_unexpected_id(self, cart):
        responses.add(responses.PUT, f"{CART}/order", body='"not-a-number"')

        with pytest.raises(MagentoClientError):
            cart.create_order(PaymentMethod(code="checkmo"))

    @responses.activate
    def test_delete_all_items(self, cart):
        responses.add(
            responses.GET,
            CART,
            json={"id": 7, "items": [{"item_id": 1, "sku": "A"}, {"item_id": 2, "sku": "B"}]},
        )
        responses.add(responses.DELETE, f"{CART}/items/1", json=True)
        responses.add(responses.DELETE, f"{CART}/items/2", json=True)

        cart.delete_all_items()

        assert [call.request.method for call in responses.calls] == ["GET", "DELETE", "DELETE"]
        assert responses.calls[2].request.url == f"{CART}/items/2"

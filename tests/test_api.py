"""Tests for API endpoints"""
import pytest
from fastapi.testclient import TestClient

from api.index import app
from giftcart.routers.deps import reset_cart_engine


@pytest.fixture
def client():
    """Test client with a fresh cart"""
    reset_cart_engine()
    with TestClient(app) as test_client:
        yield test_client
    reset_cart_engine()


def _quantities(body):
    return [(item["product_id"], item["quantity"]) for item in body["items"]]


def test_health_check(client):
    """Test health check endpoint"""
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_get_products(client):
    """Catalog is listed in order with display prices"""
    response = client.get("/api/products")
    assert response.status_code == 200
    products = response.json()
    assert [p["name"] for p in products] == ["Laptop", "Smartphone", "Headphones", "Smartwatch"]
    assert products[0]["price"] == "₹500"
    assert products[0]["price_value"] == 500.0


def test_empty_cart(client):
    body = client.get("/api/cart").json()

    assert body["is_empty"] is True
    assert body["items"] == []
    assert body["subtotal"] == "₹0"
    assert body["gift_hint"] == "Add ₹1,000 more to get a FREE Wireless Mouse!"
    assert body["gift_message"] is None


def test_gift_granted_and_revoked(client):
    """Scenarios A and B over HTTP"""
    client.post("/api/cart/add", json={"product_id": 1})
    body = client.post("/api/cart/add", json={"product_id": 1}).json()

    assert _quantities(body) == [(1, 2), (99, 1)]
    assert body["items"][1]["is_gift"] is True
    assert body["items"][1]["total_price"] == "₹0"
    assert body["has_gift"] is True
    assert body["progress"] == 100.0
    assert body["gift_hint"] is None
    assert body["gift_message"] == "You got a free Wireless Mouse!"

    body = client.patch("/api/cart/item", json={"product_id": 1, "delta": -1}).json()

    assert _quantities(body) == [(1, 1)]
    assert body["has_gift"] is False
    assert body["subtotal_value"] == 500.0


def test_progress_below_threshold(client):
    """Scenario C over HTTP"""
    for _ in range(9):
        body = client.post("/api/cart/add", json={"product_id": 3}).json()

    assert body["subtotal"] == "₹900"
    assert body["progress"] == 90.0
    assert body["gift_hint"] == "Add ₹100 more to get a FREE Wireless Mouse!"


def test_add_unknown_product(client):
    response = client.post("/api/cart/add", json={"product_id": 404})
    assert response.status_code == 404


def test_change_unknown_line_is_noop(client):
    """Scenario D over HTTP"""
    client.post("/api/cart/add", json={"product_id": 2})

    response = client.patch("/api/cart/item", json={"product_id": 4, "delta": 1})

    assert response.status_code == 200
    assert _quantities(response.json()) == [(2, 1)]


def test_gift_line_is_protected(client):
    """Scenario E over HTTP"""
    client.post("/api/cart/add", json={"product_id": 1})
    client.post("/api/cart/add", json={"product_id": 1})

    assert client.patch("/api/cart/item", json={"product_id": 99, "delta": 1}).status_code == 400
    assert client.post("/api/cart/add", json={"product_id": 99}).status_code == 400
    assert _quantities(client.get("/api/cart").json()) == [(1, 2), (99, 1)]


def test_invalid_body(client):
    response = client.post("/api/cart/add", json={"product_id": "abc"})
    assert response.status_code == 422

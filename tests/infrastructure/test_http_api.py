"""Tests for the Flask HTTP API, backed by the in-memory fake."""

import pytest

from inventory.domain.service.product_gateway import ProductGateway
from inventory.infrastructure.http.app import create_app
from tests.fakes import FakeProductRepository


@pytest.fixture
def repo():
    return FakeProductRepository()


@pytest.fixture
def client(repo):
    return create_app(gateway=ProductGateway(repo)).test_client()


def _add(client, name="Widget", price=10.0) -> int:
    response = client.post("/products", json={"name": name, "price": price})
    assert response.status_code == 200
    return response.get_json()["id"]


class TestProductsCrud:

    def test_add_and_get(self, client):
        product_id = _add(client, "Widget", 12.5)
        response = client.get(f"/products/{product_id}")
        assert response.status_code == 200
        assert response.get_json() == {
            "id": product_id,
            "name": "Widget",
            "price": 12.5,
            "itemsInStock": 0,
            "itemsReserved": 0,
        }

    def test_list(self, client):
        _add(client, "Widget")
        _add(client, "Gadget")
        response = client.get("/products")
        assert response.status_code == 200
        assert {p["name"] for p in response.get_json()} == {"Widget", "Gadget"}

    def test_duplicate_name_is_client_error(self, client):
        _add(client, "X", 10.0)
        response = client.post("/products", json={"name": "X", "price": 20.0})
        assert response.status_code == 400
        assert response.get_json()["error"] == "duplicate_name"

    @pytest.mark.parametrize(
        "body",
        [
            {"name": "", "price": 1},
            {"name": "A", "price": 0},
            {"name": "A"},
            ["A", 1],
            {"name": "A", "price": "1e400"},
            {"name": "A", "price": "0.0000001"},
        ],
    )
    def test_add_invalid_body(self, client, body):
        response = client.post("/products", json=body)
        assert response.status_code == 400
        assert response.get_json()["error"] == "invalid_argument"

    def test_add_malformed_json(self, client):
        response = client.post("/products", data="{not json", content_type="application/json")
        assert response.status_code == 400

    def test_rename_with_bare_json_string(self, client):
        product_id = _add(client)
        response = client.put(f"/products/{product_id}/name", json="Sprocket")
        assert response.status_code == 200
        assert client.get(f"/products/{product_id}").get_json()["name"] == "Sprocket"

    def test_reprice_with_object_body(self, client):
        product_id = _add(client)
        response = client.put(f"/products/{product_id}/price", json={"price": 3.75})
        assert response.status_code == 200
        assert client.get(f"/products/{product_id}").get_json()["price"] == 3.75

    def test_delete_then_get(self, client):
        product_id = _add(client)
        assert client.delete(f"/products/{product_id}").status_code == 200
        response = client.get(f"/products/{product_id}")
        assert response.status_code == 400
        assert response.get_json()["error"] == "not_found"


class TestStockRoutes:

    def test_scenario(self, client):
        product_id = _add(client)
        assert client.put(f"/products/{product_id}/stock", json=100).status_code == 200
        assert client.post(f"/products/{product_id}/reserve", json=10).status_code == 200
        assert client.put(f"/products/{product_id}/stock", json=-95).status_code == 400
        assert client.put(f"/products/{product_id}/stock", json=-85).status_code == 200

        record = client.get(f"/products/{product_id}").get_json()
        assert (record["itemsInStock"], record["itemsReserved"]) == (15, 10)

    def test_clear_reserved(self, client):
        product_id = _add(client)
        client.put(f"/products/{product_id}/stock", json=20)
        client.post(f"/products/{product_id}/reserve", json={"amount": 5})

        response = client.delete(f"/products/{product_id}/reserve", json=5)

        assert response.status_code == 200
        record = client.get(f"/products/{product_id}").get_json()
        assert (record["itemsInStock"], record["itemsReserved"]) == (15, 0)

    @pytest.mark.parametrize("amount", [0, -3, "5", None])
    def test_reserve_rejects_bad_amount(self, client, amount):
        product_id = _add(client)
        response = client.post(f"/products/{product_id}/reserve", json=amount)
        assert response.status_code == 400


class TestErrorMapping:

    @pytest.mark.parametrize(
        "method, path",
        [
            ("get", "/products/0"),
            ("get", "/products/-1"),
            ("delete", "/products/-5"),
            ("put", "/products/0/stock"),
        ],
    )
    def test_invalid_id_is_client_error(self, client, method, path):
        response = getattr(client, method)(path, json=1)
        assert response.status_code == 400
        assert "Product ID is invalid" in response.get_json()["message"]

    def test_conflict_maps_to_409(self, repo):
        client = create_app(gateway=ProductGateway(repo, max_retries=0)).test_client()
        product_id = _add(client)
        repo.before_update.append(lambda r: r.force(product_id, items_in_stock=1))

        response = client.put(f"/products/{product_id}/stock", json=1)

        assert response.status_code == 409
        assert response.get_json()["error"] == "conflict"

    def test_unexpected_error_maps_to_500(self, repo):
        def explode(_):
            raise RuntimeError("storage unavailable")

        client = create_app(gateway=ProductGateway(repo)).test_client()
        product_id = _add(client)
        repo.before_update.append(explode)

        response = client.put(f"/products/{product_id}/stock", json=1)

        assert response.status_code == 500
        assert response.get_json()["error"] == "internal"

    def test_unknown_route_is_404(self, client):
        assert client.get("/nowhere").status_code == 404

    def test_health(self, client):
        assert client.get("/health").get_json() == {"status": "ok"}

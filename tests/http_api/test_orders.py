# tests/http_api/test_orders.py
import pytest


@pytest.fixture
def catalogue(client):
    """Jorge (user 1), Laptop (product 1) and Mouse (product 2)."""
    client.post(
        "/api/user",
        json={"name": "Jorge", "lastName": "Avila", "email": "jorge@example.com"},
    )
    client.post(
        "/api/products",
        json={"name": "Laptop", "description": "Gaming laptop", "price": 1000.0},
    )
    client.post("/api/products", json={"name": "Mouse", "price": 25.0})
    return client


def test_worked_example_snapshot_survives_deactivation(catalogue) -> None:
    """
    Scenario: Jorge orders two laptops, then the laptop is deactivated.
    Expected: The order still shows the original name and unit price.
    """
    created = catalogue.post("/api/orders/1", json=[{"productId": 1, "quantity": 2}])

    assert created.status_code == 201
    body = created.json()
    assert body["message"] == "Order created successfully with ID: 1"
    order = body["data"]
    assert order["userId"] == 1
    assert order["total"] == 2000.0
    assert order["active"] is True
    assert order["details"] == [
        {
            "productId": 1,
            "productName": "Laptop",
            "descriptionSnap": "Gaming laptop",
            "quantity": 2,
            "unitPrice": 1000.0,
        }
    ]

    catalogue.delete("/api/products/1")
    fetched = catalogue.get("/api/orders/1")

    assert fetched.status_code == 200
    assert fetched.json()["message"] == "Order 1 retrieved successfully"
    line = fetched.json()["data"]["details"][0]
    assert line["unitPrice"] == 1000.0
    assert line["productName"] == "Laptop"


def test_empty_order(catalogue) -> None:
    response = catalogue.post("/api/orders/1", json=[])

    assert response.status_code == 201
    assert response.json()["data"]["total"] == 0
    assert response.json()["data"]["details"] == []


def test_unknown_user_or_product(catalogue) -> None:
    no_user = catalogue.post("/api/orders/9", json=[{"productId": 1, "quantity": 1}])
    no_product = catalogue.post("/api/orders/1", json=[{"productId": 99, "quantity": 1}])

    assert no_user.status_code == 404
    assert no_user.json()["message"] == "User not found with id: '9'"
    assert no_product.status_code == 404
    assert no_product.json()["message"] == "Product not found with id: '99'"
    assert catalogue.get("/api/orders", params={"activeOnly": "false"}).json()["data"] == []


def test_update_order_replaces_lines(catalogue) -> None:
    catalogue.post("/api/orders/1", json=[{"productId": 1, "quantity": 1}])

    response = catalogue.put(
        "/api/orders/1",
        json=[{"productId": 2, "quantity": 3}, {"productId": 1, "quantity": 1}],
    )

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Order 1 updated successfully"
    assert body["data"]["total"] == 1075.0
    assert [d["productId"] for d in body["data"]["details"]] == [2, 1]


def test_inactive_order_cannot_be_updated(catalogue) -> None:
    catalogue.post("/api/orders/1", json=[{"productId": 1, "quantity": 1}])
    deleted = catalogue.delete("/api/orders/1")

    response = catalogue.put("/api/orders/1", json=[{"productId": 2, "quantity": 1}])

    assert deleted.json()["message"] == "Order 1 has been successfully deactivated"
    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Bad Request"
    assert body["message"] == "Cannot perform operation on inactive Order with id: '1'"
    # Still readable, lines untouched
    order = catalogue.get("/api/orders/1").json()["data"]
    assert order["active"] is False
    assert order["details"][0]["productId"] == 1


def test_delete_order_twice(catalogue) -> None:
    catalogue.post("/api/orders/1", json=[])

    assert catalogue.delete("/api/orders/1").status_code == 200
    again = catalogue.delete("/api/orders/1")

    assert again.status_code == 200
    assert "data" not in again.json()


def test_listings_and_active_filter(catalogue) -> None:
    catalogue.post(
        "/api/user",
        json={"name": "Jose", "lastName": "Perez", "email": "jose@example.com"},
    )
    catalogue.post("/api/orders/1", json=[])
    catalogue.post("/api/orders/1", json=[])
    catalogue.post("/api/orders/2", json=[])
    catalogue.delete("/api/orders/2")

    active = catalogue.get("/api/orders").json()
    everything = catalogue.get("/api/orders", params={"activeOnly": "false"}).json()
    jorge_active = catalogue.get("/api/orders/user/1").json()
    jorge_all = catalogue.get("/api/orders/user/1", params={"activeOnly": "false"}).json()

    assert active["message"] == "Retrieved 2 active orders successfully"
    assert [o["id"] for o in active["data"]] == [1, 3]
    assert everything["message"] == "Retrieved 3 orders successfully"
    assert jorge_active["message"] == "Retrieved 1 orders for user 1 successfully"
    assert [o["id"] for o in jorge_active["data"]] == [1]
    assert [o["id"] for o in jorge_all["data"]] == [1, 2]


def test_orders_of_unknown_user(catalogue) -> None:
    response = catalogue.get("/api/orders/user/50")

    assert response.status_code == 404
    assert response.json()["message"] == "User not found with id: '50'"


def test_missing_order_is_404(client) -> None:
    response = client.get("/api/orders/3")

    assert response.status_code == 404
    assert response.json()["message"] == "Order not found with id: '3'"


def test_created_at_is_stable_between_create_and_fetch(catalogue) -> None:
    """
    Scenario: An order is created, then read back from the database.
    Expected: Both responses carry the same UTC createdAt.
    """
    created = catalogue.post("/api/orders/1", json=[{"productId": 1, "quantity": 1}])
    fetched = catalogue.get("/api/orders/1")
    listed = catalogue.get("/api/orders")

    created_at = created.json()["data"]["createdAt"]
    assert fetched.json()["data"]["createdAt"] == created_at
    assert listed.json()["data"][0]["createdAt"] == created_at
    assert created_at.endswith("Z")


def test_oversized_quantity_is_a_validation_error(catalogue) -> None:
    response = catalogue.post(
        "/api/orders/1", json=[{"productId": 1, "quantity": 2**70}]
    )

    assert response.status_code == 400
    assert response.json()["error"] == "Validation Failed"
    assert any(d.startswith("0.quantity") for d in response.json()["details"])

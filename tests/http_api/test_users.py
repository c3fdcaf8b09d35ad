# tests/http_api/test_users.py

JORGE = {"name": "Jorge", "lastName": "Avila", "email": "jorge@example.com"}


def test_create_user_returns_created_envelope(client) -> None:
    response = client.post("/api/user", json=JORGE)

    assert response.status_code == 201
    body = response.json()
    assert body["status"] == 201
    assert body["message"] == "User 'Jorge Avila' created successfully with ID: 1"
    assert "timestamp" in body

    data = body["data"]
    assert data["id"] == 1
    assert data["lastName"] == "Avila"
    assert data["email"] == "jorge@example.com"
    assert data["active"] is True
    assert "createDate" in data


def test_snake_case_input_is_accepted(client) -> None:
    response = client.post(
        "/api/user",
        json={"name": "Jose", "last_name": "Perez", "email": "jose@example.com"},
    )

    assert response.status_code == 201
    assert response.json()["data"]["lastName"] == "Perez"


def test_list_users_defaults_to_all(client) -> None:
    client.post("/api/user", json=JORGE)
    client.post(
        "/api/user",
        json={"name": "Jose", "lastName": "Perez", "email": "jose@example.com"},
    )
    client.delete("/api/user/1")

    everyone = client.get("/api/user").json()
    active = client.get("/api/user", params={"activeOnly": "true"}).json()

    assert everyone["message"] == "Retrieved 2 users successfully"
    assert [u["id"] for u in everyone["data"]] == [1, 2]
    assert active["message"] == "Retrieved 1 active users successfully"
    assert [u["id"] for u in active["data"]] == [2]


def test_get_user_including_inactive(client) -> None:
    client.post("/api/user", json=JORGE)
    client.delete("/api/user/1")

    response = client.get("/api/user/1")

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "User 1 retrieved successfully"
    assert body["data"]["active"] is False


def test_update_user_overwrites_fields(client) -> None:
    created = client.post("/api/user", json=JORGE).json()["data"]

    response = client.put(
        "/api/user/1",
        json={
            "name": "Jorge",
            "lastName": "Avila Ruiz",
            "email": "javila@example.com",
            "active": True,
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "User 1 updated successfully"
    assert body["data"]["lastName"] == "Avila Ruiz"
    assert body["data"]["email"] == "javila@example.com"
    assert body["data"]["createDate"] == created["createDate"]


def test_delete_user_has_no_data_and_is_repeatable(client) -> None:
    client.post("/api/user", json=JORGE)

    first = client.delete("/api/user/1")
    second = client.delete("/api/user/1")

    for response in (first, second):
        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "User 1 has been successfully deactivated"
        assert "data" not in body


def test_missing_user_is_404(client) -> None:
    for response in (
        client.get("/api/user/42"),
        client.put("/api/user/42", json=JORGE),
        client.delete("/api/user/42"),
    ):
        assert response.status_code == 404
        assert response.json()["message"] == "User not found with id: '42'"

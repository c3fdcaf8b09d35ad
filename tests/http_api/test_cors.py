# tests/http_api/test_cors.py
from fastapi.testclient import TestClient

from ecommerce_http_api.main import create_app

ORIGIN = "http://shop.example"


def _preflight(client: TestClient, method: str, origin: str = ORIGIN):
    return client.options(
        "/api/products",
        headers={
            "Origin": origin,
            "Access-Control-Request-Method": method,
        },
    )


def test_preflight_allows_configured_methods(client) -> None:
    response = _preflight(client, "PUT")

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
    allowed = response.headers["access-control-allow-methods"]
    for method in ("GET", "POST", "PUT", "DELETE"):
        assert method in allowed


def test_preflight_rejects_other_methods(client) -> None:
    response = _preflight(client, "PATCH")

    assert response.status_code == 400
    assert "PATCH" not in response.headers.get("access-control-allow-methods", "")


def test_simple_request_carries_allow_origin(client) -> None:
    response = client.get("/api/products", headers={"Origin": ORIGIN})

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"


def test_explicit_origin_list(settings) -> None:
    """
    Scenario: Only one origin is configured.
    Expected: That origin is echoed back; any other origin fails preflight.
    """
    settings.cors_origins = f"{ORIGIN}, http://admin.example"

    with TestClient(create_app(settings)) as client:
        allowed = _preflight(client, "GET")
        denied = _preflight(client, "GET", origin="http://evil.example")

    assert allowed.status_code == 200
    assert allowed.headers["access-control-allow-origin"] == ORIGIN
    assert denied.status_code == 400
    assert "access-control-allow-origin" not in denied.headers

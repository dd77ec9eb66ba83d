"""
Tests for the root and health endpoints.
"""


def test_root(client):
    response = client.get("/")
    assert response.json()["status"] == "healthy"


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["timestamp"].endswith("Z")


def test_detailed_health_counts_rows(client):
    response = client.get("/health/detailed")

    database = response.json()["checks"]["database"]
    assert response.json()["status"] == "healthy"
    assert database["companies"] == 3
    assert database["jobs"] == 3


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/api/v1/nowhere")

    assert response.status_code == 404
    assert response.json()["error"]["status"] == 404

"""Tests for the ping endpoint."""

from fastapi.testclient import TestClient


def test_ping_returns_200(client: TestClient):
    """GET /ping returns 200 status code."""
    response = client.get("/ping")
    assert response.status_code == 200


def test_ping_response_body(client: TestClient):
    """GET /ping returns the plain text body 'pong'."""
    response = client.get("/ping")
    assert response.text == "pong"
    assert response.headers["content-type"].startswith("text/plain")


def test_unknown_route_returns_404(client: TestClient):
    """Only /ping is exposed."""
    response = client.get("/health")
    assert response.status_code == 404

"""Tests for health endpoints."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient


def test_liveness(client: TestClient) -> None:
    """Test the liveness endpoint."""
    response = client.get("/health/live")
    assert response.status_code == 200
    assert response.json() == {"status": "alive"}


def test_readiness(client: TestClient) -> None:
    """Test the readiness endpoint."""
    response = client.get("/health/ready")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ready"
    assert data["environment"] == "testing"
    assert "debug" in data


@pytest.mark.parametrize(
    ("app_fixture", "service_name"),
    [
        ("gateway_app", "gateway"),
        ("comments_app", "comments"),
        ("censor_app", "censor"),
    ],
)
def test_health_names_the_service(
    request: pytest.FixtureRequest, app_fixture: str, service_name: str
) -> None:
    """Every service reports its own name."""
    app: FastAPI = request.getfixturevalue(app_fixture)
    response = TestClient(app).get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["service"] == service_name
    assert "version" in data


def test_root(client: TestClient) -> None:
    """Test the root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["service"] == "gateway"
    assert "version" in data

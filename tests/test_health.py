"""Tests for health endpoints."""

from fastapi.testclient import TestClient

from tube_companion.config import settings


def test_health_endpoint(test_client: TestClient) -> None:
    """Test the basic health endpoint."""
    response = test_client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert "version" in data
    assert data["components"]["youtube_live"] is False


def test_readiness_endpoint(test_client: TestClient) -> None:
    """Test readiness with the in-memory database and stub provider."""
    response = test_client.get("/health/ready")

    assert response.status_code == 200
    data = response.json()
    assert data["database"] is True
    assert data["youtube_configured"] is True
    assert data["youtube_reachable"] is True
    assert data["ready"] is True


def test_readiness_without_api_key(test_client: TestClient, monkeypatch) -> None:
    """A live provider without a key is reported as not ready."""
    monkeypatch.setattr(settings, "youtube_provider", "youtube")
    monkeypatch.setattr(settings, "youtube_api_key", None)

    response = test_client.get("/health/ready")

    assert response.status_code == 200
    data = response.json()
    assert data["database"] is True
    assert data["youtube_configured"] is False
    assert data["ready"] is False


def test_liveness_endpoint(test_client: TestClient) -> None:
    """Test the liveness probe endpoint."""
    response = test_client.get("/health/live")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "alive"


def test_root_endpoint(test_client: TestClient) -> None:
    """Test the root endpoint."""
    response = test_client.get("/")

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Tube Companion"
    assert "version" in data
    assert "docs" in data

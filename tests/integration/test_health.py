"""Integration tests for health check endpoints."""

from datetime import datetime, timedelta
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient


class TestHealthEndpoint:
    """Tests for /health endpoint."""

    def test_health_returns_200(self, client: TestClient) -> None:
        """Test that /health endpoint returns 200 status."""
        response = client.get("/health")
        assert response.status_code == 200

    def test_health_returns_healthy_status(self, client: TestClient) -> None:
        """Test that /health endpoint returns healthy status."""
        data = client.get("/health").json()

        assert data["status"] == "healthy"
        assert data["timestamp"] is not None
        assert data["version"] == "0.1.0"

    def test_health_timestamp_is_timezone_aware(self, client: TestClient) -> None:
        """Test that the timestamp carries a UTC offset."""
        timestamp = datetime.fromisoformat(client.get("/health").json()["timestamp"].replace("Z", "+00:00"))

        assert timestamp.utcoffset() == timedelta(0)


class TestReadinessEndpoint:
    """Tests for /health/ready endpoint."""

    def test_readiness_returns_200_when_healthy(self, client: TestClient) -> None:
        """Test that /health/ready returns 200 when the database is reachable."""
        response = client.get("/health/ready")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_readiness_includes_database_check(self, client: TestClient) -> None:
        """Test that /health/ready includes database connectivity check."""
        data = client.get("/health/ready").json()

        db_check = next(c for c in data["checks"] if c["name"] == "database")
        assert db_check["healthy"] is True
        assert db_check["latency_ms"] is not None

    def test_readiness_returns_503_when_database_unhealthy(self, client: TestClient) -> None:
        """Test that /health/ready returns 503 when database is unhealthy."""
        with patch(
            "src.api.routes.health.check_database_connection",
            return_value={"healthy": False, "error": "Connection timeout"},
        ):
            response = client.get("/health/ready")

        assert response.status_code == 503
        data = response.json()
        assert data["status"] == "unhealthy"
        db_check = next(c for c in data["checks"] if c["name"] == "database")
        assert db_check["error"] == "Connection timeout"


class TestStartup:
    """Tests for application startup."""

    def test_unreachable_store_aborts_startup(self) -> None:
        """Test that a failed store connection prevents serving."""
        from src.main import app

        with patch("src.main.init_supabase_client", side_effect=ConnectionError("refused")):
            with pytest.raises(ConnectionError):
                with TestClient(app):
                    pass

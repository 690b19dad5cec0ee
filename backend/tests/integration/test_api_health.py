"""
Integration tests for health and status endpoints.

These tests verify the API is responding correctly.
"""

import pytest


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    @pytest.mark.integration
    def test_health_endpoint(self, client):
        """Health endpoint should return 200."""
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"

    @pytest.mark.integration
    def test_health_detailed(self, client):
        """Detailed health endpoint should report generation config."""
        response = client.get("/health/detailed")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] in ["healthy", "degraded"]
        assert "system" in data
        assert "enabled" in data["generation"]

    @pytest.mark.integration
    def test_root_endpoint(self, client):
        """Root endpoint should return API info."""
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["endpoints"]["diet-plan"] == "/api/diet-plan"


class TestAPIStructure:
    """Tests for API structure and routing."""

    @pytest.mark.integration
    def test_404_on_unknown_route(self, client):
        response = client.get("/api/nonexistent")
        assert response.status_code == 404

    @pytest.mark.integration
    def test_cors_preflight(self, client):
        """Allowed frontend origin should get CORS headers."""
        response = client.options(
            "/api/chat",
            headers={
                "Origin": "http://localhost:3000",
                "Access-Control-Request-Method": "POST",
            },
        )
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "http://localhost:3000"

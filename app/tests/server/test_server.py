"""Tests for the application wiring: middleware, error handlers and routes."""

import uuid

import pytest

from server.server import handler


@pytest.mark.unit
class TestCorrelationIdMiddleware:
    def test_generates_correlation_id(self, client):
        response = client.get("/health")

        uuid.UUID(response.headers["X-Correlation-ID"])

    def test_echoes_incoming_correlation_id(self, client):
        response = client.get("/health", headers={"X-Correlation-ID": "req-123"})

        assert response.headers["X-Correlation-ID"] == "req-123"

    def test_error_responses_carry_correlation_id(self, client):
        response = client.post(
            "/api/reply", json={}, headers={"X-Correlation-ID": "req-400"}
        )

        assert response.status_code == 400
        assert response.headers["X-Correlation-ID"] == "req-400"


@pytest.mark.unit
class TestRoutes:
    @pytest.mark.parametrize(
        "path,method",
        [
            ("/health", "get"),
            ("/version", "get"),
            ("/api/reply", "post"),
            ("/api/markAsRead", "post"),
            ("/api/sendNotification", "post"),
        ],
    )
    def test_expected_routes_are_published(self, path, method):
        paths = handler.openapi()["paths"]

        assert method in paths[path]

    def test_unknown_route_is_404(self, client):
        assert client.get("/api/unknown").status_code == 404

    def test_cors_preflight(self, client):
        response = client.options(
            "/api/reply",
            headers={
                "Origin": "https://app.example.com",
                "Access-Control-Request-Method": "POST",
            },
        )

        assert response.status_code == 200
        assert "access-control-allow-origin" in response.headers

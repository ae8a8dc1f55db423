"""
Integration tests for service-level endpoints and cross-cutting behaviour.

Tests cover:
- Health check and HTML home page
- Swagger UI and Prometheus metrics endpoints
- Correlation ID, duration and security headers
- Error responses for unmatched routes and methods
"""

from datetime import datetime

from api.src.main import http_metrics


class TestHealthCheck:
    """GET /health"""

    def test_reports_healthy(self, client):
        """Test status is healthy and the timestamp is ISO-8601."""
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        parsed = datetime.fromisoformat(data["timestamp"])
        assert parsed.tzinfo is not None

    def test_timestamp_is_fresh(self, client):
        """Test the timestamp is generated per call."""
        first = datetime.fromisoformat(client.get("/health").json()["timestamp"])
        second = datetime.fromisoformat(client.get("/health").json()["timestamp"])

        assert second >= first


class TestHomePage:
    """GET /"""

    def test_renders_html(self, client):
        """Test the home page is HTML with version, uptime and server time."""
        response = client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        body = response.text
        assert "Axum Backend API" in body
        assert '<dd id="version">1.0.0</dd>' in body
        assert "0 days, 0 hours, 0 minutes" in body
        assert 'id="server-time"' in body

    def test_links_to_documentation(self, client):
        """Test the home page links to Swagger UI and the OpenAPI document."""
        body = client.get("/").text

        assert 'href="/swagger-ui"' in body
        assert 'href="/api-docs/openapi.json"' in body


class TestDocumentationEndpoints:
    """Swagger UI"""

    def test_swagger_ui_is_served(self, client):
        """Test the interactive documentation page is served."""
        response = client.get("/swagger-ui")

        assert response.status_code == 200
        assert "swagger-ui" in response.text
        assert "/api-docs/openapi.json" in response.text

    def test_redoc_is_disabled(self, client):
        """Test ReDoc is not mounted."""
        assert client.get("/redoc").status_code == 404


class TestMetricsEndpoint:
    """GET /metrics"""

    def test_exposes_request_metrics_by_route_template(self, client):
        """Test requests are counted under their route template."""
        client.get("/users/123")

        response = client.get("/metrics")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert "http_requests_total" in response.text
        assert 'endpoint="/users/{id}"' in response.text
        assert 'endpoint="/users/123"' not in response.text

    def test_exposes_in_progress_gauge(self, client):
        """Test in-progress requests are tracked and released per route."""
        client.get("/users/5")

        response = client.get("/metrics")

        assert http_metrics.registry.get_sample_value(
            "http_requests_in_progress", {"method": "GET", "endpoint": "/users/{id}"}
        ) == 0.0
        # The scrape itself is still in flight while the output is rendered.
        assert 'endpoint="/metrics"' in response.text


class TestResponseHeaders:
    """Headers added by middleware."""

    def test_generates_correlation_id(self, client):
        """Test a correlation id is generated when none is sent."""
        response = client.get("/health")

        assert response.headers["X-Correlation-ID"]
        assert response.headers["X-Request-Duration-Ms"].isdigit()

    def test_echoes_correlation_id(self, client):
        """Test a caller-provided correlation id is returned."""
        response = client.get("/health", headers={"X-Correlation-ID": "req-abc-123"})

        assert response.headers["X-Correlation-ID"] == "req-abc-123"

    def test_security_headers(self, client):
        """Test security headers are present."""
        response = client.get("/health")

        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"

    def test_cors_preflight(self, client):
        """Test CORS preflight requests are answered."""
        response = client.options(
            "/users",
            headers={
                "Origin": "http://localhost:5173",
                "Access-Control-Request-Method": "POST",
            },
        )

        assert response.status_code == 200
        assert "access-control-allow-origin" in response.headers


class TestRoutingErrors:
    """Errors produced by the router itself."""

    def test_unknown_route_is_not_found(self, client):
        """Test unmatched paths yield 404 with a detail message."""
        response = client.get("/accounts")

        assert response.status_code == 404
        assert response.json() == {"detail": "Not Found"}

    def test_wrong_method_is_not_allowed(self, client):
        """Test an unsupported method on a known path yields 405."""
        response = client.delete("/users/1")

        assert response.status_code == 405

"""Tests for CORS and security headers middleware."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from travote_api.api.middleware import SecurityHeadersMiddleware, setup_cors
from travote_api.core.config import Settings


def _create_test_app() -> FastAPI:
    """Create a minimal FastAPI app for middleware testing."""
    app = FastAPI()

    @app.get("/test")
    async def test_route() -> dict:
        return {"ok": True}

    return app


class TestSecurityHeadersMiddleware:
    """Tests for SecurityHeadersMiddleware."""

    @pytest.fixture
    def client(self) -> TestClient:
        app = _create_test_app()
        app.add_middleware(SecurityHeadersMiddleware)
        return TestClient(app)

    def test_x_content_type_options(self, client: TestClient) -> None:
        response = client.get("/test")
        assert response.headers["X-Content-Type-Options"] == "nosniff"

    def test_x_frame_options(self, client: TestClient) -> None:
        response = client.get("/test")
        assert response.headers["X-Frame-Options"] == "DENY"

    def test_referrer_policy(self, client: TestClient) -> None:
        response = client.get("/test")
        assert response.headers["Referrer-Policy"] == "strict-origin-when-cross-origin"


class TestCors:
    """Tests for CORS configuration."""

    def test_any_origin_by_default(self) -> None:
        app = _create_test_app()
        setup_cors(app, Settings(_env_file=None))
        response = TestClient(app).get("/test", headers={"Origin": "https://travel.example"})
        assert response.headers["access-control-allow-origin"] == "*"

    def test_configured_origins_only(self) -> None:
        app = _create_test_app()
        setup_cors(app, Settings(_env_file=None, cors_origins="https://travel.example"))
        client = TestClient(app)
        allowed = client.get("/test", headers={"Origin": "https://travel.example"})
        denied = client.get("/test", headers={"Origin": "https://other.example"})
        assert allowed.headers["access-control-allow-origin"] == "https://travel.example"
        assert "access-control-allow-origin" not in denied.headers

    def test_preflight_allows_post(self) -> None:
        app = _create_test_app()
        setup_cors(app, Settings(_env_file=None))
        response = TestClient(app).options(
            "/test",
            headers={"Origin": "https://travel.example", "Access-Control-Request-Method": "POST"},
        )
        assert response.status_code == 200
        assert "POST" in response.headers["access-control-allow-methods"]

import logging
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.testclient import TestClient

from core import errors, middleware


def test_health_returns_current_timestamp(client):
    resp = client.get("/api/health")

    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["message"] == "API is running"
    stamp = datetime.fromisoformat(body["timestamp"])
    assert abs((datetime.now(timezone.utc) - stamp).total_seconds()) < 5


def test_root_lists_endpoints(client):
    resp = client.get("/")

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["documentation"] == "/api/docs"
    assert data["endpoints"]["posts"] == "/api/posts"


def test_unknown_route_uses_error_envelope(client):
    resp = client.get("/api/nope")

    assert resp.status_code == 404
    assert resp.json() == {"success": False, "message": "Route /api/nope not found"}


def test_security_headers_are_set(client):
    resp = client.get("/api/health")

    assert resp.headers["X-Content-Type-Options"] == "nosniff"
    assert resp.headers["X-Frame-Options"] == "SAMEORIGIN"
    assert "Strict-Transport-Security" not in resp.headers


def test_cors_allows_configured_origin(client):
    resp = client.options(
        "/api/posts",
        headers={"Origin": "http://localhost:3000", "Access-Control-Request-Method": "GET"},
    )

    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "http://localhost:3000"


def _failing_app() -> FastAPI:
    app = FastAPI()
    errors.register_exception_handlers(app)

    @app.get("/boom")
    def boom():
        raise ZeroDivisionError("kaboom")

    return app


def test_unexpected_error_includes_stack_outside_production(monkeypatch):
    monkeypatch.setenv("APP_ENV", "development")
    client = TestClient(_failing_app(), raise_server_exceptions=False)

    resp = client.get("/boom")

    assert resp.status_code == 500
    body = resp.json()
    assert body["success"] is False
    assert body["message"] == "Internal Server Error"
    assert "ZeroDivisionError" in body["stack"]


def test_unexpected_error_hides_stack_in_production(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    client = TestClient(_failing_app(), raise_server_exceptions=False)

    resp = client.get("/boom")

    assert resp.status_code == 500
    assert resp.json() == {"success": False, "message": "Internal Server Error"}


def test_failed_request_is_still_access_logged(caplog):
    app = _failing_app()
    middleware.install(app)
    client = TestClient(app, raise_server_exceptions=False)

    with caplog.at_level(logging.INFO, logger="api.access"):
        resp = client.get("/boom")

    assert resp.status_code == 500
    access_lines = [r.getMessage() for r in caplog.records if r.name == "api.access"]
    assert len(access_lines) == 1
    assert access_lines[0].startswith("GET /boom 500 ")

# tests/test_settings.py
import pytest
from fastapi.testclient import TestClient

from inkpost.core.settings import Settings


def test_environment_names(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ACCESS_TOKEN_EXPIRE_MINUTES", "15")
    monkeypatch.setenv("SQL_DEBUG", "true")
    monkeypatch.setenv("CORS_ALLOW_CREDENTIALS", "false")
    monkeypatch.setenv("CORS_ALLOW_METHODS", '["GET"]')
    monkeypatch.setenv("CORS_ALLOW_HEADERS", '["X-Custom"]')
    monkeypatch.setenv("LOG_LEVEL", "debug")

    configured = Settings(_env_file=None)

    assert configured.access_token_expire_minutes == 15
    assert configured.sql_debug is True
    assert configured.cors_allow_credentials is False
    assert configured.cors_allow_methods == ["GET"]
    assert configured.cors_allow_headers == ["X-Custom"]
    assert configured.log_level == "DEBUG"


def test_test_database_switch(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "postgresql+psycopg://db/inkpost")
    monkeypatch.setenv("TEST_DATABASE_URL", "sqlite:///./test.db")

    monkeypatch.setenv("USE_TEST_DATABASE", "false")
    assert Settings(_env_file=None).effective_database_url == "postgresql+psycopg://db/inkpost"
    assert Settings(_env_file=None).is_sqlite is False

    monkeypatch.setenv("USE_TEST_DATABASE", "true")
    assert Settings(_env_file=None).effective_database_url == "sqlite:///./test.db"
    assert Settings(_env_file=None).is_sqlite is True


def test_cors_preflight_uses_configured_policy(client: TestClient) -> None:
    r = client.options(
        "/api/v1/posts/",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Authorization",
        },
    )
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] == "http://localhost:5173"
    assert r.headers["access-control-allow-credentials"] == "true"
    assert "POST" in r.headers["access-control-allow-methods"]


def test_cors_rejects_unknown_origin(client: TestClient) -> None:
    r = client.options(
        "/api/v1/posts/",
        headers={
            "Origin": "http://evil.example",
            "Access-Control-Request-Method": "GET",
        },
    )
    assert "access-control-allow-origin" not in r.headers

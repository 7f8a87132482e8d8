# tests/conftest.py
from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from skillsnap_api.config.settings import get_settings
from skillsnap_api.infrastructure.database import session as db_session
from skillsnap_api.main import create_app

TEST_PASSWORD = "Passw0rd"


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Point every test at its own SQLite file and a fresh Settings cache."""
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'skillsnap.db'}")
    monkeypatch.setenv("AUTH_ENABLED", "true")
    monkeypatch.setenv("PASSWORD_HASH_ITERATIONS", "1000")
    for name in ("JWT_ISSUER", "JWT_AUDIENCE", "JWT_SECRET", "ALLOWED_ORIGINS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(db_session, "_engine", None)
    monkeypatch.setattr(db_session, "_sessionmaker", None)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def client() -> Iterator[TestClient]:
    """TestClient over a fresh app; entering it runs the lifespan (tables, cache)."""
    with TestClient(create_app()) as c:
        yield c


@pytest.fixture
def register_and_login(client: TestClient) -> Callable[..., dict[str, str]]:
    """Register an account, log in and return bearer headers."""

    def _login(email: str = "ada@example.com", full_name: str = "Ada Lovelace") -> dict[str, str]:
        r = client.post(
            "/api/auth/register",
            json={"email": email, "password": TEST_PASSWORD, "full_name": full_name},
        )
        assert r.status_code == 200, r.text
        r = client.post("/api/auth/login", json={"email": email, "password": TEST_PASSWORD})
        assert r.status_code == 200, r.text
        return {"Authorization": f"Bearer {r.json()['data']['token']}"}

    return _login


@pytest.fixture
def auth_headers(register_and_login: Callable[..., dict[str, str]]) -> dict[str, str]:
    return register_and_login()


@pytest.fixture
def portfolio_user_id(client: TestClient) -> int:
    r = client.post(
        "/api/portfolio-users",
        json={"name": "Ada Lovelace", "bio": "First programmer", "profile_image_url": ""},
    )
    assert r.status_code == 201, r.text
    return int(r.json()["data"]["id"])

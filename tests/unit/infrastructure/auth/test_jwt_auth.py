# tests/unit/infrastructure/auth/test_jwt_auth.py
from __future__ import annotations

import time
from datetime import UTC, datetime, timedelta

import jwt
import pytest
from fastapi import HTTPException
from pydantic import SecretStr
from starlette.requests import Request

from skillsnap_api.config.features.auth import AuthSettings
from skillsnap_api.domain.entities.account import Account
from skillsnap_api.infrastructure.auth import jwt_dependency
from skillsnap_api.infrastructure.auth.jwt_dependency import (
    _extract_bearer_token,
    auth_required,
    decode_hs256,
)
from skillsnap_api.infrastructure.auth.token_issuer import JwtTokenIssuer

SECRET = "unit-test-secret-that-is-long-enough-0123456789"


def _cfg(**overrides: object) -> AuthSettings:
    values: dict[str, object] = {"enabled": True, "secret": SecretStr(SECRET)}
    values.update(overrides)
    return AuthSettings(**values)  # type: ignore[arg-type]


def _account(**overrides: object) -> Account:
    values: dict[str, object] = {
        "id": "3f2b8f1e-0000-4000-8000-000000000001",
        "email": "ada@example.com",
        "full_name": "Ada Lovelace",
        "password_hash": "x",
        "created_at": datetime(2026, 1, 1, tzinfo=UTC),
        "roles": ("admin",),
    }
    values.update(overrides)
    return Account(**values)  # type: ignore[arg-type]


def _request(authorization: str | None) -> Request:
    headers = [] if authorization is None else [(b"authorization", authorization.encode())]
    return Request({"type": "http", "method": "GET", "path": "/", "headers": headers})


def test_issued_token_carries_identity_claims() -> None:
    fixed = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)
    issuer = JwtTokenIssuer(_cfg(), clock=lambda: fixed)

    token = issuer.issue(_account())
    claims = jwt.decode(
        token, SECRET, algorithms=["HS256"], options={"verify_exp": False}
    )

    assert claims["sub"] == "3f2b8f1e-0000-4000-8000-000000000001"
    assert claims["name"] == "ada@example.com"
    assert claims["email"] == "ada@example.com"
    assert claims["roles"] == ["admin"]
    assert claims["jti"]
    assert claims["iat"] == int(fixed.timestamp())
    assert claims["exp"] == int((fixed + timedelta(days=7)).timestamp())
    assert "iss" not in claims and "aud" not in claims


def test_issuer_and_audience_are_stamped_and_enforced() -> None:
    cfg = _cfg(issuer="skillsnap", audience="skillsnap-clients")
    token = JwtTokenIssuer(cfg).issue(_account())

    claims = decode_hs256(token, cfg)
    assert claims["iss"] == "skillsnap"
    assert claims["aud"] == "skillsnap-clients"

    with pytest.raises(HTTPException) as excinfo:
        decode_hs256(token, _cfg(issuer="someone-else"))
    assert excinfo.value.status_code == 401


def test_each_token_has_a_unique_jti() -> None:
    issuer = JwtTokenIssuer(_cfg())
    a = jwt.decode(issuer.issue(_account()), SECRET, algorithms=["HS256"])
    b = jwt.decode(issuer.issue(_account()), SECRET, algorithms=["HS256"])
    assert a["jti"] != b["jti"]


def test_issuer_requires_secret() -> None:
    with pytest.raises(ValueError):
        JwtTokenIssuer(_cfg(secret=None))


def test_expired_token_is_rejected_without_leeway() -> None:
    now = int(time.time())
    token = jwt.encode(
        {"sub": "u1", "iat": now - 100, "exp": now - 1}, SECRET, algorithm="HS256"
    )
    with pytest.raises(HTTPException) as excinfo:
        decode_hs256(token, _cfg())
    assert excinfo.value.status_code == 401
    assert excinfo.value.detail == "Invalid token"


@pytest.mark.parametrize("missing", ["sub", "exp", "iat"])
def test_required_claims(missing: str) -> None:
    now = int(time.time())
    payload = {"sub": "u1", "iat": now, "exp": now + 60}
    payload.pop(missing)
    token = jwt.encode(payload, SECRET, algorithm="HS256")
    with pytest.raises(HTTPException):
        decode_hs256(token, _cfg())


def test_wrong_signature_is_rejected() -> None:
    now = int(time.time())
    token = jwt.encode(
        {"sub": "u1", "iat": now, "exp": now + 60},
        "another-secret-that-is-also-long-enough-000",
        algorithm="HS256",
    )
    with pytest.raises(HTTPException) as excinfo:
        decode_hs256(token, _cfg())
    assert excinfo.value.status_code == 401


def test_missing_secret_is_a_server_error() -> None:
    with pytest.raises(HTTPException) as excinfo:
        decode_hs256("whatever", _cfg(secret=None))
    assert excinfo.value.status_code == 500


@pytest.mark.parametrize(
    ("header", "detail"),
    [
        (None, "Missing bearer token"),
        ("Basic abc", "Missing bearer token"),
        ("Bearer", "Missing token"),
        ("Bearer    ", "Missing token"),
    ],
)
def test_bearer_extraction_errors(header: str | None, detail: str) -> None:
    with pytest.raises(HTTPException) as excinfo:
        _extract_bearer_token(_request(header))
    assert excinfo.value.status_code == 401
    assert excinfo.value.detail == detail


def test_bearer_extraction_is_case_insensitive() -> None:
    assert _extract_bearer_token(_request("bearer tok")) == "tok"


@pytest.mark.asyncio
async def test_dependency_returns_principal(monkeypatch: pytest.MonkeyPatch) -> None:
    cfg = _cfg()
    monkeypatch.setattr(jwt_dependency, "get_auth_settings", lambda: cfg)
    token = JwtTokenIssuer(cfg).issue(_account())

    principal = await auth_required()(_request(f"Bearer {token}"))

    assert principal.sub == "3f2b8f1e-0000-4000-8000-000000000001"
    assert principal.email == "ada@example.com"
    assert principal.roles == ("admin",)


@pytest.mark.asyncio
async def test_dependency_short_circuits_when_disabled(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(jwt_dependency, "get_auth_settings", lambda: _cfg(enabled=False))

    principal = await auth_required()(_request(None))

    assert principal.sub == "dev-user"

# tests/unit/infrastructure/http/test_error_handlers.py
from __future__ import annotations

from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient
from pydantic import BaseModel

from skillsnap_api.domain.exceptions.portfolio import BackingStoreError, ProjectNotFound
from skillsnap_api.infrastructure.http import errors
from skillsnap_api.infrastructure.middleware.request_id import RequestIdMiddleware


class Payload(BaseModel):
    value: int


def _app() -> FastAPI:
    app = FastAPI()
    errors.install_exception_handlers(app)
    app.add_middleware(RequestIdMiddleware)

    @app.post("/validation")
    async def validation_route(body: Payload) -> dict[str, Any]:
        return {"value": body.value}

    @app.get("/not-found")
    async def not_found() -> None:
        raise ProjectNotFound("Project not found", details={"project_id": 9})

    @app.get("/store")
    async def store() -> None:
        raise BackingStoreError("database unavailable")

    @app.get("/http-exc")
    async def http_exc() -> None:
        raise HTTPException(status_code=401, detail="Missing bearer token")

    @app.get("/unhandled")
    async def unhandled() -> None:
        raise RuntimeError("boom")

    return app


def test_error_envelope_defaults() -> None:
    payload = errors.error_envelope(code="X", http_status=418, message="teapot")
    assert payload == {
        "error": {
            "code": "X",
            "http_status": 418,
            "message": "teapot",
            "details": {},
            "trace_id": None,
        }
    }


def test_domain_error_envelope() -> None:
    client = TestClient(_app())

    r = client.get("/not-found", headers={"X-Request-ID": "t-1"})

    assert r.status_code == 404
    assert r.json()["error"] == {
        "code": "PROJECT_NOT_FOUND",
        "http_status": 404,
        "message": "Project not found",
        "details": {"project_id": 9},
        "trace_id": "t-1",
    }


def test_backing_store_error_is_500() -> None:
    client = TestClient(_app())

    r = client.get("/store")

    assert r.status_code == 500
    assert r.json()["error"]["code"] == "BACKING_STORE_ERROR"
    assert r.json()["error"]["trace_id"] == r.headers["X-Request-ID"]


def test_validation_error_envelope() -> None:
    client = TestClient(_app())

    r = client.post("/validation", json={"value": "not-an-int"})

    assert r.status_code == 422
    err = r.json()["error"]
    assert err["code"] == "VALIDATION_ERROR"
    assert err["message"] == "Request validation failed"
    assert err["details"]["errors"]


def test_http_exception_envelope() -> None:
    client = TestClient(_app())

    r = client.get("/http-exc")

    assert r.status_code == 401
    err = r.json()["error"]
    assert err["code"] == "HTTP_ERROR"
    assert err["message"] == "Missing bearer token"


def test_unhandled_exception_envelope() -> None:
    client = TestClient(_app(), raise_server_exceptions=False)

    r = client.get("/unhandled")

    assert r.status_code == 500
    err = r.json()["error"]
    assert err["code"] == "INTERNAL_ERROR"
    assert err["message"] == "Internal server error"

# src/skillsnap_api/infrastructure/http/errors.py
# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""FastAPI exception handlers producing the canonical error envelope.

Envelope::

    {"error": {"code", "http_status", "message", "details", "trace_id"}}
"""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from skillsnap_api.domain.exceptions.base import DomainError
from skillsnap_api.infrastructure.logging.logger import get_json_logger

logger = get_json_logger(__name__)


def trace_id_of(request: Request) -> str | None:
    """Return the correlation id assigned by ``RequestIdMiddleware``, if any."""
    return getattr(request.state, "request_id", None)


def error_envelope(
    *,
    code: str,
    http_status: int,
    message: str,
    details: dict[str, Any] | None = None,
    trace_id: str | None = None,
) -> dict[str, Any]:
    return {
        "error": {
            "code": code,
            "http_status": http_status,
            "message": message,
            "details": details or {},
            "trace_id": trace_id,
        }
    }


def _json(status_code: int, payload: dict[str, Any], trace_id: str | None) -> JSONResponse:
    headers = {"X-Request-ID": trace_id} if trace_id else None
    return JSONResponse(status_code=status_code, content=jsonable_encoder(payload), headers=headers)


async def handle_domain_error(request: Request, exc: DomainError) -> Response:
    trace_id = trace_id_of(request)
    if exc.http_status >= 500:
        logger.error("domain_error", extra={"code": exc.code, "path": request.url.path})
    payload = error_envelope(
        code=exc.code,
        http_status=exc.http_status,
        message=str(exc),
        details=exc.details,
        trace_id=trace_id,
    )
    return _json(exc.http_status, payload, trace_id)


async def handle_validation_error(request: Request, exc: RequestValidationError) -> Response:
    trace_id = trace_id_of(request)
    payload = error_envelope(
        code="VALIDATION_ERROR",
        http_status=422,
        message="Request validation failed",
        details={"errors": exc.errors()},
        trace_id=trace_id,
    )
    return _json(422, payload, trace_id)


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> Response:
    trace_id = trace_id_of(request)
    payload = error_envelope(
        code="HTTP_ERROR",
        http_status=exc.status_code,
        message=exc.detail if isinstance(exc.detail, str) else "HTTP error",
        details=None if isinstance(exc.detail, str) else {"detail": exc.detail},
        trace_id=trace_id,
    )
    response = _json(exc.status_code, payload, trace_id)
    if getattr(exc, "headers", None):
        response.headers.update(exc.headers)
    return response


async def handle_unhandled_exception(request: Request, exc: Exception) -> Response:
    trace_id = trace_id_of(request)
    logger.exception("unhandled_exception", extra={"path": request.url.path})
    payload = error_envelope(
        code="INTERNAL_ERROR",
        http_status=500,
        message="Internal server error",
        trace_id=trace_id,
    )
    return _json(500, payload, trace_id)


def install_exception_handlers(app: FastAPI) -> None:
    """Register every envelope-producing handler on ``app``."""

    async def _domain_error_handler(request: Request, exc: Exception) -> Response:
        if not isinstance(exc, DomainError):
            raise exc
        return await handle_domain_error(request, exc)

    async def _http_error_handler(request: Request, exc: Exception) -> Response:
        if not isinstance(exc, StarletteHTTPException):
            raise exc
        return await handle_http_exception(request, exc)

    async def _validation_error_handler(request: Request, exc: Exception) -> Response:
        if not isinstance(exc, RequestValidationError):
            raise exc
        return await handle_validation_error(request, exc)

    app.add_exception_handler(DomainError, _domain_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
    app.add_exception_handler(HTTPException, _http_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(Exception, handle_unhandled_exception)

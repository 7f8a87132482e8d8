# src/skillsnap_api/infrastructure/middleware/access_log.py
# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""Access Log Middleware.

Summary:
    Emits a structured access log entry for every request/response pair and
    records request count and latency in Prometheus.

Fields:
    evt: Literal "access" marker.
    method: HTTP method.
    path: URL path (no scheme/host).
    query: Raw query string (no parsing here).
    status: HTTP status code (500 if unhandled exception).
    elapsed_ms: Latency in milliseconds, rounded to two decimals.
    client_ip: Best-effort client IP (from connection).
    request_id: Correlation ID if present.
    ok: True if the downstream handler returned normally; False if raised.

Usage:
    app.add_middleware(AccessLogMiddleware)
"""

from __future__ import annotations

import logging
import time
from typing import Any

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from skillsnap_api.infrastructure.logging.logger import get_json_logger
from skillsnap_api.infrastructure.observability.metrics import (
    get_http_request_duration_seconds,
    get_http_requests_total,
)

_logger: logging.Logger = get_json_logger(__name__)


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Structured access logging middleware."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        """Log a single access record around the downstream handler.

        Raises:
            Exception: Re-raised after logging if the downstream handler fails.
        """
        t0 = time.perf_counter()
        response: Response | None = None
        ok = False
        try:
            response = await call_next(request)
            ok = True
            return response
        finally:
            elapsed = time.perf_counter() - t0
            status_code = response.status_code if response is not None else 500
            get_http_requests_total().labels(
                method=request.method, status=str(status_code)
            ).inc()
            get_http_request_duration_seconds().labels(
                method=request.method, status=str(status_code)
            ).observe(elapsed)
            log: dict[str, Any] = {
                "evt": "access",
                "method": request.method,
                "path": request.url.path,
                "query": str(request.url.query),
                "status": status_code,
                "elapsed_ms": round(elapsed * 1000.0, 2),
                "client_ip": request.client.host if request.client else None,
                "request_id": getattr(request.state, "request_id", None),
                "ok": ok,
            }
            _logger.info("access_log", extra=log)

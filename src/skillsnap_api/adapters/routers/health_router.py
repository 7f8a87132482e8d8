# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""Health endpoints (Adapters Layer).

Purpose:
    Expose liveness and readiness signals suitable for container orchestrators and
    load balancers.

Design:
    * Probes are injected; the default probe pings the configured database.
    * Testability: a provider instance (`probe_provider`) is the DI token so overrides
      match by identity reliably; `use_cache=False` honors late overrides.
    * Readiness latency is recorded to a Prometheus histogram (seconds).
"""

from __future__ import annotations

import asyncio
import typing as t
from enum import Enum
from typing import Annotated, Protocol

from fastapi import APIRouter, Depends, Response, status
from pydantic import Field

from skillsnap_api.adapters.schemas.http.base import BaseHTTPSchema
from skillsnap_api.infrastructure.database import session as db_session
from skillsnap_api.infrastructure.logging.logger import get_json_logger
from skillsnap_api.infrastructure.observability.metrics import get_readyz_db_latency_seconds

logger = get_json_logger(__name__)
router = APIRouter()


class HealthState(str, Enum):
    """Overall service health classification."""

    OK = "ok"
    DEGRADED = "degraded"


class CheckResult(BaseHTTPSchema):
    """Result of a single dependency check.

    Attributes:
        name: Logical name for the dependency (e.g., "db").
        status: "ok" when the probe succeeded, otherwise "down".
        detail: Optional diagnostic detail (e.g., exception message).
        duration_ms: Time spent on the probe in milliseconds.
    """

    name: str = Field(..., examples=["db"])
    status: t.Literal["ok", "down"]
    detail: str | None = None
    duration_ms: float


class ReadinessResponse(BaseHTTPSchema):
    status: HealthState
    checks: list[CheckResult] = Field(default_factory=list)


class LivenessResponse(BaseHTTPSchema):
    """Liveness response indicating the process is running."""

    status: t.Literal["ok"] = "ok"


class HealthProbe(Protocol):
    """Minimal, non-destructive dependency checks returning ``(is_ok, detail)``."""

    async def db(self) -> tuple[bool, str | None]: ...


class DatabaseProbe:
    """Probe that issues ``SELECT 1`` against the application engine."""

    async def db(self) -> tuple[bool, str | None]:
        try:
            await db_session.ping()
        except Exception as exc:
            return False, str(exc) or type(exc).__name__
        return True, None


class ProbeProvider:
    """Dependency token object for readiness routes."""

    def __call__(self) -> HealthProbe:
        return DatabaseProbe()


probe_provider = ProbeProvider()


@router.get(
    "/liveness",
    summary="Liveness",
    operation_id="health_liveness",
    response_model=LivenessResponse,
    status_code=status.HTTP_200_OK,
)
async def liveness() -> LivenessResponse:
    """Return a fast liveness signal (no external I/O)."""
    return LivenessResponse()


@router.get(
    "/readiness",
    summary="Readiness",
    operation_id="health_readiness",
    response_model=ReadinessResponse,
    responses={503: {"description": "Service degraded", "model": ReadinessResponse}},
)
async def readiness(
    response: Response,
    probe: Annotated[HealthProbe, Depends(probe_provider, use_cache=False)],
) -> ReadinessResponse:
    """Probe the database; 200 when healthy, otherwise 503 ``degraded``."""
    loop = asyncio.get_running_loop()
    start = loop.time()
    ok, detail = await probe.db()
    elapsed = loop.time() - start
    get_readyz_db_latency_seconds().observe(elapsed)

    check = CheckResult(
        name="db",
        status="ok" if ok else "down",
        detail=detail,
        duration_ms=elapsed * 1000.0,
    )
    if not ok:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    payload = ReadinessResponse(
        status=HealthState.OK if ok else HealthState.DEGRADED,
        checks=[check],
    )
    logger.info(
        "readiness_probe",
        extra={"overall": payload.status.value, "checks": [check.model_dump_http()]},
    )
    return payload

# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""Prometheus scrape endpoint (`/metrics`).

Warms lazily created collectors so their series appear on the very first
scrape (cold start).

Layer:
    adapters/routers
"""

from __future__ import annotations

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from skillsnap_api.infrastructure.observability.metrics import (
    get_http_request_duration_seconds,
    get_http_requests_total,
    get_list_cache_operations_total,
    get_readyz_db_latency_seconds,
)

router = APIRouter()


@router.get("/metrics", include_in_schema=False)
async def metrics_probe() -> Response:
    """Expose Prometheus metrics in the text exposition format."""
    get_readyz_db_latency_seconds()
    get_list_cache_operations_total()
    get_http_requests_total()
    get_http_request_duration_seconds()
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

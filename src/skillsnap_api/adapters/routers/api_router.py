# src/skillsnap_api/adapters/routers/api_router.py
# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""API Router Aggregator (Adapters Layer).

Purpose:
    Compose and expose the top-level `router` that includes all feature routers.

Responsibilities:
    • Mount health endpoints under `/health`.
    • Mount portfolio users, projects and skills under `/api/...`.
    • Mount registration/login under `/api/auth`.
    • Mount the Prometheus scrape endpoint at `/metrics`.

Layer:
    adapters/routers
"""

from __future__ import annotations

from fastapi import APIRouter

from skillsnap_api.adapters.routers.auth_router import router as auth_router
from skillsnap_api.adapters.routers.health_router import router as health_router
from skillsnap_api.adapters.routers.metrics_router import router as metrics_router
from skillsnap_api.adapters.routers.portfolio_users_router import (
    router as portfolio_users_router,
)
from skillsnap_api.adapters.routers.projects_router import router as projects_router
from skillsnap_api.adapters.routers.skills_router import router as skills_router

router = APIRouter()

router.include_router(health_router, prefix="/health", tags=["Health"])
router.include_router(portfolio_users_router)
router.include_router(projects_router)
router.include_router(skills_router)
router.include_router(auth_router)
router.include_router(metrics_router)

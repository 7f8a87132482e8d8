# src/skillsnap_api/dependencies/core/bootstrap.py
# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""Core bootstrap for infrastructure (settings, logging, DB).

This module owns the lifecycle of shared infrastructure used by the FastAPI app.
It is intentionally thin: configuration is read from Settings, and all heavy
lifting is delegated to the infrastructure modules.

The single public surface is :func:`bootstrap`, an async context manager that
yields a simple state object with the resolved Settings.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from fastapi import FastAPI

from skillsnap_api.config.settings import Settings, get_settings
from skillsnap_api.infrastructure.logging.logger import (
    configure_root_logging,
    get_json_logger,
)

logger = get_json_logger(__name__)


@dataclass
class BootstrapState:
    """State yielded by the bootstrap context manager."""

    settings: Settings


@asynccontextmanager
async def bootstrap(app: FastAPI) -> AsyncGenerator[BootstrapState, None]:
    """Initialize and teardown shared infrastructure.

    Responsibilities:
        * Load application settings and apply the configured log level.
        * Initialize DB engine/sessionmaker.
        * Create missing tables when ``DB_CREATE_ALL`` is enabled.
        * Dispose the engine on exit, even on error.

    Args:
        app: FastAPI application instance (unused today, reserved for future hooks).

    Yields:
        BootstrapState: Resolved settings.
    """
    settings: Settings = get_settings()
    if settings.log_level:
        configure_root_logging(settings.log_level)
    logger.info("bootstrap.start")

    # Import infrastructure modules here so tests can monkeypatch their functions.
    import skillsnap_api.infrastructure.database.session as db_session

    db_session.init_engine_and_sessionmaker(settings)
    try:
        if settings.db_create_all:
            await db_session.create_all()
        yield BootstrapState(settings=settings)
    finally:
        try:
            await db_session.dispose_engine()
        except Exception:
            logger.exception("bootstrap.db_dispose_failed")

        logger.info("bootstrap.stop")

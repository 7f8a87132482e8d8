# src/skillsnap_api/adapters/repositories/base_repository.py
# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""
BaseRepository: shared repository foundation for SkillSnap.

Purpose:
    Shared mechanics for all repositories:
      * Safe fetch helpers (optional, all).
      * Translation of driver/ORM failures into ``BackingStoreError``.

Layer: adapters / repositories

Notes:
    * No business logic, no domain decisions.
    * Repositories never commit; use cases own transactions.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Generic, TypeVar

from sqlalchemy import Select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from skillsnap_api.domain.exceptions.portfolio import BackingStoreError
from skillsnap_api.infrastructure.logging.logger import get_json_logger

TModel = TypeVar("TModel")

logger = get_json_logger(__name__)


class BaseRepository(Generic[TModel]):  # noqa: UP046
    """Abstract base class for all repositories."""

    #: Label used in logs and error details.
    entity_name: str = "record"

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: Async SQLAlchemy session bound to the target database.
        """
        self._session: AsyncSession = session

    @contextmanager
    def translate_errors(self, operation: str) -> Iterator[None]:
        """Re-raise SQLAlchemy failures as :class:`BackingStoreError`."""
        try:
            yield
        except SQLAlchemyError as exc:
            logger.error(
                "repository.error",
                extra={
                    "entity": self.entity_name,
                    "operation": operation,
                    "error": type(exc).__name__,
                },
            )
            raise BackingStoreError(
                f"Storage failure during {self.entity_name} {operation}.",
                details={"entity": self.entity_name, "operation": operation},
            ) from exc

    # ------------------------------------------------------------------
    # Fetch helpers
    # ------------------------------------------------------------------

    async def fetch_optional(self, stmt: Select[Any]) -> TModel | None:
        """Execute a statement and return zero or one row."""
        res = await self._session.execute(stmt)
        return res.scalars().first()

    async def fetch_all(self, stmt: Select[Any]) -> list[TModel]:
        """Execute a statement and return all rows as a list."""
        res = await self._session.execute(stmt)
        return list(res.scalars().all())

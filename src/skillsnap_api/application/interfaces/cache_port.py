# src/skillsnap_api/application/interfaces/cache_port.py
# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""Application Interface: List Cache Port.

Synopsis:
    Read-through cache for whole-collection list reads. Use cases depend on
    this protocol; the process-local implementation lives in
    ``infrastructure/caching/list_cache.py``.

Layer:
    application/interfaces
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence
from enum import Enum
from typing import Any, Protocol

type ListLoader = Callable[[], Awaitable[Sequence[Any]]]


class CollectionKey(str, Enum):
    """Collections whose list reads are cached (one entry per collection)."""

    PROJECTS = "projects"
    SKILLS = "skills"

    @property
    def cache_key(self) -> str:
        """Storage key of the collection's single cache entry."""
        return f"{self.value}_list"


class ListCachePort(Protocol):
    """Read-through cache with fixed expiry and explicit invalidation."""

    async def get_or_fetch(self, key: CollectionKey, *, loader: ListLoader) -> tuple[Any, ...]:
        """Return the cached list for ``key`` or load, store and return it.

        Args:
            key: Collection to read.
            loader: Async callable returning the full collection on a miss.

        Returns:
            The ordered snapshot captured at fetch time.

        Raises:
            BackingStoreError: If the loader fails. Nothing is stored.
        """
        raise NotImplementedError

    def invalidate(self, key: CollectionKey) -> None:
        """Remove the entry for ``key`` if present (idempotent)."""
        raise NotImplementedError

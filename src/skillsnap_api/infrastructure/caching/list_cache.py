# src/skillsnap_api/infrastructure/caching/list_cache.py
# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""Read-through list cache (process-local).

Synopsis:
    Implements :class:`~skillsnap_api.application.interfaces.cache_port.ListCachePort`
    on top of :class:`cachetools.TTLCache`. Each collection owns exactly one
    entry holding the full ordered list captured at fetch time.

Design:
    * Fixed expiry of :data:`LIST_CACHE_TTL_S` seconds from the moment of
      storage. An entry whose age reaches the TTL is treated as absent.
    * The injected ``timer`` drives expiry so tests can advance time.
    * A ``threading.Lock`` guards every lookup and mutation of the store.
      The lock is never held across ``await``; the loader runs unlocked.
    * No single-flight: concurrent misses each load and each store, last
      write wins. Replacement of an entry is atomic.
    * Loader failures surface as ``BackingStoreError`` and nothing is stored.

Layer:
    infrastructure/caching
"""

from __future__ import annotations

import threading
import time
from collections.abc import Callable
from typing import Any, Final

from cachetools import TTLCache

from skillsnap_api.application.interfaces.cache_port import (
    CollectionKey,
    ListCachePort,
    ListLoader,
)
from skillsnap_api.domain.exceptions.portfolio import BackingStoreError
from skillsnap_api.infrastructure.logging.logger import get_json_logger
from skillsnap_api.infrastructure.observability.metrics import (
    get_list_cache_operations_total,
)

__all__ = ["LIST_CACHE_TTL_S", "ReadThroughListCache"]

#: Absolute expiration of a list entry (seconds).
LIST_CACHE_TTL_S: Final[float] = 300.0

logger = get_json_logger(__name__)


def _count(key: CollectionKey, operation: str, result: str) -> None:
    get_list_cache_operations_total().labels(
        collection=key.value, operation=operation, result=result
    ).inc()


class ReadThroughListCache(ListCachePort):
    """Process-wide list cache with absolute expiry and explicit invalidation."""

    def __init__(
        self,
        *,
        ttl: float = LIST_CACHE_TTL_S,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the cache.

        Args:
            ttl: Entry lifetime in seconds.
            timer: Monotonic clock returning seconds.
        """
        self._ttl = ttl
        # One slot per collection key.
        self._store: TTLCache[str, tuple[Any, ...]] = TTLCache(
            maxsize=len(CollectionKey), ttl=ttl, timer=timer
        )
        self._lock = threading.Lock()

    @property
    def ttl(self) -> float:
        """Entry lifetime in seconds."""
        return self._ttl

    def peek(self, key: CollectionKey) -> tuple[Any, ...] | None:
        """Return the live entry for ``key`` without loading, or ``None``.

        Inspection hook for diagnostics and tests. It never calls a loader and
        does not touch the hit or miss counters.
        """
        with self._lock:
            return self._store.get(key.cache_key)

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
        with self._lock:
            cached = self._store.get(key.cache_key)
        if cached is not None:
            logger.debug("list_cache.hit", extra={"cache_key": key.cache_key})
            _count(key, "get", "hit")
            return cached

        logger.info("list_cache.miss", extra={"cache_key": key.cache_key})
        try:
            loaded = await loader()
        except BackingStoreError:
            _count(key, "get", "error")
            raise
        except Exception as exc:
            _count(key, "get", "error")
            logger.warning(
                "list_cache.load_failed",
                extra={"cache_key": key.cache_key, "error": type(exc).__name__},
            )
            raise BackingStoreError(
                f"Failed to load {key.value}.", details={"collection": key.value}
            ) from exc

        snapshot = tuple(loaded)
        with self._lock:
            self._store[key.cache_key] = snapshot
        _count(key, "get", "miss")
        return snapshot

    def invalidate(self, key: CollectionKey) -> None:
        """Remove the entry for ``key`` if present (idempotent)."""
        with self._lock:
            removed = self._store.pop(key.cache_key, None) is not None
        _count(key, "invalidate", "ok")
        logger.info(
            "list_cache.invalidated",
            extra={"cache_key": key.cache_key, "removed": removed},
        )

    def clear(self) -> None:
        """Drop every entry."""
        with self._lock:
            self._store.clear()

# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""Prometheus metrics utilities (registry-aware, hot-reload safe).

Accessor functions return collectors bound to the **current**
``prometheus_client.REGISTRY``:

    - Safe under hot reload and tests that swap the default registry.
    - No duplicate-registration errors.
    - The module cache resets automatically when the active registry changes.

Example:
    get_list_cache_operations_total().labels(
        collection="projects", operation="get", result="hit"
    ).inc()
"""

from __future__ import annotations

import logging
import threading
from contextlib import suppress
from typing import Final

import prometheus_client as prom
from prometheus_client import Counter, Histogram

_log = logging.getLogger(__name__)

_BUCKETS: Final[tuple[float, ...]] = (
    0.005,
    0.010,
    0.025,
    0.050,
    0.100,
    0.250,
    0.500,
    1.000,
    2.500,
    5.000,
    10.000,
)

# Cache keyed by metric name within the currently-active registry.
_registry_id: int | None = None
_hist_cache: dict[str, Histogram] = {}
_counter_cache: dict[str, Counter] = {}
_lock = threading.RLock()


def _ensure_registry() -> None:
    """Reset caches if the active registry changed."""
    global _registry_id
    with _lock:
        rid = id(prom.REGISTRY)
        if _registry_id != rid:
            _hist_cache.clear()
            _counter_cache.clear()
            _registry_id = rid


def _lookup_existing[TCollector: (Counter, Histogram)](
    name: str, kind: type[TCollector]
) -> TCollector | None:
    """Return a previously-registered collector of ``kind`` from the active registry."""
    with _lock, suppress(Exception):
        mapping = getattr(prom.REGISTRY, "_names_to_collectors", None)
        if isinstance(mapping, dict):
            col = mapping.get(name)
            if isinstance(col, kind):
                return col
    return None


def _get_or_create_hist(
    name: str,
    help_text: str,
    *,
    buckets: tuple[float, ...] = _BUCKETS,
    labelnames: tuple[str, ...] = (),
) -> Histogram:
    """Get or create a registry-bound ``Histogram`` with stable identity.

    Args:
        name: Metric name (snake_case).
        help_text: Human-readable description.
        buckets: Histogram buckets in seconds.
        labelnames: Optional label names tuple.

    Returns:
        Histogram: Bound to ``prom.REGISTRY``.
    """
    _ensure_registry()
    with _lock:
        cached = _hist_cache.get(name)
        if cached is not None:
            return cached

        existing = _lookup_existing(name, Histogram)
        if existing is not None:
            _hist_cache[name] = existing
            return existing

        try:
            h = Histogram(name, help_text, labelnames, buckets=buckets, registry=prom.REGISTRY)
        except ValueError as exc:
            if "Duplicated timeseries" in str(exc):
                again = _lookup_existing(name, Histogram)
                if again is not None:
                    _hist_cache[name] = again
                    return again
            _log.exception("Failed to register Prometheus histogram %s", name)
            raise
        _hist_cache[name] = h
        return h


def _get_or_create_counter(
    name: str,
    help_text: str,
    *,
    labelnames: tuple[str, ...] = (),
) -> Counter:
    """Get or create a registry-bound ``Counter`` with stable identity.

    Args:
        name: Metric name including the ``_total`` suffix.
        help_text: Human-readable description.
        labelnames: Optional label names tuple.

    Returns:
        Counter: Bound to ``prom.REGISTRY``.
    """
    _ensure_registry()
    with _lock:
        cached = _counter_cache.get(name)
        if cached is not None:
            return cached

        existing = _lookup_existing(name, Counter)
        if existing is not None:
            _counter_cache[name] = existing
            return existing

        try:
            c = Counter(name, help_text, labelnames, registry=prom.REGISTRY)
        except ValueError as exc:
            if "Duplicated timeseries" in str(exc):
                again = _lookup_existing(name, Counter)
                if again is not None:
                    _counter_cache[name] = again
                    return again
            _log.exception("Failed to register Prometheus counter %s", name)
            raise
        _counter_cache[name] = c
        return c


# ---------------------------------------------------------------------------
# Accessors


def get_list_cache_operations_total() -> Counter:
    """Return the list-cache operations counter.

    Labels:
        collection: ``projects`` or ``skills``.
        operation: ``get`` or ``invalidate``.
        result: ``hit``, ``miss``, ``error`` or ``ok``.
    """
    return _get_or_create_counter(
        "skillsnap_list_cache_operations_total",
        "List cache operations by collection, operation and result.",
        labelnames=("collection", "operation", "result"),
    )


def get_http_requests_total() -> Counter:
    """Return the inbound HTTP request counter.

    Labels:
        method: Uppercased HTTP method.
        status: Response code as string.
    """
    return _get_or_create_counter(
        "skillsnap_http_requests_total",
        "Inbound HTTP requests by method and status.",
        labelnames=("method", "status"),
    )


def get_http_request_duration_seconds() -> Histogram:
    """Return the inbound HTTP request latency histogram (labels: method, status)."""
    return _get_or_create_hist(
        "skillsnap_http_request_duration_seconds",
        "Inbound HTTP request latency (seconds).",
        labelnames=("method", "status"),
    )


def get_readyz_db_latency_seconds() -> Histogram:
    """Return the DB readiness probe latency histogram."""
    return _get_or_create_hist(
        "skillsnap_readyz_db_latency_seconds",
        "Latency of the database readiness probe (seconds).",
    )

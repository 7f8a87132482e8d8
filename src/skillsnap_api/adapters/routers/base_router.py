# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""
Base Router (Adapters Layer)

Purpose:
    Provide a canonical APIRouter wrapper and shared utilities for SkillSnap HTTP endpoints:
      - Stable resource prefixes (e.g., "/api/projects").
      - Standard error response mapping using ErrorEnvelope.
      - Helpers to emit presenter results with headers (ETag, X-Request-ID, Location).

Layer:
    adapters/routers
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Any

from fastapi import APIRouter, Response, status

from skillsnap_api.adapters.presenters.base_presenter import BasePresenter, PresentResult
from skillsnap_api.adapters.schemas.http.envelopes import ErrorEnvelope
from skillsnap_api.infrastructure.logging.logger import get_json_logger

_LOGGER = get_json_logger(__name__)

# Tag type accepted by FastAPI for APIRouter.tags
TagType = str | Enum


class BaseRouter(APIRouter):
    """Canonical router wrapper for SkillSnap HTTP endpoints.

    This class centralizes:

        • Resource prefixes under ``/api`` (e.g. ``/api/skills``).
        • Default error responses using ErrorEnvelope.
        • Helpers to apply presenter headers and return envelope bodies.

    Args:
        resource: Plural resource segment (e.g., "projects").
        prefix: Optional explicit prefix (overrides ``/api/<resource>``).
        tags: Default tags applied to all routes mounted on this router.
        dependencies: Optional global dependencies for all routes.
        **kwargs: Additional APIRouter kwargs.
    """

    def __init__(
        self,
        *,
        resource: str,
        prefix: str | None = None,
        tags: Sequence[TagType] | None = None,
        dependencies: Sequence[Any] | None = None,
        **kwargs: Any,
    ) -> None:
        computed_prefix = prefix or f"/api/{resource}"
        super().__init__(
            prefix=computed_prefix,
            tags=list(tags) if tags is not None else None,
            dependencies=list(dependencies) if dependencies is not None else None,
            **kwargs,
        )
        self.resource = resource
        _LOGGER.debug(
            "router_initialized",
            extra={"prefix": computed_prefix, "tags": [str(t) for t in tags or []]},
        )

    # -------------------------------------------------------------------------
    # Response helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def send_success(response: Response, result: PresentResult[Any]) -> Any:
        """Apply presenter headers (and status override) to ``response`` and return the body."""
        BasePresenter.apply_headers(result, response)
        return result.body

    @staticmethod
    def no_content(trace_id: str | None = None) -> Response:
        """Return a bodiless 204 response echoing the request id."""
        headers = {"X-Request-ID": trace_id} if trace_id else None
        return Response(status_code=status.HTTP_204_NO_CONTENT, headers=headers)

    # -------------------------------------------------------------------------
    # OpenAPI Error Responses
    # -------------------------------------------------------------------------

    @staticmethod
    def std_error_responses() -> dict[int | str, dict[str, Any]]:
        """Return the canonical error response mapping for endpoints.

        Use in routes via:

            responses=BaseRouter.std_error_responses()

        Returns:
            Mapping from HTTP status code → OpenAPI response object with
            ErrorEnvelope as the model.
        """
        return {
            400: {"model": ErrorEnvelope, "description": "Bad request (validation or parameter)."},
            401: {"model": ErrorEnvelope, "description": "Unauthorized (missing/invalid auth)."},
            404: {"model": ErrorEnvelope, "description": "Not found."},
            422: {"model": ErrorEnvelope, "description": "Unprocessable content."},
            500: {"model": ErrorEnvelope, "description": "Internal server error."},
        }

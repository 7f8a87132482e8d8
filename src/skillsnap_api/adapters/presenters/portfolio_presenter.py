# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""Presenter: portfolio DTOs -> HTTP SuccessEnvelope.

Layer:
    adapters/presenters
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from skillsnap_api.adapters.presenters.base_presenter import BasePresenter, PresentResult
from skillsnap_api.adapters.schemas.http.envelopes import SuccessEnvelope
from skillsnap_api.adapters.schemas.http.portfolio import (
    PortfolioUserHTTP,
    ProjectHTTP,
    SkillHTTP,
)
from skillsnap_api.application.schemas.dto.base import BaseDTO

_HTTP_SCHEMAS: dict[str, type[Any]] = {
    "portfolio-users": PortfolioUserHTTP,
    "projects": ProjectHTTP,
    "skills": SkillHTTP,
}


class PortfolioPresenter(BasePresenter):
    """Render portfolio users, projects and skills for one resource path."""

    def __init__(self, resource: str) -> None:
        self._resource = resource
        self._schema = _HTTP_SCHEMAS[resource]

    def _to_http(self, dto: BaseDTO) -> Any:
        return self._schema.model_validate(dto.model_dump())

    def present_item(
        self, dto: BaseDTO, *, trace_id: str | None = None
    ) -> PresentResult[SuccessEnvelope[Any]]:
        return self.present_success(data=self._to_http(dto), trace_id=trace_id)

    def present_list(
        self, dtos: Sequence[BaseDTO], *, trace_id: str | None = None
    ) -> PresentResult[SuccessEnvelope[Any]]:
        return self.present_success(data=[self._to_http(d) for d in dtos], trace_id=trace_id)

    def present_created(
        self, dto: BaseDTO, *, trace_id: str | None = None
    ) -> PresentResult[SuccessEnvelope[Any]]:
        """201 with a ``Location`` header pointing at the new resource."""
        item = self._to_http(dto)
        return self.present_success(
            data=item,
            trace_id=trace_id,
            location=f"/api/{self._resource}/{item.id}",
            status_code=201,
        )

# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""Presenter: auth DTOs -> HTTP SuccessEnvelope."""

from __future__ import annotations

from typing import Any

from skillsnap_api.adapters.presenters.base_presenter import BasePresenter, PresentResult
from skillsnap_api.adapters.schemas.http.auth import (
    LoginResponse,
    MeResponse,
    RegisterResponse,
)
from skillsnap_api.adapters.schemas.http.envelopes import SuccessEnvelope
from skillsnap_api.application.schemas.dto.auth import (
    AccessTokenDTO,
    AccountDTO,
    RegisteredAccountDTO,
)


class AuthPresenter(BasePresenter):
    def present_registered(
        self, dto: RegisteredAccountDTO, *, trace_id: str | None = None
    ) -> PresentResult[SuccessEnvelope[Any]]:
        return self.present_success(
            data=RegisterResponse(message=dto.message, user_id=dto.user_id),
            trace_id=trace_id,
        )

    def present_token(
        self, dto: AccessTokenDTO, *, trace_id: str | None = None
    ) -> PresentResult[SuccessEnvelope[Any]]:
        """Render a login result; token responses are never cacheable."""
        result = self.present_success(
            data=LoginResponse(
                token=dto.token,
                email=dto.email,
                full_name=dto.full_name,
                user_id=dto.user_id,
            ),
            trace_id=trace_id,
        )
        headers = {k: v for k, v in result.headers.items() if k != "ETag"}
        headers["Cache-Control"] = "no-store"
        return PresentResult(body=result.body, headers=headers, status_code=result.status_code)

    def present_account(
        self, dto: AccountDTO, *, trace_id: str | None = None
    ) -> PresentResult[SuccessEnvelope[Any]]:
        return self.present_success(
            data=MeResponse(user_id=dto.user_id, email=dto.email, full_name=dto.full_name),
            trace_id=trace_id,
        )

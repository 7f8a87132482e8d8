# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""Auth Router: ``/api/auth``.

Registration and login are public; ``/me`` requires a bearer token whose
``sub`` claim names the account.
"""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import Depends, Request, Response

from skillsnap_api.adapters.controllers.auth_controller import AuthController
from skillsnap_api.adapters.presenters.auth_presenter import AuthPresenter
from skillsnap_api.adapters.routers.base_router import BaseRouter
from skillsnap_api.adapters.schemas.http.auth import (
    LoginRequest,
    LoginResponse,
    MeResponse,
    RegisterRequest,
    RegisterResponse,
)
from skillsnap_api.adapters.schemas.http.envelopes import SuccessEnvelope
from skillsnap_api.dependencies.auth import get_auth_controller
from skillsnap_api.infrastructure.auth.jwt_dependency import Principal, auth_required
from skillsnap_api.infrastructure.http.errors import trace_id_of

AUTH_DEP = auth_required()

router = BaseRouter(resource="auth", tags=["Auth"])
presenter = AuthPresenter()

Controller = Annotated[AuthController, Depends(get_auth_controller)]


@router.post(
    "/register",
    response_model=SuccessEnvelope[RegisterResponse],
    responses=BaseRouter.std_error_responses(),
    summary="Register an account",
)
async def register(
    request: Request, response: Response, body: RegisterRequest, controller: Controller
) -> Any:
    """Create an account.

    Failures respond 400 ``REGISTRATION_FAILED`` with every problem listed in
    ``details.errors`` (taken email, weak password, malformed email).
    """
    dto = await controller.register(body)
    return router.send_success(
        response, presenter.present_registered(dto, trace_id=trace_id_of(request))
    )


@router.post(
    "/login",
    response_model=SuccessEnvelope[LoginResponse],
    responses=BaseRouter.std_error_responses(),
    summary="Exchange credentials for an access token",
)
async def login(
    request: Request, response: Response, body: LoginRequest, controller: Controller
) -> Any:
    dto = await controller.login(body)
    return router.send_success(
        response, presenter.present_token(dto, trace_id=trace_id_of(request))
    )


@router.get(
    "/me",
    response_model=SuccessEnvelope[MeResponse],
    responses=BaseRouter.std_error_responses(),
    summary="Current account",
)
async def me(
    request: Request,
    response: Response,
    principal: Annotated[Principal, Depends(AUTH_DEP)],
    controller: Controller,
) -> Any:
    dto = await controller.me(principal.sub)
    return router.send_success(
        response, presenter.present_account(dto, trace_id=trace_id_of(request))
    )

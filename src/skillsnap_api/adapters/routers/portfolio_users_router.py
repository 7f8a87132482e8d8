# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""
Portfolio Users Router.

Summary:
    CRUD over portfolio users under ``/api/portfolio-users``. Listings embed
    each user's projects and skills and are read directly (not cached).

Layer:
    adapters/routers
"""
from __future__ import annotations

from typing import Annotated, Any

from fastapi import Depends, Path, Request, Response, status

from skillsnap_api.adapters.controllers.portfolio_controllers import PortfolioUsersController
from skillsnap_api.adapters.presenters.portfolio_presenter import PortfolioPresenter
from skillsnap_api.adapters.routers.base_router import BaseRouter
from skillsnap_api.adapters.schemas.http.envelopes import SuccessEnvelope
from skillsnap_api.adapters.schemas.http.portfolio import (
    PortfolioUserHTTP,
    PortfolioUserWriteRequest,
)
from skillsnap_api.dependencies.portfolio import get_portfolio_users_controller
from skillsnap_api.infrastructure.http.errors import trace_id_of

router = BaseRouter(resource="portfolio-users", tags=["Portfolio Users"])
presenter = PortfolioPresenter("portfolio-users")

Controller = Annotated[PortfolioUsersController, Depends(get_portfolio_users_controller)]
UserId = Annotated[int, Path(ge=1, description="Portfolio user identifier.")]


@router.get(
    "",
    response_model=SuccessEnvelope[list[PortfolioUserHTTP]],
    responses=BaseRouter.std_error_responses(),
    summary="List portfolio users with their projects and skills",
)
async def list_portfolio_users(
    request: Request, response: Response, controller: Controller
) -> Any:
    dtos = await controller.list()
    return router.send_success(
        response, presenter.present_list(dtos, trace_id=trace_id_of(request))
    )


@router.get(
    "/{user_id}",
    response_model=SuccessEnvelope[PortfolioUserHTTP],
    responses=BaseRouter.std_error_responses(),
    summary="Get one portfolio user",
)
async def get_portfolio_user(
    request: Request, response: Response, user_id: UserId, controller: Controller
) -> Any:
    dto = await controller.get(user_id)
    return router.send_success(
        response, presenter.present_item(dto, trace_id=trace_id_of(request))
    )


@router.post(
    "",
    response_model=SuccessEnvelope[PortfolioUserHTTP],
    status_code=status.HTTP_201_CREATED,
    responses=BaseRouter.std_error_responses(),
    summary="Create a portfolio user",
)
async def create_portfolio_user(
    request: Request,
    response: Response,
    body: PortfolioUserWriteRequest,
    controller: Controller,
) -> Any:
    """Create a portfolio user; responds 201 with a ``Location`` header."""
    dto = await controller.create(body)
    return router.send_success(
        response, presenter.present_created(dto, trace_id=trace_id_of(request))
    )


@router.put(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=BaseRouter.std_error_responses(),
    summary="Update a portfolio user",
)
async def update_portfolio_user(
    request: Request,
    user_id: UserId,
    body: PortfolioUserWriteRequest,
    controller: Controller,
) -> Response:
    """Replace name, bio and profile image.

    A body ``id`` that differs from the path id is rejected with
    ``ID_MISMATCH``. Cached project and skill listings embed owner data, so
    both are invalidated.
    """
    await controller.update(user_id, body)
    return router.no_content(trace_id_of(request))


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=BaseRouter.std_error_responses(),
    summary="Delete a portfolio user and everything they own",
)
async def delete_portfolio_user(
    request: Request, user_id: UserId, controller: Controller
) -> Response:
    await controller.delete(user_id)
    return router.no_content(trace_id_of(request))

# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""Skills Router: ``/api/skills`` (cached listing, authenticated writes)."""
from __future__ import annotations

from typing import Annotated, Any

from fastapi import Depends, Path, Request, Response, status

from skillsnap_api.adapters.controllers.portfolio_controllers import SkillsController
from skillsnap_api.adapters.presenters.portfolio_presenter import PortfolioPresenter
from skillsnap_api.adapters.routers.base_router import BaseRouter
from skillsnap_api.adapters.schemas.http.envelopes import SuccessEnvelope
from skillsnap_api.adapters.schemas.http.portfolio import SkillHTTP, SkillWriteRequest
from skillsnap_api.dependencies.portfolio import get_skills_controller
from skillsnap_api.infrastructure.auth.jwt_dependency import auth_required
from skillsnap_api.infrastructure.http.errors import trace_id_of

AUTH_DEP = auth_required()

router = BaseRouter(resource="skills", tags=["Skills"])
presenter = PortfolioPresenter("skills")

Controller = Annotated[SkillsController, Depends(get_skills_controller)]
SkillId = Annotated[int, Path(ge=1, description="Skill identifier.")]


@router.get(
    "",
    response_model=SuccessEnvelope[list[SkillHTTP]],
    responses=BaseRouter.std_error_responses(),
    summary="List skills (cached)",
)
async def list_skills(request: Request, response: Response, controller: Controller) -> Any:
    dtos = await controller.list()
    return router.send_success(
        response, presenter.present_list(dtos, trace_id=trace_id_of(request))
    )


@router.get(
    "/{skill_id}",
    response_model=SuccessEnvelope[SkillHTTP],
    responses=BaseRouter.std_error_responses(),
    summary="Get one skill",
)
async def get_skill(
    request: Request, response: Response, skill_id: SkillId, controller: Controller
) -> Any:
    dto = await controller.get(skill_id)
    return router.send_success(
        response, presenter.present_item(dto, trace_id=trace_id_of(request))
    )


@router.post(
    "",
    response_model=SuccessEnvelope[SkillHTTP],
    status_code=status.HTTP_201_CREATED,
    responses=BaseRouter.std_error_responses(),
    summary="Create a skill",
    dependencies=[Depends(AUTH_DEP)],
)
async def create_skill(
    request: Request, response: Response, body: SkillWriteRequest, controller: Controller
) -> Any:
    dto = await controller.create(body)
    return router.send_success(
        response, presenter.present_created(dto, trace_id=trace_id_of(request))
    )


@router.put(
    "/{skill_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=BaseRouter.std_error_responses(),
    summary="Update a skill",
    dependencies=[Depends(AUTH_DEP)],
)
async def update_skill(
    request: Request, skill_id: SkillId, body: SkillWriteRequest, controller: Controller
) -> Response:
    await controller.update(skill_id, body)
    return router.no_content(trace_id_of(request))


@router.delete(
    "/{skill_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=BaseRouter.std_error_responses(),
    summary="Delete a skill",
    dependencies=[Depends(AUTH_DEP)],
)
async def delete_skill(request: Request, skill_id: SkillId, controller: Controller) -> Response:
    await controller.delete(skill_id)
    return router.no_content(trace_id_of(request))

# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""
Projects Router.

Summary:
    ``/api/projects``. The collection listing is served through the
    process-wide read-through list cache; single reads go to the store.
    Writes require a bearer token and invalidate the cached listing once
    they have committed.

Layer:
    adapters/routers
"""
from __future__ import annotations

from typing import Annotated, Any

from fastapi import Depends, Path, Request, Response, status

from skillsnap_api.adapters.controllers.portfolio_controllers import ProjectsController
from skillsnap_api.adapters.presenters.portfolio_presenter import PortfolioPresenter
from skillsnap_api.adapters.routers.base_router import BaseRouter
from skillsnap_api.adapters.schemas.http.envelopes import SuccessEnvelope
from skillsnap_api.adapters.schemas.http.portfolio import ProjectHTTP, ProjectWriteRequest
from skillsnap_api.dependencies.portfolio import get_projects_controller
from skillsnap_api.infrastructure.auth.jwt_dependency import auth_required
from skillsnap_api.infrastructure.http.errors import trace_id_of

# Dependency instance (no per-call construction; avoids B008 in defaults).
AUTH_DEP = auth_required()

router = BaseRouter(resource="projects", tags=["Projects"])
presenter = PortfolioPresenter("projects")

Controller = Annotated[ProjectsController, Depends(get_projects_controller)]
ProjectId = Annotated[int, Path(ge=1, description="Project identifier.")]


@router.get(
    "",
    response_model=SuccessEnvelope[list[ProjectHTTP]],
    responses=BaseRouter.std_error_responses(),
    summary="List projects (cached)",
)
async def list_projects(request: Request, response: Response, controller: Controller) -> Any:
    """Return every project with its owner, served from the list cache when fresh."""
    dtos = await controller.list()
    return router.send_success(
        response, presenter.present_list(dtos, trace_id=trace_id_of(request))
    )


@router.get(
    "/{project_id}",
    response_model=SuccessEnvelope[ProjectHTTP],
    responses=BaseRouter.std_error_responses(),
    summary="Get one project",
)
async def get_project(
    request: Request, response: Response, project_id: ProjectId, controller: Controller
) -> Any:
    dto = await controller.get(project_id)
    return router.send_success(
        response, presenter.present_item(dto, trace_id=trace_id_of(request))
    )


@router.post(
    "",
    response_model=SuccessEnvelope[ProjectHTTP],
    status_code=status.HTTP_201_CREATED,
    responses=BaseRouter.std_error_responses(),
    summary="Create a project",
    dependencies=[Depends(AUTH_DEP)],
)
async def create_project(
    request: Request, response: Response, body: ProjectWriteRequest, controller: Controller
) -> Any:
    """Create a project for an existing portfolio user.

    Raises ``INVALID_PORTFOLIO_USER`` (400) when the owner does not exist.
    """
    dto = await controller.create(body)
    return router.send_success(
        response, presenter.present_created(dto, trace_id=trace_id_of(request))
    )


@router.put(
    "/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=BaseRouter.std_error_responses(),
    summary="Update a project",
    dependencies=[Depends(AUTH_DEP)],
)
async def update_project(
    request: Request, project_id: ProjectId, body: ProjectWriteRequest, controller: Controller
) -> Response:
    await controller.update(project_id, body)
    return router.no_content(trace_id_of(request))


@router.delete(
    "/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=BaseRouter.std_error_responses(),
    summary="Delete a project",
    dependencies=[Depends(AUTH_DEP)],
)
async def delete_project(request: Request, project_id: ProjectId, controller: Controller) -> Response:
    await controller.delete(project_id)
    return router.no_content(trace_id_of(request))

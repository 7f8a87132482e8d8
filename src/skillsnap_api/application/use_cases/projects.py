# src/skillsnap_api/application/use_cases/projects.py
# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""
Use Cases: Projects

Purpose:
    List (through the read-through cache), read, create, update and delete
    projects. Every successful write commits first, then invalidates the
    cached project list, then returns. A failed write never invalidates.

Layer: application/use_cases
"""

from __future__ import annotations

from skillsnap_api.application.interfaces.cache_port import CollectionKey, ListCachePort
from skillsnap_api.application.schemas.dto.portfolio import ProjectCommandDTO, ProjectDTO
from skillsnap_api.application.use_cases.portfolio_users import require_portfolio_user
from skillsnap_api.application.uow import UnitOfWork, read_in_uow, run_in_uow
from skillsnap_api.domain.entities.portfolio import Project
from skillsnap_api.domain.exceptions.portfolio import (
    IdMismatch,
    ProjectNotFound,
)
from skillsnap_api.domain.interfaces.repositories.portfolio_repositories import (
    ProjectRepository,
    ProjectRow,
)
from skillsnap_api.infrastructure.logging.logger import get_json_logger

logger = get_json_logger(__name__)


def _to_row(command: ProjectCommandDTO) -> ProjectRow:
    return ProjectRow(
        title=command.title,
        description=command.description,
        image_url=command.image_url,
        portfolio_user_id=command.portfolio_user_id,
    )


class ListProjects:
    """Return every project (with owner reference) via the list cache."""

    def __init__(self, uow: UnitOfWork, cache: ListCachePort) -> None:
        self._uow = uow
        self._cache = cache

    async def execute(self) -> list[ProjectDTO]:
        async def load(tx: UnitOfWork) -> list[Project]:
            repo: ProjectRepository = tx.get_repository(ProjectRepository)
            return list(await repo.list_all())

        projects = await self._cache.get_or_fetch(
            CollectionKey.PROJECTS,
            loader=lambda: read_in_uow(self._uow, load),
        )
        return [ProjectDTO.from_entity(p) for p in projects]


class GetProject:
    """Read one project directly from the store (never cached)."""

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    async def execute(self, project_id: int) -> ProjectDTO:
        async def load(tx: UnitOfWork) -> Project | None:
            repo: ProjectRepository = tx.get_repository(ProjectRepository)
            return await repo.get(project_id)

        project = await read_in_uow(self._uow, load)
        if project is None:
            raise ProjectNotFound(
                f"Project with ID {project_id} not found.", details={"id": project_id}
            )
        return ProjectDTO.from_entity(project)


class CreateProject:
    """Create a project for an existing portfolio user."""

    def __init__(self, uow: UnitOfWork, cache: ListCachePort) -> None:
        self._uow = uow
        self._cache = cache

    async def execute(self, command: ProjectCommandDTO) -> ProjectDTO:
        """Persist the project and invalidate the project list.

        Raises:
            InvalidPortfolioUser: If the owner does not exist.
            BackingStoreError: If the store fails; the cache is left untouched.
        """

        async def write(tx: UnitOfWork) -> Project:
            await require_portfolio_user(tx, command.portfolio_user_id)
            repo: ProjectRepository = tx.get_repository(ProjectRepository)
            return await repo.add(_to_row(command))

        project = await run_in_uow(self._uow, write)
        self._cache.invalidate(CollectionKey.PROJECTS)
        logger.info("project.created", extra={"project_id": project.id})
        return ProjectDTO.from_entity(project)


class UpdateProject:
    def __init__(self, uow: UnitOfWork, cache: ListCachePort) -> None:
        self._uow = uow
        self._cache = cache

    async def execute(self, project_id: int, command: ProjectCommandDTO) -> None:
        """Overwrite a project.

        Raises:
            IdMismatch: If the command carries a different id.
            ProjectNotFound: If no project has ``project_id``.
            InvalidPortfolioUser: If the new owner does not exist.
        """
        if command.id is not None and command.id != project_id:
            raise IdMismatch(
                "Project ID mismatch.", details={"path_id": project_id, "body_id": command.id}
            )

        async def write(tx: UnitOfWork) -> None:
            repo: ProjectRepository = tx.get_repository(ProjectRepository)
            if await repo.get(project_id) is None:
                raise ProjectNotFound(
                    f"Project with ID {project_id} not found.", details={"id": project_id}
                )
            await require_portfolio_user(tx, command.portfolio_user_id)
            await repo.update(project_id, _to_row(command))

        await run_in_uow(self._uow, write)
        self._cache.invalidate(CollectionKey.PROJECTS)
        logger.info("project.updated", extra={"project_id": project_id})


class DeleteProject:
    def __init__(self, uow: UnitOfWork, cache: ListCachePort) -> None:
        self._uow = uow
        self._cache = cache

    async def execute(self, project_id: int) -> None:
        async def write(tx: UnitOfWork) -> None:
            repo: ProjectRepository = tx.get_repository(ProjectRepository)
            if not await repo.delete(project_id):
                raise ProjectNotFound(
                    f"Project with ID {project_id} not found.", details={"id": project_id}
                )

        await run_in_uow(self._uow, write)
        self._cache.invalidate(CollectionKey.PROJECTS)
        logger.info("project.deleted", extra={"project_id": project_id})

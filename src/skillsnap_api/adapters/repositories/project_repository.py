# src/skillsnap_api/adapters/repositories/project_repository.py
# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""SQLAlchemy repository for projects (rows joined with their owner)."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from skillsnap_api.adapters.repositories.base_repository import BaseRepository
from skillsnap_api.adapters.repositories.mappers import owner_ref, project_entity
from skillsnap_api.domain.entities.portfolio import Project
from skillsnap_api.domain.interfaces.repositories.portfolio_repositories import (
    ProjectRepository as ProjectRepositoryProtocol,
)
from skillsnap_api.domain.interfaces.repositories.portfolio_repositories import ProjectRow
from skillsnap_api.infrastructure.database.models.portfolio import (
    PortfolioUserModel,
    ProjectModel,
)

_WITH_OWNER = (selectinload(ProjectModel.portfolio_user),)


class SqlAlchemyProjectRepository(BaseRepository[ProjectModel], ProjectRepositoryProtocol):
    entity_name = "project"

    async def _with_owner(self, model: ProjectModel) -> Project:
        owner = await self._session.get(PortfolioUserModel, model.portfolio_user_id)
        return project_entity(model, owner_ref(owner))

    async def list_all(self) -> Sequence[Project]:
        stmt = select(ProjectModel).options(*_WITH_OWNER).order_by(ProjectModel.id)
        with self.translate_errors("list"):
            models = await self.fetch_all(stmt)
        return [project_entity(m, owner_ref(m.portfolio_user)) for m in models]

    async def get(self, project_id: int) -> Project | None:
        with self.translate_errors("get"):
            model = await self._session.get(ProjectModel, project_id, options=_WITH_OWNER)
        if model is None:
            return None
        return project_entity(model, owner_ref(model.portfolio_user))

    async def add(self, row: ProjectRow) -> Project:
        model = ProjectModel(
            title=row.title,
            description=row.description,
            image_url=row.image_url,
            portfolio_user_id=row.portfolio_user_id,
        )
        with self.translate_errors("add"):
            self._session.add(model)
            await self._session.flush()
            return await self._with_owner(model)

    async def update(self, project_id: int, row: ProjectRow) -> Project | None:
        with self.translate_errors("update"):
            model = await self._session.get(ProjectModel, project_id)
            if model is None:
                return None
            model.title = row.title
            model.description = row.description
            model.image_url = row.image_url
            model.portfolio_user_id = row.portfolio_user_id
            await self._session.flush()
            return await self._with_owner(model)

    async def delete(self, project_id: int) -> bool:
        with self.translate_errors("delete"):
            model = await self._session.get(ProjectModel, project_id)
            if model is None:
                return False
            await self._session.delete(model)
            await self._session.flush()
        return True

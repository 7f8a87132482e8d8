# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""SQLAlchemy repository for skills."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from skillsnap_api.adapters.repositories.base_repository import BaseRepository
from skillsnap_api.adapters.repositories.mappers import owner_ref, skill_entity
from skillsnap_api.domain.entities.portfolio import Skill
from skillsnap_api.domain.interfaces.repositories.portfolio_repositories import (
    SkillRepository as SkillRepositoryProtocol,
)
from skillsnap_api.domain.interfaces.repositories.portfolio_repositories import SkillRow
from skillsnap_api.infrastructure.database.models.portfolio import PortfolioUserModel, SkillModel


class SqlAlchemySkillRepository(BaseRepository[SkillModel], SkillRepositoryProtocol):
    entity_name = "skill"

    async def list_all(self) -> Sequence[Skill]:
        stmt = (
            select(SkillModel)
            .options(selectinload(SkillModel.portfolio_user))
            .order_by(SkillModel.id)
        )
        with self.translate_errors("list"):
            models = await self.fetch_all(stmt)
        return [skill_entity(m, owner_ref(m.portfolio_user)) for m in models]

    async def get(self, skill_id: int) -> Skill | None:
        with self.translate_errors("get"):
            model = await self._session.get(
                SkillModel, skill_id, options=[selectinload(SkillModel.portfolio_user)]
            )
        return skill_entity(model, owner_ref(model.portfolio_user)) if model else None

    async def add(self, row: SkillRow) -> Skill:
        model = SkillModel(name=row.name, level=row.level, portfolio_user_id=row.portfolio_user_id)
        with self.translate_errors("add"):
            self._session.add(model)
            await self._session.flush()
            owner = await self._session.get(PortfolioUserModel, model.portfolio_user_id)
        return skill_entity(model, owner_ref(owner))

    async def update(self, skill_id: int, row: SkillRow) -> Skill | None:
        with self.translate_errors("update"):
            model = await self._session.get(SkillModel, skill_id)
            if model is None:
                return None
            model.name = row.name
            model.level = row.level
            model.portfolio_user_id = row.portfolio_user_id
            await self._session.flush()
            owner = await self._session.get(PortfolioUserModel, model.portfolio_user_id)
        return skill_entity(model, owner_ref(owner))

    async def delete(self, skill_id: int) -> bool:
        with self.translate_errors("delete"):
            model = await self._session.get(SkillModel, skill_id)
            if model is None:
                return False
            await self._session.delete(model)
            await self._session.flush()
        return True

# src/skillsnap_api/adapters/repositories/portfolio_user_repository.py
# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""SQLAlchemy repository for portfolio users.

Users are always loaded together with their projects and skills
(``selectinload``) since async sessions cannot lazy-load.
"""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from skillsnap_api.adapters.repositories.base_repository import BaseRepository
from skillsnap_api.adapters.repositories.mappers import portfolio_user_entity
from skillsnap_api.domain.entities.portfolio import PortfolioUser
from skillsnap_api.domain.interfaces.repositories.portfolio_repositories import (
    PortfolioUserRepository as PortfolioUserRepositoryProtocol,
)
from skillsnap_api.domain.interfaces.repositories.portfolio_repositories import (
    PortfolioUserRow,
)
from skillsnap_api.infrastructure.database.models.portfolio import PortfolioUserModel

_WITH_CHILDREN = (
    selectinload(PortfolioUserModel.projects),
    selectinload(PortfolioUserModel.skills),
)


class SqlAlchemyPortfolioUserRepository(
    BaseRepository[PortfolioUserModel], PortfolioUserRepositoryProtocol
):
    entity_name = "portfolio_user"

    async def _load(self, user_id: int) -> PortfolioUserModel | None:
        return await self._session.get(PortfolioUserModel, user_id, options=_WITH_CHILDREN)

    async def list_all(self) -> Sequence[PortfolioUser]:
        stmt = select(PortfolioUserModel).options(*_WITH_CHILDREN).order_by(PortfolioUserModel.id)
        with self.translate_errors("list"):
            models = await self.fetch_all(stmt)
        return [portfolio_user_entity(m) for m in models]

    async def get(self, user_id: int) -> PortfolioUser | None:
        with self.translate_errors("get"):
            model = await self._load(user_id)
        return portfolio_user_entity(model) if model is not None else None

    async def exists(self, user_id: int) -> bool:
        stmt = select(PortfolioUserModel.id).where(PortfolioUserModel.id == user_id)
        with self.translate_errors("exists"):
            res = await self._session.execute(stmt)
            return res.scalar_one_or_none() is not None

    async def add(self, row: PortfolioUserRow) -> PortfolioUser:
        model = PortfolioUserModel(
            name=row.name,
            bio=row.bio,
            profile_image_url=row.profile_image_url,
        )
        with self.translate_errors("add"):
            self._session.add(model)
            await self._session.flush()
        return portfolio_user_entity(model, with_children=False)

    async def update(self, user_id: int, row: PortfolioUserRow) -> PortfolioUser | None:
        with self.translate_errors("update"):
            model = await self._load(user_id)
            if model is None:
                return None
            model.name = row.name
            model.bio = row.bio
            model.profile_image_url = row.profile_image_url
            await self._session.flush()
        return portfolio_user_entity(model)

    async def delete(self, user_id: int) -> bool:
        with self.translate_errors("delete"):
            model = await self._load(user_id)
            if model is None:
                return False
            await self._session.delete(model)
            await self._session.flush()
        return True

# src/skillsnap_api/application/use_cases/skills.py
# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""
Use Cases: Skills

Purpose:
    Skill counterparts of the project use cases; writes invalidate the
    cached skill list after commit.

Layer: application/use_cases
"""

from __future__ import annotations

from skillsnap_api.application.interfaces.cache_port import CollectionKey, ListCachePort
from skillsnap_api.application.schemas.dto.portfolio import SkillCommandDTO, SkillDTO
from skillsnap_api.application.use_cases.portfolio_users import require_portfolio_user
from skillsnap_api.application.uow import UnitOfWork, read_in_uow, run_in_uow
from skillsnap_api.domain.entities.portfolio import Skill
from skillsnap_api.domain.exceptions.portfolio import (
    IdMismatch,
    SkillNotFound,
)
from skillsnap_api.domain.interfaces.repositories.portfolio_repositories import (
    SkillRepository,
    SkillRow,
)
from skillsnap_api.infrastructure.logging.logger import get_json_logger

logger = get_json_logger(__name__)


def _to_row(command: SkillCommandDTO) -> SkillRow:
    return SkillRow(
        name=command.name,
        level=command.level,
        portfolio_user_id=command.portfolio_user_id,
    )


class ListSkills:
    """Return every skill (with owner reference) via the list cache."""

    def __init__(self, uow: UnitOfWork, cache: ListCachePort) -> None:
        self._uow = uow
        self._cache = cache

    async def execute(self) -> list[SkillDTO]:
        async def load(tx: UnitOfWork) -> list[Skill]:
            repo: SkillRepository = tx.get_repository(SkillRepository)
            return list(await repo.list_all())

        skills = await self._cache.get_or_fetch(
            CollectionKey.SKILLS,
            loader=lambda: read_in_uow(self._uow, load),
        )
        return [SkillDTO.from_entity(s) for s in skills]


class GetSkill:
    """Read one skill directly from the store (never cached)."""

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    async def execute(self, skill_id: int) -> SkillDTO:
        async def load(tx: UnitOfWork) -> Skill | None:
            repo: SkillRepository = tx.get_repository(SkillRepository)
            return await repo.get(skill_id)

        skill = await read_in_uow(self._uow, load)
        if skill is None:
            raise SkillNotFound(
                f"Skill with ID {skill_id} not found.", details={"id": skill_id}
            )
        return SkillDTO.from_entity(skill)


class CreateSkill:
    """Create a skill for an existing portfolio user."""

    def __init__(self, uow: UnitOfWork, cache: ListCachePort) -> None:
        self._uow = uow
        self._cache = cache

    async def execute(self, command: SkillCommandDTO) -> SkillDTO:
        async def write(tx: UnitOfWork) -> Skill:
            await require_portfolio_user(tx, command.portfolio_user_id)
            repo: SkillRepository = tx.get_repository(SkillRepository)
            return await repo.add(_to_row(command))

        skill = await run_in_uow(self._uow, write)
        self._cache.invalidate(CollectionKey.SKILLS)
        logger.info("skill.created", extra={"skill_id": skill.id})
        return SkillDTO.from_entity(skill)


class UpdateSkill:
    def __init__(self, uow: UnitOfWork, cache: ListCachePort) -> None:
        self._uow = uow
        self._cache = cache

    async def execute(self, skill_id: int, command: SkillCommandDTO) -> None:
        if command.id is not None and command.id != skill_id:
            raise IdMismatch(
                "Skill ID mismatch.", details={"path_id": skill_id, "body_id": command.id}
            )

        async def write(tx: UnitOfWork) -> None:
            repo: SkillRepository = tx.get_repository(SkillRepository)
            if await repo.get(skill_id) is None:
                raise SkillNotFound(
                    f"Skill with ID {skill_id} not found.", details={"id": skill_id}
                )
            await require_portfolio_user(tx, command.portfolio_user_id)
            await repo.update(skill_id, _to_row(command))

        await run_in_uow(self._uow, write)
        self._cache.invalidate(CollectionKey.SKILLS)
        logger.info("skill.updated", extra={"skill_id": skill_id})


class DeleteSkill:
    def __init__(self, uow: UnitOfWork, cache: ListCachePort) -> None:
        self._uow = uow
        self._cache = cache

    async def execute(self, skill_id: int) -> None:
        async def write(tx: UnitOfWork) -> None:
            repo: SkillRepository = tx.get_repository(SkillRepository)
            if not await repo.delete(skill_id):
                raise SkillNotFound(
                    f"Skill with ID {skill_id} not found.", details={"id": skill_id}
                )

        await run_in_uow(self._uow, write)
        self._cache.invalidate(CollectionKey.SKILLS)
        logger.info("skill.deleted", extra={"skill_id": skill_id})

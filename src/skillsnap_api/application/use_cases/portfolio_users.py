# src/skillsnap_api/application/use_cases/portfolio_users.py
# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""
Use Cases: Portfolio Users

Purpose:
    CRUD over portfolio users. User listings are not cached; however the
    cached project and skill lists embed each item's owner, so updating or
    deleting a user invalidates both collections after commit.

Layer: application/use_cases
"""

from __future__ import annotations

from skillsnap_api.application.interfaces.cache_port import CollectionKey, ListCachePort
from skillsnap_api.application.schemas.dto.portfolio import (
    PortfolioUserCommandDTO,
    PortfolioUserDTO,
)
from skillsnap_api.application.uow import UnitOfWork, read_in_uow, run_in_uow
from skillsnap_api.domain.entities.portfolio import PortfolioUser
from skillsnap_api.domain.exceptions.portfolio import (
    IdMismatch,
    InvalidPortfolioUser,
    PortfolioUserNotFound,
)
from skillsnap_api.domain.interfaces.repositories.portfolio_repositories import (
    PortfolioUserRepository,
    PortfolioUserRow,
)
from skillsnap_api.infrastructure.logging.logger import get_json_logger

logger = get_json_logger(__name__)

#: Collections whose cached items embed owner data.
_OWNED_COLLECTIONS = (CollectionKey.PROJECTS, CollectionKey.SKILLS)


async def require_portfolio_user(tx: UnitOfWork, portfolio_user_id: int) -> None:
    """Raise :class:`InvalidPortfolioUser` unless the referenced owner exists."""
    users: PortfolioUserRepository = tx.get_repository(PortfolioUserRepository)
    if not await users.exists(portfolio_user_id):
        raise InvalidPortfolioUser(
            "Invalid PortfolioUserId. User does not exist.",
            details={"portfolio_user_id": portfolio_user_id},
        )


def _not_found(user_id: int) -> PortfolioUserNotFound:
    return PortfolioUserNotFound(
        f"Portfolio user with ID {user_id} not found.", details={"id": user_id}
    )


def _to_row(command: PortfolioUserCommandDTO) -> PortfolioUserRow:
    return PortfolioUserRow(
        name=command.name,
        bio=command.bio,
        profile_image_url=command.profile_image_url,
    )


class ListPortfolioUsers:
    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    async def execute(self) -> list[PortfolioUserDTO]:
        async def load(tx: UnitOfWork) -> list[PortfolioUser]:
            repo: PortfolioUserRepository = tx.get_repository(PortfolioUserRepository)
            return list(await repo.list_all())

        users = await read_in_uow(self._uow, load)
        return [PortfolioUserDTO.from_entity(u) for u in users]


class GetPortfolioUser:
    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    async def execute(self, user_id: int) -> PortfolioUserDTO:
        async def load(tx: UnitOfWork) -> PortfolioUser | None:
            repo: PortfolioUserRepository = tx.get_repository(PortfolioUserRepository)
            return await repo.get(user_id)

        user = await read_in_uow(self._uow, load)
        if user is None:
            raise _not_found(user_id)
        return PortfolioUserDTO.from_entity(user)


class CreatePortfolioUser:
    """Create a portfolio user. A new user owns nothing, so no list is stale."""

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    async def execute(self, command: PortfolioUserCommandDTO) -> PortfolioUserDTO:
        async def write(tx: UnitOfWork) -> PortfolioUser:
            repo: PortfolioUserRepository = tx.get_repository(PortfolioUserRepository)
            return await repo.add(_to_row(command))

        user = await run_in_uow(self._uow, write)
        logger.info("portfolio_user.created", extra={"portfolio_user_id": user.id})
        return PortfolioUserDTO.from_entity(user)


class UpdatePortfolioUser:
    def __init__(self, uow: UnitOfWork, cache: ListCachePort) -> None:
        self._uow = uow
        self._cache = cache

    async def execute(self, user_id: int, command: PortfolioUserCommandDTO) -> None:
        """Overwrite name, bio and profile image of a user.

        Raises:
            IdMismatch: If the command carries a different id.
            PortfolioUserNotFound: If no user has ``user_id``.
        """
        if command.id is not None and command.id != user_id:
            raise IdMismatch(
                "Portfolio user ID mismatch.",
                details={"path_id": user_id, "body_id": command.id},
            )

        async def write(tx: UnitOfWork) -> None:
            repo: PortfolioUserRepository = tx.get_repository(PortfolioUserRepository)
            if await repo.update(user_id, _to_row(command)) is None:
                raise _not_found(user_id)

        await run_in_uow(self._uow, write)
        for key in _OWNED_COLLECTIONS:
            self._cache.invalidate(key)
        logger.info("portfolio_user.updated", extra={"portfolio_user_id": user_id})


class DeletePortfolioUser:
    """Delete a user together with the projects and skills it owns."""

    def __init__(self, uow: UnitOfWork, cache: ListCachePort) -> None:
        self._uow = uow
        self._cache = cache

    async def execute(self, user_id: int) -> None:
        async def write(tx: UnitOfWork) -> None:
            repo: PortfolioUserRepository = tx.get_repository(PortfolioUserRepository)
            if not await repo.delete(user_id):
                raise _not_found(user_id)

        await run_in_uow(self._uow, write)
        for key in _OWNED_COLLECTIONS:
            self._cache.invalidate(key)
        logger.info("portfolio_user.deleted", extra={"portfolio_user_id": user_id})

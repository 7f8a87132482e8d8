# src/skillsnap_api/adapters/uow/sqlalchemy_uow.py
# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""SQLAlchemy-backed Unit of Work implementation.

Purpose:
    Provide a concrete implementation of the application-layer UnitOfWork
    protocol using SQLAlchemy's AsyncSession. This UoW coordinates one or
    more repository instances within a single transactional scope.

Layer:
    adapters/uow
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import TracebackType
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from skillsnap_api.adapters.repositories.account_repository import SqlAlchemyAccountRepository
from skillsnap_api.adapters.repositories.portfolio_user_repository import (
    SqlAlchemyPortfolioUserRepository,
)
from skillsnap_api.adapters.repositories.project_repository import SqlAlchemyProjectRepository
from skillsnap_api.adapters.repositories.skill_repository import SqlAlchemySkillRepository
from skillsnap_api.application.uow import UnitOfWork
from skillsnap_api.domain.exceptions.portfolio import BackingStoreError
from skillsnap_api.domain.interfaces.repositories.account_repository import AccountRepository
from skillsnap_api.domain.interfaces.repositories.portfolio_repositories import (
    PortfolioUserRepository,
    ProjectRepository,
    SkillRepository,
)

type RepoFactory = Callable[[AsyncSession], Any]


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy-based UnitOfWork implementation.

    Coordinates a single AsyncSession and a set of repositories within a
    transactional context. The instance is reusable: each ``async with``
    opens a fresh session. Intended to be used via:

        async with SqlAlchemyUnitOfWork(session_factory=...) as uow:
            repo = uow.get_repository(ProjectRepository)
            ...
            await uow.commit()
    """

    def __init__(
        self,
        *,
        session_factory: async_sessionmaker[AsyncSession],
        repo_factories: Mapping[type[Any], RepoFactory] | None = None,
    ) -> None:
        """Initialize the UnitOfWork.

        Args:
            session_factory:
                Factory for creating new AsyncSession instances.
            repo_factories:
                Optional mapping from repository type to a factory function
                taking an AsyncSession and returning a repository instance.
                Overrides the default protocol-to-SQLAlchemy wiring.
        """
        self._session_factory = session_factory
        self._session: AsyncSession | None = None

        default_factories: dict[type[Any], RepoFactory] = {
            PortfolioUserRepository: SqlAlchemyPortfolioUserRepository,
            ProjectRepository: SqlAlchemyProjectRepository,
            SkillRepository: SqlAlchemySkillRepository,
            AccountRepository: SqlAlchemyAccountRepository,
        }

        self._repo_factories: dict[type[Any], RepoFactory] = {
            **default_factories,
            **(dict(repo_factories) if repo_factories is not None else {}),
        }

        self._repos: dict[type[Any], Any] = {}
        self._committed = False
        self._rolled_back = False

    # ------------------------------------------------------------------
    # Async context manager
    # ------------------------------------------------------------------

    async def __aenter__(self) -> SqlAlchemyUnitOfWork:
        """Enter the UnitOfWork context and open a new AsyncSession.

        Raises:
            RuntimeError: If a session is already active (nested usage).
        """
        if self._session is not None:
            raise RuntimeError("UnitOfWork is already active; nested usage is not supported.")

        self._session = self._session_factory()
        self._committed = False
        self._rolled_back = False
        self._repos.clear()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool | None:
        """Exit the UnitOfWork context.

        Rolls back on error (or when nothing was committed), then closes the
        session and clears cached repositories. Exceptions propagate.
        """
        try:
            if not self._committed and not self._rolled_back:
                await self.rollback()
        finally:
            if self._session is not None:
                await self._session.close()
                self._session = None
            self._repos.clear()
        return None

    # ------------------------------------------------------------------
    # Transaction control
    # ------------------------------------------------------------------

    async def commit(self) -> None:
        """Commit the current transaction if active.

        No-op if the UnitOfWork was already committed or rolled back.

        Raises:
            RuntimeError: If called without an active session.
            BackingStoreError: If the database rejects the commit.
        """
        if self._session is None:
            raise RuntimeError("Cannot commit: UnitOfWork has no active session.")

        if self._committed or self._rolled_back:
            return

        try:
            await self._session.commit()
        except SQLAlchemyError as exc:
            await self.rollback()
            raise BackingStoreError(
                "Storage failure while committing.", details={"operation": "commit"}
            ) from exc
        self._committed = True

    async def rollback(self) -> None:
        """Roll back the current transaction if active.

        No-op if already rolled back or committed, or if no session exists.
        """
        if self._session is None:
            return

        if self._rolled_back or self._committed:
            return

        await self._session.rollback()
        self._rolled_back = True

    # ------------------------------------------------------------------
    # Repository resolution
    # ------------------------------------------------------------------

    def get_repository(self, repo_type: type[Any]) -> Any:
        """Return a repository instance for the given type.

        The instance is created via a configured factory on first request
        and cached for subsequent calls within the same UnitOfWork context.

        Raises:
            RuntimeError: If called outside of an active UnitOfWork context.
            KeyError: If no factory is registered for the given repo_type.
        """
        if self._session is None:
            raise RuntimeError(
                "get_repository() called outside of an active UnitOfWork scope. "
                "Use 'async with uow:' before requesting repositories.",
            )

        if repo_type in self._repos:
            return self._repos[repo_type]

        try:
            factory = self._repo_factories[repo_type]
        except KeyError as exc:
            raise KeyError(
                f"No repository factory registered for type {repo_type!r}.",
            ) from exc

        repo = factory(self._session)
        self._repos[repo_type] = repo
        return repo

# tests/unit/application/use_cases/conftest.py
"""In-memory fakes for the unit of work, repositories and list cache."""

from __future__ import annotations

import dataclasses
from collections.abc import Sequence
from types import TracebackType
from typing import Any

import pytest

from skillsnap_api.application.interfaces.cache_port import CollectionKey, ListLoader
from skillsnap_api.domain.entities.account import Account
from skillsnap_api.domain.entities.portfolio import PortfolioUser, Project
from skillsnap_api.domain.exceptions.portfolio import BackingStoreError
from skillsnap_api.domain.interfaces.repositories.account_repository import AccountRepository
from skillsnap_api.domain.interfaces.repositories.portfolio_repositories import (
    PortfolioUserRepository,
    PortfolioUserRow,
    ProjectRepository,
    ProjectRow,
)


class FakePortfolioUsers:
    def __init__(self) -> None:
        self.rows: dict[int, PortfolioUser] = {}

    async def list_all(self) -> Sequence[PortfolioUser]:
        return list(self.rows.values())

    async def get(self, user_id: int) -> PortfolioUser | None:
        return self.rows.get(user_id)

    async def exists(self, user_id: int) -> bool:
        return user_id in self.rows

    async def add(self, row: PortfolioUserRow) -> PortfolioUser:
        user = PortfolioUser(id=len(self.rows) + 1, **dataclasses.asdict(row))
        self.rows[user.id] = user
        return user

    async def update(self, user_id: int, row: PortfolioUserRow) -> PortfolioUser | None:
        if user_id not in self.rows:
            return None
        self.rows[user_id] = PortfolioUser(id=user_id, **dataclasses.asdict(row))
        return self.rows[user_id]

    async def delete(self, user_id: int) -> bool:
        return self.rows.pop(user_id, None) is not None


class FakeProjects:
    def __init__(self, users: FakePortfolioUsers) -> None:
        self.rows: dict[int, Project] = {}
        self._users = users
        self.fail_writes = False
        self._next_id = 1

    def _entity(self, project_id: int, row: ProjectRow) -> Project:
        owner = self._users.rows[row.portfolio_user_id].as_owner()
        return Project(id=project_id, portfolio_user=owner, **dataclasses.asdict(row))

    async def list_all(self) -> Sequence[Project]:
        return list(self.rows.values())

    async def get(self, project_id: int) -> Project | None:
        return self.rows.get(project_id)

    async def add(self, row: ProjectRow) -> Project:
        if self.fail_writes:
            raise BackingStoreError("insert failed")
        project = self._entity(self._next_id, row)
        self._next_id += 1
        self.rows[project.id] = project
        return project

    async def update(self, project_id: int, row: ProjectRow) -> Project | None:
        if self.fail_writes:
            raise BackingStoreError("update failed")
        if project_id not in self.rows:
            return None
        self.rows[project_id] = self._entity(project_id, row)
        return self.rows[project_id]

    async def delete(self, project_id: int) -> bool:
        if self.fail_writes:
            raise BackingStoreError("delete failed")
        return self.rows.pop(project_id, None) is not None


class FakeAccounts:
    def __init__(self) -> None:
        self.rows: dict[str, Account] = {}

    async def get_by_email(self, email: str) -> Account | None:
        return next((a for a in self.rows.values() if a.email == email), None)

    async def get_by_id(self, account_id: str) -> Account | None:
        return self.rows.get(account_id)

    async def add(self, account: Account) -> Account:
        self.rows[account.id] = account
        return account


class FakeUoW:
    """Records commits and rollbacks; repositories persist across scopes."""

    def __init__(self) -> None:
        self.users = FakePortfolioUsers()
        self.projects = FakeProjects(self.users)
        self.accounts = FakeAccounts()
        self.commits = 0
        self.rollbacks = 0
        self.fail_commit = False

    async def __aenter__(self) -> FakeUoW:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        return None

    async def commit(self) -> None:
        if self.fail_commit:
            raise BackingStoreError("commit failed")
        self.commits += 1

    async def rollback(self) -> None:
        self.rollbacks += 1

    def get_repository(self, repo_type: type[Any]) -> Any:
        return {
            PortfolioUserRepository: self.users,
            ProjectRepository: self.projects,
            AccountRepository: self.accounts,
        }[repo_type]


class SpyCache:
    """List cache double recording invalidations; always loads through."""

    def __init__(self) -> None:
        self.invalidated: list[CollectionKey] = []
        self.loads: list[CollectionKey] = []

    async def get_or_fetch(self, key: CollectionKey, *, loader: ListLoader) -> tuple[Any, ...]:
        self.loads.append(key)
        return tuple(await loader())

    def invalidate(self, key: CollectionKey) -> None:
        self.invalidated.append(key)


@pytest.fixture
def uow() -> FakeUoW:
    return FakeUoW()


@pytest.fixture
def cache() -> SpyCache:
    return SpyCache()

# src/skillsnap_api/adapters/controllers/portfolio_controllers.py
# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""
Portfolio Controllers.

Summary:
    Thin adapters translating HTTP request bodies into application commands
    and delegating to the portfolio-user, project and skill use cases.

Layer:
    adapters/controllers
"""
from __future__ import annotations

from skillsnap_api.adapters.schemas.http.portfolio import (
    PortfolioUserWriteRequest,
    ProjectWriteRequest,
    SkillWriteRequest,
)
from skillsnap_api.application.interfaces.cache_port import ListCachePort
from skillsnap_api.application.schemas.dto.portfolio import (
    PortfolioUserCommandDTO,
    PortfolioUserDTO,
    ProjectCommandDTO,
    ProjectDTO,
    SkillCommandDTO,
    SkillDTO,
)
from skillsnap_api.application.uow import UnitOfWork
from skillsnap_api.application.use_cases import portfolio_users, projects, skills

from .base import BaseController


class PortfolioUsersController(BaseController):
    """Controller orchestrating portfolio user CRUD."""

    __slots__ = ("_uow", "_cache")

    def __init__(self, uow: UnitOfWork, cache: ListCachePort) -> None:
        self._uow = uow
        self._cache = cache

    async def list(self) -> list[PortfolioUserDTO]:
        return await portfolio_users.ListPortfolioUsers(self._uow).execute()

    async def get(self, user_id: int) -> PortfolioUserDTO:
        return await portfolio_users.GetPortfolioUser(self._uow).execute(user_id)

    async def create(self, body: PortfolioUserWriteRequest) -> PortfolioUserDTO:
        command = PortfolioUserCommandDTO.model_validate(body.model_dump())
        return await portfolio_users.CreatePortfolioUser(self._uow).execute(command)

    async def update(self, user_id: int, body: PortfolioUserWriteRequest) -> None:
        command = PortfolioUserCommandDTO.model_validate(body.model_dump())
        await portfolio_users.UpdatePortfolioUser(self._uow, self._cache).execute(user_id, command)

    async def delete(self, user_id: int) -> None:
        await portfolio_users.DeletePortfolioUser(self._uow, self._cache).execute(user_id)


class ProjectsController(BaseController):
    """Controller orchestrating project reads (cached list) and writes."""

    __slots__ = ("_uow", "_cache")

    def __init__(self, uow: UnitOfWork, cache: ListCachePort) -> None:
        self._uow = uow
        self._cache = cache

    async def list(self) -> list[ProjectDTO]:
        return await projects.ListProjects(self._uow, self._cache).execute()

    async def get(self, project_id: int) -> ProjectDTO:
        return await projects.GetProject(self._uow).execute(project_id)

    async def create(self, body: ProjectWriteRequest) -> ProjectDTO:
        command = ProjectCommandDTO.model_validate(body.model_dump())
        return await projects.CreateProject(self._uow, self._cache).execute(command)

    async def update(self, project_id: int, body: ProjectWriteRequest) -> None:
        command = ProjectCommandDTO.model_validate(body.model_dump())
        await projects.UpdateProject(self._uow, self._cache).execute(project_id, command)

    async def delete(self, project_id: int) -> None:
        await projects.DeleteProject(self._uow, self._cache).execute(project_id)


class SkillsController(BaseController):
    __slots__ = ("_uow", "_cache")

    def __init__(self, uow: UnitOfWork, cache: ListCachePort) -> None:
        self._uow = uow
        self._cache = cache

    async def list(self) -> list[SkillDTO]:
        return await skills.ListSkills(self._uow, self._cache).execute()

    async def get(self, skill_id: int) -> SkillDTO:
        return await skills.GetSkill(self._uow).execute(skill_id)

    async def create(self, body: SkillWriteRequest) -> SkillDTO:
        command = SkillCommandDTO.model_validate(body.model_dump())
        return await skills.CreateSkill(self._uow, self._cache).execute(command)

    async def update(self, skill_id: int, body: SkillWriteRequest) -> None:
        command = SkillCommandDTO.model_validate(body.model_dump())
        await skills.UpdateSkill(self._uow, self._cache).execute(skill_id, command)

    async def delete(self, skill_id: int) -> None:
        await skills.DeleteSkill(self._uow, self._cache).execute(skill_id)

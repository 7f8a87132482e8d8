# src/skillsnap_api/dependencies/portfolio.py
# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""Dependency wiring for portfolio users, projects and skills.

Overview:
    Provides FastAPI dependency providers for the unit of work, the
    process-wide list cache and the portfolio controllers consumed by the
    portfolio routers.

Layer:
    dependencies

Design:
    * The unit of work is built per request over the shared sessionmaker.
    * The list cache is created once by the application factory and read
      from ``app.state``; it is never module-global state.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from skillsnap_api.adapters.controllers.portfolio_controllers import (
    PortfolioUsersController,
    ProjectsController,
    SkillsController,
)
from skillsnap_api.adapters.uow.sqlalchemy_uow import SqlAlchemyUnitOfWork
from skillsnap_api.application.interfaces.cache_port import ListCachePort
from skillsnap_api.application.uow import UnitOfWork
from skillsnap_api.infrastructure.database.session import get_sessionmaker


def get_uow() -> UnitOfWork:
    """Return a SQLAlchemy unit of work bound to the application sessionmaker."""
    return SqlAlchemyUnitOfWork(session_factory=get_sessionmaker())


def get_list_cache(request: Request) -> ListCachePort:
    """Return the list cache owned by the running application.

    Raises:
        RuntimeError: If the application was built without a list cache.
    """
    cache: ListCachePort | None = getattr(request.app.state, "list_cache", None)
    if cache is None:
        raise RuntimeError("list cache not initialized (build the app with create_app)")
    return cache


def get_portfolio_users_controller(
    uow: Annotated[UnitOfWork, Depends(get_uow)],
    cache: Annotated[ListCachePort, Depends(get_list_cache)],
) -> PortfolioUsersController:
    return PortfolioUsersController(uow, cache)


def get_projects_controller(
    uow: Annotated[UnitOfWork, Depends(get_uow)],
    cache: Annotated[ListCachePort, Depends(get_list_cache)],
) -> ProjectsController:
    return ProjectsController(uow, cache)


def get_skills_controller(
    uow: Annotated[UnitOfWork, Depends(get_uow)],
    cache: Annotated[ListCachePort, Depends(get_list_cache)],
) -> SkillsController:
    return SkillsController(uow, cache)

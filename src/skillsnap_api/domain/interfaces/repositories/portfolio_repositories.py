# src/skillsnap_api/domain/interfaces/repositories/portfolio_repositories.py
# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""Domain-facing interfaces for portfolio repositories.

This module defines:

* PortfolioUserRow, ProjectRow, SkillRow: write-side representations used by
  create/update use cases (no id, no nested collections).
* PortfolioUserRepository, ProjectRepository, SkillRepository: protocols
  describing the capabilities required from the persistence gateway.

Notes:
    * This interface is persistence-agnostic; the SQLAlchemy adapters in
      ``adapters/repositories`` satisfy these protocols.
    * Implementations translate driver failures into
      :class:`~skillsnap_api.domain.exceptions.portfolio.BackingStoreError`.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from skillsnap_api.domain.entities.portfolio import PortfolioUser, Project, Skill


@dataclass(frozen=True)
class PortfolioUserRow:
    """Write-side representation of a portfolio user."""

    name: str
    bio: str = ""
    profile_image_url: str = ""


@dataclass(frozen=True)
class ProjectRow:
    """Write-side representation of a project."""

    title: str
    portfolio_user_id: int
    description: str = ""
    image_url: str = ""


@dataclass(frozen=True)
class SkillRow:
    """Write-side representation of a skill."""

    name: str
    portfolio_user_id: int
    level: str = ""


class PortfolioUserRepository(Protocol):
    """Domain-level contract for portfolio user persistence."""

    async def list_all(self) -> Sequence[PortfolioUser]:
        """Return every user with their projects and skills, ordered by id."""
        raise NotImplementedError

    async def get(self, user_id: int) -> PortfolioUser | None:
        """Return one user with projects and skills, or ``None``."""
        raise NotImplementedError

    async def exists(self, user_id: int) -> bool:
        """Return whether a user with ``user_id`` exists."""
        raise NotImplementedError

    async def add(self, row: PortfolioUserRow) -> PortfolioUser:
        """Insert a user and return it with its assigned id."""
        raise NotImplementedError

    async def update(self, user_id: int, row: PortfolioUserRow) -> PortfolioUser | None:
        """Overwrite a user's scalar fields; ``None`` when absent."""
        raise NotImplementedError

    async def delete(self, user_id: int) -> bool:
        """Delete a user together with its projects and skills.

        Returns:
            ``True`` if a row was deleted, ``False`` if none existed.
        """
        raise NotImplementedError


class ProjectRepository(Protocol):
    """Domain-level contract for project persistence."""

    async def list_all(self) -> Sequence[Project]:
        """Return every project with its owner reference, ordered by id."""
        raise NotImplementedError

    async def get(self, project_id: int) -> Project | None:
        """Return one project with its owner reference, or ``None``."""
        raise NotImplementedError

    async def add(self, row: ProjectRow) -> Project:
        """Insert a project and return it with its assigned id."""
        raise NotImplementedError

    async def update(self, project_id: int, row: ProjectRow) -> Project | None:
        """Overwrite a project; ``None`` when absent."""
        raise NotImplementedError

    async def delete(self, project_id: int) -> bool:
        """Delete a project; ``False`` when absent."""
        raise NotImplementedError


class SkillRepository(Protocol):
    """Domain-level contract for skill persistence."""

    async def list_all(self) -> Sequence[Skill]:
        """Return every skill with its owner reference, ordered by id."""
        raise NotImplementedError

    async def get(self, skill_id: int) -> Skill | None:
        """Return one skill with its owner reference, or ``None``."""
        raise NotImplementedError

    async def add(self, row: SkillRow) -> Skill:
        """Insert a skill and return it with its assigned id."""
        raise NotImplementedError

    async def update(self, skill_id: int, row: SkillRow) -> Skill | None:
        """Overwrite a skill; ``None`` when absent."""
        raise NotImplementedError

    async def delete(self, skill_id: int) -> bool:
        """Delete a skill; ``False`` when absent."""
        raise NotImplementedError

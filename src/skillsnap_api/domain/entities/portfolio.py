# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""Portfolio Entities (Domain Layer).

Purpose:
    Immutable representations of portfolio users and the projects and skills
    they own. Collections are tuples so a captured list snapshot can be shared
    across readers unchanged.

Layer:
    domain/entities

Notes:
    ``OwnerRef`` is the denormalized owner attached to a project or skill. It
    carries no nested projects or skills, so an owner never points back at the
    records that reference it.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from skillsnap_api.domain.entities.base import BaseEntity


@dataclass(frozen=True, slots=True)
class OwnerRef(BaseEntity):
    """Lightweight view of the portfolio user owning a project or skill."""

    id: int
    name: str
    bio: str = ""
    profile_image_url: str = ""


@dataclass(frozen=True, slots=True)
class Project(BaseEntity):
    """A showcased project.

    Attributes:
        id: Database identifier.
        title: Non-blank project title.
        description: Free-form description.
        image_url: Optional cover image URL.
        portfolio_user_id: Identifier of the owning portfolio user.
        portfolio_user: Owner reference, populated when loaded with the owner.
    """

    id: int
    title: str
    portfolio_user_id: int
    description: str = ""
    image_url: str = ""
    portfolio_user: OwnerRef | None = None

    def __post_init__(self) -> None:
        if not self.title or not self.title.strip():
            raise ValueError("Project.title must be non-empty.")


@dataclass(frozen=True, slots=True)
class Skill(BaseEntity):
    """A named skill with a free-form proficiency level."""

    id: int
    name: str
    portfolio_user_id: int
    level: str = ""
    portfolio_user: OwnerRef | None = None

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Skill.name must be non-empty.")


@dataclass(frozen=True, slots=True)
class PortfolioUser(BaseEntity):
    """A portfolio owner together with their projects and skills."""

    id: int
    name: str
    bio: str = ""
    profile_image_url: str = ""
    projects: tuple[Project, ...] = field(default_factory=tuple)
    skills: tuple[Skill, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("PortfolioUser.name must be non-empty.")

    def as_owner(self) -> OwnerRef:
        """Return the owner reference view of this user."""
        return OwnerRef(
            id=self.id,
            name=self.name,
            bio=self.bio,
            profile_image_url=self.profile_image_url,
        )

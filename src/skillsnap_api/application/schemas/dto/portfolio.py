# src/skillsnap_api/application/schemas/dto/portfolio.py
# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""Application DTOs for portfolio users, projects and skills.

Synopsis:
    Read DTOs returned by use cases and write commands accepted by them.
    Mapping from domain entities lives in the ``from_entity`` constructors.

Layer:
    application/schemas/dto
"""

from __future__ import annotations

from pydantic import Field

from skillsnap_api.application.schemas.dto.base import BaseDTO
from skillsnap_api.domain.entities.portfolio import OwnerRef, PortfolioUser, Project, Skill


class OwnerDTO(BaseDTO):
    """Owning portfolio user as embedded in project and skill listings."""

    id: int
    name: str
    bio: str = ""
    profile_image_url: str = ""

    @classmethod
    def from_entity(cls, owner: OwnerRef) -> OwnerDTO:
        return cls(
            id=owner.id,
            name=owner.name,
            bio=owner.bio,
            profile_image_url=owner.profile_image_url,
        )


class ProjectDTO(BaseDTO):
    id: int
    title: str
    description: str = ""
    image_url: str = ""
    portfolio_user_id: int
    portfolio_user: OwnerDTO | None = None

    @classmethod
    def from_entity(cls, project: Project) -> ProjectDTO:
        owner = project.portfolio_user
        return cls(
            id=project.id,
            title=project.title,
            description=project.description,
            image_url=project.image_url,
            portfolio_user_id=project.portfolio_user_id,
            portfolio_user=OwnerDTO.from_entity(owner) if owner is not None else None,
        )


class SkillDTO(BaseDTO):
    id: int
    name: str
    level: str = ""
    portfolio_user_id: int
    portfolio_user: OwnerDTO | None = None

    @classmethod
    def from_entity(cls, skill: Skill) -> SkillDTO:
        owner = skill.portfolio_user
        return cls(
            id=skill.id,
            name=skill.name,
            level=skill.level,
            portfolio_user_id=skill.portfolio_user_id,
            portfolio_user=OwnerDTO.from_entity(owner) if owner is not None else None,
        )


class PortfolioUserDTO(BaseDTO):
    """Portfolio user with nested projects and skills.

    Nested items carry ``portfolio_user=None``; the owner is the enclosing
    object.
    """

    id: int
    name: str
    bio: str = ""
    profile_image_url: str = ""
    projects: list[ProjectDTO] = Field(default_factory=list)
    skills: list[SkillDTO] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, user: PortfolioUser) -> PortfolioUserDTO:
        return cls(
            id=user.id,
            name=user.name,
            bio=user.bio,
            profile_image_url=user.profile_image_url,
            projects=[ProjectDTO.from_entity(p) for p in user.projects],
            skills=[SkillDTO.from_entity(s) for s in user.skills],
        )


# --------------------------------------------------------------------------- #
# Write commands                                                              #
# --------------------------------------------------------------------------- #


class PortfolioUserCommandDTO(BaseDTO):
    """Create/update command for a portfolio user.

    Attributes:
        id: Identifier echoed by update requests; must match the path id.
    """

    id: int | None = None
    name: str = Field(min_length=1, max_length=200)
    bio: str = Field(default="", max_length=4000)
    profile_image_url: str = Field(default="", max_length=2048)


class ProjectCommandDTO(BaseDTO):
    """Create/update command for a project."""

    id: int | None = None
    title: str = Field(min_length=1, max_length=200)
    description: str = Field(default="", max_length=4000)
    image_url: str = Field(default="", max_length=2048)
    portfolio_user_id: int


class SkillCommandDTO(BaseDTO):
    """Create/update command for a skill."""

    id: int | None = None
    name: str = Field(min_length=1, max_length=100)
    level: str = Field(default="", max_length=50)
    portfolio_user_id: int

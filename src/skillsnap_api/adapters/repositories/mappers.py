# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""ORM model -> domain entity mapping for portfolio repositories."""

from __future__ import annotations

from skillsnap_api.domain.entities.portfolio import OwnerRef, PortfolioUser, Project, Skill
from skillsnap_api.infrastructure.database.models.portfolio import (
    PortfolioUserModel,
    ProjectModel,
    SkillModel,
)


def owner_ref(model: PortfolioUserModel | None) -> OwnerRef | None:
    if model is None:
        return None
    return OwnerRef(
        id=model.id,
        name=model.name,
        bio=model.bio or "",
        profile_image_url=model.profile_image_url or "",
    )


def project_entity(model: ProjectModel, owner: OwnerRef | None = None) -> Project:
    return Project(
        id=model.id,
        title=model.title,
        description=model.description or "",
        image_url=model.image_url or "",
        portfolio_user_id=model.portfolio_user_id,
        portfolio_user=owner,
    )


def skill_entity(model: SkillModel, owner: OwnerRef | None = None) -> Skill:
    return Skill(
        id=model.id,
        name=model.name,
        level=model.level or "",
        portfolio_user_id=model.portfolio_user_id,
        portfolio_user=owner,
    )


def portfolio_user_entity(model: PortfolioUserModel, *, with_children: bool = True) -> PortfolioUser:
    """Map a user; nested projects and skills carry no owner reference.

    ``with_children`` must be false unless both collections were eagerly loaded.
    """
    projects: tuple[Project, ...] = ()
    skills: tuple[Skill, ...] = ()
    if with_children:
        projects = tuple(project_entity(p) for p in model.projects)
        skills = tuple(skill_entity(s) for s in model.skills)
    return PortfolioUser(
        id=model.id,
        name=model.name,
        bio=model.bio or "",
        profile_image_url=model.profile_image_url or "",
        projects=projects,
        skills=skills,
    )

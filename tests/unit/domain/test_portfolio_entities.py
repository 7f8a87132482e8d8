# tests/unit/domain/test_portfolio_entities.py
from __future__ import annotations

import dataclasses
from datetime import datetime

import pytest

from skillsnap_api.domain.entities.account import Account
from skillsnap_api.domain.entities.portfolio import PortfolioUser, Project, Skill


def test_project_title_must_not_be_blank() -> None:
    with pytest.raises(ValueError):
        Project(id=1, title="  ", portfolio_user_id=1)


def test_skill_name_must_not_be_blank() -> None:
    with pytest.raises(ValueError):
        Skill(id=1, name="", portfolio_user_id=1)


def test_entities_are_immutable() -> None:
    project = Project(id=1, title="X", portfolio_user_id=1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        project.title = "Y"  # type: ignore[misc]


def test_as_owner_drops_children() -> None:
    user = PortfolioUser(
        id=7,
        name="Ada",
        bio="bio",
        projects=(Project(id=1, title="X", portfolio_user_id=7),),
    )

    owner = user.as_owner()

    assert owner.id == 7
    assert owner.name == "Ada"
    assert owner.bio == "bio"
    assert not hasattr(owner, "projects")


def test_account_requires_timezone_aware_creation_time() -> None:
    with pytest.raises(ValueError):
        Account(
            id="a1",
            email="ada@example.com",
            full_name="Ada",
            password_hash="x",
            created_at=datetime(2026, 1, 1),
        )

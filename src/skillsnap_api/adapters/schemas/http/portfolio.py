# src/skillsnap_api/adapters/schemas/http/portfolio.py
# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""HTTP schemas for portfolio users, projects and skills.

Layer: adapters/schemas/http
"""

from __future__ import annotations

from pydantic import Field

from skillsnap_api.adapters.schemas.http.base import BaseHTTPSchema


class OwnerHTTP(BaseHTTPSchema):
    id: int
    name: str
    bio: str = ""
    profile_image_url: str = ""


class ProjectHTTP(BaseHTTPSchema):
    id: int
    title: str
    description: str = ""
    image_url: str = ""
    portfolio_user_id: int
    portfolio_user: OwnerHTTP | None = None


class SkillHTTP(BaseHTTPSchema):
    id: int
    name: str
    level: str = ""
    portfolio_user_id: int
    portfolio_user: OwnerHTTP | None = None


class PortfolioUserHTTP(BaseHTTPSchema):
    id: int
    name: str
    bio: str = ""
    profile_image_url: str = ""
    projects: list[ProjectHTTP] = Field(default_factory=list)
    skills: list[SkillHTTP] = Field(default_factory=list)


# --------------------------------------------------------------------------- #
# Request bodies                                                              #
# --------------------------------------------------------------------------- #


class PortfolioUserWriteRequest(BaseHTTPSchema):
    """Body of ``POST``/``PUT /api/portfolio-users``.

    ``id`` is optional on create and, when present on update, must equal the
    path id.
    """

    id: int | None = None
    name: str = Field(min_length=1, max_length=200, examples=["Ada Lovelace"])
    bio: str = Field(default="", max_length=4000)
    profile_image_url: str = Field(default="", max_length=2048)


class ProjectWriteRequest(BaseHTTPSchema):
    id: int | None = None
    title: str = Field(min_length=1, max_length=200, examples=["Analytical Engine notes"])
    description: str = Field(default="", max_length=4000)
    image_url: str = Field(default="", max_length=2048)
    portfolio_user_id: int = Field(ge=1)


class SkillWriteRequest(BaseHTTPSchema):
    id: int | None = None
    name: str = Field(min_length=1, max_length=100, examples=["Python"])
    level: str = Field(default="", max_length=50, examples=["Advanced"])
    portfolio_user_id: int = Field(ge=1)

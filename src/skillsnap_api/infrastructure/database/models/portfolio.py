# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""Portfolio ORM models: portfolio users, projects and skills.

Projects and skills belong to exactly one portfolio user. Deleting a user
deletes what it owns (ORM cascade plus ``ON DELETE CASCADE``).
"""

from __future__ import annotations

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from skillsnap_api.infrastructure.database.models.base import Base


class PortfolioUserModel(Base):
    __tablename__ = "portfolio_users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    bio: Mapped[str] = mapped_column(Text, nullable=False, default="")
    profile_image_url: Mapped[str] = mapped_column(String(2048), nullable=False, default="")

    projects: Mapped[list[ProjectModel]] = relationship(
        back_populates="portfolio_user",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="ProjectModel.id",
    )
    skills: Mapped[list[SkillModel]] = relationship(
        back_populates="portfolio_user",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="SkillModel.id",
    )


class ProjectModel(Base):
    __tablename__ = "projects"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    image_url: Mapped[str] = mapped_column(String(2048), nullable=False, default="")
    portfolio_user_id: Mapped[int] = mapped_column(
        ForeignKey("portfolio_users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    portfolio_user: Mapped[PortfolioUserModel] = relationship(back_populates="projects")


class SkillModel(Base):
    __tablename__ = "skills"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    level: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    portfolio_user_id: Mapped[int] = mapped_column(
        ForeignKey("portfolio_users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    portfolio_user: Mapped[PortfolioUserModel] = relationship(back_populates="skills")

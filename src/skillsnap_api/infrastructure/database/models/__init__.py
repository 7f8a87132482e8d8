# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""ORM models. Importing this package registers every table on ``Base.metadata``."""

from skillsnap_api.infrastructure.database.models.accounts import AccountModel
from skillsnap_api.infrastructure.database.models.base import Base, metadata
from skillsnap_api.infrastructure.database.models.portfolio import (
    PortfolioUserModel,
    ProjectModel,
    SkillModel,
)

__all__ = [
    "AccountModel",
    "Base",
    "PortfolioUserModel",
    "ProjectModel",
    "SkillModel",
    "metadata",
]

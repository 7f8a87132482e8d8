# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""Domain exception hierarchy."""

from .auth import AccountNotFound, InvalidCredentials, RegistrationFailed
from .base import DomainError
from .portfolio import (
    BackingStoreError,
    IdMismatch,
    InvalidPortfolioUser,
    PortfolioUserNotFound,
    ProjectNotFound,
    SkillNotFound,
)

__all__ = [
    "AccountNotFound",
    "BackingStoreError",
    "DomainError",
    "IdMismatch",
    "InvalidCredentials",
    "InvalidPortfolioUser",
    "PortfolioUserNotFound",
    "ProjectNotFound",
    "RegistrationFailed",
    "SkillNotFound",
]

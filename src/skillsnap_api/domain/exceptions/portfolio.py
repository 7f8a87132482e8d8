# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""
Portfolio Domain Exceptions

Purpose:
    Error conditions raised while reading or writing portfolio users, projects
    and skills. Mapped to HTTP by adapters.

Layer: domain/exceptions
"""
from __future__ import annotations

from .base import DomainError


class BackingStoreError(DomainError):
    """The persistence gateway failed (connection, timeout, driver error)."""

    code = "BACKING_STORE_ERROR"
    http_status = 500


class PortfolioUserNotFound(DomainError):
    """No portfolio user exists with the requested id."""

    code = "PORTFOLIO_USER_NOT_FOUND"
    http_status = 404


class ProjectNotFound(DomainError):
    """No project exists with the requested id."""

    code = "PROJECT_NOT_FOUND"
    http_status = 404


class SkillNotFound(DomainError):
    """No skill exists with the requested id."""

    code = "SKILL_NOT_FOUND"
    http_status = 404


class InvalidPortfolioUser(DomainError):
    """A project or skill references a portfolio user that does not exist."""

    code = "INVALID_PORTFOLIO_USER"
    http_status = 400


class IdMismatch(DomainError):
    """The identifier in the request body differs from the one in the path."""

    code = "ID_MISMATCH"
    http_status = 400

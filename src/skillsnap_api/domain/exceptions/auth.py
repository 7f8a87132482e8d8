# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""
Authentication Domain Exceptions

Layer: domain/exceptions
"""
from __future__ import annotations

from .base import DomainError


class RegistrationFailed(DomainError):
    """Registration was rejected; ``details['errors']`` lists every reason."""

    code = "REGISTRATION_FAILED"
    http_status = 400


class InvalidCredentials(DomainError):
    """Unknown email or wrong password (deliberately indistinguishable)."""

    code = "INVALID_CREDENTIALS"
    http_status = 401


class AccountNotFound(DomainError):
    """The authenticated subject no longer has an account."""

    code = "ACCOUNT_NOT_FOUND"
    http_status = 404

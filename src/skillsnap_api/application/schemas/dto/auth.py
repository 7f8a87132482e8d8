# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""Application DTOs for registration, login and the current account.

Layer:
    application/schemas/dto
"""

from __future__ import annotations

from pydantic import ConfigDict, Field

from skillsnap_api.application.schemas.dto.base import BaseDTO


class RegisterCommandDTO(BaseDTO):
    model_config = ConfigDict(extra="forbid", frozen=True, str_strip_whitespace=False)

    email: str = Field(min_length=3, max_length=256)
    # Complexity rules are applied by the use case so every violation is reported.
    password: str = Field(max_length=1024)
    full_name: str = Field(default="", max_length=200)


class LoginCommandDTO(BaseDTO):
    model_config = ConfigDict(extra="forbid", frozen=True, str_strip_whitespace=False)

    email: str = Field(max_length=256)
    password: str = Field(max_length=1024)


class RegisteredAccountDTO(BaseDTO):
    message: str
    user_id: str


class AccessTokenDTO(BaseDTO):
    """Successful login result."""

    token: str
    email: str
    full_name: str
    user_id: str


class AccountDTO(BaseDTO):
    user_id: str
    email: str
    full_name: str

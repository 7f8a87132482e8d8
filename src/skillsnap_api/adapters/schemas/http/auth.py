# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""HTTP schemas for registration, login and the current account."""

from __future__ import annotations

from pydantic import ConfigDict, Field

from skillsnap_api.adapters.schemas.http.base import BaseHTTPSchema

# Passwords are taken verbatim; whitespace is significant.
_VERBATIM = ConfigDict(extra="forbid", populate_by_name=True, str_strip_whitespace=False)


class RegisterRequest(BaseHTTPSchema):
    model_config = _VERBATIM

    email: str = Field(min_length=3, max_length=256, examples=["ada@example.com"])
    password: str = Field(max_length=1024)
    full_name: str = Field(default="", max_length=200, examples=["Ada Lovelace"])


class LoginRequest(BaseHTTPSchema):
    model_config = _VERBATIM

    email: str = Field(max_length=256)
    password: str = Field(max_length=1024)


class RegisterResponse(BaseHTTPSchema):
    message: str
    user_id: str


class LoginResponse(BaseHTTPSchema):
    token: str
    email: str
    full_name: str
    user_id: str


class MeResponse(BaseHTTPSchema):
    user_id: str
    email: str
    full_name: str

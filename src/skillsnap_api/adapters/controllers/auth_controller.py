# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""
Auth Controller.

Summary:
    Thin adapter coordinating registration, login and current-account lookup.

Layer:
    adapters/controllers
"""
from __future__ import annotations

from skillsnap_api.adapters.schemas.http.auth import LoginRequest, RegisterRequest
from skillsnap_api.application.interfaces.security import PasswordHasherPort, TokenIssuerPort
from skillsnap_api.application.schemas.dto.auth import (
    AccessTokenDTO,
    AccountDTO,
    LoginCommandDTO,
    RegisterCommandDTO,
    RegisteredAccountDTO,
)
from skillsnap_api.application.uow import UnitOfWork
from skillsnap_api.application.use_cases.auth import (
    GetCurrentAccount,
    LoginAccount,
    RegisterAccount,
)

from .base import BaseController


class AuthController(BaseController):
    """Controller orchestrating account registration and login."""

    __slots__ = ("_uow", "_hasher", "_issuer")

    def __init__(
        self,
        uow: UnitOfWork,
        hasher: PasswordHasherPort,
        issuer: TokenIssuerPort,
    ) -> None:
        """Initialize the controller.

        Args:
            uow: Unit of work for account persistence.
            hasher: Password hasher used for new and existing credentials.
            issuer: Access-token issuer used on successful login.
        """
        self._uow = uow
        self._hasher = hasher
        self._issuer = issuer

    async def register(self, body: RegisterRequest) -> RegisteredAccountDTO:
        command = RegisterCommandDTO.model_validate(body.model_dump())
        return await RegisterAccount(self._uow, self._hasher).execute(command)

    async def login(self, body: LoginRequest) -> AccessTokenDTO:
        command = LoginCommandDTO.model_validate(body.model_dump())
        return await LoginAccount(self._uow, self._hasher, self._issuer).execute(command)

    async def me(self, account_id: str) -> AccountDTO:
        return await GetCurrentAccount(self._uow).execute(account_id)

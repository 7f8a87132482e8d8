# src/skillsnap_api/application/use_cases/auth.py
# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""
Use Cases: Authentication

Purpose:
    Register accounts, exchange credentials for a signed access token and
    resolve the account behind an authenticated subject.

Layer: application/use_cases
"""

from __future__ import annotations

import asyncio
import uuid
from datetime import UTC, datetime

from skillsnap_api.application.interfaces.security import PasswordHasherPort, TokenIssuerPort
from skillsnap_api.application.schemas.dto.auth import (
    AccessTokenDTO,
    AccountDTO,
    LoginCommandDTO,
    RegisterCommandDTO,
    RegisteredAccountDTO,
)
from skillsnap_api.application.uow import UnitOfWork, read_in_uow, run_in_uow
from skillsnap_api.domain.entities.account import Account
from skillsnap_api.domain.exceptions.auth import (
    AccountNotFound,
    InvalidCredentials,
    RegistrationFailed,
)
from skillsnap_api.domain.interfaces.repositories.account_repository import AccountRepository
from skillsnap_api.domain.services.account_policy import (
    normalize_email,
    password_policy_violations,
)
from skillsnap_api.infrastructure.logging.logger import get_json_logger

logger = get_json_logger(__name__)

_INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"


class RegisterAccount:
    """Create an account after enforcing the password policy and email uniqueness."""

    def __init__(self, uow: UnitOfWork, hasher: PasswordHasherPort) -> None:
        self._uow = uow
        self._hasher = hasher

    async def execute(self, command: RegisterCommandDTO) -> RegisteredAccountDTO:
        """Register a new account.

        Raises:
            RegistrationFailed: With ``details['errors']`` listing every
                violated rule (malformed email, taken email, weak password).
        """
        email = normalize_email(command.email)
        errors: list[str] = []
        if "@" not in email:
            errors.append(f"Email '{command.email}' is invalid.")
        errors.extend(password_policy_violations(command.password))
        # PBKDF2 is CPU-bound; keep it off the event loop. Rejected input is never stored.
        password_hash = (
            "" if errors else await asyncio.to_thread(self._hasher.hash, command.password)
        )

        async def write(tx: UnitOfWork) -> Account:
            repo: AccountRepository = tx.get_repository(AccountRepository)
            if await repo.get_by_email(email) is not None:
                errors.insert(0, f"Email '{email}' is already taken.")
            if errors:
                raise RegistrationFailed("Registration failed.", details={"errors": errors})
            account = Account(
                id=str(uuid.uuid4()),
                email=email,
                full_name=command.full_name.strip(),
                password_hash=password_hash,
                created_at=datetime.now(tz=UTC),
            )
            return await repo.add(account)

        account = await run_in_uow(self._uow, write)
        logger.info("account.registered", extra={"account_id": account.id})
        return RegisteredAccountDTO(message="User registered successfully", user_id=account.id)


class LoginAccount:
    """Verify credentials and issue an access token."""

    def __init__(
        self,
        uow: UnitOfWork,
        hasher: PasswordHasherPort,
        issuer: TokenIssuerPort,
    ) -> None:
        self._uow = uow
        self._hasher = hasher
        self._issuer = issuer

    async def execute(self, command: LoginCommandDTO) -> AccessTokenDTO:
        """Authenticate and return a token.

        Raises:
            InvalidCredentials: For an unknown email or a wrong password alike.
        """
        email = normalize_email(command.email)

        async def load(tx: UnitOfWork) -> Account | None:
            repo: AccountRepository = tx.get_repository(AccountRepository)
            return await repo.get_by_email(email)

        account = await read_in_uow(self._uow, load)
        if account is None:
            await asyncio.to_thread(self._hasher.verify_dummy, command.password)
            valid = False
        else:
            valid = await asyncio.to_thread(
                self._hasher.verify, command.password, account.password_hash
            )
        if account is None or not valid:
            logger.info("account.login_failed")
            raise InvalidCredentials(_INVALID_CREDENTIALS_MESSAGE)

        token = self._issuer.issue(account)
        logger.info("account.login", extra={"account_id": account.id})
        return AccessTokenDTO(
            token=token,
            email=account.email,
            full_name=account.full_name,
            user_id=account.id,
        )


class GetCurrentAccount:
    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    async def execute(self, account_id: str) -> AccountDTO:
        async def load(tx: UnitOfWork) -> Account | None:
            repo: AccountRepository = tx.get_repository(AccountRepository)
            return await repo.get_by_id(account_id)

        account = await read_in_uow(self._uow, load)
        if account is None:
            raise AccountNotFound("User not found", details={"user_id": account_id})
        return AccountDTO(user_id=account.id, email=account.email, full_name=account.full_name)

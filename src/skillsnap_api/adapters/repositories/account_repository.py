# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""SQLAlchemy repository for accounts."""

from __future__ import annotations

from datetime import UTC

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from skillsnap_api.adapters.repositories.base_repository import BaseRepository
from skillsnap_api.domain.entities.account import Account
from skillsnap_api.domain.exceptions.auth import RegistrationFailed
from skillsnap_api.domain.interfaces.repositories.account_repository import (
    AccountRepository as AccountRepositoryProtocol,
)
from skillsnap_api.infrastructure.database.models.accounts import AccountModel


def _to_entity(model: AccountModel) -> Account:
    created_at = model.created_at
    # SQLite drops tzinfo on round-trip; stored values are UTC.
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=UTC)
    return Account(
        id=model.id,
        email=model.email,
        full_name=model.full_name,
        password_hash=model.password_hash,
        roles=tuple(model.roles or ()),
        created_at=created_at,
    )


class SqlAlchemyAccountRepository(BaseRepository[AccountModel], AccountRepositoryProtocol):
    entity_name = "account"

    async def get_by_email(self, email: str) -> Account | None:
        stmt = select(AccountModel).where(AccountModel.email == email)
        with self.translate_errors("get_by_email"):
            model = await self.fetch_optional(stmt)
        return _to_entity(model) if model is not None else None

    async def get_by_id(self, account_id: str) -> Account | None:
        with self.translate_errors("get_by_id"):
            model = await self._session.get(AccountModel, account_id)
        return _to_entity(model) if model is not None else None

    async def add(self, account: Account) -> Account:
        """Insert ``account``.

        Raises:
            RegistrationFailed: If the email was taken after the caller's
                uniqueness check (concurrent registration).
        """
        model = AccountModel(
            id=account.id,
            email=account.email,
            full_name=account.full_name,
            password_hash=account.password_hash,
            roles=list(account.roles),
            created_at=account.created_at,
        )
        with self.translate_errors("add"):
            self._session.add(model)
            try:
                await self._session.flush()
            except IntegrityError as exc:
                raise RegistrationFailed(
                    "Registration failed.",
                    details={"errors": [f"Email '{account.email}' is already taken."]},
                ) from exc
        return account

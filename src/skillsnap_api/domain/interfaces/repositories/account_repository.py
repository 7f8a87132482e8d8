# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""Domain-facing interface for account persistence."""

from __future__ import annotations

from typing import Protocol

from skillsnap_api.domain.entities.account import Account


class AccountRepository(Protocol):
    """Domain-level contract for account repositories."""

    async def get_by_email(self, email: str) -> Account | None:
        """Return the account registered under a normalized email, if any."""
        raise NotImplementedError

    async def get_by_id(self, account_id: str) -> Account | None:
        """Return the account with ``account_id``, if any."""
        raise NotImplementedError

    async def add(self, account: Account) -> Account:
        """Persist a new account."""
        raise NotImplementedError

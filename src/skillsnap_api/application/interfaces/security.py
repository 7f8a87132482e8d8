# src/skillsnap_api/application/interfaces/security.py
# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""Application Interfaces: password hashing and token issuance.

Layer:
    application/interfaces
"""

from __future__ import annotations

from typing import Protocol

from skillsnap_api.domain.entities.account import Account


class PasswordHasherPort(Protocol):
    """One-way password hashing with constant-time verification."""

    def hash(self, password: str) -> str:
        """Return an encoded hash (algorithm, parameters, salt and digest)."""
        raise NotImplementedError

    def verify(self, password: str, encoded: str) -> bool:
        """Return whether ``password`` matches ``encoded``; never raises on mismatch."""
        raise NotImplementedError

    def verify_dummy(self, password: str) -> None:
        """Do the work of :meth:`verify` when there is no stored hash."""
        raise NotImplementedError


class TokenIssuerPort(Protocol):
    """Issues signed bearer tokens for authenticated accounts."""

    def issue(self, account: Account) -> str:
        """Return a signed access token for ``account``."""
        raise NotImplementedError

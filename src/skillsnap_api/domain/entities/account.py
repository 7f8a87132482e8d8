# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""Account Entity (Domain Layer).

Purpose:
    Identity record used for registration and login. Accounts are distinct
    from portfolio users: an account authenticates, a portfolio user is what
    gets showcased.

Layer:
    domain/entities
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from skillsnap_api.domain.entities.base import BaseEntity


@dataclass(frozen=True, slots=True)
class Account(BaseEntity):
    """Registered identity.

    Attributes:
        id: Opaque account identifier (UUID4 string).
        email: Normalized (lower-cased, trimmed) email address.
        full_name: Display name stamped into issued tokens.
        password_hash: Encoded PBKDF2 hash; never the plaintext password.
        roles: Role names carried in the ``roles`` token claim.
        created_at: UTC creation timestamp.
    """

    id: str
    email: str
    full_name: str
    password_hash: str
    created_at: datetime
    roles: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Account.id must be non-empty.")
        if "@" not in self.email:
            raise ValueError("Account.email must be an email address.")
        if self.created_at.tzinfo is None:
            raise ValueError("Account.created_at must be timezone-aware (UTC).")

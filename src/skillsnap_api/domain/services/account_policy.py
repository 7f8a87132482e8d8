# src/skillsnap_api/domain/services/account_policy.py
# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""Account registration policy.

Purpose:
    Pure rules applied when an account is registered:
        * Email normalization (trimmed, lower-cased).
        * Password complexity: minimum length, at least one digit, one
          lowercase and one uppercase letter. Non-alphanumeric characters are
          not required.

Layer:
    domain

Notes:
    - This module is pure domain logic:
        * No logging.
        * No persistence or gateways.
    - Every failing rule is reported so a client can show them all at once.
"""

from __future__ import annotations

from typing import Final

MIN_PASSWORD_LENGTH: Final[int] = 6


def normalize_email(email: str) -> str:
    """Return the canonical form used for uniqueness checks and lookups."""
    return email.strip().lower()


def password_policy_violations(password: str) -> list[str]:
    """Return human-readable violations of the password policy.

    Args:
        password: Candidate plaintext password.

    Returns:
        An empty list when the password is acceptable, otherwise one message
        per failed rule, in a stable order.
    """
    errors: list[str] = []
    if len(password) < MIN_PASSWORD_LENGTH:
        errors.append(f"Passwords must be at least {MIN_PASSWORD_LENGTH} characters.")
    if not any(ch.isdigit() for ch in password):
        errors.append("Passwords must have at least one digit ('0'-'9').")
    if not any(ch.islower() for ch in password):
        errors.append("Passwords must have at least one lowercase ('a'-'z').")
    if not any(ch.isupper() for ch in password):
        errors.append("Passwords must have at least one uppercase ('A'-'Z').")
    return errors

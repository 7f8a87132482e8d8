# tests/unit/domain/test_account_policy.py
from __future__ import annotations

import pytest

from skillsnap_api.domain.services.account_policy import (
    MIN_PASSWORD_LENGTH,
    normalize_email,
    password_policy_violations,
)


def test_strong_password_has_no_violations() -> None:
    assert password_policy_violations("Passw0rd") == []


def test_minimum_length_is_six() -> None:
    assert MIN_PASSWORD_LENGTH == 6
    assert password_policy_violations("Pa0sw") == ["Passwords must be at least 6 characters."]
    assert password_policy_violations("Pa0swd") == []


@pytest.mark.parametrize(
    ("password", "expected"),
    [
        ("Password", "Passwords must have at least one digit ('0'-'9')."),
        ("PASSW0RD", "Passwords must have at least one lowercase ('a'-'z')."),
        ("passw0rd", "Passwords must have at least one uppercase ('A'-'Z')."),
    ],
)
def test_each_character_class_is_required(password: str, expected: str) -> None:
    assert password_policy_violations(password) == [expected]


def test_violations_are_reported_together_in_stable_order() -> None:
    assert password_policy_violations("abc") == [
        "Passwords must be at least 6 characters.",
        "Passwords must have at least one digit ('0'-'9').",
        "Passwords must have at least one uppercase ('A'-'Z').",
    ]


def test_normalize_email() -> None:
    assert normalize_email("  Ada@Example.COM ") == "ada@example.com"

# tests/unit/application/use_cases/test_auth_use_cases.py
from __future__ import annotations

from typing import Any

import pytest

from skillsnap_api.application.schemas.dto.auth import LoginCommandDTO, RegisterCommandDTO
from skillsnap_api.application.use_cases.auth import (
    GetCurrentAccount,
    LoginAccount,
    RegisterAccount,
)
from skillsnap_api.domain.entities.account import Account
from skillsnap_api.domain.exceptions.auth import (
    AccountNotFound,
    InvalidCredentials,
    RegistrationFailed,
)
from skillsnap_api.infrastructure.security.password_hasher import Pbkdf2PasswordHasher


class StaticIssuer:
    def __init__(self) -> None:
        self.issued_for: list[str] = []

    def issue(self, account: Account) -> str:
        self.issued_for.append(account.id)
        return f"token-for-{account.id}"


@pytest.fixture
def hasher() -> Pbkdf2PasswordHasher:
    return Pbkdf2PasswordHasher(iterations=1_000)


async def _register(uow: Any, hasher: Pbkdf2PasswordHasher, **overrides: str) -> str:
    values = {"email": "Ada@Example.com", "password": "Passw0rd", "full_name": "Ada Lovelace"}
    values.update(overrides)
    dto = await RegisterAccount(uow, hasher).execute(RegisterCommandDTO(**values))
    return dto.user_id


@pytest.mark.asyncio
async def test_register_stores_normalized_email_and_hash(uow: Any, hasher: Any) -> None:
    dto = await RegisterAccount(uow, hasher).execute(
        RegisterCommandDTO(email=" Ada@Example.com ", password="Passw0rd", full_name="Ada")
    )

    assert dto.message == "User registered successfully"
    stored = uow.accounts.rows[dto.user_id]
    assert stored.email == "ada@example.com"
    assert stored.password_hash != "Passw0rd"
    assert hasher.verify("Passw0rd", stored.password_hash)


@pytest.mark.asyncio
async def test_register_reports_every_violation(uow: Any, hasher: Any) -> None:
    await _register(uow, hasher)

    with pytest.raises(RegistrationFailed) as excinfo:
        await _register(uow, hasher, email="ADA@example.com", password="abc")

    errors = excinfo.value.details["errors"]
    assert errors[0] == "Email 'ada@example.com' is already taken."
    assert "Passwords must be at least 6 characters." in errors
    assert len(uow.accounts.rows) == 1


@pytest.mark.asyncio
async def test_register_rejects_malformed_email(uow: Any, hasher: Any) -> None:
    with pytest.raises(RegistrationFailed) as excinfo:
        await _register(uow, hasher, email="not-an-email")
    assert excinfo.value.details["errors"] == ["Email 'not-an-email' is invalid."]


@pytest.mark.asyncio
async def test_login_issues_token(uow: Any, hasher: Any) -> None:
    user_id = await _register(uow, hasher)
    issuer = StaticIssuer()

    dto = await LoginAccount(uow, hasher, issuer).execute(
        LoginCommandDTO(email="ADA@example.com", password="Passw0rd")
    )

    assert dto.token == f"token-for-{user_id}"
    assert dto.email == "ada@example.com"
    assert dto.full_name == "Ada Lovelace"
    assert dto.user_id == user_id


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("email", "password"),
    [("ada@example.com", "Wrong0ne"), ("nobody@example.com", "Passw0rd")],
)
async def test_login_failures_are_indistinguishable(
    uow: Any, hasher: Any, email: str, password: str
) -> None:
    await _register(uow, hasher)
    issuer = StaticIssuer()

    with pytest.raises(InvalidCredentials) as excinfo:
        await LoginAccount(uow, hasher, issuer).execute(
            LoginCommandDTO(email=email, password=password)
        )

    assert str(excinfo.value) == "Invalid email or password"
    assert issuer.issued_for == []


@pytest.mark.asyncio
async def test_current_account(uow: Any, hasher: Any) -> None:
    user_id = await _register(uow, hasher)

    dto = await GetCurrentAccount(uow).execute(user_id)
    assert dto.email == "ada@example.com"

    with pytest.raises(AccountNotFound, match="User not found"):
        await GetCurrentAccount(uow).execute("missing")

# src/skillsnap_api/dependencies/auth.py
# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""Dependency wiring for account registration and login."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import Depends

from skillsnap_api.adapters.controllers.auth_controller import AuthController
from skillsnap_api.application.interfaces.security import PasswordHasherPort, TokenIssuerPort
from skillsnap_api.application.uow import UnitOfWork
from skillsnap_api.config.features.auth import get_auth_settings
from skillsnap_api.dependencies.portfolio import get_uow
from skillsnap_api.infrastructure.auth.token_issuer import JwtTokenIssuer
from skillsnap_api.infrastructure.security.password_hasher import Pbkdf2PasswordHasher


def get_settings() -> Any:
    """Shim for tests to patch settings resolution in this module."""
    from skillsnap_api.config.settings import get_settings as core_get_settings

    return core_get_settings()


def get_password_hasher() -> PasswordHasherPort:
    """Return a PBKDF2 hasher using the configured iteration count for new hashes."""
    return Pbkdf2PasswordHasher(iterations=get_settings().password_hash_iterations)


def get_token_issuer() -> TokenIssuerPort:
    return JwtTokenIssuer(get_auth_settings())


def get_auth_controller(
    uow: Annotated[UnitOfWork, Depends(get_uow)],
    hasher: Annotated[PasswordHasherPort, Depends(get_password_hasher)],
    issuer: Annotated[TokenIssuerPort, Depends(get_token_issuer)],
) -> AuthController:
    return AuthController(uow, hasher, issuer)

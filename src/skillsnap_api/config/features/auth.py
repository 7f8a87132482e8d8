# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""
Auth Feature Settings (Adapters-facing view)

Summary:
    A minimal, typed projection of authentication-related toggles/secrets for
    adapters/infrastructure. Keeps infra decoupled from the full Settings surface.

Notes:
    • No logging/printing of secrets.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SecretStr

import skillsnap_api.config.settings as _settings_module

__all__ = ["AuthSettings", "get_auth_settings"]


class AuthSettings(BaseModel):
    """Narrow view of auth configuration used by adapters/infrastructure.

    Attributes:
        enabled:
            When true, protected routes must validate a bearer token.
        secret:
            Shared HS256 key used both to sign and to verify tokens.
        issuer:
            Optional ``iss`` claim; when set it is stamped and enforced.
        audience:
            Optional ``aud`` claim; when set it is stamped and enforced.
        expires_days:
            Lifetime of issued tokens.
    """

    model_config = ConfigDict(frozen=True)

    enabled: bool = Field(default=True)
    secret: SecretStr | None = Field(default=None)
    issuer: str | None = Field(default=None)
    audience: str | None = Field(default=None)
    expires_days: int = Field(default=7, ge=1)


def get_settings() -> Any:
    """Thin wrapper around the global settings accessor.

    Defined here so tests can reliably monkeypatch
    ``skillsnap_api.config.features.auth.get_settings`` and have
    `get_auth_settings()` respect it.
    """
    return _settings_module.get_settings()


def get_auth_settings() -> AuthSettings:
    """Return the current auth configuration.

    Returns:
        AuthSettings: Minimal auth configuration for adapters/infrastructure.
    """
    s = get_settings()
    return AuthSettings(
        enabled=s.auth_enabled,
        secret=s.jwt_secret,
        issuer=s.jwt_issuer,
        audience=s.jwt_audience,
        expires_days=s.jwt_expires_days,
    )

# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""JWT (HS256) access-token issuance with PyJWT.

Claims:
    sub    account id
    name   login name (the account email)
    email  account email
    jti    random token id
    roles  role names (possibly empty)
    iat    issued-at (UTC)
    exp    ``iat`` + configured lifetime
    iss / aud when configured
"""

from __future__ import annotations

import uuid
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt

from skillsnap_api.application.interfaces.security import TokenIssuerPort
from skillsnap_api.config.features.auth import AuthSettings
from skillsnap_api.domain.entities.account import Account


class JwtTokenIssuer(TokenIssuerPort):
    """Sign access tokens with the shared HS256 secret."""

    def __init__(
        self,
        cfg: AuthSettings,
        *,
        clock: Callable[[], datetime] = lambda: datetime.now(tz=UTC),
    ) -> None:
        if cfg.secret is None or not cfg.secret.get_secret_value():
            raise ValueError("JWT secret must be configured to issue tokens.")
        self._cfg = cfg
        self._secret = cfg.secret.get_secret_value()
        self._clock = clock

    def claims_for(self, account: Account) -> dict[str, Any]:
        now = self._clock()
        claims: dict[str, Any] = {
            "sub": account.id,
            "name": account.email,
            "email": account.email,
            "jti": str(uuid.uuid4()),
            "roles": list(account.roles),
            "iat": int(now.timestamp()),
            "exp": int((now + timedelta(days=self._cfg.expires_days)).timestamp()),
        }
        if self._cfg.issuer:
            claims["iss"] = self._cfg.issuer
        if self._cfg.audience:
            claims["aud"] = self._cfg.audience
        return claims

    def issue(self, account: Account) -> str:
        return jwt.encode(self.claims_for(account), self._secret, algorithm="HS256")

# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""JWT (HS256) Authentication Dependency.

Feature-flagged dependency that enforces bearer authentication when enabled.
Exact error messages are part of the API contract.

This module is framework-level and only concerns HTTP-adjacent auth plumbing.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from typing import Any

import jwt
from fastapi import HTTPException, Request
from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from skillsnap_api.config.features.auth import AuthSettings, get_auth_settings

_REQUIRED_CLAIMS = ["sub", "exp", "iat"]


class Principal(BaseModel):
    """Authenticated principal extracted from a verified JWT.

    Attributes:
        sub: Subject claim (account identifier).
        email: Email claim, if present.
        roles: Role names carried by the token.
        claims: Full claims mapping for downstream uses/auditing.
    """

    model_config = ConfigDict(frozen=True)

    sub: str = ""
    email: str = ""
    roles: tuple[str, ...] = ()
    claims: Mapping[str, Any] = Field(default_factory=dict)


def _extract_bearer_token(request: Request) -> str:
    """Extract a bearer token from the ``Authorization`` header.

    Raises:
        HTTPException: 401 "Missing bearer token" on an absent or malformed
            header, 401 "Missing token" when the bearer value is empty.
    """
    auth = (request.headers.get("Authorization") or "").strip()
    if not auth or not auth.lower().startswith("bearer"):
        raise HTTPException(status_code=401, detail="Missing bearer token")
    parts = auth.split(" ", 1)
    if parts[0].lower() != "bearer":
        raise HTTPException(status_code=401, detail="Missing bearer token")
    token = parts[1].strip() if len(parts) == 2 else ""
    if not token:
        raise HTTPException(status_code=401, detail="Missing token")
    return token


def decode_hs256(token: str, cfg: AuthSettings) -> Mapping[str, Any]:
    """Decode and validate a JWT signed with HS256 (zero clock skew).

    Issuer and audience are enforced only when configured.

    Raises:
        HTTPException: 500 if the secret is missing, 401 if the token is invalid.
    """
    if cfg.secret is None or not cfg.secret.get_secret_value():
        raise HTTPException(
            status_code=500,
            detail="Auth misconfigured (missing HS256 secret)",
        )

    kwargs: dict[str, Any] = {}
    if cfg.issuer:
        kwargs["issuer"] = cfg.issuer
    if cfg.audience:
        kwargs["audience"] = cfg.audience

    try:
        return jwt.decode(
            token,
            cfg.secret.get_secret_value(),
            algorithms=["HS256"],
            leeway=0,
            options={"require": _REQUIRED_CLAIMS, "verify_aud": bool(cfg.audience)},
            **kwargs,
        )
    except jwt.PyJWTError as exc:
        raise HTTPException(status_code=401, detail="Invalid token") from exc


def auth_required() -> Callable[..., Awaitable[Principal]]:
    """Create a dependency that enforces bearer authentication.

    Behavior is feature-flagged by ``AUTH_ENABLED``. When disabled, a synthetic
    dev principal is returned.
    """

    async def _dep(request: Request) -> Principal:
        cfg = get_auth_settings()

        if not cfg.enabled:
            return Principal(sub="dev-user", claims={})

        # Read the header from Request directly; no FastAPI header params means no 422.
        token = _extract_bearer_token(request)
        claims = decode_hs256(token, cfg)

        raw_roles = claims.get("roles", ())
        if isinstance(raw_roles, str):
            roles = (raw_roles,)
        elif isinstance(raw_roles, (list, tuple)):
            roles = tuple(str(r) for r in raw_roles)
        else:
            roles = ()

        return Principal(
            sub=str(claims.get("sub", "")),
            email=str(claims.get("email", "")),
            roles=roles,
            claims=claims,
        )

    return _dep

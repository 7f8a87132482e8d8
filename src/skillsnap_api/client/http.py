# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""Async HTTP client for the SkillSnap API.

Wraps an ``httpx.AsyncClient`` and unwraps the ``{"data": ...}`` success
envelope. Error envelopes and transport failures surface as
:class:`SkillSnapHTTPError`. After :meth:`SkillSnapHTTPClient.login` the
issued bearer token is attached to every later request.

Typical usage:
    async with SkillSnapHTTPClient("http://127.0.0.1:8000") as api:
        await api.login("ada@example.com", "Passw0rd")
        await api.create_project({"title": "X", "portfolio_user_id": 1})
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import TracebackType
from typing import Any, Self

import httpx

from skillsnap_api.client.session import UserSession
from skillsnap_api.infrastructure.logging.logger import get_json_logger

logger = get_json_logger(__name__)

DEFAULT_TIMEOUT_S = 10.0


@dataclass(eq=False)
class SkillSnapHTTPError(Exception):
    """Failed call to the SkillSnap API.

    Attributes:
        message: Server-provided or transport error message.
        status_code: HTTP status, or ``None`` when no response was received.
        error_code: Stable error code from the error envelope, if any.
        trace_id: Request id echoed by the server, if any.
    """

    message: str
    status_code: int | None = None
    error_code: str | None = None
    trace_id: str | None = None

    def __str__(self) -> str:
        prefix = f"{self.status_code} " if self.status_code is not None else ""
        code = f"[{self.error_code}] " if self.error_code else ""
        return f"{prefix}{code}{self.message}"


def _json_object(response: httpx.Response) -> dict[str, Any] | None:
    """Return the decoded body when it is a JSON object, else ``None``."""
    try:
        payload = response.json()
    except ValueError:
        return None
    return payload if isinstance(payload, dict) else None


class SkillSnapHTTPClient:
    """Typed facade over the SkillSnap HTTP API."""

    def __init__(
        self,
        base_url: str | None = None,
        *,
        client: httpx.AsyncClient | None = None,
        session: UserSession | None = None,
        timeout_s: float = DEFAULT_TIMEOUT_S,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: API root; defaults to ``API_BASE_URL`` from settings.
            client: Pre-built transport (tests, custom pools). Not closed by
                :meth:`aclose` when supplied.
            session: Session state updated on login/logout.
            timeout_s: Per-request timeout for the owned transport.
        """
        if base_url is None and client is None:
            from skillsnap_api.config.settings import get_settings

            base_url = get_settings().api_base_url
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(base_url=base_url or "", timeout=timeout_s)
        self.session = session or UserSession()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def _headers(self) -> dict[str, str]:
        token = self.session.token
        return {"Authorization": f"Bearer {token}"} if token else {}

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json: Mapping[str, Any] | None = None,
    ) -> Any:
        try:
            response = await self._client.request(method, path, json=json, headers=self._headers())
        except httpx.HTTPError as exc:
            logger.warning(
                "client.transport_error",
                extra={"method": method, "path": path, "error": str(exc)},
            )
            raise SkillSnapHTTPError(f"Cannot reach SkillSnap API: {exc}") from exc

        if response.is_error:
            raise self._error_from(response)
        if response.status_code == httpx.codes.NO_CONTENT or not response.content:
            return None
        payload = _json_object(response)
        if payload is None:
            raise SkillSnapHTTPError(
                "Malformed response from SkillSnap API",
                status_code=response.status_code,
                trace_id=response.headers.get("X-Request-ID"),
            )
        return payload.get("data")

    @staticmethod
    def _error_from(response: httpx.Response) -> SkillSnapHTTPError:
        trace_id = response.headers.get("X-Request-ID")
        error = (_json_object(response) or {}).get("error")
        if not isinstance(error, dict):
            error = {}
        return SkillSnapHTTPError(
            message=str(error.get("message") or response.reason_phrase or "Request failed"),
            status_code=response.status_code,
            error_code=error.get("code"),
            trace_id=error.get("trace_id") or trace_id,
        )

    # ------------------------------------------------------------------
    # Auth
    # ------------------------------------------------------------------

    async def register(self, email: str, password: str, full_name: str = "") -> dict[str, Any]:
        return await self._request(
            "POST",
            "/api/auth/register",
            json={"email": email, "password": password, "full_name": full_name},
        )

    async def login(self, email: str, password: str) -> dict[str, Any]:
        """Log in and remember the identity and bearer token on :attr:`session`."""
        data = await self._request(
            "POST", "/api/auth/login", json={"email": email, "password": password}
        )
        self.session.set_user(
            data["user_id"], data.get("full_name", ""), data["email"], token=data["token"]
        )
        logger.info("client.logged_in", extra={"user_id": data["user_id"]})
        return data

    def logout(self) -> None:
        self.session.clear_user()

    async def me(self) -> dict[str, Any]:
        return await self._request("GET", "/api/auth/me")

    # ------------------------------------------------------------------
    # Portfolio users
    # ------------------------------------------------------------------

    async def list_portfolio_users(self) -> list[dict[str, Any]]:
        return await self._request("GET", "/api/portfolio-users")

    async def get_portfolio_user(self, user_id: int) -> dict[str, Any]:
        return await self._request("GET", f"/api/portfolio-users/{user_id}")

    async def get_first_portfolio_user(self) -> dict[str, Any] | None:
        """Return the first portfolio user, or ``None`` when there are none."""
        users = await self.list_portfolio_users()
        return users[0] if users else None

    # ------------------------------------------------------------------
    # Projects
    # ------------------------------------------------------------------

    async def list_projects(self) -> list[dict[str, Any]]:
        return await self._request("GET", "/api/projects")

    async def get_project(self, project_id: int) -> dict[str, Any]:
        return await self._request("GET", f"/api/projects/{project_id}")

    async def create_project(self, project: Mapping[str, Any]) -> dict[str, Any]:
        return await self._request("POST", "/api/projects", json=project)

    async def update_project(self, project_id: int, project: Mapping[str, Any]) -> None:
        await self._request("PUT", f"/api/projects/{project_id}", json=project)

    async def delete_project(self, project_id: int) -> None:
        await self._request("DELETE", f"/api/projects/{project_id}")

    # ------------------------------------------------------------------
    # Skills
    # ------------------------------------------------------------------

    async def list_skills(self) -> list[dict[str, Any]]:
        return await self._request("GET", "/api/skills")

    async def get_skill(self, skill_id: int) -> dict[str, Any]:
        return await self._request("GET", f"/api/skills/{skill_id}")

    async def create_skill(self, skill: Mapping[str, Any]) -> dict[str, Any]:
        return await self._request("POST", "/api/skills", json=skill)

    async def update_skill(self, skill_id: int, skill: Mapping[str, Any]) -> None:
        await self._request("PUT", f"/api/skills/{skill_id}", json=skill)

    async def delete_skill(self, skill_id: int) -> None:
        await self._request("DELETE", f"/api/skills/{skill_id}")

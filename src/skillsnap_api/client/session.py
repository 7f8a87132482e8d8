# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""Client-side session state.

Holds who is signed in (and the bearer token issued at login) plus arbitrary
key/value session data. Every effective change notifies the registered
listeners, so UI or CLI layers can re-render.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from skillsnap_api.infrastructure.logging.logger import get_json_logger

logger = get_json_logger(__name__)

type Listener = Callable[[], None]


class UserSession:
    """Mutable per-process session for :class:`SkillSnapHTTPClient` callers."""

    def __init__(self) -> None:
        self._user_id: str | None = None
        self._user_name: str | None = None
        self._email: str | None = None
        self._token: str | None = None
        self._data: dict[str, Any] = {}
        self._listeners: list[Listener] = []

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener``; returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    @property
    def user_id(self) -> str | None:
        return self._user_id

    @user_id.setter
    def user_id(self, value: str | None) -> None:
        if value != self._user_id:
            self._user_id = value
            self._notify()

    @property
    def user_name(self) -> str | None:
        return self._user_name

    @user_name.setter
    def user_name(self, value: str | None) -> None:
        if value != self._user_name:
            self._user_name = value
            self._notify()

    @property
    def email(self) -> str | None:
        return self._email

    @email.setter
    def email(self, value: str | None) -> None:
        if value != self._email:
            self._email = value
            self._notify()

    @property
    def token(self) -> str | None:
        return self._token

    @property
    def is_authenticated(self) -> bool:
        """True iff a user id is set."""
        return bool(self._user_id)

    def set_user(
        self,
        user_id: str,
        user_name: str,
        email: str,
        *,
        token: str | None = None,
    ) -> None:
        """Replace the signed-in identity in one step (single notification)."""
        self._user_id = user_id
        self._user_name = user_name
        self._email = email
        self._token = token
        self._notify()
        logger.debug("session.user_set", extra={"user_id": user_id})

    def clear_user(self) -> None:
        """Forget the identity, the token and all session data."""
        self._user_id = None
        self._user_name = None
        self._email = None
        self._token = None
        self._data.clear()
        self._notify()

    # ------------------------------------------------------------------
    # Session data
    # ------------------------------------------------------------------

    def set_data(self, key: str, value: Any) -> None:
        self._data[key] = value
        self._notify()

    def get_data[T](self, key: str, expected: type[T], default: T | None = None) -> T | None:
        """Return the value under ``key`` when it is an instance of ``expected``."""
        value = self._data.get(key)
        if isinstance(value, expected):
            return value
        return default

    def remove_data(self, key: str) -> None:
        """Remove ``key``; listeners fire only when something was removed."""
        if key in self._data:
            del self._data[key]
            self._notify()

    def has_data(self, key: str) -> bool:
        return key in self._data

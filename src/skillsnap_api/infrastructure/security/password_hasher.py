# src/skillsnap_api/infrastructure/security/password_hasher.py
# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""PBKDF2-HMAC-SHA256 password hashing (``cryptography``).

Encoded format::

    pbkdf2_sha256$<iterations>$<salt b64>$<hash b64>

The iteration count travels with the hash so the configured count can be
raised without invalidating stored passwords.
"""

from __future__ import annotations

import base64
import binascii
import os
from functools import lru_cache
from typing import Final

from cryptography.exceptions import InvalidKey
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from skillsnap_api.application.interfaces.security import PasswordHasherPort

__all__ = ["ALGORITHM", "Pbkdf2PasswordHasher"]

ALGORITHM: Final[str] = "pbkdf2_sha256"
_SALT_BYTES: Final[int] = 16
_KEY_BYTES: Final[int] = 32
_DUMMY_SALT: Final[bytes] = b"skillsnap-dummy!"


def _b64e(raw: bytes) -> str:
    return base64.b64encode(raw).decode("ascii")


def _kdf(salt: bytes, iterations: int) -> PBKDF2HMAC:
    return PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=_KEY_BYTES,
        salt=salt,
        iterations=iterations,
    )


@lru_cache(maxsize=8)
def _dummy_hash(iterations: int) -> str:
    digest = _kdf(_DUMMY_SALT, iterations).derive(b"not-a-password")
    return f"{ALGORITHM}${iterations}${_b64e(_DUMMY_SALT)}${_b64e(digest)}"


class Pbkdf2PasswordHasher(PasswordHasherPort):
    """Salted PBKDF2 hasher with constant-time verification."""

    def __init__(self, *, iterations: int = 600_000) -> None:
        if iterations < 1:
            raise ValueError("iterations must be positive")
        self._iterations = iterations

    @property
    def iterations(self) -> int:
        return self._iterations

    def hash(self, password: str) -> str:
        salt = os.urandom(_SALT_BYTES)
        digest = _kdf(salt, self._iterations).derive(password.encode("utf-8"))
        return f"{ALGORITHM}${self._iterations}${_b64e(salt)}${_b64e(digest)}"

    def verify(self, password: str, encoded: str) -> bool:
        """Return whether ``password`` matches ``encoded``.

        Malformed or foreign-algorithm hashes verify as ``False``.
        """
        try:
            algorithm, iterations_raw, salt_raw, digest_raw = encoded.split("$")
            iterations = int(iterations_raw)
            salt = base64.b64decode(salt_raw, validate=True)
            expected = base64.b64decode(digest_raw, validate=True)
        except (ValueError, binascii.Error):
            return False
        if algorithm != ALGORITHM or iterations < 1:
            return False
        try:
            _kdf(salt, iterations).verify(password.encode("utf-8"), expected)
        except InvalidKey:
            return False
        return True

    def verify_dummy(self, password: str) -> None:
        """Spend one verification's worth of work against a fixed hash.

        Used when no stored hash exists so that the caller's timing does not
        depend on whether the account is known.
        """
        self.verify(password, _dummy_hash(self._iterations))

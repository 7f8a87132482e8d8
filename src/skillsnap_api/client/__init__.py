# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""Async client and client-side session for the SkillSnap API."""

from skillsnap_api.client.http import SkillSnapHTTPClient, SkillSnapHTTPError
from skillsnap_api.client.session import UserSession

__all__ = ["SkillSnapHTTPClient", "SkillSnapHTTPError", "UserSession"]

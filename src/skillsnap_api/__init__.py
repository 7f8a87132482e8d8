# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""SkillSnap API: portfolio users, projects and skills over HTTP."""

__version__ = "0.1.0"

# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""Configuration package (typed settings and feature projections)."""

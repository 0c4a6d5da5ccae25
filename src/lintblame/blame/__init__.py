# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Authorship resolvers."""

from __future__ import annotations

from .git import GitBlameResolver, parse_porcelain

__all__ = ["GitBlameResolver", "parse_porcelain"]

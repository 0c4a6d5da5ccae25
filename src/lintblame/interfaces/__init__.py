# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Protocols describing collaborators the pipeline depends on."""

from __future__ import annotations

from .blame import AuthorshipResolver

__all__ = ["AuthorshipResolver"]

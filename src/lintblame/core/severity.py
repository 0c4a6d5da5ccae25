# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity codes emitted by eslint."""

from __future__ import annotations

from enum import IntEnum


class LintSeverity(IntEnum):
    """Numeric severity levels used in eslint JSON output."""

    OFF = 0
    WARN = 1
    ERROR = 2

    @property
    def is_warning(self) -> bool:
        """Return ``True`` when the severity is a warning."""

        return self is LintSeverity.WARN


__all__ = ["LintSeverity"]

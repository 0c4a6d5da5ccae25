# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Process-level runtime services."""

from __future__ import annotations

from .console import ConsoleManager, detect_tty, get_console_manager

__all__ = ["ConsoleManager", "detect_tty", "get_console_manager"]

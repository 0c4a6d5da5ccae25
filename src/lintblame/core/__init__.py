# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core types shared across the lintblame package."""

from __future__ import annotations

from .models import AnalysisReport, AuthorInfo, BlameRecord, FileResult, GroupedRecords, LintMessage
from .severity import LintSeverity

__all__ = [
    "AnalysisReport",
    "AuthorInfo",
    "BlameRecord",
    "FileResult",
    "GroupedRecords",
    "LintMessage",
    "LintSeverity",
]

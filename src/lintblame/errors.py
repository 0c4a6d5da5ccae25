# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy raised by the blame pipeline.

Every failure aborts the whole invocation; callers distinguish the subclasses
to pick their own exit status and messaging.
"""

from __future__ import annotations

__all__ = [
    "ConfigError",
    "LintBlameError",
    "MalformedReportError",
    "MissingRequiredOptionError",
    "ResolverFailureError",
    "UnsupportedGroupKindError",
]


class LintBlameError(Exception):
    """Base class for all errors surfaced by :mod:`lintblame`."""


class MalformedReportError(LintBlameError):
    """Raised when the input text is not a valid eslint JSON report."""


class ResolverFailureError(LintBlameError):
    """Raised when authorship cannot be resolved for a file and line."""

    def __init__(self, file_path: str, line: int, reason: str) -> None:
        """Initialise the error with the location that failed to resolve.

        Args:
            file_path: File path handed to the resolver.
            line: One-based line number handed to the resolver.
            reason: Human-readable explanation of the failure.
        """

        super().__init__(f"unable to blame {file_path}:{line}: {reason}")
        self.file_path = file_path
        self.line = line
        self.reason = reason


class UnsupportedGroupKindError(LintBlameError):
    """Raised when an unknown grouping strategy is requested."""

    def __init__(self, kind: object) -> None:
        super().__init__(f"unsupported group kind: {kind!r}")
        self.kind = kind


class MissingRequiredOptionError(LintBlameError):
    """Raised when a required input such as the report source is absent."""


class ConfigError(LintBlameError):
    """Raised when project configuration is invalid."""

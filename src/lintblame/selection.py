# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Decide which diagnostics qualify for blaming."""

from __future__ import annotations

from .config import BlameOptions
from .core.models import LintMessage
from .core.severity import LintSeverity


def select_diagnostic(diagnostic: LintMessage, *, is_suppressed: bool, options: BlameOptions) -> bool:
    """Return ``True`` when ``diagnostic`` should be blamed.

    Suppressed messages need ``include_suppressed``; ``OFF`` never qualifies,
    ``WARN`` needs ``include_warnings``; a configured rule must match exactly.

    Args:
        diagnostic: eslint message under consideration.
        is_suppressed: Whether the message came from ``suppressedMessages``.
        options: Active blame options.

    Returns:
        bool: ``True`` if the diagnostic passes every filter.
    """

    if is_suppressed and not options.include_suppressed:
        return False
    if diagnostic.severity is LintSeverity.OFF:
        return False
    if diagnostic.severity is LintSeverity.WARN and not options.include_warnings:
        return False
    if options.rule is not None and diagnostic.rule_id != options.rule:
        return False
    return True


__all__ = ["select_diagnostic"]

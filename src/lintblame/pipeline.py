# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""End-to-end entry point: report text in, rendered blame report out."""

from __future__ import annotations

from .aggregation import aggregate
from .blame.git import GitBlameResolver
from .config import BlameOptions
from .grouping import group_records
from .interfaces.blame import AuthorshipResolver
from .report import parse_report
from .reporting import render_grouped, render_records


def blame(
    content: str | bytes,
    options: BlameOptions | None = None,
    *,
    resolver: AuthorshipResolver | None = None,
) -> str:
    """Blame every qualifying diagnostic in an eslint report and render it.

    Args:
        content: Raw eslint JSON report.
        options: Filtering, grouping and format options; defaults apply when omitted.
        resolver: Authorship service; a :class:`GitBlameResolver` when omitted.

    Returns:
        str: The complete rendered report.

    Raises:
        MalformedReportError: If ``content`` is not a valid report.
        ResolverFailureError: If any lookup fails.
    """

    active = options or BlameOptions()
    report = parse_report(content)
    records = aggregate(report, active, resolver or GitBlameResolver())
    if active.group_by is None:
        return render_records(records, active.format)
    return render_grouped(group_records(active.group_by, records), active.format)


__all__ = ["blame"]

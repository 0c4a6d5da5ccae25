# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Markdown checklist renderers for blame records."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

from ..core.models import BlameRecord, GroupedRecords

LINE_SEPARATOR: Final[str] = "\n"
GROUP_HEADING_PREFIX: Final[str] = "####"


def checklist_item(content: str, *, done: bool = False) -> str:
    """Return a Markdown task-list item."""

    return f"- [{'x' if done else ' '}] {content}"


def link(text: str, target: str) -> str:
    return f"[{text}]({target})"


def mention(name: str) -> str:
    return f"@{name}"


def line_anchor(file_path: str, line: int) -> str:
    """Return ``file_path`` with a GitHub-style line anchor."""

    return f"{file_path}#L{line}"


def relative_target(path: str) -> str:
    return f"./{path}"


def format_record(record: BlameRecord) -> str:
    """Return the unchecked checklist line for ``record``.

    Args:
        record: Blame record to format.

    Returns:
        str: ``- [ ] [path#Ln](./path#Ln) @author``.
    """

    anchor = line_anchor(record.file_path, record.line)
    return checklist_item(f"{link(anchor, relative_target(anchor))} {mention(record.author)}")


def render_markdown(records: Sequence[BlameRecord]) -> str:
    """Render ``records`` as a Markdown checklist, one line per record."""

    return LINE_SEPARATOR.join(format_record(record) for record in records)


def render_grouped_markdown(grouped: GroupedRecords) -> str:
    """Render each bucket as a level-4 heading followed by its checklist.

    Args:
        grouped: Buckets in first-seen key order.

    Returns:
        str: Markdown document with one section per bucket.
    """

    sections = [
        LINE_SEPARATOR.join((f"{GROUP_HEADING_PREFIX} {key}", render_markdown(bucket)))
        for key, bucket in grouped.items()
    ]
    return LINE_SEPARATOR.join(sections)


__all__ = [
    "checklist_item",
    "format_record",
    "line_anchor",
    "render_grouped_markdown",
    "render_markdown",
]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render blame records in the requested output format."""

from __future__ import annotations

from collections.abc import Sequence
from typing import assert_never

from ..config import OutputFormat
from ..core.models import BlameRecord, GroupedRecords
from .json_output import render_grouped_json, render_json
from .markdown import render_grouped_markdown, render_markdown


def render_records(records: Sequence[BlameRecord], output_format: OutputFormat) -> str:
    """Render a flat record list.

    Args:
        records: Records in traversal order.
        output_format: Target representation.

    Returns:
        str: Rendered document.
    """

    match output_format:
        case OutputFormat.JSON:
            return render_json(records)
        case OutputFormat.MARKDOWN:
            return render_markdown(records)
        case _:
            assert_never(output_format)


def render_grouped(grouped: GroupedRecords, output_format: OutputFormat) -> str:
    """Render grouped records.

    Args:
        grouped: Buckets in first-seen key order.
        output_format: Target representation.

    Returns:
        str: Rendered document.
    """

    match output_format:
        case OutputFormat.JSON:
            return render_grouped_json(grouped)
        case OutputFormat.MARKDOWN:
            return render_grouped_markdown(grouped)
        case _:
            assert_never(output_format)


__all__ = [
    "render_grouped",
    "render_grouped_json",
    "render_grouped_markdown",
    "render_json",
    "render_markdown",
    "render_records",
]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for the blame pipeline."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from .errors import UnsupportedGroupKindError


class OutputFormat(StrEnum):
    """Textual representations the renderer can produce."""

    JSON = "json"
    MARKDOWN = "markdown"


class GroupKind(StrEnum):
    """Strategies for partitioning blame records into buckets."""

    RULE = "rule"


class BlameOptions(BaseModel):
    """Options controlling which diagnostics are blamed and how they render."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    format: OutputFormat = OutputFormat.JSON
    include_warnings: bool = False
    include_suppressed: bool = False
    rule: str | None = None
    group_by: GroupKind | None = None
    jobs: int = Field(default=1, ge=1)


def coerce_group_kind(value: GroupKind | str) -> GroupKind:
    """Return ``value`` as a :class:`GroupKind`.

    Args:
        value: Group kind or its string name.

    Returns:
        GroupKind: Matching grouping strategy.

    Raises:
        UnsupportedGroupKindError: If ``value`` names no known strategy.
    """

    if isinstance(value, GroupKind):
        return value
    try:
        return GroupKind(str(value).strip().lower())
    except ValueError as exc:
        raise UnsupportedGroupKindError(value) from exc


__all__ = ["BlameOptions", "GroupKind", "OutputFormat", "coerce_group_kind"]

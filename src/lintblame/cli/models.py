# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typer parameter declarations for the lintblame command."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Final

import typer

from ..config import GroupKind, OutputFormat

# CLI parameter name -> BlameOptions field, for flags that may override project settings.
OVERRIDABLE_PARAMS: Final[dict[str, str]] = {
    "output_format": "format",
    "warn": "include_warnings",
    "suppressed": "include_suppressed",
    "rule": "rule",
    "group_by": "group_by",
    "jobs": "jobs",
}

INPUT_ARGUMENT = Annotated[
    Path | None,
    typer.Argument(
        metavar="[INPUT]",
        help="eslint JSON report; read from stdin when omitted.",
        exists=True,
        dir_okay=False,
        readable=True,
    ),
]
FORMAT_OPTION = Annotated[
    OutputFormat,
    typer.Option("--format", "-f", case_sensitive=False, help="Output format."),
]
OUTPUT_OPTION = Annotated[
    Path | None,
    typer.Option("--output", "-o", dir_okay=False, help="Output file path."),
]
WARN_OPTION = Annotated[bool, typer.Option("--warn", "-w", help="Include warning messages.")]
SUPPRESSED_OPTION = Annotated[bool, typer.Option("--suppressed", "-s", help="Include suppressed messages.")]
RULE_OPTION = Annotated[str | None, typer.Option("--rule", "-r", help="Only blame diagnostics of this rule id.")]
GROUP_BY_OPTION = Annotated[
    GroupKind | None,
    typer.Option("--group-by", "-g", case_sensitive=False, help="Group records by the given key."),
]
JOBS_OPTION = Annotated[int, typer.Option("--jobs", "-j", min=1, help="Concurrent git blame lookups.")]
CONFIG_OPTION = Annotated[
    Path | None,
    typer.Option("--config", exists=True, dir_okay=False, help="pyproject.toml holding [tool.lintblame]."),
]
VERBOSE_OPTION = Annotated[bool, typer.Option("--verbose", help="Log each lookup to stderr.")]
NO_COLOR_OPTION = Annotated[bool, typer.Option("--no-color", help="Disable ANSI colour in messages.")]
NO_EMOJI_OPTION = Annotated[bool, typer.Option("--no-emoji", help="Disable emoji in messages.")]


__all__ = [
    "CONFIG_OPTION",
    "FORMAT_OPTION",
    "GROUP_BY_OPTION",
    "INPUT_ARGUMENT",
    "JOBS_OPTION",
    "NO_COLOR_OPTION",
    "NO_EMOJI_OPTION",
    "OUTPUT_OPTION",
    "OVERRIDABLE_PARAMS",
    "RULE_OPTION",
    "SUPPRESSED_OPTION",
    "VERBOSE_OPTION",
    "WARN_OPTION",
]

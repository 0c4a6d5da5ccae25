# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typer application blaming eslint diagnostics on their authors."""

from __future__ import annotations

import logging
import sys
from typing import Annotated, Any

import typer
from click.core import ParameterSource

from .. import __version__
from ..config import OutputFormat
from ..config_loader import build_options
from ..errors import LintBlameError
from ..logging import enable_verbose_logging, fail
from ..pipeline import blame
from .io import read_report, write_report
from .models import (
    CONFIG_OPTION,
    FORMAT_OPTION,
    GROUP_BY_OPTION,
    INPUT_ARGUMENT,
    JOBS_OPTION,
    NO_COLOR_OPTION,
    NO_EMOJI_OPTION,
    OUTPUT_OPTION,
    OVERRIDABLE_PARAMS,
    RULE_OPTION,
    SUPPRESSED_OPTION,
    VERBOSE_OPTION,
    WARN_OPTION,
)

LOGGER = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


def _explicit_overrides(ctx: typer.Context, values: dict[str, Any]) -> dict[str, Any]:
    """Return option values the user supplied, keyed by ``BlameOptions`` field.

    Values left at their defaults are omitted so ``[tool.lintblame]`` settings
    can fill them in.
    """

    overrides: dict[str, Any] = {}
    for param, field in OVERRIDABLE_PARAMS.items():
        source = ctx.get_parameter_source(param)
        if source is None or source is ParameterSource.DEFAULT:
            continue
        overrides[field] = values[param]
    return overrides


@app.command(help="Blame everyone from eslint json output.", epilog="Happy hack")
def lintblame(
    ctx: typer.Context,
    input_path: INPUT_ARGUMENT = None,
    output_format: FORMAT_OPTION = OutputFormat.JSON,
    output: OUTPUT_OPTION = None,
    warn: WARN_OPTION = False,
    suppressed: SUPPRESSED_OPTION = False,
    rule: RULE_OPTION = None,
    group_by: GROUP_BY_OPTION = None,
    jobs: JOBS_OPTION = 1,
    config: CONFIG_OPTION = None,
    verbose: VERBOSE_OPTION = False,
    no_color: NO_COLOR_OPTION = False,
    no_emoji: NO_EMOJI_OPTION = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit.",
        ),
    ] = False,
) -> None:
    """Blame the authors of eslint diagnostics.

    Raises:
        typer.Exit: With status 1 when the report cannot be blamed.
    """

    del version
    if verbose:
        enable_verbose_logging()
    values: dict[str, Any] = {
        "output_format": output_format,
        "warn": warn,
        "suppressed": suppressed,
        "rule": rule,
        "group_by": group_by,
        "jobs": jobs,
    }
    try:
        options = build_options(_explicit_overrides(ctx, values), config_path=config)
        LOGGER.debug("resolved options: %s", options)
        result = blame(read_report(input_path, sys.stdin), options)
    except LintBlameError as exc:
        LOGGER.debug("lintblame failed", exc_info=True)
        fail(str(exc), use_emoji=not no_emoji, use_color=False if no_color else None)
        raise typer.Exit(code=1) from exc

    if output is not None:
        write_report(result, output)
    else:
        typer.echo(result)


def main() -> None:
    """Console script entry point."""

    app()


__all__ = ["app", "main"]

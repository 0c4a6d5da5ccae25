# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing error output and verbose logger setup."""

from __future__ import annotations

import logging
import sys
from typing import Final, TextIO

from rich.text import Text

from .runtime.console import detect_tty, get_console_manager

PACKAGE_LOGGER_NAME: Final[str] = "lintblame"
_VERBOSE_MARKER: Final[str] = "_lintblame_verbose_configured"


class _StderrHandler(logging.StreamHandler):
    """Stream handler that always writes to the current ``sys.stderr``."""

    @property  # type: ignore[override]
    def stream(self) -> TextIO:
        return sys.stderr

    @stream.setter
    def stream(self, value: TextIO) -> None:
        del value


def emoji(symbol: str, enable: bool) -> str:
    return symbol if enable else ""


def _print_line(msg: str, *, style: str, use_emoji: bool, use_color: bool | None) -> None:
    color_enabled = detect_tty() if use_color is None else use_color
    console = get_console_manager().get(color=color_enabled, emoji=use_emoji)
    text = Text(msg)
    if color_enabled:
        text.stylize(style)
    console.print(text)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an error message on stderr."""

    _print_line(f"{emoji('❌ ', use_emoji)}{msg}", style="red", use_emoji=use_emoji, use_color=use_color)


def enable_verbose_logging() -> logging.Logger:
    """Stream ``lintblame`` debug records to stderr.

    Repeated calls reuse the handler installed by the first one.

    Returns:
        logging.Logger: The package logger.
    """

    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if getattr(logger, _VERBOSE_MARKER, False):
        return logger
    handler = _StderrHandler()
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    setattr(logger, _VERBOSE_MARKER, True)
    return logger


__all__ = ["emoji", "enable_verbose_logging", "fail"]

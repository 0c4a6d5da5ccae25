# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Input and output plumbing around the blame pipeline."""

from __future__ import annotations

from pathlib import Path
from typing import TextIO

from ..errors import MalformedReportError, MissingRequiredOptionError


def read_report(input_path: Path | None, stdin: TextIO) -> str:
    """Return report text from ``input_path`` or piped ``stdin``.

    Args:
        input_path: Explicit report file, preferred when given.
        stdin: Standard input stream; only read when it is not a terminal.

    Returns:
        str: Raw report text.

    Raises:
        MalformedReportError: If the report is not UTF-8 text.
        MissingRequiredOptionError: If no path is given and stdin holds no data.
    """

    if input_path is not None:
        try:
            return input_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedReportError(f"{input_path} is not UTF-8 text: {exc}") from exc
    if not _is_interactive(stdin):
        buffer = getattr(stdin, "buffer", None)
        if buffer is None:
            data = stdin.read()
        else:
            try:
                data = buffer.read().decode("utf-8")
            except UnicodeDecodeError as exc:
                raise MalformedReportError(f"stdin is not UTF-8 text: {exc}") from exc
        if data:
            return data
    raise MissingRequiredOptionError("no input report: pass INPUT or pipe eslint JSON on stdin")


def write_report(text: str, output_path: Path) -> None:
    """Write ``text`` to ``output_path``, creating parent directories."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(text, encoding="utf-8")


def _is_interactive(stream: TextIO) -> bool:
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


__all__ = ["read_report", "write_report"]

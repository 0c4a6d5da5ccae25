# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parse raw eslint JSON output into an :class:`AnalysisReport`."""

from __future__ import annotations

from pydantic import ValidationError

from .core.models import AnalysisReport
from .errors import MalformedReportError

_MAX_ERROR_DETAILS = 3


def parse_report(content: str | bytes) -> AnalysisReport:
    """Return the typed report encoded in ``content``.

    Args:
        content: Text produced by ``eslint --format json``.

    Returns:
        AnalysisReport: Parsed report preserving file and message order.

    Raises:
        MalformedReportError: If ``content`` is not JSON or does not match the
            eslint report shape.
    """

    try:
        return AnalysisReport.model_validate_json(content)
    except ValidationError as exc:
        raise MalformedReportError(f"invalid eslint report: {_summarise(exc)}") from exc


def _summarise(exc: ValidationError) -> str:
    details = []
    for error in exc.errors()[:_MAX_ERROR_DETAILS]:
        location = ".".join(str(part) for part in error["loc"]) or "<root>"
        details.append(f"{location}: {error['msg']}")
    remaining = exc.error_count() - len(details)
    if remaining > 0:
        details.append(f"and {remaining} more")
    return "; ".join(details)


__all__ = ["parse_report"]

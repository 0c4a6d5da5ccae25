# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Walk an eslint report and blame every qualifying diagnostic."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass

from .config import BlameOptions
from .core.models import AnalysisReport, BlameRecord, LintMessage
from .errors import ResolverFailureError
from .interfaces.blame import AuthorshipResolver
from .selection import select_diagnostic

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PendingLookup:
    """Selected diagnostic awaiting authorship, tagged with its traversal position."""

    order: int
    file_path: str
    diagnostic: LintMessage
    is_suppressed: bool


def iter_selected(report: AnalysisReport, options: BlameOptions) -> Iterator[PendingLookup]:
    """Yield diagnostics passing the selector in report order.

    Files are visited in order; within a file active messages come before
    suppressed ones, and suppressed messages are only visited when enabled.

    Args:
        report: Parsed eslint report.
        options: Active blame options.

    Yields:
        PendingLookup: Qualifying diagnostics with increasing ``order``.
    """

    order = 0
    for result in report:
        batches: list[tuple[Sequence[LintMessage], bool]] = [(result.messages, False)]
        if options.include_suppressed and result.suppressed_messages:
            batches.append((result.suppressed_messages, True))
        for messages, is_suppressed in batches:
            for diagnostic in messages:
                if not select_diagnostic(diagnostic, is_suppressed=is_suppressed, options=options):
                    continue
                yield PendingLookup(order, result.file_path, diagnostic, is_suppressed)
                order += 1


def aggregate(report: AnalysisReport, options: BlameOptions, resolver: AuthorshipResolver) -> list[BlameRecord]:
    """Return blame records for every qualifying diagnostic in ``report``.

    Lookups run one at a time unless ``options.jobs`` is greater than one, in
    which case they fan out over a thread pool. Either way the result follows
    traversal order and the first failing lookup aborts the run.

    Args:
        report: Parsed eslint report.
        options: Active blame options.
        resolver: Service mapping a file location to its author.

    Returns:
        list[BlameRecord]: Records in file then message order.

    Raises:
        ResolverFailureError: Propagated from the resolver, or raised for a
            selected diagnostic without a line; no partial result is returned.
    """

    pending = iter_selected(report, options)
    if options.jobs > 1:
        return _aggregate_parallel(list(pending), resolver, options.jobs)
    return [_blame(lookup, resolver) for lookup in pending]


def _blame(lookup: PendingLookup, resolver: AuthorshipResolver) -> BlameRecord:
    line = lookup.diagnostic.line
    if line is None:
        raise ResolverFailureError(lookup.file_path, 0, "diagnostic has no line")
    LOGGER.debug(
        "blaming #%d %s:%d (%s)",
        lookup.order,
        lookup.file_path,
        line,
        lookup.diagnostic.rule_id or "no rule",
    )
    info = resolver.resolve(lookup.file_path, line)
    return BlameRecord.from_lookup(info, lookup.diagnostic, is_suppressed=lookup.is_suppressed)


def _aggregate_parallel(
    pending: Sequence[PendingLookup],
    resolver: AuthorshipResolver,
    jobs: int,
) -> list[BlameRecord]:
    """Resolve ``pending`` concurrently while preserving traversal order.

    Args:
        pending: Selected lookups in traversal order.
        resolver: Service mapping a file location to its author.
        jobs: Maximum number of concurrent lookups.

    Returns:
        list[BlameRecord]: Records sorted by lookup order.
    """

    if not pending:
        return []
    executor = ThreadPoolExecutor(max_workers=min(jobs, len(pending)))
    try:
        future_map: dict[int, Future[BlameRecord]] = {
            lookup.order: executor.submit(_blame, lookup, resolver) for lookup in pending
        }
        # Collect in traversal order so the earliest failure is the one raised.
        return [future_map[order].result() for order in sorted(future_map)]
    finally:
        executor.shutdown(wait=True, cancel_futures=True)


__all__ = ["PendingLookup", "aggregate", "iter_selected"]

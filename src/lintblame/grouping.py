# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Partition blame records into named buckets."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Final, assert_never

from .config import GroupKind, coerce_group_kind
from .core.models import BlameRecord, GroupedRecords

UNKNOWN_RULE_LABEL: Final[str] = "Unknown Rule"

GroupKeyFn = Callable[[BlameRecord], str]


def rule_key(record: BlameRecord) -> str:
    """Return the bucket key for ``record`` when grouping by rule."""

    return record.rule_id if record.rule_id is not None else UNKNOWN_RULE_LABEL


def group_key_function(kind: GroupKind | str) -> GroupKeyFn:
    """Return the key function implementing ``kind``.

    Args:
        kind: Requested grouping strategy.

    Returns:
        GroupKeyFn: Callable computing a bucket key per record.

    Raises:
        UnsupportedGroupKindError: If ``kind`` is not a known strategy.
    """

    resolved = coerce_group_kind(kind)
    match resolved:
        case GroupKind.RULE:
            return rule_key
        case _:
            assert_never(resolved)


def group_records(kind: GroupKind | str, records: Iterable[BlameRecord]) -> GroupedRecords:
    """Bucket ``records`` by ``kind`` keeping first-seen key order.

    Every record lands in exactly one bucket and records keep their relative
    order inside each bucket.

    Args:
        kind: Grouping strategy to apply.
        records: Flat records in traversal order.

    Returns:
        GroupedRecords: Mapping of bucket key to records.
    """

    key_fn = group_key_function(kind)
    grouped: GroupedRecords = {}
    for record in records:
        grouped.setdefault(key_fn(record), []).append(record)
    return grouped


__all__ = ["UNKNOWN_RULE_LABEL", "group_key_function", "group_records", "rule_key"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""JSON renderers for flat and grouped blame records."""

from __future__ import annotations

import json
from collections.abc import Sequence

from ..core.models import BlameRecord, GroupedRecords

_COMPACT_SEPARATORS = (",", ":")


def render_json(records: Sequence[BlameRecord]) -> str:
    """Serialise ``records`` as a JSON array of camelCase objects."""

    payload = [record.to_payload() for record in records]
    return json.dumps(payload, ensure_ascii=False, separators=_COMPACT_SEPARATORS)


def render_grouped_json(grouped: GroupedRecords) -> str:
    """Serialise ``grouped`` as a JSON object mapping bucket keys to record arrays."""

    payload = {key: [record.to_payload() for record in bucket] for key, bucket in grouped.items()}
    return json.dumps(payload, ensure_ascii=False, separators=_COMPACT_SEPARATORS)


__all__ = ["render_grouped_json", "render_json"]

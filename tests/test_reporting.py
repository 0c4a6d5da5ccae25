# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for JSON and Markdown renderers."""

from __future__ import annotations

import json

from lintblame.config import OutputFormat
from lintblame.core.models import BlameRecord
from lintblame.reporting import render_grouped, render_records
from lintblame.reporting.markdown import format_record


def _record(file_path: str, line: int, author: str, rule_id: str | None = "semi") -> BlameRecord:
    return BlameRecord(
        file_path=file_path,
        line=line,
        author=author,
        email=f"{author}@example.com",
        time="1700000000",
        rule_id=rule_id,
        message="Missing semicolon.",
        is_warning=True,
    )


def test_format_record_builds_checklist_link() -> None:
    line = format_record(_record("src/app.js", 12, "alice"))
    assert line == "- [ ] [src/app.js#L12](./src/app.js#L12) @alice"


def test_flat_markdown_keeps_record_order() -> None:
    records = [_record("b.js", 2, "bob"), _record("a.js", 1, "alice")]

    output = render_records(records, OutputFormat.MARKDOWN)

    assert output.splitlines() == [
        "- [ ] [b.js#L2](./b.js#L2) @bob",
        "- [ ] [a.js#L1](./a.js#L1) @alice",
    ]


def test_flat_markdown_of_no_records_is_empty() -> None:
    assert render_records([], OutputFormat.MARKDOWN) == ""


def test_flat_json_round_trips_every_field() -> None:
    records = [_record("a.js", 1, "alice"), _record("b.js", 3, "bob", rule_id=None)]

    payload = json.loads(render_records(records, OutputFormat.JSON))

    assert payload[1]["ruleId"] is None
    assert set(payload[0]) == {
        "filePath",
        "line",
        "author",
        "email",
        "time",
        "ruleId",
        "message",
        "isWarning",
        "isSuppressed",
    }
    assert [BlameRecord.model_validate(item) for item in payload] == records


def test_flat_json_of_no_records_is_empty_array() -> None:
    assert json.loads(render_records([], OutputFormat.JSON)) == []


def test_grouped_json_round_trips_buckets() -> None:
    grouped = {"semi": [_record("a.js", 1, "alice")], "Unknown Rule": [_record("b.js", 2, "bob", rule_id=None)]}

    payload = json.loads(render_grouped(grouped, OutputFormat.JSON))

    assert list(payload) == ["semi", "Unknown Rule"]
    rebuilt = {key: [BlameRecord.model_validate(item) for item in bucket] for key, bucket in payload.items()}
    assert rebuilt == grouped


def test_grouped_markdown_emits_heading_per_bucket() -> None:
    grouped = {
        "a": [_record("x.js", 1, "alice"), _record("y.js", 2, "bob")],
        "b": [_record("z.js", 3, "carol")],
    }

    output = render_grouped(grouped, OutputFormat.MARKDOWN)

    assert output.splitlines() == [
        "#### a",
        "- [ ] [x.js#L1](./x.js#L1) @alice",
        "- [ ] [y.js#L2](./y.js#L2) @bob",
        "#### b",
        "- [ ] [z.js#L3](./z.js#L3) @carol",
    ]

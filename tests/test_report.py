# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for parsing eslint JSON reports."""

from __future__ import annotations

import pytest

from lintblame.core.severity import LintSeverity
from lintblame.errors import MalformedReportError
from lintblame.report import parse_report


def test_parse_report_reads_eslint_shape(make_report, make_file, make_message) -> None:
    content = make_report(
        make_file("/repo/a.js", [make_message(3), make_message(7, rule_id=None, severity=1)]),
        make_file("/repo/b.js", [], suppressed=[make_message(1, rule_id="eqeqeq")]),
    )

    report = parse_report(content)

    assert len(report) == 2
    first, second = list(report)
    assert first.file_path == "/repo/a.js"
    assert [msg.line for msg in first.messages] == [3, 7]
    assert first.messages[0].severity is LintSeverity.ERROR
    assert first.messages[1].rule_id is None
    assert first.suppressed_messages is None
    assert second.suppressed_messages is not None
    assert second.suppressed_messages[0].rule_id == "eqeqeq"


def test_parse_report_treats_missing_rule_id_as_absent() -> None:
    content = '[{"filePath": "x.js", "messages": [{"line": 1, "message": "Parsing error", "severity": 2}]}]'

    report = parse_report(content)

    assert next(iter(report)).messages[0].rule_id is None


@pytest.mark.parametrize(
    "content",
    [
        "not json at all",
        "",
        '{"filePath": "a.js", "messages": []}',
        '[{"messages": []}]',
        '[{"filePath": "a.js", "messages": [{"line": 1, "message": "x", "severity": 5}]}]',
    ],
)
def test_parse_report_rejects_malformed_input(content: str) -> None:
    with pytest.raises(MalformedReportError):
        parse_report(content)


def test_parse_report_accepts_file_level_message_without_line() -> None:
    content = (
        '[{"filePath": "/repo/min.js", "messages": [{"fatal": false, "severity": 1,'
        ' "message": "File ignored because of a matching ignore pattern."}]}]'
    )

    report = parse_report(content)

    diagnostic = next(iter(report)).messages[0]
    assert diagnostic.line is None
    assert diagnostic.rule_id is None
    assert diagnostic.severity is LintSeverity.WARN

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import pytest

from lintblame.core.models import AuthorInfo
from lintblame.errors import ResolverFailureError

REPO_PREFIX = "/repo/"

ReportBuilder = Callable[..., str]


@dataclass
class FakeResolver:
    """In-memory resolver recording every lookup it serves."""

    authors: dict[str, str] = field(default_factory=dict)
    failures: set[tuple[str, int]] = field(default_factory=set)
    calls: list[tuple[str, int]] = field(default_factory=list)

    def resolve(self, file_path: str, line: int) -> AuthorInfo:
        self.calls.append((file_path, line))
        if (file_path, line) in self.failures:
            raise ResolverFailureError(file_path, line, "no history for line")
        author = self.authors.get(file_path, "alice")
        return AuthorInfo(
            file_path=file_path.removeprefix(REPO_PREFIX),
            author=author,
            email=f"{author}@example.com",
            time="1700000000",
        )


def message(line: int, rule_id: str | None = "no-unused-vars", severity: int = 2, text: str = "boom") -> dict[str, Any]:
    return {
        "ruleId": rule_id,
        "severity": severity,
        "message": text,
        "line": line,
        "column": 1,
        "nodeType": "Identifier",
    }


def file_result(
    path: str,
    messages: list[dict[str, Any]],
    suppressed: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    entry: dict[str, Any] = {
        "filePath": path,
        "messages": messages,
        "errorCount": sum(1 for item in messages if item["severity"] == 2),
        "warningCount": sum(1 for item in messages if item["severity"] == 1),
    }
    if suppressed is not None:
        entry["suppressedMessages"] = suppressed
    return entry


@pytest.fixture
def resolver() -> FakeResolver:
    """Return a fresh fake resolver."""
    return FakeResolver()


@pytest.fixture
def make_message() -> Callable[..., dict[str, Any]]:
    return message


@pytest.fixture
def make_file() -> Callable[..., dict[str, Any]]:
    return file_result


@pytest.fixture
def make_report() -> ReportBuilder:
    """Return a builder serialising file results into eslint JSON text."""

    def _build(*files: dict[str, Any]) -> str:
        return json.dumps(list(files))

    return _build

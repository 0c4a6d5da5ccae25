# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typed views over eslint reports and the blame records derived from them."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TypeAlias

from pydantic import BaseModel, ConfigDict, RootModel
from pydantic.alias_generators import to_camel

from .severity import LintSeverity

GroupedRecords: TypeAlias = dict[str, list["BlameRecord"]]


class LintMessage(BaseModel):
    """Single eslint diagnostic attached to a file result.

    ``line`` is absent for file-level messages such as the ignored-file warning.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True, extra="ignore")

    line: int | None = None
    rule_id: str | None = None
    message: str
    severity: LintSeverity


class FileResult(BaseModel):
    """Diagnostics eslint reported for one source file."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True, extra="ignore")

    file_path: str
    messages: list[LintMessage]
    suppressed_messages: list[LintMessage] | None = None


class AnalysisReport(RootModel[list[FileResult]]):
    """Ordered collection of per-file results making up an eslint report."""

    def __iter__(self) -> Iterator[FileResult]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)


class AuthorInfo(BaseModel):
    """Authorship metadata returned by an authorship resolver.

    ``file_path`` is the path as the version-control system reports it, which
    may differ from the path eslint emitted (for example repository-relative
    instead of absolute).
    """

    model_config = ConfigDict(frozen=True)

    file_path: str
    author: str
    email: str
    time: str


class BlameRecord(BaseModel):
    """Diagnostic merged with the authorship of the offending line."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    file_path: str
    line: int
    author: str
    email: str
    time: str
    rule_id: str | None = None
    message: str
    is_warning: bool = False
    is_suppressed: bool = False

    @classmethod
    def from_lookup(cls, info: AuthorInfo, diagnostic: LintMessage, *, is_suppressed: bool) -> BlameRecord:
        """Build a record from resolver output and the originating diagnostic.

        Args:
            info: Authorship returned for the diagnostic's location.
            diagnostic: eslint message that qualified for blaming.
            is_suppressed: Whether the message came from ``suppressedMessages``.

        Returns:
            BlameRecord: Immutable record describing the blamed diagnostic.
        """

        return cls(
            file_path=info.file_path,
            line=diagnostic.line,
            author=info.author,
            email=info.email,
            time=info.time,
            rule_id=diagnostic.rule_id,
            message=diagnostic.message,
            is_warning=diagnostic.severity.is_warning,
            is_suppressed=is_suppressed,
        )

    def to_payload(self) -> dict[str, object]:
        """Return the camelCase JSON payload for this record."""

        return self.model_dump(mode="json", by_alias=True)


__all__ = [
    "AnalysisReport",
    "AuthorInfo",
    "BlameRecord",
    "FileResult",
    "GroupedRecords",
    "LintMessage",
]

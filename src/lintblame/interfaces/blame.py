# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Interface for services mapping a file location to its author."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..core.models import AuthorInfo


@runtime_checkable
class AuthorshipResolver(Protocol):
    """Resolve version-control authorship for a single source line."""

    def resolve(self, file_path: str, line: int) -> AuthorInfo:
        """Return the authorship of ``line`` within ``file_path``.

        Args:
            file_path: Path of the file as reported by the linter.
            line: One-based line number to inspect.

        Returns:
            AuthorInfo: Author, email, timestamp and canonical path for the line.

        Raises:
            ResolverFailureError: If the location has no resolvable history.
        """
        raise NotImplementedError


__all__ = ["AuthorshipResolver"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Git-backed authorship resolver built on ``git blame --porcelain``."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path
from typing import Final

from ..core.models import AuthorInfo
from ..core.runtime.process import CommandOptions, SubprocessExecutionError, run_command
from ..errors import ResolverFailureError

GitRunner = Callable[[Sequence[str], Path], list[str]]

LOGGER = logging.getLogger(__name__)

GIT_EXECUTABLE: Final[str] = "git"
_AUTHOR_KEY: Final[str] = "author"
_AUTHOR_MAIL_KEY: Final[str] = "author-mail"
_AUTHOR_TIME_KEY: Final[str] = "author-time"
_FILENAME_KEY: Final[str] = "filename"
_CONTENT_PREFIX: Final[str] = "\t"


class GitBlameResolver:
    """Resolve line authorship by shelling out to ``git blame``."""

    def __init__(self, root: Path | None = None, *, runner: GitRunner | None = None) -> None:
        """Create a resolver.

        Args:
            root: Directory git runs from. When omitted each lookup runs from
                the directory containing the blamed file.
            runner: Optional command runner returning stdout lines. Defaults to
                :func:`run_command` with output capture enabled.
        """

        self._root = root
        self._runner = runner or self._default_runner

    def resolve(self, file_path: str, line: int) -> AuthorInfo:
        """Return the authorship of ``line`` in ``file_path``.

        Args:
            file_path: Path reported by the linter, absolute or relative.
            line: One-based line number to blame.

        Returns:
            AuthorInfo: Author details and the repository-relative filename.

        Raises:
            ResolverFailureError: If git is unavailable, the command fails, or
                its output lacks authorship headers.
        """

        cwd, target = self._locate(file_path)
        cmd = [GIT_EXECUTABLE, "blame", "--porcelain", "-L", f"{line},{line}", "--", target]
        LOGGER.debug("running %s in %s", " ".join(cmd), cwd)
        try:
            output = self._runner(cmd, cwd)
        except SubprocessExecutionError as exc:
            raise ResolverFailureError(file_path, line, (exc.stderr or "").strip() or str(exc)) from exc
        except OSError as exc:
            raise ResolverFailureError(file_path, line, str(exc)) from exc
        return parse_porcelain(output, file_path=file_path, line=line)

    def _locate(self, file_path: str) -> tuple[Path, str]:
        path = Path(file_path)
        if self._root is not None:
            return self._root, str(path)
        resolved = path if path.is_absolute() else path.resolve()
        return resolved.parent, resolved.name

    @staticmethod
    def _default_runner(cmd: Sequence[str], cwd: Path) -> list[str]:
        """Execute ``cmd`` and return its stdout lines.

        Args:
            cmd: Git command to execute.
            cwd: Working directory for the command.

        Returns:
            list[str]: Raw stdout lines.
        """

        completed = run_command(cmd, options=CommandOptions(cwd=cwd, capture_output=True, check=True))
        return (completed.stdout or "").splitlines()


def parse_porcelain(lines: Iterable[str], *, file_path: str, line: int) -> AuthorInfo:
    """Extract authorship from ``git blame --porcelain`` output for one line.

    Args:
        lines: Porcelain output lines.
        file_path: Path that was blamed, used for error reporting.
        line: Line number that was blamed, used for error reporting.

    Returns:
        AuthorInfo: Parsed author, email, author time and filename.

    Raises:
        ResolverFailureError: If a required header is missing.
    """

    headers: dict[str, str] = {}
    for raw in lines:
        if raw.startswith(_CONTENT_PREFIX):
            break
        key, _, value = raw.partition(" ")
        headers.setdefault(key, value)

    missing = [key for key in (_AUTHOR_KEY, _AUTHOR_MAIL_KEY, _AUTHOR_TIME_KEY, _FILENAME_KEY) if key not in headers]
    if missing:
        raise ResolverFailureError(file_path, line, f"git blame output missing {', '.join(missing)}")
    return AuthorInfo(
        file_path=headers[_FILENAME_KEY],
        author=headers[_AUTHOR_KEY],
        email=headers[_AUTHOR_MAIL_KEY].strip().removeprefix("<").removesuffix(">"),
        time=headers[_AUTHOR_TIME_KEY].strip(),
    )


__all__ = ["GitBlameResolver", "GitRunner", "parse_porcelain"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Load blame options from ``[tool.lintblame]`` and merge CLI overrides."""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import ValidationError

from .config import BlameOptions, coerce_group_kind
from .errors import ConfigError

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "lintblame"

LOGGER = logging.getLogger(__name__)

# Keys accepted in the pyproject table, mapped to :class:`BlameOptions` fields.
_SETTING_FIELDS: Final[dict[str, str]] = {
    "format": "format",
    "warn": "include_warnings",
    "suppressed": "include_suppressed",
    "rule": "rule",
    "group_by": "group_by",
    "jobs": "jobs",
}


def find_pyproject(start: Path) -> Path | None:
    """Return the nearest ``pyproject.toml`` at or above ``start``."""

    current = start.resolve()
    for directory in (current, *current.parents):
        candidate = directory / PYPROJECT_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_project_settings(path: Path) -> dict[str, Any]:
    """Return the ``[tool.lintblame]`` table of ``path`` keyed by option field.

    Args:
        path: ``pyproject.toml`` to read.

    Returns:
        dict[str, Any]: Settings keyed by :class:`BlameOptions` field name; empty
        when the table is absent.

    Raises:
        ConfigError: If the file cannot be parsed or holds unknown keys.
    """

    return _section_settings(_read_pyproject(path), path)


def _read_pyproject(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"unable to read {path}: {exc}") from exc


def _section_settings(data: Mapping[str, Any], path: Path) -> dict[str, Any]:
    tool_section = data.get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return {}
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        raise ConfigError(f"[tool.{PYPROJECT_SECTION_KEY}] in {path} must be a table")
    return _normalise_settings(section, source=str(path))


def _normalise_settings(section: Mapping[str, Any], *, source: str) -> dict[str, Any]:
    settings: dict[str, Any] = {}
    for raw_key, value in section.items():
        key = raw_key.replace("-", "_")
        field = _SETTING_FIELDS.get(key)
        if field is None:
            raise ConfigError(f"unknown option '{raw_key}' in {source}")
        settings[field] = value
    return settings


def _load_discovered_settings(start: Path) -> dict[str, Any]:
    """Return settings from the nearest ``pyproject.toml``, ignoring unreadable files.

    A parse failure is logged and treated as an absent table.
    """

    path = find_pyproject(start)
    if path is None:
        return {}
    try:
        data = _read_pyproject(path)
    except ConfigError as exc:
        LOGGER.warning("ignoring %s", exc)
        return {}
    return _section_settings(data, path)


def build_options(
    overrides: Mapping[str, Any] | None = None,
    *,
    config_path: Path | None = None,
    start: Path | None = None,
) -> BlameOptions:
    """Merge built-in defaults, project settings and explicit overrides.

    Args:
        overrides: Values keyed by :class:`BlameOptions` field; these win.
        config_path: Explicit ``pyproject.toml``; discovered from ``start`` when
            omitted, in which case an unparsable file is skipped.
        start: Directory to search upward from; defaults to the working directory.

    Returns:
        BlameOptions: Validated options.

    Raises:
        ConfigError: If the explicit file is unreadable or the merged settings
            are invalid.
        UnsupportedGroupKindError: If an unknown grouping strategy is named.
    """

    if config_path is not None:
        if not config_path.is_file():
            raise ConfigError(f"configuration file not found: {config_path}")
        merged = load_project_settings(config_path)
    else:
        merged = _load_discovered_settings(start or Path.cwd())
    merged.update(overrides or {})
    if merged.get("group_by") is not None:
        merged["group_by"] = coerce_group_kind(merged["group_by"])
    try:
        return BlameOptions.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"invalid lintblame options: {exc}") from exc


__all__ = ["PYPROJECT_FILENAME", "build_options", "find_pyproject", "load_project_settings"]

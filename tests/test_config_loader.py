# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for option loading from pyproject.toml."""

from __future__ import annotations

from pathlib import Path

import pytest

from lintblame.config import BlameOptions, GroupKind, OutputFormat
from lintblame.config_loader import build_options, find_pyproject, load_project_settings
from lintblame.errors import ConfigError, UnsupportedGroupKindError


def _write_pyproject(root: Path, body: str) -> Path:
    path = root / "pyproject.toml"
    path.write_text(body, encoding="utf-8")
    return path


def test_defaults_without_configuration(tmp_path: Path) -> None:
    assert build_options(start=tmp_path) == BlameOptions()


def test_project_settings_populate_options(tmp_path: Path) -> None:
    _write_pyproject(
        tmp_path,
        '[tool.lintblame]\nformat = "markdown"\nwarn = true\ngroup-by = "rule"\njobs = 4\n',
    )

    options = build_options(start=tmp_path)

    assert options.format is OutputFormat.MARKDOWN
    assert options.include_warnings is True
    assert options.include_suppressed is False
    assert options.group_by is GroupKind.RULE
    assert options.jobs == 4


def test_overrides_beat_project_settings(tmp_path: Path) -> None:
    _write_pyproject(tmp_path, '[tool.lintblame]\nformat = "markdown"\nrule = "semi"\n')

    options = build_options({"format": OutputFormat.JSON}, start=tmp_path)

    assert options.format is OutputFormat.JSON
    assert options.rule == "semi"


def test_find_pyproject_walks_upwards(tmp_path: Path) -> None:
    path = _write_pyproject(tmp_path, "[project]\nname = 'demo'\n")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)

    assert find_pyproject(nested) == path.resolve()


def test_missing_section_yields_no_settings(tmp_path: Path) -> None:
    path = _write_pyproject(tmp_path, "[tool.other]\nvalue = 1\n")
    assert load_project_settings(path) == {}


def test_unknown_key_is_rejected(tmp_path: Path) -> None:
    path = _write_pyproject(tmp_path, "[tool.lintblame]\ncolour = true\n")
    with pytest.raises(ConfigError, match="colour"):
        load_project_settings(path)


def test_invalid_values_raise_config_error(tmp_path: Path) -> None:
    _write_pyproject(tmp_path, '[tool.lintblame]\nformat = "html"\n')
    with pytest.raises(ConfigError):
        build_options(start=tmp_path)


def test_invalid_toml_raises_config_error(tmp_path: Path) -> None:
    path = _write_pyproject(tmp_path, "[tool.lintblame\n")
    with pytest.raises(ConfigError):
        load_project_settings(path)


def test_unknown_group_kind_in_settings(tmp_path: Path) -> None:
    _write_pyproject(tmp_path, '[tool.lintblame]\ngroup_by = "author"\n')
    with pytest.raises(UnsupportedGroupKindError):
        build_options(start=tmp_path)


def test_explicit_config_path_must_exist(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        build_options(config_path=tmp_path / "nope.toml")


def test_unparsable_discovered_pyproject_is_skipped(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    _write_pyproject(tmp_path, "[project\nname = 'unrelated'\n")

    with caplog.at_level("WARNING", logger="lintblame.config_loader"):
        options = build_options({"jobs": 2}, start=tmp_path)

    assert options == BlameOptions(jobs=2)
    assert "unable to read" in caplog.text


def test_unparsable_explicit_config_is_an_error(tmp_path: Path) -> None:
    path = _write_pyproject(tmp_path, "[project\nname = 'unrelated'\n")
    with pytest.raises(ConfigError, match="unable to read"):
        build_options(config_path=path)

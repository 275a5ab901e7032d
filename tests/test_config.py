# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for configuration models and TOML loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from esscode.config import (
    Config,
    ConfigError,
    example_config,
    global_config_path,
    load_config,
    load_config_file,
    project_config_path,
)
from esscode.constants import DEFAULT_IGNORE_DIRS


def test_defaults() -> None:
    cfg = Config()

    assert cfg.scan.max_depth == 5
    assert cfg.scan.ignore == list(DEFAULT_IGNORE_DIRS)
    assert cfg.scan.run_linters and cfg.scan.run_files
    assert cfg.output.colors and cfg.output.show_hints and cfg.output.show_diffs
    assert cfg.languages.enabled == []


def test_example_config_parses_to_defaults(tmp_path: Path) -> None:
    path = tmp_path / ".essentialscode.toml"
    path.write_text(example_config(), encoding="utf-8")

    assert load_config_file(path) == Config()


def test_language_filters_are_case_insensitive() -> None:
    cfg = Config.model_validate({"languages": {"enabled": ["Python", "RUST"], "disabled": ["rust"]}})

    assert cfg.is_language_enabled("python")
    assert not cfg.is_language_enabled("rust")
    assert not cfg.is_language_enabled("cpp")
    assert Config().is_language_enabled("cpp")


def test_should_ignore_matches_substrings() -> None:
    cfg = Config()

    assert cfg.should_ignore(Path("web/node_modules/pkg/index.js"))
    assert cfg.should_ignore(Path(".venv/lib/site.py"))
    assert not cfg.should_ignore(Path("src/app.py"))


def test_invalid_toml_raises_config_error(tmp_path: Path) -> None:
    path = tmp_path / "broken.toml"
    path.write_text("[scan\nmax_depth = 3", encoding="utf-8")

    with pytest.raises(ConfigError, match="not valid TOML"):
        load_config_file(path)


def test_invalid_values_raise_config_error(tmp_path: Path) -> None:
    path = tmp_path / "bad.toml"
    path.write_text("[scan]\nmax_depth = 0\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid configuration"):
        load_config_file(path)


def test_unknown_keys_are_rejected(tmp_path: Path) -> None:
    path = tmp_path / "extra.toml"
    path.write_text("[output]\nsparkles = true\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config_file(path)


def test_missing_file_raises_config_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Unable to read"):
        load_config_file(tmp_path / "absent.toml")


def test_project_config_takes_precedence(tmp_path: Path, isolated_home: Path) -> None:
    project = tmp_path / "project"
    project.mkdir()
    global_path = global_config_path()
    global_path.parent.mkdir(parents=True)
    global_path.write_text("[scan]\nmax_depth = 2\n", encoding="utf-8")

    assert global_path == isolated_home / ".config" / "essentialscode.toml"
    assert load_config(project).scan.max_depth == 2

    project_config_path(project).write_text("[scan]\nmax_depth = 7\n", encoding="utf-8")
    assert load_config(project).scan.max_depth == 7


def test_load_config_defaults_without_files(tmp_path: Path) -> None:
    assert load_config(tmp_path) == Config()

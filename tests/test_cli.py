# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI tests for the analysis, catalogue, init and scan commands."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from esscode.cli.app import app
from esscode.config import example_config


def test_bug_renders_fix() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["--no-emoji", "bug", "main.cpp:5:10: error: 'vector' is not a member of 'std'"])

    assert result.exit_code == 0
    assert "Language: C++" in result.stdout
    assert "main.cpp:5:10" in result.stdout
    assert "Missing Include" in result.stdout
    assert "#include <vector>" in result.stdout
    assert "--- Suggested Fix ---" in result.stdout


def test_fix_alias_joins_arguments() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["fix", "src/app.ts(10,15):", "error", "TS2304:", "Cannot", "find", "name", "'x'"])

    assert result.exit_code == 0
    assert "Language: TypeScript" in result.stdout
    assert "Variable 'x' is not defined" in result.stdout


def test_bug_without_message_prints_usage() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["bug"])

    assert result.exit_code == 0
    assert "Please provide an error message" in result.stdout
    assert 'ess bug "<paste your error here>"' in result.stdout


def test_bug_unknown_pattern() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["bug", "completely", "random", "text"])

    assert result.exit_code == 0
    assert "Could not fully parse error format" in result.stdout
    assert "Unknown error pattern" in result.stdout


def test_bug_fallback_instruction() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["bug", "something was never closed"])

    assert result.exit_code == 0
    assert "Unclosed strings" in result.stdout


def test_bug_hides_diff_when_disabled(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    runner = CliRunner()
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".essentialscode.toml").write_text("[output]\nshow_diffs = false\n", encoding="utf-8")

    result = runner.invoke(app, ["bug", "main.cpp:5:10: error: 'vector' is not a member of 'std'"])

    assert result.exit_code == 0
    assert "Missing Include" in result.stdout
    assert "Suggested Fix" not in result.stdout


def test_list_shows_catalogue() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["list"])

    assert result.exit_code == 0
    assert "Supported Languages & Patterns" in result.stdout
    assert "JavaScript/TypeScript" in result.stdout
    assert "Borrow checker errors" in result.stdout


def test_init_creates_and_preserves_local_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    runner = CliRunner()
    monkeypatch.chdir(tmp_path)

    first = runner.invoke(app, ["init"])
    second = runner.invoke(app, ["init"])

    config_path = tmp_path / ".essentialscode.toml"
    assert first.exit_code == 0
    assert "Created config file" in first.stdout
    assert config_path.read_text(encoding="utf-8") == example_config()
    assert second.exit_code == 0
    assert "Config file already exists" in second.stdout


def test_init_global(isolated_home: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["init", "--global"])

    assert result.exit_code == 0
    assert (isolated_home / ".config" / "essentialscode.toml").is_file()


def test_find_bug_empty_project(tmp_path: Path) -> None:
    runner = CliRunner()
    project = tmp_path / "empty"
    project.mkdir()

    result = runner.invoke(app, ["find-bug", "--path", str(project)])

    assert result.exit_code == 0
    assert "No supported source files found" in result.stdout
    assert "Supported: C++, Python, JavaScript, TypeScript, Rust" in result.stdout


def test_scan_alias_with_unknown_language(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["scan", "-p", str(tmp_path), "-l", "cobol"])

    assert result.exit_code == 0
    assert "Languages: Unknown" in result.stdout
    assert "No errors found!" in result.stdout


def test_find_bug_invalid_config_exits(tmp_path: Path) -> None:
    runner = CliRunner()
    (tmp_path / ".essentialscode.toml").write_text("[scan]\nmax_depth = 0\n", encoding="utf-8")

    result = runner.invoke(app, ["find-bug", "--path", str(tmp_path)])

    assert result.exit_code == 2
    assert "Invalid configuration" in result.stdout

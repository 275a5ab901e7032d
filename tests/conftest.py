# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from esscode.config import Config
from esscode.console import get_console_manager


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ``Path.home`` at a temporary directory so user config is never read."""

    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    get_console_manager().clear()
    return home


@pytest.fixture
def config() -> Config:
    """Return a default configuration with runtime execution and linting disabled."""

    cfg = Config()
    cfg.scan.run_files = False
    cfg.scan.run_linters = False
    return cfg

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Load configuration from project-local or global TOML documents."""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..constants import CONFIG_FILE_NAME, GLOBAL_CONFIG_DIR, GLOBAL_CONFIG_FILE_NAME
from .models import Config, ConfigError

LOGGER = logging.getLogger(__name__)

EXAMPLE_CONFIG = """\
# EssentialsCode Configuration
# Place this file in your project root as .essentialscode.toml
# or in ~/.config/essentialscode.toml for global settings

[scan]
# Maximum directory depth for scanning
max_depth = 5

# Directories to ignore during scanning
ignore = [
    "node_modules",
    ".git",
    "target",
    ".venv",
    "venv",
    "__pycache__",
    "dist",
    "build",
    ".next",
]

# Run language-specific linters (e.g., pylint for Python)
run_linters = true

# Run files to detect runtime errors
run_files = true

# Seconds allowed for each toolchain invocation
timeout = 60.0

[languages]
# Languages to check (empty = all supported)
# enabled = ["python", "rust", "typescript"]

# Languages to skip
# disabled = ["cpp"]

[output]
# Use colors in terminal output
colors = true

# Prefix messages with emoji
emoji = true

# Show hints for fixing errors
show_hints = true

# Show before/after diffs in fix suggestions
show_diffs = true
"""


def project_config_path(project_root: Path) -> Path:
    """Return the project-local configuration path for ``project_root``."""

    return project_root / CONFIG_FILE_NAME


def global_config_path(home: Path | None = None) -> Path:
    """Return the per-user configuration path under ``~/.config``."""

    base = home if home is not None else Path.home()
    return base / GLOBAL_CONFIG_DIR / GLOBAL_CONFIG_FILE_NAME


def config_from_mapping(data: Mapping[str, Any], *, source: str = "<mapping>") -> Config:
    """Validate ``data`` into a :class:`Config`.

    Raises:
        ConfigError: If the mapping does not satisfy the configuration schema.
    """

    try:
        return Config.model_validate(dict(data))
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration in {source}: {exc}") from exc


def load_config_file(path: Path) -> Config:
    """Load and validate a TOML configuration document.

    Args:
        path: File to read.

    Returns:
        Config: Validated configuration.

    Raises:
        ConfigError: If the file cannot be read, is not TOML, or fails validation.
    """

    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except OSError as exc:
        raise ConfigError(f"Unable to read configuration at {path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Configuration at {path} is not valid TOML: {exc}") from exc
    LOGGER.debug("loaded configuration from %s", path)
    return config_from_mapping(data, source=str(path))


def load_config(project_root: Path | None = None, *, home: Path | None = None) -> Config:
    """Return the first configuration found, preferring the project over the user.

    Args:
        project_root: Project directory searched for ``.essentialscode.toml``.
        home: Optional home directory override used to locate the global file.

    Returns:
        Config: Loaded configuration, or defaults when no file exists.
    """

    candidates: list[Path] = []
    if project_root is not None:
        candidates.append(project_config_path(project_root))
    candidates.append(global_config_path(home))
    for candidate in candidates:
        if candidate.is_file():
            return load_config_file(candidate)
    LOGGER.debug("no configuration file found; using defaults")
    return Config()


def example_config() -> str:
    """Return a documented TOML document matching the default configuration."""

    return EXAMPLE_CONFIG


__all__ = [
    "EXAMPLE_CONFIG",
    "config_from_mapping",
    "example_config",
    "global_config_path",
    "load_config",
    "load_config_file",
    "project_config_path",
]

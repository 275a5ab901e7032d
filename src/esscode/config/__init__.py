# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and loaders."""

from __future__ import annotations

from .loader import (
    EXAMPLE_CONFIG,
    config_from_mapping,
    example_config,
    global_config_path,
    load_config,
    load_config_file,
    project_config_path,
)
from .models import Config, ConfigError, LanguagesConfig, OutputConfig, ScanConfig

__all__ = [
    "EXAMPLE_CONFIG",
    "Config",
    "ConfigError",
    "LanguagesConfig",
    "OutputConfig",
    "ScanConfig",
    "config_from_mapping",
    "example_config",
    "global_config_path",
    "load_config",
    "load_config_file",
    "project_config_path",
]

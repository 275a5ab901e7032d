# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for project scanning and console output."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, PositiveFloat, PositiveInt

from ..constants import DEFAULT_IGNORE_DIRS, DEFAULT_MAX_DEPTH, DEFAULT_TOOL_TIMEOUT


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class ScanConfig(BaseModel):
    """Scanning behaviour: walk depth, ignored paths, and toolchain switches."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    max_depth: PositiveInt = DEFAULT_MAX_DEPTH
    ignore: list[str] = Field(default_factory=lambda: list(DEFAULT_IGNORE_DIRS))
    run_linters: bool = True
    run_files: bool = True
    timeout: PositiveFloat = DEFAULT_TOOL_TIMEOUT


class LanguagesConfig(BaseModel):
    """Language allow/deny lists; an empty ``enabled`` list enables everything."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    enabled: list[str] = Field(default_factory=list)
    disabled: list[str] = Field(default_factory=list)


class OutputConfig(BaseModel):
    """Console presentation preferences."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    colors: bool = True
    emoji: bool = True
    show_hints: bool = True
    show_diffs: bool = True


class Config(BaseModel):
    """Top-level application configuration."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    scan: ScanConfig = Field(default_factory=ScanConfig)
    languages: LanguagesConfig = Field(default_factory=LanguagesConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    def should_ignore(self, path: Path) -> bool:
        """Return ``True`` when any ignore entry occurs in the POSIX form of ``path``."""

        path_str = path.as_posix()
        return any(entry in path_str for entry in self.scan.ignore)

    def is_language_enabled(self, language: str) -> bool:
        """Return ``True`` when ``language`` is allowed by the enabled/disabled lists.

        Comparison is case-insensitive and the ``disabled`` list wins.

        Args:
            language: Language identifier such as ``"python"``.

        Returns:
            bool: ``True`` when the language should be scanned.
        """

        lowered = language.lower()
        if any(entry.lower() == lowered for entry in self.languages.disabled):
            return False
        if not self.languages.enabled:
            return True
        return any(entry.lower() == lowered for entry in self.languages.enabled)


__all__ = ["Config", "ConfigError", "LanguagesConfig", "OutputConfig", "ScanConfig"]

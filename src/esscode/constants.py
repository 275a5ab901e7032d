# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared constants for language detection, scanning, and configuration."""

from __future__ import annotations

from typing import Final

PROJECT_NAME: Final[str] = "EssentialsCode"
CLI_NAME: Final[str] = "ess"

CONFIG_FILE_NAME: Final[str] = ".essentialscode.toml"
GLOBAL_CONFIG_FILE_NAME: Final[str] = "essentialscode.toml"
GLOBAL_CONFIG_DIR: Final[str] = ".config"

DEFAULT_MAX_DEPTH: Final[int] = 5
DEFAULT_TOOL_TIMEOUT: Final[float] = 60.0

DEFAULT_IGNORE_DIRS: Final[tuple[str, ...]] = (
    "node_modules",
    ".git",
    "target",
    ".venv",
    "venv",
    "__pycache__",
    "dist",
    "build",
    ".next",
)

# Keys are ``Language`` values; kept as plain strings to avoid an import cycle.
LANGUAGE_EXTENSIONS: Final[dict[str, frozenset[str]]] = {
    "cpp": frozenset({".cpp", ".cc", ".cxx", ".c", ".h", ".hpp"}),
    "python": frozenset({".py"}),
    "javascript": frozenset({".js", ".jsx", ".mjs"}),
    "typescript": frozenset({".ts", ".tsx"}),
    "rust": frozenset({".rs"}),
}

# Translation units handed to the C++ compiler; headers are detected but not compiled.
CPP_SOURCE_EXTENSIONS: Final[frozenset[str]] = frozenset({".cpp", ".cc", ".cxx", ".c"})

LANGUAGE_ALIASES: Final[dict[str, str]] = {
    "cpp": "cpp",
    "c++": "cpp",
    "c": "cpp",
    "python": "python",
    "py": "python",
    "javascript": "javascript",
    "js": "javascript",
    "typescript": "typescript",
    "ts": "typescript",
    "rust": "rust",
    "rs": "rust",
}

RUST_MANIFEST: Final[str] = "Cargo.toml"

__all__ = [
    "CLI_NAME",
    "CONFIG_FILE_NAME",
    "CPP_SOURCE_EXTENSIONS",
    "DEFAULT_IGNORE_DIRS",
    "DEFAULT_MAX_DEPTH",
    "DEFAULT_TOOL_TIMEOUT",
    "GLOBAL_CONFIG_DIR",
    "GLOBAL_CONFIG_FILE_NAME",
    "LANGUAGE_ALIASES",
    "LANGUAGE_EXTENSIONS",
    "PROJECT_NAME",
    "RUST_MANIFEST",
]

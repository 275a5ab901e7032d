# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Catalogue of the error patterns each language extractor recognises."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True)
class PatternGroup:
    """Describe the toolchain and recognised patterns for one language family."""

    heading: str
    patterns: tuple[str, ...]


SUPPORTED_PATTERNS: Final[tuple[PatternGroup, ...]] = (
    PatternGroup(
        heading="C++ (g++/clang++)",
        patterns=(
            "Missing #include headers",
            "Undeclared identifiers",
            "Missing semicolons",
        ),
    ),
    PatternGroup(
        heading="Python",
        patterns=(
            "SyntaxError (missing colons, brackets)",
            "IndentationError",
            "NameError (undefined variables)",
            "ImportError / ModuleNotFoundError",
            "TypeError, KeyError, AttributeError, ValueError",
            "requests exceptions and unset environment variables",
        ),
    ),
    PatternGroup(
        heading="JavaScript/TypeScript",
        patterns=(
            "SyntaxError (unexpected tokens)",
            "ReferenceError",
            "TypeError",
            "Module not found (TS2307)",
            "Cannot find name (TS2304, TS2552)",
        ),
    ),
    PatternGroup(
        heading="Rust",
        patterns=(
            "Missing use statements / cannot find value or type",
            "Borrow checker errors",
        ),
    ),
)


def supported_patterns() -> tuple[PatternGroup, ...]:
    """Return the supported pattern catalogue in display order."""

    return SUPPORTED_PATTERNS


__all__ = ["PatternGroup", "SUPPORTED_PATTERNS", "supported_patterns"]

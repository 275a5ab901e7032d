# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Language detection utilities for selecting relevant toolchains."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from .constants import LANGUAGE_ALIASES, LANGUAGE_EXTENSIONS
from .models import Language


def detect_language_from_str(value: str) -> Language:
    """Return the :class:`Language` named by a user-supplied token.

    Args:
        value: Name or short alias such as ``"c++"``, ``"py"`` or ``"TS"``.

    Returns:
        Language: Matching language, or :attr:`Language.UNKNOWN` when unrecognised.
    """

    canonical = LANGUAGE_ALIASES.get(value.strip().lower())
    if canonical is None:
        return Language.UNKNOWN
    return Language(canonical)


def language_for_path(path: Path) -> Language | None:
    """Return the language implied by the suffix of ``path``, if any."""

    suffix = path.suffix.lower()
    for language, extensions in LANGUAGE_EXTENSIONS.items():
        if suffix in extensions:
            return Language(language)
    return None


def languages_for_files(files: Iterable[Path]) -> list[Language]:
    """Return languages present in *files* in first-seen order without duplicates."""

    languages: list[Language] = []
    for path in files:
        language = language_for_path(path)
        if language is not None and language not in languages:
            languages.append(language)
    return languages


__all__ = ["detect_language_from_str", "language_for_path", "languages_for_files"]

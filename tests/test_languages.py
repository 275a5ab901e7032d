# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for language detection helpers."""

from __future__ import annotations

from pathlib import Path

from esscode.languages import detect_language_from_str, language_for_path, languages_for_files
from esscode.models import Language


def test_detect_language_aliases_are_case_insensitive() -> None:
    assert detect_language_from_str("C++") is Language.CPP
    assert detect_language_from_str("c") is Language.CPP
    assert detect_language_from_str("PY") is Language.PYTHON
    assert detect_language_from_str("js") is Language.JAVASCRIPT
    assert detect_language_from_str("TypeScript") is Language.TYPESCRIPT
    assert detect_language_from_str("rs") is Language.RUST


def test_detect_language_unknown_names() -> None:
    assert detect_language_from_str("java") is Language.UNKNOWN
    assert detect_language_from_str("") is Language.UNKNOWN


def test_language_for_path_uses_suffix() -> None:
    assert language_for_path(Path("lib/header.HPP")) is Language.CPP
    assert language_for_path(Path("web/app.mjs")) is Language.JAVASCRIPT
    assert language_for_path(Path("README.md")) is None


def test_languages_for_files_deduplicates_in_order() -> None:
    files = [Path("a.ts"), Path("b.tsx"), Path("c.py"), Path("d.ts")]
    assert languages_for_files(files) == [Language.TYPESCRIPT, Language.PYTHON]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Entry point that detects project languages and runs their toolchains."""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import Config
from ..languages import detect_language_from_str
from ..models import Language
from .discovery import detect_languages
from .models import ScanReport
from .toolchains import check_language

LOGGER = logging.getLogger(__name__)


def resolve_languages(root: Path, lang: str | None, config: Config) -> list[Language]:
    """Return the languages to check under ``root``.

    An explicit ``lang`` is honoured as given. Detected languages are
    filtered through the configured enabled/disabled lists.
    """

    if lang is not None:
        return [detect_language_from_str(lang)]
    return [language for language in detect_languages(root, config) if config.is_language_enabled(language.value)]


def scan_project(path: Path, lang: str | None = None, config: Config | None = None) -> ScanReport:
    """Scan ``path`` with the toolchain of every relevant language.

    Args:
        path: Project directory (or a single source file).
        lang: Optional language name or alias restricting the scan.
        config: Configuration; defaults are used when omitted.

    Returns:
        ScanReport: Detected languages with per-language findings.
    """

    active = config if config is not None else Config()
    root = path.expanduser().resolve()
    report = ScanReport(root=root, languages=resolve_languages(root, lang, active))
    for language in report.languages:
        result = check_language(root, language, active)
        LOGGER.debug("%s: %d error(s)", language.display_name, result.error_count)
        report.results.append(result)
    return report


__all__ = ["resolve_languages", "scan_project"]

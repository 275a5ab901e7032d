# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Project scanner: language discovery, toolchain checks and findings."""

from __future__ import annotations

from .discovery import detect_languages, iter_language_files, iter_source_files, walk_files
from .driver import resolve_languages, scan_project
from .models import Finding, FindingCategory, LanguageResult, ScanReport
from .patterns import analyze_python_file, analyze_python_source
from .processors import process_compiler_errors, process_js_error, process_python_error
from .toolchains import (
    LANGUAGE_CHECKS,
    check_cpp,
    check_javascript,
    check_language,
    check_python,
    check_rust,
    check_typescript,
)

__all__ = [
    "LANGUAGE_CHECKS",
    "Finding",
    "FindingCategory",
    "LanguageResult",
    "ScanReport",
    "analyze_python_file",
    "analyze_python_source",
    "check_cpp",
    "check_javascript",
    "check_language",
    "check_python",
    "check_rust",
    "check_typescript",
    "detect_languages",
    "iter_language_files",
    "iter_source_files",
    "process_compiler_errors",
    "process_js_error",
    "process_python_error",
    "resolve_languages",
    "scan_project",
    "walk_files",
]

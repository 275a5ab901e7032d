# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Public parser exports for converting toolchain output into diagnostics."""

from __future__ import annotations

from .base import Extractor
from .cpp import classify_cpp_message, extract_cpp
from .dispatch import EXTRACTORS, iter_diagnostics, parse_error
from .javascript import extract_javascript, extract_js_runtime, extract_tsc
from .python import extract_python
from .rust import extract_rust

__all__ = [
    "EXTRACTORS",
    "Extractor",
    "classify_cpp_message",
    "extract_cpp",
    "extract_javascript",
    "extract_js_runtime",
    "extract_python",
    "extract_rust",
    "extract_tsc",
    "iter_diagnostics",
    "parse_error",
]

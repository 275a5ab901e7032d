# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""EssentialsCode: classify toolchain errors and suggest fixes."""

from __future__ import annotations

from .models import CodeDiff, Diagnostic, ErrorKind, ErrorKindTag, FixOutput, Language
from .parsers import parse_error
from .remediation import Analysis, analyze_error, remediate, remediate_raw

__version__ = "0.2.0"

__all__ = [
    "Analysis",
    "CodeDiff",
    "Diagnostic",
    "ErrorKind",
    "ErrorKindTag",
    "FixOutput",
    "Language",
    "__version__",
    "analyze_error",
    "parse_error",
    "remediate",
    "remediate_raw",
]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Remediation strategies, dispatch, and fallback heuristics."""

from __future__ import annotations

from .analysis import Analysis, analyze_error
from .catalog import SUPPORTED_PATTERNS, PatternGroup, supported_patterns
from .dispatcher import STRATEGIES, remediate, resolve_strategy
from .fallback import FALLBACK_RULES, remediate_raw
from .strategies import STD_TYPES, is_std_type

__all__ = [
    "Analysis",
    "FALLBACK_RULES",
    "PatternGroup",
    "STD_TYPES",
    "STRATEGIES",
    "SUPPORTED_PATTERNS",
    "analyze_error",
    "is_std_type",
    "remediate",
    "remediate_raw",
    "resolve_strategy",
    "supported_patterns",
]

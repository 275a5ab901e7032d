# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Console rendering for analyses, scan reports and the pattern catalogue."""

from __future__ import annotations

from .catalog import render_supported_patterns
from .fixes import render_analysis, render_diagnostic, render_diff, render_fallback, render_fix
from .scan import render_scan_report, summary_line

__all__ = [
    "render_analysis",
    "render_diagnostic",
    "render_diff",
    "render_fallback",
    "render_fix",
    "render_scan_report",
    "render_supported_patterns",
    "summary_line",
]

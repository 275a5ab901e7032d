# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render scanner reports."""

from __future__ import annotations

from ..config import OutputConfig
from ..console import fail, hint, info, ok, section, warn
from ..models import SUPPORTED_LANGUAGES
from ..scanner import Finding, FindingCategory, ScanReport
from .fixes import render_analysis


def summary_line(error_count: int) -> str:
    """Return the closing summary for ``error_count`` errors."""

    if error_count == 0:
        return "No errors found!"
    return f"{error_count} error{'' if error_count == 1 else 's'} found"


def _render_finding(finding: Finding, cfg: OutputConfig) -> None:
    if finding.location is not None and finding.category is not FindingCategory.PATTERN:
        info(finding.location, use_emoji=cfg.emoji, use_color=cfg.colors)
    if finding.category in {FindingCategory.PATTERN, FindingCategory.LINT}:
        text = finding.message if finding.location is None else f"{finding.location} - {finding.message}"
        warn(text, use_emoji=cfg.emoji, use_color=cfg.colors)
    else:
        fail(finding.message, use_emoji=cfg.emoji, use_color=cfg.colors)
    if finding.analysis is not None:
        render_analysis(finding.analysis, cfg)


def render_scan_report(report: ScanReport, cfg: OutputConfig) -> None:
    """Print the languages scanned, each finding, and the closing summary.

    Args:
        report: Result of :func:`esscode.scanner.scan_project`.
        cfg: Output preferences.
    """

    section("Scanning Project", use_color=cfg.colors)
    info(f"Path: {report.root}", use_emoji=cfg.emoji, use_color=cfg.colors)
    if not report.languages:
        warn("No supported source files found", use_emoji=cfg.emoji, use_color=cfg.colors)
        if cfg.show_hints:
            supported = ", ".join(language.display_name for language in SUPPORTED_LANGUAGES)
            hint(f"Supported: {supported}", use_emoji=cfg.emoji, use_color=cfg.colors)
        return

    languages = ", ".join(language.display_name for language in report.languages)
    info(f"Languages: {languages}", use_emoji=cfg.emoji, use_color=cfg.colors)
    for result in report.results:
        section(result.language.display_name, use_color=cfg.colors)
        for path in result.checked_files:
            info(f"Checking: {path}", use_emoji=cfg.emoji, use_color=cfg.colors)
        for warning in result.warnings:
            warn(warning, use_emoji=cfg.emoji, use_color=cfg.colors)
        for finding in result.findings:
            _render_finding(finding, cfg)

    summary = summary_line(report.error_count)
    if report.error_count == 0:
        ok(summary, use_emoji=cfg.emoji, use_color=cfg.colors)
    else:
        fail(summary, use_emoji=cfg.emoji, use_color=cfg.colors)


__all__ = ["render_scan_report", "summary_line"]

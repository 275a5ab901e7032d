# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render analysed errors and their remediation to the console."""

from __future__ import annotations

from rich.panel import Panel
from rich.text import Text

from ..config import OutputConfig
from ..console import emoji, fail, get_console, hint, info, section, warn
from ..models import CodeDiff, Diagnostic, FixOutput
from ..remediation import Analysis


def render_diagnostic(diagnostic: Diagnostic, cfg: OutputConfig) -> None:
    """Print the language, location and message of ``diagnostic``."""

    console = get_console(use_color=cfg.colors, use_emoji=cfg.emoji)
    info(f"Language: {diagnostic.language.display_name}", use_emoji=cfg.emoji, use_color=cfg.colors)
    location = Text(f"{emoji('📄 ', cfg.emoji)}{diagnostic.location}")
    if cfg.colors:
        location.stylize("bold blue")
    console.print(location)
    fail(diagnostic.message, use_emoji=cfg.emoji, use_color=cfg.colors)


def render_diff(diff: CodeDiff, cfg: OutputConfig) -> None:
    """Print ``diff`` as removed and added lines."""

    console = get_console(use_color=cfg.colors, use_emoji=cfg.emoji)
    section("Suggested Fix", use_color=cfg.colors)
    body = Text()
    for line in diff.before.splitlines():
        body.append(f"- {line}\n", style="red" if cfg.colors else None)
    body.append("\n")
    for line in diff.after.splitlines():
        body.append(f"+ {line}\n", style="green" if cfg.colors else None)
    console.print(body, end="")


def render_fix(fix: FixOutput, cfg: OutputConfig) -> None:
    """Print the title and body of ``fix``, followed by its diff when enabled."""

    console = get_console(use_color=cfg.colors, use_emoji=cfg.emoji)
    section("How to Fix", use_color=cfg.colors)
    if cfg.colors:
        console.print(Panel(Text(fix.body), title=fix.title, border_style="cyan", padding=(0, 1)))
    else:
        console.print(fix.title)
        console.print()
        console.print(Text(fix.body))
    if fix.diff is not None and cfg.show_diffs:
        render_diff(fix.diff, cfg)


def render_fallback(instruction: str, cfg: OutputConfig) -> None:
    """Print a pattern-matched instruction for text that did not parse."""

    console = get_console(use_color=cfg.colors, use_emoji=cfg.emoji)
    section("How to Fix", use_color=cfg.colors)
    console.print(Text(instruction))


def render_analysis(analysis: Analysis, cfg: OutputConfig) -> None:
    """Print the outcome of :func:`esscode.remediation.analyze_error`.

    Parsed diagnostics are shown with their fix. Unparsed text is shown with
    its fallback instruction, or an "unknown pattern" notice when none applied.

    Args:
        analysis: Analysis to render.
        cfg: Output preferences.
    """

    section("Analyzing Error", use_color=cfg.colors)
    if analysis.diagnostic is not None and analysis.fix is not None:
        render_diagnostic(analysis.diagnostic, cfg)
        render_fix(analysis.fix, cfg)
        return

    warn("Could not fully parse error format", use_emoji=cfg.emoji, use_color=cfg.colors)
    if analysis.fallback is not None:
        info("Matched a common error pattern", use_emoji=cfg.emoji, use_color=cfg.colors)
        render_fallback(analysis.fallback, cfg)
        return
    fail("Unknown error pattern", use_emoji=cfg.emoji, use_color=cfg.colors)
    if cfg.show_hints:
        hint("Try 'ess list' to see supported error types", use_emoji=cfg.emoji, use_color=cfg.colors)


__all__ = ["render_analysis", "render_diagnostic", "render_diff", "render_fallback", "render_fix"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render the supported-pattern catalogue."""

from __future__ import annotations

from rich.text import Text

from ..config import OutputConfig
from ..console import get_console, hint, section
from ..remediation import supported_patterns


def render_supported_patterns(cfg: OutputConfig) -> None:
    """Print every language group with its recognised error patterns."""

    console = get_console(use_color=cfg.colors, use_emoji=cfg.emoji)
    section("Supported Languages & Patterns", use_color=cfg.colors)
    for group in supported_patterns():
        console.print()
        console.print(Text(group.heading, style="bold blue" if cfg.colors else ""))
        for pattern in group.patterns:
            console.print(f"  • {pattern}")
    console.print()
    if cfg.show_hints:
        hint("Run 'ess bug \"<error>\"' to analyse a message", use_emoji=cfg.emoji, use_color=cfg.colors)


__all__ = ["render_supported_patterns"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Substring heuristics applied when no extractor recognises the error text."""

from __future__ import annotations

from typing import Final

# Checked in order; the first rule with a matching marker wins.
FALLBACK_RULES: Final[tuple[tuple[tuple[str, ...], str], ...]] = (
    (
        ("expected ';'", "missing semicolon"),
        "Add a semicolon (;) at the end of the line.",
    ),
    (
        ("is not a member of", "was not declared"),
        "You're using something that hasn't been imported/included.\n"
        "Add the appropriate #include or import statement at the top of your file.",
    ),
    (
        ("is not defined", "undeclared"),
        "Variable is not defined.\nEither declare it before using, or check for typos in the name.",
    ),
    (
        ("unexpected token", "was never closed"),
        "Syntax error - check for:\n"
        "• Missing or extra brackets { } [ ] ( )\n"
        "• Unclosed strings\n"
        "• Missing semicolons or commas",
    ),
)


def remediate_raw(text: str) -> str | None:
    """Return a canned instruction for unparsed error text.

    Args:
        text: Raw error text that :func:`esscode.parsers.parse_error` rejected.

    Returns:
        str | None: Instruction for the first matching rule, or ``None`` for an unknown pattern.
    """

    lowered = text.lower()
    for markers, instruction in FALLBACK_RULES:
        if any(marker in lowered for marker in markers):
            return instruction
    return None


__all__ = ["FALLBACK_RULES", "remediate_raw"]

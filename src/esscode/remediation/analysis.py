# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Two-stage analysis pipeline: parse, then remediate or fall back."""

from __future__ import annotations

from dataclasses import dataclass

from ..models import Diagnostic, FixOutput
from ..parsers import parse_error
from .dispatcher import remediate
from .fallback import remediate_raw


@dataclass(frozen=True, slots=True)
class Analysis:
    """Outcome of analysing one block of error text.

    Exactly one of the following holds: ``diagnostic`` and ``fix`` are set,
    ``fallback`` is set, or nothing matched (:attr:`recognised` is ``False``).
    """

    text: str
    diagnostic: Diagnostic | None = None
    fix: FixOutput | None = None
    fallback: str | None = None

    @property
    def parsed(self) -> bool:
        return self.diagnostic is not None

    @property
    def recognised(self) -> bool:
        return self.parsed or self.fallback is not None


def analyze_error(text: str) -> Analysis:
    """Classify ``text`` and attach the matching remediation.

    Args:
        text: Raw toolchain output or a user-supplied error message.

    Returns:
        Analysis: Parsed diagnostic with its fix, or the fallback instruction.
    """

    diagnostic = parse_error(text)
    if diagnostic is not None:
        return Analysis(text=text, diagnostic=diagnostic, fix=remediate(diagnostic))
    return Analysis(text=text, fallback=remediate_raw(text))


__all__ = ["Analysis", "analyze_error"]

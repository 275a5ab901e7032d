# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared extractor infrastructure and helper utilities."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from ..models import Diagnostic, ErrorKind, Language

ExtractorFn = Callable[[str], Diagnostic | None]


@dataclass(frozen=True, slots=True)
class Extractor:
    """Associate an extraction function with the language it recognises."""

    name: str
    language: Language
    extract: ExtractorFn

    def __call__(self, text: str) -> Diagnostic | None:
        """Delegate to :attr:`extract` enabling callable semantics."""

        return self.extract(text)


def positive_int(raw: str | None) -> int | None:
    """Return ``raw`` as a 1-based position, or ``None`` when absent or zero.

    Args:
        raw: Digits captured by a location pattern.

    Returns:
        int | None: Parsed positive integer, otherwise ``None``.
    """

    if raw is None:
        return None
    try:
        value = int(raw)
    except ValueError:
        return None
    return value if value > 0 else None


def capture_kind(pattern: re.Pattern[str], text: str, build: Callable[[str], ErrorKind], fallback: str) -> ErrorKind:
    """Return ``build(group 1)`` when ``pattern`` matches ``text``, else ``Unknown(fallback)``.

    Args:
        pattern: Compiled pattern whose first group holds the payload.
        text: Text searched for the payload.
        build: Constructor for the kind produced on a match.
        fallback: Message carried by the unknown kind when nothing matches.

    Returns:
        ErrorKind: Classified kind.
    """

    match = pattern.search(text)
    if match is None:
        return ErrorKind.unknown(fallback)
    return build(match.group(1))


def build_diagnostic(
    *,
    file: str,
    line: int | None,
    column: int | None,
    message: str,
    kind: ErrorKind,
    language: Language,
) -> Diagnostic:
    """Materialise a :class:`Diagnostic` from extracted fields."""

    return Diagnostic(
        file=file,
        line=line,
        column=column,
        message=message,
        kind=kind,
        language=language,
    )


__all__ = [
    "Extractor",
    "ExtractorFn",
    "build_diagnostic",
    "capture_kind",
    "positive_int",
]

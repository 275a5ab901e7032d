# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Extractor for GCC and Clang C++ compiler diagnostics."""

from __future__ import annotations

import re
from typing import Final

from ..models import Diagnostic, ErrorKind, Language
from .base import build_diagnostic, positive_int

_CPP_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(?P<file>[^\s:]+\.(?:cpp|cc|cxx|c|h|hpp)):(?P<line>\d+):(?P<col>\d+): error: (?P<message>.+)",
)
_INCLUDE_PATTERN: Final[re.Pattern[str]] = re.compile(r"#include <([^>]+)>")
_UNDECLARED_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"'([^']+)' was not declared|use of undeclared identifier '([^']+)'",
)

_MISSING_STD_MARKERS: Final[tuple[str, ...]] = ("is not a member of 'std'", "was not declared")
_SEMICOLON_MARKER: Final[str] = "expected ';'"

# Order matters: the first token found in the message selects the header.
_HEADER_HINTS: Final[tuple[tuple[str, str], ...]] = (
    ("vector", "vector"),
    ("string", "string"),
    ("cout", "iostream"),
    ("cin", "iostream"),
    ("map", "map"),
    ("set", "set"),
)


def classify_cpp_message(message: str, full_text: str) -> ErrorKind:
    """Return the :class:`ErrorKind` for a C++ compiler error message.

    An explicit ``#include <...>`` anywhere in ``full_text`` (compilers often
    print one as a note) takes precedence over the token heuristics.

    Args:
        message: Text following ``error:`` on the matched line.
        full_text: Complete compiler output.

    Returns:
        ErrorKind: Classified kind; ``Unknown(message)`` when nothing applies.
    """

    lowered = message.lower()
    if any(marker in lowered for marker in _MISSING_STD_MARKERS):
        include = _INCLUDE_PATTERN.search(full_text)
        if include is not None:
            return ErrorKind.missing_include(include.group(1))
        for token, header in _HEADER_HINTS:
            if token in lowered:
                return ErrorKind.missing_include(header)

    if _SEMICOLON_MARKER in lowered:
        return ErrorKind.missing_semicolon()

    undeclared = _UNDECLARED_PATTERN.search(lowered)
    if undeclared is not None:
        return ErrorKind.undeclared_variable(undeclared.group(1) or undeclared.group(2))

    return ErrorKind.unknown(message)


def extract_cpp(text: str) -> Diagnostic | None:
    """Extract the first ``file:line:col: error:`` diagnostic from ``text``.

    Args:
        text: Raw compiler output.

    Returns:
        Diagnostic | None: Classified diagnostic, or ``None`` when no C++ error line exists.
    """

    match = _CPP_PATTERN.search(text)
    if match is None:
        return None
    message = match.group("message")
    return build_diagnostic(
        file=match.group("file"),
        line=positive_int(match.group("line")),
        column=positive_int(match.group("col")),
        message=message,
        kind=classify_cpp_message(message, text),
        language=Language.CPP,
    )


__all__ = ["classify_cpp_message", "extract_cpp"]

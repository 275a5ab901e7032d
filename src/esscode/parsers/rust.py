# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Extractor for ``rustc``/``cargo`` diagnostics."""

from __future__ import annotations

import re
from typing import Final

from ..models import Diagnostic, ErrorKind, Language
from .base import build_diagnostic, capture_kind, positive_int

_ERROR_PATTERN: Final[re.Pattern[str]] = re.compile(r"error\[E\d+\]: (?P<message>.+)")
_LOCATION_PATTERN: Final[re.Pattern[str]] = re.compile(r"--> (?P<file>[^:]+):(?P<line>\d+):(?P<col>\d+)")
_CANNOT_FIND_PATTERN: Final[re.Pattern[str]] = re.compile(r"cannot find (?:value|type) `([^`]+)`")


def classify_rust_message(message: str) -> ErrorKind:
    """Map a rustc error message onto the taxonomy."""

    if "cannot find" in message:
        return capture_kind(_CANNOT_FIND_PATTERN, message, ErrorKind.undeclared_variable, message)
    if "borrow" in message:
        return ErrorKind.borrow_error(message)
    return ErrorKind.unknown(message)


def extract_rust(text: str) -> Diagnostic | None:
    """Extract a diagnostic from rustc's human-readable output.

    Requires both an ``error[Exxxx]:`` header and a ``--> file:line:col``
    pointer somewhere in ``text``.

    Args:
        text: Raw compiler output.

    Returns:
        Diagnostic | None: Rust diagnostic, or ``None`` when either line is missing.
    """

    error_match = _ERROR_PATTERN.search(text)
    location_match = _LOCATION_PATTERN.search(text)
    if error_match is None or location_match is None:
        return None
    message = error_match.group("message")
    return build_diagnostic(
        file=location_match.group("file"),
        line=positive_int(location_match.group("line")),
        column=positive_int(location_match.group("col")),
        message=message,
        kind=classify_rust_message(message),
        language=Language.RUST,
    )


__all__ = ["classify_rust_message", "extract_rust"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Extractors for TypeScript compiler and JavaScript runtime diagnostics."""

from __future__ import annotations

import re
from typing import Final

from ..models import Diagnostic, ErrorKind, Language
from .base import build_diagnostic, capture_kind, positive_int

_TSC_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(?P<file>[^\s(]+\.(?:ts|tsx))\((?P<line>\d+),(?P<col>\d+)\): error (?P<code>TS\d+): (?P<message>.+)",
)
_JS_FILE_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(?P<file>[^\s:]+\.(?P<ext>js|ts|jsx|tsx|mjs)):(?P<line>\d+)(?::(?P<col>\d+))?",
)
_JS_ERROR_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(?P<name>SyntaxError|TypeError|ReferenceError): (?P<detail>.+)",
)
_TS_NAME_PATTERN: Final[re.Pattern[str]] = re.compile(r"Cannot find name '([^']+)'")
_REFERENCE_PATTERN: Final[re.Pattern[str]] = re.compile(r"(\w+) is not defined")

_TSC_UNDECLARED_CODES: Final[frozenset[str]] = frozenset({"TS2304", "TS2552"})
_TSC_MODULE_CODE: Final[str] = "TS2307"
_TYPESCRIPT_EXTENSIONS: Final[frozenset[str]] = frozenset({"ts", "tsx"})


def classify_tsc_message(code: str, message: str) -> ErrorKind:
    """Map a ``TSxxxx`` compiler code and message onto the taxonomy."""

    if code in _TSC_UNDECLARED_CODES:
        return capture_kind(_TS_NAME_PATTERN, message, ErrorKind.undeclared_variable, message)
    if code == _TSC_MODULE_CODE:
        return ErrorKind.module_not_found(message)
    return ErrorKind.unknown(message)


def classify_js_error(name: str, detail: str) -> ErrorKind:
    """Map a JavaScript runtime error name and detail onto the taxonomy."""

    if name == "SyntaxError":
        return ErrorKind.syntax_error(detail)
    if name == "ReferenceError":
        return capture_kind(_REFERENCE_PATTERN, detail, ErrorKind.undeclared_variable, detail)
    if name == "TypeError":
        return ErrorKind.type_error(detail)
    return ErrorKind.unknown(detail)


def extract_tsc(text: str) -> Diagnostic | None:
    """Extract a ``file.ts(line,col): error TSxxxx: message`` diagnostic.

    Args:
        text: Raw ``tsc`` output.

    Returns:
        Diagnostic | None: TypeScript diagnostic, or ``None`` when no compiler line exists.
    """

    match = _TSC_PATTERN.search(text)
    if match is None:
        return None
    code = match.group("code")
    message = match.group("message")
    return build_diagnostic(
        file=match.group("file"),
        line=positive_int(match.group("line")),
        column=positive_int(match.group("col")),
        message=f"{code}: {message}",
        kind=classify_tsc_message(code, message),
        language=Language.TYPESCRIPT,
    )


def extract_js_runtime(text: str) -> Diagnostic | None:
    """Extract a diagnostic from Node.js style runtime output.

    The file location and the error line are matched independently against
    the whole text, so in multi-error output the error name may come from a
    different block than the location.

    Args:
        text: Raw ``node`` stderr.

    Returns:
        Diagnostic | None: JavaScript or TypeScript diagnostic, or ``None``.
    """

    file_match = _JS_FILE_PATTERN.search(text)
    if file_match is None:
        return None
    error_match = _JS_ERROR_PATTERN.search(text)
    if error_match is None:
        return None

    name = error_match.group("name")
    detail = error_match.group("detail")
    language = Language.TYPESCRIPT if file_match.group("ext") in _TYPESCRIPT_EXTENSIONS else Language.JAVASCRIPT
    return build_diagnostic(
        file=file_match.group("file"),
        line=positive_int(file_match.group("line")),
        column=positive_int(file_match.group("col")),
        message=f"{name}: {detail}",
        kind=classify_js_error(name, detail),
        language=language,
    )


def extract_javascript(text: str) -> Diagnostic | None:
    """Extract a JavaScript/TypeScript diagnostic, preferring ``tsc`` output."""

    return extract_tsc(text) or extract_js_runtime(text)


__all__ = [
    "classify_js_error",
    "classify_tsc_message",
    "extract_javascript",
    "extract_js_runtime",
    "extract_tsc",
]

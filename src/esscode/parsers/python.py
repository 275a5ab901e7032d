# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Extractor for Python tracebacks and ``py_compile`` failures."""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Final

from ..models import Diagnostic, ErrorKind, Language
from .base import build_diagnostic, capture_kind, positive_int

_FILE_PATTERN: Final[re.Pattern[str]] = re.compile(r'File "(?P<file>[^"]+\.py)", line (?P<line>\d+)')
_ERROR_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(?P<name>SyntaxError|IndentationError|NameError|ImportError|TypeError|ModuleNotFoundError"
    r"|KeyError|AttributeError|ValueError|requests\.exceptions\.\w+): (?P<detail>.+)",
)
_REQUESTS_PATTERN: Final[re.Pattern[str]] = re.compile(r"requests\.exceptions\.(?P<name>\w+): (?P<detail>.+)")
_NAME_PATTERN: Final[re.Pattern[str]] = re.compile(r"name '([^']+)' is not defined")
_MODULE_PATTERN: Final[re.Pattern[str]] = re.compile(r"No module named '([^']+)'")

UNKNOWN_PYTHON_FILE: Final[str] = "unknown.py"
_MISSING_SCHEMA: Final[str] = "MissingSchema"
# An unset environment variable interpolated into a URL renders as "None".
_NONE_MARKER: Final[str] = "None"

_DIRECT_KINDS: Final[dict[str, Callable[[str], ErrorKind]]] = {
    "SyntaxError": ErrorKind.syntax_error,
    "TypeError": ErrorKind.type_error,
    "KeyError": ErrorKind.key_error,
    "AttributeError": ErrorKind.attribute_error,
    "ValueError": ErrorKind.value_error,
}


def classify_python_exception(name: str, detail: str) -> ErrorKind:
    """Map a Python exception name and detail onto the taxonomy.

    Args:
        name: Exception class name such as ``"NameError"``.
        detail: Text following ``<name>: `` in the traceback.

    Returns:
        ErrorKind: Classified kind; ``Unknown(detail)`` for unhandled names.
    """

    if name == "IndentationError":
        return ErrorKind.indentation_error()
    if name == "NameError":
        return capture_kind(_NAME_PATTERN, detail, ErrorKind.undeclared_variable, detail)
    if name in {"ImportError", "ModuleNotFoundError"}:
        module = _MODULE_PATTERN.search(detail)
        return ErrorKind.import_error(module.group(1) if module is not None else detail)
    build = _DIRECT_KINDS.get(name)
    if build is None:
        return ErrorKind.unknown(detail)
    return build(detail)


def classify_requests_exception(name: str, detail: str) -> ErrorKind:
    """Classify a ``requests.exceptions.<name>`` failure.

    ``MissingSchema`` or any detail mentioning ``None`` is reported as a
    missing environment variable; everything else is a requests error
    carrying ``"<name>: <detail>"``.
    """

    if name == _MISSING_SCHEMA or _NONE_MARKER in detail:
        return ErrorKind.missing_env_var(detail)
    return ErrorKind.requests_error(f"{name}: {detail}")


def extract_python(text: str) -> Diagnostic | None:
    """Extract a diagnostic from Python traceback text.

    The ``requests`` exception branch is evaluated first and does not need a
    file marker; every other exception requires both the ``File "...py",
    line N`` marker and a recognised exception line.

    Args:
        text: Raw interpreter stderr.

    Returns:
        Diagnostic | None: Classified diagnostic, or ``None`` when the text is not a Python error.
    """

    file_match = _FILE_PATTERN.search(text)

    requests_match = _REQUESTS_PATTERN.search(text)
    if requests_match is not None:
        name = requests_match.group("name")
        detail = requests_match.group("detail")
        return build_diagnostic(
            file=file_match.group("file") if file_match is not None else UNKNOWN_PYTHON_FILE,
            line=positive_int(file_match.group("line")) if file_match is not None else None,
            column=None,
            message=f"requests.exceptions.{name}: {detail}",
            kind=classify_requests_exception(name, detail),
            language=Language.PYTHON,
        )

    error_match = _ERROR_PATTERN.search(text)
    if file_match is None or error_match is None:
        return None

    name = error_match.group("name")
    detail = error_match.group("detail")
    return build_diagnostic(
        file=file_match.group("file"),
        line=positive_int(file_match.group("line")),
        column=None,
        message=f"{name}: {detail}",
        kind=classify_python_exception(name, detail),
        language=Language.PYTHON,
    )


__all__ = [
    "UNKNOWN_PYTHON_FILE",
    "classify_python_exception",
    "classify_requests_exception",
    "extract_python",
]

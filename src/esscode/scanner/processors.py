# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Turn raw toolchain output into counted scan findings."""

from __future__ import annotations

import re
from typing import Final

from ..models import Diagnostic, ErrorKind, Language
from ..remediation import Analysis, analyze_error, remediate
from .models import Finding, FindingCategory

ERROR_LINE_PATTERN: Final[re.Pattern[str]] = re.compile(r"\berror(?:\[E\d+\]| TS\d+)?:")
_CARGO_SUMMARY_PATTERN: Final[re.Pattern[str]] = re.compile(r"could not compile|aborting due to")
_PYTHON_FRAME_PATTERN: Final[re.Pattern[str]] = re.compile(r'File "[^"]+", line \d+')
_JS_MODULE_PATTERN: Final[re.Pattern[str]] = re.compile(r"Cannot find module '([^']+)'")

_JS_FALLBACK_LINES: Final[int] = 5


def process_compiler_errors(
    output: str,
    language: Language,
    *,
    location: str | None = None,
) -> list[Finding]:
    """Return one finding per compiler error line in ``output``.

    The first finding carries the analysis of the complete output so the
    remediation sees every line the compiler emitted.

    Args:
        output: Compiler stdout or stderr.
        language: Language being compiled.
        location: Optional file the output belongs to.

    Returns:
        list[Finding]: Findings in output order.
    """

    findings: list[Finding] = []
    for line in output.splitlines():
        if ERROR_LINE_PATTERN.search(line) is None or _CARGO_SUMMARY_PATTERN.search(line):
            continue
        analysis = analyze_error(output) if not findings else None
        findings.append(
            Finding(
                language=language,
                category=FindingCategory.COMPILER,
                message=line.strip(),
                location=location,
                analysis=analysis,
            ),
        )
    return findings


def process_python_error(
    output: str,
    *,
    category: FindingCategory = FindingCategory.RUNTIME,
) -> list[Finding]:
    """Return at most one finding for a Python traceback or compile error."""

    if "Traceback" not in output and "Error:" not in output:
        return []
    location: str | None = None
    for line in output.splitlines():
        if _PYTHON_FRAME_PATTERN.search(line):
            location = line.strip()
        if "Error:" in line or "Exception:" in line:
            return [
                Finding(
                    language=Language.PYTHON,
                    category=category,
                    message=line.strip(),
                    location=location,
                    analysis=analyze_error(output),
                ),
            ]
    return []


def _module_not_found(output: str, file_path: str) -> Finding:
    match = _JS_MODULE_PATTERN.search(output)
    module = match.group(1) if match is not None else "unknown"
    diagnostic = Diagnostic(
        file=file_path,
        line=1,
        message=f"Cannot find module '{module}'",
        kind=ErrorKind.module_not_found(module),
        language=Language.JAVASCRIPT,
    )
    return Finding(
        language=Language.JAVASCRIPT,
        category=FindingCategory.RUNTIME,
        message=f"Module not found: '{module}'",
        location=f"{file_path}:1",
        analysis=Analysis(text=output, diagnostic=diagnostic, fix=remediate(diagnostic)),
    )


def _first_line_containing(output: str, *needles: str) -> str | None:
    for line in output.splitlines():
        if any(needle in line for needle in needles):
            return line.strip()
    return None


def process_js_error(output: str, file_path: str) -> list[Finding]:
    """Return findings for ``node`` stderr produced while checking ``file_path``.

    Missing modules are reported with ``npm install`` advice, syntax and
    reference/type errors go through the analysis pipeline, and any other
    ``Error`` is reported verbatim.

    Args:
        output: ``node`` stderr.
        file_path: Script that produced the output.

    Returns:
        list[Finding]: Zero or one finding.
    """

    if "Cannot find module" in output:
        return [_module_not_found(output, file_path)]

    if "SyntaxError" in output:
        message = _first_line_containing(output, "SyntaxError:") or "Syntax Error in JavaScript"
        return [
            Finding(
                language=Language.JAVASCRIPT,
                category=FindingCategory.SYNTAX,
                message=message,
                location=file_path,
                analysis=analyze_error(output),
            ),
        ]

    if "ReferenceError" in output or "TypeError" in output:
        message = _first_line_containing(output, "Error:")
        if message is not None:
            return [
                Finding(
                    language=Language.JAVASCRIPT,
                    category=FindingCategory.RUNTIME,
                    message=message,
                    location=file_path,
                    analysis=analyze_error(output),
                ),
            ]

    if "Error" not in output:
        return []
    message = _first_line_containing(output, "Error:", "error:")
    if message is None:
        head = [line.rstrip() for line in output.splitlines()[:_JS_FALLBACK_LINES]]
        message = "\n".join([f"Error in {file_path}", *head])
    return [
        Finding(
            language=Language.JAVASCRIPT,
            category=FindingCategory.RUNTIME,
            message=message,
            location=file_path,
        ),
    ]


__all__ = [
    "ERROR_LINE_PATTERN",
    "process_compiler_errors",
    "process_js_error",
    "process_python_error",
]

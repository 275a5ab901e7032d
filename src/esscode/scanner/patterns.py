# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Line-based checks for Python constructs that commonly fail at runtime."""

from __future__ import annotations

from pathlib import Path
from typing import Final

from ..models import Language
from .models import Finding, FindingCategory

RISKY_PYTHON_PATTERNS: Final[tuple[tuple[str, str], ...]] = (
    ("os.getenv(", "Possible None value from getenv - check if variable exists"),
    ('.get("', "Dictionary .get() may return None - handle None case"),
    ("r.json()[", "Direct JSON access may raise KeyError - use .get()"),
    ('data["', "Direct dict access may raise KeyError if key missing"),
    (".lower()", "Calling .lower() on possibly None value"),
    (".upper()", "Calling .upper() on possibly None value"),
    ("datetime.fromisoformat(", "fromisoformat() will fail on None or invalid string"),
)

GETENV_URL_WARNING: Final[str] = "Using getenv in URL string - will be 'None' if env var missing!"
_URL_MARKERS: Final[tuple[str, ...]] = ("http", "url", "URL")


def analyze_python_source(path: Path, content: str) -> list[Finding]:
    """Flag the first occurrence of each risky construct in ``content``.

    Args:
        path: File the content was read from; only its name is reported.
        content: Python source text.

    Returns:
        list[Finding]: One finding per matched pattern plus the getenv URL check.
    """

    findings: list[Finding] = []
    lines = content.splitlines()
    for pattern, warning in RISKY_PYTHON_PATTERNS:
        line_number = next((index for index, line in enumerate(lines, start=1) if pattern in line), None)
        if line_number is None:
            continue
        findings.append(
            Finding(
                language=Language.PYTHON,
                category=FindingCategory.PATTERN,
                message=warning,
                location=f"{path.name}:{line_number}",
            ),
        )

    if 'f"' in content and "os.getenv" in content and any(marker in content for marker in _URL_MARKERS):
        findings.append(
            Finding(
                language=Language.PYTHON,
                category=FindingCategory.PATTERN,
                message=GETENV_URL_WARNING,
                location=path.name,
            ),
        )
    return findings


def analyze_python_file(path: Path) -> list[Finding]:
    """Read ``path`` and run :func:`analyze_python_source` on it."""

    return analyze_python_source(path, path.read_text(encoding="utf-8", errors="replace"))


__all__ = ["GETENV_URL_WARNING", "RISKY_PYTHON_PATTERNS", "analyze_python_file", "analyze_python_source"]

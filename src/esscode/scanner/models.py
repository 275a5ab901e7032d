# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Result records produced by the project scanner."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from ..models import Language
from ..remediation import Analysis


class FindingCategory(str, Enum):
    """Enumerate the sources a scan finding can originate from."""

    COMPILER = "compiler"
    SYNTAX = "syntax"
    RUNTIME = "runtime"
    LINT = "lint"
    PATTERN = "pattern"


@dataclass(frozen=True, slots=True)
class Finding:
    """Single counted problem reported by a toolchain check.

    Attributes:
        language: Language whose toolchain produced the finding.
        category: Kind of check that produced it.
        message: Error line or warning text shown to the user.
        location: Optional ``file[:line]`` reference.
        analysis: Parsed diagnostic and remediation, when one was run.
    """

    language: Language
    category: FindingCategory
    message: str
    location: str | None = None
    analysis: Analysis | None = None


@dataclass(slots=True)
class LanguageResult:
    """Findings and warnings gathered while checking one language."""

    language: Language
    findings: list[Finding] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    checked_files: list[Path] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        return len(self.findings)


@dataclass(slots=True)
class ScanReport:
    """Aggregate outcome of :func:`esscode.scanner.scan_project`."""

    root: Path
    languages: list[Language] = field(default_factory=list)
    results: list[LanguageResult] = field(default_factory=list)

    @property
    def findings(self) -> list[Finding]:
        return [finding for result in self.results for finding in result.findings]

    @property
    def error_count(self) -> int:
        """Return the total number of findings across all languages."""

        return len(self.findings)


__all__ = ["Finding", "FindingCategory", "LanguageResult", "ScanReport"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Priority-ordered dispatch across the per-language extractors."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Final

from ..models import Diagnostic, Language
from .base import Extractor
from .cpp import extract_cpp
from .javascript import extract_javascript
from .python import extract_python
from .rust import extract_rust

# Ambiguous text resolves by position in this tuple, not by match quality.
EXTRACTORS: Final[tuple[Extractor, ...]] = (
    Extractor(name="cpp", language=Language.CPP, extract=extract_cpp),
    Extractor(name="python", language=Language.PYTHON, extract=extract_python),
    Extractor(name="javascript", language=Language.JAVASCRIPT, extract=extract_javascript),
    Extractor(name="rust", language=Language.RUST, extract=extract_rust),
)


def parse_error(text: str) -> Diagnostic | None:
    """Return the diagnostic produced by the highest-priority matching extractor.

    Args:
        text: Raw toolchain output or a user-supplied error message.

    Returns:
        Diagnostic | None: First successful extraction, or ``None`` when no extractor matches.
    """

    for extractor in EXTRACTORS:
        diagnostic = extractor(text)
        if diagnostic is not None:
            return diagnostic
    return None


def iter_diagnostics(text: str) -> Iterator[tuple[Extractor, Diagnostic]]:
    """Yield every extractor that recognises ``text`` in priority order.

    Each extractor is evaluated against the full input; the first item is
    what :func:`parse_error` returns.
    """

    for extractor in EXTRACTORS:
        diagnostic = extractor(text)
        if diagnostic is not None:
            yield extractor, diagnostic


__all__ = ["EXTRACTORS", "iter_diagnostics", "parse_error"]

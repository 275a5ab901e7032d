# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Select and apply fix strategies for classified diagnostics."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Final

from ..models import Diagnostic, ErrorKindTag, FixOutput, Language
from . import strategies as s
from .strategies import Strategy

StrategyKey = tuple[Language | None, ErrorKindTag]

_JS_FAMILY: Final[tuple[Language, ...]] = (Language.JAVASCRIPT, Language.TYPESCRIPT)
_IMPORT_TAGS: Final[tuple[ErrorKindTag, ...]] = (ErrorKindTag.IMPORT_ERROR, ErrorKindTag.MODULE_NOT_FOUND)


def _build_strategy_table() -> dict[StrategyKey, Strategy]:
    """Return the lookup keyed by ``(language, tag)``.

    Entries keyed by ``(None, tag)`` are the per-kind generic handlers used
    when no language-specific strategy is registered.
    """

    table: dict[StrategyKey, Strategy] = {
        (Language.CPP, ErrorKindTag.MISSING_INCLUDE): s.fix_missing_include,
        (None, ErrorKindTag.MISSING_INCLUDE): s.no_language_fix,
        (Language.CPP, ErrorKindTag.MISSING_SEMICOLON): s.fix_missing_semicolon,
        (None, ErrorKindTag.MISSING_SEMICOLON): s.no_language_fix,
        (Language.CPP, ErrorKindTag.UNDECLARED_VARIABLE): s.fix_undeclared_cpp,
        (Language.PYTHON, ErrorKindTag.UNDECLARED_VARIABLE): s.fix_undeclared_python,
        (Language.RUST, ErrorKindTag.UNDECLARED_VARIABLE): s.fix_undeclared_rust,
        (None, ErrorKindTag.UNDECLARED_VARIABLE): s.fix_undeclared_generic,
        (None, ErrorKindTag.SYNTAX_ERROR): s.fix_syntax_error,
        (None, ErrorKindTag.INDENTATION_ERROR): s.fix_indentation_error,
        (Language.TYPESCRIPT, ErrorKindTag.TYPE_ERROR): s.fix_type_error_typescript,
        (Language.PYTHON, ErrorKindTag.TYPE_ERROR): s.fix_type_error_python,
        (None, ErrorKindTag.TYPE_ERROR): s.fix_type_error_generic,
        (Language.RUST, ErrorKindTag.BORROW_ERROR): s.fix_borrow_error,
        (None, ErrorKindTag.BORROW_ERROR): s.no_language_fix,
        (None, ErrorKindTag.KEY_ERROR): s.fix_key_error,
        (None, ErrorKindTag.ATTRIBUTE_ERROR): s.fix_attribute_error,
        (None, ErrorKindTag.VALUE_ERROR): s.fix_value_error,
        (None, ErrorKindTag.MISSING_ENV_VAR): s.fix_missing_env_var,
        (None, ErrorKindTag.REQUESTS_ERROR): s.fix_requests_error,
        (None, ErrorKindTag.UNKNOWN): s.fix_unknown,
    }
    for language in _JS_FAMILY:
        table[(language, ErrorKindTag.MISSING_SEMICOLON)] = s.fix_missing_semicolon
        table[(language, ErrorKindTag.UNDECLARED_VARIABLE)] = s.fix_undeclared_javascript
    for tag in _IMPORT_TAGS:
        table[(Language.PYTHON, tag)] = s.fix_import_python
        table[(None, tag)] = s.fix_import_generic
        for language in _JS_FAMILY:
            table[(language, tag)] = s.fix_import_javascript
    return table


STRATEGIES: Final[Mapping[StrategyKey, Strategy]] = _build_strategy_table()

_MISSING_GENERIC = [tag for tag in ErrorKindTag if (None, tag) not in STRATEGIES]
if _MISSING_GENERIC:  # pragma: no cover - guards the table at import time
    raise RuntimeError(f"no generic fix strategy registered for: {_MISSING_GENERIC}")


def resolve_strategy(language: Language, tag: ErrorKindTag) -> Strategy:
    """Return the strategy for ``(language, tag)``, falling back to the kind's generic handler.

    Args:
        language: Language of the diagnostic.
        tag: Error kind variant.

    Returns:
        Strategy: Callable producing the :class:`FixOutput`.
    """

    return STRATEGIES.get((language, tag)) or STRATEGIES[(None, tag)]


def remediate(diagnostic: Diagnostic) -> FixOutput:
    """Return the remediation suggestion for ``diagnostic``.

    Args:
        diagnostic: Classified diagnostic produced by :func:`esscode.parsers.parse_error`.

    Returns:
        FixOutput: Title, body text and optional before/after diff.
    """

    return resolve_strategy(diagnostic.language, diagnostic.kind.tag)(diagnostic)


__all__ = ["STRATEGIES", "StrategyKey", "remediate", "resolve_strategy"]

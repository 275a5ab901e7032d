# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the esscode package.

The taxonomy is intentionally closed: every diagnostic carries exactly one
:class:`ErrorKind`, and :meth:`ErrorKind.unknown` is the universal fallback
that accepts any message text.
"""

from __future__ import annotations

from enum import Enum
from typing import Final

from pydantic import BaseModel, ConfigDict, PositiveInt, model_validator


class Language(str, Enum):
    """Enumerate source languages whose diagnostics can be classified."""

    CPP = "cpp"
    PYTHON = "python"
    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    RUST = "rust"
    UNKNOWN = "unknown"

    @property
    def display_name(self) -> str:
        """Return the canonical human-readable language name.

        Returns:
            str: Display name such as ``"C++"`` or ``"TypeScript"``.
        """

        return _LANGUAGE_DISPLAY_NAMES[self]

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return the display name so languages render naturally in messages."""

        return self.display_name


_LANGUAGE_DISPLAY_NAMES: Final[dict[Language, str]] = {
    Language.CPP: "C++",
    Language.PYTHON: "Python",
    Language.JAVASCRIPT: "JavaScript",
    Language.TYPESCRIPT: "TypeScript",
    Language.RUST: "Rust",
    Language.UNKNOWN: "Unknown",
}

SUPPORTED_LANGUAGES: Final[tuple[Language, ...]] = (
    Language.CPP,
    Language.PYTHON,
    Language.JAVASCRIPT,
    Language.TYPESCRIPT,
    Language.RUST,
)


class ErrorKindTag(str, Enum):
    """Enumerate the variants of the diagnostic taxonomy."""

    MISSING_INCLUDE = "missing_include"
    MISSING_SEMICOLON = "missing_semicolon"
    UNDECLARED_VARIABLE = "undeclared_variable"
    SYNTAX_ERROR = "syntax_error"
    INDENTATION_ERROR = "indentation_error"
    IMPORT_ERROR = "import_error"
    MODULE_NOT_FOUND = "module_not_found"
    TYPE_ERROR = "type_error"
    BORROW_ERROR = "borrow_error"
    KEY_ERROR = "key_error"
    ATTRIBUTE_ERROR = "attribute_error"
    VALUE_ERROR = "value_error"
    MISSING_ENV_VAR = "missing_env_var"
    REQUESTS_ERROR = "requests_error"
    UNKNOWN = "unknown"

    @property
    def label(self) -> str:
        """Return the CamelCase variant name used in reports."""

        return "".join(part.capitalize() for part in self.value.split("_"))

    @property
    def has_payload(self) -> bool:
        """Return ``True`` when the variant carries a payload string."""

        return self not in _PAYLOADLESS_TAGS


_PAYLOADLESS_TAGS: Final[frozenset[ErrorKindTag]] = frozenset(
    {ErrorKindTag.MISSING_SEMICOLON, ErrorKindTag.INDENTATION_ERROR},
)


class ErrorKind(BaseModel):
    """Tagged classification result with an optional payload.

    Use the named constructors (``ErrorKind.missing_include("vector")``)
    rather than instantiating the model directly.
    """

    model_config = ConfigDict(frozen=True)

    tag: ErrorKindTag
    payload: str | None = None

    @model_validator(mode="after")
    def _check_payload(self) -> ErrorKind:
        """Ensure the payload presence matches the variant definition.

        Returns:
            ErrorKind: The validated instance.

        Raises:
            ValueError: If a payload is missing or unexpected for ``tag``.
        """

        if self.tag.has_payload and self.payload is None:
            raise ValueError(f"{self.tag.label} requires a payload")
        if not self.tag.has_payload and self.payload is not None:
            raise ValueError(f"{self.tag.label} does not accept a payload")
        return self

    def __str__(self) -> str:
        if self.payload is None:
            return self.tag.label
        return f"{self.tag.label}({self.payload})"

    @classmethod
    def missing_include(cls, header: str) -> ErrorKind:
        return cls(tag=ErrorKindTag.MISSING_INCLUDE, payload=header)

    @classmethod
    def missing_semicolon(cls) -> ErrorKind:
        return cls(tag=ErrorKindTag.MISSING_SEMICOLON)

    @classmethod
    def undeclared_variable(cls, name: str) -> ErrorKind:
        return cls(tag=ErrorKindTag.UNDECLARED_VARIABLE, payload=name)

    @classmethod
    def syntax_error(cls, detail: str) -> ErrorKind:
        return cls(tag=ErrorKindTag.SYNTAX_ERROR, payload=detail)

    @classmethod
    def indentation_error(cls) -> ErrorKind:
        return cls(tag=ErrorKindTag.INDENTATION_ERROR)

    @classmethod
    def import_error(cls, module: str) -> ErrorKind:
        return cls(tag=ErrorKindTag.IMPORT_ERROR, payload=module)

    @classmethod
    def module_not_found(cls, module: str) -> ErrorKind:
        return cls(tag=ErrorKindTag.MODULE_NOT_FOUND, payload=module)

    @classmethod
    def type_error(cls, detail: str) -> ErrorKind:
        return cls(tag=ErrorKindTag.TYPE_ERROR, payload=detail)

    @classmethod
    def borrow_error(cls, detail: str) -> ErrorKind:
        return cls(tag=ErrorKindTag.BORROW_ERROR, payload=detail)

    @classmethod
    def key_error(cls, key: str) -> ErrorKind:
        return cls(tag=ErrorKindTag.KEY_ERROR, payload=key)

    @classmethod
    def attribute_error(cls, detail: str) -> ErrorKind:
        return cls(tag=ErrorKindTag.ATTRIBUTE_ERROR, payload=detail)

    @classmethod
    def value_error(cls, detail: str) -> ErrorKind:
        return cls(tag=ErrorKindTag.VALUE_ERROR, payload=detail)

    @classmethod
    def missing_env_var(cls, detail: str) -> ErrorKind:
        return cls(tag=ErrorKindTag.MISSING_ENV_VAR, payload=detail)

    @classmethod
    def requests_error(cls, detail: str) -> ErrorKind:
        return cls(tag=ErrorKindTag.REQUESTS_ERROR, payload=detail)

    @classmethod
    def unknown(cls, message: str) -> ErrorKind:
        """Return the fallback kind; accepts any text, including ``""``."""

        return cls(tag=ErrorKindTag.UNKNOWN, payload=message)


class Diagnostic(BaseModel):
    """Classified diagnostic extracted from toolchain output."""

    model_config = ConfigDict(frozen=True)

    file: str
    line: PositiveInt | None = None
    column: PositiveInt | None = None
    message: str
    kind: ErrorKind
    language: Language

    @property
    def location(self) -> str:
        """Return ``file``, ``file:line`` or ``file:line:column``."""

        if self.line is None:
            return self.file
        if self.column is None:
            return f"{self.file}:{self.line}"
        return f"{self.file}:{self.line}:{self.column}"


class CodeDiff(BaseModel):
    """Before/after snippet pair illustrating a suggested fix."""

    model_config = ConfigDict(frozen=True)

    before: str
    after: str


class FixOutput(BaseModel):
    """Structured remediation suggestion produced for a diagnostic."""

    model_config = ConfigDict(frozen=True)

    title: str
    body: str
    diff: CodeDiff | None = None

    @property
    def has_diff(self) -> bool:
        """Return ``True`` when the suggestion includes a code diff."""

        return self.diff is not None


__all__ = [
    "CodeDiff",
    "Diagnostic",
    "ErrorKind",
    "ErrorKindTag",
    "FixOutput",
    "Language",
    "SUPPORTED_LANGUAGES",
]

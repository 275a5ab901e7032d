# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the diagnostic data model."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from esscode.models import Diagnostic, ErrorKind, ErrorKindTag, FixOutput, Language


def test_error_kind_renders_label_and_payload() -> None:
    assert str(ErrorKind.missing_include("vector")) == "MissingInclude(vector)"
    assert str(ErrorKind.missing_semicolon()) == "MissingSemicolon"
    assert ErrorKind.module_not_found("x").tag.label == "ModuleNotFound"


def test_error_kind_rejects_mismatched_payload() -> None:
    with pytest.raises(ValidationError):
        ErrorKind(tag=ErrorKindTag.KEY_ERROR)
    with pytest.raises(ValidationError):
        ErrorKind(tag=ErrorKindTag.INDENTATION_ERROR, payload="tabs")


def test_unknown_accepts_empty_message() -> None:
    kind = ErrorKind.unknown("")
    assert kind.tag is ErrorKindTag.UNKNOWN
    assert kind.payload == ""


def test_error_kinds_compare_by_value() -> None:
    assert ErrorKind.key_error("'id'") == ErrorKind.key_error("'id'")
    assert ErrorKind.key_error("'id'") != ErrorKind.attribute_error("'id'")


def test_diagnostic_location_formats() -> None:
    kind = ErrorKind.unknown("boom")
    assert Diagnostic(file="a.py", message="m", kind=kind, language=Language.PYTHON).location == "a.py"
    assert (
        Diagnostic(file="a.py", line=3, message="m", kind=kind, language=Language.PYTHON).location == "a.py:3"
    )
    assert (
        Diagnostic(file="a.c", line=3, column=9, message="m", kind=kind, language=Language.CPP).location
        == "a.c:3:9"
    )


def test_diagnostic_rejects_non_positive_line() -> None:
    with pytest.raises(ValidationError):
        Diagnostic(file="a.py", line=0, message="m", kind=ErrorKind.unknown("m"), language=Language.PYTHON)


def test_language_display_names() -> None:
    assert Language.CPP.display_name == "C++"
    assert Language.TYPESCRIPT.display_name == "TypeScript"
    assert str(Language.JAVASCRIPT) == "JavaScript"


def test_fix_output_has_diff_flag() -> None:
    assert not FixOutput(title="t", body="b").has_diff

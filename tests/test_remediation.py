# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for fix strategies, the dispatcher and the raw-text fallback."""

from __future__ import annotations

from esscode.models import CodeDiff, Diagnostic, ErrorKind, ErrorKindTag, Language
from esscode.remediation import (
    FALLBACK_RULES,
    STRATEGIES,
    analyze_error,
    is_std_type,
    remediate,
    remediate_raw,
    resolve_strategy,
    supported_patterns,
)
from esscode.remediation import strategies


def _diagnostic(kind: ErrorKind, language: Language = Language.PYTHON) -> Diagnostic:
    return Diagnostic(file="main", line=1, message="message", kind=kind, language=language)


def test_remediate_is_deterministic() -> None:
    diagnostic = _diagnostic(ErrorKind.key_error("'id'"))
    assert remediate(diagnostic) == remediate(diagnostic.model_copy())


def test_every_tag_has_generic_handler() -> None:
    for tag in ErrorKindTag:
        assert (None, tag) in STRATEGIES


def test_language_specific_strategy_wins() -> None:
    assert resolve_strategy(Language.RUST, ErrorKindTag.BORROW_ERROR) is strategies.fix_borrow_error
    assert resolve_strategy(Language.CPP, ErrorKindTag.KEY_ERROR) is strategies.fix_key_error


def test_std_type_check_is_case_insensitive() -> None:
    assert is_std_type("vector")
    assert is_std_type("Vector")
    assert is_std_type("VECTOR")
    assert not is_std_type("widget")


def test_missing_include_fix() -> None:
    fix = remediate(_diagnostic(ErrorKind.missing_include("vector"), Language.CPP))

    assert fix.title == "Missing Include"
    assert "#include <vector>" in fix.body
    assert fix.diff == CodeDiff(before="// Your current code", after="#include <vector>\n// Your code")


def test_missing_include_outside_cpp_has_no_fix() -> None:
    fix = remediate(_diagnostic(ErrorKind.missing_include("vector"), Language.PYTHON))

    assert fix.title == "MissingInclude"
    assert fix.body == "No automatic MissingInclude fix is available for Python."
    assert fix.diff is None


def test_missing_semicolon_fix_for_curly_brace_languages() -> None:
    expected = CodeDiff(before="statement  // missing semicolon", after="statement;")

    for language in (Language.CPP, Language.JAVASCRIPT, Language.TYPESCRIPT):
        fix = remediate(_diagnostic(ErrorKind.missing_semicolon(), language))

        assert fix.title == "Missing Semicolon"
        assert "add ';' at the end" in fix.body
        assert fix.diff == expected


def test_missing_semicolon_has_no_fix_for_python_and_rust() -> None:
    for language in (Language.PYTHON, Language.RUST):
        fix = remediate(_diagnostic(ErrorKind.missing_semicolon(), language))

        assert fix.title == "MissingSemicolon"
        assert fix.body == f"No automatic MissingSemicolon fix is available for {language.display_name}."
        assert fix.diff is None


def test_indentation_error_fix() -> None:
    fix = remediate(_diagnostic(ErrorKind.indentation_error()))

    assert fix.title == "Indentation Error"
    assert "Use 4 spaces per indentation level" in fix.body
    assert fix.diff == CodeDiff(
        before="def example():\n  line1  # 2 spaces\n    line2  # 4 spaces (inconsistent!)",
        after="def example():\n    line1  # 4 spaces\n    line2  # 4 spaces (consistent)",
    )


def test_undeclared_cpp_std_type_gets_include_diff() -> None:
    fix = remediate(_diagnostic(ErrorKind.undeclared_variable("Vector"), Language.CPP))

    assert fix.title == "Undeclared Identifier"
    assert fix.diff == CodeDiff(before="std::Vector", after="#include <vector>\nstd::Vector")


def test_undeclared_cpp_plain_identifier() -> None:
    fix = remediate(_diagnostic(ErrorKind.undeclared_variable("total"), Language.CPP))

    assert fix.diff is None
    assert "int total = 0;" in fix.body


def test_undeclared_bodies_follow_language() -> None:
    python = remediate(_diagnostic(ErrorKind.undeclared_variable("x"), Language.PYTHON))
    javascript = remediate(_diagnostic(ErrorKind.undeclared_variable("x"), Language.TYPESCRIPT))
    rust = remediate(_diagnostic(ErrorKind.undeclared_variable("x"), Language.RUST))
    unknown = remediate(_diagnostic(ErrorKind.undeclared_variable("x"), Language.UNKNOWN))

    assert "x = None" in python.body
    assert "const x = ...;" in javascript.body
    assert "use crate::x;" in rust.body
    assert unknown.body.startswith("Variable 'x' is not defined")


def test_syntax_error_branches() -> None:
    token = remediate(_diagnostic(ErrorKind.syntax_error("Unexpected token '}'"), Language.JAVASCRIPT))
    unclosed = remediate(_diagnostic(ErrorKind.syntax_error("'(' was never closed")))
    expected = remediate(_diagnostic(ErrorKind.syntax_error("expected ':'")))
    other = remediate(_diagnostic(ErrorKind.syntax_error("invalid syntax")))

    assert "Missing commas in arrays or objects" in token.body
    assert "unclosed bracket or string" in unclosed.body
    assert "Error: expected ':'" in expected.body
    assert other.body.startswith("Syntax error: invalid syntax")


def test_import_fixes_by_language() -> None:
    python = remediate(_diagnostic(ErrorKind.import_error("requests"), Language.PYTHON))
    typescript = remediate(
        _diagnostic(
            ErrorKind.module_not_found("Cannot find module 'lodash' or its corresponding type declarations."),
            Language.TYPESCRIPT,
        ),
    )
    rust = remediate(_diagnostic(ErrorKind.module_not_found("serde"), Language.RUST))

    assert python.title == "Import Error"
    assert "pip install requests" in python.body
    assert typescript.title == "Module Not Found"
    assert "npm install lodash" in typescript.body
    assert rust.body.startswith("Module 'serde' not found.")


def test_type_error_echoes_detail() -> None:
    typescript = remediate(_diagnostic(ErrorKind.type_error("x is not a function"), Language.TYPESCRIPT))
    python = remediate(_diagnostic(ErrorKind.type_error("unsupported operand")))
    cpp = remediate(_diagnostic(ErrorKind.type_error("bad cast"), Language.CPP))

    assert typescript.body.startswith("x is not a function")
    assert "value as ExpectedType" in typescript.body
    assert "print(type(your_variable))" in python.body
    assert cpp.body.startswith("bad cast")


def test_borrow_error_only_for_rust() -> None:
    rust = remediate(_diagnostic(ErrorKind.borrow_error("cannot borrow `x`"), Language.RUST))
    cpp = remediate(_diagnostic(ErrorKind.borrow_error("cannot borrow `x`"), Language.CPP))

    assert rust.body.startswith("cannot borrow `x`")
    assert "Rc/Arc" in rust.body
    assert cpp.title == "BorrowError"


def test_key_error_strips_quotes() -> None:
    fix = remediate(_diagnostic(ErrorKind.key_error("'user_id'")))

    assert fix.title == "KeyError - Missing Dictionary Key"
    assert "The key 'user_id' doesn't exist" in fix.body
    assert fix.diff is not None
    assert fix.diff.before == 'data["user_id"]  # raises KeyError if missing'


def test_attribute_error_none_type_gets_diff() -> None:
    none_fix = remediate(_diagnostic(ErrorKind.attribute_error("'NoneType' object has no attribute 'lower'")))
    other = remediate(_diagnostic(ErrorKind.attribute_error("'str' object has no attribute 'foo'")))

    assert none_fix.diff is not None
    assert "calling a method on a None value" in none_fix.body
    assert other.diff is None
    assert other.body.startswith("AttributeError: 'str' object has no attribute 'foo'")


def test_value_error_datetime_branch() -> None:
    dated = remediate(_diagnostic(ErrorKind.value_error("time data '2024' does not match format '%Y-%m'")))
    plain = remediate(_diagnostic(ErrorKind.value_error("invalid literal for int()")))

    assert dated.diff is not None
    assert "datetime string is invalid" in dated.body
    assert plain.diff is None


def test_missing_env_var_fix_is_fixed_text() -> None:
    first = remediate(_diagnostic(ErrorKind.missing_env_var("Invalid URL 'None/api'")))
    second = remediate(_diagnostic(ErrorKind.missing_env_var("something else")))

    assert first == second
    assert first.diff is not None


def test_requests_error_branches() -> None:
    connection = remediate(_diagnostic(ErrorKind.requests_error("ConnectionError: refused")))
    timeout = remediate(_diagnostic(ErrorKind.requests_error("Timeout: slow")))
    other = remediate(_diagnostic(ErrorKind.requests_error("HTTPError: 500")))

    assert connection.body.startswith("ConnectionError: refused")
    assert "Could not connect" in connection.body
    assert "timeout=30" in timeout.body
    assert "raise_for_status" in other.body


def test_unknown_fix() -> None:
    fix = remediate(_diagnostic(ErrorKind.unknown("boom"), Language.UNKNOWN))

    assert fix.title == "Unknown Error"
    assert fix.body == "No automatic fix for: boom\n\nCheck the error message and fix manually."
    assert fix.diff is None


def test_fallback_rules_are_ordered() -> None:
    assert remediate_raw("expected ';' and also an unexpected token") == FALLBACK_RULES[0][1]
    assert remediate_raw("Unexpected Token here") == FALLBACK_RULES[3][1]
    assert remediate_raw("foo IS NOT DEFINED") == FALLBACK_RULES[2][1]


def test_fallback_missing_declaration_rule() -> None:
    instruction = FALLBACK_RULES[1][1]

    assert remediate_raw("'cout' is not a member of 'std'") == instruction
    assert remediate_raw("'printf' was not declared in this scope") == instruction
    assert "#include" in instruction


def test_analyze_error_uses_fallback_when_unparsed() -> None:
    analysis = analyze_error("something was never closed")

    assert not analysis.parsed
    assert analysis.recognised
    assert analysis.fallback == FALLBACK_RULES[3][1]


def test_analyze_error_parsed() -> None:
    analysis = analyze_error("main.cpp:5:10: error: 'vector' is not a member of 'std'")

    assert analysis.parsed
    assert analysis.fix is not None
    assert analysis.fix.title == "Missing Include"
    assert analysis.fallback is None


def test_supported_patterns_cover_each_family() -> None:
    headings = [group.heading for group in supported_patterns()]
    assert headings == ["C++ (g++/clang++)", "Python", "JavaScript/TypeScript", "Rust"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Fix strategies translating classified diagnostics into remediation text.

Each strategy is a pure function of the diagnostic; the dispatcher decides
which one applies for a ``(language, kind)`` pair.  Strategies never inspect
source code, they only template the payload captured by the extractors.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Final

from ..models import CodeDiff, Diagnostic, ErrorKindTag, FixOutput

Strategy = Callable[[Diagnostic], FixOutput]

STD_TYPES: Final[frozenset[str]] = frozenset(
    {
        "vector",
        "string",
        "map",
        "set",
        "list",
        "deque",
        "array",
        "unique_ptr",
        "shared_ptr",
        "optional",
        "variant",
    },
)

_JS_MODULE_PATTERN: Final[re.Pattern[str]] = re.compile(r"Cannot find module '([^']+)'")
_QUOTES: Final[tuple[str, ...]] = ("'", '"')

NONE_TYPE_MARKER: Final[str] = "'NoneType'"
DATETIME_MARKERS: Final[tuple[str, ...]] = ("fromisoformat", "time data")


def is_std_type(name: str) -> bool:
    """Return ``True`` when ``name`` is a well-known C++ standard library type.

    Args:
        name: Identifier reported by the compiler; compared case-insensitively.

    Returns:
        bool: ``True`` for names such as ``vector`` or ``shared_ptr``.
    """

    return name.lower() in STD_TYPES


def _payload(diagnostic: Diagnostic) -> str:
    return diagnostic.kind.payload or ""


def _unquote(value: str) -> str:
    """Strip one layer of matching quotes, as printed by ``KeyError``."""

    if len(value) >= 2 and value[0] == value[-1] and value[0] in _QUOTES:
        return value[1:-1]
    return value


def _module_name(payload: str) -> str:
    match = _JS_MODULE_PATTERN.search(payload)
    return match.group(1) if match is not None else payload


def no_language_fix(diagnostic: Diagnostic) -> FixOutput:
    """Return the placeholder used when a kind has no fix for the language."""

    label = diagnostic.kind.tag.label
    return FixOutput(
        title=label,
        body=f"No automatic {label} fix is available for {diagnostic.language.display_name}.",
    )


def fix_missing_include(diagnostic: Diagnostic) -> FixOutput:
    header = _payload(diagnostic)
    return FixOutput(
        title="Missing Include",
        body=f"Add this line at the top of your file:\n\n  #include <{header}>",
        diff=CodeDiff(before="// Your current code", after=f"#include <{header}>\n// Your code"),
    )


def fix_missing_semicolon(diagnostic: Diagnostic) -> FixOutput:
    del diagnostic
    return FixOutput(
        title="Missing Semicolon",
        body=(
            "Add a semicolon at the end of the line indicated in the error.\n\n"
            "Look for the line number in the error message and add ';' at the end."
        ),
        diff=CodeDiff(before="statement  // missing semicolon", after="statement;"),
    )


def fix_undeclared_cpp(diagnostic: Diagnostic) -> FixOutput:
    name = _payload(diagnostic)
    causes = (
        f"Variable '{name}' is not defined\n\n"
        "Possible causes:\n"
        "  1. Typo in variable name\n"
        "  2. Variable declared in different scope\n"
        "  3. Missing #include for std:: types"
    )
    if is_std_type(name):
        header = name.lower()
        return FixOutput(
            title="Undeclared Identifier",
            body=f"{causes}\n\nInclude the standard header:\n\n  #include <{header}>",
            diff=CodeDiff(before=f"std::{name}", after=f"#include <{header}>\nstd::{name}"),
        )
    return FixOutput(
        title="Undeclared Identifier",
        body=(
            f"{causes}\n\n"
            "Options:\n\n"
            f"1. Check spelling of '{name}'\n"
            f"2. Declare the variable before using it:\n   int {name} = 0;\n"
            "3. Check if it's defined in a different scope"
        ),
    )


def fix_undeclared_python(diagnostic: Diagnostic) -> FixOutput:
    name = _payload(diagnostic)
    return FixOutput(
        title="Undeclared Variable",
        body=(
            f"Variable '{name}' is not defined\n\n"
            "Options:\n\n"
            f"1. Check spelling of '{name}'\n"
            f"2. Define the variable before using it:\n   {name} = None\n"
            "3. Make sure the variable is in scope"
        ),
    )


def fix_undeclared_javascript(diagnostic: Diagnostic) -> FixOutput:
    name = _payload(diagnostic)
    return FixOutput(
        title="Undeclared Variable",
        body=(
            f"Variable '{name}' is not defined\n\n"
            "Options:\n\n"
            f"1. Check spelling of '{name}'\n"
            f"2. Declare the variable:\n   const {name} = ...;\n"
            f"3. Import if it's from another module:\n   import {{ {name} }} from './module';"
        ),
    )


def fix_undeclared_rust(diagnostic: Diagnostic) -> FixOutput:
    name = _payload(diagnostic)
    return FixOutput(
        title="Undeclared Variable",
        body=(
            f"Variable '{name}' is not defined\n\n"
            "Options:\n\n"
            f"1. Check spelling of '{name}'\n"
            f"2. Add a 'use' statement if it's from another module:\n   use crate::{name};\n"
            f"3. Declare the variable:\n   let {name} = ...;"
        ),
    )


def fix_undeclared_generic(diagnostic: Diagnostic) -> FixOutput:
    name = _payload(diagnostic)
    return FixOutput(
        title="Undeclared Variable",
        body=f"Variable '{name}' is not defined\n\nDeclare it before using it, or check for typos in the name.",
    )


def fix_syntax_error(diagnostic: Diagnostic) -> FixOutput:
    """Return a checklist chosen by the wording of the parser's complaint."""

    detail = _payload(diagnostic)
    lowered = detail.lower()
    if "unexpected token" in lowered:
        body = (
            "Check for:\n\n"
            "1. Missing or extra brackets: { } [ ] ( )\n"
            "2. Missing commas in arrays or objects\n"
            "3. Unclosed strings\n"
            "4. Missing operators"
        )
    elif "was never closed" in lowered or "unterminated" in lowered:
        body = (
            "You have an unclosed bracket or string.\n\n"
            "Check for matching pairs:\n"
            "• ( must have )\n"
            "• { must have }\n"
            "• [ must have ]\n"
            '• " must have "\n'
            "• ' must have '"
        )
    elif "expected" in lowered:
        body = (
            "The parser expected something that wasn't there.\n\n"
            f"Error: {detail}\n\n"
            "Check the line number in the error for missing syntax."
        )
    else:
        body = f"Syntax error: {detail}\n\nCheck the line indicated in the error for typos or missing syntax."
    return FixOutput(title="Syntax Error", body=body)


def fix_indentation_error(diagnostic: Diagnostic) -> FixOutput:
    del diagnostic
    return FixOutput(
        title="Indentation Error",
        body=(
            "Python requires consistent indentation.\n\n"
            "Fix:\n"
            "1. Use either spaces OR tabs, not both\n"
            "2. Use 4 spaces per indentation level (recommended)\n"
            "3. Make sure all lines in a block have the same indentation\n\n"
            "Tip: Configure your editor to convert tabs to spaces."
        ),
        diff=CodeDiff(
            before="def example():\n  line1  # 2 spaces\n    line2  # 4 spaces (inconsistent!)",
            after="def example():\n    line1  # 4 spaces\n    line2  # 4 spaces (consistent)",
        ),
    )


def _import_title(diagnostic: Diagnostic) -> str:
    return "Module Not Found" if diagnostic.kind.tag is ErrorKindTag.MODULE_NOT_FOUND else "Import Error"


def fix_import_python(diagnostic: Diagnostic) -> FixOutput:
    module = _payload(diagnostic)
    return FixOutput(
        title=_import_title(diagnostic),
        body=(
            f"Module '{module}' not found.\n\n"
            "Options:\n\n"
            f"1. Install the module:\n   pip install {module}\n\n"
            "2. Check if it's a local module - verify the file exists\n\n"
            "3. Check your PYTHONPATH if it's a custom module"
        ),
    )


def fix_import_javascript(diagnostic: Diagnostic) -> FixOutput:
    module = _module_name(_payload(diagnostic))
    return FixOutput(
        title=_import_title(diagnostic),
        body=(
            f"Cannot find module '{module}'\n\n"
            "Options:\n\n"
            f"1. Install the package:\n   npm install {module}\n\n"
            f"2. If it's a local file, check the path:\n   import x from './{module}'\n\n"
            "3. Check tsconfig.json paths if using TypeScript"
        ),
    )


def fix_import_generic(diagnostic: Diagnostic) -> FixOutput:
    module = _payload(diagnostic)
    return FixOutput(
        title=_import_title(diagnostic),
        body=f"Module '{module}' not found.\n\nCheck that the module is installed and the path is correct.",
    )


def fix_type_error_typescript(diagnostic: Diagnostic) -> FixOutput:
    return FixOutput(
        title="Type Error",
        body=(
            f"{_payload(diagnostic)}\n\n"
            "Type mismatch detected.\n\n"
            "Options:\n\n"
            "1. Check the expected type vs what you're passing\n"
            "2. Add type assertion: value as ExpectedType\n"
            "3. Fix the source of the wrong type\n"
            "4. Update the type definition if it's incorrect"
        ),
    )


def fix_type_error_python(diagnostic: Diagnostic) -> FixOutput:
    return FixOutput(
        title="Type Error",
        body=(
            f"{_payload(diagnostic)}\n\n"
            "Operation not supported for this type.\n\n"
            "Check what type your variable actually is:\n  print(type(your_variable))\n\n"
            "Then ensure the operation is valid for that type."
        ),
    )


def fix_type_error_generic(diagnostic: Diagnostic) -> FixOutput:
    return FixOutput(
        title="Type Error",
        body=f"{_payload(diagnostic)}\n\nType mismatch. Check that your variables have the expected types.",
    )


def fix_borrow_error(diagnostic: Diagnostic) -> FixOutput:
    return FixOutput(
        title="Borrow Checker Error",
        body=(
            f"{_payload(diagnostic)}\n\n"
            "Rust's borrow checker prevents data races.\n\n"
            "Common fixes:\n\n"
            "1. Clone the data if ownership isn't needed:\n   let copy = data.clone();\n\n"
            "2. Use references instead of moving:\n   fn process(data: &MyType) { ... }\n\n"
            "3. Limit the scope of borrows:\n"
            "   {\n       let r = &mut data;\n       // use r\n   } // r dropped here\n\n"
            "4. Use Rc/Arc for shared ownership:\n   use std::rc::Rc;"
        ),
    )


def fix_key_error(diagnostic: Diagnostic) -> FixOutput:
    key = _unquote(_payload(diagnostic))
    return FixOutput(
        title="KeyError - Missing Dictionary Key",
        body=(
            f"The key '{key}' doesn't exist in the dictionary.\n\n"
            "Options:\n\n"
            "1. Use .get() with a default value:\n"
            f'   value = data.get("{key}", None)\n\n'
            "2. Check if key exists first:\n"
            f'   if "{key}" in data:\n'
            f'       value = data["{key}"]\n\n'
            "3. Use try/except:\n"
            "   try:\n"
            f'       value = data["{key}"]\n'
            "   except KeyError:\n"
            "       value = default"
        ),
        diff=CodeDiff(
            before=f'data["{key}"]  # raises KeyError if missing',
            after=f'data.get("{key}", default_value)  # returns default if missing',
        ),
    )


def fix_attribute_error(diagnostic: Diagnostic) -> FixOutput:
    detail = _payload(diagnostic)
    if NONE_TYPE_MARKER in detail:
        return FixOutput(
            title="AttributeError",
            body=(
                "You're calling a method on a None value.\n\n"
                "The variable is None when you expected an object.\n\n"
                "Fix:\n\n"
                "1. Check for None before using:\n"
                "   if result is not None:\n"
                "       result.method()\n\n"
                "2. Use a default value:\n"
                "   result = get_result() or default_value\n\n"
                "3. Find why the value is None and fix the source"
            ),
            diff=CodeDiff(
                before="result.method()  # result is None!",
                after="if result is not None:\n    result.method()",
            ),
        )
    return FixOutput(
        title="AttributeError",
        body=(
            f"AttributeError: {detail}\n\n"
            "The object doesn't have the attribute/method you're trying to use.\n\n"
            "Check:\n"
            "1. Spelling of the attribute name\n"
            "2. The type of the object (use type(obj))\n"
            "3. If the object is None unexpectedly"
        ),
    )


def fix_value_error(diagnostic: Diagnostic) -> FixOutput:
    detail = _payload(diagnostic)
    if any(marker in detail for marker in DATETIME_MARKERS):
        return FixOutput(
            title="ValueError",
            body=(
                "The datetime string is invalid or None.\n\n"
                "Fix:\n\n"
                "1. Validate before parsing:\n"
                "   if date_string:\n"
                "       dt = datetime.fromisoformat(date_string)\n\n"
                "2. Use try/except:\n"
                "   try:\n"
                "       dt = datetime.fromisoformat(date_string)\n"
                "   except (ValueError, TypeError):\n"
                "       dt = datetime.now()  # or None"
            ),
            diff=CodeDiff(
                before="datetime.fromisoformat(date_string)  # fails if invalid",
                after=(
                    "try:\n    dt = datetime.fromisoformat(date_string)\n"
                    "except (ValueError, TypeError):\n    dt = None"
                ),
            ),
        )
    return FixOutput(
        title="ValueError",
        body=(
            f"ValueError: {detail}\n\n"
            "The value has the right type but invalid content.\n\n"
            "Validate the data before using it."
        ),
    )


def fix_missing_env_var(diagnostic: Diagnostic) -> FixOutput:
    del diagnostic
    return FixOutput(
        title="Missing Environment Variable",
        body=(
            "Environment variable is not set - value is None!\n\n"
            "os.getenv() returns None when the variable isn't set.\n\n"
            "Fix:\n\n"
            "1. Set the environment variable:\n"
            "   - Create/edit .env file: API_URL=https://api.example.com\n"
            "   - Or set in terminal: export API_URL=https://api.example.com\n\n"
            "2. Add validation in your code:\n"
            '   API_URL = os.getenv("API_URL")\n'
            "   if not API_URL:\n"
            '       raise ValueError("API_URL is required")\n\n'
            "3. Use a default value:\n"
            '   API_URL = os.getenv("API_URL", "https://default-api.com")'
        ),
        diff=CodeDiff(
            before=(
                'API_URL = os.getenv("API_URL")  # Returns None if not set!\n'
                "url = f\"{API_URL}/endpoint\"  # Becomes 'None/endpoint'"
            ),
            after=(
                'API_URL = os.getenv("API_URL")\n'
                "if not API_URL:\n"
                '    raise ValueError("API_URL environment variable is required")\n'
                'url = f"{API_URL}/endpoint"'
            ),
        ),
    )


def fix_requests_error(diagnostic: Diagnostic) -> FixOutput:
    detail = _payload(diagnostic)
    if "ConnectionError" in detail or "connect" in detail:
        advice = (
            "Could not connect to the server.\n\n"
            "Check:\n"
            "1. Is the URL correct?\n"
            "2. Is the server running?\n"
            "3. Is your internet connection working?\n"
            "4. Is there a firewall blocking the request?"
        )
    elif "Timeout" in detail:
        advice = (
            "Request timed out.\n\n"
            "Fix:\n"
            "1. Increase the timeout:\n"
            "   requests.get(url, timeout=30)\n\n"
            "2. Check if the server is slow/overloaded\n"
            "3. Add retry logic:\n"
            "   from requests.adapters import HTTPAdapter\n"
            "   from urllib3.util.retry import Retry"
        )
    else:
        advice = (
            "Add proper error handling:\n\n"
            "try:\n"
            "    response = requests.get(url, timeout=10)\n"
            "    response.raise_for_status()\n"
            "except requests.exceptions.RequestException as e:\n"
            '    print(f"Request failed: {e}")'
        )
    return FixOutput(title="Requests Library Error", body=f"{detail}\n\n{advice}")


def fix_unknown(diagnostic: Diagnostic) -> FixOutput:
    return FixOutput(
        title="Unknown Error",
        body=f"No automatic fix for: {_payload(diagnostic)}\n\nCheck the error message and fix manually.",
    )


__all__ = [
    "DATETIME_MARKERS",
    "NONE_TYPE_MARKER",
    "STD_TYPES",
    "Strategy",
    "fix_attribute_error",
    "fix_borrow_error",
    "fix_import_generic",
    "fix_import_javascript",
    "fix_import_python",
    "fix_indentation_error",
    "fix_key_error",
    "fix_missing_env_var",
    "fix_missing_include",
    "fix_missing_semicolon",
    "fix_requests_error",
    "fix_syntax_error",
    "fix_type_error_generic",
    "fix_type_error_python",
    "fix_type_error_typescript",
    "fix_undeclared_cpp",
    "fix_undeclared_generic",
    "fix_undeclared_javascript",
    "fix_undeclared_python",
    "fix_undeclared_rust",
    "fix_unknown",
    "fix_value_error",
    "is_std_type",
    "no_language_fix",
]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Per-language toolchain checks run by the project scanner."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Final

from ..config import Config
from ..constants import CPP_SOURCE_EXTENSIONS, RUST_MANIFEST
from ..models import Language
from ..process_utils import CommandResult, run_command
from .discovery import iter_language_files, iter_source_files
from .models import Finding, FindingCategory, LanguageResult
from .patterns import analyze_python_file
from .processors import process_compiler_errors, process_js_error, process_python_error

LOGGER = logging.getLogger(__name__)

CPP_COMPILERS: Final[tuple[str, ...]] = ("g++", "clang++")
CPP_FLAGS: Final[tuple[str, ...]] = ("-std=c++17", "-Wall", "-fsyntax-only")
PYLINT_ARGS: Final[tuple[str, ...]] = ("-m", "pylint", "--errors-only", "--disable=import-error")
PYLINT_ERROR_MARKER: Final[str] = ": E"
PYLINT_MISSING_MARKER: Final[str] = "No module named pylint"
TSC_COMMAND: Final[tuple[str, ...]] = ("npx", "tsc", "--noEmit")
CARGO_COMMAND: Final[tuple[str, ...]] = ("cargo", "check")

CheckFn = Callable[[Path, Config], LanguageResult]


def _run(args: Sequence[str], *, config: Config, cwd: Path | None = None) -> CommandResult:
    return run_command(args, cwd=cwd, timeout=config.scan.timeout)


def _working_dir(root: Path) -> Path:
    return root if root.is_dir() else root.parent


def _unavailable(result: LanguageResult, tool: str) -> LanguageResult:
    message = f"{tool} is not installed; skipping {result.language.display_name} checks"
    LOGGER.debug(message)
    result.warnings.append(message)
    return result


def _timed_out(result: LanguageResult, subject: str, config: Config) -> None:
    message = f"{subject} did not finish within {config.scan.timeout:g}s"
    LOGGER.debug(message)
    result.warnings.append(message)


def _compile_cpp(path: Path, config: Config) -> CommandResult | None:
    for compiler in CPP_COMPILERS:
        try:
            return _run([compiler, *CPP_FLAGS, str(path)], config=config)
        except FileNotFoundError:
            LOGGER.debug("%s not found on PATH", compiler)
    return None


def check_cpp(root: Path, config: Config) -> LanguageResult:
    """Syntax-check each C++ translation unit with ``g++`` or ``clang++``."""

    result = LanguageResult(language=Language.CPP)
    for path in iter_source_files(root, CPP_SOURCE_EXTENSIONS, config):
        completed = _compile_cpp(path, config)
        if completed is None:
            return _unavailable(result, "g++ or clang++")
        result.checked_files.append(path)
        if completed.timed_out:
            _timed_out(result, path.name, config)
        elif completed.returncode != 0:
            result.findings.extend(process_compiler_errors(completed.stderr, Language.CPP, location=str(path)))
    return result


def _pylint_findings(result: LanguageResult, linted: CommandResult) -> list[Finding]:
    if PYLINT_MISSING_MARKER in linted.stderr:
        if not any(PYLINT_MISSING_MARKER in warning for warning in result.warnings):
            result.warnings.append(f"{PYLINT_MISSING_MARKER}; lint checks skipped")
        return []
    return [
        Finding(language=Language.PYTHON, category=FindingCategory.LINT, message=f"Pylint: {line}")
        for line in linted.stdout.splitlines()
        if PYLINT_ERROR_MARKER in line
    ]


def check_python(root: Path, config: Config) -> LanguageResult:
    """Compile, optionally run and lint each Python file, then scan for risky patterns.

    Files that fail to compile are not executed or linted. The static
    pattern scan runs over every file after the toolchain pass.

    Args:
        root: Project root; scripts run with it as their working directory.
        config: Scan configuration.

    Returns:
        LanguageResult: Findings for every Python file below ``root``.
    """

    result = LanguageResult(language=Language.PYTHON)
    files = list(iter_language_files(root, Language.PYTHON, config))
    interpreter = sys.executable
    for path in files:
        result.checked_files.append(path)
        compiled = _run([interpreter, "-m", "py_compile", str(path)], config=config)
        if compiled.timed_out:
            _timed_out(result, path.name, config)
            continue
        if compiled.returncode != 0:
            result.findings.extend(process_python_error(compiled.stderr, category=FindingCategory.SYNTAX))
            continue

        if config.scan.run_files:
            executed = _run([interpreter, str(path)], config=config, cwd=_working_dir(root))
            if executed.timed_out:
                _timed_out(result, path.name, config)
            elif executed.returncode != 0 and executed.stderr:
                result.findings.extend(process_python_error(executed.stderr))

        if config.scan.run_linters:
            linted = _run([interpreter, *PYLINT_ARGS, str(path)], config=config)
            result.findings.extend(_pylint_findings(result, linted))

    for path in files:
        result.findings.extend(analyze_python_file(path))
    return result


def check_javascript(root: Path, config: Config) -> LanguageResult:
    """Syntax-check each script with ``node --check`` and optionally run it."""

    result = LanguageResult(language=Language.JAVASCRIPT)
    for path in iter_language_files(root, Language.JAVASCRIPT, config):
        file_str = str(path)
        try:
            checked = _run(["node", "--check", file_str], config=config)
        except FileNotFoundError:
            return _unavailable(result, "node")
        result.checked_files.append(path)
        if checked.returncode != 0:
            result.findings.extend(process_js_error(checked.stderr, file_str))
            continue
        if not config.scan.run_files:
            continue
        executed = _run(["node", file_str], config=config, cwd=_working_dir(root))
        if executed.timed_out:
            _timed_out(result, path.name, config)
        elif executed.returncode != 0 and executed.stderr:
            result.findings.extend(process_js_error(executed.stderr, file_str))
    return result


def check_typescript(root: Path, config: Config) -> LanguageResult:
    """Type-check the project with ``npx tsc --noEmit``."""

    result = LanguageResult(language=Language.TYPESCRIPT)
    try:
        completed = _run(list(TSC_COMMAND), config=config, cwd=_working_dir(root))
    except FileNotFoundError:
        return _unavailable(result, "npx")
    if completed.timed_out:
        _timed_out(result, "tsc", config)
    elif completed.returncode != 0:
        result.findings.extend(process_compiler_errors(completed.stdout, Language.TYPESCRIPT))
    return result


def check_rust(root: Path, config: Config) -> LanguageResult:
    """Run ``cargo check`` when ``root`` holds a Cargo manifest."""

    result = LanguageResult(language=Language.RUST)
    workdir = _working_dir(root)
    if not (workdir / RUST_MANIFEST).exists():
        LOGGER.debug("no %s in %s; skipping cargo check", RUST_MANIFEST, workdir)
        return result
    try:
        completed = _run(list(CARGO_COMMAND), config=config, cwd=workdir)
    except FileNotFoundError:
        return _unavailable(result, "cargo")
    if completed.timed_out:
        _timed_out(result, "cargo check", config)
    elif completed.returncode != 0:
        result.findings.extend(process_compiler_errors(completed.stderr, Language.RUST))
    return result


LANGUAGE_CHECKS: Final[dict[Language, CheckFn]] = {
    Language.CPP: check_cpp,
    Language.PYTHON: check_python,
    Language.JAVASCRIPT: check_javascript,
    Language.TYPESCRIPT: check_typescript,
    Language.RUST: check_rust,
}


def check_language(root: Path, language: Language, config: Config) -> LanguageResult:
    """Dispatch to the toolchain check for ``language``.

    Args:
        root: Project root or single file.
        language: Language to check; :attr:`Language.UNKNOWN` yields an empty result.
        config: Scan configuration.

    Returns:
        LanguageResult: Findings and warnings for ``language``.
    """

    check = LANGUAGE_CHECKS.get(language)
    if check is None:
        return LanguageResult(language=language)
    LOGGER.debug("checking %s sources under %s", language.display_name, root)
    return check(root, config)


__all__ = [
    "LANGUAGE_CHECKS",
    "check_cpp",
    "check_javascript",
    "check_language",
    "check_python",
    "check_rust",
    "check_typescript",
]

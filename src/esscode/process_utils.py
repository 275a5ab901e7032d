# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Safe wrappers around ``subprocess`` execution."""

from __future__ import annotations

import logging
import shutil

# Bandit: subprocess usage is intentional; toolchains are launched from fixed
# argument lists and ``shell=True`` is never used.
import subprocess  # nosec B404
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Final

LOGGER = logging.getLogger(__name__)

TIMEOUT_RETURNCODE: Final[int] = 124
OUTPUT_ENCODING: Final[str] = "utf-8"
# Compiler output quotes source lines verbatim, so it may not be valid UTF-8.
OUTPUT_ERRORS: Final[str] = "replace"


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Captured outcome of a toolchain invocation."""

    args: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    @property
    def output(self) -> str:
        """Return stdout followed by stderr."""

        return f"{self.stdout}{self.stderr}"

    @property
    def timed_out(self) -> bool:
        return self.returncode == TIMEOUT_RETURNCODE


def _normalize_args(args: Sequence[str]) -> list[str]:
    if not args:
        msg = "subprocess command requires at least one argument"
        raise ValueError(msg)

    head, *rest = args
    head_path = Path(head)
    if head_path.is_absolute():
        return [str(head_path), *rest]

    resolved = shutil.which(head)
    if resolved is None:
        msg = f"Executable '{head}' was not found on PATH"
        raise FileNotFoundError(msg)
    return [resolved, *rest]


def _ensure_text(value: str | bytes | None) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return value.decode(OUTPUT_ENCODING, errors=OUTPUT_ERRORS)


def run_command(
    args: Sequence[str],
    *,
    cwd: Path | None = None,
    timeout: float | None = None,
) -> CommandResult:
    """Execute ``args`` and capture its text output.

    A non-zero exit status is returned, not raised; callers inspect
    ``returncode``. Invalid UTF-8 in the output is replaced with U+FFFD.

    Args:
        args: Command line; the executable is resolved through ``PATH``.
        cwd: Optional working directory.
        timeout: Seconds before the process is abandoned.

    Returns:
        CommandResult: Captured output. Timeouts are reported with return code 124.

    Raises:
        FileNotFoundError: If the executable is not installed.
    """

    normalized = _normalize_args(args)
    LOGGER.debug("running %s (cwd=%s)", " ".join(normalized), cwd)
    try:
        # Bandit: argument lists come from fixed toolchain tables.
        completed = subprocess.run(  # nosec B603
            normalized,
            cwd=str(cwd) if cwd is not None else None,
            check=False,
            capture_output=True,
            encoding=OUTPUT_ENCODING,
            errors=OUTPUT_ERRORS,
            timeout=timeout,
            stdin=subprocess.DEVNULL,
        )
    except subprocess.TimeoutExpired as exc:
        timeout_msg = f"Command timed out after {timeout:.1f}s" if timeout is not None else "Command timed out"
        stderr = _ensure_text(exc.stderr)
        return CommandResult(
            args=tuple(normalized),
            returncode=TIMEOUT_RETURNCODE,
            stdout=_ensure_text(exc.stdout),
            stderr=f"{stderr}\n{timeout_msg}" if stderr else timeout_msg,
        )
    return CommandResult(
        args=tuple(normalized),
        returncode=completed.returncode,
        stdout=_ensure_text(completed.stdout),
        stderr=_ensure_text(completed.stderr),
    )


__all__ = ["CommandResult", "TIMEOUT_RETURNCODE", "run_command"]

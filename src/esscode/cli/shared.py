# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared CLI state, errors and configuration helpers."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from ..config import Config, ConfigError, OutputConfig, load_config
from ..console import fail


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLIState:
    """Global presentation flags collected by the root callback."""

    no_color: bool = False
    no_emoji: bool = False
    verbose: bool = False

    def output_for(self, config: Config) -> OutputConfig:
        """Return ``config.output`` with command-line overrides applied."""

        return config.output.model_copy(
            update={
                "colors": config.output.colors and not self.no_color,
                "emoji": config.output.emoji and not self.no_emoji,
            },
        )


def get_state(ctx: typer.Context) -> CLIState:
    """Return the :class:`CLIState` stored on ``ctx``, creating one if needed."""

    root = ctx.find_root()
    if not isinstance(root.obj, CLIState):
        root.obj = CLIState()
    return root.obj


def load_cli_config(project_root: Path | None) -> Config:
    """Load configuration, converting :class:`ConfigError` into :class:`CLIError`."""

    try:
        return load_config(project_root)
    except ConfigError as exc:
        raise CLIError(str(exc), exit_code=2) from exc


def exit_with(error: CLIError, state: CLIState) -> typer.Exit:
    """Report ``error`` and return the matching :class:`typer.Exit`."""

    fail(str(error), use_emoji=not state.no_emoji, use_color=not state.no_color)
    return typer.Exit(code=error.exit_code)


__all__ = ["CLIError", "CLIState", "exit_with", "get_state", "load_cli_config"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typer application exposing the scan, analysis, catalogue and init commands."""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from .. import __version__
from ..config import example_config, global_config_path, project_config_path
from ..console import configure_logging, fail, hint, info, warn
from ..constants import CLI_NAME, PROJECT_NAME
from ..parsers import iter_diagnostics
from ..remediation import analyze_error
from ..reporting import render_analysis, render_scan_report, render_supported_patterns
from ..scanner import scan_project
from .shared import CLIError, exit_with, get_state, load_cli_config

LOGGER = logging.getLogger(__name__)

app = typer.Typer(
    name=CLI_NAME,
    help=f"{PROJECT_NAME} - smart error fixer for developers.",
    add_completion=False,
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{PROJECT_NAME} {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    no_color: bool = typer.Option(False, "--no-color", help="Disable ANSI colour output."),
    no_emoji: bool = typer.Option(False, "--no-emoji", help="Disable emoji prefixes."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Emit debug logging to stderr."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Analyse compiler and runtime errors and suggest fixes."""

    state = get_state(ctx)
    state.no_color = no_color
    state.no_emoji = no_emoji
    state.verbose = verbose
    configure_logging(verbose=verbose)


def _find_bug(ctx: typer.Context, path: Path, lang: str | None) -> None:
    state = get_state(ctx)
    try:
        project_root = path.expanduser()
        config = load_cli_config(project_root if project_root.is_dir() else project_root.parent)
    except CLIError as exc:
        raise exit_with(exc, state) from exc
    report = scan_project(path, lang, config)
    render_scan_report(report, state.output_for(config))


@app.command("find-bug")
def find_bug(
    ctx: typer.Context,
    path: Path = typer.Option(Path("."), "--path", "-p", help="Path to the project directory."),
    lang: str | None = typer.Option(None, "--lang", "-l", help="Specific language to check."),
) -> None:
    """Scan a project for errors."""

    _find_bug(ctx, path, lang)


@app.command("scan")
def scan(
    ctx: typer.Context,
    path: Path = typer.Option(Path("."), "--path", "-p", help="Path to the project directory."),
    lang: str | None = typer.Option(None, "--lang", "-l", help="Specific language to check."),
) -> None:
    """Alias for ``find-bug``."""

    _find_bug(ctx, path, lang)


def _bug(ctx: typer.Context, error: list[str] | None) -> None:
    state = get_state(ctx)
    try:
        config = load_cli_config(Path.cwd())
    except CLIError as exc:
        raise exit_with(exc, state) from exc
    output = state.output_for(config)
    error_text = " ".join(error or [])
    if not error_text.strip():
        fail("Please provide an error message", use_emoji=output.emoji, use_color=output.colors)
        hint(f'Usage: {CLI_NAME} bug "<paste your error here>"', use_emoji=output.emoji, use_color=output.colors)
        return
    if state.verbose:
        for extractor, diagnostic in iter_diagnostics(error_text):
            LOGGER.debug("%s extractor matched %s at %s", extractor.name, diagnostic.kind, diagnostic.location)
    render_analysis(analyze_error(error_text), output)


@app.command("bug", context_settings={"ignore_unknown_options": True})
def bug(
    ctx: typer.Context,
    error: list[str] | None = typer.Argument(None, help="The error message to analyse."),
) -> None:
    """Analyse a specific error message."""

    _bug(ctx, error)


@app.command("fix", context_settings={"ignore_unknown_options": True})
def fix(
    ctx: typer.Context,
    error: list[str] | None = typer.Argument(None, help="The error message to analyse."),
) -> None:
    """Alias for ``bug``."""

    _bug(ctx, error)


@app.command("list")
def list_patterns(ctx: typer.Context) -> None:
    """List supported error patterns."""

    state = get_state(ctx)
    try:
        config = load_cli_config(Path.cwd())
    except CLIError as exc:
        raise exit_with(exc, state) from exc
    render_supported_patterns(state.output_for(config))


@app.command("init")
def init(
    ctx: typer.Context,
    global_: bool = typer.Option(False, "--global", help="Create the global config instead of a local one."),
) -> None:
    """Initialise a configuration file."""

    state = get_state(ctx)
    use_emoji = not state.no_emoji
    use_color = not state.no_color
    config_path = global_config_path() if global_ else project_config_path(Path.cwd())
    if config_path.exists():
        warn(f"Config file already exists: {config_path}", use_emoji=use_emoji, use_color=use_color)
        hint("Delete it first if you want to create a new one", use_emoji=use_emoji, use_color=use_color)
        return
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(example_config(), encoding="utf-8")
    except OSError as exc:
        raise exit_with(CLIError(f"Unable to write {config_path}: {exc}"), state) from exc
    info(f"Created config file: {config_path}", use_emoji=use_emoji, use_color=use_color)
    hint(f"Edit this file to customize {PROJECT_NAME} behavior", use_emoji=use_emoji, use_color=use_color)


def main() -> None:
    """Console-script entry point."""

    app()


__all__ = ["app", "main"]

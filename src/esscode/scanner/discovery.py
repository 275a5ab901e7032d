# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Depth-limited source discovery honouring the configured ignore list."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from pathlib import Path

from ..config import Config
from ..constants import LANGUAGE_EXTENSIONS
from ..languages import languages_for_files
from ..models import Language


def walk_files(root: Path, config: Config) -> Iterator[Path]:
    """Yield files below ``root`` within ``config.scan.max_depth``.

    Files directly inside ``root`` are at depth one. Ignore entries are
    matched against the path relative to ``root`` so the location of the
    project itself never excludes it.

    Args:
        root: Directory to traverse.
        config: Configuration supplying depth and ignore settings.

    Yields:
        Path: Candidate files in traversal order.
    """

    if root.is_file():
        yield root
        return
    max_depth = config.scan.max_depth
    for dirpath, dirnames, filenames in os.walk(root):
        current = Path(dirpath)
        relative = current.relative_to(root)
        depth = len(relative.parts)
        if depth and config.should_ignore(relative):
            dirnames[:] = []
            continue
        if depth + 1 >= max_depth:
            dirnames[:] = []
        else:
            dirnames[:] = sorted(name for name in dirnames if not config.should_ignore(relative / name))
        for filename in sorted(filenames):
            if config.should_ignore(relative / filename):
                continue
            yield current / filename


def iter_source_files(root: Path, extensions: Iterable[str], config: Config) -> Iterator[Path]:
    """Yield files below ``root`` whose lowercased suffix is in ``extensions``."""

    wanted = frozenset(extensions)
    for path in walk_files(root, config):
        if path.suffix.lower() in wanted:
            yield path


def iter_language_files(root: Path, language: Language, config: Config) -> Iterator[Path]:
    """Yield source files belonging to ``language``."""

    yield from iter_source_files(root, LANGUAGE_EXTENSIONS.get(language.value, frozenset()), config)


def detect_languages(root: Path, config: Config) -> list[Language]:
    """Return languages present under ``root`` in first-seen order."""

    return languages_for_files(walk_files(root, config))


__all__ = ["detect_languages", "iter_language_files", "iter_source_files", "walk_files"]

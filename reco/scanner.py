"""Candidate enumeration: walk the source root and keep matching files."""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterator

from .errors import RootMissing, RootUnreadable
from .logger import get_logger
from .patterns import PatternMatcher, normalize_path

LOGGER_NAME = "scanner"


def check_root(root: Path) -> Path:
    """Return *root* if it is an existing directory, else raise ``RootMissing``."""

    try:
        if root.is_dir():
            return root
    except OSError as exc:
        raise RootMissing(f"directory {root} not accessible: {exc}", path=root) from exc
    raise RootMissing(f"directory {root} does not exist", path=root)


class FileScanner:
    """Yields file paths under a root that match a :class:`PatternMatcher`.

    In recursive mode the whole subtree is walked and patterns are tested
    against the full path. Otherwise only the immediate children of the root
    are listed and patterns are tested against the file name.
    """

    def __init__(
        self,
        matcher: PatternMatcher,
        *,
        recursive: bool = True,
        logger: logging.Logger | None = None,
    ) -> None:
        self.matcher = matcher
        self.recursive = recursive
        self.logger = logger or get_logger(LOGGER_NAME)

    def scan(self, root: Path) -> Iterator[Path]:
        """Lazily yield every matching file once, in walk order."""

        try:
            entries = self._list(root)
        except OSError as exc:
            raise RootUnreadable(f"reading base directory {root}: {exc}", path=root) from exc

        if not self.recursive:
            for entry in entries:
                if entry.is_file() and self.matcher.matches(entry.name):
                    yield root / entry.name
            return

        seen: set[str] = set()
        stack: list[list[os.DirEntry[str]]] = [entries]
        while stack:
            current = stack[-1]
            if not current:
                stack.pop()
                continue
            entry = current.pop(0)
            if entry.is_dir(follow_symlinks=False):
                try:
                    stack.append(self._list(Path(entry.path)))
                except OSError as exc:
                    self.logger.error("reading directory %s: %s", entry.path, exc)
                continue
            if not entry.is_file():
                continue
            path = normalize_path(entry.path)
            if path in seen:
                continue
            if self.matcher.matches(path):
                seen.add(path)
                yield Path(entry.path)

    @staticmethod
    def _list(directory: Path) -> list[os.DirEntry[str]]:
        with os.scandir(directory) as it:
            return sorted(it, key=lambda entry: entry.name)


__all__ = ["FileScanner", "check_root"]

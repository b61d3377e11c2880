"""Rename files into their destination directory."""

from __future__ import annotations

import errno
import logging
import os
from pathlib import Path

from .config import DuplicateStrategy
from .errors import AlreadyExists, MoveFailed
from .journal import ActionJournal
from .logger import get_logger
from .models import MoveResult
from .utils.fs import ensure_directory, unique_path

LOGGER_NAME = "mover"


class FileMover:
    """Move files by rename and journal each move.

    Contents are never copied: a cross-device rename fails with
    :class:`~reco.errors.MoveFailed` instead of falling back to a copy.
    """

    def __init__(
        self,
        journal: ActionJournal | None,
        *,
        dry_run: bool = False,
        strategy: DuplicateStrategy = DuplicateStrategy.ERROR,
        logger: logging.Logger | None = None,
    ) -> None:
        if journal is None and not dry_run:
            raise ValueError("a wet run needs an actions journal")
        self.journal = journal
        self.dry_run = dry_run
        self.strategy = strategy
        self.logger = logger or get_logger(LOGGER_NAME)

    def move(self, source: Path, destination_dir: Path, *, size: int = 0) -> MoveResult:
        source = Path(os.path.abspath(source))
        destination_dir = Path(os.path.abspath(destination_dir))
        target = destination_dir / source.name

        if self.dry_run:
            self.logger.info("{dry} not moving %s -> %s", source, destination_dir)
            return MoveResult(source, target, performed=False, size=size)

        if target == source:
            self.logger.debug("%s already in place", source)
            return MoveResult(source, target, performed=False, size=size)

        self.logger.debug("moving %s -> %s", source, destination_dir)
        try:
            ensure_directory(destination_dir)
        except OSError as exc:
            raise MoveFailed(f"creating directory {destination_dir}: {exc}", path=source) from exc

        target = self._resolve_target(source, target)
        try:
            if self.strategy == DuplicateStrategy.OVERWRITE:
                os.replace(source, target)
            else:
                os.rename(source, target)
        except OSError as exc:
            if exc.errno == errno.EXDEV:
                raise MoveFailed(f"cross-device move not supported: {source} -> {target}", path=source) from exc
            raise MoveFailed(f"renaming {source} -> {target}: {exc}", path=source) from exc

        try:
            os.stat(target)
        except OSError as exc:
            raise MoveFailed(f"moved file missing at {target}: {exc}", path=source) from exc

        self.journal.record(source, target)
        return MoveResult(source, target, performed=True, size=size)

    def _resolve_target(self, source: Path, target: Path) -> Path:
        if not os.path.lexists(target):
            return target
        if self.strategy == DuplicateStrategy.RENAME:
            renamed = unique_path(target)
            self.logger.debug("%s exists, using %s", target, renamed.name)
            return renamed
        if self.strategy == DuplicateStrategy.OVERWRITE:
            return target
        raise AlreadyExists(f"destination {target} already exists", path=source)


__all__ = ["FileMover"]

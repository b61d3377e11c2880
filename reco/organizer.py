"""Main reco orchestration."""

from __future__ import annotations

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import BinaryIO

from .classifier import classify
from .config import Configuration
from .errors import (
    DEMOTABLE,
    CloseFailed,
    DecodeFailed,
    NoCandidates,
    OpenFailed,
    RecoError,
    RootMissing,
    StatFailed,
)
from .filters import SizeGate
from .imaging import ImageGate
from .journal import ActionJournal
from .logger import PRINT, get_logger
from .models import ImageMetadata, PlacementPlan, RunSummary
from .mover import FileMover
from .patterns import PatternMatcher
from .planner import plan_destination
from .scanner import FileScanner, check_root
from .utils.fs import ensure_directory, format_bytes

LOGGER_NAME = "organizer"


class Organizer:
    """Coordinate enumeration, gating, planning and moving.

    Components raise typed :class:`~reco.errors.RecoError` subclasses; this
    class alone decides whether a failure ends the run or only skips a file.
    """

    def __init__(self, config: Configuration, *, logger: logging.Logger | None = None) -> None:
        self.config = config
        self.logger = logger or get_logger(LOGGER_NAME)
        self.image_gate = ImageGate(dimension_min=config.dimension_min, size_min=config.size_min)
        self.size_gate = SizeGate(config.size)

    def collect(self) -> list[Path]:
        """Return the candidate files, raising if there are none."""

        if self.config.dir is None:
            raise RootMissing("-d or --dir flag is required")
        root = check_root(Path(self.config.dir))
        matcher = PatternMatcher.from_string(self.config.ext)
        scanner = FileScanner(matcher, recursive=self.config.recursive)
        self.logger.debug("looking for %s in dir: %s", ", ".join(matcher.patterns), root)
        files = list(scanner.scan(root))
        self.logger.info("finished getting %d files", len(files))
        self.logger.debug("files: %s", [str(f) for f in files])
        if not files:
            raise NoCandidates(f"no files found with patterns {list(matcher.patterns)}", path=root)
        return files

    def run(self) -> RunSummary:
        config = self.config
        self.logger.info("starting reco")
        self.logger.log(PRINT, "verbose: %d, dry: %s", config.verbose, config.dry)

        files = self.collect()
        summary = RunSummary(candidates=len(files))

        journal: ActionJournal | None = None
        if not config.dry:
            try:
                ensure_directory(Path(config.output))
            except OSError as exc:
                self.logger.error("error while making dir %s: %s", config.output, exc)
            journal = ActionJournal(config.actions).open()

        try:
            mover = FileMover(journal, dry_run=config.dry, strategy=config.duplicates)
            for path in files:
                self._process(path, mover, summary)
        finally:
            if journal is not None:
                journal.close()

        self.logger.info("processed %d files (%s)", summary.moved, format_bytes(summary.moved_bytes))
        return summary

    # ------------------------------------------------------------------
    # Per-file pipeline
    def _process(self, path: Path, mover: FileMover, summary: RunSummary) -> None:
        try:
            handle = self._open(path)
        except OpenFailed as exc:
            self._demote_or_raise(exc, summary)
            return

        try:
            placement = self._inspect(path, handle, summary)
        finally:
            self._close(path, handle)
        if placement is None:
            return

        plan, size = placement
        destination = plan.resolve(Path(self.config.output))
        try:
            result = mover.move(path, destination, size=size)
        except DEMOTABLE as exc:
            self._demote_or_raise(exc, summary)
            return
        if not result.performed and not self.config.dry:
            return

        summary.moved += 1
        summary.moved_bytes += size
        summary.categories[plan.category.value] += 1

    def _inspect(self, path: Path, handle: BinaryIO, summary: RunSummary) -> tuple[PlacementPlan, int] | None:
        category = classify(path)

        if self.image_gate.handles(str(path)):
            try:
                metadata = self.image_gate.inspect(str(path), handle)
            except DecodeFailed as exc:
                if not self.config.noerrstop:
                    self._skip_with_error(exc, summary)
                    return None
                metadata = ImageMetadata.fallback()
                self.logger.debug("%s; assuming %dx%d", exc, metadata.width, metadata.height)
            if not self.image_gate.accepts(metadata):
                self.logger.debug("pixel size of %s too small (%dx%d)", path, metadata.width, metadata.height)
                summary.skipped += 1
                return None

        try:
            stat = os.fstat(handle.fileno())
        except OSError as exc:
            self._skip_with_error(StatFailed(f"getting stats for {path}: {exc}", path=path), summary)
            return None

        if not self.size_gate.accepts(stat.st_size):
            self.logger.debug("skipping file %s: %s too small", path, format_bytes(stat.st_size))
            summary.skipped += 1
            return None

        modified_at = datetime.fromtimestamp(stat.st_mtime)
        plan = plan_destination(category, os.path.dirname(path), modified_at, self.config)
        return plan, stat.st_size

    # ------------------------------------------------------------------
    # Helpers
    @staticmethod
    def _open(path: Path) -> BinaryIO:
        try:
            return open(path, "rb")
        except OSError as exc:
            raise OpenFailed(f"opening {path}: {exc}", path=path) from exc

    @staticmethod
    def _close(path: Path, handle: BinaryIO) -> None:
        try:
            handle.close()
        except OSError as exc:
            raise CloseFailed(f"closing file {path}: {exc}", path=path) from exc

    def _skip_with_error(self, exc: RecoError, summary: RunSummary) -> None:
        self.logger.error("%s", exc)
        summary.skipped += 1
        summary.errors.append((exc.path or "?", str(exc)))

    def _demote_or_raise(self, exc: RecoError, summary: RunSummary) -> None:
        if not self.config.noerrstop:
            raise exc
        self._skip_with_error(exc, summary)


__all__ = ["Organizer"]

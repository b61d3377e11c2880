"""Actions file: a CSV journal of every successful move."""
from __future__ import annotations

import csv
import os
from pathlib import Path
from typing import TextIO

from .errors import ManifestError
from .models import ManifestEntry

_DIALECT = {"quoting": csv.QUOTE_ALL, "lineterminator": "\n"}


class ActionJournal:
    """Append-only writer for ``"<previous>","<new>"`` lines.

    The file is truncated when opened. Other components only get the
    :meth:`record` capability.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._handle: TextIO | None = None
        self._writer = None
        self.entries = 0

    def open(self) -> ActionJournal:
        try:
            self._handle = self.path.open("w", encoding="utf-8", newline="")
        except OSError as exc:
            raise ManifestError(f"could not create actions file {self.path}: {exc}", path=self.path) from exc
        self._writer = csv.writer(self._handle, **_DIALECT)
        return self

    def record(self, previous: str | Path, new: str | Path) -> None:
        if self._writer is None:
            raise ManifestError(f"actions file {self.path} is not open", path=self.path)
        try:
            self._writer.writerow([os.fspath(previous), os.fspath(new)])
        except OSError as exc:
            raise ManifestError(f"writing actions file {self.path}: {exc}", path=self.path) from exc
        self.entries += 1

    def close(self) -> None:
        if self._handle is None:
            return
        handle, self._handle, self._writer = self._handle, None, None
        try:
            try:
                handle.flush()
                os.fsync(handle.fileno())
            finally:
                handle.close()
        except OSError as exc:
            raise ManifestError(f"closing actions file {self.path}: {exc}", path=self.path) from exc

    def __enter__(self) -> ActionJournal:
        return self.open()

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def load_manifest(path: str | Path) -> list[ManifestEntry]:
    """Read an actions file back into :class:`ManifestEntry` objects."""

    entries: list[ManifestEntry] = []
    with Path(path).open("r", encoding="utf-8", newline="") as handle:
        for row in csv.reader(handle):
            if not row:
                continue
            if len(row) != 2:
                raise ManifestError(f"malformed actions line in {path}: {row!r}", path=path)
            entries.append(ManifestEntry(previous=Path(row[0]), new=Path(row[1])))
    return entries


__all__ = ["ActionJournal", "load_manifest"]

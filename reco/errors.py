"""Typed failures raised by reco components.

Every error carries a ``fatal`` flag. Components only raise; the
:class:`~reco.organizer.Organizer` decides whether a failure aborts the run
or is logged and skipped.
"""
from __future__ import annotations

from pathlib import Path


class RecoError(Exception):
    """Base error for the project."""

    fatal: bool = True

    def __init__(self, message: str, *, path: str | Path | None = None) -> None:
        super().__init__(message)
        self.path = str(path) if path is not None else None


# run-level failures, never demoted
class RootMissing(RecoError):
    pass


class RootUnreadable(RecoError):
    pass


class MalformedPattern(RecoError):
    pass


class NoPattern(RecoError):
    pass


class NoCandidates(RecoError):
    pass


class ManifestError(RecoError):
    pass


class CloseFailed(RecoError):
    pass


# per-file failures, demoted by ``noerrstop``
class OpenFailed(RecoError):
    pass


class MoveFailed(RecoError):
    pass


class AlreadyExists(MoveFailed):
    pass


# per-file failures that skip the file
class DecodeFailed(RecoError):
    fatal = False


class StatFailed(RecoError):
    fatal = False


DEMOTABLE = (OpenFailed, MoveFailed)

__all__ = [
    "AlreadyExists",
    "CloseFailed",
    "DEMOTABLE",
    "DecodeFailed",
    "MalformedPattern",
    "ManifestError",
    "MoveFailed",
    "NoCandidates",
    "NoPattern",
    "OpenFailed",
    "RecoError",
    "RootMissing",
    "RootUnreadable",
    "StatFailed",
]

"""Core dataclasses shared across reco modules."""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath

from .config import Category

FALLBACK_DIMENSION = 3000


@dataclass(frozen=True, slots=True)
class ImageMetadata:
    """Pixel geometry read from an image header."""

    width: int
    height: int

    @property
    def pixels(self) -> int:
        return self.width * self.height

    @classmethod
    def fallback(cls) -> ImageMetadata:
        """Dimensions assumed for an undecodable image under ``noerrstop``."""

        return cls(FALLBACK_DIMENSION, FALLBACK_DIMENSION)


@dataclass(frozen=True, slots=True)
class PlacementPlan:
    """Destination directory of a file, relative to the output root."""

    category: Category
    segments: tuple[str, ...] = ()

    @property
    def relative(self) -> PurePosixPath:
        return PurePosixPath(self.category.value, *self.segments)

    def resolve(self, output_root: Path) -> Path:
        return output_root.joinpath(*self.relative.parts)

    def __str__(self) -> str:
        return str(self.relative)


@dataclass(frozen=True, slots=True)
class ManifestEntry:
    """One successful rename as recorded in the actions file."""

    previous: Path
    new: Path


@dataclass(slots=True)
class MoveResult:
    """Outcome of :meth:`reco.mover.FileMover.move`."""

    source: Path
    destination: Path
    performed: bool
    size: int = 0


@dataclass(slots=True)
class RunSummary:
    """Counters maintained by the pipeline driver."""

    candidates: int = 0
    moved: int = 0
    moved_bytes: int = 0
    skipped: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    categories: Counter[str] = field(default_factory=Counter)

    @property
    def success(self) -> bool:
        return not self.errors


__all__ = [
    "FALLBACK_DIMENSION",
    "ImageMetadata",
    "ManifestEntry",
    "MoveResult",
    "PlacementPlan",
    "RunSummary",
]

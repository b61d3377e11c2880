"""Configuration and enumerations for reco."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

MB_TO_BYTES = 1000 * 1000

DEFAULT_OUTPUT = "./recovered"
DEFAULT_PATTERNS = "*.jpg,*.jpeg,*.mov"
DEFAULT_ACTIONS = "reco.csv"


class Category(str, Enum):
    """Top-level destination directories."""

    PHOTOS = "photos"
    MOVIES = "movies"
    AUDIO = "audio"
    MEDIA = "media"
    ZIPS = "zips"
    DOCS = "docs"
    PDF = "pdf"
    OTHER = "other"


class DuplicateStrategy(str, Enum):
    """Supported strategies when the destination name is already taken."""

    ERROR = "error"
    RENAME = "rename"
    OVERWRITE = "overwrite"


@dataclass(frozen=True, slots=True)
class Configuration:
    """Options that control a run. Built once by the CLI, never mutated."""

    dir: Path | None = None
    output: Path = Path(DEFAULT_OUTPUT)
    ext: str = DEFAULT_PATTERNS
    recursive: bool = True
    actions: Path = Path(DEFAULT_ACTIONS)
    dry: bool = False
    noerrstop: bool = False
    keepfolder: bool = False
    year: bool = True
    month: bool = False
    dimension_min: int = 300
    size: int = 0
    size_min: int = 100000
    verbose: int = 2
    duplicates: DuplicateStrategy = DuplicateStrategy.ERROR
    interactive: bool = False

    @property
    def min_bytes(self) -> int:
        """Byte threshold derived from ``size`` (base 1000)."""

        return self.size * MB_TO_BYTES

"""Extension based classification into destination categories."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

from .config import Category

RAW_PHOTO_EXTENSIONS = (".nef", ".cr2", ".crw", ".erf", ".3fr", ".kdc", ".mos", ".nrw", ".tiff", ".tif")
RASTER_PHOTO_EXTENSIONS = (".jpeg", ".jpg", ".png", ".bmp")

_CATEGORY_EXTENSIONS: Mapping[Category, tuple[str, ...]] = {
    Category.PHOTOS: RAW_PHOTO_EXTENSIONS + RASTER_PHOTO_EXTENSIONS,
    Category.MOVIES: (".mov", ".3gp", ".mp4", ".mpeg", ".wmv", ".mts", ".avi", ".m4p", ".m4b", ".m4v", ".m4a", ".m4r", ".f4v"),
    Category.AUDIO: (".wav", ".mp3"),
    Category.MEDIA: (".wmf", ".flv", ".svg", ".ai", ".gif", ".thm"),
    Category.ZIPS: (".zip",),
    Category.DOCS: (".doc", ".docx", ".ppt", ".pptx", ".xls", ".xlsx"),
    Category.PDF: (".pdf",),
}

EXTENSION_CATEGORIES: Mapping[str, Category] = {
    suffix: category
    for category, suffixes in _CATEGORY_EXTENSIONS.items()
    for suffix in suffixes
}


def normalise_suffix(suffix: str) -> str:
    if not suffix:
        return suffix
    if not suffix.startswith("."):
        return f".{suffix.lower()}"
    return suffix.lower()


def extension_of(path: str | Path) -> str:
    """Lower-cased extension of *path* including the dot, or ``""``."""

    return normalise_suffix(os.path.splitext(os.fspath(path))[1])


def classify(path: str | Path) -> Category:
    """Return the category of *path*; unknown extensions map to ``other``."""

    return EXTENSION_CATEGORIES.get(extension_of(path), Category.OTHER)


def requires_image_gate(path: str | Path) -> bool:
    return extension_of(path) in RASTER_PHOTO_EXTENSIONS


__all__ = [
    "EXTENSION_CATEGORIES",
    "RASTER_PHOTO_EXTENSIONS",
    "RAW_PHOTO_EXTENSIONS",
    "classify",
    "extension_of",
    "normalise_suffix",
    "requires_image_gate",
]

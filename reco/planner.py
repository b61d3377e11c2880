"""Planner component: compose the destination directory of a file."""
from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path

from .config import Category, Configuration
from .models import PlacementPlan

# fixed English names, independent of the process locale
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def _clean(path: str | Path) -> str:
    return os.path.normpath(os.fspath(path))


def plan_destination(
    category: Category,
    source_folder: str | Path,
    modified_at: datetime,
    config: Configuration,
) -> PlacementPlan:
    """Return ``<category>[/<year>][/<month>][/<source folder name>]``.

    The source folder name is only appended when ``keepfolder`` is set, the
    folder is not the source root itself, and its name differs from the last
    segment planned so far (so ``2011/2011`` never happens).
    """

    segments: list[str] = []
    if config.year:
        segments.append(f"{modified_at.year}")
    if config.month:
        segments.append(MONTH_NAMES[modified_at.month - 1])

    if config.keepfolder:
        folder = _clean(source_folder)
        basename = os.path.basename(folder)
        last = segments[-1] if segments else category.value
        root = _clean(config.dir) if config.dir is not None else None
        if basename and basename != last and folder != root:
            segments.append(basename)

    return PlacementPlan(category=category, segments=tuple(segments))


__all__ = ["MONTH_NAMES", "plan_destination"]

"""Filesystem helpers used by reco."""
from __future__ import annotations

from pathlib import Path

DIRECTORY_MODE = 0o755

_BYTE_UNIT = 1000
_BYTE_PREFIXES = "kMGTPE"


def ensure_directory(path: Path) -> Path:
    """Ensure that *path* exists as a directory and return it."""

    path.mkdir(mode=DIRECTORY_MODE, parents=True, exist_ok=True)
    return path


def unique_path(base: Path) -> Path:
    """Return *base*, or ``stem_N.suffix`` with the first free counter."""

    candidate = base
    counter = 1
    while candidate.exists():
        candidate = candidate.with_name(f"{base.stem}_{counter}{base.suffix}")
        counter += 1
    return candidate


def format_bytes(size: int) -> str:
    """Format *size* with base-1000 units, e.g. ``1.5 MB``."""

    if size < _BYTE_UNIT:
        return f"{size} B"
    div, exp = _BYTE_UNIT, 0
    n = size // _BYTE_UNIT
    while n >= _BYTE_UNIT:
        div *= _BYTE_UNIT
        exp += 1
        n //= _BYTE_UNIT
    return f"{size / div:.1f} {_BYTE_PREFIXES[exp]}B"


__all__ = ["DIRECTORY_MODE", "ensure_directory", "format_bytes", "unique_path"]

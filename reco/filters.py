"""Acceptance rules applied before a file is placed."""

from __future__ import annotations

from .config import MB_TO_BYTES
from .models import ImageMetadata


def accepts_dimensions(metadata: ImageMetadata, *, dimension_min: int, size_min: int) -> bool:
    """Return True if both axes reach *dimension_min* and the pixel count reaches *size_min*."""

    return (
        metadata.width >= dimension_min
        and metadata.height >= dimension_min
        and metadata.pixels >= size_min
    )


class SizeGate:
    """Reject files smaller than ``size`` megabytes (base 1000)."""

    def __init__(self, size_mb: int) -> None:
        self.size_mb = size_mb
        self.min_bytes = size_mb * MB_TO_BYTES

    def accepts(self, file_size: int) -> bool:
        return file_size >= self.min_bytes


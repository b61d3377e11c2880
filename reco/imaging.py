"""Header-only image decoding used to filter small pictures.

Only the image header is parsed: Pillow's :func:`PIL.Image.open` is lazy and
reports ``size`` without loading pixel data.
"""
from __future__ import annotations

import logging
from typing import BinaryIO, Callable, Mapping

from PIL import Image, UnidentifiedImageError

from .classifier import extension_of
from .errors import DecodeFailed
from .filters import accepts_dimensions
from .logger import get_logger
from .models import ImageMetadata

LOGGER_NAME = "imaging"

# Pixels are never materialized, so the decompression bomb guard does not apply.
Image.MAX_IMAGE_PIXELS = None

HeaderDecoder = Callable[[BinaryIO], ImageMetadata]


def _decoder(formats: tuple[str, ...]) -> HeaderDecoder:
    def decode(handle: BinaryIO) -> ImageMetadata:
        handle.seek(0)
        with Image.open(handle, formats=list(formats)) as img:
            width, height = img.size
        return ImageMetadata(width=width, height=height)

    decode.__name__ = f"decode_{'_'.join(f.lower() for f in formats)}"
    return decode


# .jpg/.jpeg/.png are sniffed among JPEG and PNG; .bmp only as BMP.
_JPEG_OR_PNG = _decoder(("JPEG", "PNG"))
_BMP = _decoder(("BMP",))

DECODERS: Mapping[str, HeaderDecoder] = {
    ".jpg": _JPEG_OR_PNG,
    ".jpeg": _JPEG_OR_PNG,
    ".png": _JPEG_OR_PNG,
    ".bmp": _BMP,
}


class ImageGate:
    """Accept or reject raster images by their header dimensions."""

    def __init__(
        self,
        *,
        dimension_min: int,
        size_min: int,
        decoders: Mapping[str, HeaderDecoder] | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.dimension_min = dimension_min
        self.size_min = size_min
        self.decoders = decoders if decoders is not None else DECODERS
        self.logger = logger or get_logger(LOGGER_NAME)

    def handles(self, path: str) -> bool:
        return extension_of(path) in self.decoders

    def inspect(self, path: str, handle: BinaryIO) -> ImageMetadata:
        """Decode the header of the open *handle*; raise ``DecodeFailed`` on error."""

        decoder = self.decoders[extension_of(path)]
        try:
            return decoder(handle)
        except (UnidentifiedImageError, OSError, SyntaxError, ValueError, EOFError) as exc:
            raise DecodeFailed(f"decoding: {path}: {exc}", path=path) from exc

    def accepts(self, metadata: ImageMetadata) -> bool:
        return accepts_dimensions(metadata, dimension_min=self.dimension_min, size_min=self.size_min)


__all__ = ["DECODERS", "HeaderDecoder", "ImageGate"]

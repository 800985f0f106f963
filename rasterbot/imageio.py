"""Choosing an image format by file extension and loading or saving by type."""

from __future__ import annotations

import os
from enum import IntEnum

from rasterbot import bmp
from rasterbot.bitmap import Bitmap

UNSUPPORTED_TYPE_ERROR = 0
_UNSUPPORTED_MESSAGE = "Unsupported image type"


class ImageType(IntEnum):
    """Image file formats known by extension."""

    INVALID = 0
    PNG = 1
    BMP = 2


class UnsupportedImageTypeError(ValueError):
    """Raised when an image type cannot be loaded or saved."""

    code = UNSUPPORTED_TYPE_ERROR

    def __init__(self, image_type: object) -> None:
        self.image_type = image_type
        super().__init__(f"{_UNSUPPORTED_MESSAGE}: {image_type!r}")


def _as_type(image_type: int) -> ImageType:
    try:
        return ImageType(image_type)
    except ValueError:
        return ImageType.INVALID


def get_extension(fname: str | None) -> str | None:
    """Return the text after the last dot of ``fname``.

    The first character is never taken as the dot; with no dot after it,
    everything from the second character on is returned.
    """
    if not fname:
        return None
    dot = fname.rfind(".", 1)
    return fname[max(dot, 0) + 1:]


def image_type_from_extension(extension: str) -> ImageType:
    """Return the image type named by a file extension, ignoring case."""
    lowered = extension.lower()
    if lowered == "png":
        return ImageType.PNG
    if lowered == "bmp":
        return ImageType.BMP
    return ImageType.INVALID


def load_bitmap(path: str | os.PathLike[str], image_type: int) -> Bitmap:
    """Load the image at ``path`` as the given type."""
    if _as_type(image_type) is ImageType.BMP:
        return bmp.read_bmp(path)
    raise UnsupportedImageTypeError(image_type)


def save_bitmap(bitmap: Bitmap, path: str | os.PathLike[str], image_type: int) -> None:
    """Save ``bitmap`` to ``path`` as the given type."""
    if _as_type(image_type) is ImageType.BMP:
        bmp.save_bmp(bitmap, path)
        return
    raise UnsupportedImageTypeError(image_type)


def error_string(image_type: int, code: int) -> str | None:
    """Return the description of an error code for the given image type."""
    if _as_type(image_type) is ImageType.BMP:
        return bmp.error_string(code)
    return _UNSUPPORTED_MESSAGE
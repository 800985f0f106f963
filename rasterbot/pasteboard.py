"""Copying bitmaps to the clipboard as device-independent bitmaps."""

from __future__ import annotations

from collections.abc import Callable
from enum import IntEnum

from rasterbot import bmp
from rasterbot.bitmap import Bitmap

# Size of the BMP file header that a clipboard DIB leaves out.
_FILE_HEADER_SIZE = 14


class PasteErrorCode(IntEnum):
    """Reasons a bitmap could not be copied to the clipboard."""

    NO_ERROR = 0
    GENERIC = 1
    OPEN = 2
    CLEAR = 3
    DATA = 4
    PASTE = 5
    UNSUPPORTED = 6


_MESSAGES = {
    PasteErrorCode.OPEN: "Could not open pasteboard",
    PasteErrorCode.CLEAR: "Could not clear pasteboard",
    PasteErrorCode.DATA: "Could not create image data from bitmap",
    PasteErrorCode.PASTE: "Could not paste data",
    PasteErrorCode.UNSUPPORTED: "Unsupported platform",
}


def paste_error_string(code: int) -> str | None:
    """Return the description of a paste error code, or None if it has none."""
    try:
        return _MESSAGES.get(PasteErrorCode(code))
    except ValueError:
        return None


class PasteError(Exception):
    """Raised when copying to the clipboard fails; ``code`` tells why."""

    def __init__(self, code: int) -> None:
        self.code = PasteErrorCode(code)
        super().__init__(paste_error_string(self.code) or "Could not copy bitmap")


def bitmap_to_dib(bitmap: Bitmap) -> bytes:
    """Return ``bitmap`` as a BMP image without its file header."""
    return bmp.bitmap_to_bmp_data(bitmap)[_FILE_HEADER_SIZE:]


def copy_bitmap_to_pasteboard(
    bitmap: Bitmap, writer: Callable[[bytes], object] | None = None
) -> None:
    """Hand ``bitmap`` as DIB data to ``writer``, which puts it on the clipboard.

    Without a writer there is no clipboard to use. Raises PasteError.
    """
    if writer is None:
        raise PasteError(PasteErrorCode.UNSUPPORTED)
    try:
        data = bitmap_to_dib(bitmap)
    except ValueError as exc:
        raise PasteError(PasteErrorCode.DATA) from exc
    try:
        writer(data)
    except OSError as exc:
        raise PasteError(PasteErrorCode.PASTE) from exc
"""Reading and writing uncompressed 24-bit and 32-bit BMP files."""

from __future__ import annotations

import os
import struct
from enum import IntEnum
from typing import BinaryIO

from rasterbot.bitmap import Bitmap

BMP_MAGIC = 0x4D42
_COMPRESSION_RGB = 0

_FILE_HEADER = struct.Struct("<HIII")
_INFO_HEADER = struct.Struct("<IiiHHIIiiII")
_CORE_HEADER = struct.Struct("<IHHHH")
_HEADER_SIZE = struct.Struct("<I")

_WINDOWS_HEADER_SIZES = (40, 108, 124)
_CORE_HEADER_SIZE = 12


class BMPErrorCode(IntEnum):
    """Reasons a BMP file could not be read."""

    GENERIC = 0
    ACCESS = 1
    INVALID_KEY = 2
    UNSUPPORTED_HEADER = 3
    INVALID_COLOR_PANES = 4
    UNSUPPORTED_COLOR_DEPTH = 5
    UNSUPPORTED_COMPRESSION = 6
    INVALID_PIXEL_DATA = 7


_MESSAGES = {
    BMPErrorCode.ACCESS: "Could not open file",
    BMPErrorCode.INVALID_KEY: "Not a BMP file",
    BMPErrorCode.UNSUPPORTED_HEADER: "Unsupported BMP header",
    BMPErrorCode.INVALID_COLOR_PANES: "Invalid number of color panes in BMP file",
    BMPErrorCode.UNSUPPORTED_COLOR_DEPTH: "Unsupported color depth in BMP file",
    BMPErrorCode.UNSUPPORTED_COMPRESSION: "Unsupported file compression in BMP file",
    BMPErrorCode.INVALID_PIXEL_DATA: "Could not read BMP pixel data",
}


def error_string(code: int) -> str | None:
    """Return the description of a BMP error code, or None if it has none."""
    try:
        return _MESSAGES.get(BMPErrorCode(code))
    except ValueError:
        return None


class BMPReadError(Exception):
    """Raised when a BMP file cannot be read; ``code`` tells why."""

    def __init__(self, code: int) -> None:
        self.code = BMPErrorCode(code)
        super().__init__(error_string(self.code) or "Could not read BMP file")


def _row_stride(width: int, bytes_per_pixel: int) -> int:
    """Bytes per row, aligned to four bytes as BMP requires."""
    return (width * bytes_per_pixel + 3) & ~3


def _read_exact(fp: BinaryIO, size: int) -> bytes:
    data = fp.read(size)
    if len(data) < size:
        raise BMPReadError(BMPErrorCode.GENERIC)
    return data


def flip_rows(data: bytes | bytearray, height: int, bytewidth: int) -> bytearray:
    """Return ``data`` with its first ``height`` rows in reverse order."""
    if height <= 1:
        return bytearray(data)
    rows = (data[row * bytewidth:(row + 1) * bytewidth] for row in range(height))
    flipped = bytearray().join(reversed(list(rows)))
    flipped.extend(data[height * bytewidth:])
    return flipped


def _read_from(fp: BinaryIO) -> Bitmap:
    magic, _size, _reserved, image_offset = _FILE_HEADER.unpack(
        _read_exact(fp, _FILE_HEADER.size)
    )
    if magic != BMP_MAGIC:
        raise BMPReadError(BMPErrorCode.INVALID_KEY)

    (header_size,) = _HEADER_SIZE.unpack(_read_exact(fp, _HEADER_SIZE.size))
    fp.seek(-_HEADER_SIZE.size, os.SEEK_CUR)

    if header_size == _CORE_HEADER_SIZE:
        _, width, height, planes, bits_per_pixel = _CORE_HEADER.unpack(
            _read_exact(fp, _CORE_HEADER.size)
        )
        compression = _COMPRESSION_RGB
    elif header_size in _WINDOWS_HEADER_SIZES:
        # Only the common v3 part is parsed; later fields are skipped.
        fields = _INFO_HEADER.unpack(_read_exact(fp, _INFO_HEADER.size))
        width, height, planes, bits_per_pixel, compression = fields[1:6]
    else:
        raise BMPReadError(BMPErrorCode.UNSUPPORTED_HEADER)

    if planes != 1:
        raise BMPReadError(BMPErrorCode.INVALID_COLOR_PANES)
    if bits_per_pixel not in (24, 32):
        raise BMPReadError(BMPErrorCode.UNSUPPORTED_COLOR_DEPTH)
    if compression != _COMPRESSION_RGB:
        raise BMPReadError(BMPErrorCode.UNSUPPORTED_COMPRESSION)

    if fp.tell() != image_offset:
        fp.seek(image_offset)

    bytes_per_pixel = bits_per_pixel // 8
    bytewidth = _row_stride(width, bytes_per_pixel)
    rows = abs(height)
    size = bytewidth * rows
    if size <= 0:
        raise BMPReadError(BMPErrorCode.INVALID_PIXEL_DATA)
    pixels = fp.read(size)
    if len(pixels) < size:
        raise BMPReadError(BMPErrorCode.INVALID_PIXEL_DATA)

    buffer = bytearray(pixels)
    # Bitmaps are kept top row first; a positive height means bottom-up rows.
    if height >= 0:
        buffer = flip_rows(buffer, rows, bytewidth)

    return Bitmap(buffer, width, rows, bytewidth, bits_per_pixel, bytes_per_pixel)


def read_bmp(path: str | os.PathLike[str]) -> Bitmap:
    """Read an uncompressed 24-bit or 32-bit BMP file.

    Windows v3/v4/v5 and OS/2 v1 headers are understood. Raises
    :class:`BMPReadError` on failure.
    """
    try:
        fp = open(path, "rb")
    except OSError as exc:
        raise BMPReadError(BMPErrorCode.ACCESS) from exc
    with fp:
        return _read_from(fp)


def bitmap_to_bmp_data(bitmap: Bitmap) -> bytes:
    """Return the contents of a Windows v3 BMP file holding ``bitmap``."""
    if bitmap.buffer is None:
        raise ValueError("bitmap has no image data")
    stride = _row_stride(bitmap.width, bitmap.bytes_per_pixel)
    image_size = stride * bitmap.height
    image_offset = _FILE_HEADER.size + _INFO_HEADER.size

    file_header = _FILE_HEADER.pack(
        BMP_MAGIC, _INFO_HEADER.size + image_size, 0, image_offset
    )
    info_header = _INFO_HEADER.pack(
        _INFO_HEADER.size,
        bitmap.width,
        -bitmap.height,  # rows are stored top first
        1,
        bitmap.bits_per_pixel,
        _COMPRESSION_RGB,
        image_size,
        0,
        0,
        0,
        0,
    )

    row_length = bitmap.width * bitmap.bytes_per_pixel
    buffer = bytes(bitmap.buffer)
    rows = (
        buffer[start:start + row_length].ljust(stride, b"\0")
        for start in (row * bitmap.bytewidth for row in range(bitmap.height))
    )
    return file_header + info_header + b"".join(rows)


def save_bmp(bitmap: Bitmap, path: str | os.PathLike[str]) -> None:
    """Write ``bitmap`` to ``path`` as a Windows v3 BMP file."""
    data = bitmap_to_bmp_data(bitmap)
    with open(path, "wb") as fp:
        fp.write(data)
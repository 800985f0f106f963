"""Raw raster bitmaps, points, rectangles and colour comparison."""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass

# Largest possible distance between two colours in RGB space.
_MAX_COLOR_DISTANCE = math.sqrt(3) * 255.0


@dataclass(frozen=True)
class Point:
    """A pixel coordinate; the origin is the top-left corner."""

    x: int
    y: int


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its origin and size."""

    x: int
    y: int
    width: int
    height: int

    @property
    def origin(self) -> Point:
        return Point(self.x, self.y)


def colors_similar(a: int, b: int, tolerance: float) -> bool:
    """Return True if two 0xRRGGBB colours match within ``tolerance``.

    ``tolerance`` runs from 0.0 (exact match) to 1.0 (any colour matches).
    """
    if tolerance <= 0.0:
        return a == b
    if tolerance >= 1.0:
        return True
    ca = ((a >> 16) & 0xFF, (a >> 8) & 0xFF, a & 0xFF)
    cb = ((b >> 16) & 0xFF, (b >> 8) & 0xFF, b & 0xFF)
    return math.dist(ca, cb) <= tolerance * _MAX_COLOR_DISTANCE


@dataclass
class Bitmap:
    """An image held as rows of pixels, top row first.

    Each pixel occupies ``bytes_per_pixel`` bytes stored as blue, green, red
    (followed by an unused byte for 32-bit images). Rows are ``bytewidth``
    bytes apart, which may include padding.
    """

    buffer: bytearray | bytes | None
    width: int
    height: int
    bytewidth: int
    bits_per_pixel: int = 24
    bytes_per_pixel: int = 3

    def __post_init__(self) -> None:
        if self.buffer is not None and len(self.buffer) < self.bytewidth * self.height:
            raise ValueError("image buffer is shorter than height * bytewidth")

    def copy(self) -> Bitmap:
        """Return an independent copy of this bitmap."""
        buffer = bytearray(self.buffer) if self.buffer is not None else None
        return dataclasses.replace(self, buffer=buffer)

    def copy_portion(self, rect: Rect) -> Bitmap:
        """Return a new bitmap holding the pixels of ``rect``.

        The copy keeps the row stride of the source.
        """
        if self.buffer is None:
            raise ValueError("bitmap has no image data")
        if not self.rect_in_bounds(rect):
            raise ValueError(f"{rect} lies outside the bitmap")
        size = rect.height * self.bytewidth
        offset = self.bytewidth * rect.y + rect.x * self.bytes_per_pixel
        data = bytearray(self.buffer[offset:offset + size])
        data.extend(bytes(size - len(data)))
        return Bitmap(
            data,
            rect.width,
            rect.height,
            self.bytewidth,
            self.bits_per_pixel,
            self.bytes_per_pixel,
        )

    def point_in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def rect_in_bounds(self, rect: Rect) -> bool:
        return (
            rect.x >= 0
            and rect.y >= 0
            and rect.width >= 0
            and rect.height >= 0
            and rect.x + rect.width <= self.width
            and rect.y + rect.height <= self.height
        )

    def bounds(self) -> Rect:
        return Rect(0, 0, self.width, self.height)

    def pixel_at(self, x: int, y: int) -> tuple[int, int, int]:
        """Return the ``(red, green, blue)`` value of the pixel at (x, y)."""
        if self.buffer is None:
            raise ValueError("bitmap has no image data")
        if not self.point_in_bounds(x, y):
            raise IndexError(f"point ({x}, {y}) is outside the bitmap")
        offset = self.bytewidth * y + x * self.bytes_per_pixel
        blue, green, red = self.buffer[offset:offset + 3]
        return red, green, blue

    def hex_at(self, x: int, y: int) -> int:
        """Return the colour at (x, y) as a 0xRRGGBB integer."""
        red, green, blue = self.pixel_at(x, y)
        return (red << 16) | (green << 8) | blue
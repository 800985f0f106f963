"""Searching a bitmap for pixels of a given colour."""

from __future__ import annotations

from collections.abc import Iterator

from rasterbot.bitmap import Bitmap, Point, Rect, colors_similar


def _checked_rect(image: Bitmap, rect: Rect | None) -> Rect:
    if rect is None:
        return image.bounds()
    if not image.rect_in_bounds(rect):
        raise ValueError(f"{rect} lies outside the image")
    return rect


def _scan(
    image: Bitmap, color: int, rect: Rect, tolerance: float, start: Point
) -> Iterator[Point]:
    """Yield matching pixels row by row, beginning at ``start``.

    Rows below ``rect.height`` and columns below ``rect.width`` are scanned;
    each new row begins at ``rect.x``.
    """
    first_x = start.x
    for y in range(start.y, rect.height):
        for x in range(first_x, rect.width):
            if colors_similar(color, image.hex_at(x, y), tolerance):
                yield Point(x, y)
        first_x = rect.x


def find_color(
    image: Bitmap, color: int, rect: Rect | None = None, tolerance: float = 0.0
) -> Point | None:
    """Return the first pixel in ``rect`` similar to ``color``, or None.

    ``rect`` defaults to the whole image. ``tolerance`` runs from 0.0 (exact)
    to 1.0 (any colour). Raises ValueError if ``rect`` leaves the image.
    """
    rect = _checked_rect(image, rect)
    return next(_scan(image, color, rect, tolerance, rect.origin), None)


def find_all_colors(
    image: Bitmap, color: int, rect: Rect | None = None, tolerance: float = 0.0
) -> list[Point]:
    """Return every pixel in ``rect`` similar to ``color``, in row order."""
    rect = _checked_rect(image, rect)
    return list(_scan(image, color, rect, tolerance, Point(0, 0)))


def count_colors(
    image: Bitmap, color: int, rect: Rect | None = None, tolerance: float = 0.0
) -> int:
    """Return how many pixels in ``rect`` are similar to ``color``."""
    rect = _checked_rect(image, rect)
    return sum(1 for _ in _scan(image, color, rect, tolerance, Point(0, 0)))
"""Searching one bitmap for occurrences of another."""

from __future__ import annotations

from collections.abc import Iterator

from rasterbot.bitmap import Bitmap, Point, Rect, colors_similar


def bad_shift_table(needle: Bitmap) -> dict[int, Point]:
    """Map each colour of ``needle`` to its distance from the far corner.

    The needle is walked from its bottom-right pixel backwards; each colour
    keeps the offset ``(width - x, height - y)`` of its last occurrence.
    Colours not in the table are taken to shift by the needle's full size.
    """
    table: dict[int, Point] = {}
    for y in reversed(range(needle.height)):
        for x in reversed(range(needle.width)):
            table.setdefault(
                needle.hex_at(x, y), Point(needle.width - x, needle.height - y)
            )
    return table


def _check_needle(needle: Bitmap) -> None:
    if needle.width <= 0 or needle.height <= 0:
        raise ValueError("needle bitmap is empty")


def _checked_rect(haystack: Bitmap, rect: Rect | None) -> Rect:
    if rect is None:
        return haystack.bounds()
    if not haystack.rect_in_bounds(rect):
        raise ValueError(f"{rect} lies outside the haystack")
    return rect


def _needle_at(
    needle: Bitmap, haystack: Bitmap, ox: int, oy: int, tolerance: float
) -> bool:
    # Compared from the last pixel backwards, as in Boyer-Moore.
    return all(
        colors_similar(needle.hex_at(x, y), haystack.hex_at(ox + x, oy + y), tolerance)
        for y in reversed(range(needle.height))
        for x in reversed(range(needle.width))
    )


def _search(
    needle: Bitmap, haystack: Bitmap, rect: Rect, tolerance: float, start: Point
) -> Point | None:
    if needle.height > haystack.height or needle.width > haystack.width:
        return None
    scan_height = rect.height - needle.height
    scan_width = rect.width - needle.width
    first_x = start.x
    for y in range(start.y, scan_height + 1):
        for x in range(first_x, scan_width + 1):
            if _needle_at(needle, haystack, x, y, tolerance):
                return Point(x, y)
        first_x = rect.x
    return None


def _iter_matches(
    needle: Bitmap, haystack: Bitmap, rect: Rect | None, tolerance: float
) -> Iterator[Point]:
    _check_needle(needle)
    rect = _checked_rect(haystack, rect)
    row_width = haystack.width - needle.width + 1
    start = Point(0, 0)
    while (found := _search(needle, haystack, rect, tolerance, start)) is not None:
        yield found
        if found.x + 1 >= row_width:
            start = Point(0, found.y + 1)
        else:
            start = Point(found.x + 1, found.y)


def find_bitmap(
    needle: Bitmap,
    haystack: Bitmap,
    rect: Rect | None = None,
    tolerance: float = 0.0,
) -> Point | None:
    """Return the origin of the first occurrence of ``needle``, or None.

    ``rect`` defaults to the bounds of ``haystack``. ``tolerance`` runs from
    0.0 (exact) to 1.0 (any colour). Raises ValueError for an empty needle or
    a rectangle outside the haystack.
    """
    return next(_iter_matches(needle, haystack, rect, tolerance), None)


def find_all_bitmaps(
    needle: Bitmap,
    haystack: Bitmap,
    rect: Rect | None = None,
    tolerance: float = 0.0,
) -> list[Point]:
    """Return the origins of every occurrence of ``needle``, in row order."""
    return list(_iter_matches(needle, haystack, rect, tolerance))


def count_bitmaps(
    needle: Bitmap,
    haystack: Bitmap,
    rect: Rect | None = None,
    tolerance: float = 0.0,
) -> int:
    """Return how many times ``needle`` occurs in ``haystack``."""
    return sum(1 for _ in _iter_matches(needle, haystack, rect, tolerance))
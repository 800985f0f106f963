import pytest

from rasterbot.bitmap import Bitmap, Point, Rect
from rasterbot.bitmap_find import (
    bad_shift_table,
    count_bitmaps,
    find_all_bitmaps,
    find_bitmap,
)

W = 0xFFFFFF
B = 0x000000
R = 0xFF0000


def make_bitmap(rows):
    height = len(rows)
    width = len(rows[0]) if rows else 0
    data = bytearray()
    for row in rows:
        for color in row:
            data.extend(((color & 0xFF), (color >> 8) & 0xFF, (color >> 16) & 0xFF))
    return Bitmap(data, width, height, width * 3)


def test_edge_case_needle_between_rows():
    needle = make_bitmap([[W, B], [B, B], [W, B]])
    haystack = make_bitmap(
        [
            [W, W, W, W, W],
            [W, W, W, W, B],
            [W, W, W, B, B],
            [W, W, W, W, B],
        ]
    )
    assert find_bitmap(needle, haystack) == Point(3, 1)
    assert count_bitmaps(needle, haystack) == 1


def test_portion_is_found_at_its_origin():
    haystack = make_bitmap(
        [
            [W, W, W, W],
            [W, R, B, W],
            [W, B, R, W],
        ]
    )
    rect = Rect(1, 1, 2, 2)
    needle = haystack.copy_portion(rect)
    assert find_bitmap(needle, haystack) == rect.origin


def test_missing_needle_returns_none():
    haystack = make_bitmap([[W, W], [W, W]])
    needle = make_bitmap([[R]])
    assert find_bitmap(needle, haystack) is None
    assert find_all_bitmaps(needle, haystack) == []
    assert count_bitmaps(needle, haystack) == 0


def test_needle_larger_than_haystack_not_found():
    haystack = make_bitmap([[W]])
    needle = make_bitmap([[W, W]])
    assert find_bitmap(needle, haystack) is None


def test_single_pixel_needle_finds_every_match():
    haystack = make_bitmap(
        [
            [R, W, R],
            [W, R, W],
        ]
    )
    needle = make_bitmap([[R]])
    points = find_all_bitmaps(needle, haystack)
    assert points == [Point(0, 0), Point(2, 0), Point(1, 1)]
    assert count_bitmaps(needle, haystack) == len(points)


def test_all_matches_really_match():
    haystack = make_bitmap(
        [
            [R, B, R, B],
            [B, R, B, R],
            [R, B, R, B],
        ]
    )
    needle = make_bitmap([[R, B], [B, R]])
    points = find_all_bitmaps(needle, haystack)
    assert len(points) == 3
    for p in points:
        portion = haystack.copy_portion(Rect(p.x, p.y, 2, 2))
        assert [portion.hex_at(x, y) for y in range(2) for x in range(2)] == [R, B, B, R]


def test_tolerance_allows_near_colours():
    haystack = make_bitmap([[W, 0xFE0101]])
    needle = make_bitmap([[R]])
    assert find_bitmap(needle, haystack) is None
    assert find_bitmap(needle, haystack, None, 0.05) == Point(1, 0)


def test_empty_needle_raises():
    haystack = make_bitmap([[W]])
    needle = Bitmap(bytearray(), 0, 0, 0)
    with pytest.raises(ValueError):
        find_bitmap(needle, haystack)


def test_rect_outside_haystack_raises():
    haystack = make_bitmap([[W, W], [W, W]])
    needle = make_bitmap([[W]])
    with pytest.raises(ValueError):
        find_bitmap(needle, haystack, Rect(1, 1, 2, 2))
    with pytest.raises(ValueError):
        count_bitmaps(needle, haystack, Rect(0, 0, 3, 1))


def test_bad_shift_table_keys_are_needle_colours():
    needle = make_bitmap([[R, B], [W, B]])
    table = bad_shift_table(needle)
    assert set(table) == {R, B, W}
    assert table[B] == Point(1, 1)


def test_bad_shift_table_keeps_rightmost_occurrence():
    needle = make_bitmap([[R, R, R]])
    assert bad_shift_table(needle) == {R: Point(1, 1)}
"""Frontend helpers: image slicing offsets and time display."""

from __future__ import annotations

import pytest

from frontend.tiles import format_time, tile_offset_percent, tile_source_rect


def test_offsets_span_zero_to_hundred_percent() -> None:
    assert tile_offset_percent(0, 3) == (0.0, 0.0)
    assert tile_offset_percent(2, 3) == (100.0, 0.0)
    assert tile_offset_percent(4, 3) == (50.0, 50.0)
    assert tile_offset_percent(8, 3) == (100.0, 100.0)


def test_offsets_on_4x4() -> None:
    x, y = tile_offset_percent(6, 4)  # row 1, col 2
    assert x == pytest.approx(200 / 3)
    assert y == pytest.approx(100 / 3)


@pytest.mark.parametrize("size", [3, 4, 5])
def test_source_rects_tile_the_image(size: int) -> None:
    image_px = 460
    tile_px = image_px // size
    seen = set()
    for tile in range(size * size):
        x, y, w, h = tile_source_rect(tile, size, image_px)
        row, col = divmod(tile, size)
        assert (x, y) == (col * tile_px, row * tile_px)
        assert (w, h) == (tile_px, tile_px)
        assert x + w <= image_px and y + h <= image_px
        seen.add((x, y))
    assert len(seen) == size * size


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [(0, "00:00"), (9, "00:09"), (61, "01:01"), (600, "10:00"), (59.9, "00:59")],
)
def test_format_time(seconds: float, expected: str) -> None:
    assert format_time(seconds) == expected

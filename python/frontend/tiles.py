"""Pure helpers shared by the frontends: image slicing and time display."""

from __future__ import annotations


def tile_offset_percent(tile_id: int, size: int) -> tuple[float, float]:
    """Return the (x%, y%) offset of *tile_id*'s piece within the full image.

    0% is the left/top edge and 100% the right/bottom edge, so the piece
    for the last column sits at x = 100%.
    """
    row, col = divmod(tile_id, size)
    return 100 * col / (size - 1), 100 * row / (size - 1)


def tile_source_rect(tile_id: int, size: int, image_px: int) -> tuple[int, int, int, int]:
    """Return ``(x, y, w, h)`` of *tile_id*'s piece in a square image.

    *image_px* is the image side length; pieces are ``image_px // size``
    pixels wide and any remainder is trimmed from the right/bottom edge.
    """
    tile_px = image_px // size
    slack = tile_px * (size - 1)
    x_pct, y_pct = tile_offset_percent(tile_id, size)
    return round(slack * x_pct / 100), round(slack * y_pct / 100), tile_px, tile_px


def format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"

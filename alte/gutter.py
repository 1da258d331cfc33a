"""Geometry of the line-number gutter shown beside the editor."""

from __future__ import annotations

GUTTER_PADDING = 5
"""Blank space, in pixels, on each side of the line numbers."""


def digit_count(block_count: int) -> int:
    """Number of digits needed for the largest line number; at least one."""
    largest = max(1, block_count)
    digits = 1
    while largest >= 10:
        largest //= 10
        digits += 1
    return digits


def gutter_width(block_count: int, digit_width: int) -> int:
    """Pixel width of the gutter for a document of ``block_count`` lines."""
    return GUTTER_PADDING + digit_width * digit_count(block_count) + GUTTER_PADDING


def line_labels(first_block: int, block_count: int, visible_rows: int) -> list[str]:
    """Labels for the visible lines, starting at the zero-based ``first_block``."""
    if first_block < 0:
        raise ValueError("first_block must not be negative")
    if visible_rows <= 0:
        return []
    last = min(block_count, first_block + visible_rows)
    return [str(number + 1) for number in range(first_block, last)]
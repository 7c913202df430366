"""Unit conversion between bitmap pixels and page millimetres.

Pixel density is derived per section because the renderer may return
slightly different widths for different widgets. Every bitmap is scaled to
the full content width of the page.
"""

from __future__ import annotations

import math

from config.page_config import PageConfig

# Float noise allowance for mm comparisons and mm -> px conversion
TOLERANCE = 1e-6


def px_per_mm(pixel_width: int, config: PageConfig) -> float:
    """Pixel density of a bitmap scaled to the page content width."""
    if pixel_width <= 0:
        raise ValueError(f"pixel_width must be positive: {pixel_width}")
    return pixel_width / config.content_width_mm


def px_to_mm(pixels: int, density: float) -> float:
    return pixels / density


def height_mm(pixel_width: int, pixel_height: int, config: PageConfig) -> float:
    """Printed height of a bitmap once scaled to the content width."""
    return px_to_mm(pixel_height, px_per_mm(pixel_width, config))


def capacity_px(space_mm: float, density: float) -> int:
    """Whole pixel rows that fit inside ``space_mm``.

    Rounds down so a band never overhangs the space it was cut for.
    """
    if space_mm <= 0:
        return 0
    return max(0, math.floor(space_mm * density + TOLERANCE))


def fits(offset_mm: float, extent_mm: float, limit_mm: float) -> bool:
    """True when ``offset + extent`` stays within ``limit`` (equality fits)."""
    return offset_mm + extent_mm <= limit_mm + TOLERANCE

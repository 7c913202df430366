"""Crop horizontal pixel bands out of rendered section bitmaps."""

from __future__ import annotations

from PyQt6.QtGui import QImage


def slice_image(image: QImage, y_start_px: int, height_px: int) -> QImage:
    """Return rows ``[y_start_px, y_start_px + height_px)`` as a new image.

    The result keeps the full source width. ``QImage.copy`` detaches, so the
    source bitmap is never modified.
    """
    if height_px <= 0:
        raise ValueError(f"Slice height must be positive: {height_px}")
    if y_start_px < 0 or y_start_px + height_px > image.height():
        raise ValueError(
            f"Slice rows {y_start_px}..{y_start_px + height_px} fall outside "
            f"an image {image.height()} rows tall"
        )
    return image.copy(0, y_start_px, image.width(), height_px)

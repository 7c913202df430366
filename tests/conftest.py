"""Pytest configuration and fixtures."""

import os
import sys
from pathlib import Path

import numpy as np
import pytest

# Add src directory to Python path
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from config.page_config import PageConfig
from services.pagination import Section


# ---------------------------------------------------------------------------
# Qt Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(scope="session")
def qt_app():
    """Provide a QApplication instance for tests touching Qt widgets or images."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    app.processEvents()
    yield app
    app.processEvents()


# ---------------------------------------------------------------------------
# Geometry Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def page_config() -> PageConfig:
    """Reference geometry: 249mm usable height, 186mm content width."""
    return PageConfig(
        page_width_mm=210,
        page_height_mm=297,
        margin_mm=12,
        header_height_mm=14,
        footer_height_mm=10,
        section_gap_mm=4,
    )


@pytest.fixture
def mm_section(page_config):
    """Build sections whose pixel rows map 1:1 (or ``density``:1) to millimetres."""

    def _make(index: int, height_mm: float, density: int = 1) -> Section:
        width_px = int(page_config.content_width_mm * density)
        return Section(index=index, pixel_width=width_px, pixel_height=int(height_mm * density))

    return _make


# ---------------------------------------------------------------------------
# Bitmap Helpers
# ---------------------------------------------------------------------------

def _image_rows(image) -> np.ndarray:
    """Pixel rows of a 32-bit QImage as a (height, width) uint32 array."""
    from PyQt6.QtGui import QImage

    converted = image.convertToFormat(QImage.Format.Format_RGB32)
    width, height = converted.width(), converted.height()
    bits = converted.constBits()
    bits.setsize(converted.sizeInBytes())
    buffer = np.frombuffer(bits, dtype=np.uint32)
    stride = converted.bytesPerLine() // 4
    return buffer.reshape(height, stride)[:, :width].copy()


@pytest.fixture
def pixel_rows(qt_app):
    """Convert a QImage into a numpy array for pixel-exact comparisons."""
    return _image_rows


@pytest.fixture
def striped_image(qt_app):
    """Factory for RGB32 images whose color changes from row to row."""
    from PyQt6.QtGui import QColor, QImage

    def _make(width: int, height: int) -> QImage:
        image = QImage(width, height, QImage.Format.Format_RGB32)
        for y in range(height):
            color = QColor((y * 37) % 256, (y * 11) % 256, y % 256)
            for x in range(width):
                image.setPixelColor(x, y, color)
        return image

    return _make

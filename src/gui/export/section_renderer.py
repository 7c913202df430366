"""Rasterize dashboard widgets into oversampled bitmaps for PDF export."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QPoint
from PyQt6.QtGui import QColor, QImage, QPainter, QRegion
from PyQt6.QtWidgets import QWidget

from config.branding import PRINT_COLORS

logger = logging.getLogger(__name__)


class WidgetRenderer:
    """Render a widget and its children into a ``QImage``.

    The bitmap is ``scale`` times the widget's logical size so text stays
    legible once the image is stretched to the printed content width.
    """

    def __init__(self, scale: float, background: str = PRINT_COLORS["page_bg"]) -> None:
        if scale <= 0:
            raise ValueError(f"Render scale must be positive: {scale}")
        self.scale = scale
        self._background = QColor(background)

    def __call__(self, widget: QWidget) -> QImage:
        size = widget.size()
        if size.isEmpty():
            raise ValueError(
                f"Cannot render section {widget.objectName() or type(widget).__name__}: "
                f"empty size {size.width()}x{size.height()}"
            )

        width = max(1, round(size.width() * self.scale))
        height = max(1, round(size.height() * self.scale))

        image = QImage(width, height, QImage.Format.Format_RGB32)
        if image.isNull():
            raise MemoryError(f"Could not allocate a {width}x{height} section bitmap")
        image.fill(self._background)

        painter = QPainter(image)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)
            painter.setRenderHint(QPainter.RenderHint.TextAntialiasing)
            painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform)
            painter.scale(self.scale, self.scale)
            widget.render(
                painter,
                QPoint(0, 0),
                QRegion(),
                QWidget.RenderFlag.DrawWindowBackground | QWidget.RenderFlag.DrawChildren,
            )
        finally:
            painter.end()

        logger.debug(
            "Rendered section %s at %sx%s px",
            widget.objectName(),
            width,
            height,
            extra={"event": "render.section", "width": width, "height": height},
        )
        return image

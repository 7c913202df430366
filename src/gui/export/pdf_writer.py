"""PDF document writer using PyQt6's QPrinter.

Executes the paginator's instruction stream:
- OpenPage starts a new printer page (page 1 is implicit)
- DrawHeader draws product mark, title/date and page indicator
- PlaceImage draws a section or slice into the usable area
- DrawFooter draws the rule line, disclaimer and page number

Output goes to ``<name>.part`` and is moved into place on ``close()``, so an
aborted export never leaves a partial PDF under the requested name.
"""

from __future__ import annotations

import logging
import os
from datetime import date
from pathlib import Path
from typing import Optional

from PyQt6.QtCore import QMarginsF, QRectF, QSizeF, Qt
from PyQt6.QtGui import QColor, QFont, QImage, QPageLayout, QPageSize, QPainter, QPen
from PyQt6.QtPrintSupport import QPrinter

from config.branding import DEFAULT_BRANDING, PRINT_COLORS, ExportBranding
from config.page_config import PageConfig
from services.pagination import (
    ClosePage,
    DrawFooter,
    DrawHeader,
    OpenPage,
    PageInstruction,
    PlaceImage,
    Placement,
)
from services.pagination.page_chrome import footer_for, format_date_label, header_for
from services.pagination.slicer import slice_image

logger = logging.getLogger(__name__)

PRINT_DPI = 300

# Header text offsets in mm
DESTINATION_OFFSET_MM = 26
HEADER_RULE_INSET_MM = 2
FOOTER_TEXT_INSET_MM = 1


class PdfDocumentWriter:
    """Write page instructions into a PDF file with QPainter."""

    def __init__(
        self,
        config: PageConfig,
        title: str,
        branding: ExportBranding = DEFAULT_BRANDING,
        date_label: Optional[str] = None,
    ) -> None:
        self.config = config
        self.title = title
        self.branding = branding
        self.date_label = date_label if date_label is not None else format_date_label(date.today())

        self._printer: Optional[QPrinter] = None
        self._painter: Optional[QPainter] = None
        self._target: Optional[Path] = None
        self._partial: Optional[Path] = None
        self._mm_to_px = 0.0
        self.pages_written = 0

    @property
    def partial_path(self) -> Optional[Path]:
        return self._partial

    def open(self, output_path: Path) -> None:
        if self._painter is not None:
            raise RuntimeError("PDF writer is already open")

        self._target = Path(output_path)
        self._partial = self._target.with_name(self._target.name + ".part")
        self._partial.parent.mkdir(parents=True, exist_ok=True)
        self.pages_written = 0

        self._printer = self._setup_printer(self._partial)
        self._mm_to_px = self._printer.resolution() / 25.4

        painter = QPainter()
        if not painter.begin(self._printer):
            raise RuntimeError("Failed to initialize PDF painter")
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setRenderHint(QPainter.RenderHint.TextAntialiasing)
        painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform)
        self._painter = painter

    def handle(self, instruction: PageInstruction, image: Optional[QImage]) -> None:
        if self._painter is None or self._printer is None:
            raise RuntimeError("PDF writer is not open")

        if isinstance(instruction, OpenPage):
            if instruction.page_number > 1 and not self._printer.newPage():
                raise RuntimeError(f"Failed to start page {instruction.page_number}")
        elif isinstance(instruction, DrawHeader):
            self._draw_header(instruction.page_number)
        elif isinstance(instruction, PlaceImage):
            self._draw_placement(instruction.placement, image)
        elif isinstance(instruction, DrawFooter):
            self._draw_footer(instruction.page_number)
        elif isinstance(instruction, ClosePage):
            self.pages_written += 1
        else:
            raise TypeError(f"Unknown page instruction: {instruction!r}")

    def close(self) -> Path:
        """Finish the document and publish it under the requested name."""
        if self._painter is None or self._partial is None or self._target is None:
            raise RuntimeError("PDF writer is not open")

        painter, self._painter = self._painter, None
        if not painter.end():
            raise RuntimeError(f"Failed to finalize PDF {self._partial}")

        os.replace(self._partial, self._target)
        logger.info(
            "Wrote %s page(s) to %s",
            self.pages_written,
            self._target,
            extra={"event": "pdf.written", "pages": self.pages_written},
        )
        target = self._target
        self._reset()
        return target

    def abort(self) -> None:
        """Stop writing and delete the partial file."""
        if self._painter is not None and self._painter.isActive():
            self._painter.end()
        if self._partial is not None and self._partial.exists():
            self._partial.unlink()
            logger.debug("Removed partial export %s", self._partial)
        self._reset()

    def _reset(self) -> None:
        self._painter = None
        self._printer = None
        self._target = None
        self._partial = None

    def _setup_printer(self, output_path: Path) -> QPrinter:
        """Configure QPrinter for full-page PDF output."""
        printer = QPrinter(QPrinter.PrinterMode.HighResolution)
        printer.setOutputFormat(QPrinter.OutputFormat.PdfFormat)
        printer.setOutputFileName(str(output_path))
        printer.setPageSize(
            QPageSize(
                QSizeF(self.config.page_width_mm, self.config.page_height_mm),
                QPageSize.Unit.Millimeter,
            )
        )
        printer.setPageOrientation(QPageLayout.Orientation.Portrait)
        printer.setPageMargins(QMarginsF(0, 0, 0, 0), QPageLayout.Unit.Millimeter)
        printer.setFullPage(True)
        printer.setResolution(PRINT_DPI)
        printer.setDocName(self.title)
        printer.setCreator(self.branding.product_mark)
        return printer

    def _px(self, mm: float) -> float:
        return mm * self._mm_to_px

    def _draw_header(self, page_number: int) -> None:
        """Draw product mark, destination label and page indicator."""
        painter = self._painter
        content = header_for(self.branding, self.title, self.date_label, page_number)

        x = self._px(self.config.margin_mm)
        top = self._px(self.config.margin_mm)
        width = self._px(self.config.content_width_mm)
        text_h = self._px(self.config.header_height_mm - HEADER_RULE_INSET_MM)

        painter.setPen(QColor(PRINT_COLORS["brand"]))
        painter.setFont(QFont("Segoe UI", 16, QFont.Weight.DemiBold))
        painter.drawText(
            QRectF(x, top, width, text_h),
            Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter,
            content.product_mark,
        )

        painter.setPen(QColor(PRINT_COLORS["text_muted"]))
        painter.setFont(QFont("Segoe UI", 9))
        offset = self._px(DESTINATION_OFFSET_MM)
        painter.drawText(
            QRectF(x + offset, top, width - offset, text_h),
            Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter,
            content.destination,
        )

        right_text = content.site_label
        if content.page_indicator:
            right_text = f"{content.page_indicator}  |  {content.site_label}"
        painter.drawText(
            QRectF(x, top, width, text_h),
            Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter,
            right_text,
        )

        rule_y = top + text_h
        painter.setPen(QPen(QColor(PRINT_COLORS["rule"]), 1))
        painter.drawLine(int(x), int(rule_y), int(x + width), int(rule_y))

    def _draw_placement(self, placement: Placement, image: Optional[QImage]) -> None:
        if image is None:
            raise RuntimeError(
                f"No bitmap supplied for section {placement.section_index} on page {placement.page_number}"
            )

        if placement.is_slice:
            part = slice_image(image, placement.y_start_px, placement.height_px)
        else:
            part = image

        target = QRectF(
            self._px(self.config.margin_mm),
            self._px(self.config.content_top_mm + placement.y_offset_mm),
            self._px(self.config.content_width_mm),
            self._px(placement.height_mm),
        )
        self._painter.drawImage(target, part)

    def _draw_footer(self, page_number: int) -> None:
        """Draw rule line, disclaimer and page number."""
        painter = self._painter
        content = footer_for(self.branding, page_number)

        x = self._px(self.config.margin_mm)
        top = self._px(self.config.footer_top_mm)
        width = self._px(self.config.content_width_mm)
        height = self._px(self.config.footer_height_mm)

        painter.setPen(QPen(QColor(PRINT_COLORS["rule"]), 1))
        painter.drawLine(int(x), int(top), int(x + width), int(top))

        inset = self._px(FOOTER_TEXT_INSET_MM)
        text_rect = QRectF(x, top + inset, width, height - inset)
        painter.setPen(QColor(PRINT_COLORS["text_muted"]))
        painter.setFont(QFont("Segoe UI", 7))
        painter.drawText(
            text_rect,
            Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter,
            content.text,
        )
        painter.drawText(
            text_rect,
            Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter,
            content.page_label,
        )

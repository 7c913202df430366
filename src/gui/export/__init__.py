"""PDF export package for Spesti dashboards.

Provides the Qt side of the export pipeline:
- PdfExportButton: Pro-gated button driving one export
- WidgetRenderer: widget -> oversampled QImage
- collect_sections / mark_section: pick the sections of a view
- PdfDocumentWriter: QPrinter-based PDF output
"""

from .export_button import PdfExportButton
from .pdf_writer import PdfDocumentWriter
from .section_collector import PDF_SECTION_PROPERTY, collect_sections, mark_section
from .section_renderer import WidgetRenderer

__all__ = [
    "PDF_SECTION_PROPERTY",
    "PdfDocumentWriter",
    "PdfExportButton",
    "WidgetRenderer",
    "collect_sections",
    "mark_section",
]

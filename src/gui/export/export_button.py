"""Pro-only "Download PDF" button for dashboard views."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional

from PyQt6.QtCore import QEvent, Qt, pyqtSignal
from PyQt6.QtWidgets import QApplication, QFileDialog, QMessageBox, QPushButton, QWidget

from config.page_config import PageConfig
from gui.settings_manager import SettingsManager, get_settings
from services.entitlement import is_pro_enabled
from services.export_service import ExportError, ExportSummary, PdfExportService
from services.pagination import SplitBreakPolicy
from utils.error_handling import format_error_message, log_exception
from utils.slug import pdf_filename

from .pdf_writer import PdfDocumentWriter
from .section_collector import collect_sections
from .section_renderer import WidgetRenderer

logger = logging.getLogger(__name__)

IDLE_TEXT = "📄 Изтегли PDF"
BUSY_TEXT = "Генериране..."

PathProvider = Callable[[QWidget, str], Optional[str]]


def ask_save_path(parent: QWidget, default_name: str) -> Optional[str]:
    """Ask the user where to save the PDF; None when cancelled."""
    file_path, _ = QFileDialog.getSaveFileName(
        parent,
        "Export to PDF",
        default_name,
        "PDF Files (*.pdf)",
    )
    return file_path or None


class PdfExportButton(QPushButton):
    """Exports ``container`` (or its marked sections) to a paginated PDF.

    The button is hidden, not disabled, unless Pro is enabled, and follows
    the entitlement flag live through ``settings_changed``.

    Signals:
        export_finished: Emitted with the ExportSummary of a written file
        export_failed: Emitted with a user-facing error message
    """

    export_finished = pyqtSignal(object)
    export_failed = pyqtSignal(str)

    def __init__(
        self,
        container: QWidget,
        title: str,
        filename: Optional[str] = None,
        settings: Optional[SettingsManager] = None,
        policy: SplitBreakPolicy = SplitBreakPolicy.FORCE_PAGE_BREAK,
        path_provider: PathProvider = ask_save_path,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(IDLE_TEXT)
        self._container = container
        self._title = title
        self._filename = filename
        self._settings = settings or get_settings()
        self._policy = policy
        self._path_provider = path_provider
        self._busy = False

        # Parent only once the settings are known; reparenting re-checks visibility
        if parent is not None:
            self.setParent(parent)

        self.setObjectName("pdfExportButton")
        self.setToolTip("Export this view to a PDF file")
        self.clicked.connect(self.export)
        self._settings.settings_changed.connect(self._on_settings_changed)
        self.refresh_visibility()

    @property
    def busy(self) -> bool:
        return self._busy

    def refresh_visibility(self) -> None:
        """Show the button only for entitled users."""
        if not is_pro_enabled(self._settings):
            self.hide()
        elif self.parentWidget() is not None:
            # A parentless show() would open the button as its own window
            self.show()

    def event(self, event: QEvent) -> bool:
        if event.type() == QEvent.Type.ParentChange:
            self.refresh_visibility()
        return super().event(event)

    def _on_settings_changed(self, key: str, _value: object) -> None:
        if key == "pro_enabled":
            self.refresh_visibility()

    def export(self) -> Optional[ExportSummary]:
        """Run one export; returns the summary or None when nothing was written."""
        if self._busy or not is_pro_enabled(self._settings):
            return None

        default_name = pdf_filename(self._filename, self._title)
        file_path = self._path_provider(self, default_name)
        if not file_path:
            logger.debug("PDF export cancelled", extra={"event": "export.cancelled"})
            return None
        output_path = Path(pdf_filename(file_path))

        self._set_busy(True)
        try:
            summary = self._run_export(output_path)
        except ExportError as e:
            self._report_failure(format_error_message(e, include_type=False))
            return None
        except ValueError as e:
            log_exception(e, "Invalid export page settings", extra={"output": str(output_path)})
            self._report_failure(format_error_message(e, "Invalid export page settings"))
            return None
        finally:
            self._set_busy(False)

        self.export_finished.emit(summary)
        return summary

    def _run_export(self, output_path: Path) -> ExportSummary:
        config = PageConfig.from_mapping(self._settings.get("export_page"))
        service = PdfExportService(
            config,
            WidgetRenderer(config.render_scale),
            PdfDocumentWriter(config, self._title),
            policy=self._policy,
        )
        return service.export(collect_sections(self._container), output_path, fallback=self._container)

    def _set_busy(self, busy: bool) -> None:
        self._busy = busy
        self.setEnabled(not busy)
        self.setText(BUSY_TEXT if busy else IDLE_TEXT)
        if busy:
            QApplication.setOverrideCursor(Qt.CursorShape.WaitCursor)
            QApplication.processEvents()
        else:
            QApplication.restoreOverrideCursor()

    def _report_failure(self, message: str) -> None:
        self.export_failed.emit(message)
        QMessageBox.critical(self, "Export failed", message)

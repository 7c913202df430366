"""Sample comparison dashboard used to exercise PDF export from the desktop app."""

from __future__ import annotations

from itertools import product
from typing import Optional, Sequence, Tuple

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import (
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from config.branding import PRINT_COLORS
from gui.export import PdfExportButton, mark_section
from gui.settings_manager import SettingsManager, get_settings
from services.entitlement import activate_pro, is_pro_enabled

DASHBOARD_TITLE = "Инфлация в България"

HERO_CARDS: Tuple[Tuple[str, str], ...] = (
    ("Годишна инфлация", "3.8 %"),
    ("Храни", "5.1 %"),
    ("Енергия", "-1.2 %"),
    ("Услуги", "6.4 %"),
)

_CATEGORY_NAMES = (
    "Хляб", "Мляко", "Сирене", "Месо", "Плодове", "Зеленчуци", "Олио",
    "Захар", "Кафе", "Електричество", "Газ", "Вода", "Транспорт",
    "Интернет", "Мобилни услуги", "Наем", "Ресторанти", "Облекло",
)
_AREAS = ("(градски)", "(селски)", "(средно)")

# (category, index vs. last year, weight); long enough to span pages
CATEGORY_ROWS: Tuple[Tuple[str, float, float], ...] = tuple(
    (f"{name} {area}", 100.0 + (i * 7 % 23) / 3.0, 0.4 + (i * 13 % 17) / 10.0)
    for i, (area, name) in enumerate(product(_AREAS, _CATEGORY_NAMES))
)


def _card(title: str, value: str) -> QFrame:
    frame = QFrame()
    frame.setFrameShape(QFrame.Shape.StyledPanel)
    layout = QVBoxLayout(frame)
    caption = QLabel(title)
    caption.setStyleSheet(f"color: {PRINT_COLORS['text_muted']};")
    figure = QLabel(value)
    figure.setStyleSheet(f"color: {PRINT_COLORS['brand']}; font-size: 20pt; font-weight: 600;")
    layout.addWidget(caption)
    layout.addWidget(figure)
    return frame


def _category_table(rows: Sequence[Tuple[str, float, float]]) -> QFrame:
    frame = QFrame()
    grid = QGridLayout(frame)
    grid.setVerticalSpacing(6)
    for column, heading in enumerate(("Категория", "Индекс", "Тегло %")):
        label = QLabel(f"<b>{heading}</b>")
        grid.addWidget(label, 0, column)
    for row, (name, index_value, weight) in enumerate(rows, start=1):
        grid.addWidget(QLabel(name), row, 0)
        grid.addWidget(QLabel(f"{index_value:.1f}"), row, 1, alignment=Qt.AlignmentFlag.AlignRight)
        grid.addWidget(QLabel(f"{weight:.1f}"), row, 2, alignment=Qt.AlignmentFlag.AlignRight)
    return frame


class DashboardWindow(QMainWindow):
    """Main window with a scrollable dashboard and the Pro PDF export button."""

    def __init__(self, settings: Optional[SettingsManager] = None) -> None:
        super().__init__()
        self._settings = settings or get_settings()
        self.setWindowTitle(f"Spesti - {DASHBOARD_TITLE}")
        self.resize(900, 800)

        self.content = self._build_content()
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(self.content)

        root = QWidget()
        layout = QVBoxLayout(root)
        toolbar = QHBoxLayout()
        title = QLabel(f"<h2>{DASHBOARD_TITLE}</h2>")
        toolbar.addWidget(title)
        toolbar.addStretch()
        self.export_button = PdfExportButton(
            self.content,
            DASHBOARD_TITLE,
            filename="spesti-inflacia",
            settings=self._settings,
        )
        self.export_button.export_finished.connect(self._on_export_finished)
        toolbar.addWidget(self.export_button)
        layout.addLayout(toolbar)
        layout.addWidget(scroll)
        self.setCentralWidget(root)

        self._create_menu()

    def _build_content(self) -> QWidget:
        content = QWidget()
        content.setStyleSheet(f"background: {PRINT_COLORS['page_bg']}; color: {PRINT_COLORS['text']};")
        layout = QVBoxLayout(content)
        layout.setSpacing(16)

        hero = QWidget()
        hero_layout = QHBoxLayout(hero)
        for caption, value in HERO_CARDS:
            hero_layout.addWidget(_card(caption, value))
        layout.addWidget(mark_section(hero, "hero"))

        source = QLabel("Източник: НСИ, индекс на потребителските цени")
        source.setStyleSheet(f"color: {PRINT_COLORS['text_muted']}; padding: 8px;")
        layout.addWidget(mark_section(source, "data-source"))

        layout.addWidget(mark_section(_category_table(CATEGORY_ROWS), "categories"))
        layout.addStretch()
        return content

    def _create_menu(self) -> None:
        menu = self.menuBar().addMenu("Pro")
        activate = QAction("Активирай Pro", self)
        activate.triggered.connect(self._on_activate_pro)
        menu.addAction(activate)

    def _on_activate_pro(self) -> None:
        if is_pro_enabled(self._settings):
            return
        activate_pro(self._settings)

    def _on_export_finished(self, summary) -> None:
        QMessageBox.information(
            self,
            "Export Complete",
            f"Exported {summary.page_count} page(s) to:\n{summary.output_path}",
        )

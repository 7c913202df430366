"""Find the widgets of a view that are marked for PDF export."""

from __future__ import annotations

from typing import List

from PyQt6.QtCore import QPoint
from PyQt6.QtWidgets import QWidget

# Dynamic property flagging a widget as one export section
PDF_SECTION_PROPERTY = "pdfSection"


def mark_section(widget: QWidget, name: str = "section") -> QWidget:
    """Flag ``widget`` as an export section and return it."""
    widget.setProperty(PDF_SECTION_PROPERTY, name)
    if not widget.objectName():
        widget.setObjectName(f"pdf-{name}")
    return widget


def is_marked(widget: QWidget) -> bool:
    return bool(widget.property(PDF_SECTION_PROPERTY))


def collect_sections(container: QWidget) -> List[QWidget]:
    """Marked descendants of ``container`` in view order (top to bottom).

    Widgets hidden within the container or with an empty size are skipped,
    as are marked widgets nested inside another marked widget. An empty
    list means the caller should export ``container`` itself.
    """
    layout = container.layout()
    if layout is not None:
        layout.activate()

    marked = [
        widget
        for widget in container.findChildren(QWidget)
        if is_marked(widget)
        and widget.isVisibleTo(container)
        and not widget.size().isEmpty()
    ]
    marked = [widget for widget in marked if not _inside_marked_ancestor(widget, container)]

    def position(item):
        discovery, widget = item
        origin = widget.mapTo(container, QPoint(0, 0))
        return (origin.y(), origin.x(), discovery)

    return [widget for _, widget in sorted(enumerate(marked), key=position)]


def _inside_marked_ancestor(widget: QWidget, container: QWidget) -> bool:
    parent = widget.parentWidget()
    while parent is not None and parent is not container:
        if is_marked(parent):
            return True
        parent = parent.parentWidget()
    return False

"""Smoke tests for the sample dashboard window."""

import pytest

from gui.demo_window import CATEGORY_ROWS, DashboardWindow
from gui.export import PDF_SECTION_PROPERTY, collect_sections


@pytest.fixture
def window(qt_app, settings):
    window = DashboardWindow(settings)
    window.show()
    qt_app.processEvents()
    yield window
    window.close()
    window.deleteLater()
    qt_app.processEvents()


def test_dashboard_marks_its_sections(window):
    names = [w.property(PDF_SECTION_PROPERTY) for w in collect_sections(window.content)]

    assert names == ["hero", "data-source", "categories"]
    assert len(CATEGORY_ROWS) == 54


def test_activating_pro_reveals_export_button(window, settings):
    assert not window.export_button.isVisibleTo(window)

    window._on_activate_pro()

    assert settings.get("pro_enabled") is True
    assert window.export_button.isVisibleTo(window)

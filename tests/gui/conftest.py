"""Shared fixtures for GUI tests."""

from __future__ import annotations

import pytest
from PyQt6.QtWidgets import QLabel, QVBoxLayout, QWidget

from gui.export import mark_section
from gui.settings_manager import SettingsManager
from services import entitlement


@pytest.fixture(autouse=True)
def no_env_pro_override(monkeypatch):
    """Keep SPESTI_ENABLE_PRO from a developer shell out of the tests."""
    monkeypatch.setattr(entitlement, "is_pro_forced", lambda: False)


@pytest.fixture
def settings(qt_app, tmp_path):
    """SettingsManager backed by a temporary file."""
    SettingsManager.reset_instance()
    manager = SettingsManager(settings_file=tmp_path / "settings.json")
    yield manager
    SettingsManager.reset_instance()


@pytest.fixture
def pro_settings(settings):
    settings.set("pro_enabled", True)
    return settings


@pytest.fixture
def dashboard(qt_app):
    """Shown container with three marked sections stacked vertically."""
    container = QWidget()
    container.setStyleSheet("background: #ffffff;")
    layout = QVBoxLayout(container)
    for name, height in (("hero", 80), ("source", 30), ("table", 400)):
        label = QLabel(name)
        label.setFixedHeight(height)
        layout.addWidget(mark_section(label, name))
    container.resize(300, 560)
    container.show()
    qt_app.processEvents()
    yield container
    container.close()
    container.deleteLater()
    qt_app.processEvents()

"""
Spesti desktop - Main Entry Point

Household-finance comparison dashboards with Pro PDF export.
"""

import logging
import sys

from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QApplication

from gui.demo_window import DashboardWindow
from utils.env import is_dev_mode
from utils.logging_utils import setup_logging


def main():
    """Main application entry point."""
    log_file = setup_logging(logging.DEBUG if is_dev_mode() else logging.INFO)
    logging.getLogger(__name__).info("Logging to %s", log_file)

    app = QApplication(sys.argv)
    app.setApplicationName("Spesti")
    app.setOrganizationName("Spesti")
    app.setFont(QFont("Segoe UI", 10))

    window = DashboardWindow()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()

"""Centralized structured logging for the Spesti exporter."""

from __future__ import annotations

import json
import logging
import os
from logging import Handler
from pathlib import Path
from typing import Optional

from PyQt6.QtCore import QtMsgType, qInstallMessageHandler


PROJECT_ROOT = Path(__file__).resolve().parents[2]
LOG_DIR = PROJECT_ROOT / "data" / "logs"
DEFAULT_LOG_FILE = LOG_DIR / "spesti.log"

_CONFIGURED = False

_QT_LEVELS = {
    QtMsgType.QtDebugMsg: logging.DEBUG,
    QtMsgType.QtInfoMsg: logging.INFO,
    QtMsgType.QtWarningMsg: logging.WARNING,
    QtMsgType.QtCriticalMsg: logging.ERROR,
    QtMsgType.QtFatalMsg: logging.CRITICAL,
}


class StructuredFormatter(logging.Formatter):
    """One JSON object per line; ``extra`` fields become top-level keys."""

    _RESERVED = frozenset(vars(logging.makeLogRecord({})).keys()) | {"message", "asctime"}

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key in self._RESERVED or key.startswith("_"):
                continue
            payload[key] = value

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str, ensure_ascii=False)


def _level_from_env(default: int) -> int:
    name = os.environ.get("SPESTI_LOG_LEVEL", "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else default


def _build_handlers(log_file: Path) -> list[Handler]:
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setFormatter(StructuredFormatter())

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
    )

    return [file_handler, console_handler]


def _forward_qt_message(msg_type, context, message) -> None:
    logging.getLogger("qt").log(
        _QT_LEVELS.get(msg_type, logging.INFO),
        message,
        extra={"event": "qt_message", "qt_category": getattr(context, "category", None)},
    )


def setup_logging(level: int = logging.INFO, log_file: Optional[Path] = None) -> Path:
    """Configure root logging once and return the log file path.

    Qt's own diagnostics (printer and image plugin warnings) are routed into
    the ``qt`` logger. ``SPESTI_LOG_LEVEL`` overrides ``level``.
    """

    global _CONFIGURED

    target_log_file = log_file or DEFAULT_LOG_FILE
    if _CONFIGURED:
        return target_log_file

    target_log_file.parent.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(_level_from_env(level))

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    for handler in _build_handlers(target_log_file):
        root_logger.addHandler(handler)

    qInstallMessageHandler(_forward_qt_message)

    _CONFIGURED = True
    return target_log_file


def get_log_file_path() -> Path:
    """Return the path to the primary log file."""

    return DEFAULT_LOG_FILE

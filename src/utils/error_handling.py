"""Error reporting and performance helpers.

This module provides:
1. User-facing error message formatting
2. Structured exception logging
3. Performance timing decorator for the export hot path

Usage in UI components:
    from utils.error_handling import format_error_message, log_exception

    try:
        service.export(sources, path)
    except ExportError as e:
        log_exception(e, "PDF export failed", extra={"output": str(path)})
        QMessageBox.critical(self, "Export failed", format_error_message(e))

Performance timing usage:
    from utils.error_handling import timed

    @timed
    def paginate(...):
        ...

    # Enable timing with: SPESTI_PERF_DEBUG=1
"""

from __future__ import annotations

import logging
import os
import time
from functools import wraps
from typing import Any, Callable, Optional, TypeVar

logger = logging.getLogger(__name__)

PERF_DEBUG = os.environ.get("SPESTI_PERF_DEBUG", "0") == "1"

F = TypeVar("F", bound=Callable[..., Any])


def timed(func: F) -> F:
    """Log execution time at DEBUG level when SPESTI_PERF_DEBUG=1."""
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if not PERF_DEBUG:
            return func(*args, **kwargs)

        start = time.perf_counter()
        try:
            result = func(*args, **kwargs)
        except Exception:
            elapsed = time.perf_counter() - start
            logger.debug(f"PERF: {func.__module__}.{func.__name__} failed after {elapsed:.3f}s")
            raise
        elapsed = time.perf_counter() - start
        logger.debug(f"PERF: {func.__module__}.{func.__name__} took {elapsed:.3f}s")
        return result

    return wrapper  # type: ignore


def format_error_message(
    error: Exception,
    context: Optional[str] = None,
    include_type: bool = True,
) -> str:
    """Format an exception into a message suitable for a dialog.

    Args:
        error: The exception that occurred
        context: Optional description of what was being done
        include_type: Whether to include the exception type name

    Returns:
        "<context> - <Type>: <message>", dropping the parts that are empty
    """
    error_str = str(error)

    if not error_str or error_str == "None":
        error_str = type(error).__name__
        include_type = False

    parts = []
    if context:
        parts.append(context)

    if include_type:
        parts.append(f"{type(error).__name__}: {error_str}")
    else:
        parts.append(error_str)

    return " - ".join(parts)


def log_exception(
    error: Exception,
    context: str,
    extra: Optional[dict] = None,
    level: int = logging.ERROR,
) -> None:
    """Log an exception with its traceback and structured context."""
    log_extra = {"event": "error", "error_type": type(error).__name__}
    if extra:
        log_extra.update(extra)

    logger.log(level, f"{context}: {error}", extra=log_extra, exc_info=True)

"""Environment helpers for runtime configuration."""

import os
from functools import lru_cache

_TRUTHY = {"1", "true", "yes", "on"}


def _flag(name: str) -> bool:
    value = os.environ.get(name)
    if not value:
        return False
    return value.strip().lower() in _TRUTHY


@lru_cache
def is_dev_mode() -> bool:
    """Return True when the app runs in development mode."""
    value = os.environ.get("SPESTI_ENV")
    if value and value.strip().lower() in {"dev", "development"}:
        return True
    return _flag("SPESTI_ENV") or _flag("SPESTI_DEV_MODE")


@lru_cache
def is_pro_forced() -> bool:
    """Return True when SPESTI_ENABLE_PRO forces Pro features on."""
    return _flag("SPESTI_ENABLE_PRO")


__all__ = ["is_dev_mode", "is_pro_forced"]

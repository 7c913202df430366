"""Pro entitlement gate for paid features such as PDF export.

The flag lives in the persisted user settings and is written once a payment
has been confirmed. Anything other than a literal ``True`` counts as not
entitled.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

from utils.env import is_pro_forced

logger = logging.getLogger(__name__)

PRO_SETTING_KEY = "pro_enabled"


class SettingsStore(Protocol):
    def get(self, key: str, default: Any = None) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...


def is_pro_enabled(settings: SettingsStore) -> bool:
    """Return True when Pro features should be offered.

    Checks (in order):
    1. SPESTI_ENABLE_PRO environment override (development builds)
    2. the persisted ``pro_enabled`` setting
    """
    if is_pro_forced():
        return True
    return settings.get(PRO_SETTING_KEY, False) is True


def activate_pro(settings: SettingsStore) -> None:
    """Persist the Pro flag after a confirmed payment."""
    settings.set(PRO_SETTING_KEY, True)
    logger.info("Pro features activated", extra={"event": "entitlement.activated"})

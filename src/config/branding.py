"""Brand text and print colors used in exported page headers and footers."""

from __future__ import annotations

from dataclasses import dataclass


# Colors for print (light background)
PRINT_COLORS = {
    "brand": "#059669",
    "text": "#1f2937",
    "text_muted": "#6b7280",
    "rule": "#e5e7eb",
    "page_bg": "#ffffff",
}


@dataclass(frozen=True)
class ExportBranding:
    """Static text drawn around every exported page."""

    product_mark: str = "Spesti"
    site_label: str = "spesti.app"
    disclaimer: str = (
        "Информацията е с информативна цел. "
        "Проверете актуалните цени при вашия доставчик."
    )
    page_label: str = "Стр."
    """Prefix for page indicators ("Стр. 2")"""


DEFAULT_BRANDING = ExportBranding()

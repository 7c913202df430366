"""Text content of page headers and footers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from config.branding import ExportBranding


@dataclass(frozen=True)
class HeaderContent:
    product_mark: str
    destination: str        # "<title>  |  <date>"
    site_label: str
    page_indicator: Optional[str] = None


@dataclass(frozen=True)
class FooterContent:
    text: str               # disclaimer and brand
    page_label: str


def header_for(branding: ExportBranding, title: str, date_label: str, page_number: int) -> HeaderContent:
    """Header text; the first page carries no page indicator."""
    destination = f"{title}  |  {date_label}" if date_label else title
    indicator = f"{branding.page_label} {page_number}" if page_number > 1 else None
    return HeaderContent(
        product_mark=branding.product_mark,
        destination=destination,
        site_label=branding.site_label,
        page_indicator=indicator,
    )


def footer_for(branding: ExportBranding, page_number: int) -> FooterContent:
    return FooterContent(
        text=f"{branding.disclaimer} | {branding.site_label}",
        page_label=str(page_number),
    )


_BG_MONTHS = (
    "януари", "февруари", "март", "април", "май", "юни",
    "юли", "август", "септември", "октомври", "ноември", "декември",
)


def format_date_label(day: date) -> str:
    """Long Bulgarian date, e.g. "19 октомври 2026 г."."""
    return f"{day.day} {_BG_MONTHS[day.month - 1]} {day.year} г."

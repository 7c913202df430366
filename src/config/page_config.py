"""Page geometry for PDF export (A4 portrait by default)."""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

logger = logging.getLogger(__name__)


# A4 dimensions in mm
A4_WIDTH_MM = 210.0
A4_HEIGHT_MM = 297.0

# Page bands in mm
PAGE_MARGIN_MM = 12.0
HEADER_HEIGHT_MM = 14.0
FOOTER_HEIGHT_MM = 10.0
SECTION_GAP_MM = 4.0

# Bitmap oversampling relative to the on-screen size
RENDER_SCALE = 2.0


@dataclass(frozen=True)
class PageConfig:
    """Immutable page geometry for one export run."""

    page_width_mm: float = A4_WIDTH_MM
    page_height_mm: float = A4_HEIGHT_MM
    margin_mm: float = PAGE_MARGIN_MM
    header_height_mm: float = HEADER_HEIGHT_MM
    footer_height_mm: float = FOOTER_HEIGHT_MM
    section_gap_mm: float = SECTION_GAP_MM
    render_scale: float = RENDER_SCALE

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not math.isfinite(value):
                raise ValueError(f"{f.name} must be a finite number: {value}")
        for name in ("margin_mm", "header_height_mm", "footer_height_mm", "section_gap_mm"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must not be negative: {value}")
        if self.render_scale <= 0:
            raise ValueError(f"render_scale must be positive: {self.render_scale}")
        if self.content_width_mm <= 0:
            raise ValueError(
                f"Margins ({self.margin_mm}mm) leave no content width on a "
                f"{self.page_width_mm}mm wide page"
            )
        if self.usable_height_mm <= 0:
            raise ValueError(
                "Margins, header and footer leave no usable height: "
                f"2*{self.margin_mm} + {self.header_height_mm} + {self.footer_height_mm} "
                f">= {self.page_height_mm}"
            )

    @property
    def content_width_mm(self) -> float:
        """Width available to section bitmaps."""
        return self.page_width_mm - 2 * self.margin_mm

    @property
    def usable_height_mm(self) -> float:
        """Height between header and footer bands."""
        return (
            self.page_height_mm
            - 2 * self.margin_mm
            - self.header_height_mm
            - self.footer_height_mm
        )

    @property
    def content_top_mm(self) -> float:
        """Distance from the page top edge to the usable area."""
        return self.margin_mm + self.header_height_mm

    @property
    def footer_top_mm(self) -> float:
        return self.page_height_mm - self.margin_mm - self.footer_height_mm

    @classmethod
    def from_mapping(cls, overrides: Mapping[str, Any] | None) -> "PageConfig":
        """Build a config from persisted overrides, ignoring unknown keys."""
        if not overrides:
            return cls()

        if not isinstance(overrides, Mapping):
            raise ValueError(
                f"Page settings must be a mapping of field names to numbers, got {type(overrides).__name__}"
            )

        known = {f.name for f in fields(cls)}
        values: dict[str, float] = {}
        for key, value in overrides.items():
            if key not in known:
                logger.warning("Ignoring unknown page setting %r", key)
                continue
            try:
                values[key] = float(value)
            except (TypeError, ValueError) as e:
                raise ValueError(f"Page setting {key!r} is not a number: {value!r}") from e
        return cls(**values)


DEFAULT_PAGE_CONFIG = PageConfig()

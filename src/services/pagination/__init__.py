"""Pagination engine for PDF export.

Lays out rendered section bitmaps on fixed-size pages:
- PageConfig geometry and px/mm conversion (geometry)
- Paginator state machine and instruction stream (paginator, models)
- Bitmap slicing for sections taller than one page (slicer)
- Header/footer text (page_chrome)
"""

from .models import (
    ClosePage,
    DrawFooter,
    DrawHeader,
    OpenPage,
    PageInstruction,
    PagePlacement,
    PaginationResult,
    PlaceImage,
    Placement,
    Section,
    SplitBreakPolicy,
)
from .paginator import Paginator, paginate

__all__ = [
    "ClosePage",
    "DrawFooter",
    "DrawHeader",
    "OpenPage",
    "PageInstruction",
    "PagePlacement",
    "PaginationResult",
    "PlaceImage",
    "Placement",
    "Paginator",
    "Section",
    "SplitBreakPolicy",
    "paginate",
]

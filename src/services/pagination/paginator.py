"""Lay rendered sections out on fixed-size pages.

The paginator makes a single forward pass over sections in view order and
emits a flat instruction stream (open page, header, image placements,
footer, close page). Sections taller than the usable area are cut into
horizontal slices that continue on following pages.

Example:
    paginator = Paginator(PageConfig())
    for section in sections:
        writer.run(paginator.add_section(section))
    writer.run(paginator.finish())
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from config.page_config import PageConfig
from utils.error_handling import timed

from .geometry import capacity_px, fits, px_per_mm, px_to_mm
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

logger = logging.getLogger(__name__)


class Paginator:
    """Incremental page layout state machine.

    Page 1 is open from construction until ``finish()``. Every opened page
    gets exactly one header and every closed page exactly one footer.
    """

    def __init__(
        self,
        config: PageConfig,
        policy: SplitBreakPolicy = SplitBreakPolicy.FORCE_PAGE_BREAK,
    ) -> None:
        self._config = config
        self._policy = policy
        self._usable_mm = config.usable_height_mm
        self._cursor_mm = 0.0
        self._page_number = 0
        self._pages: List[PagePlacement] = []
        self._pending: List[PageInstruction] = []
        self._last_index: Optional[int] = None
        self._finished = False

        self._open_page()

    @property
    def page_number(self) -> int:
        """Number of the page currently open (or last closed)."""
        return self._page_number

    @property
    def cursor_mm(self) -> float:
        return self._cursor_mm

    @property
    def pages(self) -> List[PagePlacement]:
        return list(self._pages)

    @property
    def finished(self) -> bool:
        return self._finished

    def add_section(self, section: Section) -> List[PageInstruction]:
        """Place one section and return the instructions it produced."""
        if self._finished:
            raise RuntimeError("Cannot add sections after pagination finished")
        if self._last_index is not None and section.index <= self._last_index:
            raise ValueError(
                f"Section {section.index} arrived after section {self._last_index}; "
                "sections must be supplied in view order"
            )
        self._last_index = section.index

        if section.pixel_height == 0:
            logger.debug(
                "Skipping empty section %s",
                section.index,
                extra={"event": "pagination.skip_empty", "section": section.index},
            )
            return self._drain()

        density = px_per_mm(section.pixel_width, self._config)
        total_mm = px_to_mm(section.pixel_height, density)

        if fits(0.0, total_mm, self._usable_mm):
            self._place_whole(section, density, total_mm)
        else:
            self._place_split(section, density)

        return self._drain()

    def finish(self) -> List[PageInstruction]:
        """Close the last page and return the remaining instructions."""
        if self._finished:
            raise RuntimeError("Pagination already finished")
        self._close_page()
        self._finished = True
        logger.debug(
            "Pagination finished with %s page(s)",
            self._page_number,
            extra={"event": "pagination.finished", "pages": self._page_number},
        )
        return self._drain()

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------

    def _place_whole(self, section: Section, density: float, total_mm: float) -> None:
        if not fits(self._cursor_mm, total_mm, self._usable_mm):
            self._break_page()

        self._place(section, None, 0, section.pixel_height, density)
        self._cursor_mm += total_mm + self._config.section_gap_mm

    def _place_split(self, section: Section, density: float) -> None:
        page_capacity = capacity_px(self._usable_mm, density)
        if page_capacity <= 0:
            raise ValueError(
                f"Section {section.index} is too coarse to slice: one pixel row "
                f"exceeds the {self._usable_mm}mm usable height"
            )

        remaining = section.pixel_height
        y_start = 0
        slice_index = 0

        first = min(capacity_px(self._usable_mm - self._cursor_mm, density), remaining)
        if first > 0:
            tail = self._place(section, slice_index, y_start, first, density)
            y_start += first
            remaining -= first
            slice_index += 1

        while remaining > 0:
            self._break_page()
            band = min(page_capacity, remaining)
            tail = self._place(section, slice_index, y_start, band, density)
            y_start += band
            remaining -= band
            slice_index += 1

        logger.debug(
            "Split section %s into %s slice(s)",
            section.index,
            slice_index,
            extra={"event": "pagination.split", "section": section.index, "slices": slice_index},
        )

        if self._policy is SplitBreakPolicy.REUSE_LEFTOVER:
            self._cursor_mm = tail.bottom_mm + self._config.section_gap_mm
        else:
            # Page holding the tail slice accepts nothing further
            self._cursor_mm = self._usable_mm

    def _place(
        self,
        section: Section,
        slice_index: Optional[int],
        y_start_px: int,
        height_px: int,
        density: float,
    ) -> Placement:
        placement = Placement(
            page_number=self._page_number,
            section_index=section.index,
            slice_index=slice_index,
            y_start_px=y_start_px,
            height_px=height_px,
            y_offset_mm=self._cursor_mm,
            height_mm=px_to_mm(height_px, density),
        )
        self._pages[-1].placements.append(placement)
        self._pending.append(PlaceImage(placement))
        return placement

    # ------------------------------------------------------------------
    # Page lifecycle
    # ------------------------------------------------------------------

    def _open_page(self) -> None:
        self._page_number += 1
        self._cursor_mm = 0.0
        self._pages.append(PagePlacement(self._page_number))
        self._pending.append(OpenPage(self._page_number))
        self._pending.append(DrawHeader(self._page_number))

    def _close_page(self) -> None:
        self._pending.append(DrawFooter(self._page_number))
        self._pending.append(ClosePage(self._page_number))

    def _break_page(self) -> None:
        self._close_page()
        self._open_page()

    def _drain(self) -> List[PageInstruction]:
        drained, self._pending = self._pending, []
        return drained


@timed
def paginate(
    sections: Iterable[Section],
    config: PageConfig,
    fallback: Optional[Section] = None,
    policy: SplitBreakPolicy = SplitBreakPolicy.FORCE_PAGE_BREAK,
) -> PaginationResult:
    """Paginate an already-rendered sequence of sections in one call.

    When ``sections`` is empty the ``fallback`` section (normally the whole
    exported container) is laid out on its own.
    """
    ordered = list(sections)
    if not ordered:
        if fallback is None:
            raise ValueError("No sections to paginate and no fallback section given")
        ordered = [fallback]

    paginator = Paginator(config, policy)
    instructions: List[PageInstruction] = []
    for section in ordered:
        instructions.extend(paginator.add_section(section))
    instructions.extend(paginator.finish())

    return PaginationResult(instructions=instructions, pages=paginator.pages)

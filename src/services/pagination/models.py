"""Data containers for the export pagination engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union


class SplitBreakPolicy(Enum):
    """What happens below the tail slice of a split section."""

    FORCE_PAGE_BREAK = "force_page_break"
    """Next section always starts on a fresh page."""

    REUSE_LEFTOVER = "reuse_leftover"
    """Next section may use the space left under the tail slice."""


@dataclass(frozen=True)
class Section:
    """One rendered section, described by its bitmap size."""

    index: int              # position in view order
    pixel_width: int
    pixel_height: int
    label: str = ""

    def __post_init__(self) -> None:
        if self.pixel_width <= 0:
            raise ValueError(f"Section {self.index} has no pixel width: {self.pixel_width}")
        if self.pixel_height < 0:
            raise ValueError(f"Section {self.index} has negative pixel height: {self.pixel_height}")


@dataclass(frozen=True)
class Placement:
    """A whole section or one slice of it, positioned on a page.

    ``slice_index`` is None when the section was placed whole.
    ``y_offset_mm`` is measured from the top of the page's usable area.
    """

    page_number: int
    section_index: int
    slice_index: Optional[int]
    y_start_px: int
    height_px: int
    y_offset_mm: float
    height_mm: float

    @property
    def is_slice(self) -> bool:
        return self.slice_index is not None

    @property
    def bottom_mm(self) -> float:
        return self.y_offset_mm + self.height_mm


@dataclass
class PagePlacement:
    """Everything placed on one page."""

    page_number: int
    placements: List[Placement] = field(default_factory=list)


@dataclass(frozen=True)
class OpenPage:
    page_number: int


@dataclass(frozen=True)
class DrawHeader:
    page_number: int


@dataclass(frozen=True)
class PlaceImage:
    placement: Placement

    @property
    def page_number(self) -> int:
        return self.placement.page_number


@dataclass(frozen=True)
class DrawFooter:
    page_number: int


@dataclass(frozen=True)
class ClosePage:
    page_number: int


PageInstruction = Union[OpenPage, DrawHeader, PlaceImage, DrawFooter, ClosePage]


@dataclass
class PaginationResult:
    """Output of an eager pagination run."""

    instructions: List[PageInstruction]
    pages: List[PagePlacement]

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def placements(self) -> List[Placement]:
        return [placement for page in self.pages for placement in page.placements]

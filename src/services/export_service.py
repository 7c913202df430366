"""PDF export orchestration: render, paginate and write sections in order.

Sections are rendered lazily, one at a time, and each bitmap is released as
soon as its placements have been written. Any failure aborts the whole
export and discards the partial file.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Protocol, Sequence

from config.page_config import PageConfig
from services.pagination import (
    PageInstruction,
    Paginator,
    Placement,
    PlaceImage,
    Section,
    SplitBreakPolicy,
)
from utils.error_handling import log_exception
from utils.timing import PhaseTimer

logger = logging.getLogger(__name__)


class ExportError(RuntimeError):
    """Raised when an export is aborted; no file is left behind."""


class RenderedImage(Protocol):
    def width(self) -> int: ...

    def height(self) -> int: ...


class DocumentWriter(Protocol):
    """Executes page instructions into an output document."""

    def open(self, output_path: Path) -> None: ...

    def handle(self, instruction: PageInstruction, image: Optional[RenderedImage]) -> None: ...

    def close(self) -> Path: ...

    def abort(self) -> None: ...


SectionRenderer = Callable[[Any], RenderedImage]


@dataclass
class ExportSummary:
    """Outcome of a completed export."""

    output_path: Path
    page_count: int
    section_count: int
    placements: List[Placement] = field(default_factory=list)
    timings: List[Dict[str, Any]] = field(default_factory=list)


class PdfExportService:
    """Drives renderer -> paginator -> writer for one export at a time."""

    def __init__(
        self,
        config: PageConfig,
        renderer: SectionRenderer,
        writer: DocumentWriter,
        policy: SplitBreakPolicy = SplitBreakPolicy.FORCE_PAGE_BREAK,
    ) -> None:
        self.config = config
        self._renderer = renderer
        self._writer = writer
        self._policy = policy

    def export(
        self,
        sources: Sequence[Any],
        output_path: Path | str,
        fallback: Any = None,
    ) -> ExportSummary:
        """Export ``sources`` in order to ``output_path``.

        Args:
            sources: Section sources in view order (widgets for the Qt renderer)
            output_path: Destination file
            fallback: Source exported as the only section when ``sources`` is empty

        Raises:
            ExportError: rendering or writing failed; nothing was written
        """
        output_path = Path(output_path)
        ordered = list(sources)
        if not ordered:
            if fallback is None:
                raise ExportError("Nothing to export: no sections and no fallback container")
            logger.info(
                "No marked sections, exporting the whole container",
                extra={"event": "export.fallback"},
            )
            ordered = [fallback]

        timer = PhaseTimer({"output": str(output_path)})
        paginator = Paginator(self.config, self._policy)
        placements: List[Placement] = []

        logger.info(
            "Starting PDF export of %s section(s)",
            len(ordered),
            extra={"event": "export.start", "sections": len(ordered), "output": str(output_path)},
        )

        try:
            self._writer.open(output_path)
            for index, source in enumerate(ordered):
                with timer.measure("render", {"section": index}):
                    image = self._renderer(source)
                section = Section(
                    index=index,
                    pixel_width=image.width(),
                    pixel_height=image.height(),
                    label=_source_label(source),
                )
                with timer.measure("write", {"section": index}):
                    placements.extend(self._run(paginator.add_section(section), image))
                del image

            with timer.measure("write", {"section": None}):
                self._run(paginator.finish(), None)
                written = self._writer.close()
        except Exception as e:
            self._writer.abort()
            log_exception(e, "PDF export failed", extra={"output": str(output_path)})
            raise ExportError(f"PDF export failed: {e}") from e

        summary = ExportSummary(
            output_path=written,
            page_count=paginator.page_number,
            section_count=len(ordered),
            placements=placements,
            timings=timer.as_list(),
        )
        logger.info(
            "PDF export finished: %s page(s) in %.2fs",
            summary.page_count,
            timer.total("render") + timer.total("write"),
            extra={"event": "export.finished", "pages": summary.page_count, "output": str(written)},
        )
        return summary

    def _run(
        self,
        instructions: List[PageInstruction],
        image: Optional[RenderedImage],
    ) -> List[Placement]:
        placed: List[Placement] = []
        for instruction in instructions:
            self._writer.handle(instruction, image)
            if isinstance(instruction, PlaceImage):
                placed.append(instruction.placement)
        return placed


def _source_label(source: Any) -> str:
    getter = getattr(source, "objectName", None)
    if callable(getter):
        return str(getter() or "")
    return ""

"""Layout inputs and results.

This module defines the values that flow into and out of a render pass:
- LayoutMode: Sample sheet or inline text
- LayoutContext: Mode, scale and text for one pass
- RenderedSegment: One line segment in absolute output coordinates
- CanvasExtent: Output size in pixels
- GlyphPlacement: Where one character was drawn and what it produced
- Layout: The complete, ordered result of a pass
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from strokeplot.domain.glyph import Glyph, Vertex
from strokeplot.exceptions import LayoutContextError

DEFAULT_SCALE = 100


class LayoutMode(str, Enum):
    """How characters are placed on the canvas."""

    SAMPLE_SHEET = "sample_sheet"
    TEXT = "text"


@dataclass(frozen=True, slots=True)
class LayoutContext:
    """Parameters for a single layout pass.

    Attributes:
        mode: Layout mode
        scale: Height parameter that sizes the output canvas (positive)
        text: Characters to render; required for TEXT, absent for SAMPLE_SHEET
    """

    mode: LayoutMode
    scale: int = DEFAULT_SCALE
    text: str | None = None

    def __post_init__(self) -> None:
        if self.scale < 1:
            raise LayoutContextError(f"Scale must be a positive integer, got {self.scale}")
        if self.mode is LayoutMode.TEXT and self.text is None:
            raise LayoutContextError("Text mode requires text to render")
        if self.mode is LayoutMode.SAMPLE_SHEET and self.text is not None:
            raise LayoutContextError("Sample sheet mode does not take text")

    @classmethod
    def sample_sheet(cls, scale: int = DEFAULT_SCALE) -> "LayoutContext":
        """Create a sample-sheet context."""
        return cls(mode=LayoutMode.SAMPLE_SHEET, scale=scale)

    @classmethod
    def for_text(cls, text: str, scale: int = DEFAULT_SCALE) -> "LayoutContext":
        """Create a text context."""
        return cls(mode=LayoutMode.TEXT, scale=scale, text=text)


@dataclass(frozen=True, slots=True)
class RenderedSegment:
    """A line segment in absolute output coordinates.

    Attributes:
        start: Start point
        end: End point
    """

    start: Vertex
    end: Vertex

    def to_tuple(self) -> tuple[tuple[int, int], tuple[int, int]]:
        """Convert to ((x1, y1), (x2, y2))."""
        return (self.start.to_tuple(), self.end.to_tuple())

    def to_dict(self) -> dict[str, Any]:
        return {"start": self.start.to_dict(), "end": self.end.to_dict()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RenderedSegment":
        return cls(start=Vertex.from_dict(data["start"]), end=Vertex.from_dict(data["end"]))


@dataclass(frozen=True, slots=True)
class CanvasExtent:
    """Output canvas size in pixels."""

    width: int
    height: int


@dataclass(frozen=True, slots=True)
class GlyphPlacement:
    """A drawn character and the segments it produced.

    Attributes:
        code: Character code
        glyph: Glyph that was rendered
        origin: Placement origin the glyph geometry was offset by
        segments: Segments produced, in draw order
    """

    code: int
    glyph: Glyph
    origin: Vertex
    segments: tuple[RenderedSegment, ...]


@dataclass(frozen=True)
class Layout:
    """Result of one layout pass.

    Attributes:
        mode: Mode the layout was produced in
        extent: Output canvas size
        bounds: Upper logical coordinate bounds (x_max, y_max); lower bounds are 0
        font_name: Name of the font that was laid out
        placements: Drawn characters in input order
        skipped: Visited codes that resolved to the sentinel, in input order
        pen: Final pen position (TEXT mode only)
    """

    mode: LayoutMode
    extent: CanvasExtent
    bounds: tuple[int, int]
    font_name: str
    placements: tuple[GlyphPlacement, ...] = ()
    skipped: tuple[int, ...] = ()
    pen: Vertex | None = None
    segments: tuple[RenderedSegment, ...] = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "segments",
            tuple(seg for placement in self.placements for seg in placement.segments),
        )

    @property
    def segment_count(self) -> int:
        """Number of segments in the layout."""
        return len(self.segments)

"""Layout engine for sample sheets and inline text.

Two layouts are supported:

- Text: characters are drawn left to right from (0, TEXT_BASELINE), the
  pen advancing by each glyph's width.
- Sample sheet: codes 32..255 are drawn in a 32 x 8 grid of fixed cells,
  row 0 at the top of the coordinate space. Glyph widths are ignored.

Canvas extents depend only on the mode and scale, never on glyph geometry.
"""

from strokeplot.core.renderer import GlyphRenderer
from strokeplot.domain import (
    CanvasExtent,
    Font,
    GlyphPlacement,
    Layout,
    LayoutContext,
    LayoutMode,
    Vertex,
)

TEXT_BASELINE = 8
TEXT_EXTENT_COLUMNS = 16
TEXT_LOGICAL_WIDTH = 16 * 16
TEXT_LOGICAL_HEIGHT = 2 * 16

FIRST_PRINTABLE = 32
LAST_CODE = 255
GRID_COLUMNS = 32
GRID_ROWS = 8
CELL_WIDTH = 32
CELL_HEIGHT = 64


def sample_sheet_origin(code: int) -> Vertex:
    """Get the grid cell origin of a code on the sample sheet.

    Args:
        code: Character code 0..255

    Returns:
        Lower-left origin of the code's cell
    """
    column = code % GRID_COLUMNS
    row = code // GRID_COLUMNS
    return Vertex(column * CELL_WIDTH, GRID_ROWS * CELL_HEIGHT - row * CELL_HEIGHT)


def sample_sheet_codes() -> range:
    """Codes visited by the sample sheet, in order."""
    return range(FIRST_PRINTABLE, LAST_CODE + 1)


def canvas_extent(context: LayoutContext) -> CanvasExtent:
    """Get the output canvas size for a context."""
    if context.mode is LayoutMode.SAMPLE_SHEET:
        return CanvasExtent(TEXT_EXTENT_COLUMNS * context.scale, GRID_ROWS * context.scale)
    return CanvasExtent(TEXT_EXTENT_COLUMNS * context.scale, context.scale)


def logical_bounds(mode: LayoutMode) -> tuple[int, int]:
    """Get the upper logical coordinate bounds for a mode."""
    if mode is LayoutMode.SAMPLE_SHEET:
        return (GRID_COLUMNS * CELL_WIDTH, GRID_ROWS * CELL_HEIGHT)
    return (TEXT_LOGICAL_WIDTH, TEXT_LOGICAL_HEIGHT)


class LayoutEngine:
    """Lays out a font under a LayoutContext.

    The engine holds no state between calls; all per-pass values live in
    the context and in locals, so repeated calls with the same inputs give
    identical results.
    """

    def __init__(self, renderer: GlyphRenderer | None = None) -> None:
        self.renderer = renderer or GlyphRenderer()

    def layout(self, font: Font, context: LayoutContext) -> Layout:
        """Lay out a font.

        Args:
            font: Font to draw from (read only)
            context: Mode, scale and text

        Returns:
            Layout with placements and segments in draw order, the codes
            that had no glyph, and the final pen in TEXT mode
        """
        placements: list[GlyphPlacement] = []
        skipped: list[int] = []
        pen: Vertex | None = None

        if context.mode is LayoutMode.SAMPLE_SHEET:
            self._layout_sample_sheet(font, placements, skipped)
        else:
            pen = self._layout_text(font, context.text or "", placements, skipped)

        return Layout(
            mode=context.mode,
            extent=canvas_extent(context),
            bounds=logical_bounds(context.mode),
            font_name=font.name,
            placements=tuple(placements),
            skipped=tuple(skipped),
            pen=pen,
        )

    def _layout_text(
        self,
        font: Font,
        text: str,
        placements: list[GlyphPlacement],
        skipped: list[int],
    ) -> Vertex:
        pen = Vertex(0, TEXT_BASELINE)
        for ch in text:
            code = ord(ch)
            glyph = font.glyph_for(code)
            segments, advance = self.renderer.render(glyph, pen)
            if glyph.is_empty():
                skipped.append(code)
            else:
                placements.append(
                    GlyphPlacement(code=code, glyph=glyph, origin=pen, segments=segments)
                )
            pen = Vertex(pen.x + advance, pen.y)
        return pen

    def _layout_sample_sheet(
        self,
        font: Font,
        placements: list[GlyphPlacement],
        skipped: list[int],
    ) -> None:
        for code in sample_sheet_codes():
            glyph = font.glyph_for(code)
            if glyph.is_empty():
                skipped.append(code)
                continue
            origin = sample_sheet_origin(code)
            segments, _ = self.renderer.render(glyph, origin)
            placements.append(
                GlyphPlacement(code=code, glyph=glyph, origin=origin, segments=segments)
            )


def layout(font: Font, context: LayoutContext) -> Layout:
    """Lay out a font with a default engine. See LayoutEngine.layout()."""
    return LayoutEngine().layout(font, context)

"""Core rendering for strokeplot.

This module contains:

- The glyph renderer (glyph + origin -> segments + advance)
- The layout engine (sample sheet and inline text)
- The render pipeline (resolve, lay out, emit)

The renderer and layout engine are pure: they hold no state between calls
and never mutate the font.

Key functions:
- render_glyph: Render one glyph at an origin
- LayoutEngine.layout: Lay out a font under a LayoutContext
- sample_sheet_origin: Grid cell origin of a code

Key classes:
- GlyphRenderer: Stateless renderer
- LayoutEngine: Stateless layout engine
- RenderPipeline: End-to-end orchestration with logging
"""

from strokeplot.core.layout import (
    CELL_HEIGHT,
    CELL_WIDTH,
    FIRST_PRINTABLE,
    GRID_COLUMNS,
    GRID_ROWS,
    TEXT_BASELINE,
    LayoutEngine,
    canvas_extent,
    logical_bounds,
    sample_sheet_codes,
    sample_sheet_origin,
)
from strokeplot.core.pipeline import RenderPipeline, RenderResult, build_store
from strokeplot.core.renderer import GlyphRenderer, render_glyph, render_stroke

__all__ = [
    # Layout constants
    "CELL_HEIGHT",
    "CELL_WIDTH",
    "FIRST_PRINTABLE",
    "GRID_COLUMNS",
    "GRID_ROWS",
    "TEXT_BASELINE",
    # Renderer
    "GlyphRenderer",
    # Layout
    "LayoutEngine",
    # Pipeline
    "RenderPipeline",
    "RenderResult",
    "build_store",
    "canvas_extent",
    "logical_bounds",
    "render_glyph",
    "render_stroke",
    "sample_sheet_codes",
    "sample_sheet_origin",
]

"""Domain models for strokeplot.

This module contains the domain models representing stroke fonts and the
results of laying them out. All models are:

- Immutable (frozen dataclasses, tuple-backed sequences)
- Integer-valued, so layout arithmetic has no rounding
- Serializable to plain dictionaries

Key classes:
- Vertex: An integer 2D point
- Stroke: A polyline of vertices
- Glyph: Advance width plus strokes (EMPTY_GLYPH is the sentinel)
- Font: 256-entry glyph table
- LayoutContext: Mode, scale and text for a pass
- Layout: Ordered segments, canvas extent and placements
"""

from strokeplot.domain.font import CODE_COUNT, Font
from strokeplot.domain.glyph import EMPTY_GLYPH, Glyph, Stroke, Vertex
from strokeplot.domain.layout import (
    DEFAULT_SCALE,
    CanvasExtent,
    GlyphPlacement,
    Layout,
    LayoutContext,
    LayoutMode,
    RenderedSegment,
)

__all__: list[str] = [
    # Constants
    "CODE_COUNT",
    "DEFAULT_SCALE",
    "EMPTY_GLYPH",
    # Enums
    "LayoutMode",
    # Geometry
    "Vertex",
    "Stroke",
    "Glyph",
    "Font",
    # Layout
    "CanvasExtent",
    "GlyphPlacement",
    "Layout",
    "LayoutContext",
    "RenderedSegment",
]

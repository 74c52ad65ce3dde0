"""Glyph renderer.

Turns a glyph and a pen origin into absolute line segments. Each stroke
with n vertices yields n - 1 segments joining consecutive vertices; no
segment joins one stroke to the next.
"""

from strokeplot.domain import Glyph, RenderedSegment, Stroke, Vertex


def render_stroke(stroke: Stroke, origin: Vertex) -> list[RenderedSegment]:
    """Render one stroke offset by origin.

    Args:
        stroke: Polyline to render
        origin: Offset applied to every vertex

    Returns:
        Segments in vertex order (empty for strokes under two vertices)
    """
    points = [vertex + origin for vertex in stroke.vertices]
    return [RenderedSegment(start, end) for start, end in zip(points, points[1:])]


def render_glyph(glyph: Glyph, origin: Vertex) -> tuple[tuple[RenderedSegment, ...], int]:
    """Render a glyph at origin.

    The sentinel glyph renders nothing and reports an advance of 0.

    Args:
        glyph: Glyph to render
        origin: Pen position the glyph geometry is offset by

    Returns:
        Tuple of (segments in draw order, horizontal advance)
    """
    if glyph.is_empty():
        return (), 0

    segments: list[RenderedSegment] = []
    for stroke in glyph.strokes:
        segments.extend(render_stroke(stroke, origin))

    return tuple(segments), glyph.width


class GlyphRenderer:
    """Stateless glyph renderer.

    Example:
        renderer = GlyphRenderer()
        segments, advance = renderer.render(glyph, Vertex(0, 8))
    """

    def render(self, glyph: Glyph, origin: Vertex) -> tuple[tuple[RenderedSegment, ...], int]:
        """Render a glyph at origin. See render_glyph()."""
        return render_glyph(glyph, origin)

"""Tests for domain models to verify they work correctly."""

import pytest

from strokeplot.domain import (
    EMPTY_GLYPH,
    CanvasExtent,
    Font,
    Glyph,
    GlyphPlacement,
    Layout,
    LayoutContext,
    LayoutMode,
    RenderedSegment,
    Stroke,
    Vertex,
)
from strokeplot.exceptions import LayoutContextError


class TestVertex:
    """Tests for Vertex class."""

    def test_vertex_creation(self) -> None:
        """Test basic vertex creation."""
        v = Vertex(3, -4)
        assert v.x == 3
        assert v.y == -4

    def test_vertex_addition(self) -> None:
        """Test offsetting one vertex by another."""
        assert Vertex(5, 10) + Vertex(32, 384) == Vertex(37, 394)

    def test_vertex_to_tuple(self) -> None:
        """Test vertex to tuple conversion."""
        assert Vertex(1, 2).to_tuple() == (1, 2)

    def test_vertex_serialization(self) -> None:
        """Test vertex serialization and deserialization."""
        v = Vertex(7, -2)
        assert v.to_dict() == [7, -2]
        assert Vertex.from_dict([7, -2]) == v

    def test_vertex_immutable(self) -> None:
        """Test that vertex is immutable."""
        v = Vertex(1, 2)
        with pytest.raises(AttributeError):
            v.x = 3  # type: ignore

    def test_vertex_hashable(self) -> None:
        """Test vertices can be used in sets."""
        assert len({Vertex(1, 2), Vertex(1, 2), Vertex(2, 1)}) == 2


class TestStroke:
    """Tests for Stroke class."""

    def test_vertices_stored_as_tuple(self) -> None:
        """A list of vertices is frozen into a tuple."""
        stroke = Stroke([Vertex(0, 0), Vertex(1, 1)])  # type: ignore[arg-type]
        assert isinstance(stroke.vertices, tuple)
        assert len(stroke) == 2

    def test_drawable(self) -> None:
        """Strokes need two vertices to draw."""
        assert Stroke((Vertex(0, 0), Vertex(1, 0))).is_drawable()
        assert not Stroke((Vertex(0, 0),)).is_drawable()
        assert not Stroke(()).is_drawable()

    def test_stroke_serialization(self) -> None:
        """Test stroke serialization and deserialization."""
        stroke = Stroke((Vertex(0, 0), Vertex(5, 10), Vertex(10, 0)))
        data = stroke.to_dict()
        assert data == [[0, 0], [5, 10], [10, 0]]
        assert Stroke.from_dict(data) == stroke


class TestGlyph:
    """Tests for Glyph class."""

    def test_sentinel_is_empty(self) -> None:
        """Zero width with no strokes is the sentinel."""
        assert EMPTY_GLYPH.is_empty()
        assert Glyph(width=0).is_empty()

    def test_zero_width_with_strokes_not_empty(self) -> None:
        """Zero-width glyphs with strokes are real glyphs."""
        glyph = Glyph(width=0, strokes=(Stroke((Vertex(0, 0), Vertex(1, 1))),))
        assert not glyph.is_empty()

    def test_blank_glyph_not_empty(self) -> None:
        """A glyph with width but no strokes is not the sentinel."""
        assert not Glyph(width=16).is_empty()

    def test_negative_width_rejected(self) -> None:
        """Negative advance widths are invalid."""
        with pytest.raises(ValueError, match="non-negative"):
            Glyph(width=-1)

    def test_vertex_count(self) -> None:
        """Vertex count sums over strokes."""
        glyph = Glyph(
            width=10,
            strokes=(
                Stroke((Vertex(0, 0), Vertex(1, 1), Vertex(2, 0))),
                Stroke((Vertex(0, 5),)),
            ),
        )
        assert glyph.vertex_count == 4

    def test_glyph_serialization(self) -> None:
        """Test glyph serialization and deserialization."""
        glyph = Glyph(width=10, strokes=(Stroke((Vertex(0, 0), Vertex(5, 10))),))
        data = glyph.to_dict()
        assert data == {"width": 10, "strokes": [[[0, 0], [5, 10]]]}
        assert Glyph.from_dict(data) == glyph

    def test_glyph_from_dict_without_strokes(self) -> None:
        """Strokes default to none."""
        assert Glyph.from_dict({"width": 0}) == EMPTY_GLYPH


class TestFont:
    """Tests for Font class."""

    @pytest.fixture
    def font(self) -> Font:
        glyph_a = Glyph(width=10, strokes=(Stroke((Vertex(0, 0), Vertex(5, 10))),))
        return Font("test", {65: glyph_a, 66: EMPTY_GLYPH})

    def test_lookup(self, font: Font) -> None:
        """Defined codes return their glyph."""
        assert font.glyph_for(65).width == 10

    def test_missing_code_returns_sentinel(self, font: Font) -> None:
        """Undefined codes resolve to the sentinel."""
        assert font.glyph_for(67) is EMPTY_GLYPH
        assert font.glyph_for(66) is EMPTY_GLYPH

    def test_out_of_range_returns_sentinel(self, font: Font) -> None:
        """Codes outside 0..255 never fail."""
        assert font.glyph_for(-1) is EMPTY_GLYPH
        assert font.glyph_for(256) is EMPTY_GLYPH
        assert font.glyph_for(0x263A) is EMPTY_GLYPH

    def test_out_of_range_construction_rejected(self) -> None:
        """Fonts only hold codes 0..255."""
        with pytest.raises(ValueError, match="outside"):
            Font("bad", {300: Glyph(width=1)})

    def test_membership_and_length(self, font: Font) -> None:
        """Only drawable codes count as members."""
        assert 65 in font
        assert 66 not in font
        assert len(font) == 1
        assert list(font) == [65]

    def test_font_serialization(self, font: Font) -> None:
        """Test font serialization and deserialization."""
        data = font.to_dict()
        assert data["name"] == "test"
        assert list(data["glyphs"]) == ["65"]

        restored = Font.from_dict(data)
        assert restored.name == "test"
        assert restored.glyph_for(65) == font.glyph_for(65)


class TestLayoutContext:
    """Tests for LayoutContext validation."""

    def test_defaults(self) -> None:
        """Scale defaults to 100."""
        context = LayoutContext.sample_sheet()
        assert context.mode is LayoutMode.SAMPLE_SHEET
        assert context.scale == 100
        assert context.text is None

    def test_text_context(self) -> None:
        """Text contexts carry their text."""
        context = LayoutContext.for_text("Hi", scale=50)
        assert context.mode is LayoutMode.TEXT
        assert context.text == "Hi"
        assert context.scale == 50

    def test_empty_text_allowed(self) -> None:
        """An empty string is still text."""
        assert LayoutContext.for_text("").text == ""

    def test_text_required_in_text_mode(self) -> None:
        """Text mode without text is invalid."""
        with pytest.raises(LayoutContextError, match="requires text"):
            LayoutContext(mode=LayoutMode.TEXT)

    def test_text_rejected_in_sample_sheet_mode(self) -> None:
        """Sample sheets do not take text."""
        with pytest.raises(LayoutContextError):
            LayoutContext(mode=LayoutMode.SAMPLE_SHEET, text="A")

    @pytest.mark.parametrize("scale", [0, -5])
    def test_scale_must_be_positive(self, scale: int) -> None:
        """Non-positive scales are invalid."""
        with pytest.raises(ValueError, match="positive"):
            LayoutContext.sample_sheet(scale=scale)


class TestLayout:
    """Tests for the Layout result container."""

    def test_segments_flattened_in_order(self) -> None:
        """Segments follow placement order."""
        s1 = RenderedSegment(Vertex(0, 0), Vertex(1, 1))
        s2 = RenderedSegment(Vertex(1, 1), Vertex(2, 0))
        s3 = RenderedSegment(Vertex(5, 5), Vertex(6, 6))
        glyph = Glyph(width=1)
        layout = Layout(
            mode=LayoutMode.TEXT,
            extent=CanvasExtent(1600, 100),
            bounds=(256, 32),
            font_name="test",
            placements=(
                GlyphPlacement(65, glyph, Vertex(0, 8), (s1, s2)),
                GlyphPlacement(66, glyph, Vertex(1, 8), (s3,)),
            ),
        )
        assert layout.segments == (s1, s2, s3)
        assert layout.segment_count == 3

    def test_segment_serialization(self) -> None:
        """Test segment serialization and deserialization."""
        seg = RenderedSegment(Vertex(0, 8), Vertex(5, 18))
        assert seg.to_tuple() == ((0, 8), (5, 18))
        assert RenderedSegment.from_dict(seg.to_dict()) == seg

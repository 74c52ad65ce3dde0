"""Unit tests for font resolution.

Tests for FontStore, glyph-set document loading and the built-in font.
"""

import json
from pathlib import Path

import pytest

from strokeplot.domain import EMPTY_GLYPH, Font, Glyph, Stroke, Vertex
from strokeplot.exceptions import FontResolutionError, GlyphDataError
from strokeplot.io.builtin import BUILTIN_FONT_NAME, builtin_font
from strokeplot.io.store import FontStore, GlyphSetDocument, load_glyph_set

DOCUMENT = {
    "name": "caret",
    "glyphs": {
        "65": {"width": 10, "strokes": [[[0, 0], [5, 10], [10, 0]]]},
        "32": {"width": 16},
    },
}


@pytest.fixture
def font_dir(tmp_path: Path) -> Path:
    """Directory holding one glyph-set document."""
    (tmp_path / "caret.json").write_text(json.dumps(DOCUMENT), encoding="utf-8")
    return tmp_path


class TestLoadGlyphSet:
    """Tests for load_glyph_set."""

    def test_load(self, font_dir):
        """Documents load into fonts."""
        font = load_glyph_set(font_dir / "caret.json")

        assert font.name == "caret"
        glyph = font.glyph_for(65)
        assert glyph.width == 10
        assert glyph.strokes[0].vertices == (Vertex(0, 0), Vertex(5, 10), Vertex(10, 0))
        assert font.glyph_for(32) == Glyph(width=16)
        assert font.glyph_for(66) is EMPTY_GLYPH

    def test_missing_file(self, tmp_path):
        """Missing documents raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_glyph_set(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        """Unparseable documents raise GlyphDataError."""
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(GlyphDataError):
            load_glyph_set(path)

    def test_not_utf8(self, tmp_path):
        """Documents that are not UTF-8 raise GlyphDataError."""
        path = tmp_path / "latin.json"
        path.write_bytes(b'{"name": "\xff\xfe"}')
        with pytest.raises(GlyphDataError, match="UTF-8"):
            load_glyph_set(path)

    def test_negative_width(self, tmp_path):
        """Negative widths are rejected."""
        path = tmp_path / "neg.json"
        path.write_text(json.dumps({"name": "neg", "glyphs": {"65": {"width": -1}}}))
        with pytest.raises(GlyphDataError):
            load_glyph_set(path)

    def test_code_out_of_range(self, tmp_path):
        """Codes above 255 are rejected."""
        path = tmp_path / "big.json"
        path.write_text(json.dumps({"name": "big", "glyphs": {"300": {"width": 1}}}))
        with pytest.raises(GlyphDataError, match="outside"):
            load_glyph_set(path)

    def test_roundtrip_with_font_to_dict(self, tmp_path):
        """Documents written from Font.to_dict() load back."""
        font = Font("rt", {70: Glyph(width=3, strokes=(Stroke((Vertex(0, 0), Vertex(0, 9))),))})
        path = tmp_path / "rt.json"
        path.write_text(json.dumps(font.to_dict()))
        assert load_glyph_set(path).glyph_for(70) == font.glyph_for(70)

    def test_document_model(self):
        """Document models validate string codes as integers."""
        document = GlyphSetDocument.model_validate(DOCUMENT)
        assert set(document.glyphs) == {65, 32}

    def test_document_builds_same_font_as_from_dict(self):
        """Validated documents build fonts through Font.from_dict()."""
        font = GlyphSetDocument.model_validate(DOCUMENT).to_font()
        assert font.to_dict() == Font.from_dict(DOCUMENT).to_dict()


class TestFontStore:
    """Tests for FontStore."""

    def test_registered_font(self):
        """Registered fonts resolve by name."""
        store = FontStore()
        font = builtin_font()
        store.register(font)
        assert store.resolve(BUILTIN_FONT_NAME) is font

    def test_search_path(self, font_dir):
        """Documents resolve by stem from search paths."""
        store = FontStore([font_dir])
        assert store.resolve("caret").name == "caret"

    def test_search_path_order(self, tmp_path):
        """Earlier search paths win."""
        first = tmp_path / "first"
        second = tmp_path / "second"
        first.mkdir()
        second.mkdir()
        (first / "f.json").write_text(json.dumps({"name": "from-first"}))
        (second / "f.json").write_text(json.dumps({"name": "from-second"}))

        assert FontStore([first, second]).resolve("f").name == "from-first"

    def test_direct_path(self, font_dir):
        """Identifiers that are paths load directly."""
        store = FontStore()
        assert store.resolve(str(font_dir / "caret.json")).name == "caret"

    def test_not_found(self, tmp_path):
        """Unknown fonts raise FontResolutionError."""
        store = FontStore([tmp_path])
        with pytest.raises(FontResolutionError, match="no such font") as exc_info:
            store.resolve("futural")
        assert exc_info.value.identifier == "futural"

    def test_missing_direct_path(self, tmp_path):
        """Missing document paths raise FontResolutionError."""
        with pytest.raises(FontResolutionError):
            FontStore().resolve(str(tmp_path / "missing.json"))

    def test_malformed_document(self, tmp_path):
        """Malformed documents surface as FontResolutionError."""
        (tmp_path / "bad.json").write_text("[]")
        with pytest.raises(FontResolutionError) as exc_info:
            FontStore([tmp_path]).resolve("bad")
        assert isinstance(exc_info.value.__cause__, GlyphDataError)

    def test_not_utf8_document(self, tmp_path):
        """Undecodable documents surface as FontResolutionError."""
        (tmp_path / "bad.json").write_bytes(b'{"name": "\xff\xfe"}')
        with pytest.raises(FontResolutionError) as exc_info:
            FontStore([tmp_path]).resolve("bad")
        assert isinstance(exc_info.value.__cause__, GlyphDataError)

    def test_available(self, font_dir):
        """available() lists registered fonts and documents."""
        store = FontStore([font_dir, font_dir / "missing"])
        store.register(builtin_font())
        assert store.available() == ["caret", BUILTIN_FONT_NAME]


class TestBuiltinFont:
    """Tests for the built-in demo font."""

    def test_name(self):
        assert builtin_font().name == BUILTIN_FONT_NAME

    def test_digits_defined(self):
        """All digits draw."""
        font = builtin_font()
        for ch in "0123456789":
            assert ord(ch) in font

    def test_space_is_blank(self):
        """Space advances without drawing."""
        space = builtin_font().glyph_for(32)
        assert space.width > 0
        assert space.strokes == ()

    def test_accent_is_zero_width(self):
        """The acute accent is a zero-width glyph that draws."""
        accent = builtin_font().glyph_for(0xB4)
        assert accent.width == 0
        assert not accent.is_empty()

    def test_lowercase_undefined(self):
        """Undefined characters resolve to the sentinel."""
        assert builtin_font().glyph_for(ord("a")) is EMPTY_GLYPH

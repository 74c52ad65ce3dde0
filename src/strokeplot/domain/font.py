"""In-memory stroke font.

A Font maps character codes 0..255 to glyphs through a fixed 256-entry
table. Codes without a glyph resolve to EMPTY_GLYPH.
"""

from collections.abc import Iterator, Mapping
from typing import Any

from strokeplot.domain.glyph import EMPTY_GLYPH, Glyph

CODE_COUNT = 256


class Font:
    """Read-only glyph table for one font.

    Example:
        font = Font("demo", {65: Glyph(10, [Stroke([Vertex(0, 0), Vertex(5, 10)])])})
        font.glyph_for(65)   # the glyph
        font.glyph_for(66)   # EMPTY_GLYPH
    """

    __slots__ = ("_name", "_table")

    def __init__(self, name: str, glyphs: Mapping[int, Glyph]) -> None:
        """Build the lookup table.

        Args:
            name: Font name, used as a title by emitters
            glyphs: Glyphs keyed by character code

        Raises:
            ValueError: If a code is outside 0..255
        """
        table = [EMPTY_GLYPH] * CODE_COUNT
        for code, glyph in glyphs.items():
            if not 0 <= code < CODE_COUNT:
                raise ValueError(f"Character code {code} outside 0..{CODE_COUNT - 1}")
            table[code] = glyph
        self._name = name
        self._table: tuple[Glyph, ...] = tuple(table)

    @property
    def name(self) -> str:
        """Font name."""
        return self._name

    def glyph_for(self, code: int) -> Glyph:
        """Get the glyph for a character code.

        Never fails: undefined codes and codes outside 0..255 return
        the sentinel glyph.

        Args:
            code: Character code

        Returns:
            The glyph, or EMPTY_GLYPH
        """
        if 0 <= code < CODE_COUNT:
            return self._table[code]
        return EMPTY_GLYPH

    def __contains__(self, code: object) -> bool:
        return isinstance(code, int) and not self.glyph_for(code).is_empty()

    def __iter__(self) -> Iterator[int]:
        return (code for code, glyph in enumerate(self._table) if not glyph.is_empty())

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"Font(name={self._name!r}, glyphs={len(self)})"

    def items(self) -> Iterator[tuple[int, Glyph]]:
        """Iterate (code, glyph) pairs for defined glyphs in code order."""
        for code in self:
            yield code, self._table[code]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a glyph-set document.

        Returns:
            Dictionary with the font name and glyphs keyed by code string
        """
        return {
            "name": self._name,
            "glyphs": {str(code): glyph.to_dict() for code, glyph in self.items()},
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Font":
        """Deserialize from a glyph-set document.

        Args:
            data: Dictionary as produced by to_dict()

        Returns:
            Font instance
        """
        glyphs = {int(code): Glyph.from_dict(g) for code, g in data.get("glyphs", {}).items()}
        return cls(name=str(data["name"]), glyphs=glyphs)

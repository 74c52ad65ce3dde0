"""Built-in demo font.

A small monoline font so the tool works without any glyph-set documents.
Cap height is 16 units on a 14-unit advance; space is a blank glyph with
width but no strokes, and the acute accent is a zero-width glyph that draws
over the preceding character.
"""

from strokeplot.domain import Font, Glyph, Stroke, Vertex

BUILTIN_FONT_NAME = "simplex-demo"

# character: (advance width, [stroke, ...])
_DEMO_GLYPHS: dict[str, tuple[int, list[list[tuple[int, int]]]]] = {
    " ": (8, []),
    "!": (14, [[(7, 16), (7, 5)], [(7, 1), (7, 0)]]),
    "-": (14, [[(3, 8), (11, 8)]]),
    ".": (14, [[(6, 0), (7, 0), (7, 1), (6, 1), (6, 0)]]),
    "0": (14, [[(2, 0), (12, 0), (12, 16), (2, 16), (2, 0)], [(2, 0), (12, 16)]]),
    "1": (14, [[(4, 12), (7, 16), (7, 0)], [(4, 0), (10, 0)]]),
    "2": (14, [[(2, 16), (12, 16), (12, 8), (2, 8), (2, 0), (12, 0)]]),
    "3": (14, [[(2, 16), (12, 16), (12, 0), (2, 0)], [(4, 8), (12, 8)]]),
    "4": (14, [[(10, 0), (10, 16), (2, 6), (12, 6)]]),
    "5": (14, [[(12, 16), (2, 16), (2, 8), (12, 8), (12, 0), (2, 0)]]),
    "6": (14, [[(12, 16), (2, 16), (2, 0), (12, 0), (12, 8), (2, 8)]]),
    "7": (14, [[(2, 16), (12, 16), (5, 0)]]),
    "8": (14, [[(2, 0), (12, 0), (12, 16), (2, 16), (2, 0)], [(2, 8), (12, 8)]]),
    "9": (14, [[(2, 0), (12, 0), (12, 16), (2, 16), (2, 8), (12, 8)]]),
    "A": (14, [[(2, 0), (7, 16), (12, 0)], [(4, 6), (10, 6)]]),
    "D": (14, [[(2, 0), (2, 16), (8, 16), (12, 12), (12, 4), (8, 0), (2, 0)]]),
    "E": (14, [[(12, 16), (2, 16), (2, 0), (12, 0)], [(2, 8), (9, 8)]]),
    "H": (14, [[(2, 0), (2, 16)], [(12, 0), (12, 16)], [(2, 8), (12, 8)]]),
    "L": (14, [[(2, 16), (2, 0), (12, 0)]]),
    "O": (14, [[(2, 0), (2, 16), (12, 16), (12, 0), (2, 0)]]),
    "R": (14, [[(2, 0), (2, 16), (12, 16), (12, 8), (2, 8)], [(6, 8), (12, 0)]]),
    "W": (14, [[(2, 16), (4, 0), (7, 10), (10, 0), (12, 16)]]),
    "´": (0, [[(-6, 18), (-3, 21)]]),
}


def builtin_font() -> Font:
    """Build the built-in demo font.

    Returns:
        Font named BUILTIN_FONT_NAME
    """
    glyphs = {
        ord(ch): Glyph(
            width=width,
            strokes=tuple(Stroke(tuple(Vertex(x, y) for x, y in s)) for s in strokes),
        )
        for ch, (width, strokes) in _DEMO_GLYPHS.items()
    }
    return Font(BUILTIN_FONT_NAME, glyphs)

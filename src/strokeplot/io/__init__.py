"""Font lookup and script output for strokeplot.

Key responsibilities:
- Resolve font identifiers to in-memory fonts
- Load glyph-set documents
- Provide the built-in demo font
- Serialize layouts as gnuplot scripts

Key classes:
- FontStore: Resolve fonts by name or path
- GnuplotEmitter: Write gnuplot scripts
"""

from strokeplot.io.builtin import BUILTIN_FONT_NAME, builtin_font
from strokeplot.io.gnuplot import GnuplotEmitter
from strokeplot.io.store import FontStore, GlyphSetDocument, load_glyph_set

__all__ = [
    "BUILTIN_FONT_NAME",
    "FontStore",
    "GlyphSetDocument",
    "GnuplotEmitter",
    "builtin_font",
    "load_glyph_set",
]

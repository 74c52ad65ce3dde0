"""gnuplot script emitter.

This module serializes a Layout into a gnuplot script that draws every
segment as a headless arrow on a borderless, tic-less canvas. The script
ends with a dummy plot command so gnuplot renders the arrows.

Pipe the output to gnuplot:
    strokeplot futural 'Hello World!' | gnuplot -p
"""

from strokeplot.config import RenderConfig
from strokeplot.domain import GlyphPlacement, Layout, LayoutMode

SAMPLE_SHEET_RATIO = "0.5"
TEXT_RATIO = "0.125"


def _quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _printable(code: int) -> str:
    ch = chr(code)
    return ch if ch.isprintable() else "?"


class GnuplotEmitter:
    """Writes layouts as gnuplot scripts.

    Example:
        emitter = GnuplotEmitter(RenderConfig(terminal="png crop"))
        script = emitter.emit(layout)
    """

    def __init__(self, config: RenderConfig | None = None) -> None:
        self.config = config or RenderConfig()

    def emit(self, layout: Layout) -> str:
        """Serialize a layout.

        Args:
            layout: Layout to serialize

        Returns:
            Complete gnuplot script, newline terminated
        """
        return "\n".join(self.lines(layout)) + "\n"

    def lines(self, layout: Layout) -> list[str]:
        """Serialize a layout into script lines."""
        lines = self._header(layout)
        for placement in layout.placements:
            lines.extend(self._glyph_lines(placement))
        lines.append("plot NaN notitle")
        return lines

    def _header(self, layout: Layout) -> list[str]:
        x_max, y_max = layout.bounds
        lines = [
            "#",
            "# gnuplot input file generated by strokeplot",
            "#",
            "",
            "",
            f"set terminal {self.config.terminal} size {layout.extent.width},{layout.extent.height}",
            "",
            "unset xtics",
            "unset ytics",
            "unset border",
            "unset key",
        ]
        if layout.mode is LayoutMode.SAMPLE_SHEET:
            lines.append(f"set title {_quote(layout.font_name)}")
            lines.append(f"set size ratio {SAMPLE_SHEET_RATIO}")
        else:
            lines.append(f"set size ratio {TEXT_RATIO}")
        lines.extend(
            [
                f"set xrange [0:{x_max}]",
                f"set yrange [0:{y_max}]",
                "set style arrow 1 nohead",
                f"set style line 1 lc rgb {_quote(self.config.line_color)} "
                f"lw {self.config.line_width:g}",
            ]
        )
        return lines

    def _glyph_lines(self, placement: GlyphPlacement) -> list[str]:
        glyph = placement.glyph
        lines: list[str] = []
        if self.config.annotate:
            lines.append(
                f"#  [[ {_printable(placement.code)} ]] glyph({placement.code}) "
                f"width={glyph.width} npaths={len(glyph.strokes)}"
            )

        segments = iter(placement.segments)
        for stroke in glyph.strokes:
            if self.config.annotate:
                lines.append(f"#\t\tpath: nverts={len(stroke)}")
            for _ in range(max(len(stroke) - 1, 0)):
                seg = next(segments)
                lines.append(
                    f"set arrow from {seg.start.x},{seg.start.y} "
                    f"to {seg.end.x},{seg.end.y} as 1 ls 1"
                )
        return lines

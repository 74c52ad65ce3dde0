"""Render pipeline orchestration.

This module coordinates a full render: resolve the font, lay it out, and
serialize the layout with the gnuplot emitter. Font resolution happens
first, so a missing font aborts before any output is produced.
"""

from dataclasses import dataclass

from strokeplot.config import StrokeplotSettings
from strokeplot.core.layout import LayoutEngine
from strokeplot.domain import Layout, LayoutMode
from strokeplot.exceptions import FontResolutionError
from strokeplot.io import FontStore, GnuplotEmitter, builtin_font
from strokeplot.utils import RenderLogger, RenderStats, configure_logging


@dataclass
class RenderResult:
    """Output of a render pass.

    Attributes:
        layout: Laid-out segments and canvas extent
        script: Serialized gnuplot script
        stats: Render statistics
    """

    layout: Layout
    script: str
    stats: RenderStats


def build_store(settings: StrokeplotSettings) -> FontStore:
    """Create the font store described by settings."""
    store = FontStore(settings.store.search_paths)
    if settings.store.include_builtin:
        store.register(builtin_font())
    return store


class RenderPipeline:
    """Orchestrates font resolution, layout and script emission.

    Example:
        pipeline = RenderPipeline(StrokeplotSettings())
        result = pipeline.render("simplex-demo", "HELLO")
        print(result.script)
    """

    def __init__(
        self,
        settings: StrokeplotSettings,
        store: FontStore | None = None,
        quiet: bool = False,
    ) -> None:
        """Initialize the pipeline.

        Args:
            settings: Application settings
            store: Font store (built from settings if None)
            quiet: Suppress console logging
        """
        self.settings = settings
        self.store = store if store is not None else build_store(settings)
        self.logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level.value,
            file_level=settings.logging.file_log_level.value,
            quiet=quiet,
        )
        self.engine = LayoutEngine()
        self.emitter = GnuplotEmitter(settings.render)

    def render(self, font_identifier: str, text: str | None = None) -> RenderResult:
        """Render a sample sheet, or text when given.

        Args:
            font_identifier: Font name or glyph-set document path
            text: Text to render; None renders the sample sheet

        Returns:
            RenderResult with layout, script and statistics

        Raises:
            FontResolutionError: If the font cannot be resolved
        """
        render_logger = RenderLogger(self.logger)

        try:
            font = self.store.resolve(font_identifier)
        except FontResolutionError as e:
            render_logger.log_font_error(font_identifier, e)
            raise

        mode = LayoutMode.SAMPLE_SHEET if text is None else LayoutMode.TEXT
        context = self.settings.render.context(mode, text)

        render_logger.log_render_start(font.name, mode.value, context.scale)
        layout = self.engine.layout(font, context)
        self._record(render_logger, layout)
        script = self.emitter.emit(layout)
        render_logger.log_render_complete()

        return RenderResult(layout=layout, script=script, stats=render_logger.stats)

    def _record(self, render_logger: RenderLogger, layout: Layout) -> None:
        for placement in layout.placements:
            render_logger.log_glyph_drawn(placement.code, len(placement.segments))
        for code in layout.skipped:
            render_logger.log_glyph_skipped(code, reason="no glyph")

"""Configuration settings for Strokeplot."""

import os
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

from strokeplot.domain import DEFAULT_SCALE, LayoutContext, LayoutMode

FONT_PATH_ENV = "STROKEPLOT_FONT_PATH"


class LogLevel(str, Enum):
    """Accepted logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


def _search_paths_from_env() -> list[Path]:
    value = os.environ.get(FONT_PATH_ENV, "")
    return [Path(p) for p in value.split(os.pathsep) if p]


class RenderConfig(BaseModel):
    """Configuration for layout and script output."""

    scale: int = Field(
        default=DEFAULT_SCALE,
        ge=1,
        description="Height parameter; sizes the output canvas in pixels",
    )
    terminal: str = Field(
        default="wxt",
        description="gnuplot terminal type and options (e.g. 'png crop transparent')",
    )
    line_width: float = Field(
        default=0.5,
        gt=0.0,
        le=20.0,
        description="Stroke line width",
    )
    line_color: str = Field(
        default="black",
        description="Stroke line color",
    )
    annotate: bool = Field(
        default=True,
        description="Emit per-glyph and per-stroke comment lines",
    )

    def context(self, mode: LayoutMode, text: str | None = None) -> LayoutContext:
        """Build the layout context for this configuration.

        Args:
            mode: Layout mode
            text: Text to render (TEXT mode only)

        Returns:
            LayoutContext using the configured scale
        """
        return LayoutContext(mode=mode, scale=self.scale, text=text)


class StoreConfig(BaseModel):
    """Configuration for font lookup."""

    search_paths: list[Path] = Field(
        default_factory=_search_paths_from_env,
        description="Directories searched for glyph-set documents",
    )
    include_builtin: bool = Field(
        default=True,
        description="Register the built-in demo font",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: LogLevel = Field(
        default=LogLevel.WARNING,
        description="Console log level",
    )
    file_log_level: LogLevel = Field(
        default=LogLevel.DEBUG,
        description="File log level (more verbose)",
    )


class StrokeplotSettings(BaseModel):
    """Main application settings."""

    render: RenderConfig = Field(default_factory=RenderConfig)
    store: StoreConfig = Field(default_factory=StoreConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> StrokeplotSettings:
    """Get default application settings."""
    return StrokeplotSettings()

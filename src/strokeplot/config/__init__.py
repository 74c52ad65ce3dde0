"""Configuration management for strokeplot.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments, environment or defaults.

Key classes:
- RenderConfig: Scale and script output settings
- StoreConfig: Font search paths
- LoggingConfig: Logging settings
- StrokeplotSettings: Main application settings
"""

from strokeplot.config.settings import (
    FONT_PATH_ENV,
    LogLevel,
    LoggingConfig,
    RenderConfig,
    StoreConfig,
    StrokeplotSettings,
    get_default_settings,
)

__all__ = [
    "FONT_PATH_ENV",
    "LogLevel",
    "LoggingConfig",
    "RenderConfig",
    "StoreConfig",
    "StrokeplotSettings",
    "get_default_settings",
]

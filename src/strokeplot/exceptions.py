"""Exception hierarchy for Strokeplot."""


class StrokeplotError(Exception):
    """Base exception for all Strokeplot errors."""

    pass


class FontError(StrokeplotError):
    """Errors related to locating or loading fonts."""

    pass


class FontResolutionError(FontError):
    """The named font cannot be found or loaded."""

    def __init__(self, identifier: str, reason: str) -> None:
        self.identifier = identifier
        self.reason = reason
        super().__init__(f"Failed to resolve font '{identifier}': {reason}")


class GlyphDataError(FontError):
    """Malformed glyph-set data."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid glyph data: {reason}")


class LayoutContextError(StrokeplotError, ValueError):
    """Invalid combination of layout mode, scale and text."""

    def __init__(self, message: str) -> None:
        super().__init__(message)

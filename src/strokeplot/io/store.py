"""Font store for resolving font identifiers.

This module provides the FontStore class, which resolves a font identifier
to an in-memory Font. Fonts come either from fonts registered in memory or
from glyph-set documents (the JSON form of Font.to_dict()) found on disk.
Documents are validated with pydantic, then built with Font.from_dict().
"""

from collections.abc import Iterable
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from strokeplot.domain import Font
from strokeplot.exceptions import FontResolutionError, GlyphDataError

DOCUMENT_SUFFIX = ".json"


class GlyphEntry(BaseModel):
    """Validated glyph record of a glyph-set document."""

    width: int = Field(ge=0)
    strokes: list[list[tuple[int, int]]] = Field(default_factory=list)


class GlyphSetDocument(BaseModel):
    """Validated glyph-set document."""

    name: str
    glyphs: dict[int, GlyphEntry] = Field(default_factory=dict)

    def to_font(self) -> Font:
        try:
            return Font.from_dict(self.model_dump())
        except ValueError as e:
            raise GlyphDataError(str(e)) from e


def load_glyph_set(path: Path) -> Font:
    """Load a glyph-set document from disk.

    Args:
        path: Path to the JSON document

    Returns:
        Font built from the document

    Raises:
        FileNotFoundError: If the document does not exist
        GlyphDataError: If the document is malformed or not UTF-8
    """
    try:
        text = path.read_bytes().decode("utf-8")
    except UnicodeDecodeError as e:
        raise GlyphDataError(f"{path}: not valid UTF-8 ({e.reason} at byte {e.start})") from e
    try:
        document = GlyphSetDocument.model_validate_json(text)
    except ValidationError as e:
        raise GlyphDataError(f"{path}: {e.error_count()} validation error(s)") from e
    return document.to_font()


class FontStore:
    """Resolves font identifiers to fonts.

    Lookup order:
    1. Fonts registered with register()
    2. Identifiers that look like paths (contain a separator or end in .json)
    3. <identifier>.json in each search path, in order

    Example:
        store = FontStore([Path("fonts")])
        font = store.resolve("futural")
    """

    def __init__(self, search_paths: Iterable[Path] = ()) -> None:
        """Initialize the font store.

        Args:
            search_paths: Directories holding glyph-set documents
        """
        self._search_paths = [Path(p) for p in search_paths]
        self._registered: dict[str, Font] = {}

    @property
    def search_paths(self) -> list[Path]:
        """Directories searched for glyph-set documents."""
        return list(self._search_paths)

    def register(self, font: Font) -> None:
        """Register an in-memory font under its name."""
        self._registered[font.name] = font

    def resolve(self, identifier: str) -> Font:
        """Resolve a font identifier.

        Args:
            identifier: Registered font name, document path, or document stem

        Returns:
            The resolved font

        Raises:
            FontResolutionError: If the font cannot be found or loaded
        """
        if identifier in self._registered:
            return self._registered[identifier]

        path = self._find_document(identifier)
        if path is None:
            raise FontResolutionError(identifier, "no such font")

        try:
            return load_glyph_set(path)
        except (OSError, GlyphDataError) as e:
            raise FontResolutionError(identifier, str(e)) from e

    def available(self) -> list[str]:
        """List resolvable font names.

        Returns:
            Sorted names of registered fonts and documents in search paths
        """
        names = set(self._registered)
        for directory in self._search_paths:
            if directory.is_dir():
                names.update(p.stem for p in directory.glob(f"*{DOCUMENT_SUFFIX}"))
        return sorted(names)

    def _find_document(self, identifier: str) -> Path | None:
        if "/" in identifier or "\\" in identifier or identifier.endswith(DOCUMENT_SUFFIX):
            path = Path(identifier)
            return path if path.is_file() else None

        for directory in self._search_paths:
            candidate = directory / f"{identifier}{DOCUMENT_SUFFIX}"
            if candidate.is_file():
                return candidate
        return None

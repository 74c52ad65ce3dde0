"""Glyph geometry for stroke fonts.

This module defines the geometric types of a skeleton glyph:
- Vertex: An integer 2D point in font design units
- Stroke: A single connected polyline
- Glyph: An advance width plus zero or more strokes
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Vertex:
    """An integer point in 2D space.

    Immutable and hashable. Adding two vertices offsets one by the other,
    which is how glyph geometry is moved to its placement origin.

    Attributes:
        x: X coordinate in design units
        y: Y coordinate in design units
    """

    x: int
    y: int

    def __add__(self, other: "Vertex") -> "Vertex":
        if not isinstance(other, Vertex):
            return NotImplemented
        return Vertex(self.x + other.x, self.y + other.y)

    def to_tuple(self) -> tuple[int, int]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> list[int]:
        """Serialize to a two-element list."""
        return [self.x, self.y]

    @classmethod
    def from_dict(cls, data: Any) -> "Vertex":
        """Deserialize from an [x, y] pair.

        Args:
            data: Sequence of two integers

        Returns:
            Vertex instance
        """
        x, y = data
        return cls(x=int(x), y=int(y))


@dataclass(frozen=True, slots=True)
class Stroke:
    """A connected polyline drawn as consecutive line segments.

    A stroke with fewer than two vertices is legal but draws nothing.

    Attributes:
        vertices: Ordered vertices of the polyline
    """

    vertices: tuple[Vertex, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "vertices", tuple(self.vertices))

    def __len__(self) -> int:
        return len(self.vertices)

    def is_drawable(self) -> bool:
        """Check if the stroke produces at least one segment."""
        return len(self.vertices) >= 2

    def to_dict(self) -> list[list[int]]:
        """Serialize to a list of [x, y] pairs."""
        return [v.to_dict() for v in self.vertices]

    @classmethod
    def from_dict(cls, data: Any) -> "Stroke":
        """Deserialize from a list of [x, y] pairs."""
        return cls(vertices=tuple(Vertex.from_dict(v) for v in data))


@dataclass(frozen=True, slots=True)
class Glyph:
    """A single skeleton glyph.

    A glyph with width 0 and no strokes is the "undrawable character"
    sentinel (see EMPTY_GLYPH). A zero-width glyph that has strokes is
    a real glyph and still draws.

    Attributes:
        width: Horizontal advance in design units (non-negative)
        strokes: Independent polylines making up the glyph
    """

    width: int
    strokes: tuple[Stroke, ...] = ()

    def __post_init__(self) -> None:
        if self.width < 0:
            raise ValueError(f"Glyph width must be non-negative, got {self.width}")
        object.__setattr__(self, "strokes", tuple(self.strokes))

    def is_empty(self) -> bool:
        """Check if this glyph is the undrawable sentinel.

        Returns:
            True if the glyph has zero width and no strokes
        """
        return self.width == 0 and not self.strokes

    @property
    def vertex_count(self) -> int:
        """Total number of vertices over all strokes."""
        return sum(len(s) for s in self.strokes)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with width and strokes fields
        """
        return {
            "width": self.width,
            "strokes": [s.to_dict() for s in self.strokes],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Glyph":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with width and optional strokes fields

        Returns:
            Glyph instance
        """
        return cls(
            width=int(data["width"]),
            strokes=tuple(Stroke.from_dict(s) for s in data.get("strokes", [])),
        )


EMPTY_GLYPH = Glyph(width=0)

"""Point and rectangle value types.

Screen coordinates: y grows downward, so ``top <= bottom`` for any
well-formed rectangle.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from shapely.geometry import Polygon, box as shapely_box


@dataclass(frozen=True)
class Point:
    """An exact 2-D coordinate.  Hashable, compared by value."""

    x: float
    y: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Size:
    width: float
    height: float


@dataclass(frozen=True)
class Line:
    """A straight segment between two points (graph edge)."""

    a: Point
    b: Point


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(b.x - a.x, b.y - a.y)


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle given by location and size.

    Width and height are expected to be >= 0.  Nothing here validates
    that; requests are checked in ``router.validation`` before they
    reach the geometry.
    """

    left: float
    top: float
    width: float
    height: float
    # Edges given to from_ltrb, kept so right/bottom round-trip exactly
    _right: float | None = field(default=None, repr=False, compare=False)
    _bottom: float | None = field(default=None, repr=False, compare=False)

    @classmethod
    def from_ltrb(cls, left: float, top: float, right: float, bottom: float) -> Rectangle:
        return cls(left, top, right - left, bottom - top, right, bottom)

    @classmethod
    def empty(cls) -> Rectangle:
        return cls(0, 0, 0, 0)

    # ── Derived edges and points ───────────────────────────────────

    @property
    def right(self) -> float:
        if self._right is not None:
            return self._right
        return self.left + self.width

    @property
    def bottom(self) -> float:
        if self._bottom is not None:
            return self._bottom
        return self.top + self.height

    @property
    def center(self) -> Point:
        return Point(self.left + self.width / 2, self.top + self.height / 2)

    @property
    def location(self) -> Point:
        return Point(self.left, self.top)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def north_west(self) -> Point:
        return Point(self.left, self.top)

    @property
    def north(self) -> Point:
        return Point(self.center.x, self.top)

    @property
    def north_east(self) -> Point:
        return Point(self.right, self.top)

    @property
    def east(self) -> Point:
        return Point(self.right, self.center.y)

    @property
    def south_east(self) -> Point:
        return Point(self.right, self.bottom)

    @property
    def south(self) -> Point:
        return Point(self.center.x, self.bottom)

    @property
    def south_west(self) -> Point:
        return Point(self.left, self.bottom)

    @property
    def west(self) -> Point:
        return Point(self.left, self.center.y)

    # ── Operations ─────────────────────────────────────────────────

    def contains(self, p: Point) -> bool:
        """Inclusive containment: points on the boundary are inside."""
        return self.left <= p.x <= self.right and self.top <= p.y <= self.bottom

    def inflate(self, horizontal: float, vertical: float) -> Rectangle:
        """Grow every side outward (negative values shrink)."""
        return Rectangle.from_ltrb(
            self.left - horizontal,
            self.top - vertical,
            self.right + horizontal,
            self.bottom + vertical,
        )

    def intersects(self, other: Rectangle) -> bool:
        """True if the interiors overlap.  Touching edges do not count."""
        return (
            other.left < self.right
            and self.left < other.right
            and other.top < self.bottom
            and self.top < other.bottom
        )

    def union(self, other: Rectangle) -> Rectangle:
        """Smallest rectangle covering both."""
        return Rectangle.from_ltrb(
            min(self.left, other.left),
            min(self.top, other.top),
            max(self.right, other.right),
            max(self.bottom, other.bottom),
        )

    def to_shapely(self) -> Polygon:
        return shapely_box(self.left, self.top, self.right, self.bottom)

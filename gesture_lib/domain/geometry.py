"""Geometric value objects for gesture paths."""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Sequence
import math


@dataclass(frozen=True)
class Point:
    """Immutable 2D point."""
    x: float
    y: float

    def distance_to(self, other: Point) -> float:
        """Euclidean distance to another point."""
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def scale(self, sx: float, sy: Optional[float] = None) -> Point:
        """Scale about the origin, uniformly or per axis."""
        if sy is None:
            sy = sx
        return Point(self.x * sx, self.y * sy)

    def angle(self) -> float:
        """Angle of the vector from the origin, in radians."""
        return math.atan2(self.y, self.x)

    def rotate(self, angle: float, pivot: Point) -> Point:
        """Rotate counter-clockwise by ``angle`` radians about ``pivot``."""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        dx = self.x - pivot.x
        dy = self.y - pivot.y
        return Point(
            dx * cos_a - dy * sin_a + pivot.x,
            dx * sin_a + dy * cos_a + pivot.y,
        )

    def to_list(self) -> List[float]:
        """Convert to list for JSON serialization."""
        return [float(self.x), float(self.y)]

    @staticmethod
    def interpolate(p1: Point, p2: Point, t: float) -> Point:
        """Point at fraction ``t`` of the way from ``p1`` to ``p2``."""
        return Point(
            p1.x + (p2.x - p1.x) * t,
            p1.y + (p2.y - p1.y) * t,
        )

    @staticmethod
    def min(p1: Point, p2: Point) -> Point:
        """Component-wise minimum."""
        return Point(min(p1.x, p2.x), min(p1.y, p2.y))

    @staticmethod
    def max(p1: Point, p2: Point) -> Point:
        """Component-wise maximum."""
        return Point(max(p1.x, p2.x), max(p1.y, p2.y))

    @classmethod
    def from_list(cls, lst: List[float]) -> Point:
        """Create from list."""
        return cls(float(lst[0]), float(lst[1]))


@dataclass(frozen=True)
class BBox:
    """Immutable axis-aligned bounding box."""
    x_min: float
    y_min: float
    x_max: float
    y_max: float

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min

    @property
    def extent(self) -> Point:
        """Width and height packed into a Point."""
        return Point(self.width, self.height)

    @classmethod
    def from_points(cls, points: Sequence[Point]) -> BBox:
        """Create bounding box containing all points."""
        if not points:
            return cls(0, 0, 0, 0)
        low = high = points[0]
        for p in points:
            low = Point.min(low, p)
            high = Point.max(high, p)
        return cls(low.x, low.y, high.x, high.y)

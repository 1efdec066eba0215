"""Domain objects for gesture recognition.

This module provides the value objects used throughout the package:

Geometry classes:
    Point: Immutable 2D point with vector operations.
    BBox: Immutable axis-aligned bounding box.

Gesture classes:
    Template: Named, normalized reference path.
    Match: Result of recognizing a candidate against the templates.

Example usage:
    Working with geometry::

        from gesture_lib.domain import Point, BBox

        p1 = Point(0, 0)
        p2 = Point(100, 100)
        distance = p1.distance_to(p2)
        halfway = Point.interpolate(p1, p2, 0.5)

        bbox = BBox.from_points([p1, p2])
        width, height = bbox.width, bbox.height
"""

from .geometry import BBox, Point
from .gesture import Match, Template

__all__ = ['Point', 'BBox', 'Template', 'Match']

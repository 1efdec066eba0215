"""Geometric transforms used to normalize gesture paths.

Every function takes a path (any sequence of Points, in stroke order) and
returns a new list of Points; inputs are never modified.

The module provides the following functions:
    path_length: Total arc length of a path.
    centroid: Mean of all points.
    indicative_angle: Angle from the centroid to the first point.
    bounding_box_extent: Width and height of the bounding box.
    resample: Redistribute points at equal arc-length intervals.
    rotate_by: Rotate about the path's centroid.
    scale_to: Non-uniform scale of the bounding box to a square.
    translate_to: Move the centroid to a target point.

Example usage:
    Normalizing by hand::

        from gesture_lib.domain import Point
        from gesture_lib.normalization.transforms import (
            resample, indicative_angle, rotate_by, scale_to, translate_to,
        )

        points = resample(raw_points, 64)
        points = rotate_by(points, -indicative_angle(points))
        points = translate_to(scale_to(points, 250.0), Point(0, 0))
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from ..config import DEGENERATE_RAISE, DEGENERATE_RATIO, DEGENERATE_SUBSTITUTE
from ..domain.geometry import BBox, Point
from ..errors import DegenerateBoundingBoxError, InvalidPathError

_logger = logging.getLogger(__name__)


def _require_points(points: Sequence[Point], minimum: int, operation: str) -> None:
    if len(points) < minimum:
        raise InvalidPathError(
            f"{operation} needs at least {minimum} point(s), got {len(points)}"
        )


def as_array(points: Sequence[Point]) -> np.ndarray:
    """Path as an (n, 2) float array."""
    return np.array([(p.x, p.y) for p in points], dtype=float).reshape(-1, 2)


def from_array(arr: np.ndarray) -> list[Point]:
    return [Point(float(x), float(y)) for x, y in arr]


def path_length(points: Sequence[Point]) -> float:
    """Sum of the distances between consecutive points.

    A single point is accepted and has length 0.0, so only an empty path is
    rejected here; ``resample`` is the transform that needs two points.

    Args:
        points: Path with at least one point.

    Returns:
        Total arc length.

    Raises:
        InvalidPathError: If the path is empty.
    """
    _require_points(points, 1, 'path_length')
    total = 0.0
    for i in range(1, len(points)):
        total += points[i].distance_to(points[i - 1])
    return total


def centroid(points: Sequence[Point]) -> Point:
    """Arithmetic mean of the x and y coordinates.

    A single point is accepted and is its own centroid.

    Raises:
        InvalidPathError: If the path is empty.
    """
    _require_points(points, 1, 'centroid')
    mean = as_array(points).mean(axis=0)
    return Point(float(mean[0]), float(mean[1]))


def indicative_angle(points: Sequence[Point]) -> float:
    """Angle in radians of the vector from the first point to the centroid.

    Rotating the path by the negative of this angle lines the first point up
    with the centroid along the x axis. A horizontal left-to-right stroke has
    an indicative angle of 0, the same stroke drawn right-to-left has pi.
    """
    _require_points(points, 1, 'indicative_angle')
    return (centroid(points) - points[0]).angle()


def bounding_box_extent(points: Sequence[Point]) -> Point:
    """Width and height of the bounding box, as ``Point(width, height)``."""
    _require_points(points, 1, 'bounding_box_extent')
    return BBox.from_points(points).extent


def resample(points: Sequence[Point], n: int) -> list[Point]:
    """Resample a path to ``n`` points evenly spaced by arc length.

    Walks the polyline once, accumulating the distance covered since the last
    emitted point. Each time the next segment would reach the interval
    ``path_length / (n - 1)``, a point is interpolated exactly one interval
    from the last emitted point and becomes the start of the next interval.
    Rounding can leave the walk one point short of the end, in which case the
    final input point is appended.

    Args:
        points: Path with at least two points.
        n: Number of points wanted, at least 2.

    Returns:
        Exactly ``n`` points. The first is the first input point.

    Raises:
        ValueError: If ``n`` is less than 2.
        InvalidPathError: If the path has fewer than two points.
    """
    if n < 2:
        raise ValueError(f"resample target must be at least 2, got {n}")
    _require_points(points, 2, 'resample')

    length = path_length(points)
    interval = length / (n - 1)
    _logger.debug("Resampling %d points (length %.3f) to %d", len(points), length, n)

    resampled = [points[0]]
    previous = points[0]
    accumulated = 0.0
    i = 1
    while i < len(points) and len(resampled) < n:
        current = points[i]
        segment = previous.distance_to(current)
        if segment > 0 and accumulated + segment >= interval:
            t = (interval - accumulated) / segment
            new_point = Point.interpolate(previous, current, t)
            resampled.append(new_point)
            previous = new_point
            accumulated = 0.0
        else:
            accumulated += segment
            previous = current
            i += 1

    # A zero-length path never emits, so pad rather than append once
    while len(resampled) < n:
        resampled.append(points[-1])
    return resampled


def rotate_by(points: Sequence[Point], angle: float) -> list[Point]:
    """Rotate every point counter-clockwise by ``angle`` about the centroid."""
    _require_points(points, 1, 'rotate_by')
    arr = as_array(points)
    center = arr.mean(axis=0)
    cos_a = np.cos(angle)
    sin_a = np.sin(angle)
    rotation = np.array([[cos_a, -sin_a], [sin_a, cos_a]])
    return from_array((arr - center) @ rotation.T + center)


def scale_to(points: Sequence[Point], size: float,
             policy: str = DEGENERATE_RAISE) -> list[Point]:
    """Scale non-uniformly so the bounding box becomes ``size`` x ``size``.

    Each x is multiplied by ``size / width`` and each y by ``size / height``.
    The scale is about the origin, not the centroid.

    A side that is zero, or no more than ``DEGENERATE_RATIO`` times the other
    side, cannot be stretched to ``size`` without turning rounding error into
    shape. The test is relative, so it behaves the same at any drawing scale.
    With ``policy='raise'`` such a box is an error; with
    ``policy='substitute'`` the flat side is taken to be 1, so that axis is
    multiplied by ``size`` and stays flat.

    Raises:
        DegenerateBoundingBoxError: Flat bounding box under ``'raise'``.
        ValueError: Unknown policy.
    """
    _require_points(points, 1, 'scale_to')
    if policy not in (DEGENERATE_RAISE, DEGENERATE_SUBSTITUTE):
        raise ValueError(f"unknown degenerate bounding box policy: {policy!r}")

    extent = bounding_box_extent(points)
    width, height = extent.x, extent.y
    flat = DEGENERATE_RATIO * max(width, height)
    if min(width, height) <= flat:
        if policy == DEGENERATE_RAISE:
            raise DegenerateBoundingBoxError(width, height)
        _logger.debug("Degenerate bounding box %g x %g, substituting 1", width, height)
        # A single repeated point is flat both ways
        width = width if width > flat else 1.0
        height = height if height > flat else 1.0

    factors = np.array([size / width, size / height])
    return from_array(as_array(points) * factors)


def translate_to(points: Sequence[Point], target: Point) -> list[Point]:
    """Shift the path so its centroid lands on ``target``."""
    _require_points(points, 1, 'translate_to')
    arr = as_array(points)
    offset = np.array([target.x, target.y]) - arr.mean(axis=0)
    return from_array(arr + offset)

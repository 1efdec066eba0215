"""Rotation-invariant comparison of normalized paths.

The matcher compares two paths of equal length point by point. Because the
indicative-angle rotation only roughly aligns two gestures, the candidate is
additionally rotated within a bracket of +/- 45 degrees, and a golden-section
search picks the rotation that gives the smallest average distance.

Example usage:
    Scoring a candidate against a template::

        from gesture_lib.matching import calculate_score, distance_at_best_angle
        from gesture_lib.normalization import normalize

        candidate = normalize(raw_candidate)
        template = normalize(raw_template)
        distance = distance_at_best_angle(candidate, template)
        score = calculate_score(candidate, template)
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from ..config import ANGLE_PRECISION, ANGLE_RANGE, PHI, SQUARE_SIZE, half_diagonal
from ..domain.geometry import Point
from ..errors import InvalidPathError, LengthMismatchError
from ..normalization.transforms import as_array, rotate_by


def path_distance(a: Sequence[Point], b: Sequence[Point]) -> float:
    """Mean Euclidean distance between corresponding points of two paths.

    Raises:
        LengthMismatchError: If the paths differ in length.
        InvalidPathError: If the paths are empty.
    """
    if len(a) != len(b):
        raise LengthMismatchError(len(a), len(b))
    if not a:
        raise InvalidPathError("path_distance needs non-empty paths")
    diff = as_array(a) - as_array(b)
    return float(np.hypot(diff[:, 0], diff[:, 1]).mean())


def distance_at_angle(a: Sequence[Point], b: Sequence[Point], theta: float) -> float:
    """Path distance after rotating ``a`` by ``theta`` about its centroid."""
    return path_distance(rotate_by(a, theta), b)


def distance_at_best_angle(a: Sequence[Point], b: Sequence[Point],
                           angle_range: float = ANGLE_RANGE,
                           angle_precision: float = ANGLE_PRECISION) -> float:
    """Smallest path distance over rotations of ``a`` in [-range, +range].

    Golden-section search: two probes split the bracket in the golden ratio,
    the side beyond the worse probe is dropped and the surviving probe is
    reused, so each step costs one evaluation. Stops once the bracket is no
    wider than ``angle_precision``.

    Returns:
        The minimum distance found (not the angle).
    """
    theta_a = -angle_range
    theta_b = angle_range
    x1 = PHI * theta_a + (1.0 - PHI) * theta_b
    f1 = distance_at_angle(a, b, x1)
    x2 = (1.0 - PHI) * theta_a + PHI * theta_b
    f2 = distance_at_angle(a, b, x2)
    while abs(theta_b - theta_a) > angle_precision:
        if f1 < f2:
            theta_b = x2
            x2, f2 = x1, f1
            x1 = PHI * theta_a + (1.0 - PHI) * theta_b
            f1 = distance_at_angle(a, b, x1)
        else:
            theta_a = x1
            x1, f1 = x2, f2
            x2 = (1.0 - PHI) * theta_a + PHI * theta_b
            f2 = distance_at_angle(a, b, x2)
    return min(f1, f2)


def score_from_distance(distance: float, size: float = SQUARE_SIZE) -> float:
    """Map a path distance to a similarity; 1 is a perfect match.

    Distances are measured against half the diagonal of the normalization
    square. The result is not clamped and goes negative for distances beyond
    that.
    """
    return 1.0 - distance / half_diagonal(size)


def calculate_score(candidate: Sequence[Point], template_points: Sequence[Point],
                    size: float = SQUARE_SIZE,
                    angle_range: float = ANGLE_RANGE,
                    angle_precision: float = ANGLE_PRECISION) -> float:
    """Similarity between a normalized candidate and a template's points."""
    distance = distance_at_best_angle(candidate, template_points,
                                      angle_range=angle_range,
                                      angle_precision=angle_precision)
    return score_from_distance(distance, size)

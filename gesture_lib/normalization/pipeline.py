"""The $1 normalization pipeline."""

from __future__ import annotations

from typing import Sequence

from ..config import DEGENERATE_RAISE, NUM_POINTS, ORIGIN, SQUARE_SIZE
from ..domain.geometry import Point
from .transforms import indicative_angle, resample, rotate_by, scale_to, translate_to


def normalize(points: Sequence[Point], num_points: int = NUM_POINTS,
              size: float = SQUARE_SIZE, origin: Point = ORIGIN,
              policy: str = DEGENERATE_RAISE) -> list[Point]:
    """Bring a raw path into canonical form.

    Resample to ``num_points``, rotate by the negative indicative angle of the
    resampled path, scale the bounding box to ``size``, then center the
    centroid on ``origin``. The order matters: the angle is measured on the
    resampled path, and scaling happens after rotation so the bounding box
    belongs to the oriented shape.

    Args:
        points: Raw path with at least two points.
        num_points: Resample target.
        size: Side of the normalization square.
        origin: Where the centroid ends up.
        policy: Degenerate bounding box policy passed to ``scale_to``.

    Returns:
        Normalized path of exactly ``num_points`` points.

    Raises:
        InvalidPathError: Fewer than two input points.
        DegenerateBoundingBoxError: Flat gesture under the ``'raise'`` policy.
    """
    sampled = resample(points, num_points)
    rotated = rotate_by(sampled, -indicative_angle(sampled))
    return translate_to(scale_to(rotated, size, policy=policy), origin)

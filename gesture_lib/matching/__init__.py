"""Rotation-invariant matching and scoring of normalized paths.

The module exports:
    path_distance: Mean point-to-point distance of equal-length paths.
    distance_at_angle: Path distance after rotating the first path.
    distance_at_best_angle: Golden-section search over the rotation.
    score_from_distance: Distance to similarity conversion.
    calculate_score: Best-angle distance turned into a similarity.
"""

from .matcher import (
    calculate_score,
    distance_at_angle,
    distance_at_best_angle,
    path_distance,
    score_from_distance,
)

__all__ = [
    'path_distance', 'distance_at_angle', 'distance_at_best_angle',
    'score_from_distance', 'calculate_score',
]

"""Shared configuration for gesture recognition.

This module centralizes the constants of the $1 recognizer used by:
    - gesture_lib.normalization (resample count, square size)
    - gesture_lib.matching (rotation search bracket and precision)
    - gesture_lib.recognizer and gesture_lib.cli (RecognizerConfig)

Having these values in one place keeps normalization and scoring in
agreement, since the score denominator depends on the square size.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .domain.geometry import Point

# Number of points every path is resampled to
NUM_POINTS = 64

# Side of the square the bounding box is scaled to
SQUARE_SIZE = 250.0

# Normalized paths are centered here
ORIGIN = Point(0.0, 0.0)

# Golden-section search over [-ANGLE_RANGE, +ANGLE_RANGE], stopping when the
# bracket is no wider than ANGLE_PRECISION
ANGLE_RANGE = math.radians(45.0)
ANGLE_PRECISION = math.radians(2.0)

# Golden ratio conjugate
PHI = 0.5 * (-1.0 + math.sqrt(5.0))

# scale_to treats a bounding box side as zero when it is no larger than this
# fraction of the other side
DEGENERATE_RATIO = 1e-9

# What scale_to does with a zero-width or zero-height bounding box
DEGENERATE_RAISE = 'raise'
DEGENERATE_SUBSTITUTE = 'substitute'
DEGENERATE_POLICIES = (DEGENERATE_RAISE, DEGENERATE_SUBSTITUTE)


def half_diagonal(size: float) -> float:
    """Half the diagonal of a size x size square."""
    return 0.5 * math.sqrt(2 * size * size)


@dataclass(frozen=True)
class RecognizerConfig:
    """Per-recognizer settings.

    Attributes:
        num_points: Resample target for templates and candidates.
        size: Side of the normalization square; also sets the score scale.
        angle_range: Half-width of the rotation search bracket (radians).
        angle_precision: Bracket width at which the search stops (radians).
        degenerate_policy: ``'raise'`` or ``'substitute'``, see
            ``gesture_lib.normalization.transforms.scale_to``.
    """
    num_points: int = NUM_POINTS
    size: float = SQUARE_SIZE
    angle_range: float = ANGLE_RANGE
    angle_precision: float = ANGLE_PRECISION
    degenerate_policy: str = DEGENERATE_RAISE

    def __post_init__(self):
        if self.num_points < 2:
            raise ValueError(f"num_points must be at least 2, got {self.num_points}")
        if self.size <= 0:
            raise ValueError(f"size must be positive, got {self.size}")
        if self.angle_range <= 0:
            raise ValueError(f"angle_range must be positive, got {self.angle_range}")
        if self.angle_precision <= 0:
            raise ValueError(f"angle_precision must be positive, got {self.angle_precision}")
        if self.degenerate_policy not in DEGENERATE_POLICIES:
            raise ValueError(
                f"degenerate_policy must be one of {DEGENERATE_POLICIES}, "
                f"got {self.degenerate_policy!r}"
            )

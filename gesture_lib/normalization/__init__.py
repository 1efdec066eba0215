"""Path normalization for gesture recognition.

Pure transforms that make gestures of different length, orientation, size
and position comparable, and the fixed pipeline that chains them.

The module exports:
    normalize: resample -> rotate -> scale -> translate.
    resample, rotate_by, scale_to, translate_to: the individual steps.
    path_length, centroid, indicative_angle, bounding_box_extent: measures
        used by the steps.
"""

from .pipeline import normalize
from .transforms import (
    bounding_box_extent,
    centroid,
    indicative_angle,
    path_length,
    resample,
    rotate_by,
    scale_to,
    translate_to,
)

__all__ = [
    'normalize',
    'resample', 'rotate_by', 'scale_to', 'translate_to',
    'path_length', 'centroid', 'indicative_angle', 'bounding_box_extent',
]

"""Gesture recognition package.

An implementation of the $1 single-stroke gesture recognizer. A raw stroke
is resampled to a fixed number of points, rotated so its indicative angle
is zero, scaled to a square and centered on the origin; it is then compared
against each registered template with a golden-section search over the
remaining rotation, and the closest template is reported with a similarity
score.

The package is organized into the following modules:
    domain: Value objects (Point, BBox, Template, Match).
    normalization: The geometric transforms and the normalization pipeline.
    matching: Path distance, rotation search and scoring.
    templates: Ordered template repository.
    recognizer: The Recognizer tying it together.
    utils: JSON gesture files.
    config: Constants and RecognizerConfig.
    errors: Exception hierarchy.
    cli: The ``gesture-recognize`` command.

Example usage:
    Basic recognition::

        from gesture_lib import Point, Recognizer

        recognizer = Recognizer()
        recognizer.add_template('caret', [Point(0, 100), Point(50, 0), Point(100, 100)])
        recognizer.add_template('check', [Point(0, 50), Point(30, 100), Point(100, 0)])

        match = recognizer.recognize([Point(10, 90), Point(55, 5), Point(95, 95)])
        print(match.name, match.score)

Attributes:
    __version__ (str): Package version string.
    __all__ (list): List of public symbols exported by this package.
"""

from .config import RecognizerConfig
from .domain import BBox, Match, Point, Template
from .errors import (
    DegenerateBoundingBoxError,
    EmptyTemplateRegistryError,
    GestureError,
    InvalidPathError,
    LengthMismatchError,
)
from .normalization import normalize
from .recognizer import Recognizer

__all__ = [
    # Domain objects
    'Point', 'BBox', 'Template', 'Match',
    # Recognition
    'Recognizer', 'RecognizerConfig', 'normalize',
    # Errors
    'GestureError', 'InvalidPathError', 'DegenerateBoundingBoxError',
    'EmptyTemplateRegistryError', 'LengthMismatchError',
]

__version__ = '1.0.0'

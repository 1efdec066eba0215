"""Exceptions raised by gesture_lib.

All errors derive from GestureError so callers can catch the whole family
in one place. Errors are raised at the call that detects the problem and
are never logged-and-swallowed inside the library.
"""


class GestureError(Exception):
    """Base class for gesture recognition errors."""


class InvalidPathError(GestureError, ValueError):
    """A path has too few points for the requested operation."""


class DegenerateBoundingBoxError(GestureError):
    """A path's bounding box has zero width or zero height.

    Raised by ``scale_to`` under the ``"raise"`` policy, typically for a
    perfectly straight horizontal or vertical stroke.
    """

    def __init__(self, width: float, height: float):
        self.width = width
        self.height = height
        super().__init__(
            f"cannot scale a path with bounding box {width:g} x {height:g}"
        )


class EmptyTemplateRegistryError(GestureError):
    """Recognition was requested before any template was registered."""


class LengthMismatchError(GestureError, ValueError):
    """Two paths that must be compared point by point differ in length."""

    def __init__(self, len_a: int, len_b: int):
        self.len_a = len_a
        self.len_b = len_b
        super().__init__(f"path lengths differ: {len_a} != {len_b}")

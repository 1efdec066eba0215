"""Utility helpers.

The module exports:
    load_gesture: Read a JSON gesture file into Points.
    save_gesture: Write Points to a JSON gesture file.
    parse_points: Convert decoded JSON into Points.
"""

from .gesture_io import load_gesture, parse_points, save_gesture

__all__ = ['load_gesture', 'save_gesture', 'parse_points']

"""JSON gesture files.

A gesture file holds one stroke either as a bare list of ``[x, y]`` pairs or
as an object with a ``points`` list and an optional ``name``::

    [[0, 50], [100, 50], [80, 30]]

    {"name": "arrow", "points": [[0, 50], [100, 50], [80, 30]]}
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional, Sequence, Union

from ..domain.geometry import Point
from ..errors import InvalidPathError

_logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def parse_points(data) -> list[Point]:
    """Convert decoded JSON into a list of Points.

    Raises:
        InvalidPathError: If the structure is not a list of numeric pairs.
    """
    if isinstance(data, dict):
        data = data.get('points')
    if not isinstance(data, list):
        raise InvalidPathError("gesture data must be a list of [x, y] pairs")

    points = []
    for i, item in enumerate(data):
        if not isinstance(item, (list, tuple)) or len(item) != 2:
            raise InvalidPathError(f"point {i} is not an [x, y] pair: {item!r}")
        try:
            points.append(Point.from_list(item))
        except (TypeError, ValueError) as e:
            raise InvalidPathError(f"point {i} has non-numeric coordinates: {item!r}") from e
    return points


def load_gesture(path: PathLike) -> list[Point]:
    """Read a gesture file.

    Raises:
        OSError: If the file cannot be read.
        InvalidPathError: If the content is not valid gesture JSON.
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding='utf-8'))
    except json.JSONDecodeError as e:
        raise InvalidPathError(f"{path}: invalid JSON: {e}") from e
    points = parse_points(data)
    _logger.debug("Loaded %d points from %s", len(points), path)
    return points


def save_gesture(path: PathLike, points: Sequence[Point], name: Optional[str] = None) -> None:
    """Write a gesture file, as an object when ``name`` is given."""
    data = [p.to_list() for p in points]
    if name is not None:
        data = {'name': name, 'points': data}
    Path(path).write_text(json.dumps(data), encoding='utf-8')

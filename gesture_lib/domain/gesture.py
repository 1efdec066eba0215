"""Template and match value objects."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from .geometry import Point


@dataclass(frozen=True)
class Template:
    """A named, normalized reference gesture.

    Templates are built by ``Recognizer.add_template`` and always hold a
    path that has already gone through the normalization pipeline.
    Several templates may share a name.
    """
    name: str
    points: Tuple[Point, ...]


@dataclass(frozen=True)
class Match:
    """Outcome of recognizing one candidate gesture.

    Attributes:
        name: Name of the best-matching template.
        score: Similarity in (-inf, 1]; 1 means identical shape.
        distance: Best-angle path distance between candidate and template.
        points: The winning template's normalized points.
        candidate: The normalized candidate that was matched.
    """
    name: str
    score: float
    distance: float
    points: Tuple[Point, ...]
    candidate: Tuple[Point, ...]

    @classmethod
    def from_template(cls, template: Template, score: float, distance: float,
                      candidate: Tuple[Point, ...]) -> Match:
        return cls(
            name=template.name,
            score=score,
            distance=distance,
            points=template.points,
            candidate=candidate,
        )

    def to_dict(self) -> dict:
        """Summary for JSON output; point lists are left out."""
        return {'name': self.name, 'score': self.score, 'distance': self.distance}

    def __str__(self) -> str:
        return f"{self.name}. Match score: {self.score}"

"""$1 single-stroke gesture recognizer.

This module provides the Recognizer class which owns a set of normalized
templates and matches new gestures against them. Recognition normalizes the
candidate, finds the template with the smallest best-angle path distance and
returns a Match carrying the score and the normalized candidate, so nothing
about a recognition is kept on the recognizer itself.

Example usage:
    Registering templates and recognizing::

        from gesture_lib import Recognizer

        recognizer = Recognizer()
        recognizer.add_template('arrow', arrow_points)
        recognizer.add_template('circle', circle_points)

        match = recognizer.recognize(drawn_points)
        print(match)  # arrow. Match score: 0.93...

    Custom configuration::

        from gesture_lib.config import RecognizerConfig

        recognizer = Recognizer(RecognizerConfig(num_points=32,
                                                 degenerate_policy='substitute'))
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from .config import RecognizerConfig
from .domain.geometry import Point
from .domain.gesture import Match, Template
from .errors import EmptyTemplateRegistryError
from .matching.matcher import distance_at_best_angle, score_from_distance
from .normalization.pipeline import normalize
from .templates.repository import TemplateRepository

_logger = logging.getLogger(__name__)


class Recognizer:
    """Template-based recognizer for single-stroke gestures.

    Templates are normalized once, when they are added. Registration is
    copy-on-write, so ``recognize`` may run concurrently with ``add_template``
    and always sees a consistent set of templates.

    Attributes:
        config: Normalization and search settings shared by templates and
            candidates.
    """

    def __init__(self, config: Optional[RecognizerConfig] = None):
        self.config = config or RecognizerConfig()
        self._repository = TemplateRepository()

    @property
    def templates(self) -> tuple[Template, ...]:
        """Registered templates in registration order."""
        return self._repository.snapshot()

    def normalize(self, points: Sequence[Point]) -> tuple[Point, ...]:
        """Run the normalization pipeline with this recognizer's settings."""
        return tuple(normalize(
            points,
            num_points=self.config.num_points,
            size=self.config.size,
            policy=self.config.degenerate_policy,
        ))

    def add_template(self, name: str, points: Sequence[Point]) -> Template:
        """Normalize ``points`` and register them under ``name``.

        Returns:
            The stored Template.

        Raises:
            InvalidPathError: Fewer than two points.
            DegenerateBoundingBoxError: Flat gesture under the ``'raise'``
                policy.
        """
        template = Template(name=name, points=self.normalize(points))
        self._repository.register(template)
        _logger.debug("Registered template %r (%d templates)", name, len(self._repository))
        return template

    def recognize(self, points: Sequence[Point]) -> Match:
        """Find the registered template closest to a raw gesture.

        Templates are scanned in registration order and only a strictly
        smaller distance replaces the current best, so the earliest template
        wins ties.

        Raises:
            EmptyTemplateRegistryError: No templates are registered.
            InvalidPathError: Fewer than two points.
            DegenerateBoundingBoxError: Flat gesture under the ``'raise'``
                policy.
        """
        templates = self._repository.snapshot()
        if not templates:
            raise EmptyTemplateRegistryError("no templates registered")

        candidate = self.normalize(points)
        best: Optional[Template] = None
        best_distance = float('inf')
        for template in templates:
            distance = self._distance(candidate, template.points)
            if distance < best_distance:
                best, best_distance = template, distance

        score = score_from_distance(best_distance, self.config.size)
        _logger.debug("Best match %r: distance=%.4f score=%.4f", best.name, best_distance, score)
        return Match.from_template(best, score=score, distance=best_distance, candidate=candidate)

    def calculate_score(self, template_points: Sequence[Point],
                        candidate: Sequence[Point]) -> float:
        """Similarity of a normalized candidate to a template's points.

        ``candidate`` is usually ``match.candidate`` from a previous call to
        ``recognize``.
        """
        return score_from_distance(self._distance(candidate, template_points), self.config.size)

    def _distance(self, candidate: Sequence[Point], template_points: Sequence[Point]) -> float:
        return distance_at_best_angle(
            candidate, template_points,
            angle_range=self.config.angle_range,
            angle_precision=self.config.angle_precision,
        )

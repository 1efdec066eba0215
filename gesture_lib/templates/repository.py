"""Template repository for registered gestures.

This module provides the TemplateRepository class, an ordered, append-only
collection of normalized templates. Registration order is significant: it
is the order in which the recognizer scans templates, and therefore decides
ties between equally distant templates.

The repository is copy-on-write. Writers build a new tuple under a lock and
swap it in; readers take ``snapshot()`` and iterate it without locking, so a
recognition running alongside a registration sees either the old or the new
set of templates, never a half-updated one.

Example usage:
    Basic repository operations::

        from gesture_lib.templates import TemplateRepository

        repo = TemplateRepository()
        repo.register(template)
        for template in repo.snapshot():
            print(template.name, len(template.points))
"""

from __future__ import annotations

import threading

from ..domain.gesture import Template


class TemplateRepository:
    """Ordered collection of templates.

    Attributes:
        _templates: Current immutable tuple of templates in registration
            order.
        _lock: Serializes writers.

    Example:
        >>> repo = TemplateRepository()
        >>> repo.register(Template('arrow', points))
        >>> [t.name for t in repo.snapshot()]
        ['arrow']
    """

    def __init__(self):
        self._templates: tuple[Template, ...] = ()
        self._lock = threading.Lock()

    def register(self, template: Template) -> None:
        """Append a template. Duplicated names are kept side by side."""
        with self._lock:
            self._templates = self._templates + (template,)

    def snapshot(self) -> tuple[Template, ...]:
        """All templates in registration order, as an immutable tuple."""
        return self._templates

    def __len__(self) -> int:
        return len(self._templates)

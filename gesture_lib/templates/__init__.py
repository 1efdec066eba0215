"""Template storage.

The module exports:
    TemplateRepository: Ordered, append-only, copy-on-write collection of
        normalized templates.
"""

from .repository import TemplateRepository

__all__ = ['TemplateRepository']

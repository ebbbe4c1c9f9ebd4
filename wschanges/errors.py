"""
Exceptions raised when a change cannot be applied.

Every error here is an argument problem the caller can fix: a position that
does not exist in the current text, a reversed range, a non-whitespace edit
or a change whose boundaries clash with existing changes. They are raised
synchronously by ``TextWithChanges.add_change`` and never by the read-only
queries.
"""

from __future__ import annotations


class TextChangeError(ValueError):
    """Base class for all change-set argument errors."""
    pass


class InvalidPosition(TextChangeError):
    """Offset out of bounds, inside a replaced region, or bound to a stale change."""
    pass


class InvalidRange(TextChangeError):
    """The end of a range precedes its start."""
    pass


class NonWhitespace(TextChangeError):
    """The new text or the text being replaced has a non-whitespace character."""
    pass


class IntersectingChanges(TextChangeError):
    """The range cuts across existing changes in an ambiguous way."""
    pass


__all__ = [
    "TextChangeError",
    "InvalidPosition",
    "InvalidRange",
    "NonWhitespace",
    "IntersectingChanges",
]

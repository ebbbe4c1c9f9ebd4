"""
Whitespace change tracking over an immutable base text.

    >>> text = TextWithChanges("Some text")
    >>> rng = text.add_change(up_to(in_base(0), in_base(0)), " ")
    >>> text.apply_changes()
    ' Some text'
"""

from __future__ import annotations

from .change_set import ChangeSet
from .config import FormatterConfig, load_config
from .edit import TextEdit
from .errors import (
    IntersectingChanges,
    InvalidPosition,
    InvalidRange,
    NonWhitespace,
    TextChangeError,
)
from .position import InBase, InEdit, Position, TextRange, edit_range, in_base, in_edit, up_to
from .text import TextWithChanges
from .types import AnchorKey, ResultType, SearchType

__version__ = "0.1.0"

__all__ = [
    "TextWithChanges",
    "TextEdit",
    "ChangeSet",
    "InBase",
    "InEdit",
    "Position",
    "TextRange",
    "in_base",
    "in_edit",
    "up_to",
    "edit_range",
    "SearchType",
    "ResultType",
    "AnchorKey",
    "FormatterConfig",
    "load_config",
    "TextChangeError",
    "InvalidPosition",
    "InvalidRange",
    "NonWhitespace",
    "IntersectingChanges",
]

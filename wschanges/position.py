"""
Positions and ranges in the edited text.

A position is either an offset into the unedited base text (valid only where
no change replaces that text) or a character offset inside the replacement
text of one particular change. Neither knows about the text it points into;
``TextWithChanges`` validates them against its current state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .edit import TextEdit


@dataclass(frozen=True)
class InBase:
    """Location of base character ``offset`` (or the end of the base text)."""
    offset: int

    def __post_init__(self):
        if self.offset < 0:
            raise ValueError(f"Invalid position: offset ({self.offset}) is negative")

    def __str__(self) -> str:
        return f"base@{self.offset}"


@dataclass(frozen=True)
class InEdit:
    """Location of character ``offset`` in ``edit.text``; ``len(edit.text)`` points past it."""
    edit: TextEdit
    offset: int

    def __post_init__(self):
        if not 0 <= self.offset <= len(self.edit.text):
            raise ValueError(
                f"Invalid position: offset ({self.offset}) outside "
                f"[0, {len(self.edit.text)}] for {self.edit!r}"
            )

    def __str__(self) -> str:
        return f"edit[{self.edit.start}:{self.edit.end}]@{self.offset}"


Position = Union[InBase, InEdit]


@dataclass(frozen=True)
class TextRange:
    """
    Half-open range ``[start, end)`` in the edited text.

    No semantic checks are made here; ordering and existence of the
    endpoints are the engine's concern.
    """
    start: Position
    end: Position

    def __str__(self) -> str:
        return f"{self.start}..{self.end}"

    @property
    def is_empty(self) -> bool:
        return self.start == self.end


def in_base(offset: int) -> InBase:
    return InBase(offset)


def in_edit(edit: TextEdit, offset: int) -> InEdit:
    return InEdit(edit, offset)


def up_to(start: Position, end: Position) -> TextRange:
    return TextRange(start, end)


def edit_range(edit: TextEdit, start: int, end: int) -> TextRange:
    """Range between two offsets of the same change's text."""
    return TextRange(InEdit(edit, start), InEdit(edit, end))


__all__ = [
    "InBase",
    "InEdit",
    "Position",
    "TextRange",
    "in_base",
    "in_edit",
    "up_to",
    "edit_range",
]

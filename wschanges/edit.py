"""
Immutable whitespace edits against the base text.
"""

from __future__ import annotations

from dataclasses import dataclass

from .utils import is_blank, escape_ws


@dataclass(frozen=True)
class TextEdit:
    """
    Replacement of the base slice ``[start, end)`` with whitespace ``text``.

    Edits are values: "changing" one means building a new edit and swapping it
    into the change set. Two edits compare by ``start``.
    """
    start: int
    end: int
    text: str

    def __post_init__(self):
        if self.start < 0:
            raise ValueError(f"Invalid edit: start ({self.start}) is negative")
        if self.end < self.start:
            raise ValueError(f"Invalid edit: start ({self.start}) > end ({self.end})")
        if not is_blank(self.text):
            raise ValueError(f"Invalid edit: text '{escape_ws(self.text)}' is not whitespace")

    def __lt__(self, other: TextEdit) -> bool:
        if not isinstance(other, TextEdit):
            return NotImplemented
        return self.start < other.start

    def __repr__(self) -> str:
        return f"TextEdit({self.start}, {self.end}, '{escape_ws(self.text)}')"

    @property
    def length_delta(self) -> int:
        """Characters removed minus characters added."""
        return (self.end - self.start) - len(self.text)

    @property
    def is_insertion(self) -> bool:
        return self.start == self.end

    def contains(self, offset: int) -> bool:
        """Check if ``offset`` lies within ``[start, end]``."""
        return self.start <= offset <= self.end

    def covers(self, offset: int) -> bool:
        """Check if the base character at ``offset`` is replaced by this edit."""
        return self.start <= offset < self.end

    def touches(self, other: TextEdit) -> bool:
        return self.end == other.start or other.end == self.start

    def merge(self, other: TextEdit) -> TextEdit:
        """
        Concatenate with an edit that starts where this one ends.

        The result spans both base ranges and carries both texts in order.
        """
        if self.end != other.start:
            raise ValueError(f"Cannot merge {self!r} with non-adjacent {other!r}")
        return TextEdit(self.start, other.end, self.text + other.text)


__all__ = ["TextEdit"]

"""
Ordered storage of the pending edits.

Edits are kept sorted by their base start offset. The engine guarantees that
no two stored edits overlap or touch, so start offsets are unique and every
lookup is a binary search over them.
"""

from __future__ import annotations

from bisect import bisect_left, bisect_right, insort
from typing import Iterator, List, Optional

from .edit import TextEdit


class ChangeSet:
    """Sorted set of non-overlapping, non-touching ``TextEdit`` objects."""

    def __init__(self):
        self._starts: List[int] = []
        self._edits: List[TextEdit] = []

    def __len__(self) -> int:
        return len(self._edits)

    def __iter__(self) -> Iterator[TextEdit]:
        return iter(self._edits)

    def __reversed__(self) -> Iterator[TextEdit]:
        return reversed(self._edits)

    def __contains__(self, edit: object) -> bool:
        if not isinstance(edit, TextEdit):
            return False
        return self.at(edit.start) == edit

    def __repr__(self) -> str:
        return f"ChangeSet({self._edits!r})"

    # ---- mutation ---- #

    def add(self, edit: TextEdit) -> None:
        idx = bisect_left(self._starts, edit.start)
        if idx < len(self._starts) and self._starts[idx] == edit.start:
            raise ValueError(f"Change set already has an edit at {edit.start}: {self._edits[idx]!r}")
        insort(self._starts, edit.start)
        self._edits.insert(idx, edit)

    def remove(self, edit: TextEdit) -> None:
        idx = bisect_left(self._starts, edit.start)
        if idx == len(self._starts) or self._edits[idx] != edit:
            raise KeyError(edit)
        del self._starts[idx]
        del self._edits[idx]

    # ---- lookups ---- #

    def at(self, offset: int) -> Optional[TextEdit]:
        """Edit starting exactly at ``offset``."""
        idx = bisect_left(self._starts, offset)
        if idx < len(self._starts) and self._starts[idx] == offset:
            return self._edits[idx]
        return None

    def floor(self, offset: int) -> Optional[TextEdit]:
        """Last edit with ``start <= offset``."""
        idx = bisect_right(self._starts, offset)
        return self._edits[idx - 1] if idx else None

    def ceiling(self, offset: int) -> Optional[TextEdit]:
        """First edit with ``start >= offset``."""
        idx = bisect_left(self._starts, offset)
        return self._edits[idx] if idx < len(self._edits) else None

    def higher(self, offset: int) -> Optional[TextEdit]:
        """First edit with ``start > offset``."""
        idx = bisect_right(self._starts, offset)
        return self._edits[idx] if idx < len(self._edits) else None

    def covering(self, offset: int) -> Optional[TextEdit]:
        """Edit that replaces the base character at ``offset``, if any."""
        edit = self.floor(offset)
        if edit is not None and edit.covers(offset):
            return edit
        return None

    def ending_at(self, offset: int) -> Optional[TextEdit]:
        """Edit whose base range ends exactly at ``offset``."""
        edit = self.floor(offset)
        if edit is not None and edit.end == offset:
            return edit
        return None

    def between(self, lo: int, hi: int) -> List[TextEdit]:
        """Edits lying entirely within ``[lo, hi]``, in order."""
        first = bisect_left(self._starts, lo)
        last = bisect_right(self._starts, hi)
        return [e for e in self._edits[first:last] if e.end <= hi]


__all__ = ["ChangeSet"]

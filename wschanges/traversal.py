"""
Walking the edited text without materializing it.

A validated range is split into segments in logical order: the tail of the
change holding the start position, then base slices interleaved with the
changes that lie entirely inside the range, then the head of the change
holding the end position. Search and the metrics all run over these segments.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Tuple, TypeVar

from .change_set import ChangeSet
from .edit import TextEdit
from .position import InBase, InEdit, Position, TextRange

T = TypeVar("T")


@dataclass(frozen=True)
class Segment:
    """
    A run of characters that all live in the same coordinate space.

    ``edit`` is None for base text. ``origin`` is the offset of ``text[0]``
    in the base text or in the change text respectively.
    """
    text: str
    origin: int
    edit: Optional[TextEdit] = None

    def position(self, index: int) -> Position:
        if self.edit is None:
            return InBase(self.origin + index)
        return InEdit(self.edit, self.origin + index)


def segments(base: str, changes: ChangeSet, rng: TextRange) -> List[Segment]:
    """
    Decompose ``rng`` into segments in ascending logical order.

    The range must already be validated against ``changes``.
    """
    start, end = rng.start, rng.end

    if isinstance(start, InEdit) and isinstance(end, InEdit) and start.edit == end.edit:
        return [Segment(start.edit.text[start.offset:end.offset], start.offset, start.edit)]

    out: List[Segment] = []
    if isinstance(start, InEdit):
        out.append(Segment(start.edit.text[start.offset:], start.offset, start.edit))
        cursor = start.edit.end
    else:
        cursor = start.offset

    if isinstance(end, InEdit):
        stop = end.edit.start
        inner = [e for e in changes.between(cursor, stop) if cursor < e.start < stop]
    else:
        stop = end.offset
        # a pure insertion at ``stop`` precedes the base position and belongs to the range
        inner = [e for e in changes.between(cursor, stop) if e.start > cursor]

    for edit in inner:
        out.append(Segment(base[cursor:edit.start], cursor))
        out.append(Segment(edit.text, 0, edit))
        cursor = edit.end
    out.append(Segment(base[cursor:stop], cursor))

    if isinstance(end, InEdit):
        out.append(Segment(end.edit.text[:end.offset], 0, end.edit))

    return [seg for seg in out if seg.text]


def walk(segs: List[Segment], forward: bool = True) -> Iterator[Tuple[Segment, int, str]]:
    """Yield ``(segment, index, char)`` in logical order, or reversed."""
    if forward:
        for seg in segs:
            for i, ch in enumerate(seg.text):
                yield seg, i, ch
    else:
        for seg in reversed(segs):
            for i in range(len(seg.text) - 1, -1, -1):
                yield seg, i, seg.text[i]


def fold(segs: List[Segment], step: Callable[[T, str], T], initial: T) -> T:
    """Left fold of ``step`` over every character of ``segs``, forward."""
    acc = initial
    for _, _, ch in walk(segs):
        acc = step(acc, ch)
    return acc


def count_where(segs: List[Segment], predicate: Callable[[str], bool]) -> int:
    return fold(segs, lambda n, ch: n + 1 if predicate(ch) else n, 0)


def visual_spaces(segs: List[Segment], tab_width: int) -> int:
    """
    Visual width of the spaces and tabs in ``segs``, starting at column 0.

    Other characters take no width of their own but still advance the
    column, so tab stops line up with a plain rendering of the text.
    """
    def step(state: Tuple[int, int], ch: str) -> Tuple[int, int]:
        total, column = state
        if ch == " ":
            return total + 1, column + 1
        if ch == "\t":
            width = tab_width - column % tab_width
            return total + width, column + width
        return total, column + 1

    total, _ = fold(segs, step, (0, 0))
    return total


__all__ = ["Segment", "segments", "walk", "fold", "count_where", "visual_spaces"]

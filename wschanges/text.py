"""
Text with pending whitespace changes.

The base text never changes. Formatter passes submit changes through
``add_change``; readers address the edited text with positions that stay
anchored to base offsets wherever the base text survives, so offsets taken
from a syntax tree of the base text remain usable.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .change_set import ChangeSet
from .config import FormatterConfig
from .edit import TextEdit
from .errors import (
    IntersectingChanges,
    InvalidPosition,
    InvalidRange,
    NonWhitespace,
    TextChangeError,
)
from .position import InBase, InEdit, Position, TextRange
from .traversal import count_where, segments, visual_spaces, walk
from .types import AnchorKey, ResultType, SearchType
from .utils import escape_ws, is_blank, is_line_break

logger = logging.getLogger(__name__)


@dataclass
class _ChangePlan:
    """What ``add_change`` is about to do to the change set."""
    edit: TextEdit
    # offset of the submitted text inside ``edit.text``
    shift: int
    removed: List[TextEdit] = field(default_factory=list)


class TextWithChanges:
    """
    An immutable base text plus a normalized set of whitespace changes.

    Changes are kept sorted; overlapping submissions are either absorbed or
    rejected, touching ones are merged, so at any time no two changes overlap
    or touch.
    """

    def __init__(self, original: str, config: Optional[FormatterConfig] = None):
        self.original = original
        self.config = config or FormatterConfig()
        self._changes = ChangeSet()

    @property
    def changes(self) -> Tuple[TextEdit, ...]:
        return tuple(self._changes)

    def __repr__(self) -> str:
        return f"TextWithChanges('{escape_ws(self.original)}', changes={list(self._changes)!r})"

    # ------------------------------------------------------------------ #
    # Validation
    # ------------------------------------------------------------------ #

    def _position_problem(self, pos: Position) -> Optional[TextChangeError]:
        if isinstance(pos, InBase):
            if pos.offset > len(self.original):
                return InvalidPosition(f"{pos} is past the end of the text ({len(self.original)})")
            covering = self._changes.covering(pos.offset)
            if covering is not None:
                return InvalidPosition(f"{pos} lies inside {covering!r}")
            return None
        if isinstance(pos, InEdit):
            if pos.edit not in self._changes:
                return InvalidPosition(f"{pos} refers to {pos.edit!r}, which is not a current change")
            if not 0 <= pos.offset <= len(pos.edit.text):
                return InvalidPosition(f"{pos} is outside the change text")
            return None
        raise TypeError(f"Unsupported position type: {type(pos).__name__}")

    @staticmethod
    def anchor_key(pos: Position) -> AnchorKey:
        """Sort key of ``pos`` in the edited text; meaningful for valid positions only."""
        if isinstance(pos, InBase):
            return AnchorKey(pos.offset, 1)
        return AnchorKey(pos.edit.start, 0, pos.offset)

    def _range_problem(self, rng: TextRange) -> Optional[TextChangeError]:
        problem = self._position_problem(rng.start) or self._position_problem(rng.end)
        if problem is not None:
            return problem
        if self.anchor_key(rng.end) < self.anchor_key(rng.start):
            return InvalidRange(f"Range end precedes its start: {rng}")
        return None

    def validate_position(self, pos: Position) -> AnchorKey:
        """Check ``pos`` against the current changes and return its sort key."""
        problem = self._position_problem(pos)
        if problem is not None:
            raise problem
        return self.anchor_key(pos)

    def validate_range(self, rng: TextRange) -> Tuple[AnchorKey, AnchorKey]:
        problem = self._range_problem(rng)
        if problem is not None:
            raise problem
        return self.anchor_key(rng.start), self.anchor_key(rng.end)

    def is_valid_range(self, rng: TextRange) -> bool:
        return self._range_problem(rng) is None

    # ------------------------------------------------------------------ #
    # Adding changes
    # ------------------------------------------------------------------ #

    def add_change(self, rng: TextRange, text: str) -> TextRange:
        """
        Replace the edited text in ``rng`` with the whitespace ``text``.

        Returns the range now occupied by ``text``. Positions bound to changes
        that were replaced or merged become stale; the returned range is the
        way to keep addressing the edited region.

        Raises:
            InvalidPosition: an endpoint does not exist in the current text
            InvalidRange: the range is reversed
            NonWhitespace: ``text`` or the text being replaced is not whitespace
            IntersectingChanges: the range cuts across existing changes
        """
        logger.debug("add_change %s <- '%s'", rng, escape_ws(text))
        try:
            return self._add_change(rng, text)
        except TextChangeError as e:
            logger.debug("change rejected: %s", e)
            raise

    def _add_change(self, rng: TextRange, text: str) -> TextRange:
        self.validate_range(rng)

        if not is_blank(text):
            raise NonWhitespace(f"Replacement text '{escape_ws(text)}' is not whitespace")

        if rng.start == rng.end and not text:
            return rng

        replaced = segments(self.original, self._changes, rng)
        if count_where(replaced, lambda ch: not ch.isspace()):
            raise NonWhitespace(f"Range {rng} covers non-whitespace text")

        plan = self._plan(rng, text)
        return self._commit(plan, len(text))

    def _plan(self, rng: TextRange, text: str) -> _ChangePlan:
        start, end = rng.start, rng.end
        if isinstance(start, InBase):
            return self._plan_from_base(start, end, text)
        if isinstance(end, InBase):
            return self._plan_from_change(start, end, text)
        if start.edit != end.edit:
            raise IntersectingChanges(f"Range {rng} spans more than one change")
        old = start.edit
        spliced = old.text[:start.offset] + text + old.text[end.offset:]
        return _ChangePlan(TextEdit(old.start, old.end, spliced), start.offset, [old])

    def _plan_from_base(self, start: InBase, end: Position, text: str) -> _ChangePlan:
        a = start.offset
        right: Optional[TextEdit] = None
        if isinstance(end, InBase):
            b = end.offset
        else:
            if end.offset != 0:
                raise InvalidPosition(
                    f"{end}: a range starting in base text may only end at the start of a change"
                )
            right = end.edit
            b = right.start

        removed = self._contained(a, b, exclude=right)
        edit = TextEdit(a, b, text)
        shift = 0

        left = self._changes.ending_at(a)
        if left is not None:
            logger.debug("merging %r on the left", left)
            removed.append(left)
            edit = left.merge(edit)
            shift = len(left.text)
        if right is not None:
            logger.debug("merging %r on the right", right)
            removed.append(right)
            edit = edit.merge(right)

        return _ChangePlan(edit, shift, removed)

    def _plan_from_change(self, start: InEdit, end: InBase, text: str) -> _ChangePlan:
        old = start.edit
        if start.offset != 0:
            raise IntersectingChanges(
                f"{start}: a range ending in base text must start at the beginning of a change"
            )
        removed = [old] + self._contained(old.end, end.offset, exclude=old)
        return _ChangePlan(TextEdit(old.start, end.offset, text), 0, removed)

    def _contained(self, lo: int, hi: int, exclude: Optional[TextEdit]) -> List[TextEdit]:
        """
        Changes swallowed by a new change over base ``[lo, hi)``.

        A pure insertion at ``lo`` sits before a base position there, so it is
        a left neighbour rather than a contained change.
        """
        inside = [
            e for e in self._changes.between(lo, hi)
            if e != exclude and not (e.is_insertion and e.start == lo)
        ]
        if len(inside) > 1:
            raise IntersectingChanges(
                f"Base range [{lo}, {hi}) contains {len(inside)} changes; at most one can be replaced"
            )
        if inside:
            logger.debug("absorbing %r", inside[0])
        return inside

    def _commit(self, plan: _ChangePlan, text_len: int) -> TextRange:
        for old in plan.removed:
            self._changes.remove(old)

        edit = plan.edit
        if edit.is_insertion and not edit.text:
            logger.debug("change at %d collapsed to nothing", edit.start)
            pos = InBase(edit.end)
            return TextRange(pos, pos)

        self._changes.add(edit)
        logger.debug("stored %r", edit)

        end_offset = plan.shift + text_len
        end: Position = InEdit(edit, end_offset) if end_offset < len(edit.text) else InBase(edit.end)
        start: Position = InEdit(edit, plan.shift) if edit.text else end
        return TextRange(start, end)

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #

    def search(
        self,
        rng: TextRange,
        search_type: SearchType,
        from_start: bool = True,
    ) -> Optional[Tuple[Position, ResultType]]:
        """
        Find the first (or, with ``from_start=False``, the last) matching character.

        Returns None when nothing matches or the range is not valid.
        """
        if not self.is_valid_range(rng):
            return None
        predicate = search_type.predicate()
        for seg, index, ch in walk(segments(self.original, self._changes, rng), forward=from_start):
            if predicate(ch):
                return seg.position(index), ResultType.of(ch)
        return None

    def search_last(
        self,
        rng: TextRange,
        search_type: SearchType,
    ) -> Optional[Tuple[Position, ResultType]]:
        return self.search(rng, search_type, from_start=False)

    def find_change(self, offset: int) -> Optional[TextEdit]:
        """Change whose base range ``[start, end]`` includes ``offset``."""
        edit = self._changes.floor(offset)
        if edit is not None and edit.contains(offset):
            return edit
        return None

    def count_breaks(self, rng: TextRange) -> int:
        """Number of line breaks in ``rng``; 0 for an invalid range."""
        if not self.is_valid_range(rng):
            return 0
        return count_where(segments(self.original, self._changes, rng), is_line_break)

    def count_spaces(self, rng: TextRange, tab_width: Optional[int] = None) -> int:
        """
        Visual width of the spaces and tabs in ``rng``.

        The first character of the range is taken to be in the first column;
        0 for an invalid range.
        """
        if tab_width is None:
            tab_width = self.config.tab_width
        if tab_width < 1:
            raise ValueError(f"tab_width must be positive, got {tab_width}")
        if not self.is_valid_range(rng):
            return 0
        return visual_spaces(segments(self.original, self._changes, rng), tab_width)

    # ------------------------------------------------------------------ #
    # Output
    # ------------------------------------------------------------------ #

    def apply_changes(self) -> str:
        """Splice every change into the base text and return the result."""
        offset = 0
        result = self.original
        for change in self._changes:
            result = result[:change.start - offset] + change.text + result[change.end - offset:]
            offset += change.length_delta
        return result

    def summary(self) -> Dict[str, Any]:
        """Statistics of the pending changes without applying them."""
        removed = sum(c.end - c.start for c in self._changes)
        added = sum(len(c.text) for c in self._changes)
        kinds = {"insertions": 0, "deletions": 0, "replacements": 0}
        for change in self._changes:
            if change.is_insertion:
                kinds["insertions"] += 1
            elif not change.text:
                kinds["deletions"] += 1
            else:
                kinds["replacements"] += 1
        return {
            "total_edits": len(self._changes),
            "chars_removed": removed,
            "chars_added": added,
            "net_delta": removed - added,
            **kinds,
        }


__all__ = ["TextWithChanges"]

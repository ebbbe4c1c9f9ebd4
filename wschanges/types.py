from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from .utils import is_line_break


class SearchType(Enum):
    """What ``TextWithChanges.search`` looks for."""
    NON_WHITESPACE = "non_whitespace"
    LINE_BREAK = "line_break"
    BOTH = "both"

    def predicate(self) -> Callable[[str], bool]:
        if self is SearchType.NON_WHITESPACE:
            return lambda ch: not ch.isspace()
        if self is SearchType.LINE_BREAK:
            return is_line_break
        return lambda ch: is_line_break(ch) or not ch.isspace()


class ResultType(Enum):
    """Kind of character a search stopped at."""
    NON_WHITESPACE = "non_whitespace"
    LINE_BREAK = "line_break"

    @classmethod
    def of(cls, ch: str) -> ResultType:
        return cls.LINE_BREAK if is_line_break(ch) else cls.NON_WHITESPACE


@dataclass(frozen=True, order=True)
class AnchorKey:
    """
    Sort key of a validated position in the edited text.

    ``anchor`` is the base offset, ``phase`` is 0 inside a change and 1 in
    base text, ``inner`` is the offset inside the change text. A base position
    sharing its anchor with a pure insertion comes after the inserted text.
    """
    anchor: int
    phase: int
    inner: int = 0


__all__ = ["SearchType", "ResultType", "AnchorKey"]

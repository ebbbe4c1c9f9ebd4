"""Small text helpers shared by the change-set modules."""

from __future__ import annotations

_ESCAPES = {
    "\t": "\\t",
    "\r": "\\r",
    "\b": "\\b",
    "\n": "\\n",
    "'": "\\'",
    '"': '\\"',
    "\\": "\\\\",
}


def is_blank(text: str) -> bool:
    """True for an empty string or a string made of whitespace only."""
    return all(ch.isspace() for ch in text)


def is_line_break(ch: str) -> bool:
    return ch == "\n"


def escape_ws(text: str) -> str:
    """
    Render whitespace and control characters visibly for log lines.

    "\\t \\n" reads better in a debug message than a literal tab and newline.
    """
    out = []
    for ch in text:
        if ch in _ESCAPES:
            out.append(_ESCAPES[ch])
        elif ch < " ":
            out.append(f"\\u{ord(ch):04x}")
        else:
            out.append(ch)
    return "".join(out)


__all__ = ["is_blank", "is_line_break", "escape_ws"]

"""Character cursor and name scanner for node tree dumps."""

from __future__ import annotations

# Characters that end a name at the current nesting level.
_NAME_TERMINATORS = frozenset(":{}")

# Characters that are markup in DOT HTML-like labels.
_LABEL_REPLACEMENTS = str.maketrans({'"': " ", "<": "-", ">": "-"})


class Cursor:
    """Read position over the full text of one dump."""

    def __init__(self, text: str, pos: int = 0) -> None:
        self.text = text
        self.pos = pos

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def read(self) -> str:
        """Return the next character and advance, or "" at end of input."""
        if self.pos >= len(self.text):
            return ""
        ch = self.text[self.pos]
        self.pos += 1
        return ch

    def unread(self) -> None:
        if self.pos > 0:
            self.pos -= 1

    def next_non_space(self, start: int) -> str:
        """Return the first non-whitespace character at or after ``start``."""
        i = start
        while i < len(self.text) and self.text[i].isspace():
            i += 1
        return self.text[i] if i < len(self.text) else ""


def sanitize_label(text: str) -> str:
    """Trim ``text`` and replace characters DOT labels cannot hold."""
    return text.strip().translate(_LABEL_REPLACEMENTS)


def scan_name(cursor: Cursor) -> str:
    """Read a record or field name starting just after its opener.

    Stops before the next ``:``, ``{`` or ``}``, and before a ``(`` whose next
    non-space character is ``{`` (that parenthesis opens a list of records).
    Any other ``(`` is ordinary name content, e.g. ``:colnames ("a" "b")``.
    The cursor is left on the terminating character.
    """
    start = cursor.pos
    while True:
        ch = cursor.read()
        if not ch:
            break
        if ch in _NAME_TERMINATORS:
            cursor.unread()
            break
        if ch == "(" and cursor.next_non_space(cursor.pos) == "{":
            cursor.unread()
            break
    return sanitize_label(cursor.text[start : cursor.pos])

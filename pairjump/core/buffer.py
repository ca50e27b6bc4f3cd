"""In-memory text buffer with a cursor and optional visual anchor."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TextBuffer:
    """Linear text plus the cursor state commands read and move.

    Offsets are 0-based. ``anchor`` is set while a character selection is
    active, in which case ``cursor`` is the moving end.
    """

    text: str
    cursor: int = 0
    anchor: int | None = None
    last_deleted: str = ""

    def __post_init__(self) -> None:
        self.cursor = self.clamp(self.cursor)

    def __len__(self) -> int:
        return len(self.text)

    @property
    def visual(self) -> bool:
        return self.anchor is not None

    def clamp(self, pos: int) -> int:
        """Clamp ``pos`` into ``[0, len(text)]``."""
        return max(0, min(len(self.text), pos))

    def char_at(self, pos: int) -> str:
        """Return the character at ``pos`` or ``""`` when out of range."""
        if 0 <= pos < len(self.text):
            return self.text[pos]
        return ""

    def line_start(self, pos: int) -> int:
        """Return offset of the first character on the line holding ``pos``."""
        pos = self.clamp(pos)
        return self.text.rfind("\n", 0, pos) + 1

    def line_end(self, pos: int) -> int:
        """Return offset of the newline ending the line holding ``pos``.

        The last line ends at ``len(text)``.
        """
        pos = self.clamp(pos)
        end = self.text.find("\n", pos)
        return len(self.text) if end < 0 else end

    def next_line_start(self, pos: int) -> int:
        """Return start of the line after ``pos``, or buffer end on the last line."""
        end = self.line_end(pos)
        return min(len(self.text), end + 1)

    def previous_line_end(self, pos: int) -> int:
        """Return end of the line before ``pos``, or ``0`` on the first line."""
        start = self.line_start(pos)
        return max(0, start - 1)

    def first_non_blank(self, pos: int) -> int:
        """Return first non-whitespace offset on the line of ``pos``.

        Blank lines resolve to their line end.
        """
        start = self.line_start(pos)
        end = self.line_end(pos)
        idx = start
        while idx < end and self.text[idx] in " \t\r\f\v":
            idx += 1
        return idx

    def only_blanks_before(self, pos: int) -> bool:
        """Return whether only indentation separates ``pos`` from its line start."""
        prefix = self.text[self.line_start(pos):self.clamp(pos)]
        return prefix.strip(" \t") == ""

    def line_column(self, pos: int) -> tuple[int, int]:
        """Return 1-based line and 0-based column for ``pos``."""
        pos = self.clamp(pos)
        return self.text.count("\n", 0, pos) + 1, pos - self.line_start(pos)

    def offset_for(self, line: int, column: int) -> int:
        """Convert 1-based line and 0-based column into a clamped offset."""
        start = 0
        for _ in range(max(0, line - 1)):
            nl = self.text.find("\n", start)
            if nl < 0:
                return len(self.text)
            start = nl + 1
        return min(start + max(0, column), self.line_end(start))

    def delete(self, begin: int, end: int) -> str:
        """Remove ``[begin, end)`` and return the removed text.

        The cursor moves to ``begin`` and any visual anchor is cleared.
        """
        begin = self.clamp(begin)
        end = self.clamp(end)
        removed = self.text[begin:end]
        self.text = self.text[:begin] + self.text[end:]
        self.cursor = begin
        self.anchor = None
        self.last_deleted = removed
        return removed

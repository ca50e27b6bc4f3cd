"""Jump to a proportional position in the buffer (``N%``)."""

from __future__ import annotations

from .buffer import TextBuffer

# Above this size the offset is computed from ``size // 100`` so the
# product stays small; granularity drops to whole hundredths.
PERCENTAGE_THRESHOLD = 80000


def percentage_offset(size: int, percent: int, start: int = 0) -> int:
    """Return the unclamped offset ``percent`` percent into ``size`` units."""
    if size > PERCENTAGE_THRESHOLD:
        return start + percent * (size // 100)
    return start + (percent * size) // 100


def jump_to_percentage(buffer: TextBuffer, percent: int) -> int:
    """Move to ``percent`` of the buffer, then to that line's first non-blank.

    Out-of-range percentages are clamped to the buffer edges.
    """
    target = buffer.clamp(percentage_offset(len(buffer), percent))
    buffer.cursor = buffer.first_non_blank(target)
    return buffer.cursor

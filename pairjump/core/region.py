"""Turn a jump into the region a select or delete command acts on."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from .orchestrator import operate_on_item
from .types import MatchContext, Region, Tag

if TYPE_CHECKING:
    from ..rules.base import RuleModule


def resolve_region(
    ctx: MatchContext,
    rules: Sequence[RuleModule],
    count: int = 1,
    inner: bool = False,
) -> Region | None:
    """Compute the span between the cursor's item and its counterpart.

    The cursor is restored before returning. Indentation in front of the
    region is absorbed into it. Inner regions drop the opening line and,
    unless the grammar keeps its closing line as content, the closing line.
    """
    buffer = ctx.buffer
    origin = buffer.cursor
    marks: list[Tag] = []
    ctx.selecting = True
    try:
        destination = operate_on_item(ctx, rules, count, marks.append)
    finally:
        buffer.cursor = origin
    if destination is None or not marks:
        return None

    region = Region.normalized(marks[0].mark, destination)
    begin, end = region.begin, region.end
    if buffer.only_blanks_before(begin):
        begin = buffer.line_start(begin)
    if inner:
        begin = min(buffer.next_line_start(begin), end)
        if not ctx.grammar_in(ctx.config.inner_keeps_closing_line_grammars):
            end = max(buffer.previous_line_end(end), begin)
    return Region(begin, end, inner)

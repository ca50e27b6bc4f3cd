"""Bracket and quote rule backed by the built-in scanner."""

from __future__ import annotations

from ..core import scanner
from ..core.types import MatchContext, Tag


class SimpleRule:
    """Match ``()[]{}`` and string quotes under the cursor."""

    name = "simple"

    def get_tag(self, ctx: MatchContext) -> Tag | None:
        if scanner.line_end_ambiguous(ctx):
            return None
        if not scanner.is_simple_char(ctx, ctx.buffer.cursor):
            return None
        return scanner.fallback_tag(ctx)

    def jump(self, ctx: MatchContext, tag: Tag, count: int) -> int | None:
        # Repeating a bracket jump only bounces between the two ends.
        return scanner.simple_jump(ctx)

"""Dispatch a navigation call across the rule modules of one grammar."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from . import scanner
from .types import MatchContext, Tag

if TYPE_CHECKING:
    from ..rules.base import RuleModule

logger = logging.getLogger(__name__)

PreJumpHook = Callable[[Tag], None]


def operate_on_item(
    ctx: MatchContext,
    rules: Sequence[RuleModule],
    count: int = 1,
    pre_jump_hook: PreJumpHook | None = None,
) -> int | None:
    """Jump from the cursor using the first rule that recognizes something.

    Rules are asked in order; the first one returning a tag gets to jump
    and no later rule is consulted. When none answers, the built-in
    bracket/quote matcher gets its chance. ``pre_jump_hook`` receives the
    tag before the cursor moves. Returns the destination or ``None``.
    """
    count = max(1, count)
    for rule in rules:
        tag = rule.get_tag(ctx)
        if tag is None:
            continue
        logger.debug("rule %s matched at %d", getattr(rule, "name", type(rule).__name__), ctx.buffer.cursor)
        if pre_jump_hook is not None:
            pre_jump_hook(tag)
        return rule.jump(ctx, tag, count)

    if pre_jump_hook is not None:
        pre_jump_hook(scanner.fallback_tag(ctx))
    return scanner.simple_jump(ctx)

"""Interface every grammar rule module implements."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..core.types import MatchContext, Tag


@runtime_checkable
class RuleModule(Protocol):
    """Grammar-specific detection and motion for one family of pairs.

    ``get_tag`` only looks at the buffer; ``jump`` moves the cursor and
    returns where it ended up. A module may jump once and ignore the rest
    of ``count``.
    """

    name: str

    def get_tag(self, ctx: MatchContext) -> Tag | None:
        ...

    def jump(self, ctx: MatchContext, tag: Tag, count: int) -> int | None:
        ...

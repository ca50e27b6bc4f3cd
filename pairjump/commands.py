"""User-facing commands: jump, select, delete, and percentage jumps.

Each command builds a fresh ``MatchContext``, runs to completion, and
leaves the buffer untouched when nothing matches.
"""

from __future__ import annotations

import logging

from .config import MatchConfig
from .core.buffer import TextBuffer
from .core.orchestrator import operate_on_item
from .core.percentage import jump_to_percentage
from .core.region import resolve_region
from .core.types import MatchContext, Region
from .rules.base import RuleModule
from .rules.registry import RuleRegistry, build_default_registry
from .syntax.classify import Classifier, PygmentsClassifier

logger = logging.getLogger(__name__)


class MatchEngine:
    """Entry points tying configuration, registry, and classification together."""

    def __init__(self, config: MatchConfig | None = None, registry: RuleRegistry | None = None) -> None:
        self.config = config if config is not None else MatchConfig()
        self.registry = registry if registry is not None else build_default_registry()

    def context(
        self,
        buffer: TextBuffer,
        classifier: Classifier | None = None,
        grammar: str | None = None,
    ) -> MatchContext:
        """Build the per-call context, lexing ``buffer`` when no classifier is given."""
        if classifier is None:
            classifier = PygmentsClassifier.for_grammar(buffer.text, grammar)
        return MatchContext(
            buffer=buffer,
            classifier=classifier,
            config=self.config,
            grammar=grammar,
            selecting=buffer.visual,
        )

    def rules_for(self, grammar: str | None) -> tuple[RuleModule, ...]:
        if self.config.uses_simple_jump(grammar):
            return ()
        return self.registry.lookup(grammar)

    def jump_items(
        self,
        buffer: TextBuffer,
        count: int | None = None,
        classifier: Classifier | None = None,
        grammar: str | None = None,
    ) -> int | None:
        """Jump to the item matching the cursor (``%``).

        With a count and percentage jumps enabled this is ``N%``; otherwise
        the count is handed to the rule that matches.
        """
        if count is not None and self.config.may_jump_by_percentage:
            return self.jump_to_percentage(buffer, count)

        ctx = self.context(buffer, classifier, grammar)
        origin = buffer.cursor
        destination = operate_on_item(ctx, self.rules_for(grammar), count or 1)
        if destination is None:
            logger.debug("no match at %d", origin)
            buffer.cursor = origin
            return None
        return buffer.cursor

    def text_object(
        self,
        buffer: TextBuffer,
        count: int = 1,
        inner: bool = False,
        classifier: Classifier | None = None,
        grammar: str | None = None,
    ) -> Region | None:
        """Return the region spanned by the item under the cursor, without side effects."""
        ctx = self.context(buffer, classifier, grammar)
        region = resolve_region(ctx, self.rules_for(grammar), count, inner)
        if region is None:
            logger.debug("no region at %d", buffer.cursor)
        return region

    def select_items(
        self,
        buffer: TextBuffer,
        count: int = 1,
        inner: bool = False,
        classifier: Classifier | None = None,
        grammar: str | None = None,
    ) -> Region | None:
        """Select the item region: anchor at its start, cursor at its end."""
        region = self.text_object(buffer, count, inner, classifier, grammar)
        if region is None:
            return None
        buffer.anchor = region.begin
        buffer.cursor = region.end
        return region

    def delete_items(
        self,
        buffer: TextBuffer,
        count: int = 1,
        inner: bool = False,
        classifier: Classifier | None = None,
        grammar: str | None = None,
    ) -> Region | None:
        """Delete the item region; the removed text lands in ``buffer.last_deleted``."""
        region = self.text_object(buffer, count, inner, classifier, grammar)
        if region is None:
            return None
        buffer.delete(region.begin, region.end)
        return region

    def jump_to_percentage(self, buffer: TextBuffer, percent: int) -> int:
        return jump_to_percentage(buffer, percent)

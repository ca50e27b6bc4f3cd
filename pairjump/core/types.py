"""Shared value types: tags, regions, and per-call match context."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..config import MatchConfig
    from ..syntax.classify import Classifier
    from .buffer import TextBuffer


@dataclass(frozen=True)
class Tag:
    """Opaque match descriptor produced by one rule module.

    ``mark`` is the offset a selection is anchored at before the cursor
    moves: the element start for forward motions, one past the element for
    backward ones. ``payload`` belongs to the module that built the tag and
    is never read by anyone else.
    """

    mark: int
    payload: object = None


@dataclass(frozen=True)
class Region:
    """Half-open ``[begin, end)`` span selected or deleted by a command."""

    begin: int
    end: int
    inner: bool = False

    @classmethod
    def normalized(cls, first: int, second: int, inner: bool = False) -> Region:
        """Build a region from two endpoints in either order."""
        if first > second:
            first, second = second, first
        return cls(first, second, inner)

    def contains(self, other: Region) -> bool:
        """Return whether ``other`` lies fully within this region."""
        return self.begin <= other.begin and other.end <= self.end


@dataclass
class MatchContext:
    """Everything one navigation call may look at.

    Built fresh per command and dropped afterwards; rule modules receive it
    as their only view of the host.
    """

    buffer: TextBuffer
    classifier: Classifier
    config: MatchConfig
    grammar: str | None = None
    selecting: bool = False

    def grammar_in(self, grammars: frozenset[str]) -> bool:
        return self.grammar is not None and self.grammar.lower() in grammars

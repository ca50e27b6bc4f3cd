"""Exception types for programmer-facing failures.

Navigation outcomes like "no match" are not exceptions; commands return
``None`` and leave the buffer untouched.
"""

from __future__ import annotations


class PairJumpError(Exception):
    """Base class for pairjump errors."""


class UnknownGrammarError(PairJumpError):
    """Raised when a strict classifier lookup names no known Pygments lexer."""

    def __init__(self, grammar: str) -> None:
        super().__init__(f"unknown grammar: {grammar!r}")
        self.grammar = grammar

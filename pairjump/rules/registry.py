"""Grammar-to-rule-list registry.

Built once at startup and only read afterwards. Grammar ids are Pygments
lexer aliases, compared case-insensitively.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .base import RuleModule
from .simple import SimpleRule

DEFAULT_SIMPLE_GRAMMARS = (
    "bash",
    "c",
    "clojure",
    "common-lisp",
    "cpp",
    "css",
    "emacs-lisp",
    "go",
    "html",
    "java",
    "javascript",
    "json",
    "latex",
    "lua",
    "markdown",
    "python",
    "ruby",
    "rust",
    "scheme",
    "sh",
    "sql",
    "text",
    "toml",
    "typescript",
    "xml",
    "yaml",
)


def _normalize(grammar: str) -> str:
    return grammar.strip().lower()


class RuleRegistry:
    """Ordered rule lists keyed by grammar id.

    Re-registering a grammar replaces its list.
    """

    def __init__(self) -> None:
        self._rules: dict[str, tuple[RuleModule, ...]] = {}

    def register(self, grammar: str, rules: Iterable[RuleModule]) -> RuleRegistry:
        """Register ``rules`` for ``grammar`` and return ``self`` for chaining."""
        self._rules[_normalize(grammar)] = tuple(rules)
        return self

    def register_many(self, grammars: Iterable[str], rules: Sequence[RuleModule]) -> RuleRegistry:
        """Register the same rule list for several grammars."""
        for grammar in grammars:
            self.register(grammar, rules)
        return self

    def lookup(self, grammar: str | None) -> tuple[RuleModule, ...]:
        """Return the rule list for ``grammar``, empty when none is registered."""
        if not grammar:
            return ()
        return self._rules.get(_normalize(grammar), ())

    def grammars(self) -> list[str]:
        return sorted(self._rules)

    def __contains__(self, grammar: object) -> bool:
        return isinstance(grammar, str) and _normalize(grammar) in self._rules


def build_default_registry() -> RuleRegistry:
    """Registry with the simple bracket rule for common grammars."""
    simple = SimpleRule()
    return RuleRegistry().register_many(DEFAULT_SIMPLE_GRAMMARS, (simple,))

"""Classify buffer offsets as comment, string, or plain code.

Pygments token types stand in for an editor's display faces: the lexer
runs once over the whole text and each offset maps to the style tags of
the token covering it.
"""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

from pygments.lexer import Lexer
from pygments.lexers import TextLexer, get_lexer_by_name, get_lexer_for_filename
from pygments.token import Comment, String, _TokenType
from pygments.util import ClassNotFound

from ..errors import UnknownGrammarError

COMMENT = "comment"
STRING = "string"
DOC = "doc"
ESCAPE = "escape"
INTERPOL = "interpol"
AFFIX = "affix"
PREPROC = "preproc"

_EMPTY: frozenset[str] = frozenset()
_LEXER_OPTIONS = {"stripnl": False, "stripall": False, "ensurenl": False}


class Classifier(Protocol):
    """Read-only style lookup for buffer offsets."""

    def classify(self, pos: int) -> frozenset[str]:
        ...


def is_comment(classifier: Classifier, pos: int) -> bool:
    return COMMENT in classifier.classify(pos)


def is_string(classifier: Classifier, pos: int) -> bool:
    return STRING in classifier.classify(pos)


def is_literal(classifier: Classifier, pos: int) -> bool:
    """Return whether ``pos`` sits inside a comment or string literal."""
    tags = classifier.classify(pos)
    return COMMENT in tags or STRING in tags


def in_string_body(classifier: Classifier, pos: int) -> bool:
    """Return whether ``pos`` belongs to the quoted part of a string literal.

    Escapes, interpolation delimiters and docstring text count as body;
    prefixes such as ``r`` or ``f`` do not.
    """
    tags = classifier.classify(pos)
    return STRING in tags and AFFIX not in tags


def tags_for_token(ttype: _TokenType) -> frozenset[str]:
    """Map a Pygments token type onto style tags."""
    if ttype in Comment.Preproc or ttype in Comment.PreprocFile:
        return frozenset({PREPROC})
    if ttype in Comment:
        return frozenset({COMMENT})
    if ttype in String:
        tags = {STRING}
        if ttype in String.Doc:
            tags.add(DOC)
        elif ttype in String.Escape:
            tags.add(ESCAPE)
        elif ttype in String.Interpol:
            tags.add(INTERPOL)
        elif ttype in String.Affix:
            tags.add(AFFIX)
        return frozenset(tags)
    return _EMPTY


class NullClassifier:
    """Classifier that treats every offset as plain code."""

    def classify(self, pos: int) -> frozenset[str]:
        return _EMPTY


class SpanClassifier:
    """Classifier built from explicit ``(begin, end, tags)`` spans.

    Spans are half-open and must not overlap; later spans are ignored where
    they would.
    """

    def __init__(self, spans: Iterable[tuple[int, int, Iterable[str]]]) -> None:
        self._starts: list[int] = []
        self._ends: list[int] = []
        self._tags: list[frozenset[str]] = []
        last_end = 0
        for begin, end, tags in sorted(spans, key=lambda item: item[0]):
            if end <= begin or begin < last_end:
                continue
            self._starts.append(begin)
            self._ends.append(end)
            self._tags.append(frozenset(tags))
            last_end = end

    def classify(self, pos: int) -> frozenset[str]:
        idx = bisect_right(self._starts, pos) - 1
        if idx < 0 or pos >= self._ends[idx]:
            return _EMPTY
        return self._tags[idx]


class PygmentsClassifier:
    """Token-backed classifier for one snapshot of buffer text."""

    def __init__(self, text: str, lexer: Lexer) -> None:
        self.text = text
        self.lexer = lexer
        self._starts: list[int] = []
        self._tags: list[frozenset[str]] = []
        for index, ttype, value in lexer.get_tokens_unprocessed(text):
            if not value:
                continue
            tags = tags_for_token(ttype)
            if self._tags and self._tags[-1] == tags:
                continue
            self._starts.append(index)
            self._tags.append(tags)

    @classmethod
    def for_grammar(cls, text: str, grammar: str | None, strict: bool = False) -> PygmentsClassifier:
        """Lex ``text`` with the Pygments lexer registered under ``grammar``.

        Unknown names fall back to plain text unless ``strict`` is set, in
        which case ``UnknownGrammarError`` is raised.
        """
        lexer: Lexer = TextLexer(**_LEXER_OPTIONS)
        if grammar:
            try:
                lexer = get_lexer_by_name(grammar, **_LEXER_OPTIONS)
            except ClassNotFound:
                if strict:
                    raise UnknownGrammarError(grammar) from None
        return cls(text, lexer)

    @classmethod
    def for_filename(cls, text: str, path: Path | str) -> PygmentsClassifier:
        """Lex ``text`` with the lexer Pygments picks for ``path``."""
        try:
            lexer = get_lexer_for_filename(str(path), text, **_LEXER_OPTIONS)
        except ClassNotFound:
            lexer = TextLexer(**_LEXER_OPTIONS)
        return cls(text, lexer)

    @property
    def grammar(self) -> str:
        """Primary alias of the lexer in use (``"text"`` for plain text)."""
        aliases = getattr(self.lexer, "aliases", None) or ["text"]
        return aliases[0]

    def classify(self, pos: int) -> frozenset[str]:
        if pos < 0 or pos >= len(self.text):
            return _EMPTY
        idx = bisect_right(self._starts, pos) - 1
        if idx < 0:
            return _EMPTY
        return self._tags[idx]

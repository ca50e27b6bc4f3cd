"""Built-in bracket and quote matcher.

Every match is computed by scanning outward from the cursor; nothing is
cached between calls. Raw results are exclusive offsets: forward matches
return one past the closing character, backward matches return the
opening character itself.
"""

from __future__ import annotations

import logging

from ..syntax.classify import COMMENT, STRING, Classifier, in_string_body, is_comment, is_literal, is_string
from .buffer import TextBuffer
from .types import MatchContext, Tag

logger = logging.getLogger(__name__)

FORWARD_CHARS = "([{"
BACKWARD_CHARS = ")]}"
PAIRS = {
    "(": ")",
    "[": "]",
    "{": "}",
    ")": "(",
    "]": "[",
    "}": "{",
}

# Columns before the line end where quote/bracket detection is unreliable
# for grammars listed in ``MatchConfig.line_end_ambiguous_grammars``.
LINE_END_MARGIN = 1


def is_bracket(ch: str) -> bool:
    return bool(ch) and ch in PAIRS


def line_end_ambiguous(ctx: MatchContext) -> bool:
    """Return whether the cursor sits where classification can't be trusted.

    Trailing text after a string literal near the end of a line confuses
    comment/string detection in some grammars, so matching is suppressed
    there unless simple jumping is forced. A selection may legitimately
    end at the line end, so selecting mode is never suppressed.
    """
    config = ctx.config
    if config.always_simple_jump or ctx.grammar_in(config.simple_jump_grammars):
        return False
    if not ctx.grammar_in(config.line_end_ambiguous_grammars):
        return False
    if ctx.selecting:
        return False
    buffer = ctx.buffer
    return buffer.cursor >= buffer.line_end(buffer.cursor) - LINE_END_MARGIN


def is_quote_at(ctx: MatchContext, pos: int) -> bool:
    """Return whether ``pos`` holds a quote glyph that is part of a string."""
    ch = ctx.buffer.char_at(pos)
    return bool(ch) and ch in ctx.config.quote_chars and STRING in ctx.classifier.classify(pos)


def is_simple_char(ctx: MatchContext, pos: int) -> bool:
    """Return whether the character at ``pos`` can be matched by this module."""
    return is_bracket(ctx.buffer.char_at(pos)) or is_quote_at(ctx, pos)


def quote_is_forward(classifier: Classifier, pos: int) -> bool:
    """Opening quotes follow text that is not part of the literal body."""
    return not in_string_body(classifier, pos - 1)


def mark_for(ctx: MatchContext) -> int:
    """Return the selection anchor for a jump starting at the cursor."""
    buffer = ctx.buffer
    pos = buffer.cursor
    ch = buffer.char_at(pos)
    if ch and ch in BACKWARD_CHARS:
        return pos + 1
    if is_quote_at(ctx, pos) and not quote_is_forward(ctx.classifier, pos):
        return pos + 1
    return pos


def fallback_tag(ctx: MatchContext) -> Tag:
    return Tag(mark_for(ctx), ctx.buffer.char_at(ctx.buffer.cursor))


def _confined_walk(
    buffer: TextBuffer,
    classifier: Classifier,
    start: int,
    forward: bool,
    kind: str,
) -> int | None:
    """Match a bracket without leaving literal text of ``kind``.

    Only characters classified as ``kind`` take part in the nesting count,
    so code brackets next to a comment do not disturb it.
    """
    same = buffer.char_at(start)
    other = PAIRS[same]
    step = 1 if forward else -1
    limit = len(buffer) if forward else -1
    level = 1
    pos = start
    while level > 0:
        pos += step
        if pos == limit:
            return None
        if kind not in classifier.classify(pos):
            continue
        ch = buffer.text[pos]
        if ch == same:
            level += 1
        elif ch == other:
            level -= 1
    return pos + 1 if forward else pos


def balanced_scan(
    buffer: TextBuffer,
    classifier: Classifier,
    start: int,
    forward: bool,
) -> int | None:
    """Depth-tracking bracket scan over code, skipping comments and strings.

    Fails on a closer of the wrong type or when the buffer edge is reached
    before the nesting returns to zero.
    """
    text = buffer.text
    openers, closers = (FORWARD_CHARS, BACKWARD_CHARS) if forward else (BACKWARD_CHARS, FORWARD_CHARS)
    step = 1 if forward else -1
    pending: list[str] = []
    pos = start
    while 0 <= pos < len(text):
        ch = text[pos]
        if ch in PAIRS and not is_literal(classifier, pos):
            if ch in openers:
                pending.append(PAIRS[ch])
            elif ch in closers:
                if not pending or pending[-1] != ch:
                    logger.debug("mismatched %r at %d", ch, pos)
                    return None
                pending.pop()
                if not pending:
                    return pos + 1 if forward else pos
        pos += step
    return None


def match_bracket(buffer: TextBuffer, classifier: Classifier, pos: int) -> int | None:
    """Return the raw offset matching the bracket at ``pos``."""
    ch = buffer.char_at(pos)
    if not is_bracket(ch):
        return None
    forward = ch in FORWARD_CHARS
    if is_comment(classifier, pos):
        return _confined_walk(buffer, classifier, pos, forward, COMMENT)
    if is_string(classifier, pos):
        return _confined_walk(buffer, classifier, pos, forward, STRING)
    return balanced_scan(buffer, classifier, pos, forward)


def match_quote(buffer: TextBuffer, classifier: Classifier, pos: int) -> int | None:
    """Return the raw offset of the quote closing or opening the literal at ``pos``.

    The walk looks for the next same glyph whose outer neighbour is outside
    the literal body, i.e. where the literal ends. Escaped quotes and
    interpolated fields sit inside the body and are passed over.
    """
    quote = buffer.char_at(pos)
    forward = quote_is_forward(classifier, pos)
    step = 1 if forward else -1
    cur = pos + step
    while 0 <= cur < len(buffer):
        if buffer.text[cur] == quote and not in_string_body(classifier, cur + step):
            return cur + 1 if forward else cur
        cur += step
    return None


def locate(ctx: MatchContext) -> tuple[int, bool] | None:
    """Find the raw match for the cursor and the direction it was found in."""
    buffer = ctx.buffer
    pos = buffer.cursor
    ch = buffer.char_at(pos)
    if is_bracket(ch):
        target = match_bracket(buffer, ctx.classifier, pos)
        forward = ch in FORWARD_CHARS
    elif is_quote_at(ctx, pos):
        target = match_quote(buffer, ctx.classifier, pos)
        forward = quote_is_forward(ctx.classifier, pos)
    else:
        return None
    if target is None:
        return None
    return target, forward


def simple_jump(ctx: MatchContext) -> int | None:
    """Move the cursor to the counterpart of the bracket or quote under it.

    Outside selecting mode a forward match lands on the closing character
    rather than one past it.
    """
    buffer = ctx.buffer
    found = locate(ctx)
    if found is None:
        logger.debug("no simple match at %d", buffer.cursor)
        return None
    target, forward = found
    if forward and not ctx.selecting:
        target -= 1
    buffer.cursor = target
    return target

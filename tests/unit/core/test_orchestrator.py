"""Tests for rule dispatch: priority, fallback, and the pre-jump hook."""

from __future__ import annotations

import unittest

from pairjump.config import MatchConfig
from pairjump.core.buffer import TextBuffer
from pairjump.core.orchestrator import operate_on_item
from pairjump.core.types import MatchContext, Tag
from pairjump.syntax.classify import NullClassifier


class RecordingRule:
    """Rule that answers with a fixed tag and jump destination."""

    def __init__(self, name: str, tag: Tag | None, destination: int | None = None) -> None:
        self.name = name
        self.tag = tag
        self.destination = destination
        self.events: list[tuple[str, object]] = []

    def get_tag(self, ctx: MatchContext) -> Tag | None:
        self.events.append(("get_tag", ctx.buffer.cursor))
        return self.tag

    def jump(self, ctx: MatchContext, tag: Tag, count: int) -> int | None:
        self.events.append(("jump", count))
        if self.destination is not None:
            ctx.buffer.cursor = self.destination
        return self.destination


class ExplodingRule:
    """Rule whose jump must never run."""

    name = "exploding"

    def __init__(self, test: unittest.TestCase) -> None:
        self.test = test

    def get_tag(self, ctx: MatchContext) -> Tag | None:
        return Tag(ctx.buffer.cursor)

    def jump(self, ctx: MatchContext, tag: Tag, count: int) -> int | None:
        self.test.fail("a later rule jumped after an earlier one matched")


def _ctx(text: str, cursor: int) -> MatchContext:
    return MatchContext(TextBuffer(text, cursor=cursor), NullClassifier(), MatchConfig())


class OperateOnItemTests(unittest.TestCase):
    def test_first_matching_rule_wins(self) -> None:
        first = RecordingRule("first", Tag(0, "if"), destination=5)
        ctx = _ctx("if x end", 0)

        destination = operate_on_item(ctx, [first, ExplodingRule(self)])

        self.assertEqual(destination, 5)
        self.assertEqual(ctx.buffer.cursor, 5)
        self.assertEqual(first.events, [("get_tag", 0), ("jump", 1)])

    def test_rules_without_tag_are_passed_over(self) -> None:
        silent = RecordingRule("silent", None)
        second = RecordingRule("second", Tag(0), destination=3)

        destination = operate_on_item(_ctx("abcd", 0), [silent, second])

        self.assertEqual(destination, 3)
        self.assertEqual(silent.events, [("get_tag", 0)])

    def test_count_is_passed_to_jump(self) -> None:
        rule = RecordingRule("rule", Tag(0), destination=2)
        operate_on_item(_ctx("abcd", 0), [rule], count=3)
        self.assertEqual(rule.events[-1], ("jump", 3))

    def test_count_below_one_is_raised_to_one(self) -> None:
        rule = RecordingRule("rule", Tag(0), destination=2)
        operate_on_item(_ctx("abcd", 0), [rule], count=0)
        self.assertEqual(rule.events[-1], ("jump", 1))

    def test_fallback_matches_brackets_without_rules(self) -> None:
        ctx = _ctx("(a)", 0)
        self.assertEqual(operate_on_item(ctx, []), 2)

    def test_fallback_runs_when_no_rule_has_a_tag(self) -> None:
        ctx = _ctx("(a)", 0)
        self.assertEqual(operate_on_item(ctx, [RecordingRule("silent", None)]), 2)

    def test_failed_rule_jump_does_not_fall_back(self) -> None:
        broken = RecordingRule("broken", Tag(0), destination=None)
        ctx = _ctx("(a)", 0)

        self.assertIsNone(operate_on_item(ctx, [broken]))
        self.assertEqual(ctx.buffer.cursor, 0)

    def test_hook_sees_tag_before_cursor_moves(self) -> None:
        rule = RecordingRule("rule", Tag(1, "payload"), destination=4)
        ctx = _ctx("abcdef", 1)
        seen: list[tuple[Tag, int]] = []

        operate_on_item(ctx, [rule], pre_jump_hook=lambda tag: seen.append((tag, ctx.buffer.cursor)))

        self.assertEqual(seen, [(Tag(1, "payload"), 1)])

    def test_fallback_hook_marks_cursor(self) -> None:
        seen: list[Tag] = []
        operate_on_item(_ctx("(a)", 0), [], pre_jump_hook=seen.append)
        self.assertEqual([tag.mark for tag in seen], [0])

    def test_no_match_leaves_cursor(self) -> None:
        ctx = _ctx("(abc", 0)
        self.assertIsNone(operate_on_item(ctx, []))
        self.assertEqual(ctx.buffer.cursor, 0)


if __name__ == "__main__":
    unittest.main()

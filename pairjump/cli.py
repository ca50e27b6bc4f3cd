"""Command-line front door for pairjump.

Loads a file, places the cursor, runs one command, and prints the result.
Exits with status 1 when nothing matches.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .commands import MatchEngine
from .config import load_config
from .core.buffer import TextBuffer
from .errors import PairJumpError
from .syntax.classify import PygmentsClassifier


def read_text(path: Path) -> str:
    """Read text using tolerant encoding fallback order."""
    for encoding in ("utf-8", "utf-8-sig", "latin-1"):
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    return path.read_bytes().decode("utf-8", errors="replace")


def _nonnegative_int(value: str) -> int:
    """argparse type for integer values >= 0."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    parsed = _nonnegative_int(value)
    if parsed == 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pairjump",
        description="Jump to, select, or delete the pair matching a cursor position.",
    )
    parser.add_argument("path", help="File to operate on.")
    position = parser.add_mutually_exclusive_group()
    position.add_argument("--offset", type=_nonnegative_int, default=None, help="0-based cursor offset.")
    position.add_argument("--line", type=_positive_int, default=None, help="1-based cursor line.")
    parser.add_argument("--column", type=_nonnegative_int, default=0, help="0-based column with --line.")
    parser.add_argument("--grammar", default=None, help="Pygments lexer alias (default: guessed from PATH).")
    parser.add_argument("--count", type=_positive_int, default=None, help="Repeat count or percentage.")
    parser.add_argument("--percent", type=int, default=None, help="Jump to this percentage of the file.")
    action = parser.add_mutually_exclusive_group()
    action.add_argument("--select", action="store_true", help="Print the matched region.")
    action.add_argument("--delete", action="store_true", help="Print the text with the region removed.")
    parser.add_argument("--inner", action="store_true", help="Use the inner region (drop delimiter lines).")
    parser.add_argument("--visual", action="store_true", help="Jump as if a selection were active.")
    parser.add_argument("--no-percentage", action="store_true", help="Treat --count as a repeat count.")
    parser.add_argument("--simple", action="store_true", help="Only use the built-in bracket/quote matcher.")
    parser.add_argument("--debug", action="store_true", help="Log matching decisions to stderr.")
    return parser


def _describe(buffer: TextBuffer, pos: int) -> str:
    line, column = buffer.line_column(pos)
    return f"{pos} {line}:{column}"


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and run one matching command."""
    args = build_parser().parse_args(argv)

    config = load_config().with_overrides(
        may_jump_by_percentage=False if args.no_percentage else None,
        always_simple_jump=True if args.simple else None,
        debug=True if args.debug else None,
    )
    if config.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    path = Path(args.path)
    if not path.is_file():
        raise SystemExit(f"Path not found: {path}")
    source = read_text(path)

    buffer = TextBuffer(source)
    if args.line is not None:
        buffer.cursor = buffer.offset_for(args.line, args.column)
    elif args.offset is not None:
        buffer.cursor = buffer.clamp(args.offset)
    if args.visual:
        buffer.anchor = buffer.cursor

    try:
        if args.grammar is not None:
            classifier = PygmentsClassifier.for_grammar(source, args.grammar, strict=True)
        else:
            classifier = PygmentsClassifier.for_filename(source, path)
    except PairJumpError as exc:
        raise SystemExit(str(exc)) from exc
    grammar = args.grammar or classifier.grammar

    engine = MatchEngine(config)
    if args.percent is not None:
        pos = engine.jump_to_percentage(buffer, args.percent)
        sys.stdout.write(_describe(buffer, pos) + "\n")
        return

    if args.select or args.delete:
        command = engine.delete_items if args.delete else engine.select_items
        region = command(buffer, args.count or 1, args.inner, classifier, grammar)
        if region is None:
            sys.stderr.write("no match\n")
            raise SystemExit(1)
        if args.delete:
            sys.stdout.write(buffer.text)
        else:
            sys.stdout.write(f"{region.begin} {region.end}\n")
        return

    pos = engine.jump_items(buffer, args.count, classifier, grammar)
    if pos is None:
        sys.stderr.write("no match\n")
        raise SystemExit(1)
    sys.stdout.write(_describe(buffer, pos) + "\n")


if __name__ == "__main__":
    main()

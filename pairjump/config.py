"""Match settings and their persisted JSON form.

All access is defensive: a missing or malformed config file, or values of
the wrong type, fall back to defaults.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields, replace
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "pairjump"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

DEFAULT_SHORTCUT = "%"
DEFAULT_QUOTE_CHARS = "\"'`"


def _grammar_set(*names: str) -> frozenset[str]:
    return frozenset(name.lower() for name in names)


@dataclass(frozen=True)
class MatchConfig:
    """Process-wide knobs read by every command."""

    shortcut: str = DEFAULT_SHORTCUT
    may_jump_by_percentage: bool = True
    always_simple_jump: bool = False
    simple_jump_grammars: frozenset[str] = field(default_factory=frozenset)
    line_end_ambiguous_grammars: frozenset[str] = field(default_factory=lambda: _grammar_set("python"))
    inner_keeps_closing_line_grammars: frozenset[str] = field(default_factory=lambda: _grammar_set("python"))
    quote_chars: str = DEFAULT_QUOTE_CHARS
    debug: bool = False

    def with_overrides(self, **changes: object) -> MatchConfig:
        """Return a copy with ``changes`` applied; ``None`` values are skipped."""
        return replace(self, **{key: value for key, value in changes.items() if value is not None})

    def uses_simple_jump(self, grammar: str | None) -> bool:
        """Whether rule modules are bypassed for ``grammar``."""
        if self.always_simple_jump:
            return True
        return grammar is not None and grammar.lower() in self.simple_jump_grammars

    def to_json(self) -> dict[str, object]:
        data: dict[str, object] = {}
        for item in fields(self):
            value = getattr(self, item.name)
            data[item.name] = sorted(value) if isinstance(value, frozenset) else value
        return data


def load_config_data() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config_data(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem and serialization errors are ignored.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        pass


def _coerce_grammars(value: object, default: frozenset[str]) -> frozenset[str]:
    if not isinstance(value, list):
        return default
    return frozenset(item.lower() for item in value if isinstance(item, str) and item)


def load_config() -> MatchConfig:
    """Build a ``MatchConfig`` from disk, keeping defaults for bad values."""
    data = load_config_data()
    defaults = MatchConfig()

    shortcut = data.get("shortcut")
    if not isinstance(shortcut, str) or len(shortcut) != 1 or shortcut.isspace():
        shortcut = defaults.shortcut

    quote_chars = data.get("quote_chars")
    if not isinstance(quote_chars, str):
        quote_chars = defaults.quote_chars

    def flag(key: str, default: bool) -> bool:
        value = data.get(key)
        return value if isinstance(value, bool) else default

    return MatchConfig(
        shortcut=shortcut,
        may_jump_by_percentage=flag("may_jump_by_percentage", defaults.may_jump_by_percentage),
        always_simple_jump=flag("always_simple_jump", defaults.always_simple_jump),
        simple_jump_grammars=_coerce_grammars(data.get("simple_jump_grammars"), defaults.simple_jump_grammars),
        line_end_ambiguous_grammars=_coerce_grammars(
            data.get("line_end_ambiguous_grammars"), defaults.line_end_ambiguous_grammars
        ),
        inner_keeps_closing_line_grammars=_coerce_grammars(
            data.get("inner_keeps_closing_line_grammars"), defaults.inner_keeps_closing_line_grammars
        ),
        quote_chars=quote_chars,
        debug=flag("debug", defaults.debug),
    )


def save_config(config: MatchConfig) -> None:
    """Persist ``config``, preserving unrelated keys already on disk."""
    data = load_config_data()
    data.update(config.to_json())
    save_config_data(data)

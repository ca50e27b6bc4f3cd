"""Tests for match settings and their JSON persistence."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from pairjump import config
from pairjump.config import MatchConfig


class MatchConfigTests(unittest.TestCase):
    def test_defaults(self) -> None:
        settings = MatchConfig()
        self.assertEqual(settings.shortcut, "%")
        self.assertTrue(settings.may_jump_by_percentage)
        self.assertFalse(settings.always_simple_jump)
        self.assertIn("python", settings.line_end_ambiguous_grammars)
        self.assertIn("python", settings.inner_keeps_closing_line_grammars)

    def test_with_overrides_skips_none(self) -> None:
        settings = MatchConfig().with_overrides(always_simple_jump=True, debug=None)
        self.assertTrue(settings.always_simple_jump)
        self.assertFalse(settings.debug)

    def test_uses_simple_jump_per_grammar(self) -> None:
        settings = MatchConfig(simple_jump_grammars=frozenset({"html"}))
        self.assertTrue(settings.uses_simple_jump("HTML"))
        self.assertFalse(settings.uses_simple_jump("python"))
        self.assertFalse(settings.uses_simple_jump(None))
        self.assertTrue(MatchConfig(always_simple_jump=True).uses_simple_jump(None))


class ConfigPersistenceTests(unittest.TestCase):
    def test_missing_file_yields_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("pairjump.config.CONFIG_PATH", Path(tmp) / "missing.json"):
                self.assertEqual(config.load_config(), MatchConfig())

    def test_round_trip(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "config.json"
            expected = MatchConfig(
                shortcut="m",
                may_jump_by_percentage=False,
                simple_jump_grammars=frozenset({"html", "xml"}),
                quote_chars="'",
            )
            with mock.patch("pairjump.config.CONFIG_PATH", config_path):
                config.save_config(expected)
                self.assertEqual(config.load_config(), expected)

    def test_malformed_values_fall_back_to_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("pairjump.config.CONFIG_PATH", config_path):
                config.save_config_data(
                    {
                        "shortcut": "too-long",
                        "may_jump_by_percentage": "yes",
                        "always_simple_jump": 1,
                        "simple_jump_grammars": "html",
                        "line_end_ambiguous_grammars": ["Ruby", 3, ""],
                        "quote_chars": None,
                    }
                )
                loaded = config.load_config()

        defaults = MatchConfig()
        self.assertEqual(loaded.shortcut, defaults.shortcut)
        self.assertTrue(loaded.may_jump_by_percentage)
        self.assertFalse(loaded.always_simple_jump)
        self.assertEqual(loaded.simple_jump_grammars, frozenset())
        self.assertEqual(loaded.line_end_ambiguous_grammars, frozenset({"ruby"}))
        self.assertEqual(loaded.quote_chars, defaults.quote_chars)

    def test_non_object_json_is_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text("[1, 2]", encoding="utf-8")
            with mock.patch("pairjump.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config_data(), {})

    def test_save_preserves_unrelated_keys(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("pairjump.config.CONFIG_PATH", config_path):
                config.save_config_data({"editor": "vi"})
                config.save_config(MatchConfig())
                self.assertEqual(config.load_config_data().get("editor"), "vi")


if __name__ == "__main__":
    unittest.main()

import os
import tempfile
import unittest
from unittest import mock

from rich.console import Console

from lore_parser.actions import ACTIONS
from lore_parser.config import DEFAULTS
from lore_parser.play import build_listener, custom_theme, render_trace, run_command, start_game


class TestPlay(unittest.TestCase):
    def setUp(self):
        self.world, self.listener = build_listener(dict(DEFAULTS))
        self.console = Console(record=True, width=120, theme=custom_theme)

    def test_matched_command(self):
        interpretation = run_command(self.listener, "dance the waltz", self.console)
        self.assertTrue(interpretation.matched)
        self.assertIn("You dance the waltz very well.", self.console.export_text())

    def test_not_understood(self):
        interpretation = run_command(self.listener, "give old to old", self.console)
        self.assertFalse(interpretation.matched)
        self.assertIn("I don't understand.", self.console.export_text())

    def test_debug_trace(self):
        run_command(self.listener, "give old to old", self.console, debug=True)
        text = self.console.export_text()
        self.assertIn("ambiguous_reference", text)
        self.assertIn('single "to" single', text)
        self.assertIn("DEBUG: Words", text)

    def test_trace_for_unknown_verb(self):
        interpretation = self.listener.interpret("fly away")
        self.console.print(render_trace(interpretation))
        self.assertIn("unknown_verb", self.console.export_text())

    def test_scene_from_bundled_world(self):
        self.assertEqual(self.world.title, "The Storeroom")
        self.assertEqual(len(self.world.entities_in_scope()), 5)
        self.assertIn('take', ACTIONS)


class TestLoadErrors(unittest.TestCase):
    def setUp(self):
        self.console = Console(record=True, width=120, theme=custom_theme)
        self.tmp = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmp.cleanup()

    def start_with(self, world_yaml):
        path = os.path.join(self.tmp.name, "world.yaml")
        with open(path, "w") as f:
            f.write(world_yaml)
        config = dict(DEFAULTS, world_file=path)
        with mock.patch("lore_parser.play.console", self.console), \
                mock.patch("lore_parser.play.clear_screen"), \
                mock.patch("lore_parser.play.Prompt.ask") as ask:
            start_game(config)
        ask.assert_not_called()
        return self.console.export_text()

    def test_non_text_name_is_a_grammar_error(self):
        text = self.start_with("scenes:\n  - id: room\n    objects:\n      - name: 42\n")
        self.assertIn("GRAMMAR ERROR", text)

    def test_missing_file(self):
        config = dict(DEFAULTS, world_file=os.path.join(self.tmp.name, "nowhere.yaml"))
        with mock.patch("lore_parser.play.console", self.console), \
                mock.patch("lore_parser.play.clear_screen"):
            start_game(config)
        self.assertIn("Game data not found", self.console.export_text())

    def test_unexpected_failure_is_reported(self):
        with mock.patch("lore_parser.play.console", self.console), \
                mock.patch("lore_parser.play.clear_screen"), \
                mock.patch("lore_parser.play.build_listener", side_effect=TypeError("boom")):
            start_game(dict(DEFAULTS))
        text = self.console.export_text()
        self.assertIn("CRITICAL LOAD ERROR", text)
        self.assertIn("boom", text)


if __name__ == '__main__':
    unittest.main()

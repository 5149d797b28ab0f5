"""
test_demo.py - Scripted runs of the demo scenes.

Drives the title, help, counter, and pause scenes through a SceneRunner with
a RecordingConsole, feeding keys one pass at a time.

Tests cover:
- Title menu navigation, Start, Help, and Quit
- Counter pause / resume (immediate pop from the counter)
- Counter hide and resume from the title
- Counter restart (replace) and close (pop)
- Help chosen while the counter is hidden
- Resize handling and the command line entry point
"""

import curses
import io
import logging
import sys
import os
import unittest
from unittest import mock

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import main
from scenes.demo import (
    CounterScene,
    HelpScene,
    PauseScene,
    TitleScene,
    KEY_ESCAPE,
)
from scenes.runner import SceneRunner
from ui.console import RecordingConsole


ENTER = 10


# ── Test Helpers ─────────────────────────────────────────────────────

def _make_runner():
    console = RecordingConsole()
    runner = main.build_runner(console, tick=0)
    return runner, console


def _press(runner, console, *keys):
    """Feed keys and run one pass per key."""
    for key in keys:
        console.feed(key)
        runner.step()


def _start_counter(runner, console):
    _press(runner, console, ENTER)
    runner.step()  # counter draws its first frame
    return runner.root.subscene


# ── Title ────────────────────────────────────────────────────────────

class TestTitleScene(unittest.TestCase):

    def test_first_pass_draws_menu(self):
        runner, console = _make_runner()
        runner.step()
        self.assertIn("CONSOLE UI", console.screen)
        self.assertIn("> Start <", console.screen)

    def test_arrow_keys_move_selection(self):
        runner, console = _make_runner()
        runner.step()
        _press(runner, console, curses.KEY_DOWN)
        self.assertTrue(runner.root.needs_rerender)
        runner.step()
        self.assertIn("> Help <", console.screen)

    def test_start_pushes_counter(self):
        runner, console = _make_runner()
        counter = _start_counter(runner, console)
        self.assertIsInstance(counter, CounterScene)
        self.assertIs(runner.active_scene, counter)
        self.assertIn("Passes: 0", console.screen)
        self.assertEqual(counter.count, 1)

    def test_help_opens_and_closes(self):
        runner, console = _make_runner()
        _press(runner, console, curses.KEY_DOWN, ENTER)
        self.assertIsInstance(runner.root.subscene, HelpScene)
        runner.step()
        self.assertIn("Help", console.screen)
        _press(runner, console, "x")
        self.assertIsNone(runner.root.subscene)
        self.assertTrue(runner.root.needs_rerender)

    def test_q_stops_runner(self):
        runner, console = _make_runner()
        console.feed("q")
        self.assertEqual(runner.run(), 1)
        self.assertFalse(runner.running)

    def test_quit_option_stops_runner(self):
        runner, console = _make_runner()
        _press(runner, console, curses.KEY_UP, ENTER)
        self.assertFalse(runner.running)


# ── Counter ──────────────────────────────────────────────────────────

class TestCounterScene(unittest.TestCase):

    def test_pause_and_resume(self):
        runner, console = _make_runner()
        counter = _start_counter(runner, console)
        _press(runner, console, "p")
        pause = counter.subscene
        self.assertIsInstance(pause, PauseScene)

        count = counter.count
        runner.step()
        self.assertIn("Paused", console.screen)
        self.assertEqual(counter.count, count)

        _press(runner, console, "x")
        self.assertIsNone(counter.subscene)
        self.assertIsNone(pause.superscene)
        self.assertTrue(counter.needs_rerender)
        self.assertIs(runner.active_scene, counter)

    def test_hide_shows_title_and_start_resumes(self):
        runner, console = _make_runner()
        counter = _start_counter(runner, console)
        _press(runner, console, "h")
        self.assertTrue(counter.hidden)
        self.assertIs(runner.root.subscene, counter)
        self.assertIs(runner.active_scene, runner.root)

        _press(runner, console, ENTER)
        self.assertIn("CONSOLE UI", console.screen)
        self.assertFalse(counter.hidden)
        self.assertIs(runner.active_scene, counter)

    def test_restart_replaces_counter(self):
        runner, console = _make_runner()
        counter = _start_counter(runner, console)
        _press(runner, console, "n")
        fresh = runner.root.subscene
        self.assertIsInstance(fresh, CounterScene)
        self.assertIsNot(fresh, counter)
        self.assertEqual(fresh.count, 0)
        self.assertIsNone(counter.superscene)

    def test_escape_closes_counter(self):
        runner, console = _make_runner()
        _start_counter(runner, console)
        _press(runner, console, KEY_ESCAPE)
        self.assertIsNone(runner.root.subscene)
        self.assertIs(runner.active_scene, runner.root)

    def test_help_while_counter_hidden_is_visible(self):
        """Help chosen over a hidden counter ends the counter and shows help."""
        runner, console = _make_runner()
        counter = _start_counter(runner, console)
        _press(runner, console, "h", curses.KEY_DOWN, ENTER)

        help_scene = runner.root.subscene
        self.assertIsInstance(help_scene, HelpScene)
        self.assertIs(runner.active_scene, help_scene)
        self.assertIsNone(counter.superscene)

        runner.step()
        self.assertIn("Press any key to return.", console.screen)

        _press(runner, console, "x", curses.KEY_UP, ENTER)
        fresh = runner.active_scene
        self.assertIsInstance(fresh, CounterScene)
        self.assertIsNot(fresh, counter)
        self.assertIs(fresh.superscene, runner.root)

    def test_resize_redraws(self):
        runner, console = _make_runner()
        counter = _start_counter(runner, console)
        counter.needs_rerender = False
        _press(runner, console, curses.KEY_RESIZE)
        self.assertTrue(counter.needs_rerender)


# ── Entry point ──────────────────────────────────────────────────────

class TestMain(unittest.TestCase):

    def test_parse_args_defaults(self):
        args = main.parse_args([])
        self.assertEqual(args.tick, SceneRunner.TICK_SECONDS)
        self.assertFalse(args.plain)
        self.assertIsNone(args.steps)
        self.assertEqual(args.log_level, "WARNING")

    def test_plain_run_prints_title(self):
        stdout = io.StringIO()
        with mock.patch.object(sys, "stdout", stdout):
            status = main.main(["--plain", "--steps", "2", "--tick", "0"])
        self.assertEqual(status, 0)
        self.assertIn("CONSOLE UI", stdout.getvalue())

    def test_plain_run_stops_without_steps(self):
        stdout = io.StringIO()
        with mock.patch.object(sys, "stdout", stdout):
            status = main.main(["--plain", "--tick", "0"])
        self.assertEqual(status, 0)
        self.assertEqual(stdout.getvalue().count("CONSOLE UI"), main.PLAIN_STEPS)

    def test_configure_logging_keeps_other_handlers(self):
        root = logging.getLogger()
        level = root.level
        other = logging.NullHandler()
        root.addHandler(other)
        try:
            main.configure_logging("INFO")
            first = main._log_handler
            main.configure_logging("DEBUG")
            self.assertIn(other, root.handlers)
            self.assertNotIn(first, root.handlers)
            self.assertIn(main._log_handler, root.handlers)
            self.assertEqual(root.level, logging.DEBUG)
        finally:
            root.removeHandler(other)
            root.removeHandler(main._log_handler)
            root.setLevel(level)


if __name__ == "__main__":
    unittest.main()

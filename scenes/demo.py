"""
scenes.demo - Demo scenes for ConsoleUI.

Provides:
- DemoScene: Shared base that reads one key per pass and dispatches it.
- TitleScene: Title menu with Start / Help / Quit.
- HelpScene: Key reference; any key closes it.
- CounterScene: Counts main loop passes; can pause, hide, restart, or close.
- PauseScene: Pause banner stacked on a counter; any key resumes.
"""

import curses

from scenes.scene import Scene
from ui.sprites import (
    BoxSprite,
    CallbackSprite,
    CenteredSprite,
    MenuSprite,
    StatusSprite,
    TextSprite,
)


SCREEN_WIDTH = 60
KEY_ESCAPE = 27
ENTER_KEYS = (curses.KEY_ENTER, 10, 13)


class DemoScene(Scene):
    """Base for the demo scenes.

    Each update() reads at most one key from the runner. Resize events are
    handled here; every other key goes to handle_input().
    """

    def __init__(self, runner):
        super().__init__()
        self.runner = runner

    def update(self):
        key = self.runner.read_key()
        if key is None:
            self.tick()
            return
        if key == curses.KEY_RESIZE:
            self.runner.resize()
            return
        self.handle_input(key)

    def tick(self):
        """Called on passes with no key press."""
        pass

    def handle_input(self, key):
        """Process a single key press.

        Args:
            key: The curses key code or character ordinal.
        """
        pass


# ── Title Scene ─────────────────────────────────────────────────────────────

class TitleScene(DemoScene):
    """The title screen and base of the demo stack.

    Start opens a counter, or brings a hidden counter back into view. Help
    closes a hidden counter first so the help box lands in view.
    """

    def __init__(self, runner):
        super().__init__(runner)
        self.menu = MenuSprite(["Start", "Help", "Quit"])
        self.drawables["title"] = CenteredSprite("CONSOLE UI", SCREEN_WIDTH)
        self.drawables["spacer"] = TextSprite("")
        self.drawables["menu"] = self.menu
        self.drawables["status"] = StatusSprite(
            "Up/Down: Navigate | Enter: Select | Q: Quit", SCREEN_WIDTH
        )

    def handle_input(self, key):
        if key == curses.KEY_UP:
            self.menu.move(-1)
            self.needs_rerender = True
        elif key == curses.KEY_DOWN:
            self.menu.move(1)
            self.needs_rerender = True
        elif key in ENTER_KEYS:
            self._select_option()
        elif key in (ord("q"), ord("Q")):
            self.runner.stop()

    def _select_option(self):
        choice = self.menu.current
        if choice == "Start":
            if self.subscene is not None and self.subscene.hidden:
                self.subscene.show()
            else:
                self.push_scene(CounterScene(self.runner))
        elif choice == "Help":
            if self.subscene is not None and self.subscene.hidden:
                # A push would land on the hidden counter, out of view.
                self.pop_scene(immediate=True)
            self.push_scene(HelpScene(self.runner))
        elif choice == "Quit":
            self.runner.stop()


# ── Help Scene ──────────────────────────────────────────────────────────────

class HelpScene(DemoScene):
    """Key reference box. Any key closes it."""

    HELP_LINES = [
        "Counter keys:",
        "  P    pause",
        "  H    hide (back to title, Start resumes)",
        "  N    restart the counter",
        "  Esc  close the counter",
        "",
        "Press any key to return.",
    ]

    def __init__(self, runner):
        super().__init__(runner)
        self.drawables["help"] = BoxSprite(self.HELP_LINES, SCREEN_WIDTH, title="Help")

    def handle_input(self, key):
        self.pop_scene()


# ── Counter Scene ───────────────────────────────────────────────────────────

class CounterScene(DemoScene):
    """Counts the main loop passes it receives."""

    def __init__(self, runner):
        super().__init__(runner)
        self.count = 0
        self.drawables["header"] = CenteredSprite("COUNTER", SCREEN_WIDTH)
        self.drawables["count"] = CallbackSprite(lambda: f"Passes: {self.count}")
        self.drawables["status"] = StatusSprite(
            "P: Pause | H: Hide | N: Restart | Esc: Close", SCREEN_WIDTH
        )

    def tick(self):
        self.count += 1
        self.needs_rerender = True

    def handle_input(self, key):
        if key in (ord("p"), ord("P")):
            self.push_scene(PauseScene(self.runner))
        elif key in (ord("h"), ord("H")):
            self.hide()
        elif key in (ord("n"), ord("N")):
            self.replace_scene(CounterScene(self.runner))
        elif key == KEY_ESCAPE:
            self.pop_scene()
        else:
            self.tick()


# ── Pause Scene ─────────────────────────────────────────────────────────────

class PauseScene(DemoScene):
    """Pause banner. Any key hands control back to the counter below."""

    def __init__(self, runner):
        super().__init__(runner)
        self.drawables["banner"] = BoxSprite(
            ["Paused. Press any key to resume."], SCREEN_WIDTH, title="Pause"
        )

    def handle_input(self, key):
        self.superscene.pop_scene(immediate=True)

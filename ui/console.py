"""
ui.console - Output devices for ConsoleUI.

A console is what scenes draw to: clear() wipes the screen and write()
prints a frame of text. Consoles can also hand out key presses through
read_key(), which never blocks for longer than the console's own timeout.

Provides:
- Console: Base class documenting the device interface.
- NullConsole: Discards all output. Used by scenes with no device.
- StreamConsole: Writes frames to a text stream such as sys.stdout.
- CursesConsole: Draws frames to a curses window and reads keys from it.
- RecordingConsole: Headless console that records output and replays keys.
"""

import curses
import sys
from collections import deque


# ANSI "erase display" followed by "cursor home".
ANSI_CLEAR = "\x1b[2J\x1b[H"


class Console:
    """Base class for an output device."""

    def clear(self):
        """Wipe the screen."""
        raise NotImplementedError

    def write(self, text):
        """Print text at the current position."""
        raise NotImplementedError

    def read_key(self):
        """Return the next key code, or None if no key is waiting."""
        return None


class NullConsole(Console):
    """A console that throws everything away."""

    def clear(self):
        pass

    def write(self, text):
        pass


class StreamConsole(Console):
    """Write frames to a text stream.

    Attributes:
        stream: The file-like object frames are written to.
    """

    def __init__(self, stream=None):
        self.stream = stream if stream is not None else sys.stdout

    def clear(self):
        self.stream.write(ANSI_CLEAR)
        self.stream.flush()

    def write(self, text):
        self.stream.write(text)
        self.stream.flush()


class CursesConsole(Console):
    """Draw frames to a curses window.

    Text is written line by line from the current cursor row and clipped to
    the window; anything past the right or bottom edge is dropped.
    """

    KEY_TIMEOUT_MS = 100

    def __init__(self, stdscr, timeout_ms=None):
        """Wrap a curses window.

        Args:
            stdscr: The curses standard screen window.
            timeout_ms: How long read_key() waits for a key press.
        """
        self.stdscr = stdscr
        self._row = 0
        self.stdscr.timeout(self.KEY_TIMEOUT_MS if timeout_ms is None else timeout_ms)

    def clear(self):
        self.stdscr.erase()
        self._row = 0
        self.stdscr.refresh()

    def write(self, text):
        max_h, max_w = self.stdscr.getmaxyx()
        for line in text.split("\n"):
            if self._row >= max_h:
                break
            try:
                self.stdscr.addstr(self._row, 0, line[:max_w - 1])
            except curses.error:
                pass
            self._row += 1
        self.stdscr.refresh()

    def read_key(self):
        try:
            key = self.stdscr.getch()
        except curses.error:
            return None
        if key == -1:
            return None  # Timeout, no key pressed
        return key


class RecordingConsole(Console):
    """A headless console for tests and scripted runs.

    Attributes:
        clears: Number of times clear() was called.
        writes: Every string passed to write(), in order.
        screen: Text written since the last clear().
        keys: Key codes still waiting to be read.
    """

    def __init__(self, keys=()):
        self.clears = 0
        self.writes = []
        self.screen = ""
        self.keys = deque(keys)

    def clear(self):
        self.clears += 1
        self.screen = ""

    def write(self, text):
        self.writes.append(text)
        self.screen += text

    def read_key(self):
        if self.keys:
            return self.keys.popleft()
        return None

    def feed(self, *keys):
        """Queue key presses. Characters are converted to key codes."""
        for key in keys:
            self.keys.append(ord(key) if isinstance(key, str) else key)

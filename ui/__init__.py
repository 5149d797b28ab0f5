"""
ui - Consoles and sprites for ConsoleUI.

Submodules:
    console - Output devices (null, stream, curses, recording).
    sprites - Drawable units that fill scene slots.
"""

from ui.console import (
    ANSI_CLEAR,
    Console,
    NullConsole,
    StreamConsole,
    CursesConsole,
    RecordingConsole,
)
from ui.sprites import (
    Sprite,
    TextSprite,
    CallbackSprite,
    CenteredSprite,
    BoxSprite,
    MenuSprite,
    StatusSprite,
)

__all__ = [
    # Consoles
    "ANSI_CLEAR",
    "Console",
    "NullConsole",
    "StreamConsole",
    "CursesConsole",
    "RecordingConsole",
    # Sprites
    "Sprite",
    "TextSprite",
    "CallbackSprite",
    "CenteredSprite",
    "BoxSprite",
    "MenuSprite",
    "StatusSprite",
]

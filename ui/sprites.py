"""
ui.sprites - Drawable units for ConsoleUI scenes.

A sprite fills one slot of a scene's drawables and produces its text for the
current frame through render_line(). The text may span several lines.

Provides:
- Sprite: Base class.
- TextSprite: Static text.
- CallbackSprite: Text computed by a function on every frame.
- CenteredSprite: Text centered in a fixed width.
- BoxSprite: Lines of text inside a bordered box with an optional title.
- MenuSprite: Vertical list of selectable options.
- StatusSprite: A single status line padded to a fixed width.
"""


class Sprite:
    """Base class for a drawable unit."""

    def render_line(self):
        """Return the text for this frame."""
        raise NotImplementedError


class TextSprite(Sprite):
    """Static text. Assign to .text to change it."""

    def __init__(self, text=""):
        self.text = text

    def render_line(self):
        return self.text


class CallbackSprite(Sprite):
    """Text produced by calling func() on every frame."""

    def __init__(self, func):
        self.func = func

    def render_line(self):
        return str(self.func())


class CenteredSprite(Sprite):
    """Text centered horizontally within width columns.

    Text wider than the sprite is truncated.
    """

    def __init__(self, text, width):
        self.text = text
        self.width = width

    def render_line(self):
        truncated = self.text[:self.width]
        x = (self.width - len(truncated)) // 2
        return (" " * x + truncated).ljust(self.width)


class BoxSprite(Sprite):
    """Lines of text inside a bordered box.

    Attributes:
        lines: List of strings drawn inside the box, one per row.
        width: Total width of the box (including borders).
        title: Optional title shown on the top border.
    """

    def __init__(self, lines, width, title=None):
        self.lines = list(lines)
        self.width = width
        self.title = title

    def render_line(self):
        inner_w = max(0, self.width - 2)

        top = "─" * inner_w
        if self.title:
            title_str = f" {self.title} "
            if len(title_str) < inner_w:
                title_x = (inner_w - len(title_str)) // 2
                top = top[:title_x] + title_str + top[title_x + len(title_str):]

        rows = ["┌" + top + "┐"]
        for line in self.lines:
            rows.append("│" + line[:inner_w].ljust(inner_w) + "│")
        rows.append("└" + "─" * inner_w + "┘")
        return "\n".join(rows)


class MenuSprite(Sprite):
    """A vertical list of selectable options.

    The selected option is drawn as "> option <"; the others are padded so
    labels line up.
    """

    def __init__(self, options, selected=0):
        self.options = list(options)
        self.selected = selected

    @property
    def current(self):
        """The label of the selected option, or None if there are none."""
        if not self.options:
            return None
        return self.options[self.selected]

    def move(self, delta):
        """Move the selection by delta, wrapping around both ends."""
        if self.options:
            self.selected = (self.selected + delta) % len(self.options)

    def render_line(self):
        lines = []
        for i, option in enumerate(self.options):
            if i == self.selected:
                lines.append(f"  > {option} <")
            else:
                lines.append(f"    {option}")
        return "\n".join(lines)


class StatusSprite(Sprite):
    """A status bar line, truncated or padded to width columns."""

    def __init__(self, text, width=80):
        self.text = text
        self.width = width

    def render_line(self):
        return (" " + self.text)[:self.width].ljust(self.width)

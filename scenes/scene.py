"""
scenes.scene - Base Scene class and the scene stack for ConsoleUI.

A Scene is both a screen and a node in the scene stack. Each scene owns at
most one subscene; following subscene links from the base scene walks the
stack up to the scene on top. The main loop, rendering, and every structural
change (push, pop, end, replace, hide) recurse down that chain, so there is
no separate stack manager.

Concrete scenes inherit from Scene, fill self.drawables with sprites, and
override update() to handle input and drive the stack.
"""

import logging

from ui.console import NullConsole


logger = logging.getLogger(__name__)

_NULL_CONSOLE = NullConsole()


class Scene:
    """Base class for a console scene.

    Subclasses must override update().

    Attributes:
        drawables: Ordered mapping of slot name to sprite. A slot mapped to
            None is skipped when rendering.
        needs_rerender: Whether the next main loop pass must render before
            updating.
        subscene: The scene stacked on top of this one, or None.
        superscene: The scene this one is stacked on, or None for the base.
        hidden: Whether this scene (and everything above it) is skipped by
            the main loop while staying on the stack.
        buffer: The text produced by the last render() call.
    """

    def __init__(self, console=None):
        """Initialize an empty, dirty scene.

        Args:
            console: Optional output device. When omitted the scene uses the
                console of the scene it is stacked on.
        """
        self.drawables = {}
        self.needs_rerender = True
        self.subscene = None
        self.superscene = None
        self.hidden = False
        self.buffer = ""
        self._console = console

    def __repr__(self):
        return f"<{type(self).__name__} depth={self.depth} hidden={self.hidden}>"

    # ── Output device ───────────────────────────────────────────────────

    @property
    def console(self):
        """The output device for this scene.

        Falls back to the superscene's console, and to a console that
        discards everything when no scene in the chain has one.
        """
        if self._console is not None:
            return self._console
        if self.superscene is not None:
            return self.superscene.console
        return _NULL_CONSOLE

    @console.setter
    def console(self, console):
        self._console = console

    # ── Hooks ───────────────────────────────────────────────────────────

    def on_enter(self):
        """Called when this scene is attached to the stack."""
        pass

    def on_exit(self):
        """Called when this scene is ended and leaves the stack."""
        pass

    # ── Main loop ───────────────────────────────────────────────────────

    def run_main_loop(self):
        """Run one pass of the main loop.

        Only the deepest scene reachable through visible subscenes does any
        work: it renders if dirty and then updates.
        """
        if self.subscene is not None and not self.subscene.hidden:
            self.subscene.run_main_loop()
            return
        if self.needs_rerender:
            self.render()
        self.update()

    def update(self):
        """Update the scene state and process input.

        Called once per main loop pass, on the active scene only. May push,
        pop, hide, or replace scenes.
        """
        raise NotImplementedError(f"{type(self).__name__} must implement update()")

    def render(self, print_output=True):
        """Compose the text frame for this scene.

        A visible subscene fully covers this scene, so its frame is used
        as-is. Otherwise each sprite renders one entry, in slot order.

        Args:
            print_output: Clear the console and write the frame to it.

        Returns:
            The composed frame text.
        """
        if self.subscene is not None and not self.subscene.hidden:
            text = self.subscene.render(print_output=False)
        else:
            text = "\n".join(
                sprite.render_line()
                for sprite in self.drawables.values()
                if sprite is not None
            )

        if print_output:
            console = self.console
            console.clear()
            console.write(text)

        self.buffer = text
        self.needs_rerender = False
        return text

    # ── Stack operations ────────────────────────────────────────────────

    def push_scene(self, scene, immediate=False):
        """Stack a new scene on top.

        Args:
            scene: The scene to add.
            immediate: Attach directly to this scene instead of on top of
                the whole stack.

        Raises:
            ValueError: If scene is None, already on a stack, or would
                create a cycle.
        """
        if not immediate and self.subscene is not None:
            self.subscene.push_scene(scene)
        else:
            self._check_attachable(scene)
            if self.subscene is not None:
                logger.debug("%r: dropping %r for %r", self, self.subscene, scene)
                self.subscene.superscene = None
            self.subscene = scene
            scene.superscene = self
            logger.debug("pushed %r onto %r", scene, self)
            scene.on_enter()
        self.console.clear()

    def pop_scene(self, immediate=False):
        """End the scene on top of the stack.

        Args:
            immediate: End this scene's own subscene instead of the scene
                on top of the whole stack.
        """
        console = self.console
        if self.subscene is None:
            # This scene is on top; it ends itself. The base scene cannot.
            self.end_scene()
            self.needs_rerender = True
        elif immediate:
            self.subscene.end_scene()
            self.needs_rerender = True
        else:
            self.subscene.pop_scene()
        console.clear()

    def end_scene(self):
        """Remove this scene from the stack.

        Scenes stacked on this one leave with it. Does nothing on the base
        scene.
        """
        parent = self.superscene
        if parent is None:
            return
        console = self.console
        parent.subscene = None
        parent.needs_rerender = True
        self.superscene = None
        console.clear()
        logger.debug("ended %r", self)
        self.on_exit()

    def replace_scene(self, scene):
        """Swap this scene for another at the same stack position.

        The replaced scene is not ended, so on_exit() is not called. Does
        nothing on the base scene.

        Raises:
            ValueError: If scene is None or already on a stack.
        """
        parent = self.superscene
        if parent is None:
            return
        self._check_attachable(scene, target=parent)
        console = self.console
        parent.subscene = scene
        scene.superscene = parent
        self.superscene = None
        console.clear()
        logger.debug("replaced %r with %r", self, scene)
        scene.on_enter()

    def hide(self):
        """Hide this scene; the scene below takes over the main loop."""
        self.hidden = True
        if self.superscene is not None:
            self.superscene.needs_rerender = True

    def show(self):
        """Undo hide(); this scene takes the main loop back."""
        self.hidden = False
        self.needs_rerender = True
        if self.superscene is not None:
            self.superscene.needs_rerender = True

    # ── Queries ─────────────────────────────────────────────────────────

    def get_top_scene(self):
        """Return the scene on top of the stack, hidden or not."""
        if self.subscene is None:
            return self
        return self.subscene.get_top_scene()

    def get_active_scene(self):
        """Return the scene the next main loop pass will update."""
        if self.subscene is None or self.subscene.hidden:
            return self
        return self.subscene.get_active_scene()

    def get_root_scene(self):
        """Return the base scene of the stack."""
        scene = self
        while scene.superscene is not None:
            scene = scene.superscene
        return scene

    @property
    def depth(self):
        """Number of scenes below this one."""
        depth = 0
        scene = self.superscene
        while scene is not None:
            depth += 1
            scene = scene.superscene
        return depth

    def iter_stack(self):
        """Yield this scene and every scene stacked above it, bottom first."""
        scene = self
        while scene is not None:
            yield scene
            scene = scene.subscene

    def _check_attachable(self, scene, target=None):
        if target is None:
            target = self
        if scene is None:
            raise ValueError("cannot stack None as a scene")
        if not isinstance(scene, Scene):
            raise ValueError(f"expected a Scene, got {type(scene).__name__}")
        if scene.superscene is not None:
            raise ValueError(f"{scene!r} is already on a scene stack")
        node = target
        while node is not None:
            if node is scene:
                raise ValueError(f"{scene!r} is already below {target!r}")
            node = node.superscene

"""
scenes.runner - SceneRunner for ConsoleUI.

Provides the SceneRunner class that owns the base scene and drives the main
loop: one pass per tick, until a scene stops the runner.
"""

import logging
import time


logger = logging.getLogger(__name__)


class SceneRunner:
    """Drives the main loop of a scene stack.

    The runner holds the base scene. Each pass calls run_main_loop() on it,
    which reaches the active scene at the top of the stack. Scenes stop the
    runner by calling stop().

    Attributes:
        root: The base scene of the stack.
        console: The output device shared by the whole stack.
        tick: Seconds to wait between passes.
        running: Whether the loop should continue.
        passes: Number of passes made so far.
    """

    TICK_SECONDS = 0.1

    def __init__(self, console, root=None, tick=None):
        self.console = console
        self.root = None
        self.tick = self.TICK_SECONDS if tick is None else tick
        self.running = True
        self.passes = 0
        if root is not None:
            self.set_root(root)

    def set_root(self, scene):
        """Make scene the base of the stack and give it the console.

        Args:
            scene: The base scene. It must not be stacked on another scene.

        Raises:
            ValueError: If scene is None or already on a stack.
        """
        if scene is None:
            raise ValueError("SceneRunner needs a base scene")
        if scene.superscene is not None:
            raise ValueError(f"{scene!r} is already on a scene stack")
        scene.console = self.console
        self.root = scene
        return scene

    @property
    def active_scene(self):
        """The scene the next pass will update, or None without a base."""
        if self.root is None:
            return None
        return self.root.get_active_scene()

    def read_key(self):
        """Return the next key from the console, or None."""
        return self.console.read_key()

    def step(self):
        """Run a single pass of the main loop.

        Raises:
            RuntimeError: If no base scene has been set.
        """
        if self.root is None:
            raise RuntimeError("cannot run the main loop without a base scene")
        self.root.run_main_loop()
        self.passes += 1

    def run(self, max_steps=None):
        """Run passes until stopped.

        Args:
            max_steps: Optional limit on the number of passes.

        Returns:
            The number of passes made by this call.
        """
        logger.debug("runner started with %r", self.root)
        steps = 0
        while self.running:
            if max_steps is not None and steps >= max_steps:
                break
            self.step()
            steps += 1
            if self.running and self.tick > 0:
                time.sleep(self.tick)
        logger.debug("runner stopped after %d passes", steps)
        return steps

    def stop(self):
        """End the loop after the current pass."""
        self.running = False

    def resize(self):
        """Handle a terminal resize by redrawing the active scene."""
        self.console.clear()
        scene = self.active_scene
        if scene is not None:
            scene.needs_rerender = True

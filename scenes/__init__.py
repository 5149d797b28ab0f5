"""
scenes - Scene stack and main loop driver for ConsoleUI.

Submodules:
    scene  - Base Scene class; the scene stack itself.
    runner - SceneRunner that drives the main loop of a stack.
    demo   - Demo scenes (title, help, counter, pause).
"""

from scenes.scene import Scene
from scenes.runner import SceneRunner

__all__ = [
    "Scene",
    "SceneRunner",
]

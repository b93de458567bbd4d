"""Scenes, a name-based scene factory and the manager that switches scenes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Optional


class BaseScene:
    """A scene that tracks its own life cycle; subclasses extend the hooks."""

    def __init__(self) -> None:
        self.active = False
        self.frame_count = 0
        self.draw_count = 0

    def initialize(self) -> None:
        """Prepare the scene for use."""
        self.active = True

    def finalize(self) -> None:
        """Release what the scene holds."""
        self.active = False

    def update(self) -> None:
        """Advance the scene by one frame."""
        self.frame_count += 1

    def draw(self) -> None:
        """Render the scene."""
        self.draw_count += 1


class AbstractSceneFactory(ABC):
    """Creates scenes from their names."""

    @abstractmethod
    def create_scene(self, scene_name: str) -> Optional[BaseScene]:
        """Return a new scene for ``scene_name``, or None if the name is unknown."""


class SceneFactory(AbstractSceneFactory):
    """A factory whose scene names are registered at run time."""

    def __init__(self) -> None:
        self._scene_types: dict[str, Callable[[], BaseScene]] = {}

    def register(self, scene_name: str, scene_type: Callable[[], BaseScene]) -> None:
        """Make ``scene_name`` create scenes by calling ``scene_type``."""
        if not callable(scene_type):
            raise TypeError("scene_type must be callable")
        self._scene_types[scene_name] = scene_type

    def create_scene(self, scene_name: str) -> Optional[BaseScene]:
        """Create and initialize the scene registered as ``scene_name``.

        An unknown name gives None.
        """
        scene_type = self._scene_types.get(scene_name)
        if scene_type is None:
            return None
        scene = scene_type()
        scene.initialize()
        return scene


class SceneManager:
    """Runs the current scene and switches to a requested one between frames."""

    def __init__(self, scene_factory: Optional[AbstractSceneFactory] = None) -> None:
        self.scene_factory = scene_factory
        self._scene: Optional[BaseScene] = None
        self._next_scene: Optional[BaseScene] = None

    @property
    def scene(self) -> Optional[BaseScene]:
        """The scene currently running."""
        return self._scene

    @property
    def next_scene(self) -> Optional[BaseScene]:
        """The scene that takes over at the next update."""
        return self._next_scene

    def change_scene(self, scene_name: str) -> None:
        """Request a switch to the scene named ``scene_name`` at the next update."""
        if self.scene_factory is None:
            raise RuntimeError("no scene factory has been set")
        if self._next_scene is not None:
            raise RuntimeError("a scene change is already pending")
        self._next_scene = self.scene_factory.create_scene(scene_name)

    def update(self) -> None:
        """Switch to a pending scene, if any, then update the current scene."""
        if self._next_scene is not None:
            if self._scene is not None:
                self._scene.finalize()
            self._scene = self._next_scene
            self._next_scene.finalize()
            self._next_scene = None
            self._scene.initialize()

        if self._scene is None:
            raise RuntimeError("there is no scene to update")
        self._scene.update()

    def draw(self) -> None:
        """Draw the current scene."""
        if self._scene is None:
            raise RuntimeError("there is no scene to draw")
        self._scene.draw()

    def close(self) -> None:
        """Finalize and drop the current scene."""
        if self._scene is not None:
            self._scene.finalize()
            self._scene = None

    def __enter__(self) -> SceneManager:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
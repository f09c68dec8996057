"""Scenes, scene factories and a manager that switches between them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Mapping, Optional


class BaseScene(ABC):
    """One game scene with its lifecycle hooks."""

    @abstractmethod
    def initialize(self) -> None:
        """Prepare the scene when it becomes current."""

    @abstractmethod
    def finalize(self) -> None:
        """Release the scene when it is left."""

    @abstractmethod
    def update(self) -> None:
        """Advance the scene by one frame."""

    @abstractmethod
    def draw(self) -> None:
        """Draw the scene."""


class AbstractSceneFactory(ABC):
    """Creates scenes by name."""

    @abstractmethod
    def create_scene(self, scene_name: str) -> Optional[BaseScene]:
        """Return a new scene, or None when the name is unknown."""


class RegistrySceneFactory(AbstractSceneFactory):
    """Factory backed by a mapping of scene names to scene constructors."""

    def __init__(self, scenes: Mapping[str, Callable[[], BaseScene]]) -> None:
        self._scenes = dict(scenes)

    def create_scene(self, scene_name: str) -> Optional[BaseScene]:
        constructor = self._scenes.get(scene_name)
        return constructor() if constructor is not None else None


class SceneManager:
    """Runs the current scene and switches to a requested one at the next update."""

    def __init__(self, scene_factory: Optional[AbstractSceneFactory] = None) -> None:
        self.scene_factory = scene_factory
        self._current: Optional[BaseScene] = None
        self._next: Optional[BaseScene] = None

    @property
    def current_scene(self) -> Optional[BaseScene]:
        return self._current

    @property
    def pending_scene(self) -> Optional[BaseScene]:
        return self._next

    def change_scene(self, scene_name: str) -> None:
        """Schedule the named scene to replace the current one."""
        if self.scene_factory is None:
            raise RuntimeError("no scene factory has been set")
        if self._next is not None:
            raise RuntimeError("a scene change is already pending")
        scene = self.scene_factory.create_scene(scene_name)
        if scene is None:
            raise KeyError(f"unknown scene {scene_name!r}")
        self._next = scene

    def update(self) -> None:
        """Carry out a pending switch, then update the current scene."""
        if self._next is not None:
            if self._current is not None:
                self._current.finalize()
            self._current, self._next = self._next, None
            self._current.initialize()
        if self._current is None:
            raise RuntimeError("no current scene")
        self._current.update()

    def draw(self) -> None:
        if self._current is None:
            raise RuntimeError("no current scene")
        self._current.draw()

    def shutdown(self) -> None:
        """Finalize and drop the current scene."""
        if self._current is not None:
            self._current.finalize()
            self._current = None
"""Scenes hold game objects; the scene manager drives all scenes."""

from __future__ import annotations

from typing import ClassVar, Optional

from .game_object import GameObject


class Scene:
    """An ordered collection of game objects updated and drawn together."""

    def __init__(self) -> None:
        self._objects: list[GameObject] = []

    def add(self, game_object: GameObject) -> None:
        if game_object is None:
            raise ValueError("cannot add None to a scene")
        self._objects.append(game_object)

    def remove(self, game_object: GameObject) -> None:
        """Mark an object for removal at the next late update."""
        game_object.mark_for_destruction()

    def remove_all(self) -> None:
        for game_object in self._objects:
            game_object.mark_for_destruction()

    def update(self) -> None:
        for game_object in list(self._objects):
            game_object.update()

    def late_update(self) -> None:
        for game_object in self._objects:
            game_object.late_update()
        self._objects = [o for o in self._objects if not o.is_marked_for_destruction]

    def render(self) -> None:
        for game_object in self._objects:
            game_object.render()

    def render_ui(self) -> None:
        for game_object in self._objects:
            game_object.render_ui()

    @property
    def objects(self) -> tuple[GameObject, ...]:
        return tuple(self._objects)


class SceneManager:
    """Owns every scene and forwards the frame steps to them."""

    _instance: ClassVar[Optional["SceneManager"]] = None

    def __init__(self) -> None:
        self._scenes: list[Scene] = []

    @classmethod
    def instance(cls) -> "SceneManager":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def create_scene(self) -> Scene:
        scene = Scene()
        self._scenes.append(scene)
        return scene

    def update(self) -> None:
        for scene in self._scenes:
            scene.update()
            scene.late_update()

    def render(self) -> None:
        for scene in self._scenes:
            scene.render()

    def render_ui(self) -> None:
        for scene in self._scenes:
            scene.render_ui()
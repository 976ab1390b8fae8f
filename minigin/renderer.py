"""Draws the scenes and textures onto the window surface."""

from __future__ import annotations

from typing import ClassVar, Optional, Sequence

import pygame

from .resources import Texture2D
from .scene import SceneManager


class Renderer:
    """Owns the surface everything is drawn onto."""

    _instance: ClassVar[Optional["Renderer"]] = None

    def __init__(self) -> None:
        self._window: Optional[pygame.Surface] = None
        self._background_color: tuple[int, int, int, int] = (0, 0, 0, 0)
        self.scene_manager: Optional[SceneManager] = None

    @classmethod
    def instance(cls) -> "Renderer":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def init(self, window: pygame.Surface) -> None:
        """Start drawing onto the given surface."""
        if window is None:
            raise RuntimeError("SDL_CreateRenderer Error: no window to render to")
        self._window = window

    @property
    def window(self) -> Optional[pygame.Surface]:
        """The surface being drawn onto, or None when not initialised."""
        return self._window

    def _require_window(self) -> pygame.Surface:
        if self._window is None:
            raise RuntimeError("the renderer has not been initialised")
        return self._window

    def _scenes(self) -> SceneManager:
        if self.scene_manager is None:
            return SceneManager.instance()
        return self.scene_manager

    def render(self) -> None:
        """Draw one frame: user interface pass, clear, scenes, present."""
        window = self._require_window()
        scenes = self._scenes()
        scenes.render_ui()
        window.fill(self._background_color)
        scenes.render()
        if pygame.display.get_init() and window is pygame.display.get_surface():
            pygame.display.flip()

    def destroy(self) -> None:
        """Release the window surface."""
        self._window = None

    def render_texture(
        self,
        texture: Texture2D,
        x: float,
        y: float,
        width: Optional[float] = None,
        height: Optional[float] = None,
    ) -> None:
        """Draw a texture at (x, y), stretched to width and height when given."""
        window = self._require_window()
        if (width is None) != (height is None):
            raise ValueError("width and height must be given together")
        surface = texture.surface
        if width is not None and height is not None:
            surface = pygame.transform.scale(surface, (int(width), int(height)))
        window.blit(surface, (int(x), int(y)))

    @property
    def background_color(self) -> tuple[int, int, int, int]:
        return self._background_color

    @background_color.setter
    def background_color(self, color: Sequence[int]) -> None:
        channels = tuple(int(c) for c in color)
        if len(channels) == 3:
            channels += (255,)
        if len(channels) != 4 or not all(0 <= c <= 255 for c in channels):
            raise ValueError(f"invalid color: {color!r}")
        self._background_color = channels  # type: ignore[assignment]
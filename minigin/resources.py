"""Loading and caching of textures and fonts from the data directory."""

from __future__ import annotations

import weakref
from pathlib import Path
from typing import ClassVar, Optional, Sequence, Union

import pygame


class Texture2D:
    """An image ready to be drawn."""

    def __init__(self, surface: pygame.Surface) -> None:
        if surface is None:
            raise ValueError("a texture needs a surface")
        self.surface = surface

    @classmethod
    def from_file(cls, full_path: Union[str, Path]) -> "Texture2D":
        """Load an image file; raises RuntimeError when it cannot be read."""
        try:
            surface = pygame.image.load(str(full_path))
        except (pygame.error, OSError) as error:
            raise RuntimeError(f"Failed to load PNG: {error}") from error
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            surface = surface.convert_alpha()
        return cls(surface)

    @property
    def size(self) -> tuple[float, float]:
        width, height = self.surface.get_size()
        return float(width), float(height)


class Font:
    """A TrueType font loaded at a fixed size."""

    def __init__(self, full_path: Union[str, Path], size: float) -> None:
        try:
            self._font = pygame.font.Font(str(full_path), int(size))
        except (pygame.error, OSError) as error:
            raise RuntimeError(f"Failed to load font: {error}") from error
        self.size = size

    def render(self, text: str, color: Sequence[int]) -> Texture2D:
        """Render antialiased text into a new texture."""
        try:
            surface = self._font.render(text, True, tuple(color))
        except pygame.error as error:
            raise RuntimeError(f"Render text failed: {error}") from error
        return Texture2D(surface)


def _drop_unreferenced(cache: dict) -> None:
    survivors = weakref.WeakValueDictionary(cache)
    cache.clear()
    cache.update(survivors.items())


class ResourceManager:
    """Loads resources relative to a data directory and shares loaded ones."""

    _instance: ClassVar[Optional["ResourceManager"]] = None

    def __init__(self) -> None:
        self.data_path = Path()
        self._textures: dict[str, Texture2D] = {}
        self._fonts: dict[tuple[str, int], Font] = {}

    @classmethod
    def instance(cls) -> "ResourceManager":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def init(self, data_path: Union[str, Path]) -> None:
        """Set the data directory and start font support."""
        self.data_path = Path(data_path)
        try:
            pygame.font.init()
        except pygame.error as error:
            raise RuntimeError(f"Failed to load support for fonts: {error}") from error

    def load_texture(self, file: str) -> Texture2D:
        """Return the texture for a file, loading it on first request."""
        full_path = self.data_path / file
        key = full_path.name
        if key not in self._textures:
            self._textures[key] = Texture2D.from_file(full_path)
        return self._textures[key]

    def load_font(self, file: str, size: int) -> Font:
        """Return the font for a file and size, loading it on first request."""
        if not 0 <= size <= 255:
            raise ValueError(f"font size must be between 0 and 255, got {size}")
        full_path = self.data_path / file
        key = (full_path.name, int(size))
        if key not in self._fonts:
            self._fonts[key] = Font(full_path, size)
        return self._fonts[key]

    def unload_unused_resources(self) -> None:
        """Forget textures and fonts that nothing outside the cache still uses."""
        _drop_unreferenced(self._textures)
        _drop_unreferenced(self._fonts)
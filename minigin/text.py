"""Components that draw text, textures and a frame-rate counter."""

from __future__ import annotations

from typing import Any, Optional, Sequence

from .components import BaseComponent
from .gametime import GameTime
from .renderer import Renderer
from .resources import Font, ResourceManager, Texture2D


class TextComponent(BaseComponent):
    """Renders a line of text at the owner's world position."""

    def __init__(self, owner: Any) -> None:
        super().__init__(owner)
        self.resources = ResourceManager.instance()
        self.renderer = Renderer.instance()
        self._color: tuple[int, int, int, int] = (0, 0, 0, 0)
        self._text = ""
        self._font: Optional[Font] = None
        self._needs_update = False
        self._text_texture: Optional[Texture2D] = None
        self._offset: tuple[float, float] = (0.0, 0.0)

    def update(self) -> None:
        """Rebuild the text texture after the text, font or color changed."""
        if not self._needs_update:
            return
        if not self._text or self._font is None:
            return
        self._text_texture = self._font.render(self._text, self._color)
        self._needs_update = False

    def render(self) -> None:
        if self._text_texture is None:
            return
        transform = self.owner.transform
        if transform is not None:
            x, y, _ = transform.world_position
            self.renderer.render_texture(self._text_texture, float(x), float(y))

    def set_text(self, text: str) -> "TextComponent":
        self._text = text
        if self._font is not None:
            self._needs_update = True
        return self

    @property
    def text(self) -> str:
        return self._text

    def set_font(self, font_path: str, font_size: int) -> "TextComponent":
        self._font = self.resources.load_font(font_path, font_size)
        self._needs_update = True
        return self

    def set_color(self, r: int, g: int, b: int, a: int) -> "TextComponent":
        channels = (int(r), int(g), int(b), int(a))
        if not all(0 <= c <= 255 for c in channels):
            raise ValueError(f"color channels must be between 0 and 255, got {channels}")
        self._color = channels
        self._needs_update = True
        return self

    @property
    def color(self) -> tuple[int, int, int, int]:
        return self._color

    def set_offset(self, offset: Sequence[float]) -> "TextComponent":
        x, y = offset
        self._offset = (float(x), float(y))
        return self

    @property
    def offset(self) -> tuple[float, float]:
        return self._offset


class TextureComponent(BaseComponent):
    """Draws a texture at the owner's world position."""

    def __init__(self, owner: Any) -> None:
        super().__init__(owner)
        self.resources = ResourceManager.instance()
        self.renderer = Renderer.instance()
        self._texture: Optional[Texture2D] = None

    def update(self) -> None:
        pass

    def set_texture(self, filename: str) -> None:
        self._texture = self.resources.load_texture(filename)

    @property
    def texture(self) -> Optional[Texture2D]:
        return self._texture

    def render(self) -> None:
        if self._texture is None:
            return
        transform = self.owner.transform
        if transform is not None:
            x, y, _ = transform.world_position
            self.renderer.render_texture(self._texture, float(x), float(y))
        else:
            self.renderer.render_texture(self._texture, 0.0, 0.0)


class FPSComponent(BaseComponent):
    """Writes the average frame rate into the owner's text component once a second."""

    def __init__(self, owner: Any) -> None:
        super().__init__(owner)
        self.game_time = GameTime.instance()
        self._elapsed_time = 0.0
        self._frame_count = 0
        self._text_component: Optional[TextComponent] = None

    def update(self) -> None:
        if self._text_component is None:
            self._text_component = self.owner.get_component(TextComponent)

        self._frame_count += 1
        self._elapsed_time += self.game_time.delta_time

        if self._elapsed_time >= 1.0:
            fps = self._frame_count / self._elapsed_time
            if self._text_component is not None:
                self._text_component.set_text(f"{fps:.1f}FPS")
            self._frame_count = 0
            self._elapsed_time = 0.0

    def render(self) -> None:
        pass
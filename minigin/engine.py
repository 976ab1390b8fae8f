"""The engine: window creation and the main loop."""

from __future__ import annotations

import time
from pathlib import Path
from typing import Any, Callable, Optional, Union

import pygame

from .gametime import GameTime
from .input_manager import InputManager
from .renderer import Renderer
from .resources import ResourceManager
from .scene import SceneManager

WINDOW_TITLE = "Programming 4 assignment"
WINDOW_SIZE = (1024, 576)
MS_PER_FRAME = 16


def _log_version(message: str, version: tuple[int, int, int]) -> None:
    major, minor, patch = version
    print(f"{message}{major}.{minor}.{patch}")


def _print_sdl_version() -> None:
    _log_version("Compiled with SDL", pygame.get_sdl_version(linked=False))
    _log_version("Linked with SDL ", pygame.get_sdl_version(linked=True))
    ttf_version = getattr(pygame.font, "get_sdl_ttf_version", None)
    if ttf_version is not None:
        _log_version("Compiled with SDL_ttf ", ttf_version(linked=False))
        _log_version("Linked with SDL_ttf ", ttf_version(linked=True))


class Minigin:
    """Opens the window and runs frames until a quit is requested."""

    def __init__(self, data_path: Union[str, Path]) -> None:
        _print_sdl_version()
        try:
            pygame.display.init()
            pygame.joystick.init()
        except pygame.error as error:
            raise RuntimeError(f"SDL_Init Error: {error}") from error
        try:
            window = pygame.display.set_mode(WINDOW_SIZE)
        except pygame.error as error:
            raise RuntimeError(f"SDL_CreateWindow Error: {error}") from error
        pygame.display.set_caption(WINDOW_TITLE)

        self._window = window
        self._quit = False
        self._closed = False
        self.game_time = GameTime.instance()
        self.input_manager = InputManager.instance()
        self.scene_manager = SceneManager.instance()
        self.renderer = Renderer.instance()
        self.renderer.init(window)
        ResourceManager.instance().init(data_path)

    @property
    def window(self) -> pygame.Surface:
        return self._window

    @property
    def quit_requested(self) -> bool:
        return self._quit

    def run(self, load: Callable[[], Any]) -> None:
        """Build the game with load, then run frames until asked to quit."""
        load()
        while not self._quit:
            self.run_one_frame()

    def run_one_frame(self) -> None:
        """Process input, update the scenes and draw, capped near 60 frames a second."""
        self.game_time.update()
        frame_start = time.perf_counter()

        self._quit = not self.input_manager.process_input()
        self.scene_manager.update()
        self.renderer.render()

        sleep_time = frame_start + MS_PER_FRAME / 1000.0 - time.perf_counter()
        if sleep_time > 0:
            time.sleep(sleep_time)

    def close(self) -> None:
        """Release the renderer and shut down the display."""
        if self._closed:
            return
        self._closed = True
        self.renderer.destroy()
        pygame.display.quit()
        pygame.quit()

    def __enter__(self) -> "Minigin":
        return self

    def __exit__(self, *args: Any) -> Optional[bool]:
        self.close()
        return None
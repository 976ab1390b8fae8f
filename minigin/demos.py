"""Demo scenes built on the engine, and the command that starts them."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Callable, Optional, Sequence, Union

import pygame

from .cache_benchmark import CacheBenchmarkUI
from .commands import Direction, MoveHorizontal, MoveVertical
from .controller import ControllerButton
from .engine import Minigin
from .game_object import GameObject
from .input_manager import InputManager, InputState
from .movement import MovementComponent, RotationComponent
from .resources import ResourceManager
from .scene import Scene, SceneManager
from .text import FPSComponent, TextComponent, TextureComponent

FONT_FILE = "Lingua.otf"
WHITE = (255, 255, 255, 255)


def find_data_path(base: Union[str, Path, None] = None) -> Path:
    """Return the Data directory next to base, or the one a level above it."""
    root = Path.cwd() if base is None else Path(base)
    local = root / "Data"
    if local.exists():
        return local
    return root.parent / "Data"


def _textured(filename: str, position: Optional[Sequence[float]] = None) -> GameObject:
    game_object = GameObject()
    if position is not None:
        game_object.transform.set_local_position(position)
    game_object.add_component(TextureComponent).set_texture(filename)
    return game_object


def _add_common_objects(scene: Scene) -> None:
    """Background, logo, title and frame-rate counter shared by every demo."""
    scene.add(_textured("background.png"))
    scene.add(_textured("logo.png", (358, 180, 1)))

    ResourceManager.instance().load_font(FONT_FILE, 36)

    title = GameObject()
    title.add_component(TextComponent).set_text("Programming 4 Assignment").set_font(
        FONT_FILE, 36
    ).set_color(*WHITE)
    title.transform.set_local_position((292, 20, 1))
    scene.add(title)

    fps = GameObject()
    fps.add_component(TextComponent).set_text("FPS").set_font(FONT_FILE, 15).set_color(*WHITE)
    fps.add_component(FPSComponent)
    fps.transform.set_local_position((50, 20, 1))
    scene.add(fps)


def load_rotation_demo() -> Scene:
    """Two tanks orbiting a pivot, the second one parented to the first."""
    scene = SceneManager.instance().create_scene()
    _add_common_objects(scene)

    pivot = GameObject()
    pivot.transform.set_local_position((300, 300, 1))
    pivot.add_component(RotationComponent)
    pivot.get_component(RotationComponent).rotation_speed = -180.0

    tank_1 = _textured("Red_Tank.png", (60, 10, 1))
    tank_1.add_component(RotationComponent).rotation_speed = -180.0

    tank_2 = _textured("Blue_Tank.png", (60, 0, 1))

    tank_1.set_parent(pivot, False)
    tank_2.set_parent(tank_1, False)

    scene.add(pivot)
    scene.add(tank_1)
    scene.add(tank_2)
    return scene


def load_commands_demo() -> Scene:
    """Two tanks, one moved with WASD and one with the first gamepad's d-pad."""
    scene = SceneManager.instance().create_scene()
    _add_common_objects(scene)
    input_manager = InputManager.instance()

    tank_1 = _textured("Red_Tank.png", (60, 100, 1))
    tank_1.add_component(MovementComponent)
    tank_1.get_component(MovementComponent).speed = 50.0

    key_bindings = (
        (pygame.K_w, MoveVertical(tank_1, Direction.NEGATIVE)),
        (pygame.K_s, MoveVertical(tank_1, Direction.POSITIVE)),
        (pygame.K_a, MoveHorizontal(tank_1, Direction.NEGATIVE)),
        (pygame.K_d, MoveHorizontal(tank_1, Direction.POSITIVE)),
    )
    for key, command in key_bindings:
        input_manager.bind_key_command(key, InputState.PRESSED, command)

    tank_2 = _textured("Blue_Tank.png", (60, 200, 1))
    tank_2.add_component(MovementComponent)
    tank_2.get_component(MovementComponent).speed = 100.0

    pad_bindings = (
        (ControllerButton.DPAD_LEFT, MoveHorizontal(tank_2, Direction.NEGATIVE)),
        (ControllerButton.DPAD_RIGHT, MoveHorizontal(tank_2, Direction.POSITIVE)),
        (ControllerButton.DPAD_UP, MoveVertical(tank_2, Direction.NEGATIVE)),
        (ControllerButton.DPAD_DOWN, MoveVertical(tank_2, Direction.POSITIVE)),
    )
    for button, command in pad_bindings:
        input_manager.bind_controller_command(0, button, InputState.PRESSED, command)

    scene.add(tank_1)
    scene.add(tank_2)
    return scene


def load_cache_demo() -> Scene:
    """The common objects plus the cache benchmark panel."""
    scene = SceneManager.instance().create_scene()
    _add_common_objects(scene)

    cache_ui = GameObject()
    cache_ui.add_component(CacheBenchmarkUI)
    scene.add(cache_ui)
    return scene


DEMOS: dict[str, Callable[[], Scene]] = {
    "rotation": load_rotation_demo,
    "commands": load_commands_demo,
    "tron": load_commands_demo,
    "cache": load_cache_demo,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the engine window and run the chosen demo until it is closed."""
    parser = argparse.ArgumentParser(prog="minigin", description="Run a demo scene.")
    parser.add_argument("demo", nargs="?", default="commands", choices=sorted(DEMOS))
    parser.add_argument("--data", type=Path, default=None, help="directory holding the assets")
    args = parser.parse_args(argv)

    data_path = args.data if args.data is not None else find_data_path()
    with Minigin(data_path) as engine:
        engine.run(DEMOS[args.demo])
    return 0
import pygame
import pytest

from minigin.components import BaseComponent
from minigin.game_object import GameObject
from minigin.renderer import Renderer
from minigin.resources import Texture2D
from minigin.scene import SceneManager

RED = (255, 0, 0, 255)
BLACK = (0, 0, 0, 255)


def _texture(color=RED, size=(2, 2)):
    surface = pygame.Surface(size)
    surface.fill(color)
    return Texture2D(surface)


@pytest.fixture
def renderer():
    r = Renderer()
    window = pygame.Surface((10, 10))
    window.fill(BLACK)
    r.init(window)
    return r


def test_init_without_window_raises():
    with pytest.raises(RuntimeError):
        Renderer().init(None)


def test_render_texture_before_init_raises():
    with pytest.raises(RuntimeError):
        Renderer().render_texture(_texture(), 0, 0)


def test_render_texture_draws_at_position(renderer):
    renderer.render_texture(_texture(), 3, 4)
    assert tuple(renderer.window.get_at((3, 4))) == RED
    assert tuple(renderer.window.get_at((4, 5))) == RED
    assert tuple(renderer.window.get_at((5, 4))) == BLACK
    assert tuple(renderer.window.get_at((2, 4))) == BLACK


def test_render_texture_scaled(renderer):
    renderer.render_texture(_texture(), 2, 2, 4, 4)
    assert tuple(renderer.window.get_at((5, 5))) == RED
    assert tuple(renderer.window.get_at((6, 6))) == BLACK


def test_render_texture_needs_both_dimensions(renderer):
    with pytest.raises(ValueError):
        renderer.render_texture(_texture(), 0, 0, width=4)


def test_destroy_releases_window(renderer):
    renderer.destroy()
    assert renderer.window is None
    with pytest.raises(RuntimeError):
        renderer.render()


def test_background_color_round_trip():
    r = Renderer()
    assert r.background_color == (0, 0, 0, 0)
    r.background_color = (10, 20, 30, 40)
    assert r.background_color == (10, 20, 30, 40)


def test_background_color_rejects_bad_values():
    r = Renderer()
    r.background_color = (1, 2, 3, 4)
    with pytest.raises(ValueError):
        r.background_color = (300, 0, 0, 0)
    assert r.background_color == (1, 2, 3, 4)


class _Recorder(BaseComponent):
    def __init__(self, owner, renderer, log):
        super().__init__(owner)
        self.renderer = renderer
        self.log = log

    def update(self):
        self.log.append("update")

    def render(self):
        self.log.append("render")
        self.renderer.render_texture(_texture(), 0, 0)

    def render_ui(self):
        self.log.append("ui")


def test_render_clears_then_draws_scenes(renderer):
    log = []
    manager = SceneManager()
    renderer.scene_manager = manager
    renderer.background_color = (10, 20, 30, 255)
    obj = GameObject()
    obj.add_component(_Recorder, renderer, log)
    manager.create_scene().add(obj)

    renderer.render()

    assert log == ["ui", "render"]
    assert tuple(renderer.window.get_at((9, 9))) == (10, 20, 30, 255)
    assert tuple(renderer.window.get_at((0, 0))) == RED
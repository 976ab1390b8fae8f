import os
import shutil
import weakref

import pygame
import pytest

from minigin.resources import Font, ResourceManager, Texture2D

FONT_NAME = "Lingua.ttf"


@pytest.fixture
def data_dir(tmp_path):
    surface = pygame.Surface((10, 20))
    surface.fill((255, 0, 0))
    pygame.image.save(surface, str(tmp_path / "logo.png"))
    pygame.image.save(pygame.Surface((4, 4)), str(tmp_path / "background.png"))
    default_font = os.path.join(os.path.dirname(pygame.__file__), pygame.font.get_default_font())
    shutil.copy(default_font, tmp_path / FONT_NAME)
    return tmp_path


@pytest.fixture
def manager(data_dir):
    resources = ResourceManager()
    resources.init(data_dir)
    return resources


def test_texture_size_matches_image(manager):
    texture = manager.load_texture("logo.png")
    assert texture.size == (10.0, 20.0)


def test_texture_is_cached(manager):
    first = manager.load_texture("logo.png")
    assert manager.load_texture("logo.png") is first
    assert manager.load_texture("background.png") is not first


def test_missing_texture_raises(manager):
    with pytest.raises(RuntimeError, match="Failed to load PNG"):
        manager.load_texture("missing.png")


def test_texture_requires_surface():
    with pytest.raises(ValueError):
        Texture2D(None)


def test_font_cached_per_size(manager):
    font = manager.load_font(FONT_NAME, 36)
    assert manager.load_font(FONT_NAME, 36) is font
    assert manager.load_font(FONT_NAME, 15) is not font


def test_font_size_out_of_range(manager):
    with pytest.raises(ValueError):
        manager.load_font(FONT_NAME, 300)


def test_missing_font_raises(manager):
    with pytest.raises(RuntimeError, match="Failed to load font"):
        manager.load_font("missing.otf", 12)


def test_font_renders_text(manager):
    font = manager.load_font(FONT_NAME, 36)
    wide = font.render("Programming 4 Assignment", (255, 255, 255, 255))
    narrow = font.render("FPS", (255, 255, 255, 255))
    assert wide.size[0] > narrow.size[0] > 0
    assert wide.size[1] > 0


def test_font_direct_construction_failure(data_dir):
    pygame.font.init()
    with pytest.raises(RuntimeError):
        Font(data_dir / "logo.png", 12)


def test_unload_drops_only_unused(manager):
    kept = manager.load_texture("logo.png")
    dropped = manager.load_texture("background.png")
    dropped_ref = weakref.ref(dropped)
    del dropped
    assert dropped_ref() is not None
    manager.unload_unused_resources()
    assert dropped_ref() is None
    assert manager.load_texture("logo.png") is kept


def test_unload_drops_unused_fonts(manager):
    font_ref = weakref.ref(manager.load_font(FONT_NAME, 20))
    assert font_ref() is not None
    manager.unload_unused_resources()
    assert font_ref() is None
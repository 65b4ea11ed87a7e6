import pygame
import pytest

from nightcastle.graphics import Graphics
from nightcastle.sprites import Sprite, SpriteSheet, TextureError, TextureStore

MAGENTA = (255, 0, 255)
GREEN = (0, 255, 0)


def test_sprite_size_from_rectangle():
    sprite = Sprite(1, 4, 6, 20, 30)
    assert sprite.width() == 20 - 4
    assert sprite.height() == 30 - 6


def test_sprite_draw_uses_its_region():
    tex = pygame.Surface((3, 1))
    tex.fill((0, 0, 0))
    tex.set_at((2, 0), GREEN)
    target = pygame.Surface((4, 4))
    target.fill((0, 0, 0))
    sprite = Sprite(7, 2, 0, 3, 1, tex)
    sprite.draw(Graphics(target), 1, 1)
    assert target.get_at((1, 1))[:3] == GREEN
    assert target.get_at((0, 1))[:3] == (0, 0, 0)


def test_sheet_add_and_get():
    sheet = SpriteSheet()
    added = sheet.add(5, 0, 0, 16, 16, None)
    assert sheet.get(5) == added
    assert 5 in sheet
    assert len(sheet) == 1


def test_sheet_missing_id_returns_none():
    sheet = SpriteSheet()
    assert sheet.get(42) is None
    assert 42 not in sheet


def test_sheet_add_replaces_same_id():
    sheet = SpriteSheet()
    sheet.add(3, 0, 0, 8, 8, None)
    sheet.add(3, 8, 0, 24, 8, None)
    assert len(sheet) == 1
    assert sheet.get(3).left == 8


def test_texture_store_loads_with_colorkey(tmp_path):
    image = pygame.Surface((2, 2))
    image.fill(MAGENTA)
    path = tmp_path / "tex.png"
    pygame.image.save(image, str(path))
    store = TextureStore()
    texture = store.add(1, path, MAGENTA)
    assert store.get(1) is texture
    assert texture.get_size() == (2, 2)
    assert texture.get_colorkey()[:3] == MAGENTA


def test_texture_store_missing_file_raises(tmp_path):
    store = TextureStore()
    with pytest.raises(TextureError):
        store.add(1, tmp_path / "absent.png", MAGENTA)
    assert store.get(1) is None
import pygame
import pytest

from nightcastle.graphics import CLEAR_COLOR, Graphics

RED = (255, 0, 0)
BLUE = (0, 0, 255)
BLACK = (0, 0, 0)


@pytest.fixture
def target():
    surface = pygame.Surface((8, 8))
    surface.fill(BLACK)
    return surface


@pytest.fixture
def texture():
    tex = pygame.Surface((2, 1))
    tex.set_at((0, 0), RED)
    tex.set_at((1, 0), BLUE)
    return tex


def test_begin_frame_clears_with_clear_color(target):
    g = Graphics(target)
    g.begin_frame()
    assert target.get_at((3, 3))[:3] == CLEAR_COLOR


def test_fill_paints_whole_surface(target):
    g = Graphics(target)
    g.fill((10, 20, 30))
    assert target.get_at((0, 0))[:3] == (10, 20, 30)
    assert target.get_at((7, 7))[:3] == (10, 20, 30)


def test_draw_copies_region(target, texture):
    g = Graphics(target)
    g.draw(2, 3, texture, 0, 0, 2, 1)
    assert target.get_at((2, 3))[:3] == RED
    assert target.get_at((3, 3))[:3] == BLUE
    assert target.get_at((4, 3))[:3] == BLACK


def test_draw_flip_mirrors_in_place(target, texture):
    g = Graphics(target)
    g.draw(2, 3, texture, 0, 0, 2, 1, 255, True)
    assert target.get_at((2, 3))[:3] == BLUE
    assert target.get_at((3, 3))[:3] == RED


def test_draw_subregion_only(target, texture):
    g = Graphics(target)
    g.draw(0, 0, texture, 1, 0, 2, 1)
    assert target.get_at((0, 0))[:3] == BLUE
    assert target.get_at((1, 0))[:3] == BLACK


def test_black_tint_darkens_draw(target, texture):
    target.fill((9, 9, 9))
    g = Graphics(target)
    g.set_color(0, 0, 0)
    g.draw(0, 0, texture, 0, 0, 2, 1)
    assert g.color == (0, 0, 0)
    assert target.get_at((0, 0))[:3] == BLACK


def test_zero_alpha_leaves_target_unchanged(target, texture):
    g = Graphics(target)
    g.draw(0, 0, texture, 0, 0, 2, 1, 0)
    assert target.get_at((0, 0))[:3] == BLACK
    assert target.get_at((1, 0))[:3] == BLACK


def test_missing_texture_draws_nothing(target):
    g = Graphics(target)
    g.draw(0, 0, None, 0, 0, 2, 2)
    assert target.get_at((0, 0))[:3] == BLACK


def test_region_outside_texture_draws_nothing(target, texture):
    g = Graphics(target)
    g.draw(0, 0, texture, 5, 5, 8, 8)
    assert target.get_at((0, 0))[:3] == BLACK
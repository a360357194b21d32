import shutil
from pathlib import Path

import pygame
import pytest

from elixirtiles.ground import get_tile_position
from elixirtiles.level import LevelManager
from elixirtiles.resources import REM
from elixirtiles.ui import render_coordinates, render_fps, render_tooltip, render_ui

CASH = (255, 255, 0)

TEXTURES = {
    "textures/tiles/brick.png": (120, 60, 30),
    "textures/tiles/elixir.png": (200, 0, 200),
    "textures/tiles/elixir-clump.png": (150, 0, 150),
    "textures/tiles/elixir-pump.png": (90, 90, 200),
    "textures/tiles/elixir-pump-fan.png": (10, 10, 10),
    "textures/tiles/elixir-storage.png": (40, 200, 40),
    "textures/ui/cash.png": CASH,
}


@pytest.fixture
def assets(tmp_path, monkeypatch):
    for name, color in TEXTURES.items():
        path = tmp_path / "assets" / name
        path.parent.mkdir(parents=True, exist_ok=True)
        surface = pygame.Surface((16, 16))
        surface.fill(color)
        pygame.image.save(surface, str(path))
    fonts = tmp_path / "assets" / "fonts"
    fonts.mkdir(parents=True)
    default_font = Path(pygame.__file__).parent / pygame.font.get_default_font()
    shutil.copy(default_font, fonts / "ui.ttf")
    monkeypatch.chdir(tmp_path)
    return Path(tmp_path)


@pytest.fixture
def manager(assets):
    level_manager = LevelManager()
    level_manager.init_level()
    return level_manager


def _surface():
    return pygame.Surface((1300, 850))


def _inside(index):
    x, y = get_tile_position(index)
    return (x + 5, y + 5)


def test_render_fps_is_right_aligned(assets):
    surface = _surface()
    area = render_fps(surface, 60)
    assert abs(area.right - (surface.get_width() - 0.5 * REM)) <= 1
    assert area.width > 0


def test_render_fps_wider_for_longer_number(assets):
    short = render_fps(_surface(), 1)
    long = render_fps(_surface(), 12345)
    assert long.width > short.width
    assert abs(long.right - short.right) <= 1


def test_render_coordinates_inside_level(assets):
    surface = _surface()
    area = render_coordinates(surface, _inside((2, 3)))
    assert abs(area.right - (surface.get_width() - 0.5 * REM)) <= 1
    assert abs(area.bottom - (surface.get_height() - REM)) <= 1


def test_render_coordinates_outside_level_draws_nothing(assets):
    surface = _surface()
    before = pygame.image.tobytes(surface, "RGB")
    assert render_coordinates(surface, (0, 0)) is None
    assert pygame.image.tobytes(surface, "RGB") == before


def test_tooltip_not_shown_for_brick(manager):
    surface = _surface()
    before = pygame.image.tobytes(surface, "RGB")
    assert render_tooltip(surface, manager, _inside((0, 0))) is None
    assert pygame.image.tobytes(surface, "RGB") == before


def test_tooltip_not_shown_outside_level(manager):
    assert render_tooltip(_surface(), manager, (0, 0)) is None


def test_tooltip_sits_above_mouse(manager):
    surface = _surface()
    mouse = _inside((1, 1))
    area = render_tooltip(surface, manager, mouse)
    assert abs(area.left - mouse[0]) <= 1
    assert abs(area.bottom - mouse[1]) <= 1
    assert area.width >= 3 * REM
    assert area.height >= 3 * REM + 0.5 * REM


def test_tooltip_background_is_grey(manager):
    surface = _surface()
    area = render_tooltip(surface, manager, _inside((5, 1)))
    r, g, b, _ = surface.get_at((area.left + 1, area.top + 1))
    assert r == g == b
    assert 0 < r < 255


def test_tooltip_wider_for_longer_text(manager):
    storage = render_tooltip(_surface(), manager, _inside((5, 1)))
    clump = render_tooltip(_surface(), manager, _inside((1, 0)))
    assert storage.height == clump.height
    assert storage.width > 3 * REM and clump.width > 3 * REM


def test_render_ui_draws_cash_icon(assets):
    surface = _surface()
    render_ui(surface)
    assert surface.get_at((REM, REM)) == (*CASH, 255)
    assert surface.get_at((REM + 31, REM + 31)) == (*CASH, 255)
"""Heads-up display: balance, FPS counter, coordinates and tile tooltips."""

from __future__ import annotations

import pygame

from elixirtiles.ground import get_tile_index
from elixirtiles.level import LEVEL_X, LEVEL_Y, LevelManager
from elixirtiles.resources import ASSETS_FOLDER, REM, ResourceHolder

UI_FONT = ASSETS_FOLDER + "fonts/ui.ttf"
CASH_TEXTURE = ASSETS_FOLDER + "textures/ui/cash.png"

WHITE = (255, 255, 255)
GOLD = (255, 215, 0)
TOOLTIP_BACKGROUND = (20, 20, 20, 200)


def _render_text(text: str, size: int, color, bold: bool = False) -> pygame.Surface:
    font = ResourceHolder.instance().font(UI_FONT, size)
    was_bold = font.get_bold()
    font.set_bold(bold)
    try:
        return font.render(text, True, color)
    finally:
        font.set_bold(was_bold)


def _blit(surface: pygame.Surface, image: pygame.Surface, left: float, top: float) -> pygame.Rect:
    return surface.blit(image, (round(left), round(top)))


def render_ui(surface: pygame.Surface) -> None:
    """Draw the cash icon and the balance."""
    texture = ResourceHolder.instance().texture(CASH_TEXTURE)
    width, height = texture.get_size()
    cash = pygame.transform.scale(texture, (width * 2, height * 2))
    _blit(surface, cash, 1 * REM, 1 * REM)
    _blit(surface, _render_text("Balance: 1000", 32, WHITE, bold=True), 4 * REM, 0.75 * REM)


def render_fps(surface: pygame.Surface, fps: int) -> pygame.Rect:
    """Draw the FPS counter in the top-right corner and return its area."""
    text = _render_text(f"FPS: {fps}", 26, WHITE)
    width, height = text.get_size()
    return _blit(surface, text, surface.get_width() - width - 0.5 * REM, 1 * REM - height)


def render_coordinates(surface: pygame.Surface, mouse_pos) -> pygame.Rect | None:
    """Draw the hovered tile's index in the bottom-right corner.

    Nothing is drawn when the mouse is outside the level.
    """
    x, y = get_tile_index(mouse_pos)
    if not (0 <= x < LEVEL_X and 0 <= y < LEVEL_Y):
        return None
    text = _render_text(f"X: {x} Y: {y}", 26, WHITE)
    width, height = text.get_size()
    return _blit(
        surface,
        text,
        surface.get_width() - width - 0.5 * REM,
        surface.get_height() - height - 1 * REM,
    )


def render_tooltip(
    surface: pygame.Surface, level_manager: LevelManager, mouse_pos
) -> pygame.Rect | None:
    """Draw a name and description box above the hovered tile.

    Bricks and positions outside the level get no tooltip. Returns the
    background area when a tooltip is drawn.
    """
    tile = level_manager.tile_at(get_tile_index(mouse_pos))
    if tile is None or tile.name == "Brick":
        return None

    title = _render_text(tile.name, 26, GOLD)
    description = _render_text(tile.description, 20, WHITE)
    title_width, title_height = title.get_size()
    desc_width, desc_height = description.get_size()

    margin = REM
    spacing = 0.5 * REM
    width = max(title_width, desc_width) + 3 * margin
    height = title_height + desc_height + spacing + 3 * margin

    mx, my = mouse_pos
    left, top = mx, my - height

    background = pygame.Surface((round(width), round(height)), pygame.SRCALPHA)
    background.fill(TOOLTIP_BACKGROUND)
    area = _blit(surface, background, left, top)
    _blit(surface, title, left + 1.5 * margin, top + 0.5 * margin)
    _blit(surface, description, left + 1.5 * margin, top + margin + title_height + spacing)
    return area
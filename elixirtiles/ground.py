"""Drawing the level and tracking which tile the mouse is over."""

from __future__ import annotations

import pygame

from elixirtiles.level import LevelManager
from elixirtiles.resources import ASSETS_FOLDER, ResourceHolder
from elixirtiles.tiles import GROUND_START_X, GROUND_START_Y, TILE_SIZE, TILE_ZOOM_HALF

CLICK_SOUND = ASSETS_FOLDER + "sfx/tile.mp3"
SELECTION_TEXTURE = ASSETS_FOLDER + "textures/ui/selection.png"

NO_TILE = (-1, -1)


def get_tile_position(index) -> tuple[float, float]:
    """Screen position of the top-left corner of the tile at ``(x, y)``."""
    x, y = index
    return (x * TILE_SIZE + GROUND_START_X, y * TILE_SIZE + GROUND_START_Y)


def get_tile_index(position) -> tuple[int, int]:
    """Grid index of the tile under a screen position, truncated toward zero."""
    px, py = position
    return (int((px - GROUND_START_X) / TILE_SIZE), int((py - GROUND_START_Y) / TILE_SIZE))


class GroundRenderer:
    """Draws the level grid and the selection overlay for the hovered tile."""

    def __init__(self, level_manager: LevelManager) -> None:
        self.level_manager = level_manager
        self.current_tile = NO_TILE
        self.selected_tile = NO_TILE
        self._click_sound: pygame.mixer.Sound | None = None

    def play_click_sound(self) -> None:
        """Play the tile hover sound, loading it on first use."""
        if self._click_sound is None:
            self._click_sound = ResourceHolder.instance().sound(CLICK_SOUND)
        self._click_sound.play()

    def render(self, surface: pygame.Surface, mouse_pos) -> None:
        """Draw every tile, updating the hovered tile from ``mouse_pos``."""
        mx, my = mouse_pos
        point = (int(mx), int(my))
        for y, row in enumerate(self.level_manager.level):
            for x, tile in enumerate(row):
                if tile.rect().collidepoint(point):
                    self.current_tile = (x, y)
                    tile.selected = True
                    if self.current_tile != self.selected_tile:
                        self.play_click_sound()
                        self.selected_tile = self.current_tile
                tile.render(surface)

        if self.selected_tile[0] != -1 and self.selected_tile[1] != -1:
            texture = ResourceHolder.instance().texture(SELECTION_TEXTURE)
            width, height = texture.get_size()
            overlay = pygame.transform.scale(
                texture, (round(width * TILE_ZOOM_HALF), round(height * TILE_ZOOM_HALF))
            )
            left, top = get_tile_position(self.selected_tile)
            surface.blit(overlay, (round(left), round(top)))
"""Tiles that make up the level grid and how they draw themselves."""

from __future__ import annotations

import math
import time

import pygame

from elixirtiles.resources import ASSETS_FOLDER, ResourceHolder

TILE_SIZE_UNSCALED = 16
TILE_ZOOM = 3.0
TILE_SIZE = TILE_SIZE_UNSCALED * TILE_ZOOM
TILE_SIZE_HALF = TILE_SIZE / 2
TILE_ZOOM_HALF = TILE_ZOOM / 2
GROUND_START_X = 500
GROUND_START_Y = 1 * TILE_SIZE

TILE_TEXTURE_FOLDER = ASSETS_FOLDER + "textures/tiles/"


class TileBase:
    """A single cell of the level with a texture and a screen position."""

    def __init__(self, index, tile_id, name, description, texture_key):
        x, y = int(index[0]), int(index[1])
        self.id = tile_id
        self.selected = False
        self.index = (x, y)
        self.position = (x * TILE_SIZE + GROUND_START_X, y * TILE_SIZE + GROUND_START_Y)
        self.name = name
        self.description = description
        self.texture = ResourceHolder.instance().texture(
            f"{TILE_TEXTURE_FOLDER}{texture_key}.png"
        )

    def _scaled_size(self) -> tuple[int, int]:
        width, height = self.texture.get_size()
        return round(width * TILE_ZOOM_HALF), round(height * TILE_ZOOM_HALF)

    def render(self, surface: pygame.Surface) -> None:
        """Draw the tile's texture, then any extra decoration."""
        sprite = pygame.transform.scale(self.texture, self._scaled_size())
        surface.blit(sprite, (round(self.position[0]), round(self.position[1])))
        self.post_render(surface)

    def rect(self) -> pygame.Rect:
        """Screen area covered by the drawn texture."""
        return pygame.Rect(
            (round(self.position[0]), round(self.position[1])), self._scaled_size()
        )

    def post_render(self, surface: pygame.Surface) -> None:
        """Draw decoration on top of the texture; plain tiles have none."""


class Brick(TileBase):
    def __init__(self, index):
        super().__init__(index, 0, "Brick", "An empty tile.", "brick")


class Elixir(TileBase):
    def __init__(self, index):
        super().__init__(index, 1, "Elixir", "An elixir tile.", "elixir")


class ElixirClump(TileBase):
    def __init__(self, index):
        super().__init__(index, 4, "Elixir Clump", "An elixir clump.", "elixir-clump")


class ElixirPump(TileBase):
    """Pump tile with a fan spinning on top of it."""

    _clock_start = time.monotonic()

    def __init__(self, index):
        super().__init__(index, 2, "Elixir Pump", "An elixir pump.", "elixir-pump")
        self.fan_spinning_speed = 90.0
        self.fan_texture = ResourceHolder.instance().texture(
            f"{TILE_TEXTURE_FOLDER}elixir-pump-fan.png"
        )

    def fan_rotation(self, elapsed: float) -> float:
        """Fan angle in degrees after ``elapsed`` seconds."""
        return math.fmod(self.fan_spinning_speed * elapsed, 360.0)

    def post_render(self, surface: pygame.Surface) -> None:
        rotation = self.fan_rotation(time.monotonic() - self._clock_start)
        fan = pygame.transform.rotozoom(self.fan_texture, -rotation, TILE_ZOOM_HALF)
        center = (
            round(self.position[0] + TILE_SIZE_HALF),
            round(self.position[1] + TILE_SIZE_HALF),
        )
        surface.blit(fan, fan.get_rect(center=center))


class ElixirStorage(TileBase):
    """Storage tile with a bar along its bottom edge showing how full it is."""

    def __init__(self, index, capacity):
        super().__init__(index, 3, "Elixir Storage", "Stores elixir.", "elixir-storage")
        self.capacity = float(capacity)

    def capacity_rect(self) -> tuple[float, float, float, float]:
        """Left, top, width and height of the capacity bar."""
        x, y = self.index
        return (
            x * TILE_SIZE + GROUND_START_X,
            (y + 1) * TILE_SIZE - 4 + GROUND_START_Y,
            TILE_SIZE * self.capacity,
            4.0,
        )

    def post_render(self, surface: pygame.Surface) -> None:
        left, top, width, height = self.capacity_rect()
        bar = pygame.Surface((max(0, round(width)), round(height)), pygame.SRCALPHA)
        bar.fill((255, 255, 255, 200))
        surface.blit(bar, (round(left), round(top)))
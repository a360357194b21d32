"""The grid of tiles that forms the playing field."""

from __future__ import annotations

from elixirtiles.tiles import (
    Brick,
    Elixir,
    ElixirClump,
    ElixirPump,
    ElixirStorage,
    TileBase,
)

LEVEL_X = 16
LEVEL_Y = 16


def _in_bounds(index) -> bool:
    x, y = index
    return 0 <= x < LEVEL_X and 0 <= y < LEVEL_Y


class LevelManager:
    """Owns the level grid, indexed as ``level[y][x]``."""

    def __init__(self) -> None:
        self.level: list[list[TileBase]] = []

    def init_level(self) -> None:
        """Fill the grid with bricks and place the starting elixir setup."""
        self.level = [[Brick((x, y)) for x in range(LEVEL_X)] for y in range(LEVEL_Y)]

        if LEVEL_Y > 1 and LEVEL_X > 5:
            self.level[0][1] = ElixirClump((1, 0))
            self.level[0][2] = ElixirClump((2, 0))
            self.level[1][1] = ElixirPump((1, 1))
            self.level[1][2] = Elixir((2, 1))
            self.level[1][3] = Elixir((3, 1))
            self.level[1][4] = Elixir((4, 1))
            self.level[1][5] = ElixirStorage((5, 1), 0.5)

    def tile_at(self, index) -> TileBase | None:
        """Return the tile at ``(x, y)``, or None outside the level."""
        if not _in_bounds(index) or not self.level:
            return None
        x, y = index
        row = self.level[y]
        if not row:
            return None
        return row[x]

    def set_tile_at(self, index, tile: TileBase) -> None:
        """Replace the tile at ``(x, y)``; indices outside the level are ignored."""
        if not _in_bounds(index):
            return
        x, y = index
        self.level[y][x] = tile
# elixirtiles

A small tile-based game built on pygame. The ground is a 16×16 grid of tiles: bricks, two elixir clumps, an elixir pump with a spinning fan, three elixir tiles and an elixir storage tank with a bar that shows how full it is.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Playing

The game loads its images, fonts and sounds from an `assets/` folder in the current working directory. If that folder is missing, it prints `Assets folder not found!` and exits with status 1. Run this from the directory that holds `assets/`:

```
elixirtiles
```

The game expects these files:

- `assets/textures/tiles/`: `brick.png`, `elixir.png`, `elixir-clump.png`, `elixir-pump.png`, `elixir-pump-fan.png`, `elixir-storage.png`
- `assets/textures/ui/`: `selection.png`, `cash.png`, `slider-bg.png`, `slider-handle.png`, `check-on.png`, `check-off.png`
- `assets/fonts/ui.ttf`
- `assets/sfx/tile.mp3`

If a file cannot be loaded, `elixirtiles.resources.ResourceError` is raised.

### What you see and do

- The window opens at 1920×1080.
- Move the mouse over a tile to select it:
  - a selection frame is drawn on the tile;
  - a click sound plays whenever the hovered tile changes.
- Every tile except a plain brick shows a tooltip with its name and description.
- While the mouse is over the ground, the tile's coordinates appear in the bottom-right corner.
- The FPS counter is in the top-right corner.
- The balance is in the top-left corner.

### Keys and window behaviour

- **F11** switches between fullscreen and windowed mode.
- **Escape** draws the settings screen once, and then the game ends.
- When the window loses focus, the frame rate limit drops from 360 to 30 and the mixer channels are muted. Both are restored when focus returns.

## Using it as a library

The level grid and the screen geometry can be used without opening a window. Creating tiles loads their textures, so the `assets/` folder must be present.

```python
from elixirtiles.level import LevelManager
from elixirtiles.ground import get_tile_index, get_tile_position

level = LevelManager()
level.init_level()
tile = level.tile_at((1, 1))
print(tile.name, "-", tile.description)   # Elixir Pump - An elixir pump.

print(get_tile_position((2, 3)))          # (596.0, 192.0)
print(get_tile_index((600.0, 200.0)))     # (2, 3)
```

Grid access:

- `LevelManager.tile_at` returns `None` for an index outside the grid.
- `LevelManager.set_tile_at` ignores an index outside the grid.

Modules:

- `elixirtiles.tiles`: the tile classes `Brick`, `Elixir`, `ElixirClump`, `ElixirPump` and `ElixirStorage`.
- `elixirtiles.ground`: `GroundRenderer`, which draws the grid.
- `elixirtiles.ui`: the heads-up display.
- `elixirtiles.settings`: `SettingsScreen`, which edits a `SettingsState`. Its helper `slider_value` snaps a slider position to its step.
- `elixirtiles.app`: `FpsCounter` and `Game`.

## What it does not do

- The balance is always shown as 1000. There is no economy, no production of elixir and no way to place or remove tiles with the mouse.
- The values on the settings screen are not applied to the game or saved. Opening the settings screen ends the game.
- Nothing is saved between runs.
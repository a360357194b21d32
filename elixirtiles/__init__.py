"""A tile-based elixir game built on pygame: tiles, level grid, HUD and settings screen."""

__version__ = "0.1.0"
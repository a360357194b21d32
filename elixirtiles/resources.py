"""Cached loading of textures, fonts and sounds shared by the whole game."""

from __future__ import annotations

from collections.abc import Callable, Hashable
from functools import partial
from typing import Generic, TypeVar

import pygame

ASSETS_FOLDER = "assets/"
REM = 16
WINDOW_NAME = "Tiles"

T = TypeVar("T")


class ResourceError(Exception):
    """Raised when a resource file cannot be loaded."""


class ResourceManager(Generic[T]):
    """Loads each resource once and hands out the cached object afterwards."""

    def __init__(self, loader: Callable[[Hashable], T]) -> None:
        self._loader = loader
        self._resources: dict[Hashable, T] = {}

    def get(self, filename: Hashable) -> T:
        """Return the resource for ``filename``, loading it on first use."""
        try:
            return self._resources[filename]
        except KeyError:
            pass
        try:
            resource = self._loader(filename)
        except (OSError, pygame.error) as exc:
            raise ResourceError(f"Error loading file: {filename}") from exc
        self._resources[filename] = resource
        return resource


def _load_texture(filename: str) -> pygame.Surface:
    surface = pygame.image.load(filename)
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        surface = surface.convert_alpha()
    return surface


def _load_font(filename: str, size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(filename, size)


def _load_sound(filename: str) -> pygame.mixer.Sound:
    if not pygame.mixer.get_init():
        pygame.mixer.init()
    return pygame.mixer.Sound(filename)


class ResourceHolder:
    """Process-wide holder of the texture, font and sound caches."""

    _instance: ResourceHolder | None = None

    def __init__(self) -> None:
        self._textures: ResourceManager[pygame.Surface] = ResourceManager(_load_texture)
        self._fonts: dict[int, ResourceManager[pygame.font.Font]] = {}
        self._sounds: ResourceManager[pygame.mixer.Sound] = ResourceManager(_load_sound)

    @classmethod
    def instance(cls) -> ResourceHolder:
        """Return the shared holder, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def texture(self, filename: str) -> pygame.Surface:
        return self._textures.get(filename)

    def font(self, filename: str, size: int) -> pygame.font.Font:
        manager = self._fonts.get(size)
        if manager is None:
            manager = ResourceManager(partial(_load_font, size=size))
            self._fonts[size] = manager
        return manager.get(filename)

    def sound(self, filename: str) -> pygame.mixer.Sound:
        return self._sounds.get(filename)
"""Window, main loop and event handling for the game."""

from __future__ import annotations

import argparse
import os
import sys
import time

import pygame

from elixirtiles.ground import GroundRenderer
from elixirtiles.level import LevelManager
from elixirtiles.resources import WINDOW_NAME
from elixirtiles.settings import SettingsScreen, SettingsState
from elixirtiles.ui import render_coordinates, render_fps, render_tooltip, render_ui

FPS_MAX = 360
FPS_IDLE = 30
WINDOW_WIDTH = 1920
WINDOW_HEIGHT = 1080
VSYNC_ENABLED = False


class FpsCounter:
    """Counts frames and refreshes the FPS figure at most once a second."""

    def __init__(self) -> None:
        self.fps = 0
        self.last_update = -1.0
        self.frames = 0

    def tick(self, now: float) -> int:
        """Record a frame at time ``now`` (seconds) and return the current FPS."""
        elapsed = now - self.last_update
        if elapsed > 1.0:
            self.fps = int(self.frames) // int(elapsed)
            self.frames = 0
            self.last_update = now
        self.frames += 1
        return self.fps


class Game:
    """Holds the game state and runs the main loop."""

    def __init__(self) -> None:
        self.level_manager = LevelManager()
        self.ground = GroundRenderer(self.level_manager)
        self.settings = SettingsScreen(SettingsState())
        self.fps_counter = FpsCounter()
        self.surface: pygame.Surface | None = None
        self.is_fullscreen = False
        self.is_view_settings = False
        self.running = True
        self.framerate_limit = FPS_MAX
        self.global_volume = 100.0

    def _create_window(self) -> None:
        vsync = 1 if VSYNC_ENABLED else 0
        if self.is_fullscreen:
            self.surface = pygame.display.set_mode((0, 0), pygame.FULLSCREEN, vsync=vsync)
        else:
            self.surface = pygame.display.set_mode(
                (WINDOW_WIDTH, WINDOW_HEIGHT), pygame.RESIZABLE, vsync=vsync
            )
        pygame.display.set_caption(WINDOW_NAME)

    def _set_global_volume(self, volume: float) -> None:
        self.global_volume = volume
        if pygame.mixer.get_init():
            for channel in range(pygame.mixer.get_num_channels()):
                pygame.mixer.Channel(channel).set_volume(volume / 100.0)

    def _on_key(self, key: int) -> None:
        if key == pygame.K_F11:
            self.is_fullscreen = not self.is_fullscreen
            if self.surface is not None:
                self._create_window()
        if key == pygame.K_ESCAPE:
            self.is_view_settings = not self.is_view_settings

    def handle_event(self, event: pygame.event.Event) -> None:
        """Apply a single window or keyboard event."""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.WINDOWFOCUSLOST:
            self.framerate_limit = FPS_IDLE
            self._set_global_volume(0.0)
        elif event.type == pygame.WINDOWFOCUSGAINED:
            self.framerate_limit = FPS_MAX
            self._set_global_volume(100.0)
        elif event.type == pygame.KEYUP:
            self._on_key(event.key)

    def run(self) -> int:
        """Open the window and loop until it is closed; returns the exit code."""
        pygame.init()
        try:
            self._create_window()
            self.level_manager.init_level()
            clock = pygame.time.Clock()
            start = time.monotonic()

            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)
                if not self.running:
                    break

                fps = self.fps_counter.tick(time.monotonic() - start)
                surface = pygame.display.get_surface()
                surface.fill((0, 0, 0))
                mouse_pos = pygame.mouse.get_pos()

                if self.is_view_settings:
                    self.settings.render(surface, mouse_pos, pygame.mouse.get_pressed()[0])
                    pygame.display.flip()
                    return 0

                self.ground.render(surface, mouse_pos)
                render_ui(surface)
                render_fps(surface, fps)
                render_coordinates(surface, mouse_pos)
                render_tooltip(surface, self.level_manager, mouse_pos)
                pygame.display.flip()
                clock.tick(self.framerate_limit)
            return 0
        finally:
            pygame.quit()


def main(argv=None) -> int:
    """Start the game from the current directory, which must hold ``assets``."""
    parser = argparse.ArgumentParser(prog="elixirtiles", description="Tile game.")
    parser.parse_args(argv)
    if not os.path.exists("assets"):
        print("Assets folder not found!", file=sys.stderr)
        return 1
    return Game().run()


if __name__ == "__main__":
    sys.exit(main())
"""Settings screen with slider and checkbox options."""

from __future__ import annotations

import math
from dataclasses import dataclass

import pygame

from elixirtiles.resources import ASSETS_FOLDER, REM, ResourceHolder
from elixirtiles.ui import UI_FONT, WHITE

UI_TEXTURE_FOLDER = ASSETS_FOLDER + "textures/ui/"
SLIDER_BG_TEXTURE = UI_TEXTURE_FOLDER + "slider-bg.png"
SLIDER_HANDLE_TEXTURE = UI_TEXTURE_FOLDER + "slider-handle.png"

SLIDER_WIDTH = 250
SLIDER_HEIGHT = 30
VALUE_MARGIN = 15
BLOCK_SPACING = 4 * REM
HIT_PADDING = 10
HIT_GROWTH = 50

DESCRIPTION_COLOR = (255, 255, 255, 150)
SLIDER_FILL_COLOR = (255, 255, 255, 30)


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def slider_value(mouse_x, slider_x, minimum, maximum, step) -> float:
    """Value a slider takes when clicked at ``mouse_x``, snapped to ``step``."""
    value = minimum + ((mouse_x - slider_x) / SLIDER_WIDTH) * (maximum - minimum)
    value = _round_half_away(value / step) * step
    if value < minimum:
        value = minimum
    if value > maximum:
        value = maximum
    return value


@dataclass
class SettingsState:
    """Values edited on the settings screen."""

    idle_fps: float = 30
    max_fps: float = 60
    volume: float = 50
    fullscreen: bool = False
    vsync: bool = False
    show_fps: bool = False


def _text(text: str, size: int, color, bold: bool = False) -> pygame.Surface:
    font = ResourceHolder.instance().font(UI_FONT, size)
    was_bold = font.get_bold()
    font.set_bold(bold)
    try:
        return font.render(text, True, color)
    finally:
        font.set_bold(was_bold)


def _blit(surface: pygame.Surface, image: pygame.Surface, left: float, top: float) -> None:
    surface.blit(image, (round(left), round(top)))


def _hit(left: float, top: float, width: float, height: float, mouse_pos) -> bool:
    """Whether the mouse lies in the area grown around a control."""
    mx, my = mouse_pos
    left -= HIT_PADDING
    top -= HIT_PADDING
    width += HIT_GROWTH
    height += HIT_GROWTH
    return left <= mx < left + width and top <= my < top + height


class SettingsScreen:
    """Draws the settings options and applies mouse input to a state."""

    def __init__(self, state: SettingsState) -> None:
        self.state = state
        self._was_mouse_pressed = False

    @staticmethod
    def _base_x(surface: pygame.Surface) -> int:
        return surface.get_width() // 2 - 24 * REM

    def _draw_header(
        self, surface: pygame.Surface, base_x: float, y: float, title: str, description: str
    ) -> float:
        title_text = _text(title, 24, WHITE)
        _blit(surface, title_text, base_x, y + 1 * REM)
        description_text = _text(description, 18, DESCRIPTION_COLOR)
        _blit(surface, description_text, base_x, y + 3 * REM)
        return title_text.get_height() + description_text.get_height() + BLOCK_SPACING

    def option_range(
        self,
        surface,
        y,
        title,
        description,
        suffix,
        minimum,
        maximum,
        step,
        key,
        mouse_pos,
        mouse_down,
    ) -> float:
        """Draw a slider bound to ``state.<key>`` and return the block height."""
        base_x = self._base_x(surface)
        slider_x = base_x + 30 * REM
        slider_y = y + 2 * REM
        block_height = self._draw_header(surface, base_x, y, title, description)

        holder = ResourceHolder.instance()
        background = holder.texture(SLIDER_BG_TEXTURE)
        _blit(surface, background, slider_x, slider_y)

        value = getattr(self.state, key)
        ratio = (value - minimum) / (maximum - minimum)
        fill_width = max(0, round(SLIDER_WIDTH * ratio))
        fill = pygame.Surface((fill_width, SLIDER_HEIGHT), pygame.SRCALPHA)
        fill.fill(SLIDER_FILL_COLOR)
        _blit(surface, fill, slider_x, slider_y)

        handle = holder.texture(SLIDER_HANDLE_TEXTURE)
        _blit(surface, handle, slider_x + SLIDER_WIDTH * ratio - 5, slider_y - 6)

        width, height = background.get_size()
        if _hit(slider_x, slider_y, width, height, mouse_pos) and mouse_down:
            value = slider_value(mouse_pos[0], slider_x, minimum, maximum, step)
            setattr(self.state, key, value)

        value_text = _text(str(int(value)), 26, WHITE)
        _blit(surface, value_text, slider_x + SLIDER_WIDTH + VALUE_MARGIN + 5, slider_y)
        return block_height

    def option_check(
        self, surface, y, title, description, key, mouse_pos, mouse_down
    ) -> float:
        """Draw a checkbox bound to ``state.<key>`` and return the block height."""
        base_x = self._base_x(surface)
        check_x = base_x + 30 * REM
        check_y = y + 2 * REM
        block_height = self._draw_header(surface, base_x, y, title, description)

        value = getattr(self.state, key)
        texture = ResourceHolder.instance().texture(
            f"{UI_TEXTURE_FOLDER}check-{'on' if value else 'off'}.png"
        )
        width, height = texture.get_size()
        check = pygame.transform.scale(texture, (width * 2, height * 2))
        _blit(surface, check, check_x, check_y)

        if _hit(check_x, check_y, width * 2, height * 2, mouse_pos):
            if mouse_down and not self._was_mouse_pressed:
                setattr(self.state, key, not value)
                self._was_mouse_pressed = True
            elif not mouse_down:
                self._was_mouse_pressed = False
        return block_height

    def render(self, surface, mouse_pos, mouse_down) -> float:
        """Draw the whole settings screen; returns the y below the last option."""
        header = _text("SETTINGS", 42, WHITE, bold=True)
        _blit(surface, header, (surface.get_width() - header.get_width()) / 2, 4 * REM)

        y = 10 * REM
        ranges = (
            ("Max FPS", "Maximum frames per second.", "FPS", 1, 60, 5, "max_fps"),
            (
                "Idle FPS",
                "Frames per second when the window is not focused.",
                "FPS",
                1,
                60,
                5,
                "idle_fps",
            ),
            ("Volume", "Sound volume.", "%", 0, 100, 1, "volume"),
        )
        for title, description, suffix, minimum, maximum, step, key in ranges:
            y += self.option_range(
                surface, y, title, description, suffix, minimum, maximum, step, key,
                mouse_pos, mouse_down,
            )

        checks = (
            ("Fullscreen", "Enable fullscreen mode.", "fullscreen"),
            ("VSync", "Enable vertical sync.", "vsync"),
            ("Show FPS", "Display frames per second.", "show_fps"),
        )
        for title, description, key in checks:
            y += self.option_check(surface, y, title, description, key, mouse_pos, mouse_down)
        return y
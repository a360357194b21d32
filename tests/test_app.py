import pygame
import pytest

from elixirtiles.app import FPS_IDLE, FPS_MAX, FpsCounter, Game, main


def test_fps_counter_starts_at_zero():
    counter = FpsCounter()
    assert counter.tick(0.0) == 0


def test_fps_counter_first_update_counts_previous_frames():
    counter = FpsCounter()
    counter.tick(0.0)
    assert counter.tick(0.5) == 1
    assert counter.frames == 1
    assert counter.last_update == 0.5


def test_fps_counter_holds_value_within_a_second():
    counter = FpsCounter()
    counter.tick(0.5)
    values = [counter.tick(0.5 + i * 0.1) for i in range(1, 10)]
    assert set(values) == {values[0]}


def test_fps_counter_counts_frames_over_a_second():
    counter = FpsCounter()
    counter.tick(0.5)
    for i in range(1, 10):
        counter.tick(0.5 + i * 0.1)
    assert counter.tick(1.6) == 10


def test_fps_counter_divides_by_whole_seconds():
    counter = FpsCounter()
    counter.tick(0.5)
    for _ in range(5):
        counter.tick(1.0)
    assert counter.tick(3.0) == 6 // 2


def test_quit_event_stops_game():
    game = Game()
    game.handle_event(pygame.event.Event(pygame.QUIT))
    assert game.running is False


def test_escape_toggles_settings_view():
    game = Game()
    event = pygame.event.Event(pygame.KEYUP, key=pygame.K_ESCAPE)
    game.handle_event(event)
    assert game.is_view_settings is True
    game.handle_event(event)
    assert game.is_view_settings is False


def test_f11_toggles_fullscreen_flag():
    game = Game()
    game.handle_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_F11))
    assert game.is_fullscreen is True


def test_focus_events_change_limits_and_volume():
    game = Game()
    game.handle_event(pygame.event.Event(pygame.WINDOWFOCUSLOST))
    assert game.framerate_limit == FPS_IDLE
    assert game.global_volume == 0.0
    game.handle_event(pygame.event.Event(pygame.WINDOWFOCUSGAINED))
    assert game.framerate_limit == FPS_MAX
    assert game.global_volume == 100.0


def test_main_without_assets_fails(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main([]) == 1
    assert "Assets folder not found!" in capsys.readouterr().err


def test_main_rejects_unknown_option(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit):
        main(["--bogus"])
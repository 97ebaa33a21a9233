import json
import os
from unittest import mock

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from gamezer.game import Game, GameError, GameState, main
from gamezer.geometry import GRAVITY
from gamezer.instance import parse_instance
from gamezer.render import BLOCK_COLOR, UNIT_COLOR
from gamezer.transform import get_rectangle
from gamezer.units import Character, Unit, get_unit_rect

LEVEL = {"w": 100, "h": 50, "blocks": [{"x": 0, "y": 0, "w": 100, "h": 1}]}


def _make_game(level=LEVEL, unit=None, tick=0):
    game = Game(
        screen_width=192,
        screen_height=108,
        screen=pygame.Surface((192, 108)),
        fullscreen=False,
        clock=lambda: tick,
    )
    game.instance = parse_instance(json.dumps(level))
    game.character = Character(unit=unit or Unit(x=10, y=10, w=1, h=2, max_speed_x=15))
    return game


def _write_static(tmp_path, level):
    (tmp_path / "instances").mkdir()
    (tmp_path / "classes").mkdir()
    (tmp_path / "instances" / "1.json").write_text(json.dumps(level))
    (tmp_path / "classes" / "1.json").write_text(
        json.dumps({"id": 1, "name": "knight", "sprite_id": 1})
    )


def test_new_game_starts_in_main_menu():
    game = Game(fullscreen=False)
    assert game.game_state is GameState.MAIN_MENU
    assert game.instance is None and game.character is None


def test_quit_event_stops_running():
    game = _make_game()
    game.running = True
    game.handle_event(pygame.event.Event(pygame.QUIT))
    assert game.running is False


def test_key_down_and_up_update_input():
    game = _make_game()
    game.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_LEFT))
    assert game.input.left_pressed is True
    assert game.character.unit.direction == -1
    game.handle_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_LEFT))
    assert game.input.left_pressed is False


def test_up_key_starts_jump_at_clock_tick():
    game = _make_game(tick=50)
    game.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_UP))
    assert game.character.jumping is True
    assert game.character.jump_start_tick == 50


def test_step_applies_gravity_when_falling():
    game = _make_game()
    game.step(1000)
    unit = game.character.unit
    assert unit.speed_y == -GRAVITY
    assert unit.y < 10
    assert unit.last_update_tick == 1000
    assert game.camera.last_update_tick == 1000


def test_step_lands_on_floor_and_resets_jumps():
    game = _make_game(unit=Unit(x=10, y=1.0, w=1, h=2))
    game.character.jumped = True
    game.character.jumped_twice = True
    game.step(100)
    unit = game.character.unit
    assert unit.y == 1.0
    assert unit.speed_y == 0
    assert game.character.jumped is False
    assert game.character.jumped_twice is False


def test_step_draws_frame():
    game = _make_game(unit=Unit(x=10, y=1.0, w=1, h=2))
    game.step(100)
    floor = get_rectangle(game, 0, 0, 100, 1)
    unit_rect = get_unit_rect(game, game.character.unit)
    assert tuple(game.screen.get_at((floor.x + 3, floor.centery)))[:3] == BLOCK_COLOR
    assert tuple(game.screen.get_at(unit_rect.center))[:3] == UNIT_COLOR


def test_run_loads_level_and_stops_on_quit(tmp_path):
    _write_static(tmp_path, LEVEL)
    game = Game(static_dir=tmp_path, fullscreen=False)
    with mock.patch("pygame.event.get", return_value=[pygame.event.Event(pygame.QUIT)]):
        game.run()
    assert game.running is False
    assert game.instance.start_section.w == 100
    assert game.character.character_class.name == "knight"
    assert game.character.unit.sprite_id == 1
    assert game.character.unit.texture is None


def test_run_without_start_section_raises(tmp_path):
    _write_static(tmp_path, None)
    game = Game(static_dir=tmp_path, fullscreen=False)
    with pytest.raises(GameError):
        game.run()


def test_run_with_missing_level_raises(tmp_path):
    game = Game(static_dir=tmp_path, fullscreen=False)
    with pytest.raises(FileNotFoundError):
        game.run()


def test_main_runs_until_quit(tmp_path):
    _write_static(tmp_path, LEVEL)
    with mock.patch("pygame.event.get", return_value=[pygame.event.Event(pygame.QUIT)]):
        assert main(["--static-dir", str(tmp_path), "--windowed"]) == 0
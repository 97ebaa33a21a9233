"""Keyboard state and its effect on the character."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import pygame

if TYPE_CHECKING:
    from gamezer.game import Game


@dataclass
class InputState:
    """Which of the game's keys are currently held."""

    left_pressed: bool = False
    right_pressed: bool = False
    up_pressed: bool = False
    down_pressed: bool = False
    minus_pressed: bool = False
    equals_pressed: bool = False


def press_button(game: Game, key: int, tick: int) -> None:
    """React to a key going down at ``tick``."""
    state = game.input
    match key:
        case pygame.K_LEFT:
            state.left_pressed = True
            game.character.unit.direction = -1
        case pygame.K_RIGHT:
            state.right_pressed = True
            game.character.unit.direction = 1
        case pygame.K_UP:
            game.character.start_jump(tick)
        case pygame.K_DOWN:
            state.down_pressed = True
        case pygame.K_MINUS:
            state.minus_pressed = True
        case pygame.K_EQUALS:
            state.equals_pressed = True


def release_button(game: Game, key: int, tick: int) -> None:
    """React to a key going up at ``tick``."""
    state = game.input
    match key:
        case pygame.K_LEFT:
            state.left_pressed = False
        case pygame.K_RIGHT:
            state.right_pressed = False
        case pygame.K_UP:
            game.character.finish_jump(tick)
        case pygame.K_DOWN:
            state.down_pressed = False
        case pygame.K_MINUS:
            state.minus_pressed = False
        case pygame.K_EQUALS:
            state.equals_pressed = False
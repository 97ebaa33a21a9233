"""Moving units, the player character and their physics."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional, Union

import pygame

from gamezer.classes import DEFAULT_STATIC_DIR, NO_SPRITE, CharacterClass, load_character_class
from gamezer.collisions import Axis, check_collision
from gamezer.geometry import FRICTION, GRAVITY
from gamezer.transform import get_rectangle

if TYPE_CHECKING:
    from gamezer.game import Game

MAX_COLLISION_ITERATIONS = 2


@dataclass
class Unit:
    """Something with a box, a speed and possibly a sprite."""

    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0
    max_speed_x: float = 0.0
    speed_x: float = 0.0
    speed_y: float = 0.0
    direction: int = 1
    last_update_tick: int = 0
    sprite_id: int = NO_SPRITE
    texture: Any = None


@dataclass
class Character:
    """The player's unit with its jumping state and class."""

    unit: Unit = field(default_factory=Unit)
    jumped: bool = False
    jumped_twice: bool = False
    jumping: bool = False
    jump_start_tick: int = 0
    jump_finish_tick: int = 0
    jump_force_max_duration: int = 100
    jump_force: float = 80.0
    character_class: Optional[CharacterClass] = None

    def start_jump(self, tick: int) -> None:
        """Begin a jump, or a second jump in the air, unless one is still held."""
        if self.jumped_twice or self.jump_start_tick > self.jump_finish_tick:
            return
        if not self.jumped:
            if self.unit.speed_y != 0:
                self.jumped_twice = True
            self.jumped = True
        else:
            self.jumped_twice = True
        self.jumping = True
        self.jump_start_tick = tick
        self.unit.speed_y = 0

    def finish_jump(self, tick: int) -> None:
        """Stop pushing upwards."""
        self.jumping = False
        self.jump_finish_tick = tick


def calculate_character_speed(game: Game, tick: int) -> None:
    """Set the character's speed from the held keys, jump force and gravity."""
    character = game.character
    unit = character.unit
    if game.input.right_pressed:
        unit.speed_x = unit.max_speed_x
    elif game.input.left_pressed:
        unit.speed_x = -unit.max_speed_x
    else:
        unit.speed_x = 0

    pushing = False
    if character.jumping:
        milliseconds = tick - character.jump_start_tick
        if milliseconds < character.jump_force_max_duration:
            pushing = True
            unit.speed_y += character.jump_force * milliseconds / 1000

    if not pushing:
        unit.speed_y -= GRAVITY


def calculate_unit_position(game: Game, unit: Unit, tick: int) -> bool:
    """Move ``unit`` up to ``tick``, stopping at blocks; return whether it landed."""
    time_left = tick - unit.last_update_tick
    landed = False
    blocks = game.instance.current_section.blocks

    for _ in range(MAX_COLLISION_ITERATIONS):
        if time_left <= 0:
            break
        hit_time, hit_axis = math.inf, Axis.NONE
        for block in blocks:
            collision_time, axis = check_collision(unit, block, time_left)
            if 0 <= collision_time < 1 and collision_time < hit_time:
                hit_time, hit_axis = collision_time, axis

        if 0 <= hit_time < 1:
            unit.x += unit.speed_x * time_left * hit_time / 1000
            unit.y += unit.speed_y * time_left * hit_time / 1000
            if hit_axis is Axis.X:
                unit.speed_x = 0
                unit.speed_y *= FRICTION
            elif hit_axis is Axis.Y:
                if unit.speed_y < 0:
                    landed = True
                unit.speed_y = 0
            time_left = int(time_left - time_left * hit_time)
        else:
            unit.x += unit.speed_x * time_left / 1000
            unit.y += unit.speed_y * time_left / 1000
            time_left = 0

    unit.last_update_tick = tick
    return landed


def calculate_character_position(game: Game, tick: int) -> None:
    """Move the character; landing allows jumping again."""
    if calculate_unit_position(game, game.character.unit, tick):
        game.character.jumped = False
        game.character.jumped_twice = False


def get_unit_rect(game: Game, unit: Unit) -> pygame.Rect:
    """Return the unit's box on the screen."""
    return get_rectangle(game, unit.x, unit.y, unit.w, unit.h)


def get_unit_texture_rect(game: Game, unit: Unit) -> pygame.Rect:
    """Return a square as tall as the unit, centred on its box, for its sprite."""
    box = get_unit_rect(game, unit)
    return pygame.Rect(int(box.x + (box.w - box.h) * 0.5), box.y, box.h, box.h)


def initialize_character(
    class_id: int,
    static_dir: Union[str, "os.PathLike[str]"] = DEFAULT_STATIC_DIR,
    tick: int = 0,
) -> Character:
    """Create the player character of class ``class_id`` at its starting place."""
    character_class = load_character_class(class_id, Path(static_dir))
    unit = Unit(
        x=4,
        y=10,
        w=1,
        h=2,
        max_speed_x=15,
        direction=1,
        last_update_tick=tick,
        sprite_id=character_class.sprite_id,
    )
    return Character(unit=unit, character_class=character_class)
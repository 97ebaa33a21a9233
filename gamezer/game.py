"""The game object, its main loop and the command that starts it."""

from __future__ import annotations

import argparse
import os
from enum import Enum
from pathlib import Path
from typing import Callable, Optional, Sequence, Union

import pygame

from gamezer.camera import Camera
from gamezer.classes import DEFAULT_STATIC_DIR
from gamezer.input import InputState, press_button, release_button
from gamezer.instance import Instance, load_instance
from gamezer.render import SPACE_COLOR, load_unit_texture, render_section, render_unit
from gamezer.units import (
    Character,
    calculate_character_position,
    calculate_character_speed,
    initialize_character,
)

TITLE = "Gamezer"
DEFAULT_SCREEN_WIDTH = 1920
DEFAULT_SCREEN_HEIGHT = 1080
DEFAULT_RENDER_DELAY = 10
START_INSTANCE_ID = 1
START_CLASS_ID = 1


class GameError(RuntimeError):
    """Raised when the game cannot be set up."""


class GameState(Enum):
    """What the game is currently showing."""

    MAIN_MENU = "main_menu"
    INSTANCE = "instance"
    PAUSED = "paused"


class Game:
    """The screen, camera, input, level and character, and the loop tying them."""

    def __init__(
        self,
        screen_width: int = DEFAULT_SCREEN_WIDTH,
        screen_height: int = DEFAULT_SCREEN_HEIGHT,
        static_dir: Union[str, "os.PathLike[str]"] = DEFAULT_STATIC_DIR,
        screen: Optional[pygame.Surface] = None,
        fullscreen: bool = True,
        clock: Callable[[], int] = pygame.time.get_ticks,
    ) -> None:
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.static_dir = Path(static_dir)
        self.screen = screen
        self.fullscreen = fullscreen
        self.clock = clock
        self.camera = Camera()
        self.input = InputState()
        self.game_state = GameState.MAIN_MENU
        self.instance: Optional[Instance] = None
        self.character: Optional[Character] = None
        self.running = False

    def handle_event(self, event: pygame.event.Event) -> None:
        """Stop on quit; pass key presses and releases to the input handlers."""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            press_button(self, event.key, self.clock())
        elif event.type == pygame.KEYUP:
            release_button(self, event.key, self.clock())

    def step(self, tick: int) -> None:
        """Advance physics and camera to ``tick`` and draw the frame if there is a screen."""
        calculate_character_speed(self, tick)
        calculate_character_position(self, tick)
        self.camera.update(self, tick)
        if self.screen is not None:
            self._draw()

    def _draw(self) -> None:
        self.screen.fill(SPACE_COLOR)
        render_section(self, self.instance.start_section)
        render_unit(self, self.character.unit)

    def _load(self, tick: int) -> None:
        self.camera.last_update_tick = tick
        self.instance = load_instance(START_INSTANCE_ID, self.static_dir)
        if self.instance.start_section is None:
            raise GameError("Couldn't load start section")
        self.character = initialize_character(START_CLASS_ID, self.static_dir, tick)
        self.character.unit.texture = load_unit_texture(self.character.unit, self.static_dir)

    def run(self) -> None:
        """Open the window, load the first level and loop until the window is closed."""
        pygame.init()
        try:
            flags = pygame.FULLSCREEN if self.fullscreen else 0
            self.screen = pygame.display.set_mode((self.screen_width, self.screen_height), flags)
            pygame.display.set_caption(TITLE)
            self._load(self.clock())
            self.running = True
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)
                if not self.running:
                    break
                self.step(self.clock())
                pygame.display.flip()
                pygame.time.delay(DEFAULT_RENDER_DELAY)
        finally:
            pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the game."""
    parser = argparse.ArgumentParser(prog="gamezer", description="A side-scrolling platformer.")
    parser.add_argument(
        "--static-dir",
        default=str(DEFAULT_STATIC_DIR),
        help="directory holding instances/, classes/ and sprites/",
    )
    parser.add_argument("--windowed", action="store_true", help="do not go fullscreen")
    args = parser.parse_args(argv)

    game = Game(static_dir=args.static_dir, fullscreen=not args.windowed)
    game.run()
    return 0
"""The camera that follows the character around a section."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from gamezer.geometry import Coordinate

if TYPE_CHECKING:
    from gamezer.game import Game

CAPTURE_WINDOW_WIDTH_PER_ZF = 2
DEFAULT_ZOOM_FACTOR = 20
MIN_ZOOM_FACTOR = 1
MAX_ZOOM_FACTOR = 100
DEFAULT_ZOOM_SPEED = 3

_log = logging.getLogger(__name__)


@dataclass
class Camera:
    """What part of the section is shown, and how much of it."""

    position: Coordinate = field(default_factory=lambda: Coordinate(20.0, 15.0))
    zoom_factor: float = DEFAULT_ZOOM_FACTOR
    zoom_speed: float = DEFAULT_ZOOM_SPEED
    last_update_tick: int = 0

    @property
    def capture_width(self) -> float:
        """Width of the captured window in game units."""
        return self.zoom_factor * CAPTURE_WINDOW_WIDTH_PER_ZF

    def update(self, game: Game, tick: int) -> None:
        """Apply held zoom keys, follow the character and stay inside the section."""
        milliseconds = tick - self.last_update_tick

        if game.input.minus_pressed:
            self.zoom_factor += self.zoom_speed * milliseconds / 1000
            self.zoom_factor = min(MAX_ZOOM_FACTOR, self.zoom_factor)
            _log.debug("New zoom_factor = %f", self.zoom_factor)
        elif game.input.equals_pressed:
            self.zoom_factor -= self.zoom_speed * milliseconds / 1000
            self.zoom_factor = max(MIN_ZOOM_FACTOR, self.zoom_factor)
            _log.debug("New zoom_factor = %f", self.zoom_factor)

        unit = game.character.unit
        section = game.instance.current_section
        width = self.capture_width
        height = width * game.screen_height / game.screen_width

        x = max(unit.x, width * 0.5)
        x = min(x, section.w - width * 0.5)
        y = max(unit.y, height * 0.5)
        y = min(y, section.h - height * 0.5)
        self.position = Coordinate(x, y)

        self.last_update_tick = tick

    def zoom_in(self) -> None:
        """Show less of the section, down to the minimum zoom factor."""
        self.zoom_factor = max(MIN_ZOOM_FACTOR, self.zoom_factor - 1)
        _log.debug("New zoom_factor = %f", self.zoom_factor)

    def zoom_out(self) -> None:
        """Show more of the section, up to the maximum zoom factor."""
        self.zoom_factor = min(MAX_ZOOM_FACTOR, self.zoom_factor + 1)
        _log.debug("New zoom_factor = %f", self.zoom_factor)
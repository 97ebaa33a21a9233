"""Conversion between game coordinates and screen pixels."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

from gamezer.camera import CAPTURE_WINDOW_WIDTH_PER_ZF
from gamezer.geometry import Coordinate, Dimensions, ScreenCoordinate, ScreenDimensions

if TYPE_CHECKING:
    from gamezer.game import Game


def _capture_height_per_zf(game: Game) -> float:
    return CAPTURE_WINDOW_WIDTH_PER_ZF * game.screen_height / game.screen_width


def get_screen_coordinate(game: Game, coordinate: Coordinate) -> ScreenCoordinate:
    """Map a game point to a pixel; the game's y axis points up, the screen's down."""
    camera = game.camera
    height_per_zf = _capture_height_per_zf(game)
    x = game.screen_width * (
        0.5
        + (coordinate.x - camera.position.x)
        / (camera.zoom_factor * CAPTURE_WINDOW_WIDTH_PER_ZF)
    )
    y = game.screen_height * (
        0.5 + (camera.position.y - coordinate.y) / (camera.zoom_factor * height_per_zf)
    )
    return ScreenCoordinate(int(x), int(y))


def get_screen_dimensions(game: Game, dimensions: Dimensions) -> ScreenDimensions:
    """Map a game width and height to pixels."""
    camera = game.camera
    height_per_zf = _capture_height_per_zf(game)
    w = game.screen_width * dimensions.w / (camera.zoom_factor * CAPTURE_WINDOW_WIDTH_PER_ZF)
    h = game.screen_height * dimensions.h / (camera.zoom_factor * height_per_zf)
    return ScreenDimensions(int(w), int(h))


def get_rectangle(game: Game, x: float, y: float, w: float, h: float) -> pygame.Rect:
    """Return the screen rectangle of a game rectangle whose corner is its bottom left."""
    corner = get_screen_coordinate(game, Coordinate(x, y))
    size = get_screen_dimensions(game, Dimensions(w, h))
    return pygame.Rect(corner.x, corner.y - size.h, size.w, size.h)
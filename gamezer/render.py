"""Drawing sections, blocks and units onto the game's screen surface."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

import pygame

from gamezer.classes import DEFAULT_STATIC_DIR, NO_SPRITE
from gamezer.geometry import Block
from gamezer.instance import Section
from gamezer.transform import get_rectangle
from gamezer.units import Unit, get_unit_rect, get_unit_texture_rect

if TYPE_CHECKING:
    from gamezer.game import Game

SPACE_COLOR = (0, 0, 0)
SECTION_COLOR = (0xFF, 0xFF, 0xFF)
BLOCK_COLOR = (0, 0, 0xFF)
UNIT_COLOR = (0, 0xFF, 0)

_log = logging.getLogger(__name__)


def render_block(game: Game, block: Block) -> None:
    """Fill the block's screen rectangle with the block colour."""
    rect = get_rectangle(game, block.x, block.y, block.w, block.h)
    game.screen.fill(BLOCK_COLOR, rect)


def render_section(game: Game, section: Section) -> None:
    """Draw the section's background and then each of its blocks."""
    background = get_rectangle(game, 0, 0, section.w, section.h)
    game.screen.fill(SECTION_COLOR, background)
    for block in section.blocks:
        render_block(game, block)


def render_unit(game: Game, unit: Unit) -> None:
    """Draw the unit's sprite facing its direction, or a plain box without one."""
    if unit.texture is None:
        game.screen.fill(UNIT_COLOR, get_unit_rect(game, unit))
        return

    rect = get_unit_texture_rect(game, unit)
    if rect.w <= 0 or rect.h <= 0:
        return
    image = pygame.transform.scale(unit.texture, rect.size)
    if unit.direction != 1:
        image = pygame.transform.flip(image, True, False)
    game.screen.blit(image, rect.topleft)


def load_unit_texture(
    unit: Unit, static_dir: Union[str, "os.PathLike[str]"] = DEFAULT_STATIC_DIR
) -> Optional[pygame.Surface]:
    """Load ``<static_dir>/sprites/<sprite_id>.png``; ``None`` if it cannot be had."""
    if unit.sprite_id == NO_SPRITE:
        _log.warning("No texture is set for a unit")
        return None

    path = Path(static_dir) / "sprites" / f"{unit.sprite_id}.png"
    try:
        return pygame.image.load(str(path))
    except (pygame.error, OSError) as exc:
        _log.warning("Couldn't load sprite %s: %s", path, exc)
        return None
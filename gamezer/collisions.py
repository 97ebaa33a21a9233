"""Swept axis-aligned bounding box collision detection."""

from __future__ import annotations

import math
from enum import Enum
from typing import Protocol

from gamezer.geometry import Block

NO_COLLISION = 1.0


class Axis(Enum):
    """The axis along which a collision happened."""

    X = "x"
    Y = "y"
    NONE = "none"


class Moving(Protocol):
    x: float
    y: float
    w: float
    h: float
    speed_x: float
    speed_y: float


def check_collision(unit: Moving, block: Block, milliseconds: float) -> tuple[float, Axis]:
    """Return the fraction of the step at which ``unit`` hits ``block`` and the axis.

    The fraction is ``1.0`` with ``Axis.NONE`` when there is no collision
    within the given time.
    """
    vx = unit.speed_x * milliseconds / 1000
    vy = unit.speed_y * milliseconds / 1000

    if vx > 0:
        dx_entry = block.x - (unit.x + unit.w)
        dx_exit = block.x + block.w - unit.x
    else:
        dx_entry = block.x + block.w - unit.x
        dx_exit = block.x - (unit.x + unit.w)

    if vy > 0:
        dy_entry = block.y - (unit.y + unit.h)
        dy_exit = block.y + block.h - unit.y
    else:
        dy_entry = block.y + block.h - unit.y
        dy_exit = block.y - (unit.y + unit.h)

    if vx == 0:
        if unit.x + unit.w <= block.x or block.x + block.w <= unit.x:
            return NO_COLLISION, Axis.NONE
        tx_entry, tx_exit = -math.inf, math.inf
    else:
        tx_entry, tx_exit = dx_entry / vx, dx_exit / vx

    if vy == 0:
        if unit.y + unit.h <= block.y or block.y + block.h <= unit.y:
            return NO_COLLISION, Axis.NONE
        ty_entry, ty_exit = -math.inf, math.inf
    else:
        ty_entry, ty_exit = dy_entry / vy, dy_exit / vy

    entry_time = tx_entry if tx_entry > ty_entry else ty_entry
    exit_time = tx_exit if tx_exit < ty_exit else ty_exit

    if entry_time > exit_time or entry_time < 0 or entry_time > 1:
        return NO_COLLISION, Axis.NONE

    axis = Axis.X if tx_entry > ty_entry else Axis.Y
    return entry_time, axis
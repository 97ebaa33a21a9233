"""Geometric value types, physics constants and small file helpers."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Union

GRAVITY = 1
FRICTION = 1

PathLike = Union[str, "os.PathLike[str]"]


@dataclass
class Coordinate:
    """A point in game space, measured in metres."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class ScreenCoordinate:
    """A point on the screen, measured in pixels."""

    x: int = 0
    y: int = 0


@dataclass
class Dimensions:
    """A width and height in game space."""

    w: float = 0.0
    h: float = 0.0


@dataclass
class ScreenDimensions:
    """A width and height on the screen, in pixels."""

    w: int = 0
    h: int = 0


@dataclass
class Block:
    """A solid axis-aligned rectangle inside a section."""

    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0


def distance(a: Coordinate, b: Coordinate) -> float:
    """Return the Euclidean distance between two coordinates."""
    return math.hypot(a.x - b.x, a.y - b.y)


def read_file(path: PathLike) -> str:
    """Return the whole content of a text file."""
    return Path(path).read_text(encoding="utf-8")
"""Character classes loaded from JSON descriptions."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Union

from gamezer.geometry import read_file

MAX_CLASS_NAME_LEN = 20
NO_SPRITE = -1
DEFAULT_STATIC_DIR = Path("src/static")


@dataclass
class CharacterClass:
    """A playable class: its identifier, name and sprite."""

    id: int = 0
    name: str = ""
    sprite_id: int = NO_SPRITE


def _integer(value: Any, key: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{key!r} must be a number, got {value!r}")
    return int(value)


def parse_character_class(text: str) -> CharacterClass:
    """Parse a character class from its JSON text."""
    root = json.loads(text)
    if not isinstance(root, dict):
        raise ValueError("character class must be a JSON object")
    character_class = CharacterClass()
    for key, value in root.items():
        if key == "name":
            if not isinstance(value, str):
                raise ValueError(f"'name' must be a string, got {value!r}")
            character_class.name = value[: MAX_CLASS_NAME_LEN - 1]
        elif key == "id":
            character_class.id = _integer(value, key)
        elif key == "sprite_id":
            character_class.sprite_id = _integer(value, key)
    return character_class


def load_character_class(
    class_id: int, static_dir: Union[str, "os.PathLike[str]"] = DEFAULT_STATIC_DIR
) -> CharacterClass:
    """Load class ``class_id`` from ``<static_dir>/classes/<id>.json``."""
    path = Path(static_dir) / "classes" / f"{class_id}.json"
    return parse_character_class(read_file(path))
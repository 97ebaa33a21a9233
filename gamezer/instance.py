"""Level instances: trees of sections holding solid blocks."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Iterator, Optional, Union

from gamezer.geometry import Block, read_file

DEFAULT_STATIC_DIR = Path("src/static")
SEPARATOR = "============"

_NEIGHBOURS = ("right", "left", "up", "down")


@dataclass
class Section:
    """A rectangular area of a level with its blocks and neighbouring sections."""

    w: float = 0.0
    h: float = 0.0
    blocks: list[Block] = field(default_factory=list)
    left: Optional[Section] = None
    right: Optional[Section] = None
    up: Optional[Section] = None
    down: Optional[Section] = None


class Entry(Enum):
    """The side through which the player entered the current section."""

    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"


@dataclass
class Instance:
    """A loaded level, starting at ``start_section``."""

    start_section: Optional[Section]
    current_section: Optional[Section] = None
    entry: Entry = Entry.LEFT

    def __post_init__(self) -> None:
        if self.current_section is None:
            self.current_section = self.start_section


def _number(value: Any, key: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{key!r} must be a number, got {value!r}")
    return float(value)


def _parse_block(node: Any) -> Block:
    if not isinstance(node, dict):
        raise ValueError("block must be a JSON object")
    block = Block()
    for key, value in node.items():
        if key in ("x", "y", "w", "h"):
            setattr(block, key, _number(value, key))
    return block


def _parse_blocks(node: Any) -> list[Block]:
    if not isinstance(node, list):
        raise ValueError("'blocks' must be a JSON array")
    return [_parse_block(item) for item in node]


def parse_section(node: Any) -> Optional[Section]:
    """Build a section tree from decoded JSON; ``None`` gives ``None``."""
    if node is None:
        return None
    if not isinstance(node, dict):
        raise ValueError("section must be a JSON object or null")
    section = Section()
    for key, value in node.items():
        if key in ("w", "h"):
            setattr(section, key, _number(value, key))
        elif key == "blocks":
            section.blocks = _parse_blocks(value)
        elif key in _NEIGHBOURS:
            setattr(section, key, parse_section(value))
    return section


def parse_instance(text: str) -> Instance:
    """Parse an instance from its JSON text."""
    return Instance(start_section=parse_section(json.loads(text)))


def load_instance(
    instance_id: int, static_dir: Union[str, "os.PathLike[str]"] = DEFAULT_STATIC_DIR
) -> Instance:
    """Load instance ``instance_id`` from ``<static_dir>/instances/<id>.json``."""
    path = Path(static_dir) / "instances" / f"{instance_id}.json"
    return parse_instance(read_file(path))


def _section_lines(section: Optional[Section]) -> Iterator[str]:
    if section is None:
        return
    yield f"w, h = {section.w:f}, {section.h:f}\n"
    for block in section.blocks:
        yield f"\t({block.w:f}, {block.h:f}, {block.x:f}, {block.y:f})\n"
    for name in _NEIGHBOURS:
        yield from _section_lines(getattr(section, name))


def format_section(section: Optional[Section]) -> str:
    """Describe a section tree, one line per section and per block."""
    return "".join(_section_lines(section))


def format_instance(instance: Optional[Instance]) -> str:
    """Describe an instance between separator lines."""
    if instance is None:
        return SEPARATOR + "\n"
    return f"{SEPARATOR}\n{format_section(instance.start_section)}{SEPARATOR}\n"


def print_instance(instance: Optional[Instance]) -> None:
    """Print the description of an instance to standard output."""
    print(format_instance(instance), end="")
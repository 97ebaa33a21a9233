# gamezer

A small side-scrolling platformer. The player character runs left and right
and jumps (and double-jumps) across a level made of rectangular blocks, while
a camera follows it, kept inside the edges of the section and able to zoom
in and out.

## Installing

```
pip install .
```

This pulls in `pygame`, which opens the window, reads the keyboard and draws
the frames.

## Running

```
gamezer [--static-dir DIR] [--windowed]
```

- `--static-dir DIR` — the directory holding `instances/`, `classes/` and
  `sprites/`. The default is `src/static`, relative to the current directory.
- `--windowed` — open a normal window instead of going full-screen.

The game opens a 1920×1080 screen, loads level `instances/1.json` and
character class `classes/1.json`, and runs until it receives a quit event
(closing the window). If the level's top-level section is `null` the game
stops with a `GameError`.

### Controls

| Key          | Action                                                        |
|--------------|---------------------------------------------------------------|
| Left / Right | Run, and face that way                                        |
| Up           | Jump; press again in the air for a second jump. The push upwards lasts while the key is held, up to 100 ms |
| `-`          | Zoom out (show more of the section) while held                |
| `=`          | Zoom in (show less of the section) while held                 |

Landing on top of a block allows jumping again.

## Game data

No levels, classes or sprites come with the package; they are read from the
static directory:

- `instances/<id>.json` — a section object with numeric `w` and `h`, a
  `blocks` array of `{"x", "y", "w", "h"}` objects, and optional neighbouring
  sections under `left`, `right`, `up` and `down` (each a section or `null`).
- `classes/<id>.json` — a character class with numeric `id` and `sprite_id`
  and a string `name` (kept to its first 19 characters).
- `sprites/<sprite_id>.png` — the image drawn for the character, scaled to a
  square as tall as the character and mirrored when it faces left. Without a
  usable sprite the character is drawn as a green rectangle.

Coordinates are in game units with the origin at the bottom-left of a section
and y growing upwards. Sections are drawn white on a black background, blocks
blue.

## What it does not do

- Only the starting section of a level is played and drawn. Neighbouring
  sections are loaded into the `Section` tree but the character never moves
  into them.
- `GameState` names a main menu and a paused state, but there is no menu and
  no pause; the game goes straight into the level.
- The Down key is recorded in `InputState` but has no effect.

## Using it as a library

The level, collision and physics code can be used without opening a window:

```python
from gamezer.instance import parse_instance, format_instance
from gamezer.collisions import check_collision
from gamezer.units import Unit

level = parse_instance('{"w": 40, "h": 30, "blocks": [{"x": 0, "y": 0, "w": 40, "h": 1}]}')
print(format_instance(level))

falling = Unit(x=4, y=2, w=1, h=2, speed_y=-10)
fraction, axis = check_collision(falling, level.start_section.blocks[0], 1000)
```

- `gamezer.geometry` — `Coordinate`, `Dimensions`, `ScreenCoordinate`,
  `ScreenDimensions`, `Block`, `distance(a, b)` and `read_file(path)`.
- `gamezer.collisions` — `check_collision(unit, block, milliseconds)` returns
  the fraction of the step at which a moving unit first touches a block
  together with the `Axis` of contact, or `(1.0, Axis.NONE)` when they do not
  meet within the step.
- `gamezer.instance` — `Section`, `Instance`, `Entry`, `parse_section`,
  `parse_instance`, `load_instance(instance_id, static_dir)`,
  `format_section`, `format_instance` and `print_instance`. Malformed data
  raises `ValueError`.
- `gamezer.classes` — `CharacterClass`, `parse_character_class` and
  `load_character_class(class_id, static_dir)`.
- `gamezer.units` — `Unit`, `Character` (with `start_jump` and
  `finish_jump`), `calculate_character_speed`, `calculate_unit_position`,
  `calculate_character_position` and `initialize_character`.
- `gamezer.camera` — `Camera` with `update(game, tick)`, `zoom_in()` and
  `zoom_out()`; the zoom factor stays between 1 and 100.
- `gamezer.transform` — `get_screen_coordinate`, `get_screen_dimensions` and
  `get_rectangle`, mapping game space to screen pixels.
- `gamezer.game` — `Game`, whose `step(tick)` advances the physics and the
  camera to a tick in milliseconds and draws only when it has a `screen`.

## Tests

```
pip install .[test]
pytest
```
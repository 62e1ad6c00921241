# wastelandtales

Branching story content for a text-based zombie-apocalypse survival game.
Each location and night-time event is a small graph of `Story` nodes. A node
has some text, a list of options, the node each option leads to (`None`
ends the sequence), and the effects granted on arrival as plain strings
such as `"health -1"`, `"bullet +5"`, `"inventory crowbar"` or `"death"`.

Some links are decided when a graph is built. Locked doors, stuck jars and
similar checks roll a digit from 0 to 9 and pass when it beats a threshold
plus the difficulty. Night events pick one of three variants at random.
The builders that roll dice take an optional `random.Random`, so a fixed
seed always gives the same graph.

## Installation

```
pip install wastelandtales
```

To run the tests:

```
pip install "wastelandtales[test]"
pytest
```

## Usage

Build everything at once:

```python
import random

from wastelandtales.catalog import build_story_book

book = build_story_book(difficulty=1, rng=random.Random(42))
first = book.hospital[book.hospital_heads[0]]
print(first.text)
```

Or build one location and walk it:

```python
import random

from wastelandtales.hospital import build_hospital_stories

stories = build_hospital_stories(difficulty=0, rng=random.Random(7))
node = stories[0]
print(node.text)
for number, option in enumerate(node.options):
    print(number, option)

print(node.reward)        # effects granted on reaching this node
nxt = node.follow(0)      # the Story the first option leads to, or None
print(node.is_ending())   # True when no option leads anywhere
```

`Story.follow` raises `IndexError` for a choice that is not one of the
node's options.

## Modules

- `wastelandtales.story`: the `Story` dataclass (`text`, `options`, `next`,
  `reward`, `follow`, `is_ending`), `new_stories(count)`,
  `random_int(low, high, rng)` for an inclusive random integer, and
  `passes_check(difficulty, rng, threshold)`.
- Daytime locations, each with a list of start indices:
  - `wastelandtales.hospital`: `build_hospital_stories(difficulty, rng)`,
    `HOSPITAL_HEAD_STORIES`.
  - `wastelandtales.weaponshop`: `build_weaponshop_stories(difficulty, rng)`,
    `WEAPONSHOP_HEAD_STORIES`.
  - `wastelandtales.supermarket`: `build_supermarket_stories(difficulty, rng)`,
    `SUPERMARKET_HEAD_STORIES`. Unused slots in this list hold `None`.
- Night-time events, each starting at index 0:
  - `wastelandtales.knocking_door`: `build_knocking_door(rng)`.
  - `wastelandtales.glass_noise`: `build_glass_breaking_noise(rng)`.
  - `wastelandtales.lights_off`: `build_lights_off(rng)`.
  - `wastelandtales.green_light`: `build_green_light(rng)`.
  - `wastelandtales.temperature`: `build_temperature_drop()` and
    `build_temperature_increase()`, which involve no randomness.
- `wastelandtales.ui_stories`: `build_ui_stories()`, the fixed messages for
  nightfall, dawn, the boss fight, the end of the day and game over.
- `wastelandtales.catalog`: `StoryBook` and
  `build_story_book(difficulty, rng)`, which build all of the above in a
  fixed order from one random source.
- `wastelandtales.prompt`: `ask_for_saving(stdscr)`, a centred curses
  "Save game? (Y/N)" dialog that returns `True` for Y and `False` for N,
  with the helpers `interpret_key(key)` and
  `prompt_geometry(max_y, max_x, prompt)`.

## What this package does not do

It holds story content and a save prompt only. There is no game loop, no
map or exploration screen, no player state that applies the effect
strings, no saving or loading of games, and no command to start a game.
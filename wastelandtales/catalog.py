"""The complete set of scenes the game draws on, built in one go."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .glass_noise import build_glass_breaking_noise
from .green_light import build_green_light
from .hospital import HOSPITAL_HEAD_STORIES, build_hospital_stories
from .knocking_door import build_knocking_door
from .lights_off import build_lights_off
from .story import Story
from .supermarket import SUPERMARKET_HEAD_STORIES, build_supermarket_stories
from .temperature import build_temperature_drop, build_temperature_increase
from .ui_stories import build_ui_stories
from .weaponshop import WEAPONSHOP_HEAD_STORIES, build_weaponshop_stories


@dataclass
class StoryBook:
    """Every scene list of the game, grouped by where it happens.

    Exploration places carry the indices of the scenes an exploration may
    start from. Night events start at their first scene.
    """

    hospital: List[Story]
    knocking_door: List[Story]
    glass_breaking_noise: List[Story]
    lights_off: List[Story]
    temperature_drop: List[Story]
    temperature_increase: List[Story]
    green_light: List[Story]
    supermarket: List[Optional[Story]]
    ui: List[Story]
    weaponshop: List[Story]
    hospital_heads: Tuple[int, ...] = field(default=HOSPITAL_HEAD_STORIES)
    supermarket_heads: Tuple[int, ...] = field(default=SUPERMARKET_HEAD_STORIES)
    weaponshop_heads: Tuple[int, ...] = field(default=WEAPONSHOP_HEAD_STORIES)


def build_story_book(
    difficulty: int = 0, rng: Optional[random.Random] = None
) -> StoryBook:
    """Build all scenes, rolling every random outcome in the game's fixed order."""
    hospital = build_hospital_stories(difficulty, rng)
    knocking_door = build_knocking_door(rng)
    glass_breaking_noise = build_glass_breaking_noise(rng)
    lights_off = build_lights_off(rng)
    temperature_drop = build_temperature_drop()
    temperature_increase = build_temperature_increase()
    green_light = build_green_light(rng)
    supermarket = build_supermarket_stories(difficulty, rng)
    ui = build_ui_stories()
    weaponshop = build_weaponshop_stories(difficulty, rng)
    return StoryBook(
        hospital=hospital,
        knocking_door=knocking_door,
        glass_breaking_noise=glass_breaking_noise,
        lights_off=lights_off,
        temperature_drop=temperature_drop,
        temperature_increase=temperature_increase,
        green_light=green_light,
        supermarket=supermarket,
        ui=ui,
        weaponshop=weaponshop,
    )
"""Night scenes that start with the shelter lights going out."""

from __future__ import annotations

import random
from typing import Dict, List, Optional, Sequence, Tuple

from .story import Story, new_stories, random_int

_SCENE_COUNT = 16

# index -> (text, options, reward)
_SCENES: Dict[int, Tuple[str, Sequence[str], Sequence[str]]] = {
    0: ("You are chilling in the room, but the light suddenly goes off",
        ("Go to the window to check", "Ignore the light"), ()),
    1: ("You see a spider biting the cable, that might be the reason of why light went off",
        ("Go out to check the spider", "Stay inside"), ()),
    2: ("After a while the light went back on, but the darkness scared you",
        ("End conversation",), ("sanity -1",)),
    3: ("The spider rushed towards you",
        ("Fight it with your fist", "Shoot it with a gun", "Run back home"), ()),
    4: ("You killed the spider but you also got severly hurt, "
        "the meat from the spider is good quality protein",
        ("End conversation",), ("food +1, health -2",)),
    5: ("You killed the spider with a bullet, the meat from the spider is good quality protein",
        ("End conversation",), ("food +1", "bullet -1")),
    6: ("The spider is too fast, he bite your neck from the back, you died",
        ("End game",), ("death",)),
    7: ("You see a zombie kicking the cable, that might be the reason of why light went off",
        ("Go out to check the zombie", "Stay inside"), ()),
    8: ("The zombie sees you and starts to move towards you",
        ("Fight it with your fist", "Shoot it with a gun", "Run back home"), ()),
    9: ("You killed the zombie with your fist but you also got injured",
        ("Search the zombie",), ()),
    10: ("The zombie's body is disgusting, but you got an apple in its pocket",
         ("End conversation",), ("sanity -1, health -2, food +1",)),
    11: ("You killed the zombie with a bullet, and got an apple that falled out of its pocket",
         ("End conversation",), ("bullet -1, food +1",)),
    12: ("You got back home", ("Continue",), ()),
    13: ("There is heavy rain outside, and the flood destroyed the cable",
         ("Go out to fix the cable", "Open the window to collect rain water",
          "Stay inside and keep the door locked"), ()),
    14: ("You got electricuted when you got close to the cable",
         ("End game",), ("death",)),
    15: ("You got some clean rain water", ("End conversation",), ("water +1",)),
}

# Links present whatever cut the power; None ends the sequence.
_FIXED_LINKS: Dict[int, Sequence[Optional[int]]] = {
    2: (None,), 4: (None,), 5: (None,), 6: (None,), 10: (None,),
    11: (None,), 14: (None,), 15: (None,),
}

# One set of links per cause: a spider, a zombie, a flood.
_BRANCH_LINKS: Tuple[Dict[int, Sequence[int]], ...] = (
    {0: (1, 2), 1: (3, 2), 3: (4, 5, 6)},
    {0: (7, 2), 7: (8, 2), 8: (9, 11, 12), 9: (10,), 12: (2,)},
    {0: (13, 2), 13: (14, 15, 2)},
)


def build_lights_off(rng: Optional[random.Random] = None) -> List[Story]:
    """Build the lights-off scenes; a random roll picks what cut the power."""
    scenes = new_stories(_SCENE_COUNT)
    for index, (text, options, reward) in _SCENES.items():
        scene = scenes[index]
        scene.text = text
        scene.options = list(options)
        scene.reward = list(reward)
    for index, targets in _FIXED_LINKS.items():
        scenes[index].next = [None if t is None else scenes[t] for t in targets]

    branch = random_int(0, len(_BRANCH_LINKS) - 1, rng)
    for index, targets in _BRANCH_LINKS[branch].items():
        scenes[index].next = [scenes[t] for t in targets]
    return scenes
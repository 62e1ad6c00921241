"""Night scenes that start with someone knocking at the shelter door."""

from __future__ import annotations

import random
from typing import Dict, List, Optional, Sequence, Tuple

from .story import Story, new_stories, random_int

_SCENE_COUNT = 17

# index -> (text, options, reward)
_SCENES: Dict[int, Tuple[str, Sequence[str], Sequence[str]]] = {
    0: ("You hear someone knocking the door", ("Go to check the peekhole",), ()),
    1: ("You see nothing outside, you wonder who knocked the door",
        ("Go out and check", "Lock the door and go back to the sofa"), ()),
    2: ("After walking a few steps in the dark, you hear a scream and suddenly "
        "got scrached by a woman covered in blood.",
        ("Fight the woman", "Run back home"), ()),
    3: ("The woman atacked you before you can draw your weapon, "
        "you should've never come outside at night",
        ("End Game",), ("death",)),
    4: ("You rushed back home and slamed the door behind you",
        ("End conversation",), ()),
    5: ("The knocking started again and continued for a while, but ended eventually",
        ("End conversation",), ()),
    6: ("You see a weird guy standing outside",
        ("Go out and talk to him", "Lock the door and go back to the shelter"), ()),
    7: ("The guy asks you if you have any food",
        ("Give him some food", "Refuse", "Suprise attack him"), ()),
    8: ("He takes the food and give you a bullet for return",
        ("End conversation",), ("food -1", "bullet +1")),
    9: ("You pushed him away and locked the door again",
        ("End conversation",), ()),
    10: ("You poke him in the eye, but got stabbed by him; "
         "you killed him with his own knife",
         ("Search his body",), ()),
    11: ("You found a silver key inside his pocket",
         ("End conversation",), ("inventory silver key",)),
    12: ("You see a giant cockroach standing outside",
         ("Go out to check the cockroach",
          "Lock the door and go back to the shelter"), ()),
    13: ("The cockroach saw you, and quickly runs away",
         ("Chase it", "Shoot it with a bullet", "Go back home"), ()),
    14: ("You chase the cockroach for a while, and suddenly fall in to a pit; "
         "you got eaten alive by a number of cockroaches",
         ("End Game",), ("death",)),
    15: ("You shot a bullet at the cockroach, but you missed since it's too dark outside",
         ("Chase the cockroach", "Go back home"), ("bullet -1",)),
    16: ("You got back home safely", ("End conversation",), ()),
}

# Links present whatever is behind the door; None ends the sequence.
_FIXED_LINKS: Dict[int, Sequence[Optional[int]]] = {
    3: (None,), 4: (None,), 5: (None,), 8: (None,), 9: (None,),
    11: (None,), 14: (None,), 16: (None,),
}

# One set of links per visitor: nothing outside, a weird guy, a giant cockroach.
_BRANCH_LINKS: Tuple[Dict[int, Sequence[int]], ...] = (
    {0: (1,), 1: (2, 5), 2: (3, 4)},
    {0: (6,), 6: (7, 5), 7: (8, 9, 10), 10: (11,)},
    {0: (12,), 12: (13, 5), 13: (14, 15, 16), 15: (14, 16)},
)


def build_knocking_door(rng: Optional[random.Random] = None) -> List[Story]:
    """Build the knocking-door scenes; a random roll picks who is outside."""
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
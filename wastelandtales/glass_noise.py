"""Night scenes that start with glass breaking in the kitchen."""

from __future__ import annotations

import random
from typing import Dict, List, Optional, Sequence, Tuple

from .story import Story, new_stories, random_int

_SCENE_COUNT = 15

# index -> (text, options, reward)
_SCENES: Dict[int, Tuple[str, Sequence[str], Sequence[str]]] = {
    0: ("You hear the sound of glass breaking, it's likely from the kitchen",
        ("Go to kitchen to check", "Ignore the noise"), ()),
    1: ("You see a giant cockroach with a broken leg, and some shattered glasses on the ground",
        ("Go to help the cockroach and fix its leg", "Kill the cockroach",
         "Leave the cockroach bleeding on the ground"), ()),
    2: ("The cockroach spits a bottle, there is a paper slip inside",
        ("End conversation",), ("inventory paper slip",)),
    3: ("Green blood exploded from the cockroach and corroded your skin",
        ("End conversation",), ("health -1",)),
    4: ("You went back to the bedroom", ("End conversation",), ()),
    5: ("You see a guy in the kitchen, acting like a thief",
        ("Go talk to him", "Quitely aim at him and shoot him",
         "Quitely go back to the bedroom and lock the door"), ()),
    6: ("He got suprised by you, he said he thought this is a ruined place "
        "and he is only looking for food",
        ("Give hime some food", "Quickly shoot at him"), ()),
    7: ("He thanked you and give you two bullets for return",
        ("End conversation",), ("bullet +1", "food -1")),
    8: ("The gun shot killed him instently, you searched him and found a water bottle",
        ("End conversation",), ("bullet -1, water +1",)),
    9: ("You missed, he run away through the window",
        ("End conversation",), ("bullet -1",)),
    10: ("You see a cute cat",
         ("Shoot it", "Get close to examin it", "Go back to the bedroom"), ()),
    11: ("Congrats, you kill a cat, your sanity drops because of the shame",
         ("End conversation",), ("sanity -1",)),
    12: ("The cat got scared, it run out of the window",
         ("Chase it", "Go back to the bedroom"), ()),
    13: ("You chased it for a while, but you lost track and the cat disappreared",
         ("Go find the cat", "Go back home"), ()),
    14: ("You suddently run into a pit, and you got eaten by a bunch of cockroaches",
         ("End game",), ("death",)),
}

# Links present whatever made the noise; None ends the sequence.
_FIXED_LINKS: Dict[int, Sequence[Optional[int]]] = {
    2: (None,), 3: (None,), 4: (None,), 7: (None,), 8: (None,),
    9: (None,), 11: (None,), 14: (None,),
}

# One set of links per cause: a cockroach, an intruder, a cat.
_BRANCH_LINKS: Tuple[Dict[int, Sequence[int]], ...] = (
    {0: (1, 4), 1: (2, 3, 4)},
    {0: (5, 4), 5: (6, 9, 4), 6: (7, 8)},
    {0: (10, 4), 10: (11, 12, 4), 12: (13, 4), 13: (14, 4)},
)


def build_glass_breaking_noise(rng: Optional[random.Random] = None) -> List[Story]:
    """Build the glass-breaking scenes; a random roll picks what caused the noise."""
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
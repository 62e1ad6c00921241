"""Night scenes that start with a green light outside the shelter."""

from __future__ import annotations

import random
from typing import Dict, List, Optional, Sequence, Tuple

from .story import Story, new_stories, random_int

_SCENE_COUNT = 26

# index -> (text, options, reward)
_SCENES: Dict[int, Tuple[str, Sequence[str], Sequence[str]]] = {
    0: ("You are resting in the shelter, but suddenly saw green light appearing "
        "outside of the window",
        ("Go out and check", "Stay inside the shelter"), ()),
    1: ("You stayed inside, and the green light stoped after a while",
        ("End conversation",), ()),
    2: ("You see a giant zombie standing outside, glowing green light from its belley",
        ("Go closer to examine it", "Shoot it", "Go back to the shelter"), ()),
    3: ("You moved closer to the zombie, it noticed you and started moving towards you",
        ("Shoot it's head", "Shoot it's belley", "Shoot it's knee",
         "Run back to the shelter"), ()),
    4: ("You shot right through its head, it droped down to the ground",
        ("Continue",), ("bullet -1",)),
    5: ("You shot its belley, it droped to the ground and didn't explode as you might "
        "have expected, green juicy is flowing out of his belley",
        ("Go drink some of the fresh green juice",), ("bullet -1",)),
    6: ("You drank the green juicy, and felt refreshed and energized",
        ("End conversation",), ("health +2",)),
    7: ("You went back to the shelter, nothing else happened during the night",
        ("End conversation",), ()),
    8: ("You shot its knee, it fell to the ground and its head exploded",
        ("Continue",), ("bullet -1",)),
    9: ("It's really far, but you accidentally shot its head, the zombie died",
        ("Continue",), ("bullet -1",)),
    10: ("You felt good about your shooting skill",
         ("End conversation",), ("sanity +2",)),
    11: ("You feel satisfied", ("End conversation",), ("sanity +2",)),
    12: ("You see a car parked outside, green light is shining from its lamp",
         ("Move closer to examine it", "Ignore it and go back to the shelter"), ()),
    13: ("You see three people on the car, each carring a gun",
         ("Go closer and talk to them",
          "Go full JUHN WICK and shoot them with 3 bullets",
          "Run back to the shelter"), ()),
    14: ("They ask you for some food, and they will give you bullet for exchange",
         ("Give them 2 food for 4 bullets",
          "Surprise attack them with your gun with 3 bullets",
          "Tell them you have no food and go back to the shelter"), ()),
    15: ("You gave them 2 food and got 4 bullets",
         ("End conversation",), ("food -2", "bullet +4")),
    16: ("You killed them but also got shot",
         ("Examine their body",), ("bullet -3", "health -1")),
    17: ("You got 10 bullets from their body",
         ("End conversation",), ("bullet +10",)),
    18: ("You see green flashlight shining from the distance",
         ("Go their to examine", "Ignore it and go back to the shelter"), ()),
    19: ("You saw a group of people shining flashlight, two of them have guns",
         ("Approach them", "Shoot the two people with 2 bullets",
          "Go back to the shelter"), ()),
    20: ("They are happy to see you, and ask if you want to trade: "
         "1 food for 2 bullets, 1 food for 2 water",
         ("Trade 1 food for 2 bullets", "Trade 1 food for 2 water",
          "Decline and go back to the shelter"), ()),
    21: ("You gave them 1 food and got 2 bullets",
         ("End conversation",), ("food -1", "bullet +2")),
    22: ("You gave them 1 food and got 2 water",
         ("End conversation",), ("food -1", "water +2")),
    23: ("You killed the two people, but the rest of them run away",
         ("Examine the body", "Chase the rest of them"), ("bullet -2",)),
    24: ("You got 5 bullets and 4 water from their body",
         ("End conversation",), ("bullet +5", "water +4")),
    25: ("They run too fast and got out of your sight, two people carried the dead "
         "bodies and also got away",
         ("Go back to shelter",), ()),
}

# Links present whatever the light turns out to be; None ends the sequence.
# A branch may replace some of them.
_FIXED_LINKS: Dict[int, Sequence[Optional[int]]] = {
    1: (None,), 6: (None,), 7: (None,), 9: (None,), 10: (None,), 11: (None,),
    15: (None,), 17: (None,), 21: (None,), 22: (None,), 24: (None,), 25: (None,),
}

# One set of links per source of light: a giant zombie, a car, flashlights.
_BRANCH_LINKS: Tuple[Dict[int, Sequence[int]], ...] = (
    {0: (2, 1), 2: (3, 9, 7), 3: (4, 5, 8, 7), 4: (10,), 5: (6,),
     8: (11,), 9: (11,)},
    {0: (12, 1), 12: (13, 7), 13: (14, 16, 7), 14: (15, 16, 7), 16: (17,)},
    {0: (18, 1), 18: (19, 7), 19: (20, 23, 7), 20: (21, 22, 7),
     23: (24, 25), 25: (7,)},
)


def build_green_light(rng: Optional[random.Random] = None) -> List[Story]:
    """Build the green-light scenes; a random roll picks what is glowing outside."""
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
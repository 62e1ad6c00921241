"""Scenes found while exploring the weapon shop."""

from __future__ import annotations

import random
from typing import Dict, List, Optional, Sequence, Tuple

from .story import Story, new_stories, passes_check

#: Indices of the scenes an exploration of the weapon shop may start from.
WEAPONSHOP_HEAD_STORIES: Tuple[int, ...] = (
    0, 4, 9, 14, 15, 18, 20, 23, 33, 36, 37, 38, 41, 44,
)

_SCENE_COUNT = 51

_VEST_ROOM = "Here seems to be an abandoned shelter.\nYou noticed a bulletproof vest on the wall."
_BULLETS_AND_RING = "You find some bullets and a ring."

# index -> (text, options, reward)
_SCENES: Dict[int, Tuple[str, Sequence[str], Sequence[str]]] = {
    0: ("You see an AK47 on the ground.",
        ("Try to get that AK47", "Ignore the gun"), ()),
    1: ("A zombie noticed you, it is time to try your new weapon.",
        ("Kill it with your AK47!!!",), ("inventory AK47",)),
    2: ("You keep searching in the weaponshop, and noticed some bullets on the counter.",
        ("Get the bullets.",), ()),
    3: ("You got some bullets.", ("End.",), ("bullet +5",)),
    4: ("You meet a strong zombie with a crowbar in his hand.",
        ("Try to kill it.", "Bypass him and continue exploring.", "Run away."), ()),
    5: ("You obtained a crowbar,maybe it can help you open some doors?",
        ("Continue exploration.",), ("inventory crowbar", "bullet -2")),
    6: ("You notice someone's doomsday notebook.", ("Read it.",), ()),
    7: ("You escaped.", ("End.",), ()),
    8: ("It has some encouraging words on it.",
        ("At least I see a glimmer of hope.",), ("sanity +1",)),
    9: ("You enter the warehouse of the weaponshop,it's completely dark.",
        ("Try to open the lights.", "Investigate in the darkness.",
         "It seems horrible,leave here."), ()),
    10: ("The zombies in the warehouse noticed you,it becomes a little tricky.",
         ("Kill them all!!!", "Run!!!"), ()),
    11: ("Oops!You accidentally triggered something!",
         ("It seems that it is a trap set by others.",), ("health -1",)),
    12: ("You leaved the warehouse.", (), ()),
    13: ("That's really narrow!!", ("End.",), ()),
    14: ("You walk pass a counter,and noticed the medicine on it.",
         ("Get the medicine.",), ("health +1", "ill -1")),
    15: ("You find a thin iron wire.", ("Pick it up.", "Ignore it."), ()),
    16: ("I can use it to open some locked doors.", ("End.",),
         ("inventory thin_iron_wire",)),
    17: ("It seems useless.", ("End.",), ()),
    18: ("You find a locked room.",
         ("Pry open the window with the crowbar and enter.",
          "Force open the door lock", "Leave here."), ()),
    19: (_VEST_ROOM, ("Put on the bulletproof vest.",),
         ("bulletproof_vest effect", "inventory- crowbar")),
    20: ("You step into a dark room, a huge spider suddenly attacks you.",
         ("Try to kill it.", "Run!!"), ()),
    21: ("You killed the spider and obtained its eyes.",
         ("What can spider eyes do?",),
         ("bullet -1", "inventory spider_eyes", "ill -1")),
    22: ("You escaped, but got hurted.", ("End.",), ("health -1",)),
    23: ("The hidden door behind the counter slowly opened.", ("Explore.",), ()),
    24: ("A mutant hound runs towards you. ", ("Kill it.", "Run away."), ()),
    25: ("You killed the mutant bound.", ("End.",), ("bullet -2",)),
    26: ("You escaped.", ("End.",), ("sanity -1",)),
    27: ("You are startled by a strange noise.",
         ("That really freaked me out.",), ("sanity -1",)),
    28: ("You find some medicine in the darkness.", ("Get the medicine.",),
         ("health +1", "ill -1")),
    29: ("You find some food, bullets, and water.", ("End.",),
         ("food +1", "water +1", "bullet +1")),
    30: ("You find some bullets.", ("End.",), ("bullet +6",)),
    31: ("You find a box.", ("Open it.",), ()),
    32: ("There is a mysterious potion in it.", ("Get it.",),
         ("health +2", "sanity +2")),
    33: ("You find a locked door.",
         ("Try to pick the lock.", "Make a force entry.", "Leave."), ()),
    34: (_BULLETS_AND_RING, ("End.",),
         ("bullet +4", "inventory ring", "inventory- thin_iron_wire")),
    35: (_BULLETS_AND_RING, ("End.",),
         ("bullet +4", "inventory ring", "hunger -1")),
    36: ("You entered a door.", ("Explore.",), ()),
    37: ("You come to the second floor.", ("Explore.",), ()),
    38: ("You noticed a hidden door.", ("Enter.", "Ignore it."), ()),
    39: ("You find some bullets.", ("End.",), ("bullet +4",)),
    40: ("Nothing happend.", ("End.",), ()),
    41: ("You meet a strange merchant.", ("Trade with him.", "Ignore him."), ()),
    42: ("Spend 2 food to buy something.", ("OK.",),
         ("food -2", "bullet +1", "water +1")),
    43: ("That guy must be an unscrupulous merchant.", ("End.",), ()),
    44: ("A zombie suddenly appears and attacks you.", ("Run.",), ("health -1",)),
    45: ("That's really narrow!!", ("End.",), ("bullet -4",)),
    46: (_VEST_ROOM, ("Put on the bulletproof vest.",),
         ("bulletproof_vest effect", "hunger -2")),
}

# index -> indices reached by each option; None ends the sequence.
_LINKS: Dict[int, Sequence[Optional[int]]] = {
    0: (1, 2), 1: (None,), 2: (3,), 3: (None,),
    4: (5, 6, 7), 5: (None,), 6: (8,), 7: (None,), 8: (None,),
    9: (10, 11, 12), 10: (45, 13), 11: (None,), 12: (None,), 13: (None,),
    14: (None,), 15: (16, 17), 16: (None,), 17: (None,),
    18: (19, 46, None), 19: (None,),
    20: (21, 22), 21: (None,), 22: (None,),
    24: (25, 26), 25: (None,), 26: (None,), 27: (None,), 28: (None,),
    29: (None,), 30: (None,), 31: (32,), 32: (None,),
    33: (34, 35, None), 34: (None,), 35: (None,),
    38: (39, 40), 39: (None,), 40: (None,),
    41: (42, 43), 42: (None,), 43: (None,), 44: (None,),
    45: (None,), 46: (None,),
}

# Scenes whose single outcome depends on one shared luck roll: (lucky, unlucky).
_LUCK_LINKS: Dict[int, Tuple[int, int]] = {
    23: (31, 28),
    36: (30, 27),
    37: (29, 24),
}


def build_weaponshop_stories(
    difficulty: int = 0, rng: Optional[random.Random] = None
) -> List[Story]:
    """Build the weapon shop scenes; one luck roll decides the hidden-room outcomes."""
    scenes = new_stories(_SCENE_COUNT)
    for index, (text, options, reward) in _SCENES.items():
        scene = scenes[index]
        scene.text = text
        scene.options = list(options)
        scene.reward = list(reward)
    for index, targets in _LINKS.items():
        scenes[index].next = [None if t is None else scenes[t] for t in targets]

    lucky = passes_check(difficulty, rng)
    for index, (good, bad) in _LUCK_LINKS.items():
        scenes[index].next = [scenes[good if lucky else bad]]
    return scenes
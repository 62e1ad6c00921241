"""Scenes found while exploring the hospital."""

from __future__ import annotations

import random
from typing import Dict, List, Optional, Sequence, Tuple

from .story import Story, new_stories, passes_check

#: Indices of the scenes an exploration of the hospital may start from.
HOSPITAL_HEAD_STORIES: Tuple[int, ...] = (
    0, 3, 7, 15, 28, 30, 32, 34, 36, 42, 45, 48, 51, 54, 57,
)

_SCENE_COUNT = 61

# index -> (text, options, reward)
_SCENES: Dict[int, Tuple[str, Sequence[str], Sequence[str]]] = {
    0: ("You see a zombie nurse walking like a zombie.",
        ("Talk to the nurse", "Ignore the nurse"), ("health +1", "ill -1")),
    1: ("The nurse tells you that you are in a hospital. "
        "She asks you if you are feeling better.",
        ("Why zombies can talk?",), ("health -1", "ill +1")),
    2: ("You're bitten, so that's why", ("End conversation",),
        ("health -1", "sanity +1")),
    3: ("You see a doctor's gown.",
        ("ask for help", "grab the pancake in his pocket"), ()),
    4: ("Why are you talking to a gown?", ("End conversation",), ()),
    5: ("you got a pancake", ("End",), ("food +1", "water +1")),
    6: ("nothing happened then", ("End conversation",), ()),
    7: ("You find a locked cabinet with a strange symbol on it.",
        ("Try to open the cabinet",), ()),
    8: ("The cabinet opens, revealing a glowing syringe.",
        ("Take the syringe", "Look at it closer"), ()),
    9: ("You feel a surge of energy after using the syringe.",
        ("End conversation",), ("health +2",)),
    10: ("You hear a faint whisper: 'Don't trust the syringe...'",
         ("Ignore the whisper", "Investigate the source of the whisper"), ()),
    11: ("You find a hidden, locked, room with strange medical equipment.",
         ("Try number 651149114 by the strange man",
          "Too dangerous, leave the room"), ()),
    12: ("The equipment activates, and you feel a strange sensation. "
         "The effect is unknown.",
         ("End conversation",), ("health +1", "ill -1", "sanity +1")),
    13: ("You encounter a patient who seems to know you.",
         ("Talk to the patient", "Attack him"), ()),
    14: ("The patient reveals a series of number 651149114, no idea what it means.",
         ("Leave him alone",), ()),
    15: ("You find a journal with cryptic notes.", ("Read the journal",), ()),
    16: ("The journal mentions a hidden exit from the hospital.",
         ("Search for the exit", "Ignore the journal"), ("inventory clue",)),
    17: ("the patient is dead", ("Feel sorry for him",), ("bullet -1",)),
    18: ("You find a hidden exit in the hospital. The door is locked, "
         "but there's a keypad next to it.",
         ("Try to guess the code", "Look around for clues"), ()),
    19: ("The keypad locks after three failed attempts.", ("Leave",), ()),
    20: ("You find a note nearby with the numbers '651149114' scribbled on it.",
         ("Try the code on the keypad",), ()),
    21: ("The keypad beeps, and the door unlocks. You step outside into a dark alley.",
         ("Explore the alley", "Go back inside"), ()),
    22: ("You walk down the alley and find a backpack with supplies.",
         ("Take the supplies and leave",
          "Leave the backpack and return to the hospital"),
         ("food +1", "water +1", "ill -1")),
    23: ("You decide to return to the hospital, leaving the hidden exit behind.",
         ("End conversation",), ()),
    24: ("You try to guess the code, successfully open the door",
         ("open the door",), ()),
    25: ("You saw a strange man", ("talk to him", "ignore him"), ()),
    26: ("Turns out he's a crazy man, talking to him makes you question your existence",
         ("End conversation",), ("sanity -1",)),
    27: ("Turns out he's a crazy man and suddenly he attacked you because you ignored him",
         ("End conversation",), ("health -1", "ill +1")),
    28: ("You discover a locked medical storage room.",
         ("Try to pick the lock", "Leave it alone"), ()),
    29: ("You successfully unlock the door and find medical supplies, "
         "but the lock picking makes you feel insane.",
         ("Take the supplies",), ("health +1", "sanity -1")),
    30: ("A chilling voice whispers your name from the shadows.",
         ("Investigate the source", "Run away"), ()),
    31: ("You find a ghostly figure begging for help, he just wanted to talk.",
         ("Talk to him", "Flee in terror"), ()),
    32: ("You stumble upon an eerie surgical room.",
         ("Search the room", "Leave quickly"), ()),
    33: ("You found a notebook of an insane patient.",
         ("Read it", "Leave it behind"), ()),
    34: ("You encounter a nurse who offers you a choice of treatments.",
         ("Accept the treatment", "Decline the offer"), ()),
    35: ("The treatment has unexpected side effects.",
         ("Embrace the change", "Reject the treatment"), ()),
    36: ("You find an old patient record with strange notes.",
         ("Examine the notes", "Discard the record"), ()),
    37: ("The notes mention a hidden room in the hospital.",
         ("Search for the hidden room", "Ignore the notes"), ()),
    38: ("You feel happy after talking to the ghost",
         ("End conversation",), ("sanity +2",)),
    39: ("His notes make you feel uncomfortable and questioning your existence",
         ("Finished reading",), ("sanity -1",)),
    40: ("You feel good after the treatment but your head hurts",
         ("Continue",), ("sanity -1", "health +2")),
    41: ("After searching the room you found some medicines",
         ("End the search",), ("health +1", "ill -1")),
    42: ("You hear a distant scream echoing through the hallway.",
         ("Investigate the scream", "Stay where you are"), ()),
    43: ("You find a wounded patient. He begs for help.",
         ("Help him", "Ignore him and leave"), ("sanity +1",)),
    44: ("You stand frozen. The screaming stops.",
         ("End conversation",), ("sanity -1",)),
    45: ("You enter an old operating theater. Lights flicker.",
         ("Explore the room", "Leave quickly"), ()),
    46: ("You find a surgical mask with dried blood.",
         ("Put it on", "Throw it away"), ("sanity -2",)),
    47: ("You decide not to risk it and leave unharmed.",
         ("End conversation",), ()),
    48: ("A security camera whirs and follows your movement.",
         ("Wave at it", "Destroy it"), ()),
    49: ("You wave. A voice says: 'Subject stable.'",
         ("Keep moving",), ("sanity +1",)),
    50: ("You destroy it. Alarms blare!", ("Run!",),
         ("sanity -1", "inventory keycard")),
    51: ("You enter a small chapel room, candles flicker but no wind blows.",
         ("Light a candle", "Say a prayer"), ()),
    52: ("The candle lights itself before you touch it.",
         ("Step back",), ("sanity -1",)),
    53: ("You feel peace as you pray. Something watches kindly.",
         ("End prayer",), ("sanity +2",)),
    54: ("You're in the morgue. One drawer is slightly open.",
         ("Open it fully", "Walk away slowly"), ()),
    55: ("Inside lies your own file... with tomorrow's date of death.",
         ("Burn it",), ("sanity -2",)),
    56: ("You back away. Something breathes from the drawer.", ("Run",), ()),
    57: ("You find a storage room labeled 'Hazardous Materials'.",
         ("Search inside", "Close the door"), ()),
    58: ("You find a strange vial labeled 'Do not consume'.",
         ("Drink it", "Take it with you"), ("inventory unknown_vial",)),
    59: ("You close the door. The lights flicker, but you feel safe.",
         ("End conversation",), ()),
    60: ("You feel growsed after drinking the vial.",
         ("Vomit it out",), ("health -1", "sanity -1")),
}

# index -> indices reached by each option; None ends the sequence.
_LINKS: Dict[int, Sequence[Optional[int]]] = {
    0: (1, 6), 1: (2,), 2: (None,),
    3: (4, 5), 4: (None,), 5: (None,), 6: (None,),
    7: (8,), 8: (9, 10), 9: (None,), 10: (8, 13),
    11: (12, 6), 12: (None,), 13: (14, 17), 14: (None,),
    15: (16,), 16: (18, 6), 17: (None,),
    19: (None,), 21: (22, 23), 22: (6, 23), 23: (None,), 24: (21,),
    25: (26, 27), 26: (None, None), 27: (None, None),
    28: (29, None), 29: (None,),
    30: (31, None), 31: (38, None), 38: (None,),
    32: (33, None), 33: (39, None), 39: (None,),
    34: (35, None), 35: (40, None), 40: (None,),
    36: (37, None), 37: (41, None), 41: (None,),
    42: (43, 44), 43: (None,), 44: (None,),
    45: (46, 47), 46: (None,), 47: (None,),
    48: (49, 50), 49: (None,), 50: (None,),
    51: (52, 53), 52: (None,), 53: (None,),
    54: (55, 56), 55: (None,), 56: (None,),
    57: (58, 59), 58: (None, 60), 59: (None,), 60: (None,),
}


def build_hospital_stories(
    difficulty: int = 0, rng: Optional[random.Random] = None
) -> List[Story]:
    """Build the hospital scenes.

    A single luck roll decides both whether guessing the exit code works and
    whether the code found on the note opens the door.
    """
    scenes = new_stories(_SCENE_COUNT)
    for index, (text, options, reward) in _SCENES.items():
        scene = scenes[index]
        scene.text = text
        scene.options = list(options)
        scene.reward = list(reward)
    for index, targets in _LINKS.items():
        scenes[index].next = [None if t is None else scenes[t] for t in targets]

    lucky = passes_check(difficulty, rng)
    scenes[18].next = [scenes[24] if lucky else scenes[19], scenes[20]]
    scenes[20].next = [scenes[21] if lucky else scenes[19]]
    return scenes
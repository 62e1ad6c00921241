"""Scenes found while exploring the supermarket."""

from __future__ import annotations

import random
from typing import Dict, List, Optional, Sequence, Tuple, Union

from .story import Story, passes_check

#: Indices of the scenes an exploration of the supermarket may start from.
SUPERMARKET_HEAD_STORIES: Tuple[int, ...] = (
    0, 8, 13, 25, 32, 42, 46, 55, 60, 65, 70, 75, 80,
)

_SCENE_COUNT = 88

_KEY_NOTE = (
    "An ornate brass key with a note that read: "
    "\"Choose wisely, for this key unlocks more than just doors.\""
)
_TWO_BEAMS = "The key starts to  emit two beams of light."

# The hatch outcomes have no slot of their own: they are only reachable
# from the hatch attempt scene.
_HATCH_OPENED = "hatch-opened"
_HATCH_STUCK = "hatch-stuck"

_Key = Union[int, str]

# key -> (text, options, reward)
_SCENES: Dict[_Key, Tuple[str, Sequence[str], Sequence[str]]] = {
    0: (_KEY_NOTE, ("Take the key and note",), ()),
    1: (_TWO_BEAMS, ("Toward a door with a bumping sound behind it",), ()),
    2: ("The door opens, a boy is trapped by a zombie, he's crying for help.",
        ("Help him", "Leave him alone"), ()),
    3: ("You got bitten on the hand, the boy ran away.",
        ("Use a gun", "Fight with bare hands"), ()),
    4: ("You shot two bullets, the zombie is dead", ("Take a deep breath",), ()),
    5: ("You killed the zombie, but yourself badly injured",
        ("Take a deep breath",), ()),
    6: ("You're a hero, undoubtedly.", ("Take it as a compliment",),
        ("health -1", "bullet -2", "ill +1")),
    7: ("You closed the door", ("Feel a little bit guilty",), ()),
    8: (_KEY_NOTE, ("Take the key and note",), ()),
    9: (_TWO_BEAMS, ("Toward a doll with a lock on its head",), ()),
    10: ("The doll is locked, but you can hear a voice inside it.",
         ("Open the doll", "Leave it alone"), ()),
    11: ("The doll starts to sing a lullaby, and you feel......crazy",
         ("Leave it alone with a headache",), ("sanity -1",)),
    12: ("You left the doll on the shelf", ("Walk away",), ()),
    13: ("In the supermarket, you spot two odd things: a can glowing like a tiny "
         "star and a shopping cart that moves on its own.",
         ("Check the can", "Follow the cart"), ()),
    14: ("You pick up the can. Its soft glow feels almost alive.",
         ("Examine the can",), ()),
    15: ("At the far end of the aisle, you hear a quiet cry. "
         "A man is sitting by a sealed door.",
         ("Help him", "Ignore him"), ()),
    16: ("You rush to help, but you get a small cut on your arm.",
         ("Use a bandage", "Run away quickly"), ()),
    17: ("You wrap the cut with a bandage and feel a warm rush of relief.",
         ("Continue",), ("health +1",)),
    18: ("You bolt away and the pain sharpens, leaving you weaker.",
         ("Continue",), ("health -1", "ill +1")),
    19: ("You walk past the crying man. You grabbed the supply beside him",
         ("Continue",), ("food +1", "water +1")),
    20: ("You follow the cart as it creaks down a quiet aisle, "
         "its wheels clicking a strange tune.",
         ("Open the door",), ()),
    21: ("The door opens to a hidden aisle filled with odd, colorful items.",
         ("Enter the aisle",), ()),
    22: ("Inside, strange products are arranged like clues in a puzzle.",
         ("Pick an item", "Walk away"), ()),
    23: ("You grab a dazzling item, and suddenly, extra food clatter in your pocket.",
         ("Continue",), ("food +1",)),
    24: ("You leave the aisle quickly, feeling a strange emptiness "
         "as your mind grows cloudy.",
         ("Continue",), ("sanity -1",)),
    25: ("In the supermarket, the power flickers, and you hear a faint voice "
         "near the frozen food aisle.",
         ("Investigate the voice", "Ignore it and keep shopping"), ()),
    26: ("You walk to the frozen food aisle and see a freezer with its door slightly ajar.",
         ("Open the freezer",), ()),
    27: ("Inside the freezer, you find a frosty key and an old, torn map.",
         ("Take the key and map",), ()),
    28: ("The map leads you to a locked supply room near the storage area.",
         ("Use the frosty key",), ()),
    29: ("The room holds emergency supplies, including some extra water.",
         ("Take the water",), ("water +1",)),
    30: ("You decide to ignore the voice and continue shopping, "
         "but the strange sounds persist.",
         ("Leave the store quickly",), ("sanity -1",)),
    32: ("In the supermarket, a flickering LED sign above an empty aisle catches your eye.",
         ("Enter the mysterious aisle",), ()),
    33: ("You step into the aisle and notice a rickety cart rolling by on its own.",
         ("Follow the cart", "Examine the shelves"), ()),
    34: ("You follow the cart to a locked backroom door.",
         ("Force the door open", "Look for a key nearby"), ()),
    35: ("You break the door with a loud crash, but scrape your arm.",
         ("Move on",), ("health -1", "ill +1")),
    36: ("You find a rusty key behind a display that fits the lock perfectly.",
         ("Enter the backroom",), ()),
    37: ("You inspect the shelves and discover a hidden snack cabinet.",
         ("Grab some snacks",), ("food +1",)),
    38: ("You continue shopping. A blinking security camera catches your eye.",
         ("Investigate the camera", "Ignore it"), ()),
    39: ("The camera shows a dark staff room where strange shadows dance.",
         ("Enter the staff room",), ("sanity -1",)),
    40: ("You ignore the camera, yet the unsettling feeling lingers as you finish shopping.",
         ("Finish shopping",), ("sanity +1",)),
    41: ("You search for a key, but the door remains locked.",
         ("Leave the backroom",), ()),
    42: ("In the supermarket, you find a strange hatch hidden beneath stacks of flour bags.",
         ("Open the hatch", "Ignore it and keep shopping"), ()),
    43: ("The hatch is heavy and locked tight. You notice a faint glow coming from inside.",
         ("Try to force it open",), ()),
    _HATCH_OPENED: ("You force the hatch open, revealing a hidden stash of supplies.",
                    ("Take the supplies",), ("bullet +1",)),
    _HATCH_STUCK: ("The hatch resists your efforts, leaving you tired and bruised.",
                   ("Step back",), ("health -1",)),
    44: ("You brace yourself and try to open the hatch.",
         ("Give it your best shot",), ()),
    45: ("You walk away from the hatch, but its eerie glow sticks in your mind.",
         ("Keep shopping",), ("sanity -1",)),
    46: ("In a quiet corner of the supermarket, a cooler hums loudly. "
         "Inside, you see a strange glowing jar.",
         ("Take the jar", "Leave it alone"), ()),
    47: ("You grab the jar. It feels heavier than it looks.", ("Open the jar",), ()),
    48: ("You try to open the jar. The lid is stuck tight.",
         ("Keep twisting the lid",), ()),
    49: ("You leave the glowing jar untouched, but its hum lingers in your ears.",
         ("Walk away quickly",), ("sanity +1",)),
    50: ("The jar opens easily, revealing extra food hidden inside.",
         ("Take the food",), ("food +1",)),
    51: ("The jar slips from your hands, shattering on the ground. The strange glow fades.",
         ("Step away",), ("sanity -1",)),
    55: ("In the noisy supermarket, you notice a small quiet lounge tucked away near the exit.",
         ("Sit and relax", "Keep rushing"), ()),
    56: ("You step into the lounge, where soft music and comfortable chairs "
         "invite you to unwind.",
         ("Close your eyes and breathe",), ()),
    57: ("As you focus on your breath, a deep calm washes over you. "
         "The store's chaos fades away, leaving you renewed.",
         ("Open your eyes, feeling refreshed",), ("sanity +1",)),
    58: ("You decide there\u2019s no time to rest and push on with your frantic shopping.",
         ("Race to the checkout",), ()),
    59: ("In your rush, the noise and bustle overwhelm you, "
         "leaving you feeling unsettled and distracted.",
         ("Try to calm down later",), ()),
    60: ("At the self-checkout, a glitchy kiosk stares at you.",
         ("Try to scan", "Ask for help"), ()),
    61: ("You press the scan button repeatedly.", ("Wait for it...",), ()),
    62: ("The machine prints your receipt flawlessly.",
         ("Collect receipt",), ("water +1",)),
    63: ("The machine jams and zaps you with a shock.", ("Step back",), ("sanity -1",)),
    64: ("An attendant helps reset the machine.", ("Thank them",), ("sanity +1",)),
    65: ("In the dairy aisle, you spot a shiny coupon on a milk carton.",
         ("Check the coupon", "Ignore it"), ()),
    66: ("You examine the coupon closely.", ("Scrutinize it",), ()),
    67: ("The coupon is valid \u2014 your day brightens with savings!",
         ("Smile",), ("sanity +1",)),
    68: ("The coupon is expired. But you really don't care", ("Sigh",), ("sanity +1",)),
    69: ("You walk away, feeling a slight twinge of regret.",
         ("Continue shopping",), ("sanity -1",)),
    70: ("The snack aisle whispers with eerie sounds.",
         ("Enter the aisle", "Hurry along"), ()),
    71: ("Inside, a spectral figure appears among the chips.",
         ("Talk to the figure",), ()),
    72: ("The spirit shares a secret recipe that eases your mind.",
         ("Listen intently",), ("sanity +3",)),
    73: ("The spirit vanishes, leaving you more unsettled. "
         "With a bottle of water in your hand.",
         ("Flee",), ("sanity -1", "water +1")),
    74: ("You rush by, yet a lingering chill shadows your steps.",
         ("Shake it off",), ("sanity -1",)),
    75: ("At the electronics section, a discounted gadget catches your eye.",
         ("Try to grab it", "Leave it"), ()),
    76: ("You approach a locked display case guarding the gadget.",
         ("Attempt to unlock it",), ()),
    77: ("You unlock the case and seize the burger.", ("Claim the food",), ("food +1",)),
    78: ("The case remains secure, and a small alarm startles you.",
         ("Step back",), ("sanity -1",)),
    79: ("You turn away from the gadget, surprisingly relieved.",
         ("Continue browsing",), ("sanity +1", "health +1")),
    80: ("In the beverage aisle, exotic drinks shimmer under neon lights.",
         ("Try a drink", "Skip the shelf"), ()),
    81: ("You twist open a vibrant bottle.", ("Take a sip",), ()),
    82: ("The drink rejuvenates you, washing away your stress.",
         ("Sip happily",), ("sanity +1", "health +1")),
    83: ("The drink is bitter, leaving an unwelcome aftertaste.",
         ("Wince",), ("health -1",)),
    84: ("You pass by, with a faint regret at missing a taste of adventure.",
         ("Move ahead",), ("sanity -1",)),
    85: ("Behind a hidden door, a quiet lounge offers a respite from the chaos.",
         ("Rest in the lounge", "Keep shopping"), ()),
    86: ("You sink into a comfy chair as soft music soothes your mind.",
         ("Relax fully",), ("sanity +2",)),
    87: ("You pass the lounge, but an uneasy tension lingers.",
         ("Hurry on",), ("sanity -1",)),
}

# key -> keys reached by each option; None ends the sequence.
_LINKS: Dict[_Key, Sequence[Optional[_Key]]] = {
    0: (1,), 1: (2,), 2: (3, None), 3: (4, 5), 4: (6,), 5: (6, None), 7: (None,),
    8: (9,), 9: (10,), 10: (11, 12), 11: (None,), 12: (None,),
    13: (14, 20), 14: (15,), 15: (16, 19), 16: (17, 18),
    20: (21,), 21: (22,), 22: (23, 24),
    25: (26, 30), 26: (27,), 27: (28,), 28: (29,),
    32: (33, 38), 33: (34, 37), 34: (35,), 38: (39, 40), 41: (None,),
    42: (43, 45), 43: (44,),
    46: (47, 49), 47: (48,),
    55: (56, 58), 56: (57,), 58: (59,),
    60: (61, 64), 65: (66, 69), 70: (71, 74), 75: (76, 79), 80: (81, 84),
    85: (86, 87),
}

# Luck checks, rolled in this order: (scene, threshold, on success, on failure).
# The outcome is appended to the scene's existing links.
_CHECKS: Tuple[Tuple[int, int, _Key, _Key], ...] = (
    (34, 4, 36, 41),
    (44, 4, _HATCH_OPENED, _HATCH_STUCK),
    (48, 5, 50, 51),
    (61, 4, 62, 63),
    (66, 4, 67, 68),
    (71, 4, 72, 73),
    (76, 4, 77, 78),
    (81, 4, 82, 83),
)


def build_supermarket_stories(
    difficulty: int = 0, rng: Optional[random.Random] = None
) -> List[Optional[Story]]:
    """Build the supermarket scenes, indexed as the game refers to them.

    Unused slots hold ``None``. Each luck check is rolled separately.
    """
    nodes: Dict[_Key, Story] = {
        key: Story(text, list(options), [], list(reward))
        for key, (text, options, reward) in _SCENES.items()
    }
    for key, targets in _LINKS.items():
        nodes[key].next = [None if t is None else nodes[t] for t in targets]
    for key, threshold, good, bad in _CHECKS:
        outcome = good if passes_check(difficulty, rng, threshold) else bad
        nodes[key].next.append(nodes[outcome])
    return [nodes.get(index) for index in range(_SCENE_COUNT)]
"""Night scenes where the shelter turns cold or hot."""

from __future__ import annotations

from typing import List

from .story import Story


def build_temperature_drop() -> List[Story]:
    """Return the cold-night scenes; the first is the entry scene."""
    ate = Story("You endured the cold night by eating some food",
                ["End conversation"], [None], ["food -1"])
    sick = Story("Your got sick because of the cold",
                 ["End conversation"], [None], ["health -1"])
    start = Story(
        "You are chilling in the room, but the room starts to get very chill "
        "and you could visibly see your breath",
        ["Eat food to get warmer", "Endured the cold"],
        [ate, sick],
    )
    return [start, ate, sick]


def build_temperature_increase() -> List[Story]:
    """Return the hot-night scenes; the first is the entry scene."""
    cooled = Story("You cooled yourself down and was able to get asleep",
                   ["End conversation"], [None], ["water -1"])
    sick = Story("Your got sick and tired because of the heat",
                 ["End conversation"], [None], ["health -1"])
    start = Story(
        "You are chilling in the room, but the room starts to get hot and you start to sweat",
        ["Put water on your face to cool down", "Endured the heat"],
        [cooled, sick],
    )
    return [start, cooled, sick]
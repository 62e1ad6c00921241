"""Fixed scenes used by the game's own interface: night fall, the boss fight, day end."""

from __future__ import annotations

from typing import List

from .story import Story


def build_ui_stories() -> List[Story]:
    """Return the interface scenes, indexed as the game refers to them."""
    ui = [
        Story("You HAVE to go back to the shelter now because it is NIGHT",
              ["Start Night Time"], [None]),
        Story("☀The dawn is breaking after a sweat sweat night☀", ["Wake up"], [None]),
        Story("A giant zombie is standing in front of you. You feel like it's all going to end",
              ["Check what you got"], [None]),
        Story("", ["Start fighting"], [None]),
        Story("The boss looks aggressive! Fortunately you got bullets.",
              ["Shoot at the boss"], [None]),
        Story("Head shot!!! You dealt 10 damage to the boss.", ["Nice!"], [None]),
        Story("Nice shot. You dealt 3 damage to the boss.", ["Continue fighting"], [None]),
        Story("Oops, you ran out of bullets.", ["Hit the boss with bare hands"], [None]),
        Story("You dealt 1 damage to the boss.", ["Continue fighting"], [None]),
        Story("The boss died!", ["Check its body"], [None]),
        Story("There is a map on its body which guides to a safe place.",
              ["A new life is about to begin..."], [None]),
        Story("", ["The boss rushed towards you"], [None]),
        Story("The boss swings its fist and hit you, causing 1 damage.", ["Ouch!"], [None]),
        Story("", ["It's your turn now"], [None]),
        Story("You were seriously injured and collapsed.", ["Oh no..."], [None]),
        Story("", ["Don't lose heart, try again!"], [None]),
        Story("At the end of the day, you are still alive.", ["Consume Supply"]),
        Story("", ["Ok"]),
        Story("", ["Game over"], [None]),
    ]
    ui[16].next.append(ui[17])
    return ui
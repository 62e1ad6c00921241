"""Story nodes and the random helpers used to wire them together."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(eq=False)
class Story:
    """One scene: its text, the choices offered, and where each choice leads.

    ``next`` holds one entry per option. An entry of ``None`` ends the
    sequence when that option is chosen. ``reward`` holds effect strings such
    as ``"health +1"`` or ``"inventory crowbar"``.
    """

    text: str = ""
    options: List[str] = field(default_factory=list)
    next: List[Optional["Story"]] = field(default_factory=list, repr=False)
    reward: List[str] = field(default_factory=list)

    def follow(self, choice: int) -> Optional["Story"]:
        """Return the scene reached by picking option ``choice``.

        Raises IndexError if ``choice`` is not one of the offered options.
        Options without a linked scene lead nowhere and give ``None``.
        """
        if not 0 <= choice < len(self.options):
            raise IndexError(
                f"choice {choice} out of range for {len(self.options)} option(s)"
            )
        if choice >= len(self.next):
            return None
        return self.next[choice]

    def is_ending(self) -> bool:
        """True when no option leads to another scene."""
        return not any(self.next)


def new_stories(count: int) -> List[Story]:
    """Return ``count`` fresh, empty scenes."""
    if count < 0:
        raise ValueError("count must not be negative")
    return [Story() for _ in range(count)]


def random_int(low: int, high: int, rng: Optional[random.Random] = None) -> int:
    """Return a random integer in the inclusive range ``low``..``high``."""
    if high < low:
        raise ValueError(f"empty range: {low}..{high}")
    source = rng if rng is not None else random
    return source.randrange(high - low + 1) + low


def passes_check(
    difficulty: int, rng: Optional[random.Random] = None, threshold: int = 4
) -> bool:
    """Roll a digit 0-9; the check passes when it beats ``threshold + difficulty``."""
    source = rng if rng is not None else random
    return source.randrange(10) > threshold + difficulty
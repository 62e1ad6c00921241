"""A small centred curses dialog asking whether to save the game."""

from __future__ import annotations

import curses
from typing import NamedTuple, Optional, Union

SAVE_PROMPT = "Save game? (Y/N)"


class PromptGeometry(NamedTuple):
    """Size and position of the dialog window and of its text."""

    height: int
    width: int
    top: int
    left: int
    text_row: int
    text_col: int


def _half(value: int) -> int:
    # Division that truncates toward zero, as screen maths expects.
    return int(value / 2)


def interpret_key(key: Union[int, str]) -> Optional[bool]:
    """Map a key press to True (yes), False (no) or None (ignored)."""
    if isinstance(key, int):
        if key < 0 or key > 0x10FFFF:
            return None
        key = chr(key)
    key = key.lower()
    if key == "y":
        return True
    if key == "n":
        return False
    return None


def prompt_geometry(max_y: int, max_x: int, prompt: str = SAVE_PROMPT) -> PromptGeometry:
    """Work out where a bordered dialog holding ``prompt`` goes on the screen."""
    width = min(len(prompt) + 4, max_x - 4)
    height = min(5, max_y - 4)
    return PromptGeometry(
        height=height,
        width=width,
        top=_half(max_y - height),
        left=_half(max_x - width),
        text_row=_half(height),
        text_col=_half(width - len(prompt)),
    )


def ask_for_saving(stdscr) -> bool:
    """Show the save dialog and wait for Y or N; return True for yes."""
    max_y, max_x = stdscr.getmaxyx()
    geo = prompt_geometry(max_y, max_x, SAVE_PROMPT)
    win = curses.newwin(geo.height, geo.width, geo.top, geo.left)
    try:
        win.keypad(True)
        win.box()
        try:
            win.addstr(geo.text_row, geo.text_col, SAVE_PROMPT)
        except curses.error:
            pass
        win.refresh()
        while True:
            key = win.getch()
            if key == curses.KEY_RESIZE:
                stdscr.redrawwin()
                stdscr.refresh()
                continue
            answer = interpret_key(key)
            if answer is not None:
                return answer
    finally:
        del win
        stdscr.touchwin()
        stdscr.refresh()
"""Story graphs for locations, night events and interface messages of a
zombie-apocalypse survival game, plus a curses save prompt."""

__version__ = "0.1.0"
# termportal/core/keys.py

"""
Keyboard decoding for termportal.

Raw curses key codes are mapped onto a small set of named keys before they
reach the view controller. Aliases (WASD, vim keys) are resolved here, so the
controller and the game only ever see Key values.
"""

import curses
import enum
from typing import Dict, Optional

from ..games.snake import Direction


class Key(enum.Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    SELECT = "select"
    BACK = "back"
    QUIT = "quit"
    TERMINATE = "terminate"


ESC = 27
CTRL_C = 3


def _chars(chars: str) -> list:
    return [ord(c) for c in chars]


_KEYMAP: Dict[int, Key] = {}
for _codes, _key in [
    ([curses.KEY_UP] + _chars("wWkK"), Key.UP),
    ([curses.KEY_DOWN] + _chars("sSjJ"), Key.DOWN),
    ([curses.KEY_LEFT] + _chars("aAhH"), Key.LEFT),
    ([curses.KEY_RIGHT] + _chars("dDlL"), Key.RIGHT),
    ([curses.KEY_ENTER] + _chars("\n\r "), Key.SELECT),
    ([ESC], Key.BACK),
    (_chars("qQ"), Key.QUIT),
    ([CTRL_C], Key.TERMINATE),
]:
    for _code in _codes:
        _KEYMAP[_code] = _key

_DIRECTIONS = {
    Key.UP: Direction.UP,
    Key.DOWN: Direction.DOWN,
    Key.LEFT: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
}


def decode_key(code: int) -> Optional[Key]:
    """Map a curses key code to a Key, or None for keys we do not use."""
    return _KEYMAP.get(code)


def key_direction(key: Key) -> Optional[Direction]:
    """The heading a directional key stands for, None for other keys."""
    return _DIRECTIONS.get(key)

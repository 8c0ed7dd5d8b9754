"""Keyboard state tracking: held keys, presses, releases and hold counts."""

from __future__ import annotations

from collections import defaultdict
from enum import Enum, auto
from typing import Iterable


class Key(Enum):
    """The keys the game listens to."""

    LEFT = auto()
    RIGHT = auto()
    SPACE = auto()
    RETURN = auto()
    ESCAPE = auto()


def _wrap_byte(value: int) -> int:
    # Hold counts live in a signed byte and wrap around.
    return (value + 128) % 256 - 128


class KeyState:
    """Tracks keyboard state from one frame to the next."""

    def __init__(self):
        self._current: frozenset[Key] = frozenset()
        self._previous: frozenset[Key] = frozenset()
        self._down: frozenset[Key] = frozenset()
        self._up: frozenset[Key] = frozenset()
        self._keep: defaultdict[Key, int] = defaultdict(int)

    def update(self, pressed: Iterable[Key]):
        """Start a new frame with the keys that are held now."""
        self._previous = self._current
        self._current = frozenset(pressed)
        for key in self._current & self._previous:
            self._keep[key] = _wrap_byte(self._keep[key] + 1)
        for key in self._current ^ self._previous:
            self._keep[key] = 0
        self._down = self._current - self._previous
        self._up = self._previous - self._current

    def is_pressed(self, key):
        """Return True while the key is held."""
        return key in self._current

    def is_key_up(self, key):
        """Return True on the frame the key was released."""
        return key in self._up

    def is_key_down(self, key):
        """Return True on the frame the key was pressed."""
        return key in self._down

    def keep_count(self, key):
        """Return for how many frames the key has stayed held since it was pressed."""
        return self._keep[key]
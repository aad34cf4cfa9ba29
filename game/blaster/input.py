"""
Keyboard state: which named keys are currently held
"""

from __future__ import annotations

from typing import Iterable, Set

KEY_NAMES = ("UP", "DOWN", "LEFT", "RIGHT", "SPACE", "w", "a", "s", "d")

# Player movement: each entry moves along one axis, any listed key triggers it
MOVE_KEYS = {
    "down": ("DOWN", "s"),
    "up": ("UP", "w"),
    "left": ("LEFT", "a"),
    "right": ("RIGHT", "d"),
}
FIRE_KEY = "SPACE"


class InputState:
    """Boolean held-state for the fixed key vocabulary"""

    def __init__(self, held: Iterable[str] = ()):
        self._held: Set[str] = set()
        for name in held:
            self.press(name)

    def press(self, name: str):
        if name in KEY_NAMES:
            self._held.add(name)

    def release(self, name: str):
        self._held.discard(name)

    def clear(self):
        """Forget every held key (e.g. when the window loses focus)"""
        self._held.clear()

    def set_held(self, names: Iterable[str]):
        self.clear()
        for name in names:
            self.press(name)

    def is_down(self, name: str) -> bool:
        return name in self._held

    def any_down(self, names: Iterable[str]) -> bool:
        return any(name in self._held for name in names)

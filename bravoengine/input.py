"""Keyboard and mouse state tracking across frames."""

from __future__ import annotations

from itertools import zip_longest
from typing import Iterable, List, Union

from .inputs import Key, Mouse, MouseButton, Point

KeyCode = Union[Key, int]


def _as_key(index: int) -> KeyCode:
    try:
        return Key(index)
    except ValueError:
        return index


def _copy_mouse(mouse: Mouse) -> Mouse:
    return Mouse(
        position=Point(mouse.position.x, mouse.position.y),
        left=bool(mouse.left),
        middle=bool(mouse.middle),
        right=bool(mouse.right),
    )


class Input:
    """Holds the current and previous keyboard and mouse state.

    Call :meth:`update` once per frame with the keyboard state (one pressed flag
    per scancode) and a mouse snapshot; then query which keys and buttons are
    held, were pressed this frame, or were released this frame.
    """

    def __init__(self, keyboard: Iterable[int] | None = None) -> None:
        if keyboard is None:
            self._current_keys: List[int] = [0] * int(Key.NUMBER_OF_KEYS)
        else:
            self._current_keys = [int(bool(state)) for state in keyboard]
        self._previous_keys: List[int] = list(self._current_keys)
        self._down_keys: List[KeyCode] = []
        self._up_keys: List[KeyCode] = []
        self._held_keys: List[KeyCode] = []
        self._current_mouse = Mouse()
        self._previous_mouse = Mouse()

    def update(self, keyboard: Iterable[int], mouse: Mouse) -> None:
        """Take in a new frame of keyboard and mouse state."""
        self._current_keys = [int(bool(state)) for state in keyboard]
        pairs = list(enumerate(zip_longest(self._current_keys, self._previous_keys, fillvalue=0)))
        self._up_keys = [_as_key(i) for i, (cur, prev) in pairs if cur == 0 and prev == 1]
        self._down_keys = [_as_key(i) for i, (cur, prev) in pairs if cur == 1 and prev == 0]
        self._held_keys = [_as_key(i) for i, cur in enumerate(self._current_keys) if cur]

        self._previous_mouse = self._current_mouse
        self._current_mouse = _copy_mouse(mouse)

        self._previous_keys = list(self._current_keys)

    def held_keys(self) -> List[KeyCode]:
        return list(self._held_keys)

    def down_keys(self) -> List[KeyCode]:
        return list(self._down_keys)

    def up_keys(self) -> List[KeyCode]:
        return list(self._up_keys)

    def any_key(self) -> bool:
        return bool(self._held_keys)

    def any_key_down(self) -> bool:
        return bool(self._down_keys)

    def mouse_position(self) -> Point:
        position = self._current_mouse.position
        return Point(position.x, position.y)

    def get_key(self, key: KeyCode) -> bool:
        """True while ``key`` is held."""
        return key in self._held_keys

    def get_key_down(self, key: KeyCode) -> bool:
        """True during the frame ``key`` was pressed."""
        return key in self._down_keys

    def get_key_up(self, key: KeyCode) -> bool:
        """True during the frame ``key`` was released."""
        return key in self._up_keys

    @staticmethod
    def _button(mouse: Mouse, which: MouseButton) -> bool:
        if which == MouseButton.LEFT:
            return mouse.left
        if which == MouseButton.MIDDLE:
            return mouse.middle
        if which == MouseButton.RIGHT:
            return mouse.right
        return False

    def get_mouse_button(self, which: MouseButton) -> bool:
        """True while the mouse button is held."""
        return self._button(self._current_mouse, which)

    def get_mouse_button_down(self, which: MouseButton) -> bool:
        """True during the frame the mouse button was pressed."""
        return not self._button(self._previous_mouse, which) and self._button(self._current_mouse, which)

    def get_mouse_button_up(self, which: MouseButton) -> bool:
        """True during the frame the mouse button was released."""
        return self._button(self._previous_mouse, which) and not self._button(self._current_mouse, which)
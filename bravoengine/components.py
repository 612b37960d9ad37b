"""Base component type and the scriptable behaviour components."""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any, Callable, Optional

if TYPE_CHECKING:
    from .gameobject import GameObject

Hook = Callable[..., Any]


def _invoke(hook: Optional[Hook], *args: Any) -> None:
    """Call ``hook`` with ``args`` when one was supplied."""
    if hook is not None:
        hook(*args)


class Component:
    """Something attached to a game object; inactive components have no effect."""

    def __init__(self, tag: str = "defaultComponent") -> None:
        self.tag = tag
        self.active = True
        self.game_object: Optional[GameObject] = None

    def clone(self) -> Component:
        """A shallow copy of this component, still pointing at the same game object."""
        return copy.copy(self)


class BehaviourScript(Component):
    """User logic run by the engine.

    Behaviour is added either by overriding the hooks in a subclass or by
    passing callables for them; without either the hooks do nothing.
    """

    def __init__(
        self,
        tag: str = "defaultBehaviourScript",
        *,
        start: Optional[Hook] = None,
        update: Optional[Hook] = None,
        collide: Optional[Hook] = None,
    ) -> None:
        super().__init__(tag)
        self.script_started = False
        self._start = start
        self._update = update
        self._collide = collide

    def on_start(self) -> None:
        """Called once before the first update."""
        _invoke(self._start)

    def on_update(self) -> None:
        """Called every frame."""
        _invoke(self._update)

    def on_collide(self, game_object: Optional[GameObject]) -> None:
        """Called when the owning object collides with ``game_object``."""
        _invoke(self._collide, game_object)


class ButtonBehaviourScript(Component):
    """User logic for button interaction.

    Behaviour is added either by overriding the hooks in a subclass or by
    passing callables for them; without either the hooks do nothing.
    """

    def __init__(
        self,
        tag: str = "defaultButtonBehaviourScript",
        *,
        pressed: Optional[Hook] = None,
        released: Optional[Hook] = None,
        hover: Optional[Hook] = None,
        unhover: Optional[Hook] = None,
    ) -> None:
        super().__init__(tag)
        self._pressed = pressed
        self._released = released
        self._hover = hover
        self._unhover = unhover

    def on_button_pressed(self) -> None:
        """Called when the button is pressed."""
        _invoke(self._pressed)

    def on_button_released(self) -> None:
        """Called when the button is released."""
        _invoke(self._released)

    def on_button_hover(self) -> None:
        """Called when the pointer starts hovering the button."""
        _invoke(self._hover)

    def on_button_unhover(self) -> None:
        """Called when the pointer leaves the button."""
        _invoke(self._unhover)
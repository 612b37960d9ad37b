"""User-interface objects: buttons, text labels and camera debug overlay settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from .gameobject import GameObject
from .geometry import Color, Vector2

Callback = Callable[[], None]


@dataclass
class CameraDebugOverlay:
    """What a camera draws on top of the scene for debugging."""

    render_camera_viewport: bool = False
    render_colliders: bool = False
    show_fps: bool = False


@dataclass
class BoundingBox:
    """An axis-aligned box given by its top-left and bottom-right corners."""

    top_left: Vector2 = field(default_factory=Vector2)
    bottom_right: Vector2 = field(default_factory=Vector2)

    def contains(self, point: Vector2) -> bool:
        """True if ``point`` lies inside the box or on its edge."""
        return (
            self.top_left.x <= point.x <= self.bottom_right.x
            and self.top_left.y <= point.y <= self.bottom_right.y
        )


class UIObject(GameObject):
    """A game object that belongs to the user interface."""


class Button(UIObject):
    """A rectangular, clickable UI element with press and release callbacks."""

    def __init__(self, name: str = "", tag: str = "") -> None:
        super().__init__(name, tag)
        self.width = 0.0
        self.height = 0.0
        self.interactable = True
        self.hovered = False
        self._on_click: Optional[Callback] = None
        self._on_release: Optional[Callback] = None

    def set_on_click_callback(self, callback: Optional[Callback]) -> None:
        self._on_click = callback

    def activate_on_click_callback(self) -> None:
        """Run the click callback, if one is set and the button is active."""
        if self._on_click is not None and self.active:
            self._on_click()

    def set_on_release_callback(self, callback: Optional[Callback]) -> None:
        self._on_release = callback

    def activate_on_release_callback(self) -> None:
        """Run the release callback, if one is set and the button is active."""
        if self._on_release is not None and self.active:
            self._on_release()

    def bounding_box(self) -> BoundingBox:
        """The area the button covers, from its position extending by its size."""
        position = self.transform.position
        top_left = Vector2(position.x, position.y)
        return BoundingBox(top_left, top_left + Vector2(self.width, self.height))


class Text(UIObject):
    """A text label drawn with a font, colour and scale on a render layer."""

    def __init__(
        self,
        text: str = "",
        font: str = "",
        color: Optional[Color] = None,
        location: Optional[Vector2] = None,
        scale: Optional[Vector2] = None,
    ) -> None:
        super().__init__()
        self.text = text
        self.font = font
        self.color = color if color is not None else Color(0, 0, 0)
        self.scale = Vector2(scale.x, scale.y) if scale is not None else Vector2(1.0, 1.0)
        self.layer = 0
        if location is not None:
            self.transform.position = Vector2(location.x, location.y)
"""Basic value types: vectors, transforms, colours and float rectangles."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass
class Vector2:
    """A two-dimensional vector in world units."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __truediv__(self, value: float) -> Vector2:
        return Vector2(self.x / value, self.y / value)


def _copy(vector: Vector2) -> Vector2:
    return Vector2(vector.x, vector.y)


@dataclass
class Transform:
    """Position, rotation in degrees and scale of an object in 2D."""

    position: Vector2 = field(default_factory=Vector2)
    rotation: float = 0.0
    scale: Vector2 = field(default_factory=lambda: Vector2(1.0, 1.0))

    def __post_init__(self) -> None:
        # Transforms own their vectors; never alias the caller's.
        self.position = _copy(self.position)
        self.scale = _copy(self.scale)

    def __add__(self, other: Transform) -> Transform:
        if not isinstance(other, Transform):
            return NotImplemented
        return Transform(
            self.position + other.position,
            self.rotation + other.rotation,
            self.scale + other.scale,
        )

    def __truediv__(self, value: float) -> Transform:
        return Transform(self.position / value, self.rotation / value, self.scale / value)

    def translate(self, delta: Vector2) -> None:
        """Move the position by ``delta``."""
        self.position.x += delta.x
        self.position.y += delta.y

    def rotate(self, delta_rotation: float) -> None:
        """Rotate by ``delta_rotation`` degrees, wrapping values above 360 or below 0."""
        self.rotation += delta_rotation
        if self.rotation > 360:
            self.rotation = math.fmod(self.rotation, 360)
        elif self.rotation < 0:
            self.rotation = math.fmod(self.rotation, 360) + 360

    def scale_by(self, scale_factor: Vector2) -> None:
        """Multiply the scale component-wise by ``scale_factor``."""
        self.scale.x *= scale_factor.x
        self.scale.y *= scale_factor.y


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels; values wrap into 0..255."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            object.__setattr__(self, name, int(getattr(self, name)) & 0xFF)


@dataclass
class FRect:
    """A rectangle with float coordinates and size."""

    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0
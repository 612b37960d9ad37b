"""Core building blocks of a small 2D game engine: geometry, timing, input, events,
components, game objects, tile maps, pathfinding and UI elements."""

__version__ = "0.1.0"
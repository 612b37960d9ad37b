# bravoengine

The core building blocks of a small 2D game engine, in plain Python with no
third-party dependencies.

## What is inside

- `bravoengine.geometry`: `Vector2`, `Transform` (position, rotation in degrees
  that `rotate` wraps into range, scale), `Color` (RGBA, alpha defaults to 255,
  channels wrap into 0..255) and `FRect`.
- `bravoengine.clock`: `Clock`, which tracks frame delta time, elapsed `ticks`
  and a `time_dilation` factor, and `ScopedTimer`, a context manager that prints
  how long its block took in milliseconds and keeps it in `elapsed_ms`.
- `bravoengine.inputs`: the data types `Key`, `MouseButton`, `Mouse` and `Point`.
- `bravoengine.input`: `Input`, which is fed one keyboard snapshot (a pressed flag
  per scancode) and one `Mouse` per frame through `update`, and then answers
  `get_key`, `get_key_down`, `get_key_up`, `get_mouse_button`,
  `get_mouse_button_down`, `get_mouse_button_up`, `any_key`, `any_key_down` and
  `mouse_position`.
- `bravoengine.events`: `EventType`, `Event` and `EventManager`, a small
  publish/subscribe dispatcher with `subscribe`, `dispatch` and `handle_events`
  (which dispatches every event of an iterable in order).
- `bravoengine.components`: `Component`, `BehaviourScript` and
  `ButtonBehaviourScript`. Script hooks are added by subclassing or by passing
  callables such as `start=`, `update=`, `pressed=`; without either they do
  nothing.
- `bravoengine.gameobject`: `GameObject`, a container for components sharing one
  transform, with a parent/child hierarchy and `clone`.
- `bravoengine.tilemap`: `TileMapParser`, which reads tile maps saved as JSON
  (tilesets, tile layers, object layers, layer and object properties, and tile
  colliders) into a `TileMapData`, and raises `TileMapError` on bad input.
- `bravoengine.pathfinding`: `Pathfinding`, an A* search over a grid graph given
  as an adjacency list, using Manhattan distance.
- `bravoengine.ui`: `UIObject`, `Button` (click and release callbacks and a
  `BoundingBox`), `Text` and `CameraDebugOverlay`.

## Installing

```
pip install .
```

To install with the test tools and run the tests:

```
pip install .[test]
pytest
```

## A short example

```python
from bravoengine.geometry import Transform, Vector2
from bravoengine.pathfinding import Pathfinding
from bravoengine.ui import Button

graph = {0: [1, 3], 1: [0, 2, 4], 2: [1, 5], 3: [0, 4, 6], 4: [1, 3, 5, 7],
         5: [2, 4, 8], 6: [3, 7], 7: [4, 6, 8], 8: [5, 7]}
print(Pathfinding(graph, 3, 3).find_path(0, 8))   # [0, 1, 2, 5, 8]

button = Button()
button.width, button.height = 100, 50
button.transform = Transform(Vector2(10, 20))
button.set_on_click_callback(lambda: print("clicked"))
if button.bounding_box().contains(Vector2(15, 25)):
    button.activate_on_click_callback()
```

An unreachable goal gives an empty path.

Reading a tile map:

```python
from bravoengine.tilemap import TileMapParser

parser = TileMapParser("level1.json")
data = parser.parse()            # also available afterwards as parser.tile_map_data
print(data.layer_names, sorted(data.tile_info_map))
```

## What it does not do

This package holds the engine's data types and logic only. It opens no window,
draws nothing, plays no sound, simulates no physics and manages no scenes or game
loop. It does not read the keyboard, mouse or operating-system events itself:
`Input.update` and `EventManager.handle_events` are given their state and events
by the caller.
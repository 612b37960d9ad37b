"""Parsing of JSON tile maps: tile layers, object layers, tilesets and tile colliders."""

from __future__ import annotations

import json
import os
import struct
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple, Union


class TileMapError(RuntimeError):
    """Raised when a tile map file cannot be read or is malformed."""


@dataclass
class ColliderData:
    """A rectangular collider inside a tile, in tile-local pixels."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0


@dataclass
class MapObject:
    """An object placed on an object layer."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    type: str = ""
    name: str = ""
    properties: Dict[str, str] = field(default_factory=dict)


@dataclass
class TileInfo:
    """Where a tile is found in its tileset image, and the colliders it carries."""

    tileset_name: str
    position: Tuple[int, int]
    colliders: List[ColliderData] = field(default_factory=list)


@dataclass
class TileMapData:
    """Everything extracted from a tile map file."""

    layers: List[List[List[int]]] = field(default_factory=list)
    layer_names: List[str] = field(default_factory=list)
    layer_properties: Dict[str, Dict[str, str]] = field(default_factory=dict)
    map_objects: List[MapObject] = field(default_factory=list)
    tile_info_map: Dict[int, TileInfo] = field(default_factory=dict)


def _to_float32(value: Any) -> float:
    return struct.unpack("f", struct.pack("f", float(value)))[0]


def _require(mapping: Any, key: str, context: str) -> Any:
    if not isinstance(mapping, dict) or key not in mapping:
        raise TileMapError(f"Missing '{key}' in {context}")
    return mapping[key]


def _property_value(prop: Dict[str, Any], strict: bool) -> str:
    kind = prop.get("type")
    value = prop.get("value")
    if kind == "bool":
        return "true" if value else "false"
    if kind == "int":
        return str(int(value))
    if kind == "float":
        return f"{_to_float32(value):.6f}"
    if kind == "string":
        return str(value)
    if strict:
        raise TileMapError(f"Unhandled property type: {kind}")
    return json.dumps(value, separators=(",", ":"))


class TileMapParser:
    """Reads a JSON tile map file and builds a :class:`TileMapData`."""

    def __init__(self, file_path: Union[str, os.PathLike]) -> None:
        self.file_path = os.fspath(file_path)
        self._tilesets: List[Dict[str, Any]] = []
        self._data = TileMapData()

    def parse(self) -> TileMapData:
        """Read and parse the file; returns the resulting tile map data."""
        try:
            with open(self.file_path, encoding="utf-8") as handle:
                content = handle.read()
        except OSError as error:
            raise TileMapError(f"Could not open file: {self.file_path}") from error

        if not content:
            raise TileMapError(f"File is empty: {self.file_path}")

        try:
            document = json.loads(content)
        except json.JSONDecodeError as error:
            raise TileMapError(f"Invalid JSON: {self.file_path}") from error

        if document is None:
            raise TileMapError(f"File is empty: {self.file_path}")
        if not isinstance(document, dict) or "tilesets" not in document:
            raise TileMapError(f"Missing 'tilesets' in JSON: {self.file_path}")
        if "layers" not in document:
            raise TileMapError(f"Missing 'layers' in JSON: {self.file_path}")

        self._tilesets.extend(document["tilesets"])

        for layer in document["layers"]:
            if not isinstance(layer, dict) or "type" not in layer:
                raise TileMapError("Layer missing 'type' key")
            if layer["type"] == "tilelayer":
                self._parse_tile_layer(layer)
            elif layer["type"] == "objectgroup":
                self._parse_object_layer(layer)

        self._store_tile_info()
        return self._data

    def _parse_tile_layer(self, layer: Dict[str, Any]) -> None:
        context = f"tile layer of {self.file_path}"
        width = int(_require(layer, "width", context))
        height = int(_require(layer, "height", context))
        data = _require(layer, "data", context)
        if len(data) < width * height:
            raise TileMapError(f"Tile layer data too short in JSON: {self.file_path}")
        grid = [[int(gid) for gid in data[row * width:(row + 1) * width]] for row in range(height)]
        self._data.layers.append(grid)
        if "name" in layer:
            name = str(layer["name"])
            self._data.layer_names.append(name)
            self._parse_layer_properties(layer, name)

    def _parse_layer_properties(self, layer: Dict[str, Any], layer_name: str) -> None:
        if "properties" not in layer:
            return
        properties = {
            str(prop["name"]): _property_value(prop, strict=False) for prop in layer["properties"]
        }
        self._data.layer_properties[layer_name] = properties

    def _parse_object_layer(self, layer: Dict[str, Any]) -> None:
        objects = layer.get("objects")
        if not isinstance(objects, list):
            raise TileMapError(
                f"Object layer 'objects' is missing or not an array in JSON: {self.file_path}"
            )
        context = f"map object of {self.file_path}"
        for obj in objects:
            map_object = MapObject(
                x=_require(obj, "x", context),
                y=_require(obj, "y", context),
                width=_require(obj, "width", context),
                height=_require(obj, "height", context),
                type=obj.get("type", ""),
                name=obj.get("name", ""),
            )
            for prop in obj.get("properties", []):
                map_object.properties[str(prop["name"])] = _property_value(prop, strict=True)
            self._data.map_objects.append(map_object)

    def _find_tileset(self, gid: int) -> Dict[str, Any] | None:
        for tileset in self._tilesets:
            first_gid = int(tileset["firstgid"])
            if first_gid <= gid < first_gid + int(tileset["tilecount"]):
                return tileset
        return None

    def tile_position(self, gid: int) -> Tuple[int, int]:
        """Pixel position of a global tile id inside its tileset image."""
        tileset = self._find_tileset(gid)
        if tileset is None:
            raise TileMapError("gID not found in any tileset")
        local_id = gid - int(tileset["firstgid"])
        columns = int(tileset["columns"])
        x = (local_id % columns) * int(tileset["tilewidth"])
        y = (local_id // columns) * int(tileset["tileheight"])
        return x, y

    def _tile_colliders(self, tileset: Dict[str, Any], gid: int) -> List[ColliderData]:
        local_id = gid - int(tileset["firstgid"])
        colliders: List[ColliderData] = []
        for tile in tileset.get("tiles", []):
            if tile.get("id") != local_id or "objectgroup" not in tile:
                continue
            for obj in tile["objectgroup"]["objects"]:
                try:
                    colliders.append(
                        ColliderData(
                            float(obj["x"]),
                            float(obj["y"]),
                            float(obj["width"]),
                            float(obj["height"]),
                        )
                    )
                except (KeyError, TypeError, ValueError) as error:
                    raise TileMapError(f"Error parsing collider for gID {gid}: {error}") from error
        return colliders

    def _store_tile_info(self) -> None:
        if not self._data.layers:
            raise TileMapError(f"No layers found in JSON: {self.file_path}")
        used_gids = {gid for layer in self._data.layers for row in layer for gid in row if gid != 0}
        for gid in sorted(used_gids):
            tileset = self._find_tileset(gid)
            if tileset is None:
                continue
            self._data.tile_info_map[gid] = TileInfo(
                tileset_name=str(tileset["image"]),
                position=self.tile_position(gid),
                colliders=self._tile_colliders(tileset, gid),
            )

    @property
    def tile_map_data(self) -> TileMapData:
        """The data gathered by :meth:`parse`."""
        return self._data
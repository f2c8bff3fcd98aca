"""Parser for floor plan JSON files.

This module reads JSON files describing a plan graph into House objects
and writes houses and computed boundaries back to plain dictionaries.

Expected layout::

    {
      "name": "demo",
      "nodes": {"0": [0.0, 0.0], "1": {"x": 4.0, "y": 0.0}},
      "walls": {"0": {"start": 0, "end": 1, "thickness": 0.2, "kind": "exterior"}},
      "holes": {"0": {"wall_id": 0, "distance": 1.0, "width": 0.9, "kind": "door"}},
      "rooms": {"0": {"kind": "living", "walls": [0, 1, 2, 3]}}
    }
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable

from ..core.model import EntityId, Hole, House, Node, Point, Room, RoomBoundary, Wall
from ..engine.validators import validate_house


def parse_id(raw: Any) -> EntityId:
    """Normalise an identifier: integers and digit-only strings become ints."""
    if isinstance(raw, bool):
        raise ValueError(f"Invalid identifier: {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        text = raw.strip()
        if text.isdigit():
            return int(text)
        if text:
            return text
    raise ValueError(f"Invalid identifier: {raw!r}")


def _parse_point(raw: Any) -> Point:
    """Parse ``[x, y]`` or ``{"x": .., "y": ..}`` into a Point."""
    if isinstance(raw, dict):
        return Point(float(raw["x"]), float(raw["y"]))
    x, y = raw
    return Point(float(x), float(y))


def house_from_dict(data: Dict[str, Any]) -> House:
    """Build a House from its JSON dictionary form.

    Raises:
        ValueError: If an entry is malformed.
        InvalidHouse: If the house violates referential integrity.
    """
    nodes = {}
    for raw_id, node_data in data.get("nodes", {}).items():
        try:
            node_id = parse_id(raw_id)
            nodes[node_id] = Node(id=node_id, point=_parse_point(node_data))
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid node data for {raw_id}: {e}") from e

    walls = {}
    for raw_id, wall_data in data.get("walls", {}).items():
        try:
            wall_id = parse_id(raw_id)
            walls[wall_id] = Wall(
                id=wall_id,
                start=parse_id(wall_data["start"]),
                end=parse_id(wall_data["end"]),
                thickness=float(wall_data.get("thickness", 0.0)),
                kind=wall_data.get("kind", ""),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid wall data for {raw_id}: {e}") from e

    holes = {}
    for raw_id, hole_data in data.get("holes", {}).items():
        try:
            hole_id = parse_id(raw_id)
            holes[hole_id] = Hole(
                id=hole_id,
                wall_id=parse_id(hole_data["wall_id"]),
                distance=float(hole_data["distance"]),
                width=float(hole_data["width"]),
                kind=hole_data.get("kind", ""),
                direction=hole_data.get("direction", ""),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid hole data for {raw_id}: {e}") from e

    rooms = {}
    for raw_id, room_data in data.get("rooms", {}).items():
        try:
            room_id = parse_id(raw_id)
            rooms[room_id] = Room(
                id=room_id,
                wall_ids=tuple(parse_id(w) for w in room_data.get("walls", [])),
                kind=room_data.get("kind", ""),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid room data for {raw_id}: {e}") from e

    house = House(
        nodes=nodes,
        walls=walls,
        rooms=rooms,
        holes=holes,
        name=data.get("name", ""),
    )
    validate_house(house)
    return house


def load_house(path: str) -> House:
    """Load a house from a JSON file.

    Args:
        path: Path to the JSON file containing house data.

    Returns:
        House object representing the floor plan.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the JSON data is invalid or malformed.
        InvalidHouse: If the house violates referential integrity.
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    with open(file_path, encoding="utf-8") as f:
        data = json.load(f)

    return house_from_dict(data)


def house_to_dict(house: House) -> Dict[str, Any]:
    """Convert a house to its JSON dictionary form."""
    return {
        "name": house.name,
        "nodes": {
            str(node_id): [node.x, node.y] for node_id, node in house.nodes.items()
        },
        "walls": {
            str(wall_id): {
                "start": wall.start,
                "end": wall.end,
                "thickness": wall.thickness,
                "kind": wall.kind,
            }
            for wall_id, wall in house.walls.items()
        },
        "holes": {
            str(hole_id): {
                "wall_id": hole.wall_id,
                "distance": hole.distance,
                "width": hole.width,
                "kind": hole.kind,
                "direction": hole.direction,
            }
            for hole_id, hole in house.holes.items()
        },
        "rooms": {
            str(room_id): {"kind": room.kind, "walls": list(room.wall_ids)}
            for room_id, room in house.rooms.items()
        },
    }


def save_house(house: House, output_path: str) -> None:
    """Save a house object to a JSON file."""
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(house_to_dict(house), f, indent=2)


def boundaries_to_dict(boundaries: Iterable[RoomBoundary]) -> list:
    """Convert boundaries to JSON-friendly dictionaries."""
    return [
        {
            "room_id": boundary.room_id,
            "orientation": boundary.orientation.value,
            "edges": [
                {
                    "wall_id": edge.wall_id,
                    "reversed": edge.reversed,
                    "source": edge.source,
                    "target": edge.target,
                    "repeated": edge.repeated,
                }
                for edge in boundary.edges
            ],
        }
        for boundary in boundaries
    ]

"""Tests for io/parser.py."""
import json

import pytest

from plan2d.core.errors import InvalidHouse
from plan2d.core.model import Point
from plan2d.engine.api import compute_room_boundaries
from plan2d.io.parser import (
    boundaries_to_dict,
    house_from_dict,
    house_to_dict,
    load_house,
    parse_id,
    save_house,
)

HOUSE_DATA = {
    "name": "demo",
    "nodes": {"0": [0, 0], "1": {"x": 4, "y": 0}, "2": [4, 4], "3": [0, 4]},
    "walls": {
        "0": {"start": 0, "end": 1, "thickness": 0.2, "kind": "exterior"},
        "1": {"start": "1", "end": "2"},
        "2": {"start": 2, "end": 3},
        "3": {"start": 3, "end": 0},
    },
    "holes": {"d1": {"wall_id": 0, "distance": 1.0, "width": 0.9, "kind": "door"}},
    "rooms": {"0": {"kind": "living", "walls": [0, 1, "2", 3]}},
}


@pytest.fixture
def house_file(tmp_path):
    path = tmp_path / "house.json"
    path.write_text(json.dumps(HOUSE_DATA))
    return path


@pytest.mark.parametrize(
    "raw, expected",
    [(3, 3), ("3", 3), (" 12 ", 12), ("kitchen", "kitchen")],
)
def test_parse_id(raw, expected):
    assert parse_id(raw) == expected


@pytest.mark.parametrize("raw", [True, "", "   ", None, 1.5])
def test_parse_id_rejects(raw):
    with pytest.raises(ValueError):
        parse_id(raw)


def test_load_house(house_file):
    house = load_house(str(house_file))
    assert house.name == "demo"
    assert house.nodes[1].point == Point(4.0, 0.0)
    assert house.walls[0].thickness == 0.2
    assert house.walls[0].kind == "exterior"
    assert house.walls[1].start == 1
    assert house.rooms[0].wall_ids == (0, 1, 2, 3)
    assert house.rooms[0].kind == "living"
    assert house.holes["d1"].wall_id == 0
    assert house.holes["d1"].is_valid


def test_loaded_house_gives_boundary(house_file):
    house = load_house(str(house_file))
    result = compute_room_boundaries(house, 0)
    assert len(result) == 1
    assert set(result[0].wall_ids) == {0, 1, 2, 3}


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_house(str(tmp_path / "missing.json"))


def test_malformed_wall_entry():
    data = {"nodes": {"0": [0, 0]}, "walls": {"0": {"start": 0}}}
    with pytest.raises(ValueError, match="Invalid wall data for 0"):
        house_from_dict(data)


def test_malformed_node_entry():
    with pytest.raises(ValueError, match="Invalid node data"):
        house_from_dict({"nodes": {"0": [0]}})


def test_dangling_reference_rejected():
    data = dict(HOUSE_DATA, rooms={"0": {"walls": [0, 9]}})
    with pytest.raises(InvalidHouse, match="Room validation failed"):
        house_from_dict(data)


def test_degenerate_wall_rejected():
    data = dict(HOUSE_DATA, walls={"0": {"start": 0, "end": 0}}, rooms={}, holes={})
    with pytest.raises(InvalidHouse, match="Wall validation failed"):
        house_from_dict(data)


def test_zero_width_hole_rejected():
    holes = {"d1": {"wall_id": 0, "distance": 1.0, "width": 0.0}}
    with pytest.raises(InvalidHouse, match="Hole validation failed"):
        house_from_dict(dict(HOUSE_DATA, holes=holes))


def test_mixed_int_and_text_ids():
    data = {
        "nodes": {"0": [0, 0], "1": [4, 0], "2": [4, 4], "corner": [0, 4]},
        "walls": {
            "0": {"start": 0, "end": 1},
            "1": {"start": 1, "end": 2},
            "2": {"start": 2, "end": "corner"},
            "north": {"start": "corner", "end": 0},
        },
        "rooms": {
            "0": {"walls": [0, 1]},
            "kitchen": {"walls": [0, 1, 2, "north"]},
            "hall": {"walls": ["north", 2, 1, 0]},
        },
    }
    house = house_from_dict(data)
    assert set(house.rooms) == {0, "kitchen", "hall"}

    result = compute_room_boundaries(house)
    assert len(result) == 1
    # Integer ids sort before text ids, then text ids alphabetically
    assert result[0].room_id == "hall"
    assert set(result[0].wall_ids) == {0, 1, 2, "north"}
    assert compute_room_boundaries(house, "kitchen")[0].room_id == "kitchen"


def test_save_and_load(tmp_path, house_file):
    house = load_house(str(house_file))
    out = tmp_path / "nested" / "copy.json"
    save_house(house, str(out))
    assert load_house(str(out)) == house
    assert house_to_dict(house)["rooms"]["0"]["walls"] == [0, 1, 2, 3]


def test_boundaries_to_dict(rectangle):
    data = boundaries_to_dict(compute_room_boundaries(rectangle, 0))
    assert len(data) == 1
    assert data[0]["room_id"] == 0
    assert data[0]["orientation"] == "inward"
    assert [e["wall_id"] for e in data[0]["edges"]] == [0, 1, 2, 3]
    assert data[0]["edges"][0] == {
        "wall_id": 0, "reversed": False, "source": 0, "target": 1, "repeated": False,
    }
    json.dumps(data)

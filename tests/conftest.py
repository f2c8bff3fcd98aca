"""Shared test fixtures for plan2d boundary tests."""
import pytest

from plan2d.core.model import House, Node, Point, Room, Wall


def make_house(points, walls, rooms=None, name=""):
    """Build a House from plain data.

    points: {node_id: (x, y)}
    walls: {wall_id: (start, end)}
    rooms: {room_id: [wall_id, ...]}
    """
    nodes = {node_id: Node(node_id, Point(*xy)) for node_id, xy in points.items()}
    wall_map = {
        wall_id: Wall(wall_id, start, end) for wall_id, (start, end) in walls.items()
    }
    room_map = {
        room_id: Room(room_id, tuple(wall_ids))
        for room_id, wall_ids in (rooms or {}).items()
    }
    return House(nodes=nodes, walls=wall_map, rooms=room_map, name=name)


RECT_POINTS = {0: (0.0, 0.0), 1: (4.0, 0.0), 2: (4.0, 4.0), 3: (0.0, 4.0)}
RECT_WALLS = {0: (0, 1), 1: (1, 2), 2: (2, 3), 3: (3, 0)}


@pytest.fixture
def rectangle():
    """Single 4x4 room with four walls."""
    return make_house(RECT_POINTS, RECT_WALLS, {0: [0, 1, 2, 3]})


@pytest.fixture
def rectangle_with_spur():
    """Rectangle plus a two-wall spur sticking out of its bottom-right corner."""
    points = dict(RECT_POINTS)
    points.update({4: (6.0, 0.0), 5: (8.0, 0.0)})
    walls = dict(RECT_WALLS)
    walls.update({4: (1, 4), 5: (4, 5)})
    return make_house(points, walls, {0: [0, 1, 2, 3, 4, 5]})


START_SPUR_TIPS = {
    "outside": ((-1.0, 0.0), (-2.0, 0.0)),
    "inside": ((0.5, 0.5), (1.0, 1.0)),
}


@pytest.fixture(params=sorted(START_SPUR_TIPS))
def rectangle_with_start_spur(request):
    """Rectangle plus a two-wall spur hanging off node 0, the first node traced."""
    middle, tip = START_SPUR_TIPS[request.param]
    points = dict(RECT_POINTS)
    points.update({4: middle, 5: tip})
    walls = dict(RECT_WALLS)
    walls.update({4: (0, 4), 5: (4, 5)})
    return make_house(points, walls, {0: [0, 1, 2, 3, 4, 5]}, name=request.param)


@pytest.fixture
def repeated_segment():
    """Room listing the same single wall twice."""
    return make_house({0: (0.0, 0.0), 1: (1.0, 0.0)}, {7: (0, 1)}, {0: [7, 7]})


@pytest.fixture
def bow_tie():
    """Two triangles sharing only node 0."""
    points = {0: (0.0, 0.0), 1: (2.0, 1.0), 2: (2.0, -1.0), 3: (-2.0, 1.0), 4: (-2.0, -1.0)}
    walls = {0: (0, 1), 1: (1, 2), 2: (2, 0), 3: (0, 3), 4: (3, 4), 5: (4, 0)}
    return make_house(points, walls, {0: list(walls)})


@pytest.fixture
def two_rooms():
    """Two unit squares side by side sharing wall 1."""
    points = {
        0: (0.0, 0.0), 1: (1.0, 0.0), 2: (2.0, 0.0),
        3: (2.0, 1.0), 4: (1.0, 1.0), 5: (0.0, 1.0),
    }
    walls = {0: (0, 1), 1: (1, 4), 2: (4, 5), 3: (5, 0), 4: (1, 2), 5: (2, 3), 6: (3, 4)}
    rooms = {"left": [0, 1, 2, 3], "right": [1, 4, 5, 6]}
    return make_house(points, walls, rooms)


GRID_ROOM_WALLS = [
    1012, 1034, 1101, 1112, 1123, 1201, 1234, 1312, 1323, 1423, 1434,
    2001, 2012, 2023, 2034, 2101, 2112, 2123, 2134, 2201, 2223, 2234,
    2301, 2334, 2401, 2412, 2423, 2434,
]


@pytest.fixture
def grid():
    """5x5 lattice of nodes (id = x*10 + y) with a room using part of its walls."""
    points = {x * 10 + y: (float(x), float(y)) for y in range(5) for x in range(5)}
    walls = {}
    for y in range(5):
        for x in range(5):
            if x > 0:
                walls[1000 + y * 100 + (x - 1) * 10 + x] = ((x - 1) * 10 + y, x * 10 + y)
            if y > 0:
                walls[2000 + x * 100 + (y - 1) * 10 + y] = (x * 10 + (y - 1), x * 10 + y)
    return make_house(points, walls, {0: GRID_ROOM_WALLS})

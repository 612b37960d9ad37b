import pytest

from bravoengine.pathfinding import Pathfinding


@pytest.fixture
def grid():
    return {
        0: [1, 3],
        1: [0, 2, 4],
        2: [1, 5],
        3: [0, 4, 6],
        4: [1, 3, 5, 7],
        5: [2, 4, 8],
        6: [3, 7],
        7: [4, 6, 8],
        8: [5, 7],
    }


def test_find_path(grid):
    assert Pathfinding(grid, 3, 3).find_path(0, 8) == [0, 1, 2, 5, 8]


def test_find_path_no_path():
    adjacency = {0: [1], 1: [0], 2: [3], 3: [2]}
    assert Pathfinding(adjacency, 3, 3).find_path(0, 3) == []


def test_path_to_self(grid):
    assert Pathfinding(grid, 3, 3).find_path(4, 4) == [4]


def test_path_is_connected_and_shortest(grid):
    pathfinding = Pathfinding(grid, 3, 3)
    path = pathfinding.find_path(6, 2)
    assert path[0] == 6 and path[-1] == 2
    assert all(b in grid[a] for a, b in zip(path, path[1:]))
    assert len(path) - 1 == pathfinding.distance(6, 2)


def test_distance_is_manhattan(grid):
    pathfinding = Pathfinding(grid, 3, 3)
    assert pathfinding.distance(0, 8) == 4.0
    assert pathfinding.distance(8, 0) == pathfinding.distance(0, 8)
    assert pathfinding.distance(5, 5) == 0.0


def test_accessors_return_copies(grid):
    pathfinding = Pathfinding(grid, 3, 3)
    copy = pathfinding.adjacency_list
    copy[0].append(8)
    assert pathfinding.adjacency_list[0] == [1, 3]
    assert (pathfinding.map_width, pathfinding.map_height) == (3, 3)
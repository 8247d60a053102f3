import pytest

from dsakit.connectivity import articulation_points, is_bridge


def test_bridge_on_path():
    assert is_bridge(4, [[0, 1], [1, 2], [2, 3]], 1, 2) is True


def test_edge_on_cycle_is_not_bridge():
    edges = [[0, 1], [1, 2], [2, 0], [2, 3]]
    assert is_bridge(4, edges, 0, 1) is False
    assert is_bridge(4, edges, 2, 3) is True


def test_bridge_orientation_does_not_matter():
    edges = [[0, 1], [1, 2], [2, 0], [1, 3]]
    assert is_bridge(4, edges, 1, 3) == is_bridge(4, edges, 3, 1)


def test_missing_edge_is_not_bridge():
    assert is_bridge(4, [[0, 1], [2, 3]], 1, 2) is False


def test_every_tree_edge_is_bridge():
    tree = [[0, 1], [0, 2], [2, 3], [2, 4], [4, 5]]
    assert all(is_bridge(6, tree, a, b) for a, b in tree)


def test_no_cycle_edge_is_bridge():
    cycle = [[i, (i + 1) % 6] for i in range(6)]
    assert not any(is_bridge(6, cycle, a, b) for a, b in cycle)


def test_articulation_points_worked_example():
    edges = [[0, 3], [3, 4], [0, 4], [0, 1], [1, 2]]
    assert articulation_points(5, edges) == [0, 1]


@pytest.mark.parametrize("n", [3, 4, 7])
def test_path_interior_nodes_are_articulation_points(n):
    path = [[i, i + 1] for i in range(n - 1)]
    assert articulation_points(n, path) == list(range(1, n - 1))


def test_cycle_has_no_articulation_points():
    cycle = [[i, (i + 1) % 5] for i in range(5)]
    assert articulation_points(5, cycle) == []


def test_star_centre_is_articulation_point():
    star = [[0, i] for i in range(1, 5)]
    assert articulation_points(5, star) == [0]
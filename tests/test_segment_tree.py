import random

import pytest

from dsakit.segment_tree import MinSegmentTree


def test_source_example():
    tree = MinSegmentTree([1, 3, 2, -2, 4, 5])
    assert tree.query(0, 1) == 1


def test_all_ranges_match_min():
    rng = random.Random(7)
    data = [rng.randint(-50, 50) for _ in range(17)]
    tree = MinSegmentTree(data)
    assert len(tree) == len(data)
    for qs in range(len(data)):
        for qe in range(qs, len(data)):
            assert tree.query(qs, qe) == min(data[qs:qe + 1])


def test_single_element():
    tree = MinSegmentTree([42])
    assert tree.query(0, 0) == 42


def test_range_clipped_to_bounds():
    data = [4, 9, 1, 7]
    tree = MinSegmentTree(data)
    assert tree.query(-3, 1) == min(data[:2])
    assert tree.query(2, 99) == min(data[2:])


def test_empty_ranges_raise():
    tree = MinSegmentTree([4, 9, 1, 7])
    with pytest.raises(ValueError):
        tree.query(3, 1)
    with pytest.raises(ValueError):
        tree.query(4, 6)
    with pytest.raises(ValueError):
        MinSegmentTree([]).query(0, 0)
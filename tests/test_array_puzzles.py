import random

import pytest

from dsakit.array_puzzles import (
    count_subarray_ors,
    longest_max_and_subarray,
    longest_subarray_after_deletion,
    max_total_fruits,
    max_total_fruits_window,
    min_swap_cost,
    total_fruit,
    unplaced_fruits,
)


def test_min_swap_cost_identical_baskets():
    assert min_swap_cost([3, 1, 2], [2, 3, 1]) == 0


def test_min_swap_cost_example():
    assert min_swap_cost([4, 2, 2, 2], [1, 4, 1, 2]) == 1


def test_min_swap_cost_odd_surplus_is_impossible():
    assert min_swap_cost([2, 3, 4, 1], [3, 2, 5, 1]) == -1


def test_min_swap_cost_symmetric():
    a, b = [4, 2, 2, 2], [1, 4, 1, 2]
    assert min_swap_cost(a, b) == min_swap_cost(b, a)


def test_min_swap_cost_size_mismatch():
    with pytest.raises(ValueError):
        min_swap_cost([1], [1, 2])


def test_longest_after_deletion_all_ones():
    nums = [1, 1, 1, 1]
    assert longest_subarray_after_deletion(nums) == len(nums) - 1


def test_longest_after_deletion_no_ones():
    assert longest_subarray_after_deletion([0, 0, 0]) == 0


def test_longest_after_deletion_example():
    assert longest_subarray_after_deletion([1, 1, 0, 1]) == 3


def test_longest_after_deletion_bounded_by_ones():
    rng = random.Random(3)
    for _ in range(50):
        nums = [rng.randint(0, 1) for _ in range(rng.randint(1, 12))]
        assert longest_subarray_after_deletion(nums) <= sum(nums)


@pytest.mark.parametrize(
    "fruits, start, k, expected",
    [
        ([[2, 8], [6, 3], [8, 6]], 5, 4, 9),
        ([[0, 9], [4, 1], [5, 7], [6, 2], [7, 4], [10, 9]], 5, 4, 14),
    ],
)
def test_max_total_fruits_examples(fruits, start, k, expected):
    assert max_total_fruits(fruits, start, k) == expected
    assert max_total_fruits_window(fruits, start, k) == expected


def test_max_total_fruits_nothing_reachable():
    fruits = [[0, 3], [6, 4], [8, 5]]
    assert max_total_fruits(fruits, 3, 2) == 0
    assert max_total_fruits_window(fruits, 3, 2) == 0


def test_max_total_fruits_everything_reachable():
    fruits = [[1, 2], [4, 5], [9, 1]]
    total = sum(amount for _, amount in fruits)
    assert max_total_fruits(fruits, 5, 100) == total
    assert max_total_fruits_window(fruits, 5, 100) == total


def test_max_total_fruits_methods_agree():
    rng = random.Random(11)
    for _ in range(200):
        positions = sorted(rng.sample(range(30), rng.randint(1, 8)))
        fruits = [[p, rng.randint(1, 9)] for p in positions]
        start = rng.randint(0, 29)
        k = rng.randint(0, 20)
        assert max_total_fruits(fruits, start, k) == max_total_fruits_window(fruits, start, k)


def test_total_fruit_two_kinds_take_everything():
    fruits = [1, 2, 1, 1, 2]
    assert total_fruit(fruits) == len(fruits)


def test_total_fruit_example():
    assert total_fruit([1, 2, 3, 2, 2]) == 4


def test_total_fruit_empty():
    assert total_fruit([]) == 0


def test_unplaced_fruits_large_baskets():
    assert unplaced_fruits([5, 6, 7], [100, 100, 100]) == 0


def test_unplaced_fruits_empty_baskets():
    fruits = [1, 2, 3]
    assert unplaced_fruits(fruits, [0, 0, 0]) == len(fruits)


def test_unplaced_fruits_example():
    assert unplaced_fruits([4, 2, 5], [3, 5, 4]) == 1


def test_unplaced_fruits_length_mismatch():
    with pytest.raises(ValueError):
        unplaced_fruits([1, 2], [3])


def test_longest_max_and_all_equal():
    nums = [7, 7, 7]
    assert longest_max_and_subarray(nums) == len(nums)


def test_longest_max_and_example():
    assert longest_max_and_subarray([1, 2, 3, 3, 2, 2]) == 2


def test_longest_max_and_empty():
    assert longest_max_and_subarray([]) == 0


def test_count_subarray_ors_all_same():
    assert count_subarray_ors([5, 5, 5, 5]) == 1


def test_count_subarray_ors_distinct_bits():
    assert count_subarray_ors([1, 2, 4]) == 6


def test_count_subarray_ors_bounded_by_subarrays():
    rng = random.Random(5)
    for _ in range(30):
        arr = [rng.randint(0, 15) for _ in range(rng.randint(1, 8))]
        n = len(arr)
        result = count_subarray_ors(arr)
        assert len(set(arr)) <= result <= n * (n + 1) // 2
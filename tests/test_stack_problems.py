import random

import pytest

from dsakit.stack_problems import (
    celebrity,
    celebrity_brute_force,
    evaluate_postfix,
    has_redundant_brackets,
    largest_rectangle_area,
    longest_valid_parentheses,
    next_greater_elements,
    next_smaller_elements,
    next_smaller_indices,
    previous_smaller_indices,
)


def _celebrity_matrix(n, celeb):
    mat = [[0] * n for _ in range(n)]
    for i in range(n):
        if i != celeb:
            mat[i][celeb] = 1
    return mat


def test_celebrity_found_by_both():
    mat = _celebrity_matrix(4, 2)
    assert celebrity(mat) == 2
    assert celebrity_brute_force(mat) == 2


def test_no_celebrity():
    mat = [[0, 1], [1, 0]]
    assert celebrity(mat) == -1
    assert celebrity_brute_force(mat) == -1


def test_celebrity_empty():
    assert celebrity([]) == -1
    assert celebrity_brute_force([]) == -1


@pytest.mark.parametrize("seed", range(20))
def test_celebrity_methods_agree(seed):
    rng = random.Random(seed)
    n = rng.randint(1, 6)
    mat = [[0 if i == j else rng.randint(0, 1) for j in range(n)] for i in range(n)]
    if seed % 2:
        mat = _celebrity_matrix(n, rng.randrange(n))
    assert celebrity(mat) == celebrity_brute_force(mat)


def test_histogram_example():
    assert largest_rectangle_area([2, 1, 5, 6, 2, 3]) == 10


def test_histogram_invariants():
    heights = [4, 4, 4, 4]
    assert largest_rectangle_area(heights) == 4 * len(heights)
    assert largest_rectangle_area([]) == 0
    data = [3, 1, 7, 2, 9, 4]
    area = largest_rectangle_area(data)
    assert area >= max(data)
    assert area >= min(data) * len(data)


def test_longest_valid_parentheses():
    assert longest_valid_parentheses(")()())") == 4
    assert longest_valid_parentheses("(())()") == len("(())()")
    assert longest_valid_parentheses("") == 0
    assert longest_valid_parentheses(")))(((") == 0


def test_next_greater_ascending_and_descending():
    data = [1, 2, 3, 4]
    assert next_greater_elements(data) == data[1:] + [-1]
    assert next_greater_elements(data[::-1]) == [-1] * len(data)
    assert next_greater_elements([]) == []


def test_next_greater_is_later_and_greater():
    data = [5, 3, 8, 1, 9, 2, 2]
    for i, value in enumerate(next_greater_elements(data)):
        if value != -1:
            assert value > data[i]
            assert value in data[i + 1:]


def test_next_smaller_elements():
    data = [4, 3, 2, 1]
    assert next_smaller_elements(data) == data[1:] + [-1]
    assert next_smaller_elements(data[::-1]) == [-1] * len(data)


def test_smaller_indices():
    data = [1, 2, 3, 4, 5]
    assert previous_smaller_indices(data) == [-1, 0, 1, 2, 3]
    assert next_smaller_indices(data) == [len(data)] * len(data)
    rev = data[::-1]
    assert next_smaller_indices(rev) == [1, 2, 3, 4, 5]
    assert previous_smaller_indices(rev) == [-1] * len(rev)


def test_postfix_example():
    assert evaluate_postfix(["2", "3", "1", "*", "+", "9", "-"]) == -4


def test_postfix_division_truncates():
    assert evaluate_postfix(["7", "-2", "/"]) == -evaluate_postfix(["7", "2", "/"])


def test_postfix_errors():
    with pytest.raises(ValueError):
        evaluate_postfix(["+"])
    with pytest.raises(ValueError):
        evaluate_postfix([])
    with pytest.raises(ZeroDivisionError):
        evaluate_postfix(["1", "0", "/"])


def test_redundant_brackets():
    assert has_redundant_brackets("((a+b))") is True
    assert has_redundant_brackets("(a+(b)/c)") is True
    assert has_redundant_brackets("(a+b*(c-d))") is False
    assert has_redundant_brackets("a+b") is False
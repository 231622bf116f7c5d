import pytest

from minirt.sorting import heap_sort


CASES = [
    [],
    [7],
    [3, 1, 2],
    [5, 5, 5, 5],
    [9, -3, 0, 12, 4, 4, -8, 1],
    list(range(20, 0, -1)),
    list(range(15)),
]


@pytest.mark.parametrize("values", CASES)
def test_ascending_matches_sorted(values):
    assert heap_sort(values, True) == sorted(values)


@pytest.mark.parametrize("values", CASES)
def test_descending_matches_reverse_sorted(values):
    assert heap_sort(values, False) == sorted(values, reverse=True)


def test_default_is_ascending():
    values = [4, 2, 8, 6]
    assert heap_sort(values) == sorted(values)


def test_input_is_not_modified():
    values = [3, 1, 2]
    heap_sort(values)
    assert values == [3, 1, 2]


def test_accepts_any_iterable():
    assert heap_sort(iter([2, 3, 1])) == [1, 2, 3]


def test_result_is_permutation_of_input():
    values = [10, -1, 10, 0, 3, 3, 7]
    result = heap_sort(values, False)
    assert sorted(result) == sorted(values)
    assert all(a >= b for a, b in zip(result, result[1:]))
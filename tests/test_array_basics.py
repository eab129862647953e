import random

import pytest

from dsadrills.array_basics import (
    is_sorted,
    is_sorted_brute,
    linear_search,
    majority_element,
    majority_elements,
    max_consecutive_ones,
    max_element,
    max_element_recursive,
    missing_number,
    missing_number_brute,
    missing_number_sum,
    move_zeros,
    move_zeros_brute,
    rotate_left_by_one,
    rotate_left_by_one_brute,
    second_extremes,
    second_extremes_by_sorting,
    single_number,
    single_number_brute,
    union_brute,
    union_sorted,
    unique_sorted,
    unique_sorted_brute,
)


def _random_lists(seed, count=40, low=-5, high=5, max_len=12, min_len=0):
    rng = random.Random(seed)
    return [
        [rng.randint(low, high) for _ in range(rng.randint(min_len, max_len))]
        for _ in range(count)
    ]


@pytest.mark.parametrize("values", [[2, 5, 1, 3, 0], [8, 10, 5, 7, 9], [-3], [4, 4, 4]])
def test_max_element_matches_builtin(values):
    assert max_element(values) == max(values)
    assert max_element_recursive(values) == max(values)


def test_max_element_source_example():
    assert max_element([2, 5, 1, 3, 0]) == 5


@pytest.mark.parametrize("func", [max_element, max_element_recursive])
def test_max_element_empty_raises(func):
    with pytest.raises(ValueError):
        func([])


def test_second_extremes_source_example():
    assert second_extremes([1, 2, 4, 7, 7, 5]) == (2, 5)
    assert second_extremes_by_sorting([1, 2, 4, 7, 7, 5]) == (2, 5)


def test_second_extremes_without_second_value():
    assert second_extremes([3]) == (-1, -1)
    assert second_extremes([3, 3, 3]) == (-1, -1)
    assert second_extremes_by_sorting([3, 3]) == (-1, -1)


def test_second_extremes_by_sorting_does_not_mutate():
    values = [5, 1, 4]
    second_extremes_by_sorting(values)
    assert values == [5, 1, 4]


@pytest.mark.parametrize("values", _random_lists(1, low=0, high=9, min_len=1))
def test_second_extremes_agree(values):
    assert second_extremes(values) == second_extremes_by_sorting(values)


@pytest.mark.parametrize(
    "values, expected",
    [([1, 2, 3, 4, 5], True), ([1, 2, 2, 3, 4], True), ([5, 4, 3, 2, 1], False), ([1, 3, 2, 4, 5], False), ([], True)],
)
def test_is_sorted_source_cases(values, expected):
    assert is_sorted(values) is expected
    assert is_sorted_brute(values) is expected


@pytest.mark.parametrize("values", _random_lists(2))
def test_is_sorted_agrees_with_sorted(values):
    assert is_sorted(values) == (values == sorted(values))
    assert is_sorted_brute(values) == is_sorted(values)


@pytest.mark.parametrize("values", _random_lists(3))
def test_unique_on_sorted_input(values):
    ordered = sorted(values)
    assert unique_sorted(ordered) == unique_sorted_brute(ordered)
    assert unique_sorted_brute(values) == sorted(set(values))


def test_unique_sorted_only_collapses_adjacent_runs():
    assert unique_sorted([1, 1, 2, 1]) == [1, 2, 1]


@pytest.mark.parametrize("values", _random_lists(4))
def test_rotate_left_by_one(values):
    expected = values[1:] + values[:1]
    assert rotate_left_by_one(values) == expected
    assert rotate_left_by_one_brute(values) == expected


def test_rotate_does_not_mutate():
    values = [1, 2, 3]
    rotate_left_by_one(values)
    rotate_left_by_one_brute(values)
    assert values == [1, 2, 3]


@pytest.mark.parametrize("values", _random_lists(5, low=0, high=3))
def test_move_zeros(values):
    result = move_zeros(values)
    assert result == move_zeros_brute(values)
    non_zero = [v for v in values if v != 0]
    assert result[: len(non_zero)] == non_zero
    assert all(v == 0 for v in result[len(non_zero):])
    assert len(result) == len(values)


def test_linear_search():
    data = [4, 7, 7, 2]
    assert linear_search(data, 7) == data.index(7)
    assert linear_search(data, 9) == -1
    assert linear_search([], 1) == -1


@pytest.mark.parametrize("n", range(1, 12))
def test_missing_number_all_strategies(n):
    rng = random.Random(n)
    for missing in range(1, n + 1):
        values = [v for v in range(1, n + 1) if v != missing]
        rng.shuffle(values)
        assert missing_number_brute(values, n) == missing
        assert missing_number_sum(values, n) == missing
        assert missing_number(values, n) == missing


def test_max_consecutive_ones():
    assert max_consecutive_ones([1, 1, 0, 1, 1, 1]) == 3
    assert max_consecutive_ones([0, 0]) == 0
    assert max_consecutive_ones([]) == 0


def test_majority_element_source_example():
    assert majority_element([7, 0, 0, 1, 7, 7, 2, 7, 7]) == 7


@pytest.mark.parametrize("seed", range(20))
def test_majority_element_when_one_exists(seed):
    rng = random.Random(seed)
    dominant = rng.randint(-5, 5)
    others = [rng.randint(-5, 5) for _ in range(rng.randint(0, 6))]
    values = [dominant] * (len(others) + 1) + others
    rng.shuffle(values)
    assert majority_element(values) == dominant


@pytest.mark.parametrize("values", _random_lists(6, low=0, high=3, max_len=10))
def test_majority_elements_invariant(values):
    result = majority_elements(values)
    expected = {v for v in set(values) if values.count(v) > len(values) // 3}
    assert set(result) == expected
    assert len(result) == len(set(result))


def test_majority_elements_source_example():
    assert majority_elements([1, 2, 1, 1, 3, 2]) == [1]


@pytest.mark.parametrize("seed", range(20))
def test_single_number(seed):
    rng = random.Random(seed)
    pairs = rng.sample(range(-50, 50), rng.randint(0, 6))
    lonely = 100 + seed
    values = pairs + pairs + [lonely]
    rng.shuffle(values)
    assert single_number(values) == lonely
    assert single_number_brute(values) == lonely


def test_single_number_brute_without_single():
    assert single_number_brute([2, 2, 3, 3]) == -1


@pytest.mark.parametrize("seed", range(30))
def test_union(seed):
    rng = random.Random(seed)
    first = sorted(rng.randint(-5, 5) for _ in range(rng.randint(0, 8)))
    second = sorted(rng.randint(-5, 5) for _ in range(rng.randint(0, 8)))
    expected = sorted(set(first) | set(second))
    assert union_sorted(first, second) == expected
    assert union_brute(first, second) == expected
    assert union_brute(second, first) == expected
    assert union_sorted(second, first) == expected
import random
from itertools import permutations

import pytest

from dsadrills.ordering import (
    count_inversions,
    count_inversions_brute,
    count_reverse_pairs,
    count_reverse_pairs_brute,
    find_error_nums,
    find_error_nums_brute,
    merge_intervals,
    merge_intervals_brute,
    merge_sorted_into,
    next_permutation,
)


def _random_lists(seed, count=30, size=12, low=-20, high=20):
    rng = random.Random(seed)
    return [[rng.randint(low, high) for _ in range(rng.randint(0, size))] for _ in range(count)]


def _random_intervals(seed, count=30):
    rng = random.Random(seed)
    result = []
    for _ in range(count):
        items = []
        for _ in range(rng.randint(1, 8)):
            start = rng.randint(0, 30)
            items.append([start, start + rng.randint(0, 6)])
        result.append(items)
    return result


def test_merge_intervals_classic():
    intervals = [[1, 3], [2, 6], [8, 10], [15, 18]]
    assert merge_intervals(intervals) == [[1, 6], [8, 10], [15, 18]]


def test_merge_intervals_touching_merge():
    a, b = [1, 4], [4, 5]
    assert merge_intervals([a, b]) == [[a[0], b[1]]]
    assert merge_intervals_brute([b, a]) == [[a[0], b[1]]]


@pytest.mark.parametrize("intervals", _random_intervals(7))
def test_merge_intervals_invariants(intervals):
    result = merge_intervals(intervals)
    assert result == merge_intervals_brute(intervals)
    for prev, nxt in zip(result, result[1:]):
        assert prev[1] < nxt[0]
    for start, end in intervals:
        assert any(lo <= start and end <= hi for lo, hi in result)


def test_merge_intervals_brute_normalises_reversed():
    assert merge_intervals_brute([[6, 2]]) == [[2, 6]]


@pytest.mark.parametrize("n,repeated,missing", [(2, 1, 2), (2, 2, 1), (5, 3, 4), (6, 1, 6), (8, 8, 2)])
def test_find_error_nums(n, repeated, missing):
    values = [repeated if v == missing else v for v in range(1, n + 1)]
    random.Random(n).shuffle(values)
    assert find_error_nums(values) == (repeated, missing)
    assert find_error_nums_brute(values) == (repeated, missing)


def test_find_error_nums_perfect_permutation():
    values = [3, 1, 2]
    assert find_error_nums_brute(values) == (-1, -1)
    with pytest.raises(ValueError):
        find_error_nums(values)


def test_next_permutation_walks_all_distinct():
    expected = [list(p) for p in permutations([1, 2, 3, 4])]
    current = expected[0]
    for following in expected[1:]:
        current = next_permutation(current)
        assert current == following
    assert next_permutation(current) == expected[0]


def test_next_permutation_with_duplicates():
    expected = sorted(set(permutations([1, 1, 2, 3])))
    current = list(expected[0])
    for following in expected[1:]:
        current = next_permutation(current)
        assert tuple(current) == following


def test_next_permutation_does_not_mutate():
    values = [3, 2, 1]
    result = next_permutation(values)
    assert values == [3, 2, 1]
    assert result == sorted(values)


def test_merge_sorted_into_example():
    first = [-5, -2, 4, 5, 0, 0, 0]
    second = [-3, 1, 8]
    result = merge_sorted_into(first, 4, second, 3)
    assert result == sorted(first[:4] + second)
    assert first == [-5, -2, 4, 5, 0, 0, 0]


@pytest.mark.parametrize("values", _random_lists(3))
def test_merge_sorted_into_random(values):
    split = len(values) // 2
    left, right = sorted(values[:split]), sorted(values[split:])
    padded = left + [0] * len(right)
    assert merge_sorted_into(padded, len(left), right, len(right)) == sorted(values)


def test_merge_sorted_into_rejects_short_buffer():
    with pytest.raises(ValueError):
        merge_sorted_into([1, 2], 2, [3], 1)


def test_count_inversions_example():
    assert count_inversions([5, 3, 2, 4, 1]) == 8


@pytest.mark.parametrize("values", _random_lists(11))
def test_count_inversions_matches_brute(values):
    assert count_inversions(values) == count_inversions_brute(values)


@pytest.mark.parametrize("n", [0, 1, 5, 9])
def test_count_inversions_extremes(n):
    ascending = list(range(n))
    assert count_inversions(ascending) == 0
    assert count_inversions(ascending[::-1]) == n * (n - 1) // 2


def test_count_inversions_does_not_mutate():
    values = [4, 1, 3]
    count_inversions(values)
    assert values == [4, 1, 3]


def test_count_reverse_pairs_example():
    assert count_reverse_pairs([1, 3, 2, 3, 1]) == 2


@pytest.mark.parametrize("values", _random_lists(19))
def test_count_reverse_pairs_matches_brute(values):
    assert count_reverse_pairs(values) == count_reverse_pairs_brute(values)


def test_count_reverse_pairs_sorted_positive():
    values = [1, 2, 3, 4, 5, 6]
    assert count_reverse_pairs(values) == 0
    assert count_reverse_pairs_brute(values) == 0
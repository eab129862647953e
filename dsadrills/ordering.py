"""Ordering drills: intervals, permutations, merging and counting out-of-order pairs."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Sequence
from itertools import combinations

NOT_FOUND = -1


def _overlaps(a: Sequence[int], b: Sequence[int]) -> bool:
    return not (a[1] < b[0] or b[1] < a[0])


def merge_intervals_brute(intervals: Sequence[Sequence[int]]) -> list[list[int]]:
    """Normalise each interval, repeatedly merge the first overlapping pair, then sort."""
    items = [[min(start, end), max(start, end)] for start, end in intervals]
    while True:
        pair = next(
            ((i, j) for i, j in combinations(range(len(items)), 2) if _overlaps(items[i], items[j])),
            None,
        )
        if pair is None:
            break
        i, j = pair
        items[i] = [min(items[i][0], items[j][0]), max(items[i][1], items[j][1])]
        del items[j]
    return sorted(items)


def merge_intervals(intervals: Sequence[Sequence[int]]) -> list[list[int]]:
    """Sort the intervals and merge overlapping or touching ones in a single pass."""
    merged: list[list[int]] = []
    for start, end in sorted(list(interval) for interval in intervals):
        if not merged or merged[-1][1] < start:
            merged.append([start, end])
        else:
            merged[-1][1] = max(merged[-1][1], end)
    return merged


def find_error_nums_brute(values: Sequence[int]) -> tuple[int, int]:
    """Return (repeated, missing) among 1..n by counting; -1 where none is found."""
    counts = Counter(values)
    repeated = missing = NOT_FOUND
    for number in range(1, len(values) + 1):
        if counts[number] == 2:
            repeated = number
        elif counts[number] == 0:
            missing = number
    return repeated, missing


def find_error_nums(values: Sequence[int]) -> tuple[int, int]:
    """Return (repeated, missing) among 1..n from the sums of values and of squares."""
    n = len(values)
    diff = sum(values) - n * (n + 1) // 2
    diff_squares = sum(v * v for v in values) - n * (n + 1) * (2 * n + 1) // 6
    if diff == 0:
        raise ValueError("values hold no repeated and missing number")
    total = diff_squares // diff
    repeated = (diff + total) // 2
    return repeated, total - repeated


def next_permutation(values: Sequence[int]) -> list[int]:
    """Return the next lexicographic permutation, wrapping the last one to the first."""
    result = list(values)
    pivot = next((i for i in range(len(result) - 2, -1, -1) if result[i] < result[i + 1]), None)
    if pivot is not None:
        swap = next(j for j in range(len(result) - 1, pivot, -1) if result[j] > result[pivot])
        result[pivot], result[swap] = result[swap], result[pivot]
    start = 0 if pivot is None else pivot + 1
    result[start:] = result[start:][::-1]
    return result


def merge_sorted_into(first: Sequence[int], m: int, second: Sequence[int], n: int) -> list[int]:
    """Merge the first m of first and the first n of second, filling a copy of first from the back."""
    if m < 0 or n < 0 or m + n > len(first) or n > len(second):
        raise ValueError("first must have room for m + n elements and second at least n")
    result = list(first)
    i, j, k = m - 1, n - 1, m + n - 1
    while j >= 0:
        if i >= 0 and result[i] > second[j]:
            result[k] = result[i]
            i -= 1
        else:
            result[k] = second[j]
            j -= 1
        k -= 1
    return result


def count_inversions_brute(values: Sequence[int]) -> int:
    """Count pairs i < j with values[i] > values[j] by checking every pair."""
    return sum(1 for a, b in combinations(values, 2) if a > b)


def _sort_counting_inversions(items: list[int]) -> tuple[list[int], int]:
    if len(items) <= 1:
        return items, 0
    mid = (len(items) + 1) // 2
    left, left_count = _sort_counting_inversions(items[:mid])
    right, right_count = _sort_counting_inversions(items[mid:])
    merged: list[int] = []
    count = left_count + right_count
    li = ri = 0
    while li < len(left) and ri < len(right):
        if left[li] <= right[ri]:
            merged.append(left[li])
            li += 1
        else:
            merged.append(right[ri])
            count += len(left) - li
            ri += 1
    merged.extend(left[li:])
    merged.extend(right[ri:])
    return merged, count


def count_inversions(values: Sequence[int]) -> int:
    """Count inversions with a merge sort."""
    return _sort_counting_inversions(list(values))[1]


def count_reverse_pairs_brute(values: Sequence[int]) -> int:
    """Count pairs i < j with values[i] > 2 * values[j] by checking every pair."""
    return sum(1 for a, b in combinations(values, 2) if a > 2 * b)


def _sort_counting_reverse_pairs(items: list[int]) -> tuple[list[int], int]:
    if len(items) <= 1:
        return items, 0
    mid = (len(items) + 1) // 2
    left, left_count = _sort_counting_reverse_pairs(items[:mid])
    right, right_count = _sort_counting_reverse_pairs(items[mid:])
    count = left_count + right_count
    ri = 0
    for value in left:
        while ri < len(right) and value > 2 * right[ri]:
            ri += 1
        count += ri
    return list(heapq.merge(left, right)), count


def count_reverse_pairs(values: Sequence[int]) -> int:
    """Count pairs i < j with values[i] > 2 * values[j] with a merge sort."""
    return _sort_counting_reverse_pairs(list(values))[1]
"""Elementary array drills: extremes, sortedness, deduplication, searching and counting."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Sequence
from functools import reduce
from itertools import groupby
from operator import xor

NOT_FOUND = -1


def _require_items(values: Sequence[int]) -> None:
    if not values:
        raise ValueError("sequence must not be empty")


def max_element(values: Sequence[int]) -> int:
    """Return the largest element by a single scan."""
    _require_items(values)
    iterator = iter(values)
    best = next(iterator)
    for value in iterator:
        if value > best:
            best = value
    return best


def max_element_recursive(values: Sequence[int]) -> int:
    """Return the largest element, comparing the last element with the maximum of the rest."""
    _require_items(values)

    def _max_of_prefix(length: int) -> int:
        if length == 1:
            return values[0]
        return max(values[length - 1], _max_of_prefix(length - 1))

    return _max_of_prefix(len(values))


def second_extremes_by_sorting(values: Sequence[int]) -> tuple[int, int]:
    """Return (second smallest, second largest) after sorting; -1 where none exists."""
    _require_items(values)
    ordered = sorted(values)
    smallest, largest = ordered[0], ordered[-1]
    second_smallest = next((v for v in ordered[1:] if v > smallest), NOT_FOUND)
    second_largest = next((v for v in reversed(ordered[:-1]) if v < largest), NOT_FOUND)
    return second_smallest, second_largest


def second_extremes(values: Sequence[int]) -> tuple[int, int]:
    """Return (second smallest, second largest) in one pass; -1 where none exists."""
    if len(values) < 2:
        return NOT_FOUND, NOT_FOUND

    smallest = second_smallest = None
    largest = second_largest = None
    for value in values:
        if smallest is None or value < smallest:
            second_smallest, smallest = smallest, value
        elif value != smallest and (second_smallest is None or value < second_smallest):
            second_smallest = value

        if largest is None or value > largest:
            second_largest, largest = largest, value
        elif value != largest and (second_largest is None or value > second_largest):
            second_largest = value

    return (
        NOT_FOUND if second_smallest is None else second_smallest,
        NOT_FOUND if second_largest is None else second_largest,
    )


def is_sorted_brute(values: Sequence[int]) -> bool:
    """Check non-decreasing order by comparing every pair."""
    return all(
        earlier <= later
        for position, earlier in enumerate(values)
        for later in values[position + 1:]
    )


def is_sorted(values: Sequence[int]) -> bool:
    """Check non-decreasing order by comparing adjacent elements."""
    return all(a <= b for a, b in zip(values, values[1:]))


def unique_sorted_brute(values: Sequence[int]) -> list[int]:
    """Return the distinct elements in ascending order."""
    return sorted(set(values))


def unique_sorted(values: Sequence[int]) -> list[int]:
    """Collapse runs of equal adjacent elements; for sorted input this is the distinct values."""
    return [value for value, _ in groupby(values)]


def rotate_left_by_one_brute(values: Sequence[int]) -> list[int]:
    """Return a copy shifted one place left, the first element moved to the end."""
    if not values:
        return []
    first, *rest = values
    return [*rest, first]


def rotate_left_by_one(values: Sequence[int]) -> list[int]:
    """Return a copy rotated left by one using two reversals."""
    result = list(values)
    result[1:] = result[1:][::-1]
    result.reverse()
    return result


def move_zeros_brute(values: Sequence[int]) -> list[int]:
    """Return a copy with non-zero elements first, in order, followed by the zeros."""
    non_zero = [value for value in values if value != 0]
    return non_zero + [0] * (len(values) - len(non_zero))


def move_zeros(values: Sequence[int]) -> list[int]:
    """Return a copy with zeros moved to the end by swapping past the first zero."""
    result = list(values)
    try:
        zero_at = result.index(0)
    except ValueError:
        return result
    for position in range(zero_at + 1, len(result)):
        if result[position] != 0:
            result[position], result[zero_at] = result[zero_at], result[position]
            zero_at += 1
    return result


def linear_search(values: Sequence[int], target: int) -> int:
    """Return the index of the first occurrence of target, or -1."""
    return next((index for index, value in enumerate(values) if value == target), NOT_FOUND)


def missing_number_brute(values: Sequence[int], n: int) -> int:
    """Find the number in 1..n absent from the first n-1 values by searching for each."""
    present = values[: n - 1]
    return next((number for number in range(1, n + 1) if number not in present), NOT_FOUND)


def missing_number_sum(values: Sequence[int], n: int) -> int:
    """Find the missing number in 1..n from the difference of sums."""
    return n * (n + 1) // 2 - sum(values[: n - 1])


def missing_number(values: Sequence[int], n: int) -> int:
    """Find the missing number in 1..n by XOR."""
    expected = reduce(xor, range(1, n + 1), 0)
    actual = reduce(xor, values[: n - 1], 0)
    return expected ^ actual


def max_consecutive_ones(values: Sequence[int]) -> int:
    """Return the length of the longest run of ones."""
    best = run = 0
    for value in values:
        run = run + 1 if value == 1 else 0
        best = max(best, run)
    return best


def majority_element(values: Sequence[int]) -> int:
    """Return the Boyer-Moore candidate for the element occurring more than n/2 times."""
    candidate = count = 0
    for value in values:
        if count == 0:
            candidate = value
        count += 1 if value == candidate else -1
    return candidate


def majority_elements(values: Sequence[int]) -> list[int]:
    """Return the elements occurring more than n/3 times."""
    first = second = None
    first_count = second_count = 0
    for value in values:
        if value == first:
            first_count += 1
        elif value == second:
            second_count += 1
        elif first_count == 0:
            first, first_count = value, 1
        elif second_count == 0:
            second, second_count = value, 1
        else:
            first_count -= 1
            second_count -= 1

    counts = Counter(values)
    threshold = len(values) // 3
    result = []
    if first is not None and counts[first] > threshold:
        result.append(first)
    if second is not None and counts[second] > threshold:
        result.append(second)
    return result


def single_number_brute(values: Sequence[int]) -> int:
    """Return the element that appears exactly once, using a frequency table; -1 if none."""
    counts = Counter(values)
    return next((value for value, count in counts.items() if count == 1), NOT_FOUND)


def single_number(values: Sequence[int]) -> int:
    """Return the element that appears once when all others appear twice, by XOR."""
    return reduce(xor, values, 0)


def union_brute(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Return the sorted distinct elements of both sequences."""
    return sorted(set(first) | set(second))


def union_sorted(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Merge two sorted sequences into their union without duplicates."""
    return [value for value, _ in groupby(heapq.merge(first, second))]
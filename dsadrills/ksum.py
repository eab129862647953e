"""Pair, triplet and quadruplet sum searches."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import combinations


def two_sum_brute(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return indices (i, j), i < j, of two elements summing to target, or None."""
    for (i, a), (j, b) in combinations(enumerate(values), 2):
        if a + b == target:
            return i, j
    return None


def two_sum(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return increasing indices of two elements summing to target via a lookup table, or None."""
    seen: dict[int, int] = {}
    for index, value in enumerate(values):
        complement = target - value
        if complement in seen:
            first, second = sorted((seen[complement], index))
            return first, second
        seen[value] = index
    return None


def three_sum_brute(values: Sequence[int]) -> list[list[int]]:
    """Return the distinct sorted triplets summing to zero, checking every triple."""
    found = {
        tuple(sorted(triple))
        for triple in combinations(values, 3)
        if sum(triple) == 0
    }
    return [list(triple) for triple in sorted(found)]


def three_sum(values: Sequence[int]) -> list[list[int]]:
    """Return the distinct sorted triplets summing to zero using sorting and two pointers."""
    ordered = sorted(values)
    n = len(ordered)
    result: list[list[int]] = []
    for i in range(n - 2):
        if i > 0 and ordered[i] == ordered[i - 1]:
            continue
        left, right = i + 1, n - 1
        while left < right:
            total = ordered[i] + ordered[left] + ordered[right]
            if total == 0:
                result.append([ordered[i], ordered[left], ordered[right]])
                while left < right and ordered[left] == ordered[left + 1]:
                    left += 1
                while left < right and ordered[right] == ordered[right - 1]:
                    right -= 1
                left += 1
                right -= 1
            elif total < 0:
                left += 1
            else:
                right -= 1
    return result


def four_sum(values: Sequence[int], target: int) -> list[list[int]]:
    """Return the distinct sorted quadruplets summing to target."""
    n = len(values)
    if n < 4:
        return []
    ordered = sorted(values)
    result: list[list[int]] = []
    for i in range(n - 3):
        if i > 0 and ordered[i] == ordered[i - 1]:
            continue
        for j in range(i + 1, n - 2):
            if j > i + 1 and ordered[j] == ordered[j - 1]:
                continue
            remaining = target - ordered[i] - ordered[j]
            left, right = j + 1, n - 1
            while left < right:
                total = ordered[left] + ordered[right]
                if total == remaining:
                    result.append([ordered[i], ordered[j], ordered[left], ordered[right]])
                    left += 1
                    right -= 1
                    while left < right and ordered[left] == ordered[left - 1]:
                        left += 1
                    while left < right and ordered[right] == ordered[right + 1]:
                        right -= 1
                elif total < remaining:
                    left += 1
                else:
                    right -= 1
    return result
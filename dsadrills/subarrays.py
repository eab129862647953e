"""Subarray drills: maximum sums and products, prefix-sum counts, leaders and runs."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence


def _require_items(values: Sequence[int]) -> None:
    if not values:
        raise ValueError("sequence must not be empty")


def max_subarray_sum(values: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray (Kadane)."""
    _require_items(values)
    best = current = values[0]
    for value in values[1:]:
        current = max(value, current + value)
        best = max(best, current)
    return best


def max_profit_brute(prices: Sequence[int]) -> int:
    """Return the best profit of one buy followed by one sell, trying every pair."""
    best = 0
    for day, buy in enumerate(prices):
        for sell in prices[day + 1:]:
            if sell > buy:
                best = max(best, sell - buy)
    return best


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit of one buy followed by one sell in a single pass."""
    best = 0
    cheapest = None
    for price in prices:
        cheapest = price if cheapest is None else min(cheapest, price)
        best = max(best, price - cheapest)
    return best


def leaders_brute(values: Sequence[int]) -> list[int]:
    """Return the elements strictly greater than everything to their right."""
    return [
        value
        for position, value in enumerate(values)
        if all(later < value for later in values[position + 1:])
    ]


def leaders(values: Sequence[int]) -> list[int]:
    """Return the leaders in their original order by scanning from the right."""
    found: list[int] = []
    max_right = None
    for value in reversed(values):
        if max_right is None or value > max_right:
            found.append(value)
            max_right = value
    found.reverse()
    return found


def longest_consecutive_brute(values: Sequence[int]) -> int:
    """Return the length of the longest run of consecutive integers, searching linearly."""
    if not values:
        return 0
    longest = 1
    for value in values:
        current, count = value, 1
        while current + 1 in values:
            current += 1
            count += 1
        longest = max(longest, count)
    return longest


def longest_consecutive(values: Sequence[int]) -> int:
    """Return the length of the longest run of consecutive integers using a set."""
    present = set(values)
    longest = 0
    for value in present:
        if value - 1 in present:
            continue
        current = value
        while current + 1 in present:
            current += 1
        longest = max(longest, current - value + 1)
    return longest


def count_subarrays_with_sum_brute(values: Sequence[int], k: int) -> int:
    """Count the contiguous subarrays summing to k by trying every start and end."""
    count = 0
    for start in range(len(values)):
        total = 0
        for value in values[start:]:
            total += value
            if total == k:
                count += 1
    return count


def count_subarrays_with_sum(values: Sequence[int], k: int) -> int:
    """Count the contiguous subarrays summing to k using prefix-sum frequencies."""
    seen = Counter({0: 1})
    prefix = count = 0
    for value in values:
        prefix += value
        count += seen[prefix - k]
        seen[prefix] += 1
    return count


def max_product_brute(values: Sequence[int]) -> int:
    """Return the largest product of a non-empty contiguous subarray, trying all of them."""
    _require_items(values)
    best = None
    for start in range(len(values)):
        product = 1
        for value in values[start:]:
            product *= value
            best = product if best is None else max(best, product)
    return best


def max_product(values: Sequence[int]) -> int:
    """Return the largest product of a non-empty contiguous subarray in one pass."""
    _require_items(values)
    high = low = best = values[0]
    for value in values[1:]:
        candidates = (value, value * high, value * low)
        high, low = max(candidates), min(candidates)
        best = max(best, high)
    return best


def longest_subarray_with_sum_brute(values: Sequence[int], k: int) -> int:
    """Return the length of the longest contiguous subarray summing to k, trying all."""
    longest = 0
    for start in range(len(values)):
        total = 0
        for length, value in enumerate(values[start:], start=1):
            total += value
            if total == k:
                longest = max(longest, length)
    return longest


def longest_subarray_with_sum(values: Sequence[int], k: int) -> int:
    """Return the length of the longest contiguous subarray summing to k via prefix sums."""
    first_index = {0: -1}
    prefix = longest = 0
    for index, value in enumerate(values):
        prefix += value
        if prefix - k in first_index:
            longest = max(longest, index - first_index[prefix - k])
        first_index.setdefault(prefix, index)
    return longest


def longest_zero_sum_brute(values: Sequence[int]) -> int:
    """Return the length of the longest contiguous subarray summing to zero, trying all."""
    return longest_subarray_with_sum_brute(values, 0)


def longest_zero_sum(values: Sequence[int]) -> int:
    """Return the length of the longest zero-sum subarray using first prefix occurrences."""
    first_index: dict[int, int] = {}
    prefix = longest = 0
    for index, value in enumerate(values):
        prefix += value
        if prefix == 0:
            longest = index + 1
        elif prefix in first_index:
            longest = max(longest, index - first_index[prefix])
        else:
            first_index[prefix] = index
    return longest


def count_subarrays_with_xor(values: Sequence[int], k: int) -> int:
    """Count the contiguous subarrays whose XOR equals k using prefix-XOR frequencies."""
    seen: Counter[int] = Counter()
    prefix = count = 0
    for value in values:
        prefix ^= value
        if prefix == k:
            count += 1
        count += seen[prefix ^ k]
        seen[prefix] += 1
    return count
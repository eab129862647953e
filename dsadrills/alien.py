"""Recovering the letter order of an alien alphabet from a sorted dictionary."""

from __future__ import annotations

import string
from collections.abc import Iterable, Sequence
from itertools import permutations

_NEW, _ACTIVE, _DONE = 0, 1, 2


def _check_words(words: Iterable[str]) -> list[str]:
    checked = list(words)
    for word in checked:
        for char in word:
            if char not in string.ascii_lowercase:
                raise ValueError(f"character {char!r} is not a lower-case letter a-z")
    return checked


def _first_difference(first: str, second: str) -> tuple[str, str] | None:
    return next(((a, b) for a, b in zip(first, second) if a != b), None)


def _is_valid_order(order: Sequence[str], words: Sequence[str]) -> bool:
    """Tell whether the dictionary is sorted under the given letter order."""
    position = {char: index for index, char in enumerate(order)}
    for first, second in zip(words, words[1:]):
        difference = _first_difference(first, second)
        if difference is None:
            if len(first) > len(second):
                return False
            continue
        a, b = difference
        if a not in position or b not in position or position[a] >= position[b]:
            return False
    return True


def alien_order_brute(k: int, words: Iterable[str]) -> list[str]:
    """Return the first valid ordering of up to k letters, trying every permutation; [] if none."""
    checked = _check_words(words)
    letters: list[str] = []
    for word in checked:
        for char in word:
            if len(letters) < k and char not in letters:
                letters.append(char)
    return next(
        (list(order) for order in permutations(sorted(letters)) if _is_valid_order(order, checked)),
        [],
    )


def alien_order(k: int, words: Iterable[str]) -> list[str]:
    """Return a letter order by topological sort of the first differences; [] on a cycle."""
    checked = _check_words(words)
    successors: dict[str, list[str]] = {char: [] for char in string.ascii_lowercase}
    present: set[str] = set()
    for first, second in zip(checked, checked[1:]):
        present.update(first)
        present.update(second)
        difference = _first_difference(first, second)
        if difference is not None:
            a, b = difference
            successors[a].append(b)

    letters = sorted(present)[: max(k, 0)]
    state: dict[str, int] = {}
    finished: list[str] = []

    def visit(char: str) -> bool:
        current = state.get(char, _NEW)
        if current == _ACTIVE:
            return False
        if current == _DONE:
            return True
        state[char] = _ACTIVE
        if not all(visit(after) for after in successors[char]):
            return False
        state[char] = _DONE
        finished.append(char)
        return True

    for char in letters:
        if state.get(char, _NEW) == _NEW and not visit(char):
            return []
    finished.reverse()
    return finished
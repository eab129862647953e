import pytest

from dsadrills.alien import alien_order, alien_order_brute

DICTIONARY = ["baa", "abcd", "abca", "cab", "cad"]


def _respects(order, words):
    position = {char: index for index, char in enumerate(order)}
    for first, second in zip(words, words[1:]):
        for a, b in zip(first, second):
            if a != b:
                if position[a] >= position[b]:
                    return False
                break
    return True


@pytest.mark.parametrize("solve", [alien_order, alien_order_brute])
def test_order_respects_dictionary(solve):
    order = solve(4, DICTIONARY)
    assert sorted(order) == ["a", "b", "c", "d"]
    assert _respects(order, DICTIONARY)


def test_brute_order_respects_three_letter_dictionary():
    words = ["caa", "aaa", "aab"]
    order = alien_order_brute(3, words)
    assert sorted(order) == ["a", "b", "c"]
    assert _respects(order, words)


def test_optimal_order_respects_three_letter_dictionary():
    words = ["caa", "aaa", "aab"]
    order = alien_order(3, words)
    assert sorted(order) == ["a", "b", "c"]
    assert _respects(order, words)


@pytest.mark.parametrize("solve", [alien_order, alien_order_brute])
def test_contradictory_dictionary_has_no_order(solve):
    assert solve(2, ["ab", "ba", "ab"]) == []


def test_brute_rejects_longer_word_before_its_prefix():
    assert alien_order_brute(3, ["abc", "ab"]) == []


def test_optimal_single_word_gives_no_letters():
    assert alien_order(3, ["abc"]) == []


def test_optimal_limits_letters_to_k():
    order = alien_order(2, ["ab", "ac"])
    assert set(order) <= {"a", "b", "c"}
    assert order.index("b") < order.index("c")


@pytest.mark.parametrize("solve", [alien_order, alien_order_brute])
def test_non_letter_raises(solve):
    with pytest.raises(ValueError):
        solve(2, ["a1", "b"])
import pytest

from dskit.arrays import (
    concatenate,
    delete_at,
    elements_repeated_twice,
    find_duplicates,
    insert_at,
    is_alphabetic,
    linear_search,
    repeated_characters,
    repeated_frequencies,
    split_even_odd,
)


def test_linear_search_finds_first_match():
    items = [4, 8, 15, 8, 16]
    position = linear_search(items, 8)
    assert items[position - 1] == 8
    assert 8 not in items[: position - 1]


def test_linear_search_positions_start_at_one():
    assert linear_search([42], 42) == 1


def test_linear_search_missing_raises():
    with pytest.raises(ValueError):
        linear_search([1, 2, 3], 9)


def test_insert_then_delete_round_trip():
    items = [10, 20, 30]
    for position in range(1, len(items) + 2):
        grown = insert_at(items, position, 99)
        assert grown[position - 1] == 99
        assert len(grown) == len(items) + 1
        assert delete_at(grown, position) == items


def test_insert_and_delete_leave_input_untouched():
    items = [1, 2, 3]
    insert_at(items, 1, 0)
    delete_at(items, 1)
    assert items == [1, 2, 3]


@pytest.mark.parametrize("position", [0, 5])
def test_insert_out_of_range(position):
    with pytest.raises(IndexError):
        insert_at([1, 2, 3], position, 7)


@pytest.mark.parametrize("position", [0, 4])
def test_delete_out_of_range(position):
    with pytest.raises(IndexError):
        delete_at([1, 2, 3], position)


def test_find_duplicates_reports_each_later_repeat():
    assert find_duplicates([3, 1, 3, 2, 3]) == [3, 3]
    assert find_duplicates([5, 6, 7]) == []


def test_split_even_odd_partitions_in_order():
    items = [7, -4, 3, 0, -3, 10]
    evens, odds = split_even_odd(items)
    assert all(n % 2 == 0 for n in evens)
    assert all(n % 2 == 1 for n in odds)
    assert sorted(evens + odds) == sorted(items)
    assert evens == [n for n in items if n in evens]
    assert -3 in odds


def test_concatenate_keeps_both_parts():
    first, second = [1, 2], [3, 4, 5]
    joined = concatenate(first, second)
    assert joined[: len(first)] == first
    assert joined[len(first):] == second


def test_repeated_frequencies_example():
    assert repeated_frequencies([2, 5, 2, 8, 5, 6, 8, 8, 2]) == {2: 3, 5: 2, 8: 3}


def test_repeated_frequencies_counts_match_and_are_sorted():
    items = [9, 1, 9, 4, 1, 1, 7]
    result = repeated_frequencies(items)
    assert list(result) == sorted(result)
    for value, count in result.items():
        assert items.count(value) == count
        assert count > 1
    assert 4 not in result


def test_elements_repeated_twice():
    assert elements_repeated_twice([1, 2, 3, 2, 4, 5, 1, 6, 7, 1]) == [2]
    assert elements_repeated_twice([8, 9, 8, 9]) == [8, 9]


def test_repeated_characters_invariants():
    text = "programming"
    found = repeated_characters(text)
    assert found
    for char, i, j in found:
        assert i < j
        assert text[i] == text[j] == char
        assert char not in text[i + 1 : j]


def test_repeated_characters_simple():
    assert repeated_characters("abca") == [("a", 0, 3)]
    assert repeated_characters("abc") == []


@pytest.mark.parametrize(
    "text, expected",
    [("Hello", True), ("", True), ("abc1", False), ("two words", False), ("é", False)],
)
def test_is_alphabetic(text, expected):
    assert is_alphabetic(text) is expected
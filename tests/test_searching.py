import random

import pytest

from algokit.searching import (
    Occurrence,
    find_substring,
    last_occurrence,
    min_max,
    most_frequent,
)


def test_source_example_not_present():
    assert find_substring("for", "hacktoberfest") == -1


@pytest.mark.parametrize("pattern", ["hack", "fest", "tober", "e", "t", "hacktoberfest"])
def test_found_substring_is_first_match(pattern):
    text = "hacktoberfest"
    index = find_substring(pattern, text)
    assert text[index:index + len(pattern)] == pattern
    assert all(
        text[i:i + len(pattern)] != pattern for i in range(index)
    )


def test_pattern_longer_than_text():
    assert find_substring("hacktoberfests", "hacktoberfest") == -1


def test_empty_pattern_matches_at_start():
    assert find_substring("", "hacktoberfest") == 0


def test_last_occurrence_found():
    values = [4, 2, 4, 9, 4, 1]
    result = last_occurrence(values, 4)
    assert result.last_index == 4
    assert result.count == values.count(4)
    assert result.position_from_end == len(values) - result.last_index
    assert values[result.last_index] == 4
    assert 4 not in values[result.last_index + 1:]


def test_last_occurrence_absent():
    values = [1, 2, 3]
    assert last_occurrence(values, 7) == Occurrence(
        last_index=None, count=0, position_from_end=len(values)
    )


def test_most_frequent_picks_highest_count():
    values = [1, 3, 3, 2, 3, 1]
    result = most_frequent(values)
    assert values.count(result) == max(values.count(v) for v in values)
    assert result == 3


def test_most_frequent_tie_goes_to_first_seen():
    values = [5, 8, 8, 5]
    assert most_frequent(values) == values[0]


def test_most_frequent_empty_raises():
    with pytest.raises(ValueError):
        most_frequent([])


@pytest.mark.parametrize("seed", range(6))
def test_min_max_matches_builtins(seed):
    rng = random.Random(seed)
    values = [rng.randrange(1000) for _ in range(rng.randrange(1, 50))]
    assert min_max(values) == (min(values), max(values))


@pytest.mark.parametrize("values", [[7], [3, 9], [9, 3], [5, 5]])
def test_min_max_small_inputs(values):
    assert min_max(values) == (min(values), max(values))


def test_min_max_empty_raises():
    with pytest.raises(ValueError):
        min_max([])
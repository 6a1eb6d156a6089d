import io
import itertools
import random

import pytest

from algokit.sorting import main, partition, quicksort, sorted_permutations


def test_permutations_match_all_orderings():
    expected = sorted({"".join(p) for p in itertools.permutations("cab")})
    assert list(sorted_permutations("cab")) == expected


def test_permutations_skip_duplicates():
    result = list(sorted_permutations("aab"))
    assert len(result) == len(set(result))
    assert result == sorted(result)
    assert set(result) == {"".join(p) for p in itertools.permutations("aab")}


def test_permutations_start_sorted_and_end_reversed():
    result = list(sorted_permutations("dbca"))
    assert result[0] == "".join(sorted("dbca"))
    assert result[-1] == "".join(sorted("dbca", reverse=True))


def test_permutations_of_empty_word():
    assert list(sorted_permutations("")) == [""]


@pytest.mark.parametrize("values", [[5, 1, 4, 2, 3], [3, 3, 1, 2, 3], [9, 8, 7], [1]])
def test_partition_places_pivot(values):
    items = list(values)
    pivot = items[-1]
    index = partition(items, 0, len(items) - 1)
    assert items[index] == pivot
    assert all(item <= pivot for item in items[:index])
    assert all(item > pivot for item in items[index + 1:])
    assert sorted(items) == sorted(values)


def test_partition_respects_bounds():
    items = [10, 4, 2, 3, 0]
    index = partition(items, 1, 3)
    assert items[0] == 10 and items[4] == 0
    assert items[index] == 3
    assert 1 <= index <= 3


@pytest.mark.parametrize("seed", range(5))
def test_quicksort_matches_sorted(seed):
    rng = random.Random(seed)
    values = [rng.randint(-50, 50) for _ in range(rng.randint(0, 40))]
    assert quicksort(values) == sorted(values)


def test_quicksort_leaves_input_alone():
    values = [3, 1, 2]
    result = quicksort(values)
    assert values == [3, 1, 2]
    assert result == sorted(values)


def test_quicksort_handles_sorted_input():
    values = list(range(2000))
    assert quicksort(values) == values


def test_main_permutations(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\nba\nx\n"))
    assert main(["permutations"]) == 0
    lines = capsys.readouterr().out.split("\n")
    assert lines[:5] == ["ab", "ba", "", "x", ""]


def test_main_quicksort(capsys):
    assert main(["quicksort", "3", "-1", "2"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0].strip() == "Sorted array:"
    assert [int(token) for token in out[1].split()] == sorted([3, -1, 2])
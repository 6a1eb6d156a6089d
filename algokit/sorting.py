"""Lexicographic permutations and quicksort."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, MutableSequence, Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def _next_permutation(chars: list[str]) -> bool:
    """Rearrange ``chars`` into the next lexicographic order; False when it was the last."""
    pivot = len(chars) - 2
    while pivot >= 0 and chars[pivot] >= chars[pivot + 1]:
        pivot -= 1
    if pivot < 0:
        return False
    successor = len(chars) - 1
    while chars[successor] <= chars[pivot]:
        successor -= 1
    chars[pivot], chars[successor] = chars[successor], chars[pivot]
    chars[pivot + 1:] = reversed(chars[pivot + 1:])
    return True


def sorted_permutations(word: str) -> Iterator[str]:
    """Yield every distinct rearrangement of ``word`` in lexicographic order."""
    chars = sorted(word)
    yield "".join(chars)
    while _next_permutation(chars):
        yield "".join(chars)


def partition(items: MutableSequence[Any], low: int, high: int) -> int:
    """Partition ``items[low:high + 1]`` in place around its last element.

    Returns the final index of the pivot: everything before it is ``<=`` the
    pivot and everything after it is greater.
    """
    pivot = items[high]
    boundary = low - 1
    for current in range(low, high):
        if items[current] <= pivot:
            boundary += 1
            items[boundary], items[current] = items[current], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def quicksort(items: Sequence[T]) -> list[T]:
    """Return a new list with ``items`` in ascending order."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            middle = partition(result, low, high)
            pending.append((low, middle - 1))
            pending.append((middle + 1, high))
    return result


def _stdin_tokens() -> list[str]:
    return sys.stdin.read().split()


def main(argv: Sequence[str] | None = None) -> int:
    """List permutations of words or sort integers."""
    parser = argparse.ArgumentParser(prog="sorting")
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser(
        "permutations",
        help="read a count and that many words from stdin, print their permutations",
    )
    sorter = commands.add_parser("quicksort", help="sort integers")
    sorter.add_argument(
        "numbers",
        type=int,
        nargs="*",
        help="integers to sort (otherwise a count and the integers from stdin)",
    )
    args = parser.parse_args(argv)

    if args.command == "permutations":
        tokens = _stdin_tokens()
        if not tokens:
            parser.error("expected the number of words")
        try:
            count = int(tokens[0])
        except ValueError:
            parser.error(f"not a number: {tokens[0]!r}")
        for word in tokens[1:1 + count]:
            for arrangement in sorted_permutations(word):
                print(arrangement)
            print()
        return 0

    numbers = args.numbers
    if not numbers:
        tokens = _stdin_tokens()
        try:
            values = [int(token) for token in tokens]
        except ValueError as error:
            parser.error(str(error))
        if not values:
            parser.error("expected the number of elements")
        numbers = values[1:1 + values[0]]
    print("Sorted array: ")
    print("".join(f"{value} " for value in quicksort(numbers)))
    return 0
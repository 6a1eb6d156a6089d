"""Distinct prime factor counting and the Josephus survivor."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence


def count_distinct_prime_factors(n: int) -> int:
    """Return how many distinct primes divide ``n`` (sign is ignored)."""
    n = abs(n)
    if n == 0:
        raise ValueError("zero has no prime factorisation")

    count = 0
    if n % 2 == 0:
        count += 1
        while n % 2 == 0:
            n //= 2

    factor = 3
    while factor * factor <= n:
        if n % factor == 0:
            count += 1
            while n % factor == 0:
                n //= factor
        factor += 2

    if n > 2:
        count += 1
    return count


def josephus_survivor(n: int) -> int:
    """Return the 1-based position that survives when every second of ``n`` people is removed."""
    if n < 1:
        raise ValueError("there must be at least one soldier")
    highest_bit = 1 << (n.bit_length() - 1)
    return ((n ^ highest_bit) << 1) | 1


def _read_ints(lines: Iterable[str]) -> Iterator[int]:
    for line in lines:
        for token in line.split():
            try:
                yield int(token)
            except ValueError:
                return


def main(argv: Sequence[str] | None = None) -> int:
    """Run the prime factor counter or the Josephus solver."""
    parser = argparse.ArgumentParser(prog="number-theory")
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser(
        "primes", help="count distinct prime factors of integers read from stdin until 0"
    )
    josephus = commands.add_parser("josephus", help="find the surviving soldier")
    josephus.add_argument("soldiers", type=int, nargs="?")
    args = parser.parse_args(argv)

    if args.command == "primes":
        for n in _read_ints(sys.stdin):
            if n == 0:
                break
            print(f"Total distinct primefactor = {count_distinct_prime_factors(n)}")
        return 0

    soldiers = args.soldiers
    if soldiers is None:
        soldiers = next(_read_ints(sys.stdin), None)
        if soldiers is None:
            parser.error("expected the number of soldiers")
    try:
        print(josephus_survivor(soldiers))
    except ValueError as error:
        parser.error(str(error))
    return 0
"""Spell out numbers below ten thousand in English words."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

_DIGITS = (
    "", "one", "two", "three", "four", "five", "six", "seven",
    "eight", "nine", "ten", "eleven", "twelve", "thirteen",
    "fourteen", "fifteen", "sixteen", "seventeen", "eighteen",
    "nineteen",
)
_TENS = (
    "", "", "twenty", "thirty", "forty", "fifty", "sixty",
    "seventy", "eighty", "ninety",
)


def _append(text: str, word: str) -> str:
    if text and not text.endswith(" "):
        text += " "
    return text + word


def spell_number(num: int) -> str:
    """Spell ``num`` in words; only its last four digits are considered."""
    if num < 0:
        raise ValueError("cannot spell a negative number")

    text = ""
    pending_and = False
    thousands = (num // 1000) % 10
    hundreds = (num // 100) % 10
    last_two = num % 100

    for value, singular, plural in (
        (thousands, " thousand", " thousands"),
        (hundreds, " hundred", " hundreds"),
    ):
        if value > 0:
            if pending_and:
                text += " and"
            text = _append(text, _DIGITS[value])
            text += plural if value > 1 else singular
            pending_and = True

    if last_two > 0:
        if pending_and:
            text += " and"
        if 10 <= last_two <= 19:
            text = _append(text, _DIGITS[last_two])
        else:
            text = _append(text, _TENS[last_two // 10])
            text = _append(text, _DIGITS[last_two % 10])

    return text


def main(argv: Sequence[str] | None = None) -> int:
    """Print a number followed by its spelling."""
    parser = argparse.ArgumentParser(prog="spell", description="Spell a number in words.")
    parser.add_argument("number", type=int, nargs="?", help="number to spell (read from stdin if absent)")
    args = parser.parse_args(argv)

    number = args.number
    if number is None:
        tokens = sys.stdin.read().split()
        if not tokens:
            parser.error("expected a number")
        try:
            number = int(tokens[0])
        except ValueError:
            parser.error(f"not a number: {tokens[0]!r}")
    try:
        words = spell_number(number)
    except ValueError as error:
        parser.error(str(error))
    print(f"{number} {words}")
    return 0
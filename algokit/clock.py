"""A 24-hour clock that moves forward one minute at a time."""

from __future__ import annotations

import argparse
import itertools
import sys
from collections.abc import Iterator, Sequence

MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24


def parse_time(text: str) -> tuple[int, int]:
    """Parse a ``HH:MM`` time into ``(hour, minute)``."""
    cleaned = text.strip()
    hour_part, separator, minute_part = cleaned.partition(":")
    digits = hour_part + minute_part
    if (
        not separator
        or len(hour_part) != 2
        or len(minute_part) != 2
        or not (digits.isascii() and digits.isdigit())
    ):
        raise ValueError(f"expected a time as HH:MM, got {text!r}")
    hour, minute = int(hour_part), int(minute_part)
    if hour >= HOURS_PER_DAY or minute >= MINUTES_PER_HOUR:
        raise ValueError(f"time out of range: {text!r}")
    return hour, minute


def _advance(hour: int, minute: int) -> Iterator[tuple[int, int]]:
    while True:
        minute += 1
        if minute == MINUTES_PER_HOUR:
            minute = 0
            hour = (hour + 1) % HOURS_PER_DAY
        yield hour, minute


def ticks(start: str) -> Iterator[tuple[int, int]]:
    """Yield every following minute after ``start`` as ``(hour, minute)``, forever.

    The start time is validated immediately, before iteration begins.
    """
    hour, minute = parse_time(start)
    return _advance(hour, minute)


def _format(hour: int, minute: int) -> str:
    return f"{hour:02d} {minute:02d}"


def main(argv: Sequence[str] | None = None) -> int:
    """Print the minutes that follow a start time, one per line."""
    parser = argparse.ArgumentParser(
        prog="clock", description="Print the minutes that follow a HH:MM time."
    )
    parser.add_argument("start", nargs="?", help="start time as HH:MM (read from stdin if absent)")
    parser.add_argument(
        "-n", "--count", type=int, default=None, help="stop after this many minutes"
    )
    args = parser.parse_args(argv)

    if args.count is not None and args.count < 0:
        parser.error("count must not be negative")
    start = args.start if args.start is not None else sys.stdin.readline()
    try:
        stream = ticks(start)
    except ValueError as error:
        parser.error(str(error))

    if args.count is not None:
        stream = itertools.islice(stream, args.count)
    for hour, minute in stream:
        print(_format(hour, minute))
    return 0
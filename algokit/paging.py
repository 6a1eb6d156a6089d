"""Page replacement simulations: first-in first-out and least recently used."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

Frames = tuple[int | None, ...]


@dataclass(frozen=True)
class PagingResult:
    """Outcome of a simulation.

    ``history`` has one entry per reference: the frame contents after a page
    fault, or ``None`` when the page was already loaded.
    """

    faults: int
    history: tuple[Frames | None, ...]

    @property
    def hits(self) -> int:
        return len(self.history) - self.faults


def _check_frames(frames: int) -> None:
    if frames < 1:
        raise ValueError("there must be at least one frame")


def fifo_replacement(references: Iterable[int], frames: int) -> PagingResult:
    """Simulate FIFO replacement; empty frames show as ``None``."""
    _check_frames(frames)
    slots: list[int | None] = [None] * frames
    oldest = 0
    faults = 0
    history: list[Frames | None] = []
    for page in references:
        if page in slots:
            history.append(None)
            continue
        slots[oldest] = page
        oldest = (oldest + 1) % frames
        faults += 1
        history.append(tuple(slots))
    return PagingResult(faults, tuple(history))


def lru_replacement(references: Iterable[int], frames: int) -> PagingResult:
    """Simulate LRU replacement; only frames already loaded are shown."""
    _check_frames(frames)
    loaded: list[int] = []
    last_used: dict[int, int] = {}
    faults = 0
    history: list[Frames | None] = []
    for position, page in enumerate(references):
        if page in loaded:
            history.append(None)
        else:
            faults += 1
            if len(loaded) < frames:
                loaded.append(page)
            else:
                victim = min(range(len(loaded)), key=lambda slot: last_used[loaded[slot]])
                loaded[victim] = page
            history.append(tuple(loaded))
        last_used[page] = position
    return PagingResult(faults, tuple(history))


def main(argv: Sequence[str] | None = None) -> int:
    """Simulate a page replacement policy and report the faults."""
    parser = argparse.ArgumentParser(prog="paging")
    parser.add_argument("policy", choices=("fifo", "lru"))
    parser.add_argument("-f", "--frames", type=int, required=True, help="number of frames")
    parser.add_argument(
        "references", type=int, nargs="*", help="reference string (read from stdin if absent)"
    )
    args = parser.parse_args(argv)

    references = args.references
    if not references:
        try:
            references = [int(token) for token in sys.stdin.read().split()]
        except ValueError as error:
            parser.error(str(error))

    try:
        if args.policy == "fifo":
            result = fifo_replacement(references, args.frames)
        else:
            result = lru_replacement(references, args.frames)
    except ValueError as error:
        parser.error(str(error))

    if args.policy == "fifo":
        print("Reference string\t page frames")
        for page, frames in zip(references, result.history):
            shown = "" if frames is None else "".join(
                f"{-1 if frame is None else frame}\t" for frame in frames
            )
            print(f"\t{page}\t|\t{shown}")
        print(f"Page Fault Is {result.faults}")
    else:
        for frames in result.history:
            if frames is not None:
                print("".join(f"\t{frame}" for frame in frames))
        print(f"\nThe no of page faults is {result.faults}")
    return 0
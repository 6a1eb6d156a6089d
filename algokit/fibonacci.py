"""Several ways of computing Fibonacci numbers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

_Matrix = tuple[tuple[int, int], tuple[int, int]]
_Q: _Matrix = ((1, 1), (1, 0))


def _check(n: int) -> None:
    if n < 0:
        raise ValueError("Fibonacci numbers are defined for n >= 0")


def _multiply(a: _Matrix, b: _Matrix) -> _Matrix:
    return (
        (a[0][0] * b[0][0] + a[0][1] * b[1][0], a[0][0] * b[0][1] + a[0][1] * b[1][1]),
        (a[1][0] * b[0][0] + a[1][1] * b[1][0], a[1][0] * b[0][1] + a[1][1] * b[1][1]),
    )


def _power(matrix: _Matrix, exponent: int) -> _Matrix:
    if exponent <= 1:
        return matrix
    half = _power(matrix, exponent // 2)
    result = _multiply(half, half)
    if exponent % 2 == 1:
        result = _multiply(result, _Q)
    return result


def fib_iterative(n: int) -> int:
    """Return F(n) by building the sequence up from F(0) and F(1)."""
    _check(n)
    previous, current = 0, 1
    for _ in range(n):
        previous, current = current, previous + current
    return previous


def fib_recursive(n: int) -> int:
    """Return F(n) by plain double recursion (exponential time)."""
    _check(n)
    if n <= 1:
        return n
    return fib_recursive(n - 1) + fib_recursive(n - 2)


def fib_matrix(n: int) -> int:
    """Return F(n) by multiplying the Fibonacci matrix ``n - 1`` times over."""
    _check(n)
    if n == 0:
        return 0
    result = _Q
    for _ in range(n - 2):
        result = _multiply(result, _Q)
    return result[0][0]


def fib_matrix_power(n: int) -> int:
    """Return F(n) using matrix exponentiation by squaring."""
    _check(n)
    if n <= 1:
        return n
    return _power(_Q, n - 1)[0][0]


_METHODS: dict[str, Callable[[int], int]] = {
    "iterative": fib_iterative,
    "recursive": fib_recursive,
    "matrix": fib_matrix,
    "matrix-power": fib_matrix_power,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Print the n-th Fibonacci number."""
    parser = argparse.ArgumentParser(prog="fibonacci", description="Print F(n).")
    parser.add_argument("n", type=int, nargs="?", help="index (read from stdin if absent)")
    parser.add_argument("-m", "--method", choices=sorted(_METHODS), default="iterative")
    args = parser.parse_args(argv)

    n = args.n
    if n is None:
        tokens = sys.stdin.read().split()
        if not tokens:
            parser.error("expected an index")
        try:
            n = int(tokens[0])
        except ValueError:
            parser.error(f"not a number: {tokens[0]!r}")
    try:
        print(_METHODS[args.method](n))
    except ValueError as error:
        parser.error(str(error))
    return 0
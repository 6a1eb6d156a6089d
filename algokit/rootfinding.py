"""Numerical root finding for polynomials.

Coefficients are always given from the highest power down to the constant.
"""

from __future__ import annotations

import argparse
import math
from collections.abc import Sequence

_MAX_ITERATIONS = 10_000


class RootFindingError(ArithmeticError):
    """Raised when a method cannot start or does not reach a root."""


def _coefficients(coeffs: Sequence[float], minimum_degree: int = 1) -> list[float]:
    values = [float(c) for c in coeffs]
    if len(values) < minimum_degree + 1:
        raise ValueError(f"need a polynomial of degree at least {minimum_degree}")
    return values


def evaluate_polynomial(coeffs: Sequence[float], x: float) -> float:
    """Return the value of the polynomial at ``x``."""
    result = 0.0
    for c in coeffs:
        result = result * x + c
    return result


def polynomial_derivative(coeffs: Sequence[float], x: float) -> float:
    """Return the value of the polynomial's first derivative at ``x``."""
    degree = len(coeffs) - 1
    result = 0.0
    for power, c in zip(range(degree, 0, -1), coeffs):
        result = result * x + c * power
    return result


def _check_bracket(values: list[float], low: float, high: float) -> None:
    if evaluate_polynomial(values, low) * evaluate_polynomial(values, high) >= 0:
        raise RootFindingError(f"no sign change between {low} and {high}")


def _settled(previous: float, current: float, accuracy: float) -> bool:
    """Relative change between iterates, in percent, is within ``accuracy``."""
    if current == 0:
        return previous == 0
    return abs((1 - previous / current) * 100) <= accuracy


def _positive(name: str, value: float) -> None:
    if value <= 0:
        raise ValueError(f"{name} must be positive")


def bisection(
    coeffs: Sequence[float], low: float, high: float, accuracy: float = 0.0001
) -> float:
    """Halve a sign-changing interval until it is no wider than ``accuracy``."""
    values = _coefficients(coeffs)
    _positive("accuracy", accuracy)
    _check_bracket(values, low, high)
    x = (low + high) / 2
    while abs(high - low) > accuracy:
        x = (low + high) / 2
        fx = evaluate_polynomial(values, x)
        if fx == 0:
            break
        if evaluate_polynomial(values, low) * fx < 0:
            high = x
        else:
            low = x
    return x


def false_position(
    coeffs: Sequence[float], low: float, high: float, accuracy: float = 0.05
) -> float:
    """Regula falsi; stops when successive estimates differ by at most ``accuracy`` percent."""
    values = _coefficients(coeffs)
    _positive("accuracy", accuracy)
    _check_bracket(values, low, high)
    previous: float | None = None
    for _ in range(_MAX_ITERATIONS):
        f_low = evaluate_polynomial(values, low)
        f_high = evaluate_polynomial(values, high)
        x = (low * f_high - high * f_low) / (f_high - f_low)
        if previous is not None and _settled(previous, x, accuracy):
            return x
        fx = evaluate_polynomial(values, x)
        if fx == 0:
            return x
        if fx * f_low < 0:
            high = x
        else:
            low = x
        previous = x
    raise RootFindingError("false position did not converge")


def secant(
    coeffs: Sequence[float], low: float, high: float, accuracy: float = 0.05
) -> float:
    """Secant method started from a sign-changing pair of points."""
    values = _coefficients(coeffs)
    _positive("accuracy", accuracy)
    _check_bracket(values, low, high)
    previous = 0.0
    for iteration in range(_MAX_ITERATIONS):
        f_low = evaluate_polynomial(values, low)
        f_high = evaluate_polynomial(values, high)
        if f_high == f_low:
            raise RootFindingError("secant line is horizontal")
        x = (low * f_high - high * f_low) / (f_high - f_low)
        if iteration > 1 and _settled(previous, x, accuracy):
            return x
        if evaluate_polynomial(values, x) == 0:
            return x
        low, high = high, x
        previous = x
    raise RootFindingError("secant method did not converge")


def _newton_step(values: list[float], x: float) -> float:
    slope = polynomial_derivative(values, x)
    if slope == 0:
        raise RootFindingError(f"derivative vanishes at {x}")
    return evaluate_polynomial(values, x) / slope


def newton_raphson(coeffs: Sequence[float], guess: float, accuracy: float = 0.05) -> float:
    """Newton-Raphson; stops when successive estimates differ by at most ``accuracy`` percent."""
    values = _coefficients(coeffs)
    _positive("accuracy", accuracy)
    x = guess
    previous: float | None = None
    for _ in range(_MAX_ITERATIONS):
        x = x - _newton_step(values, x)
        if previous is not None and _settled(previous, x, accuracy):
            return x
        previous = x
    raise RootFindingError("Newton-Raphson did not converge")


def generalized_newton(coeffs: Sequence[float], guess: float, decimals: int) -> float:
    """Newton's method for a root of multiplicity degree - 1.

    Each step tries the multiplicities ``p`` and ``p - 1`` and stops when the
    polynomial is within ``10 ** -decimals`` of zero at either candidate.
    """
    values = _coefficients(coeffs)
    tolerance = 10.0 ** -decimals
    multiplicity = len(values) - 2
    x = guess
    for _ in range(_MAX_ITERATIONS):
        step = _newton_step(values, x)
        first = x - multiplicity * step
        second = x - (multiplicity - 1) * step
        if abs(evaluate_polynomial(values, first)) <= tolerance:
            return first
        if abs(evaluate_polynomial(values, second)) <= tolerance:
            return second
        x = min(first, second)
    raise RootFindingError("generalized Newton did not converge")


def modified_generalized_newton(coeffs: Sequence[float], guess: float, decimals: int) -> float:
    """Newton's method trying multiplicities from degree - 1 downwards.

    The estimate only moves on once the multiplicity has come down to one;
    afterwards the countdown restarts from degree - 1. The search fails when
    the multiplicity reaches zero without the polynomial being within
    ``10 ** -decimals`` of zero.
    """
    values = _coefficients(coeffs)
    degree = len(values) - 1
    tolerance = 10.0 ** -decimals
    x = guess
    multiplicity = degree
    for _ in range(_MAX_ITERATIONS):
        if multiplicity == 0:
            raise RootFindingError("multiplicities exhausted without reaching a root")
        multiplicity -= 1
        candidate = x - multiplicity * _newton_step(values, x)
        if abs(evaluate_polynomial(values, candidate)) <= tolerance:
            return candidate
        if multiplicity == 1:
            x = candidate
            multiplicity = degree - 1
    raise RootFindingError("modified generalized Newton did not converge")


def _real_power(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except (ValueError, ZeroDivisionError) as error:
        raise RootFindingError(f"{base} ** {exponent} has no real value") from error


def fixed_point_iteration(
    coeffs: Sequence[float], low: float, high: float, decimals: int
) -> float:
    """Iterate x = (-(a1 x^(n-1) + ... + an) / a0) ** (1/n) from the interval's midpoint."""
    values = _coefficients(coeffs)
    if values[0] == 0:
        raise ValueError("leading coefficient must not be zero")
    degree = len(values) - 1
    scaled = [-c / values[0] for c in values[1:]]

    def inner(x: float) -> float:
        return sum(a * x ** (degree - i) for i, a in enumerate(scaled, start=1))

    def phi(x: float) -> float:
        return _real_power(inner(x), 1.0 / degree)

    def phi_slope(x: float) -> float:
        slope = sum(
            a * (degree - i) * x ** (degree - i - 1)
            for i, a in enumerate(scaled[:-1], start=1)
        )
        return (1.0 / degree) * _real_power(inner(x), 1.0 / degree - 1) * slope

    slope = phi_slope(high)
    if slope == 0:
        raise RootFindingError("iteration function is flat at the upper bound")
    tolerance = ((1.0 - slope) / slope) * 10.0 ** -decimals

    current = (low + high) / 2
    following = phi(current)
    for _ in range(_MAX_ITERATIONS):
        if abs(following - current) <= tolerance:
            return following
        current, following = following, phi(following)
    raise RootFindingError("fixed-point iteration did not converge")


def ramanujan(coeffs: Sequence[float], accuracy: float = 0.0001) -> float:
    """Ramanujan's method: the ratio of series coefficients tends to the smallest root."""
    values = _coefficients(coeffs, minimum_degree=0)
    _positive("accuracy", accuracy)
    nonzero = [i for i, c in enumerate(values) if c != 0]
    if not nonzero:
        raise RootFindingError("every coefficient is zero")
    lowest = nonzero[-1]
    divisor = values[lowest]
    series = [-c / divisor for c in reversed(values[:lowest])]
    if not series:
        raise RootFindingError("the polynomial has no nonzero root")

    terms = [1.0]

    def extend() -> None:
        terms.append(sum(a * terms[-1 - i] for i, a in enumerate(series[: len(terms)])))

    def ratio() -> float:
        if terms[-1] == 0:
            raise RootFindingError("series coefficient vanished")
        value = terms[-2] / terms[-1]
        if not math.isfinite(value):
            raise RootFindingError("series diverged")
        return value

    extend()
    before = ratio()
    extend()
    now = ratio()
    for _ in range(_MAX_ITERATIONS):
        if abs(now - before) < accuracy:
            return now
        before = now
        extend()
        now = ratio()
    raise RootFindingError("Ramanujan's method did not converge")


def main(argv: Sequence[str] | None = None) -> int:
    """Find a root of a polynomial with the chosen method."""
    parser = argparse.ArgumentParser(prog="rootfinding")
    commands = parser.add_subparsers(dest="method", required=True)

    def add(name: str, *, bracket: bool = False, guess: bool = False,
            decimals: bool = False, accuracy: float | None = None) -> None:
        command = commands.add_parser(name)
        command.add_argument("coeffs", type=float, nargs="+",
                             help="coefficients, highest power first")
        if bracket:
            command.add_argument("--low", type=float, required=True)
            command.add_argument("--high", type=float, required=True)
        if guess:
            command.add_argument("--guess", type=float, required=True)
        if decimals:
            command.add_argument("--decimals", type=int, default=4)
        if accuracy is not None:
            command.add_argument("--accuracy", type=float, default=accuracy)

    add("bisection", bracket=True, accuracy=0.0001)
    add("false-position", bracket=True, accuracy=0.05)
    add("secant", bracket=True, accuracy=0.05)
    add("newton", guess=True, accuracy=0.05)
    add("generalized-newton", guess=True, decimals=True)
    add("modified-newton", guess=True, decimals=True)
    add("fixed-point", bracket=True, decimals=True)
    add("ramanujan", accuracy=0.0001)
    args = parser.parse_args(argv)

    try:
        if args.method == "bisection":
            root = bisection(args.coeffs, args.low, args.high, args.accuracy)
            print(f" the root of the equation is\n {root:.4f}")
        elif args.method == "false-position":
            root = false_position(args.coeffs, args.low, args.high, args.accuracy)
            print(f" the root of the equation is\n{root}")
        elif args.method == "secant":
            root = secant(args.coeffs, args.low, args.high, args.accuracy)
            print(f" the root of the equation is\n{root}")
        elif args.method == "newton":
            root = newton_raphson(args.coeffs, args.guess, args.accuracy)
            print(f" the root of the equation is\n{root}")
        elif args.method == "generalized-newton":
            root = generalized_newton(args.coeffs, args.guess, args.decimals)
            print(f"The value of root is : {root:.{args.decimals}f}")
        elif args.method == "modified-newton":
            root = modified_generalized_newton(args.coeffs, args.guess, args.decimals)
            print(f"The value of root is : {root:.{args.decimals}f}")
        elif args.method == "fixed-point":
            root = fixed_point_iteration(args.coeffs, args.low, args.high, args.decimals)
            print(f"The value of root is : {root:.{args.decimals}f}")
        else:
            root = ramanujan(args.coeffs, args.accuracy)
            print(f"the root of the equation is   :    {root}")
    except (RootFindingError, ValueError) as error:
        parser.error(str(error))
    return 0
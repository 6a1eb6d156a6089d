"""Small classic algorithms: Fibonacci, number theory, number spelling, sorting, page replacement, root finding and a 24-hour clock."""

__version__ = "0.1.0"
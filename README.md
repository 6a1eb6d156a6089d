# algokit

Small, classic algorithms in pure Python, with no third-party dependencies.
Each module can be used as a library and also has a small command.

## Contents

| Module | What it offers |
| --- | --- |
| `algokit.fibonacci` | `fib_iterative`, `fib_recursive`, `fib_matrix`, `fib_matrix_power` |
| `algokit.number_theory` | `count_distinct_prime_factors`, `josephus_survivor` |
| `algokit.spelling` | `spell_number`, which writes the last four digits of a number in English words |
| `algokit.sorting` | `sorted_permutations`, `partition`, `quicksort` |
| `algokit.paging` | `fifo_replacement`, `lru_replacement` and the `PagingResult` they return |
| `algokit.rootfinding` | `evaluate_polynomial`, `polynomial_derivative` and the root finders `bisection`, `false_position`, `secant`, `newton_raphson`, `generalized_newton`, `modified_generalized_newton`, `fixed_point_iteration`, `ramanujan`; failures raise `RootFindingError` |
| `algokit.clock` | `parse_time` and `ticks`, which walk a 24-hour clock one minute at a time |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from algokit.fibonacci import fib_iterative, fib_matrix_power
from algokit.number_theory import count_distinct_prime_factors, josephus_survivor
from algokit.spelling import spell_number
from algokit.sorting import quicksort, sorted_permutations
from algokit.paging import fifo_replacement
from algokit.rootfinding import evaluate_polynomial, bisection
from algokit.clock import ticks

fib_iterative(10)                    # 55
fib_matrix_power(10)                 # 55
count_distinct_prime_factors(12)     # 2  (2 and 3)
josephus_survivor(5)                 # 3
spell_number(2345)                   # 'two thousands and three hundreds and forty five'
quicksort([3, 1, 2])                 # [1, 2, 3]
list(sorted_permutations("ab"))      # ['ab', 'ba']

# Polynomial coefficients go from the highest power down:
# x**2 - 4  ->  [1, 0, -4]
evaluate_polynomial([1, 0, -4], 3)   # 5.0
bisection([1, 0, -4], 0, 5, 0.0001)  # close to 2.0

next(ticks("23:59"))                 # (0, 0)
```

Notes on behaviour:

- All Fibonacci functions raise `ValueError` for negative `n`;
  `fib_recursive` takes exponential time.
- `count_distinct_prime_factors` ignores the sign and raises `ValueError` for 0.
  `josephus_survivor` raises `ValueError` for fewer than one person.
- `spell_number` raises `ValueError` for negative numbers and returns an empty
  string for 0.
- `quicksort` returns a new list; `partition` works in place on
  `items[low:high + 1]` and returns the pivot's final index.
- `fifo_replacement` and `lru_replacement` take a reference string and a frame
  count (at least one) and return a `PagingResult` with `faults`, `hits` and
  `history`: one entry per reference, holding the frame contents after a fault
  or `None` on a hit. FIFO shows empty frames as `None`; LRU shows only loaded
  frames.
- The bracketing methods (`bisection`, `false_position`, `secant`) need two
  points between which the polynomial changes sign. When a method cannot start,
  meets a zero derivative, or does not converge within its iteration limit,
  `RootFindingError` is raised. `false_position`, `secant` and
  `newton_raphson` stop when successive estimates differ by at most `accuracy`
  percent; the Newton variants and `fixed_point_iteration` take a number of
  decimal places instead.
- `parse_time` accepts `HH:MM` only and raises `ValueError` otherwise; `ticks`
  validates the start at once and then yields forever.

## Command-line tools

```
algokit-fib [n] [-m {iterative,matrix,matrix-power,recursive}]
algokit-numbers primes                 # reads integers from stdin until 0
algokit-numbers josephus [soldiers]
algokit-spell [number]
algokit-sort permutations              # reads a count and that many words from stdin
algokit-sort quicksort [numbers ...]   # or a count and the numbers from stdin
algokit-paging {fifo,lru} -f FRAMES [references ...]
algokit-roots METHOD COEFFS ... [options]
algokit-clock [HH:MM] [-n COUNT]
```

Where a positional value is left out, it is read from standard input.

`algokit-roots` methods and their options:

| Method | Options |
| --- | --- |
| `bisection` | `--low`, `--high`, `--accuracy` (default 0.0001) |
| `false-position`, `secant` | `--low`, `--high`, `--accuracy` (default 0.05) |
| `newton` | `--guess`, `--accuracy` (default 0.05) |
| `generalized-newton`, `modified-newton` | `--guess`, `--decimals` (default 4) |
| `fixed-point` | `--low`, `--high`, `--decimals` (default 4) |
| `ramanujan` | `--accuracy` (default 0.0001) |

For example, `algokit-roots bisection 1 0 -4 --low 0 --high 5`.

`algokit-clock` prints minutes without end unless `-n` is given.
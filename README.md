# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a
small set of operations, printing each operation as it is performed.

The operations are:

| Op    | Effect                                          |
|-------|-------------------------------------------------|
| `sa`  | swap the top two elements of `a`                |
| `sb`  | swap the top two elements of `b`                |
| `ss`  | `sa` and `sb` together                          |
| `pa`  | move the top of `b` onto `a`                    |
| `pb`  | move the top of `a` onto `b`                    |
| `ra`  | rotate `a` up (top goes to the bottom)          |
| `rb`  | rotate `b` up                                   |
| `rr`  | `ra` and `rb` together                          |
| `rra` | rotate `a` down (bottom comes to the top)       |
| `rrb` | rotate `b` down                                 |
| `rrr` | `rra` and `rrb` together                        |

An operation that cannot apply (for example `sa` with fewer than two
elements on `a`) does nothing and prints nothing.

## Installation

```
pip install .
```

## Usage

```
push-swap 3 2 1
push-swap "4 67 3 87 23"
push-swap --complex 5 1 4 2 3
push-swap --bench --medium 9 8 7 6 5 4 3 2 1
```

Numbers may be given as separate arguments, or several in one argument
separated by spaces. Only digits, spaces, and a `+` or `-` directly before
a digit are accepted. Each number must fit in a signed 32-bit integer, and
no number may appear twice. Anything else prints `Error` on standard error
and exits with status 1. Running with no arguments exits with status 1.

The operations are written to standard output, one per line. If the input
is already sorted nothing is printed.

### Strategies

Choose one with a flag among the first two arguments:

- `--simple` — bubble sort built from swaps and rotations, O(n²)
- `--medium` — chunks of about √n ranks pushed to `b`, then pulled back
  largest first, O(n√n)
- `--complex` — binary radix sort on the ranks of the values, O(n log n)
- `--adaptive` (default) — measures the disorder of the input, the share
  of pairs that are out of order, and picks simple below 0.2, medium below
  0.5, and complex otherwise

### Benchmark

With `--bench` as the first argument, a report goes to standard error after
sorting: the disorder as a percentage, the strategy used, the total number
of operations, and the count of each operation. The combined operations
`ss`, `rr` and `rrr` are never counted and always show 0.

## Library use

```python
import io
from pushswap.stacks import Stacks
from pushswap.strategies import adaptive

out = io.StringIO()
stacks = Stacks([3, 1, 2], out)
adaptive(stacks)
print(stacks.values_a())   # [1, 2, 3]
print(out.getvalue())      # the operations performed
print(stacks.total_ops())
```

- `pushswap.stacks` — `Stacks` with one method per operation, `apply()` to
  perform an `Op` or its name, and `count()` / `total_ops()` for the tallies.
- `pushswap.strategies` — `bubble_sort`, `chunk_sort`, `radix_sort` and
  `adaptive`, each sorting stack `a` of a `Stacks`.
- `pushswap.analysis` — `disorder` of a list of values, and rank helpers.
- `pushswap.parsing` — `parse_args` turns command-line arguments into a
  `Config` (values, `Mode`, bench flag) or raises `ParseError`.
- `pushswap.bench` — `report` builds the benchmark text.
- `pushswap.cli` — `run` and `main`, the `push-swap` command.

## What it does not do

There is no checker command: the package does not read a list of
operations from input and tell whether they sort a given set of numbers.
`Stacks.apply` can replay operations one by one, but verifying the result
is left to the caller.
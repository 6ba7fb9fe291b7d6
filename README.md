# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a small
set of instructions. A checker is included that reads a sequence of
instructions and reports whether it sorts a given list.

## Instructions

| name  | effect                                      |
|-------|---------------------------------------------|
| `sa`  | swap the top two elements of `a`            |
| `sb`  | swap the top two elements of `b`            |
| `ss`  | `sa` and `sb` together                      |
| `pa`  | move the top of `b` onto `a`                |
| `pb`  | move the top of `a` onto `b`                |
| `ra`  | rotate `a` up by one (top goes to bottom)   |
| `rb`  | rotate `b` up by one                        |
| `rr`  | `ra` and `rb` together                      |
| `rra` | rotate `a` down by one (bottom goes to top) |
| `rrb` | rotate `b` down by one                      |
| `rrr` | `rra` and `rrb` together                    |

## Installing

```
pip install .
```

## Producing instructions

Give the numbers as separate arguments, or as one argument separated by
spaces. The first number is the top of stack `a`.

```
push-swap 3 2 1
push-swap "4 67 3 87 23"
```

One instruction is written per line on standard output.

- Input that is not a number, a value outside the 32-bit signed range, or a
  repeated value prints `Error` on standard error; the exit status is 3, 5
  or 6 respectively.
- A single argument holding only spaces prints `Error` and exits with 55.
- Fewer than two numbers print nothing and exit with 8 (`Error` is printed
  if the one number is invalid).
- No arguments at all exit with 16 and print nothing.
- Already sorted input prints nothing and exits with 17.
- A successful run exits with 0.

Up to four numbers are handled with fixed moves, five or six with a bounded
search for a short sequence, and larger inputs with a partition-based
strategy.

The same command is available as `python -m pushswap.cli`.

## Checking instructions

```
push-swap 3 2 1 | push-swap-checker 3 2 1
```

The checker reads instructions from standard input, one per line, applies
them, and prints `OK` if `a` ends in ascending order and `b` is empty, `KO`
otherwise. Empty lines are skipped. Reading stops at the first unknown
instruction, or at a final line without a newline; the result is then
printed for the stacks as they stand. Arguments that are not numbers, out of
the 32-bit range, or repeated print `Error` on standard error and exit with
1. With no arguments the checker prints nothing.

The same command is available as `python -m pushswap.checker`.

## Using it from Python

```python
from pushswap.cli import solve
from pushswap.checker import Checker

moves = solve([3, 2, 1])
checker = Checker([3, 2, 1])
for move in moves:
    checker.execute(str(move))
print(checker.is_ok())  # True
```

`solve` returns a list of `pushswap.stack.Operation` members; `str()` of each
gives the instruction name that `push-swap` prints. It raises `ValueError`
for repeated values or for fewer than two values that are not already in
order, and returns an empty list for a sorted list.

The modules:

- `pushswap.stack` — `Stack`, `Board` (the two stacks; `apply` carries out an
  `Operation`, `perform` also records it in `moves` and raises
  `OperationFailed` if nothing moved) and `Operation` (with `inverse()`).
- `pushswap.parsing` — `split_arguments`, `validate_tokens`, `load_values`,
  `parse_long`, `is_numeric`, and `InputError` carrying an `ErrorCode`.
- `pushswap.small_sort` — `sort_up_to_four`, `sort_five_or_six` and the
  `ShortestSearch` behind it.
- `pushswap.partition` — `run`, the strategy for larger stacks.
- `pushswap.cli` — `solve` and the `push-swap` command.
- `pushswap.checker` — `Checker`, `parse_stack` and the
  `push-swap-checker` command.

## Running the tests

```
pip install ".[test]"
pytest
```
# contestkit

A collection of solutions to well-known competitive-programming problems. Each one
is a small function. It takes ordinary Python values and returns its answer.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

The only runtime dependency is `sortedcontainers`. The functions that need an
ordered multiset use it.

## Modules

| Module | Contents |
| --- | --- |
| `contestkit.introductory` | Collatz sequence, missing number (by xor and by sorting), longest repetition, increasing-array cost, beautiful permutation, spiral grid values, two knights, two sets, bit strings, trailing zeros, coin piles, palindrome reordering |
| `contestkit.combinatorics` | Gray codes, Tower of Hanoi moves, distinct permutations of a string, apple division, queen placements on a board with blocked squares, digit queries |
| `contestkit.sorting_searching` | Distinct values, apartment matching (two pointers and ordered multiset), Ferris wheel gondolas, concert tickets, restaurant customers, movie festival, two-value sums, maximum subarray sum, stick lengths, smallest missing coin sum |
| `contestkit.sequences` | Collecting numbers (including rounds after swaps), longest run without repeats, towers, traffic-light gaps, Josephus elimination orders |
| `contestkit.scheduling` | Room allocation, factory machine production time, task rewards |
| `contestkit.arrays` | Three-value sums, nearest smaller values, counting subarrays with a given sum |
| `contestkit.backtracking` | Permutations and subsets generated by search, N-queens counting, sudoku solvability |
| `contestkit.palindromes` | Counting n-digit integers whose digits can be rearranged into a palindrome divisible by k |
| `contestkit.cf_set1` to `contestkit.cf_set4` | Short single-function solutions to assorted contest problems |

## Examples

```python
from contestkit.introductory import collatz_sequence, trailing_zeros
from contestkit.combinatorics import gray_codes, hanoi_moves
from contestkit.backtracking import count_n_queens
from contestkit.sorting_searching import max_subarray_sum, two_values

collatz_sequence(3)          # [3, 10, 5, 16, 8, 4, 2, 1]
trailing_zeros(20)           # 4
gray_codes(2)                # ['00', '01', '11', '10']
hanoi_moves(2)               # [(1, 2), (1, 3), (2, 3)]
count_n_queens(8)            # 92
max_subarray_sum([-1, 3, -2, 5, 3, -5, 2, 2])  # 9
```

## Conventions

- Positions that a problem reports, such as those from `two_values`,
  `three_values` and `nearest_smaller`, are 1-based.
- When a problem has no solution, the function returns `None`. For example,
  `two_values` returns `None` when no pair exists, and `beautiful_permutation`
  returns `None` for sizes that have no valid arrangement. `concert_tickets`
  returns a list that holds `None` for each customer who got no ticket.
- Input that a function cannot work with, such as an empty list where at least
  one value is needed or a non-positive size, raises `ValueError`.

Each function's docstring describes its own arguments and return value.

## What it does not do

The package has no command-line program. It does not read problem input from
standard input and does not print answers in a judge's output format. You call
the functions from your own code and format the results yourself.
# algobox

A collection of classic backtracking and dynamic-programming algorithms,
written as plain functions that take Python values and return Python values.
It has no dependencies outside the standard library.

## Installation

```
pip install algobox
```

For running the test suite:

```
pip install "algobox[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algobox.queens` | `solve_n_queens`, `format_board` |
| `algobox.maze` | `maze_paths`, `format_grid` |
| `algobox.sudoku` | `is_valid`, `is_solved`, `solve_sudoku`, `format_sudoku`, `main` |
| `algobox.tug_of_war` | `tug_of_war` |
| `algobox.words` | `letter_combinations`, `is_match`, `find_words` |
| `algobox.counting` | `coin_combinations_ordered`, `coin_combinations_unordered`, `dice_combinations`, `array_descriptions`, `grid_paths`, `two_sets`, `compression_chains` |
| `algobox.optimization` | `Project`, `min_coins`, `min_jumps`, `max_pages`, `edit_distance`, `rectangle_cuts`, `removal_game`, `removing_digits`, `max_project_reward`, `optimal_sequence` |
| `algobox.subsets` | `is_subset_sum`, `money_sums` |
| `algobox.strings` | `simplify_string`, `has_two_substrings` |
| `algobox.arrays` | `largest_fixed_point`, `max_xor_in_range` |
| `algobox.segment_tree` | `LazySegmentTree`, `prefix_sums` |

Some notes on behaviour:

- `solve_n_queens`, `solve_sudoku`, `min_coins`, `min_jumps` and
  `largest_fixed_point` return `None` when there is no answer.
- `maze_paths` is a generator. It yields one 0/1 grid per route from the
  top-left to the bottom-right cell.
- The counting functions in `algobox.counting` return results modulo
  1 000 000 007. The exception is `compression_chains`, which returns the
  exact count.
- `LazySegmentTree` uses 0-based, inclusive ranges. It raises `IndexError`
  for a range outside the sequence.
- Invalid inputs raise `ValueError`. Examples are negative targets,
  non-positive coin values and a sudoku grid that is not 9x9.

## Examples

```python
from algobox.queens import solve_n_queens, format_board
from algobox.words import letter_combinations, is_match
from algobox.optimization import edit_distance
from algobox.segment_tree import LazySegmentTree

board = solve_n_queens(4)
print(format_board(board))

letter_combinations("34")      # ['dg', 'dh', 'di', 'eg', ...]
is_match("cabcab", "*ab")      # True
edit_distance("love", "movie") # 2

tree = LazySegmentTree([1, 2, 3, 4])
tree.range_add(1, 2, 10)
tree.query(0, 3)               # 30
```

## Sudoku from the command line

```
algobox-sudoku
```

The command reads all of standard input before it does anything.

- **Built-in example:** if the input starts with `n`, it solves the built-in
  example.
- **Your own puzzle:** otherwise, the first character is taken as the answer.
  The 81 whitespace-separated numbers after it fill the grid row by row, with
  0 for an empty cell.

For example:

```
echo n | algobox-sudoku
```

The command prints the starting grid. If a solution exists, it prints the
solved grid after it.

If a value is missing or lies outside 0 to 9, the command prints an error to
standard error and exits with status 1.

## What it does not do

Only the sudoku solver has a command. Every other algorithm is available only
as a Python function. The package does not read problem input from files or
standard input for those algorithms.
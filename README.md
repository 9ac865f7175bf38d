# algosolve

Small, dependency-free solutions to classic algorithm problems, grouped by
technique. Every function takes plain Python values (lists, strings, ints)
and returns plain Python values, except where noted below.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algosolve.arrays` | `two_sum`, `search_insert`, `contains_nearby_duplicate`, `find_max_consecutive_ones`, `find_error_nums`, `k_length_apart`, `num_special`, `min_number_operations`, `get_concatenation`, `find_final_value`, `triangular_sum`, `minimum_boxes`, `get_sneaky_numbers`, `count_valid_selections`, `minimum_index` |
| `algosolve.text` | `is_valid_parentheses`, `str_str`, `title_to_number`, `first_uniq_char`, `detect_capital_use`, `number_of_beams`, `max_difference`, `max_distinct` |
| `algosolve.numbers` | `add_digits`, `self_dividing_numbers`, `count_operations`, `difference_of_sums`, `smallest_number` |
| `algosolve.linked` | `ListNode`, `build_list`, `list_values`, `merge_two_lists`, `insert_greatest_common_divisors` |
| `algosolve.trees` | `TreeNode`, `tree_from_level_order`, `tree_to_level_order`, `zigzag_level_order`, `build_tree`, `preorder_traversal`, `path_sum`, `search_bst`, `all_possible_fbt` |
| `algosolve.graphs` | `DisjointSet` (`find`, `union`), `find_redundant_connection`, `find_cheapest_price`, `min_cost_connect_points` |
| `algosolve.backtracking` | `solve_sudoku`, `permute_unique`, `solve_n_queens`, `total_n_queens`, `combine`, `subsets`, `palindrome_partitions`, `word_break_sentences`, `num_tile_possibilities`, `valid_strings` |
| `algosolve.grids` | `unique_paths`, `unique_paths_with_obstacles`, `min_path_sum`, `minimum_total`, `calculate_minimum_hp`, `min_falling_path_sum` |
| `algosolve.dynamic` | `climb_stairs`, `word_break`, `rob`, `rob_circular`, `is_subsequence`, `can_cross`, `can_partition`, `min_cost_climbing_stairs`, `fib`, `max_sum_after_partitioning`, `tribonacci`, `longest_common_subsequence`, `min_difficulty`, `number_of_arrays` |

## Examples

```python
from algosolve.arrays import two_sum
from algosolve.backtracking import total_n_queens
from algosolve.dynamic import longest_common_subsequence
from algosolve.linked import build_list, list_values, merge_two_lists
from algosolve.trees import tree_from_level_order, zigzag_level_order

two_sum([2, 7, 11, 15], 9)                       # [0, 1]
total_n_queens(8)                                # 92
longest_common_subsequence("abcde", "ace")       # 3

merged = merge_two_lists(build_list([1, 2, 4]), build_list([1, 3, 4]))
list_values(merged)                              # [1, 1, 2, 3, 4, 4]

root = tree_from_level_order([3, 9, 20, None, None, 15, 7])
zigzag_level_order(root)                         # [[3], [20, 9], [15, 7]]
```

## Working with linked lists and trees

- `build_list` turns an iterable into a chain of `ListNode`s (empty input
  gives `None`); `list_values` turns it back into a list. A `ListNode` can
  also be iterated directly.
- `tree_from_level_order` builds a `TreeNode` tree from a level-order list
  where `None` marks a missing child; `tree_to_level_order` does the reverse,
  dropping trailing `None`s.
- `merge_two_lists` and `insert_greatest_common_divisors` relink the nodes
  they are given rather than copying them.
- The trees returned by `all_possible_fbt` may share subtrees.

## Behaviour worth knowing

- `solve_sudoku` fills the `'.'` cells of a 9x9 board in place and returns
  `True`; when no filling exists it returns `False` and leaves the board as
  it was.
- `DisjointSet(n)` covers the elements `0..n`; `union` returns `False` when
  both elements were already in one set.
- Functions that report "not found" return `-1` or an empty list:
  `str_str`, `first_uniq_char`, `minimum_index`, `find_cheapest_price`,
  `min_difficulty` (fewer jobs than days), `two_sum`,
  `find_redundant_connection`.
- `number_of_arrays` counts modulo `10**9 + 7` (exposed as
  `algosolve.dynamic.MOD`).
- Inputs that have no meaningful answer raise `ValueError`: empty grids or
  triangles in `algosolve.grids`; `climb_stairs` with fewer than one stair;
  `rob` and `rob_circular` with no houses; `can_cross` with fewer than two
  stones; `min_cost_climbing_stairs` with fewer than two steps;
  `min_difficulty` with fewer than one day; `min_number_operations` with an
  empty target; `max_difference` when no character occurs an even number of
  times; `find_final_value` when `original` is 0 and 0 is among the values;
  `count_operations` with negative numbers; `solve_n_queens` and
  `total_n_queens` with a negative board size.

## What this package does not do

It is a library only: there is no command-line program, and nothing reads
problems from files or prints results. Call the functions from your own code.
# algodays

A library of small, self-contained solutions to well-known algorithm
problems. Each function takes plain Python values (lists, strings, ints)
and returns plain Python values. Nothing outside the standard library is
needed.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algodays.stacks` | Stack and deque problems: `trap`, `largest_rectangle_area`, `maximal_rectangle`, `next_greater_elements`, `max_sliding_window`, `eval_rpn`, `reverse_parentheses`, `min_length`, `remove_substring`, `maximum_gain`, `survived_robots_healths` |
| `algodays.design` | Data structures: `MyQueue`, `WordDictionary`, `MedianFinder` |
| `algodays.searching` | Searching: `find_median_sorted_arrays`, `search_rotated`, `count_pairs`, `smallest_distance_pair`, `find_kth_positive`, `search_matrix`, `single_non_duplicate` |
| `algodays.strings` | String problems: `multiply`, `add_strings`, `roman_to_int`, `zigzag_convert`, `min_window`, `longest_palindrome`, `my_atoi`, `is_number`, `largest_number`, `find_anagrams`, `partition_labels`, and more |
| `algodays.numbers` | Number theory and arithmetic: `min_steps`, `kth_factor`, `arrange_coins`, `judge_square_sum`, `lexical_order`, `get_permutation`, `largest_triangle_area`, `average_waiting_time` |
| `algodays.dynamic` | Dynamic programming: `num_trees`, `num_decodings`, `coin_change`, `is_match`, `word_break`, `length_of_lis`, `can_partition`, `strange_printer`, `min_path_sum`, `minimum_total`, and more |
| `algodays.sums` | Sum problems: `four_sum`, `three_sum_closest`, `subarray_sum`, `num_subseq`, `triangle_number`, `max_sum` |
| `algodays.arrays` | Array problems: `candy`, `max_number`, `min_difference`, `sort_people`, `get_winner`, `longest_ones`, `can_arrange`, `chalk_replacer`, and more |
| `algodays.backtracking` | `is_safe`, `solve_sudoku`, `exist`, `permute`, `subsets`, `partition` |
| `algodays.graphs` | `regions_by_slashes`, `can_finish` |
| `algodays.trees` | `TreeNode`, the builders `build_tree_preorder`, `build_tree_level_order`, `insert_bst`, `bst_from_values`, the traversals `inorder`, `level_order`, plus `max_path_sum`, `max_sum_bst`, `balance_bst`, `delete_node`, `recover_tree`, `right_side_view`, `flatten` |
| `algodays.linked_lists` | `ListNode`, `build_list`, `list_values`, `insertion_sort_list`, `spiral_matrix` |
| `algodays.matrix` | `restore_matrix`, `spiral_matrix_iii`, `num_magic_squares_inside`, `equal_pairs`, `construct_2d_array` |

Where an input cannot be handled (an empty list where values are needed,
a malformed expression, mismatched lengths), the functions raise
`ValueError`; `MyQueue.pop` and `MyQueue.peek` on an empty queue raise
`IndexError`.

## Examples

```python
from algodays.stacks import trap
from algodays.strings import multiply, roman_to_int
from algodays.dynamic import coin_change

trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])   # 6
multiply("123", "456")                      # "56088"
roman_to_int("MCMXCIV")                     # 1994
coin_change([1, 2, 5], 11)                  # 3
```

Data structures keep their state between calls:

```python
from algodays.design import MedianFinder, MyQueue

finder = MedianFinder()
finder.add_num(1)
finder.add_num(2)
finder.find_median()   # 1.5

queue = MyQueue()
queue.push(1)
queue.push(2)
queue.peek()           # 1
```

Trees are built from flat value lists, with `None` marking a missing child:

```python
from algodays.trees import build_tree_level_order, right_side_view

root = build_tree_level_order([1, 2, 3, None, 5, None, 4])
right_side_view(root)  # [1, 3, 4]
```

Linked lists work the same way:

```python
from algodays.linked_lists import build_list, insertion_sort_list, list_values

list_values(insertion_sort_list(build_list([4, 2, 1, 3])))  # [1, 2, 3, 4]
```

## What the package does not do

There is no command-line program: nothing reads problems from standard
input or prints answers. Call the functions from Python with the values
directly.
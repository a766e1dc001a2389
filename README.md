# algoset

A collection of classic algorithm exercises, written as small, plain Python
functions. It is meant for study and practice. Every function takes ordinary
Python values and returns a result, or changes a list it was given in place,
rather than printing anything.

It depends on nothing outside the standard library.

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

### `algoset.matrix`

Matrices are sequences of rows.

- `largest_row_sum(matrix)`: the largest row sum, never below -32768.
- `rotate_90_clockwise(matrix)`: a new matrix turned a quarter turn clockwise.
- `column_sums(matrix)`: the sum of each column, left to right.
- `contains(matrix, key)`: whether `key` occurs anywhere.
- `spiral_order(matrix)`: elements in clockwise spiral order from the top-left.
- `wave_order(matrix)`: columns read top to bottom and bottom to top in turn.
- `bump_first_match(matrix, key, amount=3)`: adds `amount` to the first cell
  equal to `key` in row-major order, in place; returns whether a cell changed.

### `algoset.strings`

- `length(text)`: the number of characters before the first NUL, if any.
- `reverse_string(text)`, `reverse_words(text)` (each space-separated word
  reversed, spaces kept).
- `is_palindrome(text)` (case-sensitive), `is_palindrome_ignore_case(text)`
  (ASCII capitals folded), `is_alnum_palindrome(text)` (ASCII letters and
  digits only, case ignored).

### `algoset.bits`

- `complement_bits(n)`: the binary digits of `n` flipped, most significant
  first (`[1]` for 0). `count_set_bits(n)`: the number of 1 bits. Both raise
  `ValueError` for negative `n`.
- `find_duplicate(values)`: the repeated value in a list holding 1..n-1 with
  one value twice, found by XOR.
- `find_unique(values)`: the value appearing once when all others appear twice.
- `frequencies(values)`, `frequencies_are_unique(values)`,
  `find_duplicates(values)` (every repeated occurrence, in the order met).

### `algoset.searching`

- `binary_search(values, key)`, `first_occurrence(values, key)`,
  `last_occurrence(values, key)`: indexes into an ascending list, or `None`
  when the key is absent.
- `integer_sqrt(n)`: the floor of the square root; `ValueError` for negative `n`.
- `precise_sqrt(n, precision=5)`: the square root approximated from below to
  `precision` decimal places.
- `is_allocation_possible(pages, students, limit)` and `min_pages(pages, students)`:
  the book allocation problem, books kept in order. `min_pages` raises
  `ValueError` for no books or fewer than one student.

### `algoset.arrays`

- `intersection(first, second)`: distinct common values, in order of first
  appearance in `second`. `sorted_intersection(first, second)`: the same for
  two ascending lists, ascending.
- `sort_breaks(values)` (circular descents; `ValueError` on an empty list) and
  `is_sorted_and_rotated(values)`.
- In place: `move_zeroes`, `reverse_in_place`, `rotate(values, k)` (to the
  right), `bubble_sort`, `sort_binary`, `sort_012`, `swap_alternate`.
  `sort_binary` and `sort_012` raise `ValueError` on values outside their set.
- `second_largest(values)`, `second_smallest(values)`: `ValueError` with fewer
  than two distinct values.
- `pair_sums(values, key)`, `triplet_sums(values, key)`: sorted tuples of
  values, one per combination of positions that adds up to `key`.
- `add_digit_arrays(first, second)`: adds two numbers given as digit lists.
- `has_unique_occurrences(values)`: whether all counts differ.

### `algoset.tree`

- `Node(data, left=None, right=None)`.
- `build_tree(values)`: from a preorder listing where -1 marks a missing
  child. `build_from_level_order(values)`: from a level-order listing with -1
  for missing nodes. Both raise `ValueError` if the values run out.
- `inorder`, `preorder`, `postorder` (root, right subtree, left subtree),
  `level_order` (a list per level), `morris_inorder` (threads the tree
  temporarily and restores it).
- `top_view`, `bottom_view`, `left_view`, `right_view`,
  `boundary_traversal`, `vertical_order`, `zigzag_traversal`.

### `algoset.tree_metrics`

`height`, `is_balanced`, `is_balanced_fast`, `count_leaves`, `diameter`,
`diameter_fast` (diameter counted in nodes), `is_sum_tree`,
`are_identical(first, second)`.

### `algoset.tree_paths`

- `count_k_sum_paths(root, k)`: downward paths, single nodes included,
  summing to `k`.
- `kth_ancestor(root, k, value)`: the node `k` levels above the first node
  holding `value`; `None` if the value is absent, the node itself if `k` is
  out of range.
- `lowest_common_ancestor(root, first, second)`.
- `max_non_adjacent_sum(root)`: no parent and child both taken.
- `sum_of_longest_bloodline(root)`: the sum along the longest root-to-leaf
  path, the largest such sum on ties.

### `algoset.graph`

- `Graph`: `add_edge(u, v, directed=False)` and `format_adjacency()`, which
  renders one line per vertex as `u->a,b,`.
- `bfs_traversal(adjacency)`: vertices reachable from vertex 0, breadth first.
- `dfs_components(vertex_count, edges)`: connected components of an
  undirected graph, each in depth-first order.

### `algoset.heap`

- `MaxHeap`: `insert(value)`, `delete_root()` (returns the largest value,
  `IndexError` when empty), `items()` (values in stored heap order), `len()`.
- `sift_down(values, size, index)` and `build_max_heap(values)` on 0-based lists.
- `ListNode(val, next)` with `ListNode.from_values(values)` and iteration over
  its values; `merge_k_sorted_lists(heads)` relinks the nodes into one list.
- `merge_k_sorted_arrays(arrays)`.

### `algoset.nqueens`

- `n_queens(n)`: every solution as a flattened row-major board of 0s and 1s;
  none for non-positive `n`.

## Examples

```python
from algoset.matrix import spiral_order
from algoset.searching import binary_search
from algoset.tree import build_tree, level_order
from algoset.tree_metrics import height
from algoset.heap import MaxHeap
from algoset.nqueens import n_queens

spiral_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
# [1, 2, 3, 6, 9, 8, 7, 4, 5]

binary_search([11, 22, 33, 44, 55], 44)
# 3

root = build_tree([1, 3, 7, -1, -1, 11, -1, -1, 5, 17, -1, -1, -1])
level_order(root)
# [[1], [3, 5], [7, 11, 17]]
height(root)
# 3

heap = MaxHeap()
for value in (50, 90, 60):
    heap.insert(value)
heap.delete_root()
# 90

len(n_queens(4))
# 2
```

## What it does not do

The package is a library only. It has no command-line program and never
reads input interactively; trees, graphs and matrices are built from values
passed to its functions.
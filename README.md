# dsadrills

A collection of classic algorithm drills on arrays, matrices and graphs.
Most problems come in two flavours: a straightforward brute-force version
(suffixed `_brute`, or named after the exhaustive method it uses) and an
efficient version. For the same valid input they give the same answer, so
the brute-force one doubles as a reference for checking the other.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Conventions

- Functions take ordinary Python sequences and return new lists or tuples;
  the inputs are never modified.
- Where a value cannot be found, array and traversal functions return `-1`
  (for example `linear_search`, `second_extremes`, `shortest_path`,
  `oranges_rotting`). `dijkstra` and `dijkstra_brute` use `math.inf` for
  unreachable vertices. `two_sum` and `two_sum_brute` return `None` when no
  pair exists.
- Invalid input, such as an empty sequence where an element is needed, a
  vertex out of range or a non-square matrix for rotation, raises
  `ValueError`.

## Modules

### `dsadrills.array_basics`

`max_element`, `max_element_recursive`, `second_extremes`,
`second_extremes_by_sorting`, `is_sorted`, `is_sorted_brute`,
`unique_sorted`, `unique_sorted_brute`, `rotate_left_by_one`,
`rotate_left_by_one_brute`, `move_zeros`, `move_zeros_brute`,
`linear_search`, `missing_number`, `missing_number_sum`,
`missing_number_brute`, `max_consecutive_ones`, `majority_element`
(more than n/2 times), `majority_elements` (more than n/3 times),
`single_number`, `single_number_brute`, `union_sorted`, `union_brute`.

### `dsadrills.subarrays`

`max_subarray_sum`, `max_profit`, `max_profit_brute`, `leaders`,
`leaders_brute`, `longest_consecutive`, `longest_consecutive_brute`,
`count_subarrays_with_sum`, `count_subarrays_with_sum_brute`,
`max_product`, `max_product_brute`, `longest_subarray_with_sum`,
`longest_subarray_with_sum_brute`, `longest_zero_sum`,
`longest_zero_sum_brute`, `count_subarrays_with_xor`.

### `dsadrills.ksum`

`two_sum` and `two_sum_brute` return a pair of indices; `three_sum`,
`three_sum_brute` (triplets summing to zero) and `four_sum` (quadruplets
summing to a target) return distinct sorted combinations.

### `dsadrills.matrix`

`spiral_order`, `spiral_order_brute`, `set_zeroes` and
`rotate_clockwise` (square matrices only).

### `dsadrills.ordering`

`merge_intervals`, `merge_intervals_brute`, `find_error_nums` and
`find_error_nums_brute` (repeated and missing number in 1..n),
`next_permutation` (wraps the last permutation round to the first),
`merge_sorted_into`, `count_inversions`, `count_inversions_brute`,
`count_reverse_pairs`, `count_reverse_pairs_brute`.

### `dsadrills.directed`

- `Graph(vertices)` with `add_edge(u, v)`, `topo_sort_dfs()` and
  `topo_sort_kahn()`; the latter raises `CycleError` (a `ValueError`) when
  the graph has a cycle.
- `has_cycle` and `has_cycle_brute` for graphs on vertices `1..vertices`.
- Task scheduling with `(task, prerequisite)` pairs: `can_finish`,
  `can_finish_permutations`, `find_order`, `find_order_kahn`,
  `find_order_permutations`. The order functions return `[]` when the
  prerequisites hold a cycle.
- `eventual_safe_nodes` and `eventual_safe_nodes_brute`.

### `dsadrills.alien`

`alien_order(k, words)` and `alien_order_brute(k, words)` recover a letter
order (lower-case `a`-`z`) from a sorted alien dictionary, returning `[]`
when none is consistent.

### `dsadrills.traversal`

`bfs_matrix`, `bfs_list`, `count_provinces`, `shortest_path`,
`shortest_path_brute` (unit-weight undirected graphs), `is_bipartite`
and `is_bipartite_matrix`.

### `dsadrills.grids`

`oranges_rotting`, `oranges_rotting_brute`, `nearest_one_distance` and
`nearest_one_distance_brute`.

### `dsadrills.dijkstra`

`dijkstra` (binary heap) and `dijkstra_brute` (linear scan) take adjacency
lists of `(neighbour, weight)` pairs.

## Examples

```python
from dsadrills.subarrays import max_subarray_sum
from dsadrills.ksum import three_sum
from dsadrills.directed import Graph
from dsadrills.dijkstra import dijkstra

max_subarray_sum([2, 3, 5, -2, 7, -4])        # 15
three_sum([2, -2, 0, 3, -3, 5])               # [[-3, -2, 5], [-3, 0, 3], [-2, 0, 2]]

g = Graph(6)
for u, v in [(5, 0), (5, 2), (4, 0), (4, 1), (2, 3), (3, 1)]:
    g.add_edge(u, v)
g.topo_sort_kahn()                            # [4, 5, 0, 2, 3, 1]

dijkstra(2, [[(1, 9)], [(0, 9)]], 0)          # [0, 9]
```

## What it does not do

This is a library only. There is no command-line program that reads
problems from standard input and prints answers; call the functions from
Python instead.
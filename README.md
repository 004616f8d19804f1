# dsakit

A collection of classic algorithms written as small, plain Python functions and
classes: binary search variants, graph algorithms, dynamic programming, greedy
strategies and a handful of interview-style allocation problems.

It has no runtime dependencies and needs Python 3.10 or later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What's inside

### `dsakit.searching`

Binary search and its relatives on sorted sequences:
`binary_search`, `binary_search_recursive`, `lower_bound`, `upper_bound`,
`first_and_last_occurrence`, `find_peak_element`, `find_peak_grid`,
`median_of_matrix`, `nth_root`, `sqrt_with_precision`, `search_rotated`,
`search_rotated_with_duplicates` and `single_non_duplicate`.

Searches that find nothing return -1 (or `(-1, -1)` for
`first_and_last_occurrence` and `find_peak_grid`); functions that need a
non-empty input raise `ValueError` when given an empty one.

```python
from dsakit.searching import lower_bound, nth_root, single_non_duplicate

lower_bound([2, 5, 7, 8, 11, 12], 8)              # 3
nth_root(81, 4)                                   # 3
single_non_duplicate([1, 1, 2, 3, 3, 4, 4, 8, 8]) # 2
```

### `dsakit.cyclic`

`cycle_sort` sorts a permutation of `1..n` in place, placing every value at its
own index. It raises `ValueError` for a value out of range or repeated.

### `dsakit.graphs`

Graphs are given as adjacency lists indexed by vertex number.

- `traversal`: `Graph` (undirected, with `add_edge` and `bfs`),
  `undirected_adjacency`, bipartite checks (`is_bipartite`, `is_bipartite_dfs`),
  cycle detection (`has_cycle_undirected_bfs`, `has_cycle_undirected`,
  `has_cycle_directed`), `all_paths` and
  `count_strongly_connected_components`.
- `ordering`: `topological_sort` (depth-first) and `kahn_topological_sort`;
  a graph with a cycle raises `CycleError`.
- `grids`: `rotting_time` and `count_distinct_islands`.
- `paths`: `WeightedGraph` (Dijkstra, non-negative weights), `bellman_ford`,
  `floyd_warshall`, `unit_distances` and `dag_shortest_path`, with `Edge` as
  the edge record. Unreachable vertices get `math.inf`; a negative cycle raises
  `NegativeCycleError`, and `dag_shortest_path` raises `CycleError` on a graph
  that is not acyclic.
- `dsu`: `DisjointSet` with `find` and `union`, using path compression and
  union by rank.

```python
from dsakit.graphs.paths import WeightedGraph

g = WeightedGraph(3)
g.add_edge_directed(0, 1, 4)
g.add_edge_directed(1, 2, 1)
g.shortest_paths(0)   # [0, 4, 5]
```

### `dsakit.dp`

- `grid_paths`: `cherry_pickup`, `min_path_sum`, `triangle_min_path_sum`,
  `unique_paths`, `unique_paths_with_obstacles` (cells equal to -1 are
  obstacles) and their tabulated or space-optimised versions.
- `subsequences`: `count_target_sum_ways`, `subset_sum_exists`, `knapsack`,
  `unbounded_knapsack`, `min_coins` and `min_coins_recursive`.
- `sequences`: `frog_jump` (returns the energy and the steps visited),
  `paint_houses_min_cost`, `paint_houses_min_cost_memo`, `lcs_length` and
  `longest_common_subsequence`.

### `dsakit.greedy`

`can_split_consecutive` and `maximum_earning`.

### `dsakit.interview`

- `puzzles`: `min_piano_moves`, `is_buddy`, `buddy_signature`,
  `group_buddies` and `group_buddies_by_signature`.
- `apartments`: `find_best_apartment`, `find_best_apartment_fast` and
  `choose_containers`.
- `scheduling`: `allocate_meeting_rooms`, `allot_courses`, `allot_tasks` and
  `assign_volunteers`, working on the frozen dataclasses `Meeting`, `Room`,
  `Student`, `Course`, `Task`, `Server`, `Question` and `Volunteer`. The
  allotment functions return dictionaries keyed by student, task or question id.

```python
from dsakit.interview.puzzles import min_piano_moves

min_piano_moves([1, 5, 2, 6, 3, 7])   # 1
```

## What it does not do

dsakit is a library only: it has no command-line program, and its functions
print nothing; every result is returned to the caller.
# dsakit

Classic data structures and algorithms in plain Python, using only the
standard library.

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
| `dsakit.traversal` | `Graph` (with `add_edge` and `format_adjacency`), `GraphNode`, `bfs`, `dfs`, `shortest_path_unweighted`, `clone_graph`, `clone_graph_bfs`, `is_bipartite` |
| `dsakit.cycles` | `has_cycle_undirected_bfs`, `has_cycle_undirected_dfs`, `has_cycle_directed_kahn`, `has_cycle_directed_dfs` |
| `dsakit.ordering` | `topo_sort_dfs`, `topo_sort_kahn`, `course_order`, `alien_order`, `count_strongly_connected` |
| `dsakit.shortest_paths` | `has_negative_cycle`, `cheapest_price`, `dijkstra`, `floyd_warshall` (with the `INF` sentinel), `dag_shortest_paths` |
| `dsakit.spanning` | `DisjointSet`, `kruskal_mst`, `prim_mst`, `make_connected` |
| `dsakit.connectivity` | `is_bridge`, `articulation_points` |
| `dsakit.grid_search` | `flood_fill`, `snakes_and_ladders`, `knight_min_steps`, `ladder_length`, `nearest_one_distances`, `oranges_rotting` |
| `dsakit.queues` | `CircularQueue`, `LinkedDeque`, `DequeStack`, `DequeQueue`, `ArrayQueue`, `KQueue`, `StackQueue` |
| `dsakit.lru_cache` | `LRUCache` |
| `dsakit.windows` | `can_complete_circuit`, `first_negative_in_windows`, `min_value_after_removals`, `interleave_halves`, `max_of_subarrays`, `first_non_repeating`, `sum_of_window_min_max`, `longest_unique_substring`, `min_window` |
| `dsakit.stacks` | `TwoStacks`, `NStack`, `QueueStack`, `ArrayStack`, `NodeStack`, `sort_stack`, `delete_middle` |
| `dsakit.stack_problems` | `celebrity`, `celebrity_brute_force`, `largest_rectangle_area`, `longest_valid_parentheses`, `next_greater_elements`, `next_smaller_elements`, `next_smaller_indices`, `previous_smaller_indices`, `evaluate_postfix`, `has_redundant_brackets` |
| `dsakit.greedy` | `fractional_knapsack`, `huffman_codes`, `job_sequencing` |
| `dsakit.segment_tree` | `MinSegmentTree` for range-minimum queries |
| `dsakit.number_puzzles` | `factorial`, `pascal_triangle`, `is_power_of_two`, `reordered_power_of_two`, `product_queries`, `largest_good_integer`, `zero_filled_subarrays` |
| `dsakit.dp_puzzles` | `number_of_ways`, `new21_game`, `judge_point_24`, `count_squares`, `max_collected_fruits`, `soup_servings` |
| `dsakit.array_puzzles` | `min_swap_cost`, `longest_subarray_after_deletion`, `max_total_fruits`, `max_total_fruits_window`, `total_fruit`, `unplaced_fruits`, `longest_max_and_subarray`, `count_subarray_ors` |

## Conventions

- Graphs are passed either as an adjacency list (a list whose index is the
  node and whose entry lists its neighbours) or as a node count together
  with a list of edges `[u, v]` or weighted edges `[u, v, w]`; each
  function's docstring says which.
- `dijkstra` and `dag_shortest_paths` return `math.inf` for unreachable
  nodes. `floyd_warshall` takes a matrix in which values of `INF` (10**8)
  or more mean "no edge" and returns a new matrix, leaving its input
  untouched.
- Containers raise instead of returning sentinel values: popping or
  peeking an empty structure raises `IndexError`, pushing into a full
  bounded one raises `OverflowError`. `CircularQueue.enqueue`,
  `CircularQueue.dequeue` and `NStack.push` return `False` instead.
  `LRUCache.get` returns `None` for a missing key.
- `job_sequencing` returns a `(jobs_done, total_profit)` tuple.

## Example

```python
from dsakit.shortest_paths import dijkstra
from dsakit.spanning import kruskal_mst
from dsakit.lru_cache import LRUCache
from dsakit.segment_tree import MinSegmentTree

edges = [[0, 1, 4], [0, 2, 1], [2, 1, 2]]
print(dijkstra(3, edges, 0))        # [0, 3, 1]
print(kruskal_mst(3, edges))        # 3

cache = LRUCache(2)
cache.put(1, 10)
cache.put(2, 20)
cache.get(1)
cache.put(3, 30)                    # evicts key 2
print(cache.get(2))                 # None

tree = MinSegmentTree([1, 3, 2, -2, 4, 5])
print(tree.query(0, 1))             # 1
```

## What it does not do

This is a library only: it installs no command-line program and reads no
input or files of its own. Results are returned to the caller rather than
printed; `Graph.format_adjacency` returns its text as a string.
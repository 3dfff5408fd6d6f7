# algobox

A library of classic algorithms and data structures in pure Python, with no
third-party dependencies. Everything works on plain Python values: integers,
strings, lists of lists for matrices and grids, and `(u, v, w)` tuples or
adjacency lists for graphs.

## Installation

```
pip install algobox
```

## What's inside

| Module | Contents |
| --- | --- |
| `algobox.bits` | Bit tricks, XOR puzzles, `gray_code`, `all_subsets`, `submasks` |
| `algobox.number_theory` | `gcd`, `lcm`, `ext_gcd`, `mod_pow`, modular inverses, `sieve`, `segmented_sieve`, `prime_factors`, `n_choose_r`, `crt`, `euler_totient`, `is_prime_mr` |
| `algobox.matrix` | `multiply`, `mat_pow`, `rotate90`, `spiral_order`, `search_sorted_matrix`, `set_zeroes`, `maximal_rectangle`, `count_islands` |
| `algobox.backtracking` | `n_queens`, `solve_sudoku`, `subsets`, `subsets_with_dup`, `permutations`, `permute`, `combination_sum`, `word_search`, `generate_parentheses` |
| `algobox.dynamic` | Knapsack (0/1 and unbounded), `coin_change`, `lcs`, `lcs_string`, `lis`, `edit_distance`, `matrix_chain`, `rod_cutting`, `can_partition`, `egg_drop` |
| `algobox.interval_dp` | `max_coins`, `min_palindrome_cuts`, `tsp`, `assignment_problem`, `tree_dp` with `TreeNode`, `count_no_repeat_digits` |
| `algobox.greedy` | `activity_selection`, `merge_intervals`, `weighted_job_scheduling` with `Job`, `huffman_tree`/`huffman_codes`, `fractional_knapsack`, jump games, `task_scheduler`, `min_meeting_rooms` |
| `algobox.heaps` | `MinHeap`, `MaxHeap`, `MedianFinder`, `k_smallest` |
| `algobox.hashmaps` | `ChainedHashMap`, `OpenAddressingHashMap` (mapping-style `[]`, `in`, `len`, `get`, `items`) |
| `algobox.linked_lists` | `SinglyLinkedList`, `DoublyLinkedList`, `CircularLinkedList`, `merge_sorted`, `josephus` |
| `algobox.union_find` | `UnionFind` and its uses: `num_islands`, `detect_cycle`, `kruskal_mst_weight`, `accounts_merge` |
| `algobox.traversal` | `Graph` with BFS, DFS, shortest unweighted path, components, cycle and bipartite checks |
| `algobox.shortest_paths` | `WeightedGraph` (Dijkstra), `bellman_ford`, `spfa`, `floyd_warshall`, path reconstruction |
| `algobox.topological` | `TopoGraph`: Kahn's and DFS sort, shortest paths in a DAG, all orderings |
| `algobox.spanning_tree` | `kruskal`, `prim`, `boruvka` with `Edge` and `MSTResult` |
| `algobox.flow` | `FlowNetwork` (Edmonds–Karp, min cut), `DinicNetwork`, `BipartiteMatching` |
| `algobox.components` | `Kosaraju`, `Tarjan`, `ArticulationGraph` (articulation points, bridges) |

## Examples

```python
from algobox.number_theory import gcd, sieve, n_choose_r
from algobox.dynamic import lcs_string, edit_distance
from algobox.heaps import MinHeap, MedianFinder
from algobox.shortest_paths import WeightedGraph
from algobox.topological import TopoGraph

gcd(48, 18)                    # 6
sieve(20)                      # [2, 3, 5, 7, 11, 13, 17, 19]
n_choose_r(10, 3)              # 120
lcs_string("ABCBDAB", "BDCAB") # "BCAB"
edit_distance("horse", "ros")  # 3

heap = MinHeap([9, 4, 7, 2, 6, 1])
heap.top()                     # 1

median = MedianFinder()
for x in (5, 15, 1, 3):
    median.add_num(x)
median.find_median()           # 4.0

g = WeightedGraph(3)
g.add_edge(0, 1, 4)
g.add_edge(1, 2, 1)
g.add_edge(0, 2, 7)
g.dijkstra_distances(0)        # [0, 4, 5]

t = TopoGraph(6)
for u, v in [(5, 2), (5, 0), (4, 0), (4, 1), (2, 3), (3, 1)]:
    t.add_edge(u, v)
t.kahn_sort()                  # [4, 5, 2, 0, 3, 1]
```

## Conventions

- Missing results are `None` or an exception rather than a sentinel number:
  `coin_change` and `can_complete_circuit` return `None` when there is no
  answer, `TopoGraph.kahn_sort` raises `ValueError` on a cycle, and `spfa`
  raises `ValueError` when a negative cycle is reachable.
- Unreachable distances are `math.inf`; missing predecessors and next hops are
  `None`.
- Popping from an empty heap or list raises `IndexError`; missing keys in the
  hash maps raise `KeyError`.
- `rotate90`, `set_zeroes` and `solve_sudoku` change their argument in place.

## What it does not do

algobox is a library only: it has no command-line tool, and nothing is
printed or stored. Call the functions and classes from your own code.

## Running the tests

```
pip install -e ".[test]"
pytest
```
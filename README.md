# algokit

Classic algorithms as plain Python functions and one graph class, with no
dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and run pytest:

```
pip install ".[test]"
pytest
```

## Modules

### `algokit.backtracking`

- `color_graph(adjacency, colors)`: colours the nodes of a graph, given as a square
  0/1 adjacency matrix, with colours `1..colors` so that no edge joins two nodes of the
  same colour. Returns the first assignment found as a list, or `None` if there is none.
- `n_queens(n)` and `n_queens_optimized(n)`: every placement of `n` non-attacking queens
  on an `n x n` board. Each solution is a board given as a list of rows, with `1` where a
  queen stands and `0` elsewhere. Both return the same solutions in the same order; the
  second keeps occupied rows and diagonals in sets. A negative `n` raises `ValueError`.
- `rat_in_maze(maze)`: every simple path from the top-left to the bottom-right cell of a
  maze in which open cells hold `1`. Paths are strings of the moves `D`, `L`, `R`, `U`.
  Returns `[]` if the start or end cell is closed.
- `solve_sudoku(board)`: fills the empty (`0`) cells of a 9 x 9 grid. Returns a solved
  copy, or `None` if the puzzle has no solution; the input is not changed.

```python
from algokit.backtracking import n_queens, rat_in_maze

len(n_queens(4))          # 2
rat_in_maze([[1, 0, 0, 0],
             [1, 1, 0, 1],
             [1, 1, 0, 0],
             [0, 1, 1, 1]])   # ['DDRDRR', 'DRDDRR']
```

### `algokit.graph`

`Graph` stores edges as adjacency lists. Any hashable value can be a vertex.
`add_edge(start, end, directed=False)` adds an edge, and the reverse edge as well unless
`directed` is true.

- `format_adjacency()`: one line per vertex, in the form `v ----> a, b, c`.
- `bfs_traversal(start)`: breadth-first order from `start`, then from every vertex not
  yet reached.
- `dfs_traversal()`: stack-based depth-first order that covers every component.
- `shortest_path(start, end)`: a path with the fewest edges, found by BFS, or `[]`.
- `topological_sort()`: vertices in reverse DFS finishing order (meaningful for DAGs).
- `is_cyclic_directed_dfs()`, `is_cyclic_directed_bfs()`: cycle checks that treat edges
  as directed (DFS with a recursion stack, and Kahn's algorithm).
- `is_cyclic_undirected_dfs()`, `is_cyclic_undirected_bfs()`: cycle checks for undirected
  graphs, tracking each vertex's parent.

```python
from algokit.graph import Graph

g = Graph()
g.add_edge(0, 1)
g.add_edge(1, 2)
g.bfs_traversal(0)        # [0, 1, 2]
g.shortest_path(0, 2)     # [0, 1, 2]
print(g.format_adjacency(), end="")
```

### `algokit.paths`

- `hamiltonian_path(adjacency)`: backtracking search for a path that starts at vertex 0
  and visits every vertex once. Returns the path or `None`.
- `hamiltonian_path_brute_force(adjacency)`: the first vertex ordering, in lexicographic
  order, that forms a path, or `None`.
- `strongly_connected_components(vertex_count, edges)`: components of a directed graph on
  `0..vertex_count-1`, found with two depth-first passes (Kosaraju).
- `dag_shortest_distances(vertex_count, edges, source)`: shortest distances from `source`
  in a weighted DAG whose edges are `(start, end, weight)`; negative weights are allowed.
  Unreachable vertices get `None`.

Non-zero matrix entries count as edges. An empty or non-square matrix, or a vertex out of
range, raises `ValueError`.

### `algokit.greedy`

- `fractional_knapsack(items, capacity)`: takes `(value, weight)` pairs, best
  value-per-weight first, splitting the last item if needed. Returns a `KnapsackResult`
  with `selected`, `total_value` and a `total_weight` property.
- `select_activities(activities)`: the largest set of non-overlapping `(start, finish)`
  activities, chosen earliest finish first, returned as a list.
- `job_sequencing(jobs)`: takes `Job(id, deadline, profit)` records, places the most
  profitable jobs in the latest free slot before their deadline, and returns a
  `JobSchedule` with `job_ids` and `total_profit`.

```python
from algokit.greedy import Job, job_sequencing

schedule = job_sequencing([Job(1, 2, 100), Job(2, 1, 19), Job(3, 2, 27),
                           Job(4, 1, 25), Job(5, 3, 15)])
schedule.job_ids        # [1, 3, 5]
schedule.total_profit   # 142
```

### `algokit.strings`

- `rabin_karp(text, pattern)`: start index of every occurrence, found with a rolling
  hash. An empty pattern gives no matches.
- `brute_force_match(text, pattern)`: the same, checking each position directly. An empty
  pattern matches at every index from 0 to `len(text)`.

```python
from algokit.strings import rabin_karp

rabin_karp("ABABDABACDABABCABAB", "ABAB")   # [0, 10, 15]
```

### `algokit.subarray`

- `max_subarray_sum(values)`: the largest sum of a non-empty contiguous run, checking
  every start and end. An empty input raises `ValueError`.

## What it does not do

algokit is a library only. It has no command-line program and reads no input of its own;
results are returned to the caller rather than printed.
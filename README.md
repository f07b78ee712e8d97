# algokit

A small collection of classic algorithms in plain Python. It has no runtime
dependencies.

## What is included

- **Sorting** (`algokit.sorting`): `bubble_sort`, `insertion_sort`,
  `selection_sort`, `merge_sort`, `heap_sort` and `quick_sort`. Each one takes
  any iterable of comparable values and returns a new ascending list, leaving
  the input as it was. `format_values` joins values into one space-separated
  line.
- **Graphs** (`algokit.graphs`):
  - `floyd_warshall(matrix)` returns all-pairs shortest distances from a
    square matrix, where a missing edge is `INF` (`math.inf`). The input is
    not modified. `format_distances` renders the result in five-character
    columns and shows unreachable pairs as `INF`.
  - `kruskal(vertex_count, edges)` returns the edges of a minimum spanning
    forest in the order they were chosen. Edges may be `Edge(u, v, weight)`
    values or `(u, v, weight)` tuples; a vertex outside `0..vertex_count-1`
    raises `ValueError`.
  - `prim(graph)` grows a minimum spanning tree from vertex 0 over an
    adjacency matrix in which a weight of 0 means no edge. It returns one
    `Edge(parent, vertex, weight)` for each vertex from 1 upwards and raises
    `ValueError` if the graph is not connected.
  - `topological_sort(adjacency)` orders the vertices of a directed graph
    given as a matrix of truthy/falsy entries, by depth-first search in index
    order.
  - `str(edge)` gives `"u - v \tweight"`.
  - Non-square matrices raise `ValueError`.
- **N-Queens** (`algokit.queens`): `solve_n_queens(n=8)` fills columns left to
  right by backtracking and returns the first board found (1 marks a queen),
  or `None` if there is none. A negative size raises `ValueError`.
  `format_board` renders the board as rows of space-separated cells.
- **Travelling salesman** (`algokit.tsp`): `tsp_min_cost(dist)` returns the
  cost of the cheapest round trip from city 0 through every city and back,
  using dynamic programming over subsets. An empty or non-square matrix
  raises `ValueError`.
- **Pattern matching** (`algokit.matching`): `find_pattern(text, pattern)`
  returns every index where the pattern occurs, overlapping matches included,
  by a brute-force scan. It works on strings and other sequences.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Example

```python
from algokit.sorting import merge_sort, format_values
from algokit.graphs import Edge, kruskal
from algokit.matching import find_pattern

print(format_values(merge_sort([12, 11, 13, 5, 6, 7])))
# 5 6 7 11 12 13

tree = kruskal(5, [Edge(0, 1, 2), Edge(0, 3, 6), Edge(1, 2, 3),
                   Edge(1, 3, 8), Edge(1, 4, 5), Edge(2, 4, 7),
                   Edge(3, 4, 9)])
for edge in tree:
    print(edge)
# 0 - 1   2
# 1 - 2   3
# 1 - 4   5
# 0 - 3   6

print(find_pattern("ABABDABACDABABCABAB", "ABABCABAB"))
# [10]
```

## Command line

Installing the package adds an `algokit` command. It needs one of these
subcommands:

```
algokit sort 5 3 9 1 --algorithm merge
algokit floyd
algokit kruskal
algokit tsp
```

- `sort` prints the original and the sorted integers. Without values it sorts
  a built-in sample. `--algorithm` is one of `bubble` (the default), `heap`,
  `insertion`, `merge`, `quick` or `selection`.
- `floyd` prints the shortest-distance table of a built-in four-vertex graph.
- `kruskal` prints the minimum spanning tree edges of a built-in five-vertex
  graph.
- `tsp` prints the minimum tour cost of a built-in four-city distance table.

## What the command does not do

The command cannot read graphs or distance tables from files or from its
arguments. Apart from `sort`, it only runs the built-in samples. Prim's
algorithm, topological sorting, N-Queens and pattern matching have no
subcommand and are used from Python only.
# algorithms

A small collection of classic algorithms and data structures in plain Python,
with no third-party dependencies. Vertices are numbered from 0 throughout.

## What is inside

| Module | Contents |
| --- | --- |
| `algorithms.kmp` | `match_string_bf`, `match_string_kmp` and `prefix_function` |
| `algorithms.sorting` | `insert_sort`, `binary_insert_sort`, `shell_sort`, `select_sort`, `bubble_sort`, `quick_sort`, `heap_sort`, `merge_sort` |
| `algorithms.front_star` | `FrontStarGraph`, a directed weighted graph, and its `Edge` |
| `algorithms.union_find` | `UnionFindSet` with path compression and union by rank |
| `algorithms.mst` | Minimum spanning tree weight by `prim` and `kruskal` |
| `algorithms.scc` | Strongly connected components by `kosaraju` and `tarjan_scc` |
| `algorithms.topo_sort` | Topological order by `kahn` and `topo`, and `CycleError` |
| `algorithms.binary_tree` | `BinaryTree` and `BinaryTreeNode`, with recursive and iterative traversals |
| `algorithms.adjacency_multilist` | `AdjacencyMultilist`, an undirected graph storing each edge once |

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Usage

### String matching

Both matchers return the index of the **last** character of every match,
overlapping matches included. An empty pattern raises `ValueError`.

```python
from algorithms.kmp import match_string_kmp, match_string_bf, prefix_function

match_string_kmp("abcdabcxabcabcd", "abcd")  # [3, 14]
match_string_bf("abcdabcxabcabcd", "abcd")   # [3, 14]
prefix_function("abab")                      # [0, 0, 1, 2]
```

### Sorting

Every sort works in place on a list and returns `None`. Each takes an
optional `comp(a, b)` that says whether `a` must come before `b`; the
default is `operator.lt`.

```python
import operator
from algorithms.sorting import heap_sort, shell_sort

values = [5, 3, 8, 1]
heap_sort(values)                  # values == [1, 3, 5, 8]
shell_sort(values, operator.gt)    # values == [8, 5, 3, 1]
```

### Graphs

`FrontStarGraph(n)` holds vertices `0 .. n-1`. `add(u, v, w)` adds a directed
edge and returns it, `add_bi(u, v, w)` adds it in both directions,
`edges_from(u)` yields the edges leaving `u` newest first, `edges` gives all
edges in the order added, and `reversed()` returns the transposed graph.
Vertices out of range raise `IndexError`.

```python
from algorithms.front_star import FrontStarGraph
from algorithms.mst import prim, kruskal

g = FrontStarGraph(6)
for u, v, w in [(0, 1, 6), (0, 2, 1), (0, 3, 5), (1, 2, 5), (1, 4, 3),
                (2, 3, 5), (2, 4, 6), (2, 5, 4), (3, 5, 2), (4, 5, 6)]:
    g.add_bi(u, v, w)

prim(g, 0)    # 15
kruskal(g)    # 15
```

`prim` and `kruskal` raise `ValueError` when the graph is not connected;
`kruskal` also raises it for a graph with no vertices.

`kosaraju(graph, reverse=None)` and `tarjan_scc(graph)` return the strongly
connected components as lists of vertices. `kosaraju` builds the reversed
graph itself when none is passed.

`kahn(graph, in_degrees=None)` and `topo(graph)` return a topological order.
`kahn` counts in-degrees itself when none are passed. A graph with a cycle
raises `CycleError` (a `ValueError`) whose `order` attribute holds the
vertices ordered before the cycle was detected.

`UnionFindSet(n)` offers `find(x)`, `union(x, y)` (returning whether two
separate sets were merged) and `connected(x, y)`.

`AdjacencyMultilist(labels)` is an undirected graph with one labelled vertex
per label. `add(i, j, w)` stores the edge once and links it into the lists of
both ends; `edges_of(v)` yields the edges touching `v`, newest first, and
`EdgeNode.other(v)` gives the opposite end. Self-loops raise `ValueError`.

### Binary trees

`BinaryTree.build_by_level(values)` builds a tree from level-order values,
where `None` or an empty string marks a missing child. The traversals
`pre_order`, `in_order`, `post_order`, `level_order`, `pre_order_iterative`,
`in_order_iterative` and `post_order_iterative` yield `BinaryTreeNode`
objects; the recursive three accept an optional starting node.

```python
from algorithms.binary_tree import BinaryTree

tree = BinaryTree.build_by_level(["A", "B", "C", "D", "E"])
[n.data for n in tree.in_order()]   # ['D', 'B', 'E', 'A', 'C']
```

## Commands

Each algorithm family has a small demonstration command:

```
algorithms-kmp [TEXT] [PATTERN]
algorithms-sort [--size N] [--seed SEED]
algorithms-mst
algorithms-scc
algorithms-topo-sort
algorithms-binary-tree [VALUE ...]
```

`algorithms-kmp` matches `abcd` in `abcdabcxabcabcd` unless given other
strings. `algorithms-sort` sorts random numbers from 0 to 100 (20 of them by
default) with every sort. `algorithms-mst`, `algorithms-scc` and
`algorithms-topo-sort` run on fixed sample graphs. `algorithms-binary-tree`
builds a tree from `A B C D E` unless given other values and prints every
traversal.

## Limits

The adjacency multilist has no command of its own, and none of the commands
read graphs from files or standard input.
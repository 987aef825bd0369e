# algocount

Textbook algorithms that count their own basic operations. Every function
returns its ordinary result together with the number of key steps it took
(comparisons, loop iterations, matrix entries examined or heap adjustments).
The `*_plot_data` functions build best, average and worst case inputs for a
range of sizes and report how the operation count grows, ready to be plotted.

## What is included

| Module | Algorithms |
| --- | --- |
| `algocount.gcd` | `gcd_euclid`, `gcd_consecutive`, `gcd_subtraction` |
| `algocount.search` | `linear_search`, `binary_search` |
| `algocount.elementary_sorts` | `bubble_sort`, `insertion_sort`, `selection_sort` |
| `algocount.divide_conquer` | `merge_sort`, `merge_worst_order` (worst-case input for merge sort), `quick_sort` |
| `algocount.matching` | `brute_force_match` |
| `algocount.traversal` | `dfs_connectivity`, `bfs_connectivity`: components and cycle detection |
| `algocount.toposort` | `dfs_topological_sort`, `source_removal_sort`, raising `CycleError` on a cycle |
| `algocount.heapsort` | `heap_sort` |
| `algocount.closure` | `warshall` (transitive closure), `floyd` (all-pairs shortest paths) |
| `algocount.knapsack` | `knapsack_bottom_up`, `knapsack_memo` over `Item` values |
| `algocount.greedy` | `prim`, `dijkstra`, both on the `CountingHeap` min-heap |

Each result is a small frozen dataclass (`GcdResult`, `SearchResult`,
`SortResult`, `MatchResult`, `TraversalResult`, `TopoResult`,
`ClosureResult`, `KnapsackResult`, `SpanningTree`, `ShortestPaths`) with a
`count` field or property holding the operation count.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from algocount.gcd import gcd_euclid
from algocount.search import binary_search
from algocount.elementary_sorts import bubble_sort
from algocount.toposort import dfs_topological_sort, CycleError

result = gcd_euclid(48, 18)            # GcdResult(value=6, count=...)
found = binary_search([1, 3, 5, 7], 5)  # SearchResult(index=2, count=...)
ordered = bubble_sort([5, 2, 4, 1])     # SortResult(items=[1, 2, 4, 5], count=...)

try:
    dfs_topological_sort([[0, 1], [1, 0]])
except CycleError:
    print("the graph has a cycle, so there is no topological order")
```

Graphs are adjacency matrices written as lists of lists. For `floyd`, a
missing edge is `algocount.closure.INF`; for `prim` and `dijkstra`, a missing
edge is `None`, `-1` or `math.inf`.

The plot-data functions return a dictionary that maps a file name (such as
`"linearbest.txt"`) to a list of `(size, count)` rows; they do not write any
files themselves. Those that use random inputs take a `random.Random`
instance, so a seeded generator gives the same figures on every run:

```python
import random
from algocount.search import linear_plot_data

data = linear_plot_data(random.Random(1))
for size, count in data["linearavg.txt"]:
    print(size, count)
```

## Command line

Installing the package adds the `algocount` command, which works with the
elementary sorts (`bubble`, `insertion`, `selection`).

Sort numbers given as arguments, or read from standard input when none are
given:

```
algocount sort insertion 5 3 9 1
echo "5 3 9 1" | algocount sort bubble
```

Write the comparison-count files for one sort into a directory:

```
algocount plot bubble --sizes 10 100 1000 --seed 1 --directory results
```

This writes `Bubblebest.txt`, `Bubbleworst.txt` and `Bubbleavg.txt` (or the
`Insertion…` files, or `selectionsort.txt`), one tab-separated `size count`
line per size. Without `--sizes` the sizes are 10, 100, 1000, 10000, 20000
and 30000, which takes a long time for bubble and insertion sort. Without
`--directory` the files go into the current directory.

## What it does not do

The command line covers only the three elementary sorts. Every other
algorithm, and its plot data, is reached through the library; there is no
interactive prompt and nothing draws the plots.
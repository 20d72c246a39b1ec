# algokit

A small collection of classic algorithms, written as plain Python functions
that take ordinary lists and return ordinary values. It has no dependencies
outside the standard library.

## What is in it

| Module | Contents |
| --- | --- |
| `algokit.knapsack` | `knapsack_01` (dynamic programming), `fractional_knapsack` (greedy by value/weight ratio), `Item` |
| `algokit.search` | `binary_search` (iterative), `binary_search_recursive` |
| `algokit.sorting` | `merge_sort`, `merge` |
| `algokit.jobs` | `job_sequence` (job sequencing with deadlines), `Job` |
| `algokit.subsets` | `subset_sums` (every subset adding up to a target) |
| `algokit.tsp` | `tsp_cost` (travelling salesman cost by bitmask dynamic programming) |
| `algokit.mst` | `kruskal_cost`, `prim_mst`, `DisjointSet` |
| `algokit.multistage` | `shortest_path` through a multistage graph, `SAMPLE_GRAPH` |
| `algokit.cli` | the `algokit` command |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library use

```python
from algokit.knapsack import Item, fractional_knapsack, knapsack_01
from algokit.sorting import merge_sort
from algokit.tsp import tsp_cost

knapsack_01(50, [10, 20, 30], [60, 100, 120])        # 220
fractional_knapsack(50, [Item(60, 10), Item(100, 20), Item(120, 30)])  # 240.0

merge_sort([9, 4, 7, 6, 3, 1, 5])                    # [1, 3, 4, 5, 6, 7, 9]

tsp_cost([
    [0, 10, 15, 20],
    [5, 0, 9, 10],
    [6, 13, 0, 12],
    [8, 8, 9, 0],
])                                                   # 35
```

Binary search works on a sorted sequence and returns `None` when the value
is absent:

```python
from algokit.search import binary_search, binary_search_recursive

binary_search([3, 4, 5, 6, 7, 8, 9], 7)            # 4
binary_search_recursive([3, 4, 5, 6, 7, 8, 9], 9)  # 6
binary_search([3, 4, 5, 6, 7, 8, 9], 10)           # None
```

Job sequencing returns the scheduled jobs in slot order; subset sums are
produced lazily as tuples:

```python
from algokit.jobs import Job, job_sequence
from algokit.subsets import subset_sums

[job.id for job in job_sequence([Job(1, 2, 100), Job(2, 1, 19), Job(3, 2, 27)])]
# [3, 1]

list(subset_sums([1, 2, 3, 4], 5))                 # [(1, 4), (2, 3)]
```

Spanning trees and the multistage shortest path:

```python
from algokit.mst import kruskal_cost, prim_mst
from algokit.multistage import SAMPLE_GRAPH, shortest_path

kruskal_cost([(0, 1, 10), (0, 2, 6), (0, 3, 5), (1, 3, 15), (2, 3, 4)])  # 19

prim_mst([
    [0, 2, 0, 6, 0],
    [2, 0, 3, 8, 5],
    [0, 3, 0, 0, 7],
    [6, 8, 0, 0, 9],
    [0, 5, 7, 9, 0],
])  # [(0, 1, 2), (1, 2, 3), (0, 3, 6), (1, 4, 5)]

shortest_path(SAMPLE_GRAPH)                        # ([0, 1, 6, 9, 11], 16)
```

In `prim_mst` a zero entry means no edge; a disconnected graph raises
`ValueError`. In `shortest_path` a missing edge is `None` or `math.inf`, and
an unreachable last node raises `ValueError`.

## Command line

The `algokit` command takes one problem name, reads whitespace-separated
integers from standard input, prints prompts and the result, and reports how
long the solving took:

| Command | Input, in order |
| --- | --- |
| `algokit knapsack` | item count; value and weight of each item; knapsack capacity |
| `algokit fractional` | knapsack capacity; item count; value and weight of each item |
| `algokit jobs` | job count; id, deadline and profit of each job |
| `algokit subsets` | number count; the numbers; the target sum |

For example:

```
echo "3  60 10  100 20  120 30  50" | algokit knapsack
```

Input that runs out early, is not an integer, or is otherwise invalid is
reported on standard error as `algokit: <message>` with exit status 1.

```
algokit --help
```

## What it does not do

The command line covers only the four problems above. Binary search, merge
sort, the travelling salesman cost, the spanning trees and the multistage
shortest path are available only as library functions.
# algokit

A collection of classic algorithms written as plain Python functions, each
with a small command that reads its input from standard input.

## Installation

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## What is inside

- `algokit.graphs`: `Graph` (with `add_edge`), `Edge`, `bellman_ford`,
  `floyd_warshall`, `format_distances`, `format_matrix`, and
  `NegativeCycleError`, which `bellman_ford` raises when a negative-weight
  cycle can be reached. Unreachable distances are `None`.
- `algokit.bignum`: decimal-string arithmetic (`add_decimal`,
  `multiply_decimal`) and `factorial_string`.
- `algokit.arrays`: `exchange_sort`, `smallest_missing`, `subarray_with_sum`,
  `max_activities`, `binary_search`, `boring_apartment_keypresses`.
- `algokit.dynamic`: `egg_drop`, `fib_bottom_up`, `fib_top_down`,
  `knapsack` (returns a `KnapsackResult` with `value`, `items` and `table`),
  `job_scheduling`.

## Library use

```python
from algokit.graphs import Graph, bellman_ford, format_distances
from algokit.dynamic import knapsack, egg_drop
from algokit.bignum import factorial_string

graph = Graph(3)
graph.add_edge(0, 1, 4)
graph.add_edge(1, 2, -2)
print(format_distances(bellman_ford(graph, 0)))

print(egg_drop(2, 10))           # 4
print(factorial_string(25))      # 15511210043330985984000000
print(knapsack(50, [10, 20, 30], [60, 100, 120]))
```

## Commands

Each command reads whitespace-separated integers from standard input, in the
order its prompts ask for them:

    algokit-bellman-ford      # vertices, edges, each edge, then the source
    algokit-floyd-warshall    # vertices, edges, each edge
    algokit-factorial         # a number; prints its exact factorial

`algokit-arrays` takes a subcommand:

    algokit-arrays sort [VALUES ...]     # exchange sort (a built-in list if none given)
    algokit-arrays missing [--limit N]   # count, values; smallest missing number
    algokit-arrays subarray              # count, target, values
    algokit-arrays activities            # cases; per case: count, start/finish pairs
    algokit-arrays search                # count, sorted values, target
    algokit-arrays keypresses            # cases; one apartment number per case

`algokit-dynamic` takes a subcommand:

    algokit-dynamic egg                  # eggs, floors
    algokit-dynamic fib [--method bottom-up|top-down]
    algokit-dynamic knapsack             # count, weight/profit pairs, capacity
    algokit-dynamic jobs                 # count, then start/duration/profit per job

On bad or missing input the commands print an error to standard error and
exit with status 1.

## What it does not do

The package has no networking: it offers no chat server or client and opens
no sockets. Everything it does runs locally on the input it is given.
# contest_solvers

A small library of solutions to well-known programming-contest problems.
Each one is a plain Python function that takes values and returns the answer.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## What is inside

- `contest_solvers.graphs`
  - `build_graph(n, edges)`: undirected adjacency lists.
  - `bfs_distances(n, edges, start)`: hop counts from `start`, with `-1` for a vertex that cannot be reached.
  - `reachable(n, edges, start)`: the set of vertices reached from `start`.
  - `is_cycle_graph(n, edges)`: whether the graph is one cycle through every vertex.
  - `run_sprinkler(n, edges, colors, queries)`: the sprinkler colouring simulation. It returns the colour reported by each query.
  - `grid_repaint(grid)`: how many white cells can be blackened while a shortest path is kept. It returns `None` when there is no path.
- `contest_solvers.contests`
  - `meets_deadline(a, b, c, d)`: checks a submission time against a deadline.
  - `overflow_product(values, k)`: a running product that resets when it overflows.
  - `rounded_quotient(a, b)`: division rounded half up.
  - `dice_probability(x, y)` and `format_probability(value)`: the dice probability and how to print it.
  - `button_presses(s)`: counts button presses.
  - `max_domino_xor(grid)`: exhaustive XOR search over a grid.
  - `count_diff(s, t)`, `rotate_right(grid)` and `min_rotation_cost(s, t)`: grid comparison and rotation cost.
  - `missing_letter(s)`: the first lower-case letter that does not appear in `s`.
- `contest_solvers.counting`
  - `count_ab_substrings(strings)`: the most "AB" occurrences that a concatenation of the strings can hold.
  - `count_anagram_pairs(words)`: anagram pairs.
  - `count_distinct(values)`: distinct values.
  - `ac_prefix_counts(s)` and `count_ac(s, queries)`: "AC" prefix counts and range queries.
  - `max_sum_after_flips(values)`: the sign-flipping maximum.
  - `fairness(a, b, c, k)`: the fairness puzzle.
- `contest_solvers.search`
  - `patty_count(n, x)`: the layered burger patty count.
  - `max_requirement_score(n, m, requirements)`: the best score over non-decreasing sequences.
  - `find_bills(n, y)`: banknote combinations.
  - `can_travel(plan)`: travel-plan feasibility.
  - `double_camel_sort(s)`: double camel case sorting.

Invalid input raises `ValueError`. Problems that have no answer return `None`, or `False` for yes/no questions.

## Using the library

```python
from contest_solvers.graphs import bfs_distances
from contest_solvers.search import patty_count
from contest_solvers.counting import fairness

# Shortest hop counts from vertex 0 in an undirected path 0-1-2-3.
print(bfs_distances(4, [(0, 1), (1, 2), (2, 3)], 0))  # [0, 1, 2, 3]

# Patties among the bottom 7 layers of a level-2 burger.
print(patty_count(2, 7))  # 4

print(fairness(1, 2, 3, 1))  # 1
```

## Command line

The package installs a `contest-solvers` command. It reads a problem's input from standard input and prints the answer.

```
contest-solvers --help
```

It has two subcommands:

- `contest-solvers bfs`
  - Input: `N M`, followed by `M` edges `a b`. Vertices are numbered from 0.
  - Output: one line `v:d ` per vertex, giving its distance from vertex 0. The distance is `-1` when the vertex cannot be reached.
- `contest-solvers traveling`
  - Input: `N`, followed by `N` lines `t x y`.
  - Output: `Yes` if the plan can be followed, otherwise `No`.

## What it does not do

Only the two problems above can be run from the command line. All the other solutions are available only as library functions, and there is no command-line input reader for them.
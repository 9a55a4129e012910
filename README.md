# algobox

A small library of classic algorithms and data structures, written for
learning and experimenting. It needs nothing outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## What is inside

| Module                 | Contents |
|------------------------|----------|
| `algobox.sorting`      | `insertion_sort`, `merge_sort`, `selection_sort`, `partition_negatives`, `reverse_array` |
| `algobox.searching`    | `binary_search`, `exponential_search`, `search_sorted_matrix`, `prefix_function`, `kmp_search`, `sliding_window_max`, `count_anagrams`, `count_triplets_below`, `min_max` |
| `algobox.numbers`      | `binomial`, `catalan`, `primes_up_to`, `equal_without_compare`, `hanoi_moves`, `Move` |
| `algobox.dynamic`      | `longest_increasing_subsequence`, `count_decodings` |
| `algobox.linked_list`  | `SinglyLinkedList` |
| `algobox.stacks`       | `TwoStacks`, `StackOverflow`, `StackUnderflow`, `is_balanced`, `evaluate_postfix` |
| `algobox.deque`        | `CircularDeque`, `DequeFull`, `DequeEmpty` |
| `algobox.graphs`       | `DisjointSet`, `connected_components`, `kruskal_mst_weight`, `prim_mst` |
| `algobox.backtracking` | `is_safe`, `solve_sudoku`, `solve_n_queens`, `rat_in_maze` |
| `algobox.expedition`   | `min_refuel_stops`, `main` |
| `algobox.crc`          | `mod2_remainder`, `crc_bits`, `encode`, `check` |
| `algobox.rover`        | `Rover`, `Heading` |
| `algobox.bst`          | `Node`, `inorder`, `merge_sorted`, `sorted_to_bst`, `merge_trees` |
| `algobox.workers`      | `run_demo` |
| `algobox.calculator`   | `calculate`, `main` |

The sorting functions take any iterable and return a new list; the input
is left alone. Searches that find nothing return `None`
(`binary_search`, `exponential_search`, `search_sorted_matrix`), as do
the backtracking solvers and `min_refuel_stops` when there is no
solution. `solve_sudoku` accepts cells as integers or one-character
strings, with `0`, `"0"` or `"."` for an empty cell, and returns a solved
copy.

## Examples

```python
from algobox.sorting import insertion_sort, merge_sort
from algobox.searching import exponential_search, kmp_search
from algobox.numbers import catalan, primes_up_to, hanoi_moves
from algobox.stacks import is_balanced, evaluate_postfix
from algobox.rover import Rover

insertion_sort([12, 11, 13, 5, 6])         # [5, 6, 11, 12, 13]
merge_sort([6, 5, 12, 10, 9, 1])           # [1, 5, 6, 9, 10, 12]
exponential_search([2, 3, 4, 10, 40], 10)  # 3
kmp_search("AB", "ABCAB")                  # [0, 3]
[catalan(n) for n in range(10)]            # [1, 1, 2, 5, 14, 42, 132, 429, 1430, 4862]
primes_up_to(30)                           # [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]
list(hanoi_moves(2))                       # [Move(1, 'A', 'B'), Move(2, 'A', 'C'), Move(1, 'B', 'C')]
is_balanced("[()]{}{[()()]()}")            # True
evaluate_postfix("23*4+")                  # 10

rover = Rover(1, 2, "N")
rover.process("LMLMLMLMM")
str(rover)                                 # '1 3 N'
```

`SinglyLinkedList` and `CircularDeque` support `len()` and iteration.
Operations that cannot proceed raise an exception: `IndexError` from the
linked list, `StackOverflow` / `StackUnderflow` (both `IndexError`) from
`TwoStacks`, and `DequeFull` / `DequeEmpty` (both `IndexError`) from
`CircularDeque`.

`algobox.workers.run_demo` starts two background threads that print
lines at their own intervals while the main thread reports a number of
rounds; the workers are stopped before the final line. Output goes to
standard output or to the stream passed as `out`.

## Command-line tools

`algobox-calc` applies `+`, `-`, `*` or `/` to two numbers. With no
arguments it prompts for the operator and the operands on standard
input; they may also be given as arguments:

```
algobox-calc + 2 3
```

prints `2 + 3 = 5`. An unknown operator prints
`Error! operator is not correct`. Dividing by zero gives `inf`, `-inf`
or `nan`.

`algobox-expedition` reads test cases for the truck refuelling problem
from a file named on the command line, or from standard input: the
number of cases, then for each case the number of fuel stations, each
station's distance from the town and its fuel, and finally the truck's
distance from the town and its starting fuel. For every case it prints
the fewest refuelling stops needed to reach the town, or `-1` when the
town cannot be reached:

```
algobox-expedition cases.txt
algobox-expedition < cases.txt
```

## What it does not do

The data structures are library classes only: there is no interactive
menu or command for building a linked list, stack or deque by hand, and
the sorting, searching, graph and backtracking routines have no command
of their own. They are meant to be called from Python.
# dsakit

Plain, readable implementations of classic data structures, a small string
sorting helper and an interactive CGPA calculator. No third-party
dependencies.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.arrays` | `FixedArray` (bounded capacity) and `DynamicArray` (doubles when full, optionally halves after deletions) |
| `dsakit.stack` | `ArrayStack`, a stack with a fixed capacity |
| `dsakit.linked_lists` | `SinglyLinkedList`, `DoublyLinkedList`, the node classes `SinglyNode` and `DoublyNode`, and `middle_value` |
| `dsakit.avl` | `AVLTree`, `AVLNode`, and the helpers `height`, `balance_factor`, `rotate_left`, `rotate_right` |
| `dsakit.bst` | `BinarySearchTree` and `BSTNode`, an unbalanced search tree |
| `dsakit.graphs` | `AdjacencyListGraph` (directed) and `AdjacencyMatrixGraph` (undirected) |
| `dsakit.sorting` | `sort_strings` |
| `dsakit.cgpa` | `Student`, `grade_to_points`, `calculate_cgpa` and the `main` entry point of the calculator |

Invalid operations raise ordinary Python exceptions instead of printing a
message:

- `FixedArray`: appending or inserting when full raises `OverflowError`; an
  index outside `0 .. len - 1` (negative indices are not accepted) raises
  `IndexError`. `find` returns `-1` when the value is absent.
- `DynamicArray`: never overflows; with `shrink=True` the capacity is halved
  after a deletion that leaves it at most half full. Its `capacity` property
  shows the current capacity.
- `ArrayStack`: `push` on a full stack raises `OverflowError`, `pop` on an
  empty one raises `IndexError`; `pop` returns the removed value and `peek`
  returns `None` when the stack is empty.
- Linked lists: deleting from an empty list raises `IndexError`;
  `delete_node` with a node that is not in the list raises `ValueError`.
  `SinglyLinkedList.insert_after(None, x)` does nothing and returns `None`,
  while `DoublyLinkedList.insert_after(None, x)` raises `ValueError`.
  `middle_value` returns the element at position `len // 2` and raises
  `IndexError` for an empty input.
- Search trees ignore duplicate values and deleting a missing value leaves
  the tree unchanged. `BinarySearchTree.min()` / `max()` raise `ValueError`
  on an empty tree. `AVLTree.search` returns the node holding a value, or
  `None`.
- Graphs: `AdjacencyListGraph.add_edge` and `adjacent_nodes`, and
  `AdjacencyMatrixGraph.add_edge`, raise `IndexError` for an unknown vertex;
  `AdjacencyMatrixGraph.adjacent_nodes` returns `[]` and `is_isolated`
  returns `True` for one.
- `sort_strings` raises `TypeError` if any element is not a `str`.

## Examples

```python
from dsakit.arrays import DynamicArray
from dsakit.avl import AVLTree
from dsakit.graphs import AdjacencyListGraph, AdjacencyMatrixGraph
from dsakit.linked_lists import DoublyLinkedList
from dsakit.sorting import sort_strings

arr = DynamicArray(2, shrink=True)
for value in (5, 3, 8):
    arr.append(value)
print(list(arr), len(arr))      # [5, 3, 8] 3

tree = AVLTree()
for value in (50, 30, 70, 90, 110):
    tree.insert(value)
print(tree.inorder())           # [30, 50, 70, 90, 110]
tree.delete(110)
print(110 in tree)              # False

dll = DoublyLinkedList([1, 2, 3])
print(list(reversed(dll)))      # [3, 2, 1]

matrix = AdjacencyMatrixGraph(5)
matrix.add_edge(0, 2)
matrix.add_edge(2, 4)
print(matrix.adjacent_nodes(2)) # [0, 4]
print(matrix.is_isolated(1))    # True
print(matrix.format_matrix())

lists = AdjacencyListGraph(3)
lists.add_edge(0, 1)
lists.add_edge(0, 2, data=7)
print(lists.adjacent_nodes(0))  # [2, 1]  (most recent first)

print(sort_strings(["Sohit", "Amit", "Deepak", "Rohit"]))
# ['Amit', 'Deepak', 'Rohit', 'Sohit']
print(sort_strings(["b", "a", "c"], ascending=False))
# ['c', 'b', 'a']
```

## CGPA calculator

The package installs a command that asks for the number of semesters, the
student's name and ID, and then, for every subject of every semester, the
grade, percentage and credit hours. It prints each semester's CGPA and the
mean of those as the overall CGPA:

```
dsakit-cgpa
```

Only the first letter of a grade answer counts (so `A+` is read as `A`).
Grades score A = 9 (10 when the percentage is at least 9.5), B = 8, C = 7,
D = 6, E = 5, F = 0. Non-numeric answers to numeric questions are asked
again; an unknown grade, a semester with zero total credits, or the end of
input stops the command with exit status 1.

The same calculation is available from code:

```python
from dsakit.cgpa import calculate_cgpa, grade_to_points

points = [grade_to_points("A", 9.7), grade_to_points("B", 7.0)]
print(calculate_cgpa(points, [4, 3]))
```

`grade_to_points` raises `ValueError` for an unknown grade, and
`calculate_cgpa` raises `ValueError` when the lists differ in length or the
credits sum to zero.

## What it does not do

All structures live in memory only; nothing is saved to disk. The CGPA
calculator keeps no records between runs and has no options beyond `--help`.
The graph classes store edges and report neighbours but offer no traversal
or path-finding algorithms.
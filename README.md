# algokit

A small collection of classic algorithms and data structures in plain Python.
It has no dependencies outside the standard library.

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

| Module                | Contents |
|-----------------------|----------|
| `algokit.searching`   | `binary_search` (over an ascending sequence), `linear_search`; both return an index or `None` |
| `algokit.sorting`     | `bubble_sort`, `counting_sort`, `insertion_sort`, `merge_sort`, `quick_sort`, `selection_sort`; each returns a new sorted list |
| `algokit.linked_list` | `Node`, `LinkedList` (`prepend`, `append`, `insert_after`, `node_at`, `remove`, `in`, iteration, `len`, `str`) |
| `algokit.bst`         | `TreeNode`, `BinarySearchTree` (`insert`, `search`, `in`, `delete`, `minimum`, `inorder`, `preorder`, `postorder`, `height`) |
| `algokit.stacks`      | `BoundedQueue`, `QueueStack` (a stack built from two queues), `TwoStacks` (two stacks sharing one buffer), and `QueueFullError`, `QueueEmptyError`, `StackOverflowError`, `StackUnderflowError` |
| `algokit.expression`  | `is_palindrome`, `is_valid_operator`, `is_valid_expression`, and the `main` behind `algokit-expression` |
| `algokit.maze`        | `Cell`, `Event`, `Maze` with `dfs` and `bfs`, and the `main` behind `algokit-maze` |

## Examples

Searching:

```python
from algokit.searching import binary_search, linear_search

linear_search([2, 5, 6, 6, 3, 8], 5)   # 1
binary_search([2, 3, 6, 7, 9], 6)      # 2
binary_search([2, 3, 6, 7, 9], 4)      # None
```

Sorting:

```python
from algokit.sorting import counting_sort, quick_sort

quick_sort([10, 3, 5, 2, 8])               # [2, 3, 5, 8, 10]
counting_sort([2, 4, 6, 2, 1, 5, 6, 8])    # [1, 2, 2, 4, 5, 6, 6, 8]
```

`counting_sort` accepts non-negative integers only and raises `ValueError`
otherwise.

Binary search trees:

```python
from algokit.bst import BinarySearchTree

tree = BinarySearchTree([50, 30, 20, 40, 70, 60, 80])
tree.inorder()         # [20, 30, 40, 50, 60, 70, 80]
tree.preorder()        # [50, 30, 20, 40, 70, 60, 80]
40 in tree             # True
tree.height()          # 3
tree.delete(50)        # raises KeyError for a value not in the tree
```

Equal values are placed in the right subtree.

Linked lists:

```python
from algokit.linked_list import LinkedList

items = LinkedList([10, 20, 30])
items.append(40)
items.prepend(5)
list(items)            # [5, 10, 20, 30, 40]
str(items)             # "5 10 20 30 40"
items.remove(20)       # True
20 in items            # False
```

Stacks and queues raise an error on overflow and underflow:

```python
from algokit.stacks import BoundedQueue, QueueEmptyError, TwoStacks

queue = BoundedQueue(2)
queue.enqueue(1)
queue.dequeue()        # 1
try:
    queue.dequeue()
except QueueEmptyError:
    ...

stacks = TwoStacks(6)  # the first stack holds 3 items, the second 2
stacks.push_first(5)
stacks.push_second(20)
stacks.pop_first()     # 5
```

Mazes are grids of `Cell` values (`PATH`, `WALL`, `EXIT`, `TREASURE`).
`Maze.dfs` yields an `Event` for every step of every simple path from the
start; `Maze.bfs` returns the list of visits and the number of moves queued.

```python
from algokit.maze import Cell, Maze

maze = Maze()                      # the built-in 5x5 maze
events, moves = maze.bfs(1, 0)
any(event.cell is Cell.TREASURE for event in events)   # True
```

## Command-line tools

Two commands are installed with the package.

```
algokit-expression "(1+2+1)"
```

checks one expression, given as an argument or as the first word read from
standard input. An expression is valid when its brackets balance, no operator
sits directly before a closing bracket, and its operand characters together
form a non-empty palindrome. It prints `Valid Expression.` or
`Invalid Expression!`, followed directly by `true` or `false` for whether the
whole expression is itself a palindrome.

```
algokit-maze
```

explores the built-in maze from row 1, column 0, first depth-first and then
breadth-first. It prints every cell visited, notes when the exit or the
treasure is reached, and finishes with the number of moves the breadth-first
search queued.
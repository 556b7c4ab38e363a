# dskit

A compact collection of classic data structures and algorithms in plain Python,
with no third-party dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `dskit.linked_list` | `LinkedList` (`append`, `push_front`, `remove`, `extend`, `reverse`, `is_palindrome`) and `merge_lists` |
| `dskit.stack` | `BoundedStack` with `StackOverflow` / `StackUnderflow` |
| `dskit.fixed_queue` | `LinearQueue`, a queue whose slots are not reused, with `QueueFullError` / `QueueEmptyError` |
| `dskit.expression` | `infix_to_postfix`, `evaluate_postfix`, `evaluate_infix`, `precedence`, `ExpressionError` |
| `dskit.hash_table` | `LinearProbingTable` (integer keys, linear probing) with `TableFullError` |
| `dskit.bst` | `BinarySearchTree`, `TreeNode`, the traversal generators `inorder`, `preorder`, `postorder` |
| `dskit.avl` | Self-balancing `AVLTree` with insert, delete, membership, traversals and height |
| `dskit.sorting` | `insertion_sort`, `merge_sort`, `quick_sort`, `heap_sort` (each returns a new list) and `sort_string` |
| `dskit.graph` | `dijkstra`, `tsp_cost`, `bfs`, `dfs`, `prim_mst`, `kruskal_mst`, with `Edge` and `SpanningTree` |
| `dskit.arrays` | `linear_search`, `insert_at`, `delete_at`, `find_duplicates`, `split_even_odd`, `concatenate`, `repeated_frequencies`, `elements_repeated_twice`, `repeated_characters`, `is_alphabetic` |
| `dskit.mathfuncs` | `factorial`, `fibonacci`, `fibonacci_series`, `fibonacci_sum` |

Positions in `dskit.arrays` count from 1. In graph adjacency matrices a zero
entry means "no edge"; `bfs` and `dfs` follow only entries equal to 1, and
`dijkstra` reports unreachable vertices as `math.inf`.

## Installation

```
pip install .
```

## Examples

```python
from dskit.linked_list import LinkedList
from dskit.expression import infix_to_postfix, evaluate_infix
from dskit.avl import AVLTree
from dskit.bst import BinarySearchTree
from dskit.graph import dijkstra, kruskal_mst

items = LinkedList([1, 2, 3, 2, 1])
print(items)                  # 1 -> 2 -> 3 -> 2 -> 1 -> NULL
print(items.is_palindrome())  # True

print(infix_to_postfix("a+b*c"))  # abc*+
print(evaluate_infix("(1+2)*3"))  # 9

tree = AVLTree([30, 20, 40, 10])
print(tree.preorder())  # [30, 20, 10, 40]

bst = BinarySearchTree([20, 8, 22, 4, 12, 10, 14])
print(bst.kth_smallest(3))  # 10

graph = [
    [0, 10, 0, 30, 100],
    [10, 0, 50, 0, 0],
    [0, 50, 0, 20, 10],
    [30, 0, 20, 0, 60],
    [100, 0, 10, 60, 0],
]
print(dijkstra(graph, 0))  # [0, 10, 50, 30, 60]

mst = kruskal_mst(4, [(0, 1, 10), (0, 2, 6), (0, 3, 5), (1, 3, 15), (2, 3, 4)])
print(mst.total_weight)  # 19
```

Operations that cannot succeed raise exceptions: pushing onto a full
`BoundedStack` raises `StackOverflow`, dequeuing from an empty `LinearQueue`
raises `QueueEmptyError`, inserting into a full `LinearProbingTable` raises
`TableFullError`, and `LinkedList.remove` of a missing value raises
`ValueError`.

## Interactive menu

The package installs a `dskit` command that opens a menu-driven session for
one data structure, chosen by name:

```
dskit list
dskit stack
dskit queue
dskit bst
dskit avl
dskit hash
```

Menu choices and values are read from standard input as whitespace-separated
integers, so a session can also be piped in:

```
echo "1 5 1 7 3 4" | dskit list
```

The session ends at the menu's exit choice or at the end of input. The
structures live only for the length of a session; nothing is saved.

## Running the tests

```
pip install ".[test]"
pytest
```
# algokit

Classic algorithms and data structures in plain Python, using only the
standard library.

## Installation

```
pip install .
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.sorting` | `bubble_sort`, `selection_sort`, `merge_sort`, `quick_sort`, `heap_sort`, `radix_sort`, `radix_passes`, `binary_insertion_sort`, `insertion_position` |
| `algokit.searching` | `find_substring`, `last_occurrence` (returns an `Occurrence`), `most_frequent`, `min_max` |
| `algokit.queues` | `CircularQueue`, `ArrayQueue`, `LinkedQueue`, with the `QueueOverflow` and `QueueUnderflow` exceptions |
| `algokit.priority_queues` | `LinkedPriorityQueue` (smallest priority first), `MaxHeapQueue` (largest value first), `ArrayPriorityQueue` (largest priority first) |
| `algokit.bst` | `BinarySearchTree` with `insert`, `delete`, `preorder`, `inorder`, `postorder` and membership tests |
| `algokit.singly` | `SinglyLinkedList` with `search`, in-place `reverse` and `swap_adjacent` |
| `algokit.circular` | `CircularLinkedList` with `append`, `prepend`, `insert_after` (1-based position) and `remove` |
| `algokit.doubly` | `DoublyLinkedList` with insertion and deletion around a given value, `pop_first`, `pop_last` and `position` |
| `algokit.greedy` | `select_activities`, `fractional_knapsack` |
| `algokit.assembly` | `schedule_assembly`, returning an `AssemblySchedule` |
| `algokit.dijkstra` | `adjacency_matrix`, `dijkstra` (one `VertexState` per vertex) |
| `algokit.huffman` | `build_huffman_tree`, `huffman_codes`, `HuffmanNode` |
| `algokit.tictactoe` | `Board`, `GameStatus`, `InvalidMove`, and a two-player terminal game |

## Examples

Every sort takes any iterable and returns a new list, leaving the input alone:

```python
from algokit.sorting import merge_sort, radix_passes

merge_sort([10, 14, 19, 26, 27, 31, 33, 35, 42, 44, 0])
# [0, 10, 14, 19, 26, 27, 31, 33, 35, 42, 44]

for state in radix_passes([170, 45, 75, 90]):
    print(state)   # the list after each decimal-digit pass
```

`radix_sort` and `radix_passes` accept non-negative integers only and raise
`ValueError` otherwise.

Searching:

```python
from algokit.searching import find_substring, last_occurrence, min_max

find_substring("for", "hacktoberfest")   # -1
find_substring("ber", "hacktoberfest")   # 6
min_max([3, 9, 1, 4])                    # (1, 9)
last_occurrence([1, 2, 1, 3], 1)         # Occurrence(last_index=2, count=2, position_from_end=2)
```

Queues raise on misuse instead of printing a message:

```python
from algokit.queues import CircularQueue, QueueUnderflow

queue = CircularQueue(8)
queue.enqueue(1)
queue.enqueue(2)
queue.dequeue()        # 1
list(queue)            # [2]
```

`ArrayQueue` does not reuse the slots it has dequeued: once `capacity` values
have been enqueued in total it raises `QueueOverflow`.

Shortest paths, where a weight of 0 in the matrix means there is no edge:

```python
from algokit.dijkstra import adjacency_matrix, dijkstra

matrix = adjacency_matrix(3, [(0, 1, 4), (1, 2, 1), (0, 2, 7)])
[state.distance for state in dijkstra(matrix, 0)]   # [0, 4, 5]
```

Huffman codes, with `0` for a left branch and `1` for a right one:

```python
from algokit.huffman import huffman_codes

huffman_codes("abcdef", [5, 9, 12, 13, 16, 45])
# {'f': '0', 'c': '100', 'd': '101', 'a': '1100', 'b': '1101', 'e': '111'}
```

## Playing tic-tac-toe

Two players take turns at one terminal:

```
algokit-tictactoe
```

Player 1 plays `X` and player 2 plays `O`. Each enters the number of a free
square from 1 to 9. An occupied or out-of-range square is rejected with
"Invalid move" and the same player moves again. The game ends when a player
completes a line or the board is full; ending input (end of file) quits with
exit status 1.

## What this package does not do

Apart from the tic-tac-toe game, everything here is a library: there are no
interactive menus or commands for the sorts, queues, lists or trees, and
nothing is read from or stored to files. Inputs are passed to the functions
and classes directly.

## Running the tests

```
pip install ".[test]"
pytest
```
# dsakit

A small collection of classic data structures and algorithms in plain Python,
with no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.graph` | `bfs`, `dfs` over an adjacency matrix |
| `dsakit.dynamic` | `longest_common_subsequence`, `matrix_chain_order` |
| `dsakit.searching` | `binary_search`, `linear_search`, `is_sorted` |
| `dsakit.heap` | `MaxHeap`, `HeapNode`, `heapify`, `build_heap`, `heap_sort` |
| `dsakit.circular_queue` | `CircularQueue`, `QueueFullError`, `QueueEmptyError` |
| `dsakit.sorting` | `bubble_sort`, `BubbleSortResult`, `counting_sort`, `insertion_sort`, `merge_sort`, `quick_sort`, `selection_sort` |

## Graph traversal

`bfs(adjacency, root)` and `dfs(adjacency, start)` take a square adjacency
matrix (any non-zero entry is an edge) and return the list of reachable nodes
in visiting order, exploring neighbours in ascending index order. A matrix that
is not square raises `ValueError`; a start node outside the graph raises
`IndexError`.

```python
from dsakit.graph import bfs, dfs

adjacency = [
    [0, 1, 1, 1, 0, 0, 0],
    [1, 0, 0, 1, 0, 0, 0],
    [1, 0, 0, 1, 1, 0, 0],
    [1, 1, 1, 0, 1, 0, 0],
    [0, 0, 1, 1, 0, 1, 1],
    [0, 0, 0, 0, 1, 0, 0],
    [0, 0, 0, 0, 1, 0, 0],
]
print(bfs(adjacency, 2))  # [2, 0, 3, 4, 1, 5, 6]
print(dfs(adjacency, 4))  # [4, 2, 0, 1, 3, 5, 6]
```

## Dynamic programming

`longest_common_subsequence(first, second)` returns a longest common
subsequence: a string when `first` is a string, otherwise a list.
`matrix_chain_order(dimensions)` returns the fewest scalar multiplications
needed to multiply a chain of matrices, where matrix `k` has shape
`dimensions[k-1] x dimensions[k]`; fewer than two dimensions raise
`ValueError`.

```python
from dsakit.dynamic import longest_common_subsequence, matrix_chain_order

print(longest_common_subsequence("ACADB", "CBDA"))
print(matrix_chain_order([1, 2, 3, 4, 5]))  # 38
```

## Searching

`binary_search` looks in an ascending sequence and `linear_search` returns the
first occurrence; both return the index found, or `None`. `is_sorted` tells
whether a sequence is in non-decreasing order.

```python
from dsakit.searching import binary_search, linear_search, is_sorted

print(binary_search([0, 5, 6, 23, 45, 50, 98], 23))  # 3
print(linear_search([50, 0, 23, 6, 45, 98, 5], 23))  # 2
print(binary_search([0, 5, 6], 7))                    # None
print(is_sorted([1, 12, 3, 40]))                      # False
```

## Max-heap

`MaxHeap` supports `push`, `pop`, `peek`, `len()` and iteration over its values
in array order. `pop` and `peek` on an empty heap raise `IndexError`.
`nodes()` yields a `HeapNode` for every slot with its `value`, `parent`, `left`
and `right` (each `None` where absent).

At the array level, `heapify(items, size, position)` sifts one element down
within the first `size` items, `build_heap(items)` rearranges a list into
max-heap order in place, and `heap_sort(items)` returns a new ascending list.

```python
from dsakit.heap import MaxHeap, heap_sort

heap = MaxHeap()
for value in (100, 500, 400, 800, 70, 410):
    heap.push(value)
print(heap.peek())  # 800
print(heap.pop())   # 800
print(len(heap))    # 5
for node in heap.nodes():
    print(node.value, node.parent, node.left, node.right)

print(heap_sort([10, 25, 110, 50, 100]))  # [10, 25, 50, 100, 110]
```

## Circular queue

`CircularQueue(capacity)` is a fixed-size first-in first-out ring. `enqueue`
raises `QueueFullError` when full and `dequeue` raises `QueueEmptyError` when
empty (both are subclasses of `IndexError`). Iteration goes from front to rear;
`slots()` returns the raw ring storage with `None` in vacant slots, and the
`capacity` property gives its size.

```python
from dsakit.circular_queue import CircularQueue, QueueFullError

queue = CircularQueue(5)
for value in (10, 50, 20, 30, 40):
    queue.enqueue(value)
try:
    queue.enqueue(80)
except QueueFullError:
    print(queue.dequeue())  # 10
queue.enqueue(80)
print(list(queue))     # [50, 20, 30, 40, 80]
print(queue.slots())   # [80, 50, 20, 30, 40]
```

## Sorting

Every sorting function takes any iterable and returns a new list, leaving the
input untouched. `bubble_sort` returns a `BubbleSortResult` with the sorted
`items` and the number of `comparisons` made; it stops early once a pass makes
no swap. `counting_sort(items, max_value)` sorts integers in
`0..max_value` and raises `ValueError` for anything outside that range.

```python
from dsakit.sorting import bubble_sort, counting_sort, merge_sort, quick_sort

print(merge_sort([10, 8, 0, 4, 90, 5]))        # [0, 4, 5, 8, 10, 90]
print(quick_sort([100, 2, 3, 4, 5, -200]))     # [-200, 2, 3, 4, 5, 100]
print(counting_sort([10, 6, 0, 98, 4, 6, 0, 10], 98))

result = bubble_sort([1, 2, 3, 4, 5, 6, 7, 8, 9, 10])
print(result.items, result.comparisons)        # already sorted: 9 comparisons
```

## What it does not do

dsakit is a library only: it installs no command-line program, and nothing in
it prints results or reads input. Call its functions from your own code.
"""Breadth-first and depth-first traversal over adjacency matrices."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence

Matrix = Sequence[Sequence[int]]


def _validate(adjacency: Matrix, node: int) -> int:
    size = len(adjacency)
    if any(len(row) != size for row in adjacency):
        raise ValueError("adjacency matrix must be square")
    if not 0 <= node < size:
        raise IndexError(f"node {node} is outside a graph of {size} nodes")
    return size


def _neighbours(adjacency: Matrix, node: int) -> Iterator[int]:
    return (column for column, edge in enumerate(adjacency[node]) if edge)


def bfs(adjacency: Matrix, root: int) -> list[int]:
    """Return the nodes reachable from ``root`` in breadth-first order.

    Neighbours are explored in ascending index order; a node is recorded
    when it is first discovered.
    """
    _validate(adjacency, root)
    order = [root]
    visited = {root}
    pending = deque([root])
    while pending:
        node = pending.popleft()
        for neighbour in _neighbours(adjacency, node):
            if neighbour not in visited:
                visited.add(neighbour)
                order.append(neighbour)
                pending.append(neighbour)
    return order


def dfs(adjacency: Matrix, start: int) -> list[int]:
    """Return the nodes reachable from ``start`` in depth-first preorder.

    Neighbours are explored in ascending index order.
    """
    _validate(adjacency, start)
    order = [start]
    visited = {start}
    stack = [_neighbours(adjacency, start)]
    while stack:
        for neighbour in stack[-1]:
            if neighbour not in visited:
                visited.add(neighbour)
                order.append(neighbour)
                stack.append(_neighbours(adjacency, neighbour))
                break
        else:
            stack.pop()
    return order
"""Dynamic-programming classics: longest common subsequence and matrix chains."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def longest_common_subsequence(first: Sequence[Any], second: Sequence[Any]):
    """Return a longest common subsequence of ``first`` and ``second``.

    The result is a string when ``first`` is a string, otherwise a list.
    When several subsequences share the maximal length, the backtrack
    prefers dropping from ``second`` on ties.
    """
    rows, cols = len(first), len(second)
    table = [[0] * (cols + 1) for _ in range(rows + 1)]
    for i, a in enumerate(first, start=1):
        for j, b in enumerate(second, start=1):
            if a == b:
                table[i][j] = table[i - 1][j - 1] + 1
            else:
                table[i][j] = max(table[i - 1][j], table[i][j - 1])

    picked = []
    i, j = rows, cols
    while i > 0 and j > 0:
        if first[i - 1] == second[j - 1]:
            picked.append(first[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            i -= 1
        else:
            j -= 1
    picked.reverse()
    return "".join(picked) if isinstance(first, str) else picked


def matrix_chain_order(dimensions: Sequence[int]) -> int:
    """Return the fewest scalar multiplications needed to multiply a chain.

    Matrix ``k`` of the chain has shape ``dimensions[k-1] x dimensions[k]``.
    """
    n = len(dimensions)
    if n < 2:
        raise ValueError("at least two dimensions are needed to describe a matrix")
    cost = [[0] * n for _ in range(n)]
    for length in range(2, n):
        for i in range(1, n - length + 1):
            j = i + length - 1
            cost[i][j] = min(
                cost[i][k] + cost[k + 1][j] + dimensions[i - 1] * dimensions[k] * dimensions[j]
                for k in range(i, j)
            )
    return cost[1][n - 1]
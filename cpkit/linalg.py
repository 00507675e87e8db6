"""Gaussian elimination with full pivoting."""

from __future__ import annotations

from collections.abc import Sequence

EPS = 1e-12


class InconsistentSystemError(ValueError):
    """The linear system has no solution."""


def solve_linear(a: Sequence[Sequence[float]], b: Sequence[float]) -> tuple[int, list[float]]:
    """Solve ``a @ x = b`` and return ``(rank, x)``.

    When the rank is below the number of columns the system has many
    solutions and one of them is returned.  Raises
    :class:`InconsistentSystemError` when there is none.  The inputs are
    not modified.
    """
    matrix = [list(map(float, row)) for row in a]
    rhs = list(map(float, b))
    n = len(matrix)
    m = len(matrix[0]) if matrix else 0
    if any(len(row) != m for row in matrix):
        raise ValueError("all rows must have the same length")
    if len(rhs) != n:
        raise ValueError("right-hand side length must match the number of rows")

    col = list(range(m))
    rank = 0
    for i in range(n):
        best, br, bc = 0.0, i, i
        for r in range(i, n):
            for c in range(i, m):
                v = abs(matrix[r][c])
                if v > best:
                    best, br, bc = v, r, c
        if best <= EPS:
            if any(abs(v) > EPS for v in rhs[i:]):
                raise InconsistentSystemError("the system has no solution")
            break
        matrix[i], matrix[br] = matrix[br], matrix[i]
        rhs[i], rhs[br] = rhs[br], rhs[i]
        col[i], col[bc] = col[bc], col[i]
        for row in matrix:
            row[i], row[bc] = row[bc], row[i]
        pivot_row = matrix[i]
        inv = 1 / pivot_row[i]
        for j in range(i + 1, n):
            row = matrix[j]
            fac = row[i] * inv
            rhs[j] -= fac * rhs[i]
            for k in range(i + 1, m):
                row[k] -= fac * pivot_row[k]
        rank += 1

    x = [0.0] * m
    for i in reversed(range(rank)):
        rhs[i] /= matrix[i][i]
        x[col[i]] = rhs[i]
        for j in range(i):
            rhs[j] -= matrix[j][i] * rhs[i]
    return rank, x
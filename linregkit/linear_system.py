"""Square linear systems solved by Gaussian elimination."""

from __future__ import annotations

from .matrix import Matrix, SingularMatrixError
from .vector import Vector


class LinearSystem:
    """The system A x = b for a square matrix A."""

    def __init__(self, a: Matrix, b: Vector) -> None:
        if a.rows != a.cols:
            raise ValueError(f"matrix must be square, got {a.rows}x{a.cols}")
        if a.rows != len(b):
            raise ValueError(
                f"matrix row count {a.rows} does not match vector size {len(b)}"
            )
        self._a = a.copy()
        self._b = b.copy()

    @property
    def size(self) -> int:
        return self._a.rows

    @property
    def matrix(self) -> Matrix:
        return self._a.copy()

    @property
    def rhs(self) -> Vector:
        return self._b.copy()

    def solve(self) -> Vector:
        """Solve by Gaussian elimination with partial pivoting."""
        a = self._a.to_rows()
        b = list(self._b)
        n = len(b)

        for k in range(n):
            pivot = max(range(k, n), key=lambda i: abs(a[i][k]))
            if pivot != k:
                a[k], a[pivot] = a[pivot], a[k]
                b[k], b[pivot] = b[pivot], b[k]

            pivot_row = a[k]
            if pivot_row[k] == 0:
                raise SingularMatrixError("matrix is singular; the system has no unique solution")

            for i in range(k + 1, n):
                row = a[i]
                factor = row[k] / pivot_row[k]
                row[k] = 0.0
                row[k + 1:] = [
                    value - factor * p for value, p in zip(row[k + 1:], pivot_row[k + 1:])
                ]
                b[i] -= factor * b[k]

        x = [0.0] * n
        for i in reversed(range(n)):
            row = a[i]
            total = b[i] - sum(
                (c * v for c, v in zip(row[i + 1:], x[i + 1:])), 0.0
            )
            x[i] = total / row[i]
        return Vector.from_iterable(x)
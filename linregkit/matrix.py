"""Dense real matrix with value semantics."""

from __future__ import annotations

import numbers
import operator
from collections.abc import Iterable, Sequence

from .vector import Vector


class SingularMatrixError(ValueError):
    """Raised when inverting a matrix whose determinant is zero."""


def _determinant(rows: Sequence[Sequence[float]]) -> float:
    """Cofactor expansion along the first row; the empty matrix has determinant 1."""
    n = len(rows)
    if n == 0:
        return 1.0
    if n == 1:
        return rows[0][0]
    if n == 2:
        return rows[0][0] * rows[1][1] - rows[0][1] * rows[1][0]
    total = 0.0
    for p, pivot in enumerate(rows[0]):
        minor = [row[:p] + row[p + 1:] for row in rows[1:]]
        sign = 1.0 if p % 2 == 0 else -1.0
        total += sign * pivot * _determinant(minor)
    return total


def _minor(rows: Sequence[Sequence[float]], skip_row: int, skip_col: int) -> list[list[float]]:
    return [
        list(row[:skip_col]) + list(row[skip_col + 1:])
        for r, row in enumerate(rows)
        if r != skip_row
    ]


class Matrix:
    """A rows x cols matrix of floats, indexed by (row, col) from zero."""

    __slots__ = ("_data",)

    def __init__(self, rows: int, cols: int) -> None:
        rows = operator.index(rows)
        cols = operator.index(cols)
        if rows <= 0 or cols <= 0:
            raise ValueError(f"matrix dimensions must be positive, got {rows}x{cols}")
        self._data: list[list[float]] = [[0.0] * cols for _ in range(rows)]

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[float]]) -> Matrix:
        """Build a matrix from an iterable of equally long rows."""
        data = [[float(v) for v in row] for row in rows]
        if not data or not data[0]:
            raise ValueError("matrix must have at least one row and one column")
        width = len(data[0])
        if any(len(row) != width for row in data):
            raise ValueError("all rows must have the same length")
        matrix = cls(len(data), width)
        matrix._data = data
        return matrix

    @property
    def rows(self) -> int:
        return len(self._data)

    @property
    def cols(self) -> int:
        return len(self._data[0])

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    def _check_key(self, key: tuple[int, int]) -> tuple[int, int]:
        try:
            i, j = key
        except (TypeError, ValueError):
            raise TypeError("matrix index must be a (row, col) pair") from None
        i = operator.index(i)
        j = operator.index(j)
        if not (0 <= i < self.rows and 0 <= j < self.cols):
            raise IndexError(
                f"matrix index ({i}, {j}) out of range for shape {self.rows}x{self.cols}"
            )
        return i, j

    def __getitem__(self, key: tuple[int, int]) -> float:
        i, j = self._check_key(key)
        return self._data[i][j]

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        i, j = self._check_key(key)
        self._data[i][j] = float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def _check_same_shape(self, other: Matrix) -> None:
        if self.shape != other.shape:
            raise ValueError(
                f"matrix shapes differ: {self.rows}x{self.cols} and {other.rows}x{other.cols}"
            )

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        return Matrix.from_rows(
            [a + b for a, b in zip(ra, rb)] for ra, rb in zip(self._data, other._data)
        )

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        return Matrix.from_rows(
            [a - b for a, b in zip(ra, rb)] for ra, rb in zip(self._data, other._data)
        )

    def __mul__(self, other):
        """Product with a matrix, a vector, or a real scalar."""
        if isinstance(other, Matrix):
            if self.cols != other.rows:
                raise ValueError(
                    f"cannot multiply {self.rows}x{self.cols} by {other.rows}x{other.cols}"
                )
            columns = list(zip(*other._data))
            return Matrix.from_rows(
                [sum((a * b for a, b in zip(row, col)), 0.0) for col in columns]
                for row in self._data
            )
        if isinstance(other, Vector):
            if self.cols != len(other):
                raise ValueError(
                    f"cannot multiply {self.rows}x{self.cols} matrix by vector of size {len(other)}"
                )
            values = list(other)
            return Vector.from_iterable(
                sum((a * b for a, b in zip(row, values)), 0.0) for row in self._data
            )
        if isinstance(other, numbers.Real):
            scalar = float(other)
            return Matrix.from_rows([a * scalar for a in row] for row in self._data)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, numbers.Real):
            return self * other
        return NotImplemented

    def copy(self) -> Matrix:
        return Matrix.from_rows(self._data)

    def to_rows(self) -> list[list[float]]:
        """Return the contents as a fresh list of row lists."""
        return [list(row) for row in self._data]

    def transpose(self) -> Matrix:
        return Matrix.from_rows(zip(*self._data))

    def _require_square(self) -> None:
        if self.rows != self.cols:
            raise ValueError(f"matrix must be square, got {self.rows}x{self.cols}")

    def determinant(self) -> float:
        self._require_square()
        return _determinant(self._data)

    def inverse(self) -> Matrix:
        """Inverse by the adjugate method."""
        self._require_square()
        det = _determinant(self._data)
        if det == 0:
            raise SingularMatrixError("matrix is singular and cannot be inverted")
        n = self.rows
        adjugate = [[0.0] * n for _ in range(n)]
        for i in range(n):
            for j in range(n):
                sign = 1.0 if (i + j) % 2 == 0 else -1.0
                adjugate[j][i] = sign * _determinant(_minor(self._data, i, j))
        return Matrix.from_rows([value / det for value in row] for row in adjugate)

    def pseudo_inverse(self) -> Matrix:
        """Left pseudo-inverse (A^T A)^-1 A^T."""
        at = self.transpose()
        return (at * self).inverse() * at

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self._data!r})"
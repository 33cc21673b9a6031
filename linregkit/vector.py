"""Dense real vector with value semantics."""

from __future__ import annotations

import numbers
import operator
from collections.abc import Iterable, Iterator


class Vector:
    """A fixed-length sequence of floats supporting basic linear algebra."""

    __slots__ = ("_data",)

    def __init__(self, size: int = 0) -> None:
        size = operator.index(size)
        if size < 0:
            raise ValueError(f"vector size must be non-negative, got {size}")
        self._data: list[float] = [0.0] * size

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> Vector:
        """Build a vector holding the given values in order."""
        vec = cls()
        vec._data = [float(v) for v in values]
        return vec

    def _check_index(self, index: int) -> int:
        index = operator.index(index)
        if not 0 <= index < len(self._data):
            raise IndexError(
                f"vector index {index} out of range for size {len(self._data)}"
            )
        return index

    def __getitem__(self, index: int) -> float:
        return self._data[self._check_index(index)]

    def __setitem__(self, index: int, value: float) -> None:
        self._data[self._check_index(index)] = float(value)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[float]:
        return iter(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def _check_same_size(self, other: Vector) -> None:
        if len(self) != len(other):
            raise ValueError(
                f"vector sizes differ: {len(self)} and {len(other)}"
            )

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_size(other)
        return Vector.from_iterable(a + b for a, b in zip(self._data, other._data))

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_size(other)
        return Vector.from_iterable(a - b for a, b in zip(self._data, other._data))

    def __mul__(self, other):
        """Dot product with a vector, or scaling by a real number."""
        if isinstance(other, Vector):
            self._check_same_size(other)
            return sum((a * b for a, b in zip(self._data, other._data)), 0.0)
        if isinstance(other, numbers.Real):
            scalar = float(other)
            return Vector.from_iterable(a * scalar for a in self._data)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, numbers.Real):
            scalar = float(other)
            return Vector.from_iterable(scalar * a for a in self._data)
        return NotImplemented

    def resize(self, size: int) -> None:
        """Change the size; unless it is unchanged, contents become zeros."""
        size = operator.index(size)
        if size < 0:
            raise ValueError(f"vector size must be non-negative, got {size}")
        if size == len(self._data):
            return
        self._data = [0.0] * size

    def copy(self) -> Vector:
        return Vector.from_iterable(self._data)

    def __str__(self) -> str:
        return ", ".join(f"{value:g}" for value in self._data)

    def __repr__(self) -> str:
        return f"Vector.from_iterable({self._data!r})"
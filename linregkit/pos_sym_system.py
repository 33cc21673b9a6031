"""Symmetric positive definite systems solved by conjugate gradients."""

from __future__ import annotations

import math

from .linear_system import LinearSystem
from .matrix import Matrix
from .vector import Vector

_SYMMETRY_EPSILON = 1e-8
_TOLERANCE = 1e-10
_MAX_ITERATIONS = 1000


class PosSymLinSystem(LinearSystem):
    """A linear system whose matrix is symmetric positive definite."""

    def __init__(self, a: Matrix, b: Vector) -> None:
        super().__init__(a, b)
        n = self.size
        for i in range(n):
            for j in range(i + 1, n):
                if abs(a[i, j] - a[j, i]) > _SYMMETRY_EPSILON:
                    raise ValueError("Matrix is not symmetric.")

    def solve(self) -> Vector:
        """Solve with the conjugate gradient method starting from zero."""
        a = self._a
        x = Vector(self.size)
        r = self._b - a * x
        p = r.copy()
        rs_old = r * r
        if math.sqrt(rs_old) < _TOLERANCE:
            return x

        for _ in range(_MAX_ITERATIONS):
            ap = a * p
            curvature = p * ap
            if curvature == 0:
                raise ValueError("Matrix is not positive definite.")
            alpha = rs_old / curvature

            x = x + alpha * p
            r = r - alpha * ap

            rs_new = r * r
            if math.sqrt(rs_new) < _TOLERANCE:
                break

            p = r + (rs_new / rs_old) * p
            rs_old = rs_new

        return x
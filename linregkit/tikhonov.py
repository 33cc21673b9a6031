"""Tikhonov-regularised least squares."""

from __future__ import annotations

from .matrix import Matrix
from .vector import Vector


class TikhonovSolver:
    """Solves min |A x - b|^2 + lam^2 |x|^2 through the normal equations."""

    def __init__(self, lam: float) -> None:
        self.lam = float(lam)

    def solve(self, a: Matrix, b: Vector) -> Vector:
        at = a.transpose()
        regularized = at * a
        penalty = self.lam * self.lam
        for i in range(regularized.rows):
            regularized[i, i] += penalty
        return regularized.inverse() * (at * b)

    def __repr__(self) -> str:
        return f"TikhonovSolver(lam={self.lam!r})"
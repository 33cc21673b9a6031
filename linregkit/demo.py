"""Demonstration of the matrix, vector and solver types on random data."""

from __future__ import annotations

import argparse
import random
from typing import NamedTuple

from .linear_system import LinearSystem
from .matrix import Matrix
from .pos_sym_system import PosSymLinSystem
from .tikhonov import TikhonovSolver
from .vector import Vector

_DEMO_LAMBDA = 0.1


class DemoData(NamedTuple):
    a: Matrix
    b_matrix: Matrix
    b: Vector


def format_matrix(matrix: Matrix) -> str:
    """One line per row, entries separated by spaces."""
    return "\n".join(" ".join(f"{value:g}" for value in row) for row in matrix.to_rows())


def format_vector(vector: Vector) -> str:
    return " ".join(f"{value:g}" for value in vector)


def random_test_data(size: int, rng: random.Random) -> DemoData:
    """Random B and b with entries 1..10, and a diagonally dominant A."""
    b_matrix = Matrix(size, size)
    b = Vector(size)
    for i in range(size):
        b[i] = rng.randint(1, 10)
        for j in range(size):
            b_matrix[i, j] = rng.randint(1, 10)

    a = Matrix(size, size)
    for i in range(size):
        row_sum = 0.0
        for j in range(size):
            if i != j:
                a[i, j] = rng.randint(1, 10)
                row_sum += abs(a[i, j])
        a[i, i] = row_sum + rng.randint(1, 10)

    return DemoData(a, b_matrix, b)


def run_demo(size: int, rng: random.Random) -> str:
    """Exercise every operation on random data and return the report text."""
    a, b_matrix, b = random_test_data(size, rng)
    lines = [
        "Matrix A:", format_matrix(a),
        "Matrix B:", format_matrix(b_matrix),
        "Vector b:", format_vector(b),
        "",
        "A + B:", format_matrix(a + b_matrix),
        "A - B:", format_matrix(a - b_matrix),
        "A * B:", format_matrix(a * b_matrix),
        "Transpose of A:", format_matrix(a.transpose()),
        "A * 2:", format_matrix(a * 2.0),
    ]

    det = a.determinant()
    if det != 0:
        lines += [f"Determinant of A: {det:g}", "Inverse of A:", format_matrix(a.inverse())]
    else:
        lines.append("Matrix A is singular, skipping inverse.")

    try:
        x = LinearSystem(a, b).solve()
    except (ValueError, ArithmeticError):
        lines.append("LinearSystem failed.")
    else:
        lines += ["", "Solution of Ax = b using LinearSystem:", format_vector(x)]

    lines += ["", "=== Testing PosSymLinSystem ==="]
    try:
        x_psd = PosSymLinSystem(a, b).solve()
    except (ValueError, ArithmeticError) as exc:
        lines.append(f"PosSymLinSystem failed: {exc}")
    else:
        lines += ["Solution using PosSymLinSystem:", format_vector(x_psd)]

    try:
        x_tikh = TikhonovSolver(_DEMO_LAMBDA).solve(a, b)
    except (ValueError, ArithmeticError):
        lines.append("TikhonovSolver failed.")
    else:
        lines += [
            "",
            f"Solution using Tikhonov Regularization (lambda = {_DEMO_LAMBDA:g}):",
            format_vector(x_tikh),
        ]

    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run the linear algebra demonstration.")
    parser.add_argument("--size", type=int, default=3, help="matrix size (default 3)")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    if args.size < 1:
        parser.error("--size must be at least 1")
    print(run_demo(args.size, random.Random(args.seed)), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
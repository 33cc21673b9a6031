import pytest

from linregkit.linear_system import LinearSystem
from linregkit.matrix import Matrix
from linregkit.pos_sym_system import PosSymLinSystem
from linregkit.vector import Vector


SPD = [[4, 1, 0], [1, 3, 1], [0, 1, 2]]


def test_solution_satisfies_system():
    a = Matrix.from_rows(SPD)
    b = Vector.from_iterable([1, 2, 3])
    x = PosSymLinSystem(a, b).solve()
    assert len(x) == 3
    assert list(a * x) == pytest.approx([1.0, 2.0, 3.0], abs=1e-8)


def test_agrees_with_gaussian_elimination():
    a = Matrix.from_rows(SPD)
    b = Vector.from_iterable([-3, 0.5, 9])
    cg = PosSymLinSystem(a, b).solve()
    gauss = LinearSystem(a, b).solve()
    assert len(cg) == 3
    assert list(cg) == pytest.approx(list(gauss), abs=1e-8)


def test_is_a_linear_system():
    system = PosSymLinSystem(Matrix.from_rows(SPD), Vector(3))
    assert isinstance(system, LinearSystem)
    assert system.size == 3


def test_zero_rhs_gives_zero_solution():
    a = Matrix.from_rows(SPD)
    assert PosSymLinSystem(a, Vector(3)).solve() == Vector(3)


def test_non_symmetric_rejected():
    a = Matrix.from_rows([[4, 1], [2, 3]])
    with pytest.raises(ValueError, match="Matrix is not symmetric."):
        PosSymLinSystem(a, Vector(2))


def test_asymmetry_within_tolerance_accepted():
    a = Matrix.from_rows([[4, 1], [1 + 1e-10, 3]])
    b = Vector.from_iterable([1, 2])
    x = PosSymLinSystem(a, b).solve()
    assert len(x) == 2
    assert list(a * x) == pytest.approx([1.0, 2.0], abs=1e-6)


def test_non_square_rejected():
    a = Matrix.from_rows([[1, 0, 0], [0, 1, 0]])
    with pytest.raises(ValueError):
        PosSymLinSystem(a, Vector(2))


def test_size_mismatch_rejected():
    a = Matrix.from_rows([[2, 0], [0, 2]])
    with pytest.raises(ValueError):
        PosSymLinSystem(a, Vector(3))


def test_diagonal_system():
    a = Matrix.from_rows([[2, 0], [0, 5]])
    b = Vector.from_iterable([4, 10])
    assert list(PosSymLinSystem(a, b).solve()) == pytest.approx([2.0, 2.0], abs=1e-8)
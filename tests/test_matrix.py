import pytest

from linregkit.matrix import Matrix, SingularMatrixError
from linregkit.vector import Vector


def _identity(n):
    ident = Matrix(n, n)
    for i in range(n):
        ident[i, i] = 1.0
    return ident


def _close(a, b, tol=1e-9):
    return a.shape == b.shape and all(
        abs(x - y) <= tol
        for ra, rb in zip(a.to_rows(), b.to_rows())
        for x, y in zip(ra, rb)
    )


A = Matrix.from_rows([[4.0, 1.0, 2.0], [1.0, 5.0, 3.0], [2.0, 3.0, 7.0]])
B = Matrix.from_rows([[1.0, 0.0, 2.0], [-1.0, 3.0, 1.0], [2.0, 1.0, 1.0]])

IDENTITY_3_FLAT = [1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0]


def test_new_matrix_is_zero():
    m = Matrix(2, 3)
    assert m.rows == 2
    assert m.cols == 3
    assert m.to_rows() == [[0.0, 0.0, 0.0], [0.0, 0.0, 0.0]]


@pytest.mark.parametrize("rows,cols", [(0, 1), (1, 0), (-2, 3)])
def test_bad_dimensions(rows, cols):
    with pytest.raises(ValueError):
        Matrix(rows, cols)


def test_from_rows_rejects_ragged_and_empty():
    with pytest.raises(ValueError):
        Matrix.from_rows([[1.0, 2.0], [3.0]])
    with pytest.raises(ValueError):
        Matrix.from_rows([])


def test_from_rows_round_trip():
    rows = [[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]]
    m = Matrix.from_rows(rows)
    assert m.to_rows() == rows
    assert m[2, 1] == 6.0


def test_item_access_and_bounds():
    m = Matrix(2, 2)
    m[1, 0] = 3
    assert m[1, 0] == 3.0
    with pytest.raises(IndexError):
        m[2, 0]
    with pytest.raises(IndexError):
        m[0, -1] = 1.0


def test_add_sub_round_trip():
    assert (A + B) - B == A
    assert A + B == B + A


def test_shape_mismatch():
    with pytest.raises(ValueError):
        A + Matrix(2, 2)
    with pytest.raises(ValueError):
        Matrix(2, 3) * Matrix(2, 3)
    with pytest.raises(ValueError):
        A * Vector(2)


def test_multiply_by_identity():
    assert A * _identity(3) == A
    assert _identity(3) * A == A


def test_matrix_vector_product_with_identity():
    v = Vector.from_iterable([1.0, -2.0, 3.5])
    assert _identity(3) * v == v


def test_scalar_multiplication():
    assert A * 2 == A + A
    assert 2 * A == A * 2


def test_transpose_properties():
    assert A.transpose().transpose() == A
    assert _close((A * B).transpose(), B.transpose() * A.transpose())
    t = Matrix.from_rows([[1.0, 2.0, 3.0]]).transpose()
    assert t.shape == (3, 1)


def test_determinant_pinned_value():
    assert Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]]).determinant() == -2.0


def test_determinant_invariants():
    assert _identity(4).determinant() == 1.0
    assert abs(A.transpose().determinant() - A.determinant()) < 1e-9
    assert abs((A * B).determinant() - A.determinant() * B.determinant()) < 1e-9


def test_determinant_requires_square():
    with pytest.raises(ValueError):
        Matrix(2, 3).determinant()


def test_inverse_gives_identity():
    right = A * A.inverse()
    left = B.inverse() * B
    assert right.shape == (3, 3)
    assert left.shape == (3, 3)
    assert [x for row in right.to_rows() for x in row] == pytest.approx(
        IDENTITY_3_FLAT, abs=1e-9
    )
    assert [x for row in left.to_rows() for x in row] == pytest.approx(
        IDENTITY_3_FLAT, abs=1e-9
    )


def test_inverse_of_one_by_one():
    m = Matrix.from_rows([[4.0]])
    assert m.inverse() == Matrix.from_rows([[0.25]])


def test_singular_inverse_raises():
    singular = Matrix.from_rows([[1.0, 2.0], [2.0, 4.0]])
    with pytest.raises(SingularMatrixError):
        singular.inverse()


def test_pseudo_inverse_of_square_matches_inverse():
    pinv = A.pseudo_inverse()
    inv = A.inverse()
    assert pinv.shape == (3, 3)
    assert [x for row in pinv.to_rows() for x in row] == pytest.approx(
        [x for row in inv.to_rows() for x in row], abs=1e-7
    )


def test_pseudo_inverse_of_tall_matrix_is_left_inverse():
    tall = Matrix.from_rows([[1.0, 0.0], [1.0, 1.0], [1.0, 2.0]])
    pinv = tall.pseudo_inverse()
    assert pinv.shape == (2, 3)
    assert _close(pinv * tall, _identity(2))


def test_copy_is_independent():
    dup = A.copy()
    dup[0, 0] = 100.0
    assert A[0, 0] == 4.0
    assert dup != A
    assert dup[0, 0] == 100.0
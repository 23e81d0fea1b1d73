import numpy as np
import pytest

from densemat.core.errors import DimensionMismatch, InvalidDimension, SizeMismatch
from densemat.core.matrix import Matrix
from densemat.core.typedefs import MatrixXd, MatrixXi, RowVector3d, Vector2d, Vector3d, VectorXcd, VectorXd


def _m(rows, cols, values, cls=Matrix):
    m = cls(rows, cols)
    m << values
    return m


def test_matrix_product_dimensions():
    a = _m(2, 3, [1, 2, 3, 4, 5, 6])
    b = _m(3, 2, [1, 2, 3, 4, 5, 6])
    ab = a * b
    assert ab.shape == (2, 2)
    assert ab.to_numpy().tolist() == [[22, 28], [49, 64]]
    assert (a @ b) == ab
    with pytest.raises(DimensionMismatch):
        a * Matrix(4, 2)
    with pytest.raises(DimensionMismatch):
        a @ Matrix(4, 2)


def test_outer_product_of_vectors():
    u = _m(2, 1, [1, 2])
    w = _m(1, 2, [3, 4])
    assert (u * w).to_numpy().tolist() == [[3, 4], [6, 8]]
    assert (w * u).shape == (1, 1)


def test_noalias_accumulate_matches_temporary():
    a = MatrixXd.random(3, 4, seed=1)
    b = MatrixXd.random(4, 2, seed=2)
    c = MatrixXd.random(3, 2, seed=3)
    expected = c + a * b
    c.noalias().add_product(a, b)
    assert c.is_approx(expected)

    expected = c - a * b
    c.noalias().sub_product(a, b)
    assert c.is_approx(expected)


def test_noalias_assign_resizes():
    a = MatrixXd.random(3, 4, seed=4)
    b = MatrixXd.random(4, 5, seed=5)
    c = MatrixXd()
    c.noalias().assign_product(a, b)
    assert c.shape == (3, 5)
    assert c.is_approx(a * b)


def test_noalias_shape_checks():
    c = MatrixXd(2, 2)
    with pytest.raises(DimensionMismatch):
        c.noalias().add_product(Matrix(3, 3), Matrix(3, 3))
    with pytest.raises(DimensionMismatch):
        c.noalias().add_product(Matrix(2, 3), Matrix(4, 2))


def test_noalias_keeps_destination_scalar_type():
    a = MatrixXd.random(2, 2, seed=6)
    c = MatrixXi(2, 2)
    with pytest.raises(TypeError):
        c.noalias().add_product(a, a)
    with pytest.raises(TypeError):
        c.noalias().assign_product(a, MatrixXd.random(2, 3, seed=7))
    assert c.shape == (2, 2)
    assert c.to_numpy().tolist() == [[0, 0], [0, 0]]

    ints = _m(2, 2, [1, 2, 3, 4], cls=MatrixXi)
    c.noalias().add_product(ints, ints)
    assert c.to_numpy().tolist() == [[7, 10], [15, 22]]


def test_dot_product():
    v = _m(3, 1, [1, 2, 3], cls=Vector3d)
    w = _m(3, 1, [0, 1, 2], cls=Vector3d)
    assert v.dot(w) == 8
    assert v.dot(w) == w.dot(v)
    assert v.dot(w) == (v.adjoint() * w)[0, 0]
    # orientation does not matter
    r = _m(1, 3, [0, 1, 2], cls=RowVector3d)
    assert v.dot(r) == 8


@pytest.mark.parametrize("n", [2, 3, 7])
def test_dot_symmetric_any_length(n):
    v = VectorXd.random(n, seed=n)
    w = VectorXd.random(n, seed=n + 100)
    assert np.isclose(v.dot(w), w.dot(v))


def test_dot_complex_is_conjugate_linear_in_first_argument():
    v = VectorXcd(1)
    v[0] = 1j
    w = VectorXcd(1)
    w[0] = 1
    assert v.dot(w) == -1j


def test_dot_size_mismatch():
    with pytest.raises(SizeMismatch):
        VectorXd(3).dot(VectorXd(4))
    with pytest.raises(InvalidDimension):
        Matrix(2, 2).dot(Matrix(2, 2))


def test_cross_product():
    v = _m(3, 1, [1, 2, 3], cls=Vector3d)
    w = _m(3, 1, [0, 1, 2], cls=Vector3d)
    c = v.cross(w)
    assert c.shape == (3, 1)
    assert c.to_numpy().ravel().tolist() == [1, -2, 1]
    assert c == -w.cross(v)
    assert np.isclose(v.dot(c), 0.0)


def test_cross_random_is_orthogonal():
    v = Vector3d.random(seed=10)
    w = Vector3d.random(seed=11)
    c = v.cross(w)
    assert c.is_approx(-(w.cross(v)))
    assert abs(v.dot(c)) < 1e-12
    assert abs(w.dot(c)) < 1e-12


def test_cross_requires_three_elements():
    with pytest.raises(InvalidDimension):
        Vector2d().cross(Vector2d())
    with pytest.raises(InvalidDimension):
        VectorXd(4).cross(VectorXd(4))
    with pytest.raises(InvalidDimension):
        Vector3d().cross(VectorXd(2))

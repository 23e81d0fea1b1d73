import numpy as np
import pytest

from densemat.core.errors import InvalidDimension, OutOfBounds, SizeMismatch
from densemat.core.formatting import get_precision, print_precision, set_precision
from densemat.core.matrix import DYNAMIC, Matrix, StorageOrder
from densemat.core.typedefs import (
    Matrix2d,
    Matrix4d,
    MatrixXd,
    MatrixXi,
    MatrixXcd,
    RowVectorXd,
    Vector3d,
    VectorXd,
    matrix_type,
)


def _m(rows, cols, values, cls=Matrix, **kwargs):
    m = cls(rows, cols, **kwargs)
    m << values
    return m


# --------------------------------------------------------------------------- #
#  Construction                                                               #
# --------------------------------------------------------------------------- #
def test_construct_zero_filled():
    m = Matrix(2, 3)
    assert m.shape == (2, 3)
    assert m.size == 6
    assert np.array_equal(m.to_numpy(), np.zeros((2, 3)))


def test_construct_with_fill_value():
    m = Matrix(3, 2, fill=5.2)
    assert np.allclose(m.to_numpy(), 5.2)
    assert MatrixXd.constant(3, 3, 5.2) == Matrix(3, 3, fill=5.2)


def test_negative_dimensions_rejected():
    with pytest.raises(InvalidDimension):
        Matrix(-1, 2)
    with pytest.raises(InvalidDimension):
        Matrix(2, -3)


def test_single_length_only_for_vectors():
    assert VectorXd(3).shape == (3, 1)
    assert RowVectorXd(3).shape == (1, 3)
    with pytest.raises(InvalidDimension):
        Matrix(3)


def test_random_in_range_and_reproducible():
    a = MatrixXd.random(20, 20, seed=7)
    b = MatrixXd.random(20, 20, seed=7)
    assert a == b
    data = a.to_numpy()
    assert data.min() >= -1.0 and data.max() <= 1.0

    ints = MatrixXi.random(10, 10, seed=1).to_numpy()
    assert ints.dtype == np.int32
    assert set(np.unique(ints)) <= {-1, 0, 1}

    c = MatrixXcd.random(4, 4, seed=2).to_numpy()
    assert np.all(np.abs(c.real) <= 1.0) and np.all(np.abs(c.imag) <= 1.0)


def test_identity_and_ones():
    assert Matrix.identity(3) == Matrix.from_rows([[1, 0, 0], [0, 1, 0], [0, 0, 1]])
    assert Matrix.ones(2, 2).sum() == 4.0


def test_from_rows():
    m = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
    assert m.shape == (2, 3)
    assert m[1, 2] == 6
    assert VectorXd.from_rows([1, 2, 3]).shape == (3, 1)
    assert RowVectorXd.from_rows([1, 2, 3]).shape == (1, 3)


# --------------------------------------------------------------------------- #
#  Element access & comma-list assignment                                     #
# --------------------------------------------------------------------------- #
def test_element_access_and_mutation():
    m = Matrix(2, 2)
    m[0, 0] = 1
    m[0, 1] = 2
    m[1, 0] = 3
    m[1, 1] = m[1, 0] + m[0, 0]
    assert m.to_numpy().tolist() == [[1.0, 2.0], [3.0, 4.0]]


def test_element_access_out_of_bounds():
    m = Matrix(2, 2)
    with pytest.raises(OutOfBounds):
        m[2, 0]
    with pytest.raises(OutOfBounds):
        m[0, 2] = 1.0
    with pytest.raises(OutOfBounds):
        m[-1, 0]
    with pytest.raises(IndexError):
        m[5, 5]


def test_linear_index_on_vectors_only():
    v = _m(3, 1, [1, 2, 3.5])
    assert v[2] == 3.5
    v[0] = 9
    assert v[0, 0] == 9
    with pytest.raises(InvalidDimension):
        Matrix(2, 2)[0]
    with pytest.raises(OutOfBounds):
        v[3]


@pytest.mark.parametrize("order", [StorageOrder.ColMajor, StorageOrder.RowMajor])
def test_comma_list_is_row_major_for_any_storage(order):
    m = _m(2, 3, [1, 2, 3, 4, 5, 6], order=order)
    assert m.order is order
    assert m[0, 1] == 2
    assert m[1, 0] == 4
    assert m.to_numpy().tolist() == [[1, 2, 3], [4, 5, 6]]


def test_comma_list_length_mismatch():
    m = Matrix(2, 2)
    with pytest.raises(SizeMismatch):
        m << [1, 2, 3]
    with pytest.raises(SizeMismatch):
        m.set_values([1, 2, 3, 4, 5])


def test_comma_list_ragged_rows():
    m = Matrix(2, 2)
    with pytest.raises(SizeMismatch):
        m << [[1, 2], [3]]
    assert m.to_numpy().tolist() == [[0, 0], [0, 0]]
    m << [[1, 2], [3, 4]]
    assert m.to_numpy().tolist() == [[1, 2], [3, 4]]


# --------------------------------------------------------------------------- #
#  Resizing & assignment                                                      #
# --------------------------------------------------------------------------- #
def test_resize_changes_extents():
    m = Matrix(2, 3)
    m.resize(3, 5)
    assert (m.rows, m.cols, m.size) == (3, 5, 15)


def test_resize_same_shape_keeps_values():
    m = _m(2, 2, [1, 2, 3, 4])
    m.resize(2, 2)
    assert m.to_numpy().tolist() == [[1, 2], [3, 4]]


def test_conservative_resize_keeps_overlap():
    m = _m(2, 3, [1, 2, 3, 4, 5, 6])
    m.conservative_resize(3, 2)
    assert m.shape == (3, 2)
    assert m[0, 0] == 1 and m[0, 1] == 2
    assert m[1, 0] == 4 and m[1, 1] == 5


@pytest.mark.parametrize("order", ["F", "C"])
def test_conservative_resize_grow_and_shrink(order):
    m = _m(2, 2, [1, 2, 3, 4], order=order)
    m.conservative_resize(5, 4)
    assert m.shape == (5, 4)
    assert m.to_numpy()[:2, :2].tolist() == [[1, 2], [3, 4]]
    m.conservative_resize(1, 1)
    assert m.to_numpy().tolist() == [[1]]


def test_assign_resizes_destination():
    a = Matrix(2, 3)
    b = Matrix(10, 15, fill=2.0)
    a.assign(b)
    assert a.shape == (10, 15)
    assert a == b
    # value semantics: later writes to b are not seen by a
    b[0, 0] = -1.0
    assert a[0, 0] == 2.0


def test_assign_self_is_safe():
    a = _m(2, 2, [1, 2, 3, 4])
    a.assign(a)
    assert a.to_numpy().tolist() == [[1, 2], [3, 4]]


def test_copy_is_independent():
    a = _m(2, 2, [1, 2, 3, 4])
    b = a.copy()
    b[0, 0] = 100
    assert a[0, 0] == 1
    assert type(b) is type(a)


# --------------------------------------------------------------------------- #
#  Typed classes                                                              #
# --------------------------------------------------------------------------- #
def test_fixed_size_defaults():
    assert Matrix4d().shape == (4, 4)
    assert Vector3d().shape == (3, 1)
    assert Matrix4d.random(seed=0).shape == (4, 4)
    assert Matrix2d.constant(1.5) == Matrix(2, 2, fill=1.5)


def test_fixed_extent_cannot_change():
    Matrix3xXd = matrix_type(np.float64, 3, DYNAMIC)
    assert Matrix3xXd(3, 5).shape == (3, 5)
    with pytest.raises(InvalidDimension):
        Matrix3xXd(1, 5)
    with pytest.raises(InvalidDimension):
        Vector3d(4)
    with pytest.raises(InvalidDimension):
        Matrix2d().resize(3, 3)
    with pytest.raises(InvalidDimension):
        Matrix2d().assign(Matrix(3, 3))


def test_dynamic_vector_resize():
    v = VectorXd(3)
    v.resize(5)
    assert v.shape == (5, 1)


def test_matrix_type_is_cached():
    assert matrix_type("float64", 3, 3) is matrix_type(np.float64, 3, 3)
    assert matrix_type(np.float64) is MatrixXd
    RowMajor = matrix_type(np.float64, order=StorageOrder.RowMajor)
    assert RowMajor(2, 2).order is StorageOrder.RowMajor


def test_result_class_falls_back_when_extents_change():
    a = _m(2, 2, [1, 2, 3, 4], cls=Matrix2d)
    assert type(a + a) is Matrix2d
    v = _m(2, 1, [1, 1], cls=Matrix)
    assert type(a * v) is Matrix
    assert type(MatrixXi(2, 2) * 0.5) is Matrix


# --------------------------------------------------------------------------- #
#  Comparison & display                                                       #
# --------------------------------------------------------------------------- #
def test_equality_and_approx():
    a = _m(2, 2, [1, 2, 3, 4])
    b = _m(2, 2, [1, 2, 3, 4 + 1e-12])
    assert a != b
    assert a.is_approx(b)
    assert a != Matrix(4, 1)
    assert not a.is_approx(Matrix(4, 1))


def test_str_has_one_line_per_row():
    m = _m(3, 2, [1, 2, 3, 4, 5, 6])
    assert len(str(m).splitlines()) == 3
    assert str(Matrix(0, 0)) == ""
    assert "rows=3" in repr(m)


def test_row_col_diagonal():
    m = _m(2, 3, [1, 2, 3, 4, 5, 6])
    assert m.row(1).to_numpy().tolist() == [[4, 5, 6]]
    assert m.col(2).to_numpy().tolist() == [[3], [6]]
    assert m.diagonal().to_numpy().tolist() == [[1], [5]]
    with pytest.raises(OutOfBounds):
        m.row(2)


def test_print_precision_is_scoped():
    m = Matrix(1, 1, fill=1.23456)
    assert get_precision() == 4
    assert "1.2346" in str(m)
    with print_precision(2):
        assert get_precision() == 2
        assert "1.23" in str(m)
        assert "1.2346" not in str(m)
    assert get_precision() == 4
    assert "1.2346" in str(m)
    with pytest.raises(ValueError):
        set_precision(-1)
    assert get_precision() == 4


def test_shape_predicates():
    assert Vector3d().is_vector
    assert RowVectorXd(4).is_vector
    assert not Matrix(2, 3).is_vector
    assert Matrix(3, 3).is_square
    assert not Matrix(2, 3).is_square
    assert Matrix(0, 0).is_square


def test_numpy_and_pandas_views_are_copies():
    m = _m(2, 3, [1, 2, 3, 4, 5, 6])
    frame = m.to_frame()
    assert frame.shape == (2, 3)
    assert frame.iloc[1, 2] == 6

    arr = np.asarray(m)
    assert arr.shape == (2, 3)
    arr[0, 0] = 100
    assert m[0, 0] == 1
    assert np.asarray(m, dtype=np.int64).dtype == np.int64

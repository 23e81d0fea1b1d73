# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the densemat project.
# Licensed under the MIT License – see LICENSE in the repo root.
# src/densemat/core/matrix.py
"""
Dense matrix value type.

A ``Matrix`` owns a 2-D numpy buffer of ``rows * cols`` coefficients of one
scalar type, stored column-major (default) or row-major. Vectors are
matrices with one column (column vectors) or one row (row vectors).

Aliasing policy
---------------
Matrices have value semantics: every operation that returns a matrix
returns a fresh buffer, and no two ``Matrix`` objects ever share storage.
In-place writers (``assign``, ``+=``, ``-=``, ``*=`` with a matrix,
``transpose_in_place``) check whether the source shares memory with the
destination and, if so, read it through a temporary copy. ``noalias()`` is
the caller-asserted fast path: a product is written straight into the
destination buffer with no overlap check.
"""
from __future__ import annotations

import enum
import logging
import operator
from typing import Iterable

import numpy as np
import pandas as pd

from densemat.core.errors import InvalidDimension, OutOfBounds, SizeMismatch
from densemat.core.formatting import format_array
from densemat.methods import arithmetic, products, reductions

__all__ = ["DYNAMIC", "StorageOrder", "Matrix", "NoAlias"]

logger = logging.getLogger(__name__)

# Marker for an extent that is chosen at construction time.
DYNAMIC = -1


class StorageOrder(str, enum.Enum):
    ColMajor = "F"
    RowMajor = "C"


class Matrix:
    """
    Dense, dynamically sized matrix.

    Parameters
    ----------
    rows, cols : int, optional
        Extents. Both omitted gives a 0x0 matrix (or the fixed extents of a
        typed class). A single argument is accepted for vector types only.
    fill : scalar, optional
        Value for every coefficient; the buffer is zero-filled otherwise.
    dtype : numpy dtype, optional
        Scalar type, float64 unless the class fixes another one.
    order : StorageOrder or "F"/"C", optional
        Storage order of the buffer, column-major unless the class says otherwise.
    """

    # Class-level traits; ``densemat.core.typedefs.matrix_type`` overrides them.
    _dtype = np.dtype(np.float64)
    _fixed_rows = DYNAMIC
    _fixed_cols = DYNAMIC
    _default_order = StorageOrder.ColMajor
    _typed = False

    # Make numpy defer to our reflected operators (``2.0 * m``).
    __array_ufunc__ = None

    def __init__(self, rows=None, cols=None, fill=None, *, dtype=None, order=None):
        rows, cols = self._resolve_extents(rows, cols)
        self._order = StorageOrder(order) if order is not None else self._default_order
        self._data = np.zeros(
            (rows, cols),
            dtype=np.dtype(dtype) if dtype is not None else self._dtype,
            order=self._order.value,
        )
        if fill is not None:
            self._data[...] = fill

    # ------------------------------------------------------------------ #
    #  Extents                                                           #
    # ------------------------------------------------------------------ #
    @classmethod
    def _resolve_extents(cls, rows, cols) -> tuple[int, int]:
        fixed_rows, fixed_cols = cls._fixed_rows, cls._fixed_cols
        if rows is None and cols is None:
            rows = fixed_rows if fixed_rows != DYNAMIC else 0
            cols = fixed_cols if fixed_cols != DYNAMIC else 0
        elif rows is None:
            raise InvalidDimension(f"{cls.__name__}: cols given without rows")
        elif cols is None:
            # A single length is only meaningful for vector types.
            if fixed_cols == 1:
                cols = 1
            elif fixed_rows == 1:
                rows, cols = 1, rows
            else:
                raise InvalidDimension(
                    f"{cls.__name__} needs rows and cols; a single length is only valid for vector types"
                )

        rows, cols = operator.index(rows), operator.index(cols)
        if rows < 0 or cols < 0:
            raise InvalidDimension(f"negative dimensions {rows}x{cols}")
        if fixed_rows != DYNAMIC and rows != fixed_rows:
            raise InvalidDimension(f"{cls.__name__} has {fixed_rows} rows, got {rows}")
        if fixed_cols != DYNAMIC and cols != fixed_cols:
            raise InvalidDimension(f"{cls.__name__} has {fixed_cols} cols, got {cols}")
        return rows, cols

    @classmethod
    def _accepts(cls, shape: tuple[int, int], dtype: np.dtype) -> bool:
        return (
            (cls._fixed_rows == DYNAMIC or cls._fixed_rows == shape[0])
            and (cls._fixed_cols == DYNAMIC or cls._fixed_cols == shape[1])
            and (not cls._typed or dtype == cls._dtype)
        )

    def _wrap(self, data: np.ndarray, keep_class: bool = True) -> "Matrix":
        """Copy ``data`` into a new matrix with this matrix's storage order.

        The result keeps this matrix's class when its fixed extents and
        dtype still fit, and falls back to plain ``Matrix`` otherwise.
        """
        data = np.asarray(data)
        cls = type(self) if keep_class and type(self)._accepts(data.shape, data.dtype) else Matrix
        out = cls.__new__(cls)
        out._order = self._order
        out._data = np.array(data, order=self._order.value, copy=True)
        return out

    # ------------------------------------------------------------------ #
    #  Factories                                                         #
    # ------------------------------------------------------------------ #
    @classmethod
    def zeros(cls, rows=None, cols=None, *, dtype=None, order=None) -> "Matrix":
        return cls(rows, cols, dtype=dtype, order=order)

    @classmethod
    def ones(cls, rows=None, cols=None, *, dtype=None, order=None) -> "Matrix":
        return cls(rows, cols, fill=1, dtype=dtype, order=order)

    @classmethod
    def constant(cls, *args, dtype=None, order=None) -> "Matrix":
        """
        Matrix with every coefficient set to a value.

        ``constant(rows, cols, value)``, ``constant(n, value)`` for vector
        types, or ``constant(value)`` for fixed-size types.
        """
        if not 1 <= len(args) <= 3:
            raise TypeError(f"constant() takes 1 to 3 positional arguments, got {len(args)}")
        *extents, value = args
        return cls(*extents, fill=value, dtype=dtype, order=order)

    @classmethod
    def identity(cls, rows=None, cols=None, *, dtype=None, order=None) -> "Matrix":
        if rows is not None and cols is None:
            cols = rows
        m = cls(rows, cols, dtype=dtype, order=order)
        np.fill_diagonal(m._data, 1)
        return m

    @classmethod
    def random(cls, rows=None, cols=None, *, seed=None, dtype=None, order=None) -> "Matrix":
        """
        Matrix of independent uniform draws in [-1, 1].

        Complex types draw real and imaginary parts independently; integer
        types draw from {-1, 0, 1}. ``seed`` may be an int or a
        ``numpy.random.Generator``.
        """
        m = cls(rows, cols, dtype=dtype, order=order)
        rng = np.random.default_rng(seed)
        shape = m._data.shape
        if np.issubdtype(m.dtype, np.integer):
            m._data[...] = rng.integers(-1, 1, size=shape, endpoint=True)
        elif np.issubdtype(m.dtype, np.complexfloating):
            m._data[...] = rng.uniform(-1.0, 1.0, size=shape) + 1j * rng.uniform(-1.0, 1.0, size=shape)
        else:
            m._data[...] = rng.uniform(-1.0, 1.0, size=shape)
        return m

    @classmethod
    def from_rows(cls, values, *, dtype=None, order=None) -> "Matrix":
        """
        Build a matrix from nested row lists (or a 2-D array).

        A flat sequence gives a column vector, or a row vector for row-vector types.
        """
        data = np.asarray(values, dtype=dtype if dtype is not None else (cls._dtype if cls._typed else None))
        if data.ndim == 1:
            data = data.reshape(1, -1) if cls._fixed_rows == 1 else data.reshape(-1, 1)
        elif data.ndim != 2:
            raise InvalidDimension(f"expected 1-D or 2-D values, got {data.ndim}-D")
        m = cls(*data.shape, dtype=data.dtype, order=order)
        m._data[...] = data
        return m

    # ------------------------------------------------------------------ #
    #  Properties                                                        #
    # ------------------------------------------------------------------ #
    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def size(self) -> int:
        return self._data.size

    @property
    def shape(self) -> tuple[int, int]:
        return self._data.shape

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def order(self) -> StorageOrder:
        return self._order

    @property
    def is_vector(self) -> bool:
        return products.is_vector(self._data)

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    # ------------------------------------------------------------------ #
    #  Element access                                                    #
    # ------------------------------------------------------------------ #
    def _position(self, index) -> tuple[int, int]:
        if isinstance(index, tuple):
            if len(index) != 2:
                raise TypeError(f"expected (row, col), got {len(index)} indices")
            r, c = operator.index(index[0]), operator.index(index[1])
        else:
            i = operator.index(index)
            if self.cols == 1:
                r, c = i, 0
            elif self.rows == 1:
                r, c = 0, i
            else:
                raise InvalidDimension(
                    f"linear indexing needs a vector, this matrix is {self.rows}x{self.cols}"
                )
        if not (0 <= r < self.rows and 0 <= c < self.cols):
            raise OutOfBounds(f"index ({r}, {c}) out of range for {self.rows}x{self.cols} matrix")
        return r, c

    def __getitem__(self, index):
        return self._data[self._position(index)].item()

    def __setitem__(self, index, value) -> None:
        self._data[self._position(index)] = value

    def set_values(self, values: Iterable) -> "Matrix":
        """
        Comma-list assignment: fill the matrix from a flat sequence read in
        row-major order, whatever the storage order.
        """
        if isinstance(values, Matrix):
            values = values._data
        try:
            flat = np.ravel(values if isinstance(values, np.ndarray) else np.asarray(list(values)))
        except ValueError as exc:
            raise SizeMismatch(f"values do not form a flat or rectangular sequence: {exc}") from exc
        if flat.size != self.size:
            raise SizeMismatch(
                f"{flat.size} values given for a {self.rows}x{self.cols} matrix ({self.size} coefficients)"
            )
        self._data[...] = flat.reshape(self.rows, self.cols)
        return self

    def __lshift__(self, values) -> "Matrix":
        return self.set_values(values)

    def row(self, i: int) -> "Matrix":
        if not 0 <= i < self.rows:
            raise OutOfBounds(f"row {i} out of range for {self.rows} rows")
        return self._wrap(self._data[i : i + 1, :], keep_class=False)

    def col(self, j: int) -> "Matrix":
        if not 0 <= j < self.cols:
            raise OutOfBounds(f"col {j} out of range for {self.cols} cols")
        return self._wrap(self._data[:, j : j + 1], keep_class=False)

    def diagonal(self) -> "Matrix":
        return self._wrap(np.diagonal(self._data).reshape(-1, 1), keep_class=False)

    # ------------------------------------------------------------------ #
    #  Resizing & assignment                                             #
    # ------------------------------------------------------------------ #
    def resize(self, rows, cols=None) -> "Matrix":
        """
        Change the extents. Contents are discarded unless the shape is
        unchanged; the new buffer is zero-filled.
        """
        rows, cols = self._resolve_extents(rows, cols)
        if (rows, cols) != self.shape:
            logger.debug("resize %dx%d -> %dx%d (contents discarded)", *self.shape, rows, cols)
            self._data = np.zeros((rows, cols), dtype=self.dtype, order=self._order.value)
        return self

    def conservative_resize(self, rows, cols=None) -> "Matrix":
        """Change the extents, keeping coefficients in the overlap of old and new extents."""
        rows, cols = self._resolve_extents(rows, cols)
        if (rows, cols) != self.shape:
            logger.debug("conservative_resize %dx%d -> %dx%d", *self.shape, rows, cols)
            keep_r, keep_c = min(rows, self.rows), min(cols, self.cols)
            data = np.zeros((rows, cols), dtype=self.dtype, order=self._order.value)
            data[:keep_r, :keep_c] = self._data[:keep_r, :keep_c]
            self._data = data
        return self

    def assign(self, other) -> "Matrix":
        """``self = other``: resize to other's shape and copy its coefficients."""
        src = other._data if isinstance(other, Matrix) else np.atleast_2d(np.asarray(other))
        rows, cols = self._resolve_extents(*src.shape)
        if (rows, cols) != self.shape:
            self.resize(rows, cols)
        self._data[...] = arithmetic.read_operand(self._data, src)
        return self

    def copy(self) -> "Matrix":
        return self._wrap(self._data)

    def __copy__(self) -> "Matrix":
        return self.copy()

    def __deepcopy__(self, memo) -> "Matrix":
        return self.copy()

    # ------------------------------------------------------------------ #
    #  Arithmetic                                                        #
    # ------------------------------------------------------------------ #
    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._wrap(arithmetic.add(self._data, other._data))

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._wrap(arithmetic.subtract(self._data, other._data))

    def __iadd__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        arithmetic.check_same_shape(self._data, other._data, "add")
        arithmetic.check_storable(self._data, np.result_type(self._data, other._data), "add")
        np.add(self._data, arithmetic.read_operand(self._data, other._data), out=self._data)
        return self

    def __isub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        arithmetic.check_same_shape(self._data, other._data, "subtract")
        arithmetic.check_storable(self._data, np.result_type(self._data, other._data), "subtract")
        np.subtract(self._data, arithmetic.read_operand(self._data, other._data), out=self._data)
        return self

    def __neg__(self):
        return self._wrap(arithmetic.negate(self._data))

    def __pos__(self):
        return self.copy()

    def __mul__(self, other):
        if isinstance(other, Matrix):
            return self._wrap(products.matmul(self._data, other._data))
        if arithmetic.is_scalar(other):
            return self._wrap(arithmetic.scale(self._data, other))
        return NotImplemented

    def __rmul__(self, other):
        if arithmetic.is_scalar(other):
            return self._wrap(arithmetic.scale(self._data, other))
        return NotImplemented

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._wrap(products.matmul(self._data, other._data))

    def __imul__(self, other):
        if isinstance(other, Matrix):
            # Reads self while writing it: evaluate into a temporary, then assign.
            product = products.matmul(self._data, other._data)
            arithmetic.check_storable(self._data, product.dtype, "multiply")
            return self.assign(product)
        if arithmetic.is_scalar(other):
            scaled = arithmetic.scale(self._data, other)
            arithmetic.check_storable(self._data, scaled.dtype, "multiply")
            self._data[...] = scaled
            return self
        return NotImplemented

    def __truediv__(self, other):
        if not arithmetic.is_scalar(other):
            return NotImplemented
        return self._wrap(arithmetic.divide(self._data, other))

    def __itruediv__(self, other):
        if not arithmetic.is_scalar(other):
            return NotImplemented
        quotient = arithmetic.divide(self._data, other)
        arithmetic.check_storable(self._data, quotient.dtype, "divide")
        self._data[...] = quotient
        return self

    def noalias(self) -> "NoAlias":
        """Caller-asserted promise that this matrix shares no storage with product operands."""
        return NoAlias(self)

    # ------------------------------------------------------------------ #
    #  Transposition & conjugation                                       #
    # ------------------------------------------------------------------ #
    def transpose(self) -> "Matrix":
        return self._wrap(self._data.T)

    def transpose_in_place(self) -> "Matrix":
        """Transpose this matrix, rewriting its buffer (rows and cols swap)."""
        rows, cols = self._resolve_extents(self.cols, self.rows)
        logger.debug("transpose_in_place: rewriting %dx%d buffer as %dx%d", self.cols, self.rows, rows, cols)
        self._data = np.array(self._data.T, order=self._order.value, copy=True)
        return self

    def conjugate(self) -> "Matrix":
        return self._wrap(np.conjugate(self._data))

    def adjoint(self) -> "Matrix":
        return self._wrap(np.conjugate(self._data).T)

    def adjoint_in_place(self) -> "Matrix":
        self.transpose_in_place()
        if np.iscomplexobj(self._data):
            np.conjugate(self._data, out=self._data)
        return self

    # ------------------------------------------------------------------ #
    #  Vector products                                                   #
    # ------------------------------------------------------------------ #
    def dot(self, other: "Matrix"):
        return products.dot(self._data, other._data)

    def cross(self, other: "Matrix") -> "Matrix":
        return self._wrap(products.cross(self._data, other._data))

    # ------------------------------------------------------------------ #
    #  Reductions                                                        #
    # ------------------------------------------------------------------ #
    def sum(self):
        return reductions.coeff_sum(self._data)

    def prod(self):
        return reductions.coeff_prod(self._data)

    def mean(self):
        return reductions.coeff_mean(self._data)

    def min_coeff(self, return_index: bool = False):
        """Smallest coefficient; with ``return_index`` also its (row, col)."""
        value, pos = reductions.min_coeff(self._data, self._order.value)
        return (value, pos) if return_index else value

    def max_coeff(self, return_index: bool = False):
        """Largest coefficient; with ``return_index`` also its (row, col)."""
        value, pos = reductions.max_coeff(self._data, self._order.value)
        return (value, pos) if return_index else value

    def trace(self):
        return reductions.trace(self._data)

    # ------------------------------------------------------------------ #
    #  Comparison, conversion & display                                  #
    # ------------------------------------------------------------------ #
    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None

    def is_approx(self, other: "Matrix", rtol: float = 1e-5, atol: float = 1e-8) -> bool:
        return self.shape == other.shape and bool(np.allclose(self._data, other._data, rtol=rtol, atol=atol))

    def to_numpy(self) -> np.ndarray:
        return self._data.copy()

    def __array__(self, dtype=None, copy=None):
        return np.array(self._data, dtype=dtype, copy=True)

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(self.to_numpy())

    def __str__(self) -> str:
        return format_array(self._data)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(rows={self.rows}, cols={self.cols}, "
            f"dtype={self.dtype}, order={self._order.name})"
        )


class NoAlias:
    """
    Destination wrapper returned by ``Matrix.noalias()``.

    Products are evaluated straight into the destination buffer. The caller
    asserts that the destination shares no storage with either operand; no
    check is made.
    """

    def __init__(self, dest: Matrix):
        self._dest = dest

    def assign_product(self, a: Matrix, b: Matrix) -> Matrix:
        dest = self._dest
        arithmetic.check_storable(dest._data, np.result_type(a._data, b._data), "noalias assign")
        dest.resize(a.rows, b.cols)
        products.matmul_into(dest._data, a._data, b._data, mode="assign")
        return dest

    def add_product(self, a: Matrix, b: Matrix) -> Matrix:
        products.matmul_into(self._dest._data, a._data, b._data, mode="add")
        return self._dest

    def sub_product(self, a: Matrix, b: Matrix) -> Matrix:
        products.matmul_into(self._dest._data, a._data, b._data, mode="sub")
        return self._dest

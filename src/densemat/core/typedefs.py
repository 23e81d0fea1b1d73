# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the densemat project.
# Licensed under the MIT License – see LICENSE in the repo root.
# src/densemat/core/typedefs.py
"""
Typed matrix classes.

``matrix_type(dtype, rows, cols, order)`` returns a ``Matrix`` subclass whose
scalar type, storage order and (optionally) fixed extents are class traits.
The usual aliases are predefined:

    Matrix{N}{t}     == matrix_type(t, N, N)          e.g. MatrixXi, Matrix4d
    Vector{N}{t}     == matrix_type(t, N, 1)          e.g. Vector2f, VectorXd
    RowVector{N}{t}  == matrix_type(t, 1, N)          e.g. RowVector3d

where N is 2, 3, 4 or X (dynamic) and t is i (int32), f (float32),
d (float64), cf (complex64) or cd (complex128).
"""
from __future__ import annotations

import numpy as np

from densemat.core.errors import InvalidDimension
from densemat.core.matrix import DYNAMIC, Matrix, StorageOrder

_cache: dict[tuple, type[Matrix]] = {}

SCALAR_SUFFIXES = {
    "i": np.dtype(np.int32),
    "f": np.dtype(np.float32),
    "d": np.dtype(np.float64),
    "cf": np.dtype(np.complex64),
    "cd": np.dtype(np.complex128),
}
SIZE_LABELS = {"2": 2, "3": 3, "4": 4, "X": DYNAMIC}


def _label(n: int) -> str:
    return "Dynamic" if n == DYNAMIC else str(n)


def matrix_type(
    dtype,
    rows: int = DYNAMIC,
    cols: int = DYNAMIC,
    order: StorageOrder | str = StorageOrder.ColMajor,
    name: str | None = None,
) -> type[Matrix]:
    """Return the (cached) Matrix subclass for the given traits."""
    dtype = np.dtype(dtype)
    order = StorageOrder(order)
    for extent in (rows, cols):
        if extent != DYNAMIC and extent < 0:
            raise InvalidDimension(f"fixed extent must be non-negative or DYNAMIC, got {extent}")

    key = (dtype, rows, cols, order)
    if key not in _cache:
        if name is None:
            name = f"Matrix[{dtype.name}, {_label(rows)}, {_label(cols)}, {order.name}]"
        _cache[key] = type(
            name,
            (Matrix,),
            {
                "_dtype": dtype,
                "_fixed_rows": rows,
                "_fixed_cols": cols,
                "_default_order": order,
                "_typed": True,
                "__module__": __name__,
            },
        )
    return _cache[key]


__all__ = ["matrix_type", "SCALAR_SUFFIXES", "SIZE_LABELS"]

for _suffix, _dtype in SCALAR_SUFFIXES.items():
    for _size, _n in SIZE_LABELS.items():
        for _kind, _rows, _cols in (
            ("Matrix", _n, _n),
            ("Vector", _n, 1),
            ("RowVector", 1, _n),
        ):
            _name = f"{_kind}{_size}{_suffix}"
            globals()[_name] = matrix_type(_dtype, _rows, _cols, name=_name)
            __all__.append(_name)

del _suffix, _dtype, _size, _n, _kind, _rows, _cols, _name

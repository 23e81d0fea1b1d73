# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the densemat project.
# Licensed under the MIT License – see LICENSE in the repo root.
# src/densemat/core/dense.py
from __future__ import annotations

# Re-export the public value types and errors (no I/O here)
from .errors import (
    DimensionMismatch,
    EmptyMatrix,
    InvalidDimension,
    MatrixError,
    OutOfBounds,
    SizeMismatch,
)
from .matrix import DYNAMIC, Matrix, NoAlias, StorageOrder
from .typedefs import matrix_type
from . import typedefs as _typedefs

__all__ = [
    "DYNAMIC",
    "Matrix",
    "NoAlias",
    "StorageOrder",
    "matrix_type",
    "MatrixError",
    "InvalidDimension",
    "OutOfBounds",
    "SizeMismatch",
    "DimensionMismatch",
    "EmptyMatrix",
]

for _name in _typedefs.__all__:
    if _name not in __all__:
        globals()[_name] = getattr(_typedefs, _name)
        __all__.append(_name)
del _name

# Optional: dev-only smoke test
if __name__ == "__main__":
    m = Matrix(2, 2)
    m << [1, 2, 3, 4]
    print("dense dev smoke OK; trace:", m.trace())

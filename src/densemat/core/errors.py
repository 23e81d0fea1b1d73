# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the densemat project.
# Licensed under the MIT License – see LICENSE in the repo root.
# src/densemat/core/errors.py
from __future__ import annotations

__all__ = [
    "MatrixError",
    "InvalidDimension",
    "OutOfBounds",
    "SizeMismatch",
    "DimensionMismatch",
    "EmptyMatrix",
]


class MatrixError(Exception):
    """Base class for every error raised by densemat."""


class InvalidDimension(MatrixError, ValueError):
    """Negative or structurally wrong size (non-square trace, non-3 cross, fixed extent)."""


class OutOfBounds(MatrixError, IndexError):
    """Element access beyond the matrix extent."""


class SizeMismatch(MatrixError, ValueError):
    """Literal list length or dot-product length does not match."""


class DimensionMismatch(MatrixError, ValueError):
    """Incompatible shapes for an element-wise operation or matrix product."""


class EmptyMatrix(MatrixError, ValueError):
    """Reduction that needs at least one element was applied to an empty matrix."""

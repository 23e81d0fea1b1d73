# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the densemat project.
# Licensed under the MIT License – see LICENSE in the repo root.
# src/densemat/methods/products.py
from __future__ import annotations

import logging

import numpy as np

from densemat.core.errors import DimensionMismatch, InvalidDimension, SizeMismatch
from densemat.methods.arithmetic import check_storable

__all__ = ["is_vector", "matmul", "matmul_into", "dot", "cross"]

logger = logging.getLogger(__name__)


def is_vector(a: np.ndarray) -> bool:
    return a.shape[0] == 1 or a.shape[1] == 1


def _check_product_shapes(a: np.ndarray, b: np.ndarray) -> None:
    if a.shape[1] != b.shape[0]:
        raise DimensionMismatch(
            f"cannot multiply {a.shape[0]}x{a.shape[1]} by {b.shape[0]}x{b.shape[1]}: "
            f"inner dimensions {a.shape[1]} and {b.shape[0]} differ"
        )


def matmul(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Standard matrix product; result is ``a.rows x b.cols``."""
    _check_product_shapes(a, b)
    return np.matmul(a, b)


def matmul_into(out: np.ndarray, a: np.ndarray, b: np.ndarray, mode: str = "assign") -> np.ndarray:
    """
    Write ``a @ b`` into ``out`` without checking ``out`` against the operands.

    ``mode`` is one of ``"assign"`` (out = a b), ``"add"`` (out += a b) or
    ``"sub"`` (out -= a b). The caller guarantees that ``out`` shares no
    storage with ``a`` or ``b``.
    """
    _check_product_shapes(a, b)
    expected = (a.shape[0], b.shape[1])
    if out.shape != expected:
        raise DimensionMismatch(
            f"product is {expected[0]}x{expected[1]} but destination is "
            f"{out.shape[0]}x{out.shape[1]}"
        )
    check_storable(out, np.result_type(a, b), f"noalias {mode}")
    logger.debug("noalias %s of %dx%d product", mode, *expected)
    if mode == "assign":
        np.matmul(a, b, out=out)
    elif mode == "add":
        np.add(out, np.matmul(a, b), out=out)
    elif mode == "sub":
        np.subtract(out, np.matmul(a, b), out=out)
    else:
        raise ValueError(f"Unknown mode: {mode!r}")
    return out


def dot(a: np.ndarray, b: np.ndarray):
    """
    Inner product of two vectors of equal length, in any orientation.

    Conjugate-linear in the first argument, i.e. equal to adjoint(a) * b
    collapsed to a scalar.
    """
    if not (is_vector(a) and is_vector(b)):
        raise InvalidDimension(
            f"dot requires two vectors, got {a.shape[0]}x{a.shape[1]} and {b.shape[0]}x{b.shape[1]}"
        )
    if a.size != b.size:
        raise SizeMismatch(f"dot of vectors with {a.size} and {b.size} elements")
    return np.vdot(a, b).item()


def cross(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """3-D cross product; the result keeps the orientation of ``a``."""
    for v in (a, b):
        if not is_vector(v) or v.size != 3:
            raise InvalidDimension(
                f"cross product requires two 3-vectors, got {a.shape[0]}x{a.shape[1]} "
                f"and {b.shape[0]}x{b.shape[1]}"
            )
    return np.cross(a.ravel(), b.ravel()).reshape(a.shape)

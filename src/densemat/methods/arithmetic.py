# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the densemat project.
# Licensed under the MIT License – see LICENSE in the repo root.
# src/densemat/methods/arithmetic.py
"""
Element-wise arithmetic on dense 2-D buffers.

Every function takes and returns plain ``numpy.ndarray`` objects; the
``Matrix`` value type wraps the results. Shape checks raise the densemat
error taxonomy instead of relying on numpy broadcasting, which would
silently accept a 1×n + n×1 sum.
"""
from __future__ import annotations

import logging
from numbers import Integral, Number

import numpy as np

from densemat.core.errors import DimensionMismatch

__all__ = [
    "is_scalar",
    "check_same_shape",
    "add",
    "subtract",
    "negate",
    "scale",
    "divide",
    "read_operand",
    "check_storable",
]

logger = logging.getLogger(__name__)


def is_scalar(value) -> bool:
    return isinstance(value, (Number, np.number))


def check_same_shape(a: np.ndarray, b: np.ndarray, op: str) -> None:
    if a.shape != b.shape:
        raise DimensionMismatch(
            f"{op}: shapes {a.shape[0]}x{a.shape[1]} and {b.shape[0]}x{b.shape[1]} differ"
        )


def read_operand(dest: np.ndarray, src: np.ndarray) -> np.ndarray:
    """
    Return ``src`` ready to be read while ``dest`` is written.

    If both share storage the source is copied into a temporary first, so an
    in-place update never reads a coefficient it has already overwritten.
    """
    if np.shares_memory(dest, src):
        logger.debug("aliased operand (%dx%d): evaluating through a temporary", *src.shape)
        return src.copy()
    return src


def add(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    check_same_shape(a, b, "add")
    return a + b


def subtract(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    check_same_shape(a, b, "subtract")
    return a - b


def negate(a: np.ndarray) -> np.ndarray:
    return np.negative(a)


def scale(a: np.ndarray, k) -> np.ndarray:
    with np.errstate(over="ignore", invalid="ignore"):
        return a * k


def divide(a: np.ndarray, k) -> np.ndarray:
    """
    Divide every coefficient by the scalar ``k``.

    Integer buffers divided by an integer scalar truncate toward zero (the C
    convention), and dividing them by integer zero raises ZeroDivisionError.
    Floating point and complex buffers follow IEEE semantics: x/0 gives
    ±inf and 0/0 gives nan, with no warning.
    """
    if np.issubdtype(a.dtype, np.integer) and isinstance(k, Integral):
        k = int(k)
        if k == 0:
            raise ZeroDivisionError("integer matrix divided by zero")
        info = np.iinfo(a.dtype)
        if k == info.min:
            return (a == info.min).astype(a.dtype)
        if abs(k) > info.max:
            # every |coefficient| is smaller than |k|
            return np.zeros_like(a)
        with np.errstate(over="ignore"):
            quotient = np.floor_divide(a, k)
            # floor rounds down; step back toward zero when signs differ
            inexact = (quotient * k != a) & ((a < 0) != (k < 0))
            quotient = quotient + inexact
        return quotient.astype(a.dtype, copy=False)
    with np.errstate(divide="ignore", invalid="ignore"):
        return a / k


def check_storable(dest: np.ndarray, result_dtype, op: str) -> None:
    """
    In-place updates keep the destination's scalar type.

    A result that only fits by an unsafe cast (float into int, complex into
    float) raises TypeError instead of being truncated.
    """
    result_dtype = np.dtype(result_dtype)
    if not np.can_cast(result_dtype, dest.dtype, casting="same_kind"):
        raise TypeError(
            f"{op}: cannot store {result_dtype} results in a {dest.dtype} matrix in place"
        )

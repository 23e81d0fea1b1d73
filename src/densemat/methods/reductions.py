# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the densemat project.
# Licensed under the MIT License – see LICENSE in the repo root.
# src/densemat/methods/reductions.py
from __future__ import annotations

import numpy as np

from densemat.core.errors import EmptyMatrix, InvalidDimension

__all__ = ["coeff_sum", "coeff_prod", "coeff_mean", "min_coeff", "max_coeff", "trace"]


def coeff_sum(a: np.ndarray):
    return a.sum().item()


def coeff_prod(a: np.ndarray):
    return a.prod().item()


def coeff_mean(a: np.ndarray):
    if a.size == 0:
        raise EmptyMatrix("mean of an empty matrix")
    return (a.sum() / a.size).item()


def _extremum(a: np.ndarray, order: str, pick, name: str):
    """
    Locate the extremal coefficient scanning in storage order.

    ``pick`` is np.argmin or np.argmax; both return the first hit, so ties
    resolve to the coefficient met first in the buffer.
    Returns (value, (row, col)).
    """
    if a.size == 0:
        raise EmptyMatrix(f"{name} of an empty matrix")
    if np.iscomplexobj(a):
        raise TypeError(f"{name} is undefined for complex coefficients")
    flat = a.ravel(order=order)
    i = int(pick(flat))
    r, c = np.unravel_index(i, a.shape, order=order)
    return flat[i].item(), (int(r), int(c))


def min_coeff(a: np.ndarray, order: str = "F"):
    return _extremum(a, order, np.argmin, "min_coeff")


def max_coeff(a: np.ndarray, order: str = "F"):
    return _extremum(a, order, np.argmax, "max_coeff")


def trace(a: np.ndarray):
    rows, cols = a.shape
    if rows != cols:
        raise InvalidDimension(f"trace requires a square matrix, got {rows}x{cols}")
    return np.trace(a).item()
